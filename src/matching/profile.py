"""Seeker and listing structures consumed by the recommendation engine."""
import re
from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum
from typing import Optional

_DIGITS = re.compile(r"\d+", re.ASCII)


class ExperienceLevel(IntEnum):
    """Listing experience tiers, ranked by seniority."""

    ENTRY = 1
    MID = 2
    SENIOR = 3
    LEAD = 4
    MANAGER = 5
    EXECUTIVE = 6

    @property
    def label(self) -> str:
        return _LEVEL_LABELS[self]

    @classmethod
    def from_label(cls, label: Optional[str]) -> Optional["ExperienceLevel"]:
        """Map a stored label like "Senior-level" to its tier, or None if unknown."""
        if not label:
            return None
        return _LEVELS_BY_LABEL.get(label.strip().lower())


_LEVEL_LABELS = {
    ExperienceLevel.ENTRY: "Entry-level",
    ExperienceLevel.MID: "Mid-level",
    ExperienceLevel.SENIOR: "Senior-level",
    ExperienceLevel.LEAD: "Lead",
    ExperienceLevel.MANAGER: "Manager",
    ExperienceLevel.EXECUTIVE: "Executive",
}
_LEVELS_BY_LABEL = {label.lower(): level for level, label in _LEVEL_LABELS.items()}


def normalize_skill(skill: str) -> str:
    """Lowercase and trim a single skill token."""
    return skill.strip().lower()


def parse_skills(text: Optional[str]) -> frozenset[str]:
    """Split comma-separated skill text into normalized tokens.

    Blank tokens ("a,,b", trailing commas) are dropped.
    """
    if not text:
        return frozenset()
    tokens = (normalize_skill(part) for part in text.split(","))
    return frozenset(token for token in tokens if token)


def split_skills_text(text: Optional[str]) -> list[str]:
    """Split skill text for display, keeping the original casing."""
    if not text:
        return []
    return [part.strip() for part in text.split(",") if part.strip()]


def parse_years_experience(text: Optional[str]) -> int:
    """Extract the first run of digits, e.g. "5-7 years" -> 5. Returns 0 if none."""
    if not text:
        return 0
    match = _DIGITS.search(str(text))
    return int(match.group(0)) if match else 0


@dataclass(frozen=True)
class SeekerProfile:
    """A job seeker's skills and experience."""

    skills: frozenset[str] = frozenset()
    years_of_experience: int = 0

    @classmethod
    def from_text(
        cls,
        skills: Optional[str] = None,
        years_of_experience: Optional[str] = None,
    ) -> "SeekerProfile":
        """Build a profile from the free-text fields stored on the seeker record."""
        return cls(
            skills=parse_skills(skills),
            years_of_experience=parse_years_experience(years_of_experience),
        )


@dataclass(frozen=True)
class JobListing:
    """A job posting scored by the engine.

    Only ``required_skills`` and ``experience_level`` feed the score; the
    remaining fields pass through to the response layer.
    """

    id: str
    required_skills: frozenset[str] = frozenset()
    experience_level: Optional[ExperienceLevel] = None
    is_active: bool = True
    title: str = ""
    company: str = "N/A"
    location: Optional[str] = None
    description: Optional[str] = None
    job_type: Optional[str] = None
    salary: Optional[str] = None
    posted_date: Optional[datetime] = None
    skills: tuple[str, ...] = field(default_factory=tuple)
    apply_url: Optional[str] = None
    company_logo_url: Optional[str] = None

    @property
    def level_rank(self) -> int:
        """Experience tier as an int, 0 when unranked."""
        return int(self.experience_level) if self.experience_level else 0
