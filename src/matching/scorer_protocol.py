"""Scoring term protocol for the recommendation engine.

A listing's score is the sum of independent terms. Skill overlap and
experience alignment are the built-in terms; new signals (location
proximity, title keywords) are added by implementing the same protocol
and passing the term to ``RecommendationEngine``.
"""
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from src.matching.profile import JobListing, SeekerProfile


@runtime_checkable
class ScoringTerm(Protocol):
    """Protocol for one additive contribution to a listing's score."""

    def score(self, seeker: SeekerProfile, listing: JobListing) -> int:
        """Return this term's points for the (seeker, listing) pair."""
        ...


@dataclass(frozen=True)
class SkillOverlapTerm:
    """Points per skill shared by the seeker and the listing."""

    points_per_skill: int = 10

    def score(self, seeker: SeekerProfile, listing: JobListing) -> int:
        matched = seeker.skills & listing.required_skills
        return len(matched) * self.points_per_skill


@dataclass(frozen=True)
class ExperienceAlignmentTerm:
    """Coarse seniority alignment between seeker years and the listing tier.

    Skipped when the listing is unranked or the seeker reports no experience.
    """

    met_points: int = 5
    near_points: int = 2

    def score(self, seeker: SeekerProfile, listing: JobListing) -> int:
        job_level = listing.level_rank
        years = seeker.years_of_experience
        if job_level <= 0 or years <= 0:
            return 0
        if years >= job_level:
            return self.met_points
        if years == job_level - 1:
            return self.near_points
        return 0
