"""Job recommendation scoring and ranking."""
import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from src.matching.profile import JobListing, SeekerProfile
from src.matching.scorer_protocol import (
    ExperienceAlignmentTerm,
    ScoringTerm,
    SkillOverlapTerm,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScoredJob:
    """A listing with its relevance score for one seeker."""

    listing: JobListing
    score: int


@dataclass(frozen=True)
class RecommendationWeights:
    """Tunable constants of the built-in scoring terms."""

    skill_match_points: int = 10
    experience_met_points: int = 5
    experience_near_points: int = 2
    max_results: int = 10

    @classmethod
    def from_settings(cls, settings) -> "RecommendationWeights":
        """Read weights from the application ``Settings``."""
        return cls(
            skill_match_points=settings.skill_match_points,
            experience_met_points=settings.experience_met_points,
            experience_near_points=settings.experience_near_points,
            max_results=settings.max_recommendations,
        )

    def terms(self) -> list[ScoringTerm]:
        return [
            SkillOverlapTerm(points_per_skill=self.skill_match_points),
            ExperienceAlignmentTerm(
                met_points=self.experience_met_points,
                near_points=self.experience_near_points,
            ),
        ]


class RecommendationEngine:
    """Rank job listings for a seeker.

    Stateless: every call scores the full candidate set from scratch and
    never mutates its inputs, so one engine can serve concurrent callers.
    """

    def __init__(
        self,
        weights: Optional[RecommendationWeights] = None,
        extra_terms: Iterable[ScoringTerm] = (),
    ):
        """
        Initialize the engine.

        Args:
            weights: Scoring constants and result cutoff
            extra_terms: Additional scoring terms summed with the built-in ones
        """
        self.weights = weights or RecommendationWeights()
        self.terms: tuple[ScoringTerm, ...] = tuple(self.weights.terms()) + tuple(extra_terms)

    def score(self, seeker: SeekerProfile, listing: JobListing) -> int:
        """Total score of one listing for the seeker."""
        return sum(term.score(seeker, listing) for term in self.terms)

    def recommend(
        self,
        seeker: SeekerProfile,
        listings: Sequence[JobListing],
    ) -> list[ScoredJob]:
        """
        Score, filter and rank listings.

        Listings scoring zero or less are dropped. Ties keep the order in
        which the listings were given.

        Args:
            seeker: Seeker profile
            listings: Candidate listings, normally only active ones

        Returns:
            Up to ``max_results`` ScoredJob objects, sorted by score descending
        """
        scored = [
            ScoredJob(listing=listing, score=self.score(seeker, listing))
            for listing in listings
        ]
        positive = [s for s in scored if s.score > 0]

        # sorted() is stable, so equal scores keep input order
        ranked = sorted(positive, key=lambda s: s.score, reverse=True)
        top = ranked[: self.weights.max_results]

        logger.debug(
            "Scored %d listings: %d positive, returning %d",
            len(scored), len(positive), len(top),
        )
        return top


def recommend(
    seeker: SeekerProfile,
    listings: Sequence[JobListing],
    weights: Optional[RecommendationWeights] = None,
) -> list[ScoredJob]:
    """Rank listings for a seeker with the default (or given) weights."""
    return RecommendationEngine(weights).recommend(seeker, listings)
