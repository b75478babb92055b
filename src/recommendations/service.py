"""Recommendation service: fetch inputs, score, and shape the API response."""
import logging
from datetime import datetime, timezone
from typing import Any, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from src.matching.profile import JobListing, SeekerProfile
from src.matching.scorer import RecommendationEngine, RecommendationWeights, ScoredJob
from src.persistence.models import JobListing as JobListingRow
from src.persistence.models import JobProviderProfile, JobSeekerProfile, User
from src.recommendations.adapters import (
    job_listing_from_row,
    seeker_profile_from_row,
    short_description,
)
from src.recommendations.exceptions import MissingUserIdError, UserNotFoundError

logger = logging.getLogger(__name__)


def to_utc_iso(value: Optional[datetime]) -> Optional[str]:
    """ISO-8601 timestamp in UTC. Naive values are stored UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat()


class RecommendationService:
    """Serve job recommendations for a user identified by Firebase UID."""

    def __init__(self, session: Session, settings):
        """
        Initialize recommendation service.

        Args:
            session: Database session
            settings: Application settings (weights, cutoff, API shaping)
        """
        self.session = session
        self.settings = settings
        self.engine = RecommendationEngine(RecommendationWeights.from_settings(settings))

    def get_recommendations(self, firebase_uid: Optional[str]) -> list[dict[str, Any]]:
        """
        Recommend active listings for a user.

        Seeded users and users without a seeker profile get an empty list.

        Args:
            firebase_uid: Identity provider UID of the requesting user

        Returns:
            Serialized jobs, best match first

        Raises:
            MissingUserIdError: If no UID was given
            UserNotFoundError: If the UID has no user row
        """
        if not firebase_uid:
            raise MissingUserIdError()

        if firebase_uid.startswith(self.settings.synthetic_uid_prefix):
            logger.info(
                "Synthetic user detected (Firebase UID: %s). Returning empty recommendations.",
                firebase_uid,
            )
            return []

        seeker = self.fetch_seeker_profile(firebase_uid)
        if seeker is None:
            return []

        listings = self.fetch_active_listings()
        scored = self.engine.recommend(seeker, listings)

        logger.info(
            "Recommended %d of %d active listings for %s",
            len(scored), len(listings), firebase_uid,
        )
        return [self.serialize(job) for job in scored]

    def fetch_seeker_profile(self, firebase_uid: str) -> Optional[SeekerProfile]:
        """Resolve a UID to a parsed seeker profile (None if setup is incomplete)."""
        user = self.session.scalar(select(User).where(User.firebase_uid == firebase_uid))
        if user is None:
            raise UserNotFoundError(firebase_uid)

        row = self.session.scalar(
            select(JobSeekerProfile).where(JobSeekerProfile.user_id == user.id)
        )
        if row is None:
            logger.warning(
                "Job seeker profile not found for internal user ID: %s (Firebase UID: %s)",
                user.id, firebase_uid,
            )
            return None

        return seeker_profile_from_row(row)

    def fetch_active_listings(self) -> list[JobListing]:
        """Load active listings, newest first, with their provider details."""
        stmt = (
            select(JobListingRow, JobProviderProfile)
            .outerjoin(
                JobProviderProfile,
                JobProviderProfile.user_id == JobListingRow.provider_user_id,
            )
            .where(JobListingRow.is_active.is_(True))
            .order_by(JobListingRow.posted_at.desc(), JobListingRow.id.asc())
        )
        return [
            job_listing_from_row(
                row,
                provider,
                default_currency=self.settings.default_salary_currency,
            )
            for row, provider in self.session.execute(stmt).all()
        ]

    def serialize(self, scored: ScoredJob) -> dict[str, Any]:
        """Shape a scored listing like the jobs API response."""
        listing = scored.listing
        return {
            "id": listing.id,
            "title": listing.title,
            "company": listing.company,
            "location": listing.location,
            "shortDescription": short_description(
                listing.description, self.settings.short_description_length
            ),
            "description": listing.description,
            "jobType": listing.job_type,
            "experienceLevel": listing.experience_level.label if listing.experience_level else None,
            "postedDate": to_utc_iso(listing.posted_date),
            "salary": listing.salary,
            "skills": list(listing.skills),
            "companyLogoUrl": listing.company_logo_url,
            "applyUrl": listing.apply_url,
            "score": scored.score,
        }
