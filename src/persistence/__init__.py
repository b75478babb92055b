"""Database persistence layer."""
from .database import get_session, init_db
from .models import Base, JobListing, JobProviderProfile, JobSeekerProfile, User

__all__ = [
    "Base",
    "User",
    "JobSeekerProfile",
    "JobProviderProfile",
    "JobListing",
    "init_db",
    "get_session",
]
