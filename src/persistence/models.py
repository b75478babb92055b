"""SQLAlchemy models for the job board."""
from datetime import datetime, timezone

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    Numeric,
    String,
    Text,
)
from sqlalchemy.orm import DeclarativeBase, relationship


def utcnow() -> datetime:
    """Return current UTC time as timezone-aware datetime."""
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    """Base class for all models."""

    pass


class User(Base):
    """Account keyed by the identity provider's UID."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    firebase_uid = Column(String, unique=True, nullable=False, index=True)
    email = Column(String, unique=True, nullable=False)
    role = Column(String, nullable=False)  # job_seeker, job_provider

    created_at = Column(DateTime, default=utcnow)

    # Relationships
    seeker_profile = relationship(
        "JobSeekerProfile",
        back_populates="user",
        uselist=False,
        cascade="all, delete-orphan",
    )
    provider_profile = relationship(
        "JobProviderProfile",
        back_populates="user",
        uselist=False,
        cascade="all, delete-orphan",
    )
    job_listings = relationship(
        "JobListing", back_populates="provider", cascade="all, delete-orphan"
    )

    def __repr__(self) -> str:
        return f"<User {self.email} ({self.role})>"


class JobSeekerProfile(Base):
    """Seeker profile as entered on the profile-setup form."""

    __tablename__ = "job_seeker_profiles"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), unique=True, nullable=False)

    full_name = Column(String)
    headline = Column(String)
    skills = Column(Text)  # Comma-separated
    experience = Column(Text)
    years_of_experience = Column(String)  # Free text, e.g. "5-7 years"
    resume_url = Column(String)

    created_at = Column(DateTime, default=utcnow)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)

    user = relationship("User", back_populates="seeker_profile")

    def __repr__(self) -> str:
        return f"<JobSeekerProfile user_id={self.user_id}>"


class JobProviderProfile(Base):
    """Employer profile; supplies company name and logo for listings."""

    __tablename__ = "job_provider_profiles"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), unique=True, nullable=False)

    company_name = Column(String)
    company_logo_url = Column(String)
    company_website = Column(String)

    created_at = Column(DateTime, default=utcnow)

    user = relationship("User", back_populates="provider_profile")

    def __repr__(self) -> str:
        return f"<JobProviderProfile {self.company_name}>"


class JobListing(Base):
    """Job posting created by a provider."""

    __tablename__ = "job_listings"

    id = Column(Integer, primary_key=True, autoincrement=True)
    provider_user_id = Column(Integer, ForeignKey("users.id"), nullable=True)

    title = Column(String, nullable=False)
    description = Column(Text)
    company_name_override = Column(String)
    location = Column(String)

    salary_min = Column(Numeric(12, 2))
    salary_max = Column(Numeric(12, 2))
    salary_currency = Column(String)
    salary_period = Column(String)  # hourly, daily, weekly, monthly, annually

    job_type = Column(String)  # Full-time, Part-time, Contract, ...
    experience_level = Column(String)  # Entry-level ... Executive
    required_skills = Column(Text)  # Comma-separated

    posted_at = Column(DateTime, default=utcnow, nullable=False)
    expires_at = Column(DateTime)
    application_deadline = Column(DateTime)
    is_active = Column(Boolean, default=True)
    how_to_apply = Column(Text)

    provider = relationship("User", back_populates="job_listings")

    def __repr__(self) -> str:
        return f"<JobListing {self.id} - {self.title}>"
