"""Pytest fixtures for job board recommendation tests."""
import sys
from datetime import datetime, timedelta
from pathlib import Path

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from config.settings import Settings
from src.matching.profile import ExperienceLevel, JobListing, SeekerProfile
from src.persistence.models import (
    Base,
    JobListing as JobListingRow,
    JobProviderProfile,
    JobSeekerProfile,
    User,
)


# =============================================================================
# DATABASE FIXTURES
# =============================================================================


@pytest.fixture(scope="function")
def test_db():
    """Create a fresh in-memory database for each test."""
    engine = create_engine("sqlite:///:memory:")
    Base.metadata.create_all(bind=engine)
    Session = sessionmaker(bind=engine)
    session = Session()
    yield session
    session.close()


@pytest.fixture
def test_settings():
    """Settings with the default weights, isolated from any local .env file."""
    return Settings(_env_file=None, database_url="sqlite:///:memory:")


@pytest.fixture
def provider_user(test_db):
    """Employer account with a company profile."""
    user = User(firebase_uid="provider-uid-1", email="hr@acme.test", role="job_provider")
    user.provider_profile = JobProviderProfile(
        company_name="Acme Corp",
        company_logo_url="https://cdn.acme.test/logo.png",
    )
    test_db.add(user)
    test_db.commit()
    return user


@pytest.fixture
def seeker_user(test_db):
    """Seeker with React/Node.js skills and 3 years of experience."""
    user = User(firebase_uid="seeker-uid-1", email="dev@example.com", role="job_seeker")
    user.seeker_profile = JobSeekerProfile(
        full_name="Test Seeker",
        skills=" React , node.js",
        years_of_experience="3 years",
    )
    test_db.add(user)
    test_db.commit()
    return user


@pytest.fixture
def listing_rows(test_db, provider_user):
    """Active and inactive listings covering the scoring bands."""
    now = datetime(2026, 3, 1, 12, 0, 0)
    rows = [
        JobListingRow(
            provider_user_id=provider_user.id,
            title="Frontend Developer",
            description="Build UIs with React.",
            required_skills="React, Python",
            experience_level="Mid-level",
            salary_min=5000,
            salary_max=9000,
            salary_currency="INR",
            salary_period="monthly",
            posted_at=now - timedelta(days=2),
            how_to_apply="Apply at https://careers.acme.test/apply/fe now",
        ),
        JobListingRow(
            provider_user_id=provider_user.id,
            title="Senior Fullstack Engineer",
            company_name_override="Globex",
            description="x" * 200,
            required_skills="react, node.js, sql",
            experience_level="Senior-level",
            posted_at=now - timedelta(days=1),
            how_to_apply="Email jobs@globex.test",
        ),
        JobListingRow(
            provider_user_id=provider_user.id,
            title="Java Intern",
            required_skills="java",
            experience_level="Entry-level",
            posted_at=now - timedelta(days=3),
        ),
        JobListingRow(
            provider_user_id=provider_user.id,
            title="Closed React Role",
            required_skills="react, node.js",
            experience_level="Mid-level",
            posted_at=now,
            is_active=False,
        ),
    ]
    test_db.add_all(rows)
    test_db.commit()
    return rows


# =============================================================================
# DOMAIN FIXTURES
# =============================================================================


@pytest.fixture
def seeker():
    """Typed seeker profile: react + node.js, 3 years."""
    return SeekerProfile(skills=frozenset({"react", "node.js"}), years_of_experience=3)


@pytest.fixture
def make_listing():
    """Factory for typed listings from comma-separated skill text."""
    from src.matching.profile import parse_skills

    def _make(listing_id, skills="", level=None, **kwargs):
        return JobListing(
            id=str(listing_id),
            required_skills=parse_skills(skills),
            experience_level=level,
            **kwargs,
        )

    return _make


@pytest.fixture
def scenario_listings(make_listing):
    """Listings A-D from the reference scoring scenarios."""
    return {
        "A": make_listing("A", "React, Python", ExperienceLevel.MID),
        "B": make_listing("B", "react, node.js, sql", ExperienceLevel.SENIOR),
        "C": make_listing("C", "java", ExperienceLevel.ENTRY),
        "D": make_listing("D", "", ExperienceLevel.EXECUTIVE),
    }
