#!/usr/bin/env python3
"""Seed the database with synthetic users, profiles and job listings.

Synthetic users get Firebase UIDs starting with ``fake_firebase_uid_`` so
the recommendation service can recognise and skip them.

Usage:
    python scripts/seed_synthetic_data.py --providers 5 --seekers 10 --jobs 50
"""
import argparse
import logging
import random
import sys
import time
from datetime import datetime, timedelta, timezone
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from scripts.bootstrap import get_session, init_db, settings
from src.logging_config import setup_logging
from src.matching.profile import ExperienceLevel
from src.persistence.models import JobListing, JobProviderProfile, JobSeekerProfile, User

logger = logging.getLogger(__name__)

SKILLS = [
    "React", "Angular", "Vue", "Node.js", "Express.js", "Django", "Flask",
    "Python", "Java", "C++", "JavaScript", "TypeScript", "SQL", "NoSQL",
    "AWS", "Azure", "GCP", "Docker", "Kubernetes", "Agile", "Scrum",
    "Project Management", "UI/UX Design", "Graphic Design", "Content Writing",
    "Data Analysis", "Machine Learning", "AI", "Blockchain", "Cybersecurity",
]
LOCATIONS = [
    "Delhi", "Mumbai", "Bangalore", "Hyderabad", "Chennai", "Pune",
    "Kolkata", "Ahmedabad", "Jaipur", "Remote",
]
JOB_TITLES = [
    "Software Engineer", "Frontend Developer", "Backend Developer",
    "Fullstack Developer", "Data Scientist", "Marketing Manager",
    "Sales Executive", "HR Manager", "DevOps Engineer", "Cloud Architect",
    "Product Manager", "Business Analyst", "UX Designer", "Content Strategist",
]
COMPANIES = [
    "TCS", "Infosys", "Wipro", "HCLTech", "Tech Mahindra", "Cognizant",
    "Capgemini", "Accenture", "IBM", "Google", "Microsoft", "Apple",
    "Amazon", "Flipkart", "Swiggy", "Zomato", "Paytm", "Ola",
]
JOB_TYPES = ["Full-time", "Part-time", "Contract", "Internship", "Temporary", "Freelance"]
SALARY_PERIODS = ["hourly", "daily", "weekly", "monthly", "annually"]


def _slug(text: str) -> str:
    return "".join(text.lower().split())


def generate_user(role: str, index: int) -> User:
    suffix = f"{int(time.time() * 1000)}_{index}"
    return User(
        firebase_uid=f"{settings.synthetic_uid_prefix}{role}_{suffix}",
        email=f"fake_{role}_{suffix}@example.com",
        role=role,
    )


def generate_seeker_profile(rng: random.Random) -> JobSeekerProfile:
    skills = rng.sample(SKILLS, rng.randint(2, 6))
    years = rng.randint(0, 12)
    return JobSeekerProfile(
        full_name=f"Seeker {rng.randint(1000, 9999)}",
        headline=rng.choice(JOB_TITLES),
        skills=", ".join(skills),
        years_of_experience=f"{years} years",
    )


def generate_job_listing(rng: random.Random, provider_user_id: int) -> JobListing:
    """Build one active listing with 2-4 required skills."""
    title = rng.choice(JOB_TITLES)
    company = rng.choice(COMPANIES)
    location = rng.choice(LOCATIONS)
    required_skills = ", ".join(rng.sample(SKILLS, rng.randint(2, 4)))

    salary_min = rng.randrange(300000, 1300000) / 100
    salary_max = salary_min + rng.randrange(200000, 700000) / 100

    posted_at = datetime.now(timezone.utc)
    days_until_expiry = rng.randint(30, 59)
    expires_at = posted_at + timedelta(days=days_until_expiry)
    application_deadline = expires_at - timedelta(days=rng.randint(1, 7))

    company_slug = _slug(company)
    title_slug = "-".join(title.lower().split())
    return JobListing(
        provider_user_id=provider_user_id,
        title=title,
        description=(
            f"We are seeking a talented {title} to join our dynamic team at "
            f"{company} in {location}. The ideal candidate will be proficient "
            f"in {required_skills}."
        ),
        company_name_override=company,
        location=location,
        salary_min=round(salary_min, 2),
        salary_max=round(salary_max, 2),
        salary_currency=settings.default_salary_currency,
        salary_period=rng.choice(SALARY_PERIODS),
        job_type=rng.choice(JOB_TYPES),
        experience_level=rng.choice(list(ExperienceLevel)).label,
        required_skills=required_skills,
        posted_at=posted_at,
        expires_at=expires_at,
        application_deadline=application_deadline,
        is_active=True,
        how_to_apply=(
            f"Please apply through our company portal at "
            f"https://careers.{company_slug}.com/apply/{title_slug} "
            f"or email your resume to careers@{company_slug}.com."
        ),
    )


def seed(providers: int, seekers: int, jobs: int, seed_value=None) -> dict:
    """Insert synthetic data and return the number of rows created per kind."""
    rng = random.Random(seed_value)

    with get_session() as session:
        provider_users = []
        for i in range(providers):
            user = generate_user("job_provider", i)
            user.provider_profile = JobProviderProfile(company_name=rng.choice(COMPANIES))
            provider_users.append(user)
        session.add_all(provider_users)

        for i in range(seekers):
            user = generate_user("job_seeker", i)
            user.seeker_profile = generate_seeker_profile(rng)
            session.add(user)

        session.flush()

        if jobs and not provider_users:
            logger.error("No provider users available. Cannot generate jobs.")
            jobs = 0
        for _ in range(jobs):
            provider = rng.choice(provider_users)
            session.add(generate_job_listing(rng, provider.id))

    counts = {"providers": providers, "seekers": seekers, "jobs": jobs}
    logger.info("Seeded %s", counts)
    return counts


def main():
    parser = argparse.ArgumentParser(description="Seed synthetic job board data")
    parser.add_argument("--providers", type=int, default=5, help="Provider users to create")
    parser.add_argument("--seekers", type=int, default=10, help="Seeker users to create")
    parser.add_argument("--jobs", type=int, default=50, help="Job listings to create")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    args = parser.parse_args()

    setup_logging(
        settings.log_level,
        settings.log_file,
        logger_levels={"src.matching": settings.matching_log_level},
    )
    init_db()
    seed(args.providers, args.seekers, args.jobs, seed_value=args.seed)
    return 0


if __name__ == "__main__":
    sys.exit(main())
