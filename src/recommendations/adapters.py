"""Convert stored rows into the typed structures the engine scores.

Database fields are loose free text (comma-joined skills, "5-7 years").
They are parsed once here so the scoring core only sees clean values.
"""
import re
from decimal import Decimal
from typing import Optional, Union

from src.matching.profile import (
    ExperienceLevel,
    JobListing,
    SeekerProfile,
    parse_skills,
    split_skills_text,
)
from src.persistence import models

_URL_PATTERN = re.compile(r"https?://[^\s]+")

Amount = Union[int, float, Decimal]


def _format_amount(amount: Amount) -> str:
    value = Decimal(str(amount))
    if value == value.to_integral_value():
        return f"{int(value):,}"
    return f"{value:,.2f}"


def format_salary(
    salary_min: Optional[Amount],
    salary_max: Optional[Amount],
    currency: Optional[str],
    period: Optional[str],
    default_currency: str = "INR",
) -> Optional[str]:
    """Render a salary range like "INR 5,000 - 9,000 per monthly".

    Returns None when neither bound is set.
    """
    if salary_min is None and salary_max is None:
        return None
    currency = currency or default_currency
    suffix = f" per {period}" if period else ""

    if salary_min is not None and salary_max is not None:
        if Decimal(str(salary_min)) == Decimal(str(salary_max)):
            return f"{currency} {_format_amount(salary_min)}{suffix}"
        return f"{currency} {_format_amount(salary_min)} - {_format_amount(salary_max)}{suffix}"
    amount = salary_min if salary_min is not None else salary_max
    return f"{currency} {_format_amount(amount)}{suffix}"


def extract_apply_url(how_to_apply: Optional[str]) -> Optional[str]:
    """Return the first http(s) URL in the apply instructions, if any."""
    if not how_to_apply:
        return None
    match = _URL_PATTERN.search(how_to_apply)
    return match.group(0) if match else None


def short_description(description: Optional[str], length: int = 150) -> str:
    """Truncate a description for list views."""
    if not description:
        return ""
    if len(description) > length:
        return description[:length] + "..."
    return description


def seeker_profile_from_row(row: models.JobSeekerProfile) -> SeekerProfile:
    """Parse a stored seeker profile; missing fields become empty/zero."""
    return SeekerProfile.from_text(
        skills=row.skills,
        years_of_experience=row.years_of_experience,
    )


def job_listing_from_row(
    row: models.JobListing,
    provider_profile: Optional[models.JobProviderProfile] = None,
    default_currency: str = "INR",
) -> JobListing:
    """Parse a stored listing, resolving company details from the provider."""
    provider_company = provider_profile.company_name if provider_profile else None
    company = row.company_name_override or provider_company or "N/A"
    logo_url = provider_profile.company_logo_url if provider_profile else None

    return JobListing(
        id=str(row.id),
        required_skills=parse_skills(row.required_skills),
        experience_level=ExperienceLevel.from_label(row.experience_level),
        is_active=bool(row.is_active),
        title=row.title or "",
        company=company,
        location=row.location,
        description=row.description,
        job_type=row.job_type,
        salary=format_salary(
            row.salary_min,
            row.salary_max,
            row.salary_currency,
            row.salary_period,
            default_currency=default_currency,
        ),
        posted_date=row.posted_at,
        skills=tuple(split_skills_text(row.required_skills)),
        apply_url=extract_apply_url(row.how_to_apply) or row.how_to_apply,
        company_logo_url=logo_url or None,
    )
