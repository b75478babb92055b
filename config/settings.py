"""Application settings using Pydantic."""
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Database
    database_url: str = Field(
        default="sqlite:///job_board.db",
        description="SQLAlchemy database URL",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Root log level (DEBUG, INFO, WARNING, ERROR)",
    )
    log_file: Optional[str] = Field(
        default=None,
        description="Optional path for the rotating log file",
    )

    # Recommendation scoring
    skill_match_points: int = Field(
        default=10,
        ge=0,
        description="Points awarded per skill shared by seeker and listing",
    )
    experience_met_points: int = Field(
        default=5,
        ge=0,
        description="Points when seeker years meet the listing's level rank",
    )
    experience_near_points: int = Field(
        default=2,
        ge=0,
        description="Points when seeker years are one below the level rank",
    )
    max_recommendations: int = Field(
        default=10,
        ge=1,
        description="Maximum number of recommendations returned",
    )

    # Recommendation API shaping
    synthetic_uid_prefix: str = Field(
        default="fake_firebase_uid_",
        description="Firebase UIDs with this prefix belong to seeded users",
    )
    short_description_length: int = Field(
        default=150,
        ge=1,
        description="Characters kept in the listing short description",
    )
    default_salary_currency: str = Field(
        default="INR",
        description="Currency used when a listing does not name one",
    )

    # Per-package log levels
    matching_log_level: str = Field(
        default="INFO",
        description="Log level for src.matching (DEBUG shows per-call scoring counts)",
    )


# Global settings instance
settings = Settings()
