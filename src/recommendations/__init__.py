"""Recommendation serving: storage adapters and the request-level service."""
from .exceptions import MissingUserIdError, RecommendationError, UserNotFoundError
from .service import RecommendationService

__all__ = [
    "RecommendationService",
    "RecommendationError",
    "MissingUserIdError",
    "UserNotFoundError",
]
