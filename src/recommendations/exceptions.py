"""Recommendation service exceptions."""


class RecommendationError(Exception):
    """Base exception for recommendation lookups."""

    pass


class MissingUserIdError(RecommendationError):
    """Raised when no user ID is supplied."""

    def __init__(self):
        super().__init__("Firebase User ID (userId) is required")


class UserNotFoundError(RecommendationError):
    """Raised when a Firebase UID has no matching user row."""

    def __init__(self, firebase_uid: str):
        self.firebase_uid = firebase_uid
        super().__init__(f"User not found in database for Firebase UID: {firebase_uid}")
