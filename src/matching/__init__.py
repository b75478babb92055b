"""Job recommendation scoring."""
from .profile import ExperienceLevel, JobListing, SeekerProfile
from .scorer import RecommendationEngine, RecommendationWeights, ScoredJob, recommend

__all__ = [
    "ExperienceLevel",
    "JobListing",
    "SeekerProfile",
    "RecommendationEngine",
    "RecommendationWeights",
    "ScoredJob",
    "recommend",
]
