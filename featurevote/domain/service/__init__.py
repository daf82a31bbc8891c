"""Domain services."""

from .base import Service
from .feature_service import FeatureService
from .ranking_service import RankingService

__all__ = [
    "FeatureService",
    "RankingService",
    "Service",
]
