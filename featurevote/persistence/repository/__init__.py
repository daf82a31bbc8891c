"""SQL repository implementations."""

from featurevote.persistence.repository.feature import SqlFeatureRepository

__all__ = [
    "SqlFeatureRepository",
]
