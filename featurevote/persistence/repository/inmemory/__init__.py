"""In-memory repository implementations."""

from .feature import InMemoryFeatureRepository

__all__ = [
    "InMemoryFeatureRepository",
]
