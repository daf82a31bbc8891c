"""Repository interfaces for Feature Vote domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from featurevote.domain.repository.feature import FeatureRepository

__all__ = [
    "FeatureRepository",
]
