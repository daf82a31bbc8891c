"""Domain model entities for Feature Vote."""

from featurevote.domain.model.feature import FeatureRequest

__all__ = [
    "FeatureRequest",
]
