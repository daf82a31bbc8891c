"""Domain value objects for Feature Vote."""

from featurevote.domain.value.identifiers import FeatureRequestId
from featurevote.domain.value.types import (
    DESCRIPTION_MAX_LENGTH,
    TITLE_MAX_LENGTH,
    FeatureDraft,
)

__all__ = [
    # Identifiers
    "FeatureRequestId",
    # Types
    "FeatureDraft",
    "TITLE_MAX_LENGTH",
    "DESCRIPTION_MAX_LENGTH",
]
