"""Feature use cases."""

from .common import FeatureItem
from .create_feature import (
    CreateFeatureRequest,
    CreateFeatureResponse,
    CreateFeatureUseCase,
)
from .get_feature import GetFeatureRequest, GetFeatureResponse, GetFeatureUseCase
from .list_features import ListFeaturesResponse, ListFeaturesUseCase
from .vote_feature import VoteFeatureRequest, VoteFeatureResponse, VoteFeatureUseCase

__all__ = [
    "FeatureItem",
    "CreateFeatureRequest",
    "CreateFeatureResponse",
    "CreateFeatureUseCase",
    "GetFeatureRequest",
    "GetFeatureResponse",
    "GetFeatureUseCase",
    "ListFeaturesResponse",
    "ListFeaturesUseCase",
    "VoteFeatureRequest",
    "VoteFeatureResponse",
    "VoteFeatureUseCase",
]
