"""Shared response items for feature use cases."""

from datetime import datetime

from pydantic import BaseModel

from featurevote.domain.model import FeatureRequest


class FeatureItem(BaseModel):
    """Feature request as returned to clients."""

    id: int
    title: str
    description: str | None
    votes: int
    created_at: datetime

    @classmethod
    def from_feature(cls, feature: FeatureRequest) -> "FeatureItem":
        return cls(
            id=feature.id,
            title=feature.title,
            description=feature.description,
            votes=feature.votes,
            created_at=feature.created_at,
        )
