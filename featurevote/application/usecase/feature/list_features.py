"""List features use case."""

import logfire
from pydantic import BaseModel

from featurevote.domain.service import RankingService

from .common import FeatureItem


class ListFeaturesResponse(BaseModel):
    """List features response."""

    features: list[FeatureItem]
    count: int


class ListFeaturesUseCase:
    """Use case for listing feature requests ranked by votes."""

    def __init__(self, ranking_service: RankingService) -> None:
        """Initialize list features use case.

        Args:
            ranking_service: Ranking domain service
        """
        self.ranking_service = ranking_service

    async def execute(self) -> ListFeaturesResponse:
        """Execute list features flow.

        Returns:
            Ranked feature requests and their count
        """
        with logfire.span("list_features.execute"):
            ranked = await self.ranking_service.list_ranked()
            items = [FeatureItem.from_feature(feature) for feature in ranked]

            logfire.info("Features listed", count=len(items))
            return ListFeaturesResponse(features=items, count=len(items))
