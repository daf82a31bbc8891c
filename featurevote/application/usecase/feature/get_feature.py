"""Get feature use case."""

from pydantic import BaseModel, Field

from featurevote.domain.service import RankingService
from featurevote.domain.value import FeatureRequestId

from .common import FeatureItem


class GetFeatureRequest(BaseModel):
    """Get feature request."""

    feature_id: int = Field(ge=1)


class GetFeatureResponse(BaseModel):
    """Get feature response."""

    feature: FeatureItem


class GetFeatureUseCase:
    """Use case for retrieving a single feature request."""

    def __init__(self, ranking_service: RankingService) -> None:
        self.ranking_service = ranking_service

    async def execute(self, request: GetFeatureRequest) -> GetFeatureResponse:
        """Execute get feature flow.

        Raises:
            NotFoundError: If the feature doesn't exist
        """
        feature = await self.ranking_service.get_ranked(
            FeatureRequestId(request.feature_id)
        )
        return GetFeatureResponse(feature=FeatureItem.from_feature(feature))
