"""Vote feature use case."""

import logfire
from pydantic import BaseModel, Field

from featurevote.domain.service import FeatureService
from featurevote.domain.value import FeatureRequestId

from .common import FeatureItem


class VoteFeatureRequest(BaseModel):
    """Vote feature request."""

    feature_id: int = Field(ge=1)


class VoteFeatureResponse(BaseModel):
    """Vote feature response."""

    feature: FeatureItem


class VoteFeatureUseCase:
    """Use case for upvoting a feature request.

    Votes are not deduplicated per voter; every call adds one.
    """

    def __init__(self, feature_service: FeatureService) -> None:
        """Initialize vote feature use case.

        Args:
            feature_service: Feature domain service
        """
        self.feature_service = feature_service

    async def execute(self, request: VoteFeatureRequest) -> VoteFeatureResponse:
        """Execute vote flow.

        Args:
            request: Vote request with the feature ID

        Returns:
            The feature with its updated vote count

        Raises:
            NotFoundError: If the feature doesn't exist
        """
        with logfire.span("vote_feature.execute", feature_id=request.feature_id):
            feature = await self.feature_service.increment_vote(
                FeatureRequestId(request.feature_id)
            )
            return VoteFeatureResponse(feature=FeatureItem.from_feature(feature))
