"""Ranking and query domain service."""

import logfire

from featurevote.domain.model.feature import FeatureRequest
from featurevote.domain.value import FeatureRequestId

from .base import Service
from .feature_service import FeatureService


class RankingService(Service):
    """Read-only ordering and lookup over the feature store.

    Never mutates records, so it is safe to call alongside any other
    operation.
    """

    def __init__(self, feature_service: FeatureService) -> None:
        """Initialize ranking service.

        Args:
            feature_service: Feature store service
        """
        self.feature_service = feature_service

    async def list_ranked(self) -> list[FeatureRequest]:
        """List feature requests by popularity.

        Ordered by votes descending, then newest first, then highest id.

        Returns:
            Ranked feature requests
        """
        with logfire.span("ranking_service.list_ranked"):
            features = await self.feature_service.list_all()
            ranked = sorted(features, key=FeatureRequest.ranking_key, reverse=True)
            logfire.info("Features ranked", count=len(ranked))
            return ranked

    async def get_ranked(self, feature_id: FeatureRequestId) -> FeatureRequest:
        """Get a single feature request.

        Raises:
            NotFoundError: If the feature doesn't exist
        """
        return await self.feature_service.get_by_id(feature_id)
