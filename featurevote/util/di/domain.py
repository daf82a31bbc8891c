"""Domain layer DI providers."""

from dishka import Scope, provide

from featurevote.domain.repository import FeatureRepository
from featurevote.domain.service import FeatureService, RankingService
from featurevote.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    """

    scope = Scope.REQUEST

    @provide
    def get_feature_service(
        self, feature_repository: FeatureRepository
    ) -> FeatureService:
        """Provide feature store domain service."""
        return FeatureService(feature_repository=feature_repository)

    @provide
    def get_ranking_service(self, feature_service: FeatureService) -> RankingService:
        """Provide ranking domain service."""
        return RankingService(feature_service=feature_service)
