"""Application layer DI providers."""

from dishka import Scope, provide

from featurevote.application.usecase.feature import (
    CreateFeatureUseCase,
    GetFeatureUseCase,
    ListFeaturesUseCase,
    VoteFeatureUseCase,
)
from featurevote.domain.service import FeatureService, RankingService
from featurevote.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    @provide(scope=Scope.REQUEST)
    def get_create_feature_use_case(
        self, feature_service: FeatureService
    ) -> CreateFeatureUseCase:
        """Provide create feature use case."""
        return CreateFeatureUseCase(feature_service=feature_service)

    @provide(scope=Scope.REQUEST)
    def get_list_features_use_case(
        self, ranking_service: RankingService
    ) -> ListFeaturesUseCase:
        """Provide list features use case."""
        return ListFeaturesUseCase(ranking_service=ranking_service)

    @provide(scope=Scope.REQUEST)
    def get_get_feature_use_case(
        self, ranking_service: RankingService
    ) -> GetFeatureUseCase:
        """Provide get feature use case."""
        return GetFeatureUseCase(ranking_service=ranking_service)

    @provide(scope=Scope.REQUEST)
    def get_vote_feature_use_case(
        self, feature_service: FeatureService
    ) -> VoteFeatureUseCase:
        """Provide vote feature use case."""
        return VoteFeatureUseCase(feature_service=feature_service)
