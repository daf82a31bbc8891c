"""Create feature use case."""

import logfire
from pydantic import BaseModel

from featurevote.domain.service import FeatureService

from .common import FeatureItem


class CreateFeatureRequest(BaseModel):
    """Create feature request."""

    title: str
    description: str | None = None


class CreateFeatureResponse(BaseModel):
    """Create feature response."""

    feature: FeatureItem


class CreateFeatureUseCase:
    """Use case for proposing a new feature request."""

    def __init__(self, feature_service: FeatureService) -> None:
        """Initialize create feature use case.

        Args:
            feature_service: Feature domain service
        """
        self.feature_service = feature_service

    async def execute(self, request: CreateFeatureRequest) -> CreateFeatureResponse:
        """Execute create feature flow.

        Args:
            request: Create feature request

        Returns:
            The created feature with zero votes

        Raises:
            ValidationError: If title or description are out of bounds
        """
        with logfire.span("create_feature.execute"):
            feature = await self.feature_service.create(
                title=request.title, description=request.description
            )
            return CreateFeatureResponse(feature=FeatureItem.from_feature(feature))
