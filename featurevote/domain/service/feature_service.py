"""Feature store domain service."""

from datetime import datetime, timezone
from typing import Optional

import logfire
from pydantic import ValidationError as PydanticValidationError

from featurevote.domain.error import NotFoundError, ValidationError
from featurevote.domain.model.feature import FeatureRequest
from featurevote.domain.repository import FeatureRepository
from featurevote.domain.value import FeatureDraft, FeatureRequestId

from .base import Service


class FeatureService(Service):
    """Domain service owning the feature request store.

    All mutations of feature records go through this service.
    """

    def __init__(self, feature_repository: FeatureRepository) -> None:
        """Initialize feature service.

        Args:
            feature_repository: Feature repository
        """
        self.feature_repository = feature_repository

    async def create(
        self, title: str, description: Optional[str] = None
    ) -> FeatureRequest:
        """Create a new feature request with zero votes.

        Args:
            title: Feature title (trimmed, 1-255 characters)
            description: Optional description (trimmed, up to 1000 characters)

        Returns:
            The stored feature request

        Raises:
            ValidationError: If title or description violate their bounds
        """
        with logfire.span("feature_service.create"):
            draft = self._build_draft(title, description)
            feature = await self.feature_repository.add(
                draft, created_at=datetime.now(timezone.utc)
            )
            logfire.info("Feature created", feature_id=feature.id)
            return feature

    async def increment_vote(self, feature_id: FeatureRequestId) -> FeatureRequest:
        """Record one upvote for a feature request.

        Args:
            feature_id: Feature ID

        Returns:
            The feature request after the increment

        Raises:
            NotFoundError: If the feature doesn't exist
        """
        with logfire.span("feature_service.increment_vote", feature_id=feature_id):
            feature = await self.feature_repository.increment_votes(feature_id)
            if feature is None:
                logfire.warn("Vote on non-existent feature", feature_id=feature_id)
                raise NotFoundError("Feature", str(feature_id))

            logfire.info("Vote recorded", feature_id=feature_id, votes=feature.votes)
            return feature

    async def get_by_id(self, feature_id: FeatureRequestId) -> FeatureRequest:
        """Get a feature request by ID.

        Raises:
            NotFoundError: If the feature doesn't exist
        """
        with logfire.span("feature_service.get_by_id", feature_id=feature_id):
            feature = await self.feature_repository.find_by_id(feature_id)
            if feature is None:
                logfire.warn("Feature not found", feature_id=feature_id)
                raise NotFoundError("Feature", str(feature_id))
            return feature

    async def list_all(self) -> list[FeatureRequest]:
        """Return a snapshot of every feature request, in no particular order."""
        with logfire.span("feature_service.list_all"):
            return await self.feature_repository.find_all()

    @staticmethod
    def _build_draft(title: str, description: Optional[str]) -> FeatureDraft:
        """Validate raw input into a FeatureDraft.

        Raises:
            ValidationError: With one detail per failing field
        """
        try:
            return FeatureDraft(title=title, description=description)
        except PydanticValidationError as e:
            details = []
            for error in e.errors():
                field = str(error["loc"][0]) if error["loc"] else "body"
                # Messages raised by our own validators come through as value errors
                if error["type"] == "value_error":
                    message = str(error["ctx"]["error"])
                else:
                    message = error["msg"]
                details.append({"field": field, "message": message})
            logfire.warn("Feature validation failed", details=details)
            raise ValidationError(details) from e
