"""Feature request repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from featurevote.domain.model.feature import FeatureRequest
from featurevote.domain.value import FeatureDraft, FeatureRequestId


class FeatureRepository(ABC):
    """Repository for FeatureRequest records.

    Defines the contract for feature persistence operations.
    Implementations live in the infrastructure layer and own all
    coordination between concurrent callers.
    """

    @abstractmethod
    async def add(self, draft: FeatureDraft, created_at: datetime) -> FeatureRequest:
        """Persist a new feature request.

        The repository allocates a fresh id and starts votes at 0.

        Args:
            draft: Validated title and description
            created_at: Creation timestamp

        Returns:
            The stored feature request
        """
        pass

    @abstractmethod
    async def find_by_id(self, feature_id: FeatureRequestId) -> Optional[FeatureRequest]:
        """Find a feature request by ID.

        Args:
            feature_id: The feature's unique identifier

        Returns:
            The feature request if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[FeatureRequest]:
        """Return every stored feature request.

        Order is unspecified. Each record reflects committed values only.

        Returns:
            Snapshot of all feature requests
        """
        pass

    @abstractmethod
    async def increment_votes(
        self, feature_id: FeatureRequestId
    ) -> Optional[FeatureRequest]:
        """Atomically increment votes by 1.

        Concurrent calls against the same id never lose an update.

        Args:
            feature_id: The feature ID

        Returns:
            The feature request after the increment, None if it doesn't exist
        """
        pass
