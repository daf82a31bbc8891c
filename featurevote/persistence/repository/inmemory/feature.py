"""In-memory feature repository."""

import itertools
import threading
from datetime import datetime
from typing import Optional

from featurevote.domain.model.feature import FeatureRequest
from featurevote.domain.repository.feature import FeatureRepository
from featurevote.domain.value import FeatureDraft, FeatureRequestId


class InMemoryFeatureRepository(FeatureRepository):
    """In-memory implementation of FeatureRepository.

    A single lock guards the record map. Every read-modify-write of a vote
    counter and every snapshot read happens under it, so increments are never
    interleaved and readers only see committed records.
    """

    def __init__(self) -> None:
        self._features: dict[FeatureRequestId, FeatureRequest] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    async def add(self, draft: FeatureDraft, created_at: datetime) -> FeatureRequest:
        """Store a new feature request under a fresh id."""
        with self._lock:
            feature = FeatureRequest(
                id=FeatureRequestId(next(self._ids)),
                title=draft.title,
                description=draft.description,
                votes=0,
                created_at=created_at,
            )
            self._features[feature.id] = feature
            return feature

    async def find_by_id(self, feature_id: FeatureRequestId) -> Optional[FeatureRequest]:
        """Find a feature request by ID."""
        with self._lock:
            return self._features.get(feature_id)

    async def find_all(self) -> list[FeatureRequest]:
        """Return a snapshot of all feature requests."""
        with self._lock:
            return list(self._features.values())

    async def increment_votes(
        self, feature_id: FeatureRequestId
    ) -> Optional[FeatureRequest]:
        """Atomically increment votes by 1."""
        with self._lock:
            feature = self._features.get(feature_id)
            if feature is None:
                return None

            # Records are immutable, swap in an updated copy
            updated = feature.model_copy(update={"votes": feature.votes + 1})
            self._features[feature_id] = updated
            return updated
