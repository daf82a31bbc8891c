"""FeatureRequest entity.

A feature request is a proposed enhancement that clients upvote. Only the
vote counter ever changes after creation.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from featurevote.domain.model.common import DomainModel
from featurevote.domain.value import (
    DESCRIPTION_MAX_LENGTH,
    TITLE_MAX_LENGTH,
    FeatureRequestId,
)


class FeatureRequest(DomainModel):
    """FeatureRequest entity.

    Business rules:
    - id is assigned by the store and never reused
    - votes starts at 0 and is only ever incremented
    - title and description are fixed at creation
    """

    id: FeatureRequestId
    title: str = Field(min_length=1, max_length=TITLE_MAX_LENGTH)
    description: Optional[str] = Field(default=None, max_length=DESCRIPTION_MAX_LENGTH)
    votes: int = Field(default=0, ge=0)
    created_at: datetime

    def ranking_key(self) -> tuple[int, datetime, int]:
        """Sort key for popularity ranking (use with reverse=True).

        Votes first, then most recent creation, then highest id so that no two
        distinct records compare equal.
        """
        return (self.votes, self.created_at, self.id)
