"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from datetime import datetime, timezone
from typing import Any, Dict

from featurevote.domain.model import FeatureRequest
from featurevote.domain.value import FeatureDraft, FeatureRequestId


def _as_utc(value: datetime) -> datetime:
    # SQLite drops the offset; timestamps are always written in UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def row_to_feature(row: Dict[str, Any]) -> FeatureRequest:
    """Convert database row to FeatureRequest domain model.

    Args:
        row: Database row as dict

    Returns:
        FeatureRequest domain model
    """
    return FeatureRequest(
        id=FeatureRequestId(row["id"]),
        title=row["title"],
        description=row.get("description"),
        votes=row["votes"],
        created_at=_as_utc(row["created_at"]),
    )


def draft_to_dict(draft: FeatureDraft) -> Dict[str, Any]:
    """Convert FeatureDraft value object to database dict.

    Args:
        draft: Validated feature input

    Returns:
        Dict suitable for database insertion (id and votes come from the database)
    """
    return draft.model_dump()
