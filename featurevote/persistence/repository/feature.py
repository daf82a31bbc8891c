"""SQL implementation of Feature repository."""

from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime
from typing import List, Optional

import logfire
from sqlalchemy import insert, select, update
from sqlalchemy.exc import InterfaceError, OperationalError
from sqlalchemy.exc import TimeoutError as PoolTimeoutError
from sqlalchemy.ext.asyncio import AsyncSession

from featurevote.domain.error import TransientStorageError
from featurevote.domain.model import FeatureRequest
from featurevote.domain.repository.feature import FeatureRepository
from featurevote.domain.value import FeatureDraft, FeatureRequestId
from featurevote.persistence.mappers import draft_to_dict, row_to_feature
from featurevote.persistence.tables import FEATURE_ID_MAX, features_table


@contextmanager
def _storage_errors(operation: str) -> Iterator[None]:
    """Translate connectivity failures into TransientStorageError."""
    try:
        yield
    except (OperationalError, InterfaceError, PoolTimeoutError, OSError) as e:
        logfire.warn(
            "Storage unavailable",
            operation=operation,
            error=str(e),
            error_type=type(e).__name__,
        )
        raise TransientStorageError(f"Storage unavailable during {operation}") from e


def _storable(feature_id: FeatureRequestId) -> bool:
    """Whether the id fits the id column; larger ids can never have been issued."""
    return 1 <= feature_id <= FEATURE_ID_MAX


class SqlFeatureRepository(FeatureRepository):
    """SQL implementation of FeatureRepository.

    Vote increments use the database's atomic UPDATE ... RETURNING, so
    concurrent increments serialize on the row lock and never lose updates.

    Writes commit before returning, so a record handed back to the caller is
    already durable and visible to other sessions. A failed commit rolls the
    write back and surfaces as TransientStorageError.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def add(self, draft: FeatureDraft, created_at: datetime) -> FeatureRequest:
        """Insert a new feature request."""
        with logfire.span("feature_repository.add", title=draft.title):
            stmt = (
                insert(features_table)
                .values(**draft_to_dict(draft), votes=0, created_at=created_at)
                .returning(features_table)
            )
            with _storage_errors("add"):
                result = await self.session.execute(stmt)
                row = result.one()
                await self.session.commit()

            logfire.info("Inserted feature", feature_id=row.id)
            return row_to_feature(row._asdict())

    async def find_by_id(self, feature_id: FeatureRequestId) -> Optional[FeatureRequest]:
        """Find a feature request by ID."""
        with logfire.span("feature_repository.find_by_id", feature_id=feature_id):
            if not _storable(feature_id):
                return None

            stmt = select(features_table).where(features_table.c.id == feature_id)
            with _storage_errors("find_by_id"):
                result = await self.session.execute(stmt)
                row = result.fetchone()

            if not row:
                return None

            return row_to_feature(row._asdict())

    async def find_all(self) -> List[FeatureRequest]:
        """Return all feature requests from a single SELECT."""
        with logfire.span("feature_repository.find_all"):
            stmt = select(features_table)
            with _storage_errors("find_all"):
                result = await self.session.execute(stmt)
                rows = result.fetchall()

            logfire.info("Found features", count=len(rows))
            return [row_to_feature(row._asdict()) for row in rows]

    async def increment_votes(
        self, feature_id: FeatureRequestId
    ) -> Optional[FeatureRequest]:
        """Atomically increment votes by 1."""
        with logfire.span("feature_repository.increment_votes", feature_id=feature_id):
            if not _storable(feature_id):
                logfire.warn("Feature not found for vote", feature_id=feature_id)
                return None

            stmt = (
                update(features_table)
                .where(features_table.c.id == feature_id)
                .values(votes=features_table.c.votes + 1)
                .returning(features_table)
            )
            with _storage_errors("increment_votes"):
                result = await self.session.execute(stmt)
                row = result.fetchone()
                await self.session.commit()

            if row is None:
                logfire.warn("Feature not found for vote", feature_id=feature_id)
                return None

            return row_to_feature(row._asdict())
