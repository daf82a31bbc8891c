"""Integration tests for SqlFeatureRepository.

Runs against a throwaway SQLite database file (aiosqlite), so no external
services are needed.
"""

import asyncio
from datetime import datetime, timedelta, timezone

import pytest
import pytest_asyncio
from sqlalchemy.exc import OperationalError

from featurevote.config import DatabaseSettings, Settings
from featurevote.domain.error import TransientStorageError
from featurevote.domain.service import FeatureService, RankingService
from featurevote.domain.value import FeatureRequestId
from featurevote.persistence.database import (
    create_engine,
    create_schema,
    create_session_factory,
)
from featurevote.persistence.repository import SqlFeatureRepository
from tests.conftest import make_draft


@pytest_asyncio.fixture
async def session_factory(tmp_path):
    settings = Settings(
        database=DatabaseSettings(url=f"sqlite+aiosqlite:///{tmp_path / 'features.db'}")
    )
    engine = create_engine(settings)
    await create_schema(engine)

    yield create_session_factory(engine)

    await engine.dispose()


async def _in_session(session_factory, operation):
    """Run one repository operation in its own session."""
    async with session_factory() as session:
        return await operation(SqlFeatureRepository(session))


class FailingCommitSession:
    """Session wrapper whose commit fails as if the connection dropped."""

    def __init__(self, session):
        self._session = session

    async def execute(self, stmt):
        return await self._session.execute(stmt)

    async def commit(self):
        raise OperationalError("COMMIT", {}, Exception("connection reset"))


class TestSqlFeatureRepository:
    """Integration tests for SqlFeatureRepository."""

    @pytest.mark.asyncio
    async def test_add_and_find(self, session_factory):
        created_at = datetime(2024, 5, 1, 9, 30, tzinfo=timezone.utc)

        feature = await _in_session(
            session_factory,
            lambda repo: repo.add(make_draft("Add dark mode", "desc"), created_at),
        )
        found = await _in_session(
            session_factory, lambda repo: repo.find_by_id(feature.id)
        )

        assert feature.id >= 1
        assert feature.votes == 0
        assert found is not None
        assert found.title == "Add dark mode"
        assert found.description == "desc"
        assert found.votes == 0
        assert found.created_at == created_at
        assert found.created_at.tzinfo is not None

    @pytest.mark.asyncio
    async def test_ids_are_unique(self, session_factory):
        now = datetime.now(timezone.utc)
        ids = []
        for i in range(20):
            feature = await _in_session(
                session_factory, lambda repo: repo.add(make_draft(f"F{i}"), now)
            )
            ids.append(feature.id)

        assert len(set(ids)) == 20
        assert ids == sorted(ids)

    @pytest.mark.asyncio
    async def test_find_missing_returns_none(self, session_factory):
        found = await _in_session(
            session_factory, lambda repo: repo.find_by_id(FeatureRequestId(404))
        )

        assert found is None

    @pytest.mark.asyncio
    async def test_increment_missing_returns_none(self, session_factory):
        result = await _in_session(
            session_factory, lambda repo: repo.increment_votes(FeatureRequestId(404))
        )

        assert result is None

    @pytest.mark.asyncio
    async def test_increment_returns_updated_row(self, session_factory):
        feature = await _in_session(
            session_factory,
            lambda repo: repo.add(make_draft(), datetime.now(timezone.utc)),
        )

        first = await _in_session(
            session_factory, lambda repo: repo.increment_votes(feature.id)
        )
        second = await _in_session(
            session_factory, lambda repo: repo.increment_votes(feature.id)
        )

        assert first.votes == 1
        assert second.votes == 2
        assert second.title == feature.title

    @pytest.mark.asyncio
    async def test_concurrent_increments_lose_no_updates(self, session_factory):
        feature = await _in_session(
            session_factory,
            lambda repo: repo.add(make_draft(), datetime.now(timezone.utc)),
        )

        n = 50
        results = await asyncio.gather(
            *(
                _in_session(session_factory, lambda repo: repo.increment_votes(feature.id))
                for _ in range(n)
            )
        )

        final = await _in_session(
            session_factory, lambda repo: repo.find_by_id(feature.id)
        )
        assert final.votes == n
        assert sorted(r.votes for r in results) == list(range(1, n + 1))

    @pytest.mark.asyncio
    async def test_ranking_over_sql_store(self, session_factory):
        now = datetime.now(timezone.utc)

        async with session_factory() as session:
            repo = SqlFeatureRepository(session)
            feature_service = FeatureService(feature_repository=repo)
            ranking_service = RankingService(feature_service=feature_service)

            a = await repo.add(make_draft("A"), now - timedelta(hours=2))
            b = await repo.add(make_draft("B"), now - timedelta(hours=1))
            c = await repo.add(make_draft("C"), now)
            for feature_id, votes in ((a.id, 5), (b.id, 5), (c.id, 3)):
                for _ in range(votes):
                    await feature_service.increment_vote(feature_id)

            ranked = await ranking_service.list_ranked()

        assert [f.title for f in ranked] == ["B", "A", "C"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("feature_id", [2**31, 2**63])
    async def test_ids_beyond_column_range_are_missing(self, session_factory, feature_id):
        found = await _in_session(
            session_factory, lambda repo: repo.find_by_id(FeatureRequestId(feature_id))
        )
        voted = await _in_session(
            session_factory,
            lambda repo: repo.increment_votes(FeatureRequestId(feature_id)),
        )

        assert found is None
        assert voted is None

    @pytest.mark.asyncio
    async def test_written_records_are_visible_to_other_sessions(self, session_factory):
        async with session_factory() as writer, session_factory() as reader:
            feature = await SqlFeatureRepository(writer).add(
                make_draft(), datetime.now(timezone.utc)
            )
            await SqlFeatureRepository(writer).increment_votes(feature.id)

            seen = await SqlFeatureRepository(reader).find_by_id(feature.id)

        assert seen is not None
        assert seen.votes == 1

    @pytest.mark.asyncio
    async def test_failed_commit_leaves_votes_unchanged(self, session_factory):
        feature = await _in_session(
            session_factory,
            lambda repo: repo.add(make_draft(), datetime.now(timezone.utc)),
        )

        async with session_factory() as session:
            repo = SqlFeatureRepository(FailingCommitSession(session))
            with pytest.raises(TransientStorageError):
                await repo.increment_votes(feature.id)

        final = await _in_session(
            session_factory, lambda repo: repo.find_by_id(feature.id)
        )
        assert final.votes == 0

    @pytest.mark.asyncio
    async def test_failed_commit_stores_nothing(self, session_factory):
        async with session_factory() as session:
            repo = SqlFeatureRepository(FailingCommitSession(session))
            with pytest.raises(TransientStorageError):
                await repo.add(make_draft(), datetime.now(timezone.utc))

        remaining = await _in_session(session_factory, lambda repo: repo.find_all())
        assert remaining == []

    @pytest.mark.asyncio
    async def test_storage_failures_become_transient_errors(self):
        class BrokenSession:
            async def execute(self, stmt):
                raise OperationalError("SELECT 1", {}, Exception("connection refused"))

            async def commit(self):
                raise OperationalError("COMMIT", {}, Exception("connection refused"))

        repo = SqlFeatureRepository(BrokenSession())

        with pytest.raises(TransientStorageError):
            await repo.add(make_draft(), datetime.now(timezone.utc))
        with pytest.raises(TransientStorageError):
            await repo.find_by_id(FeatureRequestId(1))
        with pytest.raises(TransientStorageError):
            await repo.find_all()
        with pytest.raises(TransientStorageError):
            await repo.increment_votes(FeatureRequestId(1))
