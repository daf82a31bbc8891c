"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from featurevote.config import Settings
from featurevote.domain.repository import FeatureRepository
from featurevote.persistence.database import (
    create_engine,
    create_schema,
    create_session_factory,
)
from featurevote.persistence.repository import SqlFeatureRepository
from featurevote.util.di.base import ProviderBase
from featurevote.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider backed by SQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide database engine.

        The engine lives as long as the container and is disposed when the
        container closes.
        """
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)

        # SQLite has no migration pipeline, create tables in place
        if make_url(settings.database_url).get_backend_name() == "sqlite":
            await create_schema(engine)

        yield engine

        await engine.dispose()
        logfire.info("Database engine disposed")

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        Repositories commit their own writes before returning, because the
        request scope only closes after the response has been sent. Anything
        left uncommitted is rolled back when the session closes.
        """
        async with session_factory() as session:
            try:
                yield session
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_feature_repository(self, session: AsyncSession) -> FeatureRepository:
        """Provide Feature repository."""
        return SqlFeatureRepository(session)
