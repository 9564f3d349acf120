"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

import logfire
from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from baz.config import DatabaseSettings
from baz.domain.repository import BazRepository
from baz.persistence.database import create_engine, create_session_factory, get_session
from baz.persistence.repository import SqlBazRepository
from baz.util.di.base import ProviderBase
from baz.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using the configured SQL database."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_engine(
        self, database: DatabaseSettings
    ) -> AsyncIterator[AsyncEngine]:
        """Provide database engine, disposed when the container closes."""
        engine = create_engine(database)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

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

        Repositories commit their own transactions. Whatever is still open
        when the request ends is rolled back, and the session is closed.
        """
        async with get_session(session_factory) as session:
            yield session
            if session.in_transaction():
                logfire.debug("Discarding open read transaction")
                await session.rollback()

    @provide(scope=Scope.REQUEST)
    def get_baz_repository(self, session: AsyncSession) -> BazRepository:
        """Provide Baz repository."""
        return SqlBazRepository(session)
