"""Engine, session factory and schema helpers for the Baz store."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from baz.config import DatabaseSettings
from baz.persistence.tables import metadata
from baz.util.error import ConfigurationError


def create_engine(database: DatabaseSettings) -> AsyncEngine:
    """Create the async engine for the configured URL.

    SQLite URLs get the driver's default pool; pool sizing applies to
    server databases only.

    Args:
        database: Database settings

    Returns:
        Async engine (no connection is opened yet)

    Raises:
        ConfigurationError: If the URL is blank
    """
    if not database.url.strip():
        raise ConfigurationError("DATABASE__URL must be configured")

    options = {"echo": database.echo, "pool_pre_ping": True}
    if not database.is_sqlite:
        options.update(pool_size=database.pool_size, max_overflow=database.max_overflow)

    return create_async_engine(database.url, **options)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # Repositories commit explicitly; keep loaded values readable afterwards
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)


@asynccontextmanager
async def get_session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    """Open a session and close it on exit, whatever the outcome."""
    session = session_factory()
    try:
        yield session
    finally:
        await session.close()


async def create_schema(engine: AsyncEngine) -> None:
    """Create missing tables straight from metadata (tests and local runs)."""
    async with engine.begin() as connection:
        await connection.run_sync(metadata.create_all)
