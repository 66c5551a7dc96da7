"""
Database connection management.

Provides the async SQLAlchemy engine, session factory, FastAPI dependency
for database session injection, and startup table creation.

Dependencies: sqlalchemy, aiosqlite, finbot.configs
System role: Database connection lifecycle management
"""

import logging
from collections.abc import AsyncGenerator
from functools import lru_cache

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from finbot.boundary.db.base import Base
from finbot.configs import get_settings

logger = logging.getLogger(__name__)


@lru_cache
def get_async_engine() -> AsyncEngine:
    """
    Create the process-wide async engine from settings.

    Returns:
        AsyncEngine: Engine bound to ``DATABASE_URL``

    Raises:
        ArgumentError: If the database URL is invalid
    """
    db_config = get_settings().database
    return create_async_engine(db_config.url, echo=db_config.echo_sql)


def get_async_session_factory() -> async_sessionmaker[AsyncSession]:
    """
    Create async session factory for database operations.

    Sessions use manual transaction control and keep attributes loaded
    after commit.
    """
    return async_sessionmaker(
        bind=get_async_engine(),
        autoflush=False,
        expire_on_commit=False,
    )


async def get_async_db() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency yielding a request-scoped async database session.

    Yields:
        AsyncSession: Closed automatically after the route completes
    """
    session_factory = get_async_session_factory()
    async with session_factory() as session:
        yield session


async def create_tables(engine: AsyncEngine | None = None) -> None:
    """Create all registered tables if they do not exist."""
    # Registers SessionModel on Base.metadata
    from finbot.boundary.db import models  # noqa: F401

    engine = engine or get_async_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info(f"{__name__}:create_tables - Tables ready")
