"""Async database engine, session factory, and lifespan management.

Uses SQLAlchemy 2.0 async with the aiosqlite driver: the reference data is
a single local SQLite file, opened once per command.
"""

from __future__ import annotations

import contextlib
from collections.abc import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from codicefiscale.config import settings


def build_engine(database_url: str | None = None) -> AsyncEngine:
    """Create an async engine, defaulting to the configured database."""
    return create_async_engine(
        database_url or settings.db.database_url,
        echo=settings.db.database_echo,
    )


def build_session_factory(bind: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(bind, class_=AsyncSession, expire_on_commit=False)


@contextlib.asynccontextmanager
async def get_session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    """Yield a session that commits on success and rolls back on error.

    Usage:
        async with get_session(session_factory) as db:
            ...
    """
    async with session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


# ── Lifespan helpers ─────────────────────────────────────────────────


async def init_db(bind: AsyncEngine) -> None:
    """Create the nations and cities tables if they do not exist."""
    async with bind.begin() as conn:
        # Import here to ensure all models are registered with Base.metadata
        from codicefiscale.models import Base

        await conn.run_sync(Base.metadata.create_all)


async def close_db(bind: AsyncEngine) -> None:
    """Dispose the engine's connection pool."""
    await bind.dispose()


@contextlib.asynccontextmanager
async def db_lifespan(
    database_url: str | None = None,
) -> AsyncGenerator[async_sessionmaker[AsyncSession], None]:
    """Open the database for the duration of a command.

    Usage:
        async with db_lifespan() as session_factory:
            async with session_factory() as db:
                ...
    """
    engine = build_engine(database_url)
    await init_db(engine)
    try:
        yield build_session_factory(engine)
    finally:
        await close_db(engine)
