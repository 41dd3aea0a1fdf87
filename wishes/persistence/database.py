"""Async engine and session lifecycle (SQLAlchemy + asyncpg)."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import logfire
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from wishes.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the process-wide engine; SQL is echoed when ``debug`` is on."""
    db = settings.database
    return create_async_engine(
        db.url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=db.pool_size,
        max_overflow=db.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory; rows stay readable after commit."""
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)


@asynccontextmanager
async def get_session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    """One unit of work per request.

    Commits when the block exits normally. Any exception rolls the
    transaction back and is re-raised.
    """
    async with session_factory() as session:
        try:
            yield session
        except Exception as e:
            await session.rollback()
            logfire.warn("Transaction rolled back", error_type=type(e).__name__)
            raise
        await session.commit()
