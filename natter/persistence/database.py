"""Async PostgreSQL engine and request sessions."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import logfire
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from natter.config import DatabaseSettings


def create_engine(database: DatabaseSettings) -> AsyncEngine:
    """Build the asyncpg-backed engine described by `database`."""
    return create_async_engine(
        database.url,
        echo=database.echo,
        pool_size=database.pool_size,
        max_overflow=database.max_overflow,
        pool_pre_ping=True,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # Repositories read back rows they just wrote, so objects stay loaded
    # after commit and flushes happen only when a repository asks.
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)


@asynccontextmanager
async def transactional_session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncIterator[AsyncSession]:
    """One unit of work: commit when the block succeeds, roll back otherwise.

    Every HTTP request runs inside exactly one of these, so a comment
    cascade (likes, then comments) is all-or-nothing.
    """
    async with session_factory() as session:
        try:
            yield session
        except Exception as e:
            logfire.warn("Rolling back session", error=str(e))
            await session.rollback()
            raise
        await session.commit()
