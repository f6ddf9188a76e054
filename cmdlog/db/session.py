"""Database session configuration with connection pooling."""

import os
from collections.abc import AsyncGenerator
from typing import Any

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from cmdlog.core.config import settings
from cmdlog.db.base import Base

# Configurable pool settings via environment variables
pool_size = int(os.getenv("DATABASE_POOL_SIZE", "20"))
max_overflow = int(os.getenv("DATABASE_MAX_OVERFLOW", "40"))


def engine_options(url: str) -> dict[str, Any]:
    """Keyword arguments for create_async_engine.

    SQLite engines use a single-connection pool that rejects sizing options.
    """
    options: dict[str, Any] = {"echo": settings.DEBUG}
    if make_url(url).get_backend_name() == "sqlite":
        return options

    options.update(
        pool_size=pool_size,  # Number of connections to maintain
        max_overflow=max_overflow,  # Additional connections allowed beyond pool_size
        pool_timeout=30,  # Seconds to wait before giving up on getting a connection
        pool_recycle=3600,  # Recycle connections after 1 hour
        pool_pre_ping=True,  # Verify connections before using them
    )
    return options


engine = create_async_engine(
    settings.SQLALCHEMY_DATABASE_URL,
    **engine_options(settings.SQLALCHEMY_DATABASE_URL),
)

async_session_maker = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def init_db() -> None:
    """Create the logs table if it does not exist yet."""
    import cmdlog.models  # noqa: F401  registers tables on Base.metadata

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    async with async_session_maker() as session:
        try:
            yield session
        finally:
            await session.close()
