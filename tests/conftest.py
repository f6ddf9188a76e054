"""Pytest fixtures for backend tests."""

import os
from collections.abc import AsyncGenerator, Awaitable, Callable
from datetime import datetime

# Point the app at SQLite before anything imports the settings
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from cmdlog.db.base import Base
from cmdlog.db.session import get_db
from cmdlog.main import app
from cmdlog.models.log import Log

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture(scope="function")
async def test_engine():
    """Create a fresh in-memory database engine."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def test_session(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session."""
    async_session = async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False
    )
    async with async_session() as session:
        yield session


@pytest_asyncio.fixture(scope="function")
async def insert_log(
    test_session: AsyncSession,
) -> Callable[..., Awaitable[Log]]:
    """Insert a log row directly, optionally with an explicit created time."""

    async def _insert(command: str, message: str, created: datetime | None = None) -> Log:
        log = Log(command=command, message=message)
        if created is not None:
            log.created = created
        test_session.add(log)
        await test_session.commit()
        await test_session.refresh(log)
        return log

    return _insert


@pytest_asyncio.fixture(scope="function")
async def client(test_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Create a test client bound to the test session."""
    async def override():
        yield test_session

    app.dependency_overrides[get_db] = override

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac

    app.dependency_overrides.clear()
