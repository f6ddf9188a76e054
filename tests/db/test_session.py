"""Tests for database session configuration."""

from cmdlog.db import session


def test_sqlite_gets_no_pool_options():
    """SQLite engines must not receive pool sizing options."""
    options = session.engine_options("sqlite+aiosqlite:///:memory:")

    assert "pool_size" not in options
    assert "max_overflow" not in options
    assert "echo" in options


def test_postgres_gets_pool_options(monkeypatch):
    monkeypatch.setattr(session, "pool_size", 30)
    monkeypatch.setattr(session, "max_overflow", 50)

    options = session.engine_options("postgresql+asyncpg://u:p@db:5432/cmdlog")

    assert options["pool_size"] == 30
    assert options["max_overflow"] == 50
    assert options["pool_pre_ping"] is True


def test_pool_defaults():
    """Pool size should default to 20 and overflow to 40."""
    assert isinstance(session.pool_size, int)
    assert isinstance(session.max_overflow, int)
