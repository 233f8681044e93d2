# This project was developed with assistance from AI tools.
"""Engine construction and connectivity helper tests (no database required)."""

import pytest

from db import Base, DatabaseService
from db.config import DatabaseSettings
from db.database import build_engine, build_session_factory, to_async_url


def test_to_async_url_rewrites_plain_schemes():
    assert to_async_url("postgres://u:p@host:5432/db") == "postgresql+asyncpg://u:p@host:5432/db"
    assert to_async_url("postgresql://u:p@host/db") == "postgresql+asyncpg://u:p@host/db"


def test_to_async_url_keeps_explicit_driver():
    url = "postgresql+asyncpg://u:p@host/db"
    assert to_async_url(url) == url


def test_build_engine_without_url_returns_none():
    cfg = DatabaseSettings(DATABASE_URL=None)
    assert build_engine(cfg) is None
    assert build_session_factory(None) is None


def test_build_engine_applies_pool_ceiling():
    cfg = DatabaseSettings(DATABASE_URL="postgresql://u:p@localhost:5432/db", DB_POOL_SIZE=3)
    engine = build_engine(cfg)
    assert engine is not None
    assert engine.url.drivername == "postgresql+asyncpg"
    assert engine.pool.size() == 3


def test_model_tables_registered():
    """All broker tables should be registered on the declarative metadata."""
    assert set(Base.metadata.tables) == {
        "carriers",
        "chat_messages",
        "client_records",
        "clients",
        "cover_types",
        "policies",
        "record_types",
    }


@pytest.mark.asyncio
async def test_ping_unconfigured_raises():
    service = DatabaseService(engine=None)
    assert service.is_configured is False
    with pytest.raises(RuntimeError, match="not configured"):
        await service.ping()


@pytest.mark.asyncio
async def test_missing_tables_unconfigured_lists_everything():
    service = DatabaseService(engine=None)
    missing = await service.missing_tables()
    assert "clients" in missing
    assert missing == sorted(missing)
