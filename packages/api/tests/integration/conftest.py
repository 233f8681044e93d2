# This project was developed with assistance from AI tools.
"""Integration test fixtures -- real PostgreSQL, no mocks.

A session-scoped container (started once per test run) provides a real
PostgreSQL instance migrated with alembic. Function-scoped fixtures give each
test a session factory bound to one connection with savepoint rollback, so
commits made by the primary store client never leak into the next test.
"""

import os

import pytest
import pytest_asyncio
from db import DatabaseService
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool
from testcontainers.postgres import PostgresContainer

from src.services.storage import FallbackStore, PrimaryStoreClient, StorageFacade

# ---------------------------------------------------------------------------
# Mark all tests in this directory as integration
# ---------------------------------------------------------------------------
pytestmark = pytest.mark.integration

_DB_ROOT = os.path.join(os.path.dirname(__file__), "..", "..", "..", "db")


# ---------------------------------------------------------------------------
# Session-scoped: container + engine + migrations
# ---------------------------------------------------------------------------


@pytest.fixture(scope="session")
def pg_container():
    """Start postgres:16 via testcontainers."""
    with PostgresContainer(
        image="postgres:16",
        username="test",
        password="test",
        dbname="test",
    ) as pg:
        yield pg


@pytest.fixture(scope="session")
def db_url(pg_container):
    """Async DB URL for asyncpg."""
    host = pg_container.get_container_host_ip()
    port = pg_container.get_exposed_port(5432)
    return f"postgresql+asyncpg://test:test@{host}:{port}/test"


@pytest.fixture(scope="session")
def sync_db_url(pg_container):
    """Sync DB URL for Alembic (psycopg2)."""
    host = pg_container.get_container_host_ip()
    port = pg_container.get_exposed_port(5432)
    return f"postgresql://test:test@{host}:{port}/test"


@pytest.fixture(scope="session")
def _run_migrations(sync_db_url):
    """Run alembic upgrade head against the container."""
    from alembic import command
    from alembic.config import Config

    previous = os.environ.get("DATABASE_URL")
    os.environ["DATABASE_URL"] = sync_db_url
    try:
        alembic_cfg = Config(os.path.join(_DB_ROOT, "alembic.ini"))
        alembic_cfg.set_main_option("script_location", os.path.join(_DB_ROOT, "alembic"))
        alembic_cfg.set_main_option("sqlalchemy.url", sync_db_url)
        command.upgrade(alembic_cfg, "head")
    finally:
        if previous is None:
            os.environ.pop("DATABASE_URL", None)
        else:
            os.environ["DATABASE_URL"] = previous


@pytest.fixture(scope="session")
def async_engine(db_url, _run_migrations):
    """Create an async engine pointing at the test container."""
    return create_async_engine(db_url, echo=False, poolclass=NullPool)


# ---------------------------------------------------------------------------
# Function-scoped: per-test connection with savepoint rollback
# ---------------------------------------------------------------------------


@pytest_asyncio.fixture
async def session_factory(async_engine):
    """Session factory whose commits become savepoints rolled back after the test."""
    conn = await async_engine.connect()
    txn = await conn.begin()
    factory = async_sessionmaker(
        bind=conn,
        class_=AsyncSession,
        expire_on_commit=False,
        join_transaction_mode="create_savepoint",
    )
    yield factory
    await txn.rollback()
    await conn.close()


@pytest_asyncio.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def primary(session_factory):
    return PrimaryStoreClient(session_factory)


@pytest.fixture
def storage(primary):
    return StorageFacade(primary, FallbackStore())


@pytest.fixture
def db_service(async_engine):
    return DatabaseService(engine=async_engine)
