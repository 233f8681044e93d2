# This project was developed with assistance from AI tools.
"""Async engine, session factory, and connectivity helpers.

The engine is only created when DATABASE_URL is configured. Callers must
treat ``engine``/``SessionLocal`` being ``None`` as "no primary store".
"""

from sqlalchemy import inspect, text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from .config import DatabaseSettings, db_settings


class Base(DeclarativeBase):
    pass


def to_async_url(url: str) -> str:
    """Normalize a Postgres URL to the asyncpg driver.

    Examples:
        >>> to_async_url("postgres://u:p@host:5432/db")
        'postgresql+asyncpg://u:p@host:5432/db'
        >>> to_async_url("postgresql+asyncpg://u:p@host/db")
        'postgresql+asyncpg://u:p@host/db'
    """
    scheme, sep, rest = url.partition("://")
    if not sep or "+" in scheme:
        return url
    return f"postgresql+asyncpg://{rest}"


def build_engine(cfg: DatabaseSettings) -> AsyncEngine | None:
    """Create the asyncpg engine with the pool and timeout policy from *cfg*."""
    if not cfg.DATABASE_URL:
        return None
    return create_async_engine(
        to_async_url(cfg.DATABASE_URL),
        echo=cfg.SQL_ECHO,
        pool_size=cfg.DB_POOL_SIZE,
        max_overflow=0,
        pool_pre_ping=True,
        pool_timeout=cfg.DB_CONNECT_TIMEOUT,
        connect_args={
            "timeout": cfg.DB_CONNECT_TIMEOUT,
            "command_timeout": cfg.DB_STATEMENT_TIMEOUT,
        },
    )


def build_session_factory(bind: AsyncEngine | None) -> async_sessionmaker[AsyncSession] | None:
    if bind is None:
        return None
    return async_sessionmaker(bind=bind, class_=AsyncSession, expire_on_commit=False)


engine = build_engine(db_settings)
SessionLocal = build_session_factory(engine)


class DatabaseService:
    """Connectivity checks used by the startup bootstrapper and health route."""

    def __init__(self, engine: AsyncEngine | None = None):
        self.engine = engine

    @property
    def is_configured(self) -> bool:
        return self.engine is not None

    async def ping(self) -> None:
        """Run ``SELECT 1``. Raises on any connection or query failure."""
        if self.engine is None:
            raise RuntimeError("DATABASE_URL is not configured")
        async with self.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))

    async def missing_tables(self) -> list[str]:
        """Return the model tables that do not exist in the connected database."""
        if self.engine is None:
            return sorted(Base.metadata.tables)
        async with self.engine.connect() as conn:
            existing = await conn.run_sync(lambda sync_conn: set(inspect(sync_conn).get_table_names()))
        return sorted(name for name in Base.metadata.tables if name not in existing)

    async def dispose(self) -> None:
        if self.engine is not None:
            await self.engine.dispose()


db_service = DatabaseService(engine=engine)


def get_db_service() -> DatabaseService:
    return db_service

