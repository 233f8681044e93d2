# This project was developed with assistance from AI tools.
"""Database configuration via pydantic-settings.

DATABASE_URL is optional: when it is unset the API runs entirely on the
in-memory fallback store.
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENV_FILE = Path(__file__).resolve().parents[4] / ".env"


class DatabaseSettings(BaseSettings):
    """Database connection settings -- reads from environment variables."""

    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    DATABASE_URL: str | None = Field(
        default=None,
        description="Async SQLAlchemy connection string (asyncpg driver).",
    )
    SQL_ECHO: bool = False

    # Small pool: hosted Postgres plans cap concurrent connections tightly.
    DB_POOL_SIZE: int = 3
    DB_CONNECT_TIMEOUT: float = Field(
        default=60.0,
        description="Seconds to wait for a new connection before giving up.",
    )
    DB_STATEMENT_TIMEOUT: float = Field(
        default=30.0,
        description="Seconds a single statement may run.",
    )

    # Startup connection policy (fixed delay, not exponential)
    DB_CONNECT_ATTEMPTS: int = Field(default=5, ge=1)
    DB_CONNECT_RETRY_DELAY: float = Field(default=3.0, ge=0)


db_settings = DatabaseSettings()
