# This project was developed with assistance from AI tools.
"""
Application configuration.

All settings read from environment variables with sensible local dev defaults.
Database settings live in ``db.config``; everything else the API needs is here.
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve project root .env regardless of CWD (matches inference/config.py approach)
_PROJECT_ROOT = Path(__file__).resolve().parents[4]
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Application settings -- single source of truth for env-driven config."""

    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # -- App --
    APP_NAME: str = "brokergpt"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # -- CORS --
    ALLOWED_HOSTS: list[str] = ["http://localhost:5173"]

    # -- LLM --
    # Endpoint, key, model and sampling settings live in config/models.yaml.
    RATE_LIMIT_COOLDOWN: float = Field(
        default=60.0,
        description="Seconds to stop calling the provider after a 429 without retry-after.",
    )

    # -- Company research --
    SERPER_API_KEY: str | None = Field(
        default=None,
        description="Serper web search key. Research is unavailable without it.",
    )
    BROWSERLESS_API_KEY: str | None = Field(
        default=None,
        description="Browserless token used to scrape the top search hit.",
    )
    RESEARCH_TIMEOUT: float = 30.0

    # -- Observability (LangFuse) --
    LANGFUSE_PUBLIC_KEY: str | None = Field(
        default=None,
        description="LangFuse public key. When set (with secret key), tracing is active.",
    )
    LANGFUSE_SECRET_KEY: str | None = Field(
        default=None,
        description="LangFuse secret key.",
    )
    LANGFUSE_HOST: str | None = Field(
        default=None,
        description="LangFuse server URL (e.g. http://localhost:3001).",
    )

    # -- Admin panel (SQLAdmin) --
    SQLADMIN_AUTH_DISABLED: bool = Field(
        default=False,
        description="Open the admin panel without login. Local dev only.",
    )
    SQLADMIN_USER: str = "admin"
    SQLADMIN_PASSWORD: str = "admin"
    SQLADMIN_SECRET_KEY: str = Field(
        default="change-me-in-production",
        description="Signs the admin session cookie.",
    )


settings = Settings()
