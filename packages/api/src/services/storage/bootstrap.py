# This project was developed with assistance from AI tools.
"""Startup connection bootstrapper for the primary store.

Runs once, in the background, when the app starts. It pings the database up
to ``RetryPolicy.max_attempts`` times with a fixed delay between attempts and
records the outcome for the health endpoint. ``UNAVAILABLE`` is final for the
life of the process; the storage facade keeps trying the primary store on
every call regardless.
"""

import asyncio
import contextlib
import enum
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from db import DatabaseService
from db.config import DatabaseSettings

logger = logging.getLogger(__name__)


class ConnectionState(str, enum.Enum):
    IDLE = "idle"
    CONNECTING = "connecting"
    CONNECTED = "connected"
    UNAVAILABLE = "unavailable"


@dataclass(frozen=True)
class RetryPolicy:
    """Bounded retries with a fixed (not exponential) delay."""

    max_attempts: int = 5
    delay_seconds: float = 3.0

    def __post_init__(self):
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        if self.delay_seconds < 0:
            raise ValueError("delay_seconds must not be negative")

    @property
    def worst_case_delay(self) -> float:
        """Total time spent sleeping when every attempt fails."""
        return (self.max_attempts - 1) * self.delay_seconds

    @classmethod
    def from_settings(cls, cfg: DatabaseSettings) -> "RetryPolicy":
        return cls(max_attempts=cfg.DB_CONNECT_ATTEMPTS, delay_seconds=cfg.DB_CONNECT_RETRY_DELAY)


class ConnectionBootstrapper:
    """Establish the primary connection once and remember whether it worked."""

    def __init__(
        self,
        db: DatabaseService,
        policy: RetryPolicy | None = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self._db = db
        self.policy = policy or RetryPolicy()
        self._sleep = sleep
        self._task: asyncio.Task | None = None
        self.state = ConnectionState.IDLE
        self.attempt = 0
        self.last_error: str | None = None
        self.missing_tables: list[str] = []

    @property
    def is_available(self) -> bool:
        return self.state == ConnectionState.CONNECTED

    async def run(self) -> ConnectionState:
        if not self._db.is_configured:
            self.state = ConnectionState.UNAVAILABLE
            self.last_error = "DATABASE_URL is not configured"
            logger.warning("Primary store not configured -- serving in-memory data only")
            return self.state

        for attempt in range(1, self.policy.max_attempts + 1):
            self.attempt = attempt
            self.state = ConnectionState.CONNECTING
            try:
                await self._db.ping()
            except Exception as exc:
                self.last_error = f"{type(exc).__name__}: {exc}"
                logger.warning(
                    "Primary store connection attempt %d/%d failed: %s",
                    attempt,
                    self.policy.max_attempts,
                    self.last_error,
                )
                if attempt < self.policy.max_attempts:
                    await self._sleep(self.policy.delay_seconds)
                continue

            self.state = ConnectionState.CONNECTED
            self.last_error = None
            logger.info("Primary store connected after %d attempt(s)", attempt)
            await self._check_tables()
            return self.state

        self.state = ConnectionState.UNAVAILABLE
        logger.error(
            "Primary store unavailable after %d attempts -- serving in-memory data",
            self.policy.max_attempts,
        )
        return self.state

    async def _check_tables(self) -> None:
        try:
            self.missing_tables = await self._db.missing_tables()
        except Exception:
            logger.warning("Could not inspect primary store tables", exc_info=True)
            return
        if self.missing_tables:
            logger.warning(
                "Primary store is missing tables: %s (run alembic upgrade head)",
                ", ".join(self.missing_tables),
            )

    def start(self) -> asyncio.Task:
        """Schedule ``run()`` on the running loop without waiting for it."""
        if self._task is None:
            self._task = asyncio.create_task(self.run(), name="primary-store-bootstrap")
        return self._task

    async def stop(self) -> None:
        if self._task is not None and not self._task.done():
            self._task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await self._task
