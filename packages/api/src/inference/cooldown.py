# This project was developed with assistance from AI tools.
"""Provider rate-limit cool-down window."""

import logging
import time
from collections.abc import Callable

from openai import RateLimitError

logger = logging.getLogger(__name__)


def retry_after_seconds(exc: RateLimitError, default: float) -> float:
    """Seconds the provider asked us to wait, or ``default`` when it did not say."""
    response = getattr(exc, "response", None)
    header = response.headers.get("retry-after") if response is not None else None
    if header is None:
        return default
    try:
        return max(float(header), 0.0)
    except ValueError:
        return default


class RateLimitCooldown:
    """While open, callers must not contact the provider."""

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._until = 0.0

    def trip(self, seconds: float) -> None:
        self._until = max(self._until, self._clock() + seconds)
        logger.warning("LLM provider rate limited, pausing calls for %.0fs", seconds)

    @property
    def active(self) -> bool:
        return self._clock() < self._until

    def remaining(self) -> float:
        return max(self._until - self._clock(), 0.0)

    def reset(self) -> None:
        self._until = 0.0
