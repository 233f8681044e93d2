# This project was developed with assistance from AI tools.
"""LangFuse observability integration.

When LANGFUSE_PUBLIC_KEY and LANGFUSE_SECRET_KEY are set, LLM calls go
through ``langfuse.openai.AsyncOpenAI``, a drop-in replacement for the
OpenAI SDK client that records every completion as a trace. Otherwise the
plain ``openai.AsyncOpenAI`` is used. Tracing degrades gracefully (plain
client + warning) and never blocks a request.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def _is_configured() -> bool:
    """Return True when both LangFuse keys are set."""
    from .core.config import settings

    return bool(settings.LANGFUSE_PUBLIC_KEY and settings.LANGFUSE_SECRET_KEY)


def get_openai_class() -> type:
    """Return the AsyncOpenAI class to instantiate -- traced when LangFuse is configured."""
    from openai import AsyncOpenAI

    if not _is_configured():
        return AsyncOpenAI

    try:
        from langfuse.openai import AsyncOpenAI as TracedAsyncOpenAI

        return TracedAsyncOpenAI
    except Exception:
        logger.warning("Failed to load LangFuse OpenAI wrapper, tracing disabled", exc_info=True)
        return AsyncOpenAI


def flush_langfuse() -> None:
    """Flush pending LangFuse events.  No-op if unconfigured."""
    if not _is_configured():
        return
    try:
        from langfuse import get_client

        get_client().flush()
    except Exception:
        logger.debug("LangFuse flush failed", exc_info=True)


def log_observability_status() -> None:
    """Log whether LangFuse tracing is active or disabled. Call at startup."""
    from .core.config import settings

    if settings.LANGFUSE_PUBLIC_KEY and settings.LANGFUSE_SECRET_KEY:
        logger.warning(
            "LangFuse tracing: ACTIVE (host=%s)",
            settings.LANGFUSE_HOST or "https://cloud.langfuse.com",
        )
    else:
        logger.warning("LangFuse tracing: DISABLED (keys not configured)")
