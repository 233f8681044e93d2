# This project was developed with assistance from AI tools.
"""Inference module -- LLM client, task config loading, and rate-limit cool-down."""

from .client import get_completion, get_json_completion
from .config import get_task_config, get_task_names
from .cooldown import RateLimitCooldown, retry_after_seconds

__all__ = [
    "RateLimitCooldown",
    "get_completion",
    "get_json_completion",
    "get_task_config",
    "get_task_names",
    "retry_after_seconds",
]
