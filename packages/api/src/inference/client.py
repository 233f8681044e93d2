# This project was developed with assistance from AI tools.
"""Thin OpenAI-compatible LLM client.

Wraps the openai Python SDK with configurable base_url so it works
against any OpenAI-compatible endpoint (OpenAI, vLLM, LlamaStack, etc.).
Sampling settings (temperature, max_tokens, JSON mode) come from the task
entry in config/models.yaml; callers may override them per call.
"""

import json
import logging
import re
from typing import Any

from openai import AsyncOpenAI

from ..observability import get_openai_class
from .config import get_task_config

logger = logging.getLogger(__name__)

# Per-task client cache (avoids re-creating HTTP connections)
_clients: dict[str, AsyncOpenAI] = {}

_FENCE_RE = re.compile(r"^```(?:json)?\s*\n?(.*?)\n?\s*```$", re.DOTALL)


def _get_client(task: str) -> AsyncOpenAI:
    """Return a cached AsyncOpenAI client for the given task."""
    if task not in _clients:
        task_cfg = get_task_config(task)
        client_cls = get_openai_class()
        _clients[task] = client_cls(
            base_url=task_cfg["endpoint"],
            api_key=task_cfg.get("api_key") or "not-needed",
            timeout=task_cfg.get("timeout", 60.0),
            max_retries=task_cfg.get("max_retries", 3),
        )
    return _clients[task]


def clear_client_cache() -> None:
    """Clear cached clients (useful after config reload)."""
    _clients.clear()


def _strip_json_fences(text: str) -> str:
    """Remove markdown code fences wrapping JSON output.

    Many LLMs wrap JSON in ```json ... ``` blocks even in JSON mode on
    non-OpenAI backends. This strips the fences so json.loads() succeeds.
    """
    stripped = text.strip()
    m = _FENCE_RE.match(stripped)
    return m.group(1).strip() if m else stripped


async def get_completion(
    messages: list[dict[str, str]],
    task: str = "chat",
    **kwargs: Any,
) -> str:
    """Get a non-streaming completion using the settings of ``task``."""
    client = _get_client(task)
    task_cfg = get_task_config(task)

    params: dict[str, Any] = {}
    if "temperature" in task_cfg:
        params["temperature"] = task_cfg["temperature"]
    if "max_tokens" in task_cfg:
        params["max_tokens"] = task_cfg["max_tokens"]
    if task_cfg.get("json_mode"):
        params["response_format"] = {"type": "json_object"}
    params.update(kwargs)

    response = await client.chat.completions.create(
        model=task_cfg["model_name"],
        messages=messages,
        **params,
    )
    return response.choices[0].message.content or ""


async def get_json_completion(
    messages: list[dict[str, str]],
    task: str,
    **kwargs: Any,
) -> dict[str, Any]:
    """Get a completion and parse it as a JSON object.

    Raises:
        ValueError: the model returned something that is not a JSON object.
    """
    content = await get_completion(messages, task, **kwargs)
    try:
        parsed = json.loads(_strip_json_fences(content) or "{}")
    except json.JSONDecodeError as exc:
        raise ValueError(f"LLM returned non-JSON for task '{task}'") from exc
    if not isinstance(parsed, dict):
        raise ValueError(f"LLM returned {type(parsed).__name__} instead of an object for '{task}'")
    return parsed
