# This project was developed with assistance from AI tools.
"""Assistant task configuration loader.

Reads config/models.yaml, substitutes ${ENV_VAR:-default} placeholders,
validates each task entry, and supports mtime-based hot-reload so prompt
settings change without restarting the server.
"""

import logging
import os
import re
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

# Load .env into os.environ so YAML ${VAR} placeholders resolve correctly.
# pydantic-settings reads .env into its Settings object but doesn't set
# os.environ; the YAML config loader needs actual env vars.
load_dotenv()

logger = logging.getLogger(__name__)

_CONFIG_PATH = Path(__file__).resolve().parents[4] / "config" / "models.yaml"
_cached_config: dict[str, Any] | None = None
_cached_mtime: float = 0.0

_ENV_VAR_PATTERN = re.compile(r"\$\{(\w+)(?::-(.*?))?\}")

REQUIRED_TASK_FIELDS = {"provider", "model_name", "endpoint"}
_NUMERIC_FIELDS = {"temperature": float, "max_tokens": int, "timeout": float, "max_retries": int}


def _substitute_env_vars(value: str) -> str:
    """Replace ${VAR:-default} patterns with environment values."""

    def _replace(match: re.Match) -> str:
        var_name = match.group(1)
        default = match.group(2) or ""
        return os.environ.get(var_name, default)

    return _ENV_VAR_PATTERN.sub(_replace, value)


def _resolve_env_vars(obj: Any) -> Any:
    """Recursively resolve env var placeholders in a config tree."""
    if isinstance(obj, str):
        return _substitute_env_vars(obj)
    if isinstance(obj, dict):
        return {k: _resolve_env_vars(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_resolve_env_vars(item) for item in obj]
    return obj


def _coerce_numbers(entry: dict[str, Any], name: str) -> None:
    """Placeholders always resolve to strings; turn numeric settings back into numbers."""
    for key, cast in _NUMERIC_FIELDS.items():
        if key in entry:
            try:
                entry[key] = cast(entry[key])
            except (TypeError, ValueError) as exc:
                raise ValueError(f"Task '{name}' has a non-numeric {key}: {entry[key]!r}") from exc


def _validate_config(config: dict[str, Any]) -> None:
    """Validate the task section and fold defaults into every task."""
    if not isinstance(config, dict):
        raise ValueError("models.yaml must be a mapping")

    tasks = config.get("tasks")
    if not tasks or not isinstance(tasks, dict):
        raise ValueError("models.yaml must contain a 'tasks' section with at least one task")

    defaults = config.get("defaults") or {}
    if not isinstance(defaults, dict):
        raise ValueError("models.yaml 'defaults' must be a mapping")

    for name, task in tasks.items():
        if not isinstance(task, dict):
            raise ValueError(f"Task '{name}' must be a mapping")
        for key, value in defaults.items():
            task.setdefault(key, value)
        missing = REQUIRED_TASK_FIELDS - set(task.keys())
        if missing:
            raise ValueError(f"Task '{name}' is missing required fields: {missing}")
        _coerce_numbers(task, name)


def load_config(path: Path | None = None) -> dict[str, Any]:
    """Load and validate models.yaml from disk."""
    config_path = path or _CONFIG_PATH
    if not config_path.exists():
        raise FileNotFoundError(f"Model config not found: {config_path}")

    raw = config_path.read_text()
    config = yaml.safe_load(raw)
    config = _resolve_env_vars(config)
    _validate_config(config)
    return config


def get_config(path: Path | None = None) -> dict[str, Any]:
    """Return cached config, reloading if the file's mtime has changed."""
    global _cached_config, _cached_mtime  # noqa: PLW0603
    config_path = path or _CONFIG_PATH

    try:
        current_mtime = config_path.stat().st_mtime
    except FileNotFoundError:
        if _cached_config is not None:
            logger.warning("Config file disappeared, using cached config")
            return _cached_config
        raise

    if _cached_config is None or current_mtime > _cached_mtime:
        logger.info("Loading model config from %s", config_path)
        try:
            loaded = load_config(config_path)
        except (yaml.YAMLError, ValueError):
            if _cached_config is None:
                raise
            logger.warning("Invalid model config in %s, keeping previous config", config_path)
            return _cached_config
        _cached_config = loaded
        _cached_mtime = current_mtime

        # Invalidate cached HTTP clients so they pick up new endpoints/keys
        from .client import clear_client_cache

        clear_client_cache()

    return _cached_config


def get_task_config(task: str, path: Path | None = None) -> dict[str, Any]:
    """Return config for one assistant task (e.g. 'chat', 'profile_extraction')."""
    tasks = get_config(path)["tasks"]
    if task not in tasks:
        raise KeyError(f"Unknown assistant task '{task}'. Available: {list(tasks.keys())}")
    return tasks[task]


def get_task_names(path: Path | None = None) -> list[str]:
    """Return the names of all configured assistant tasks."""
    return list(get_config(path)["tasks"].keys())
