"""Helpers for loading the user configuration file (~/.repodig/config.json)."""

from __future__ import annotations

import json
import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Final

CONFIG_DIR = Path.home() / ".repodig"
CONFIG_FILE = CONFIG_DIR / "config.json"

DEFAULT_LIMIT: Final[int] = 10
DEFAULT_CLONE_TIMEOUT: Final[float] = 30.0

WORK_DIR_ENV_VAR: Final[str] = "REPODIG_WORK_DIR"
WORK_DIR_CONFIG_KEY: Final[str] = "work_dir"


@lru_cache(maxsize=1)
def load_config() -> dict[str, Any]:
    """Load configuration data from disk (cached)."""

    if not CONFIG_FILE.exists():
        return {}

    try:
        raw = CONFIG_FILE.read_text()
    except OSError:
        return {}

    try:
        data = json.loads(raw)
    except ValueError:
        return {}

    if isinstance(data, dict):
        return data

    return {}


def get_config_value(key: str, default: Any | None = None) -> Any | None:
    """Fetch a configuration value by key."""

    return load_config().get(key, default)


def reload_config() -> None:
    """Force the cached configuration to be reloaded on next access."""

    load_config.cache_clear()


def _positive_number(value: Any) -> bool:
    # bool is an int subclass; `true` in the config is not a number
    return isinstance(value, (int, float)) and not isinstance(value, bool) and value > 0


def get_default_limit() -> int:
    """Number of repositories to analyze when --limit is not usable."""

    value = get_config_value("default_limit")
    if isinstance(value, int) and _positive_number(value):
        return value
    return DEFAULT_LIMIT


def get_clone_timeout() -> float:
    """Seconds a single shallow clone may take before it is abandoned."""

    value = get_config_value("clone_timeout")
    if _positive_number(value):
        return float(value)
    return DEFAULT_CLONE_TIMEOUT


def get_work_base() -> Path | None:
    """Resolve the parent directory for per-run clone roots via env/config.

    Returns None when neither is set, or when the setting names something
    that exists but is not a directory, meaning the system temp directory.
    """

    raw_value = os.environ.get(WORK_DIR_ENV_VAR) or get_config_value(
        WORK_DIR_CONFIG_KEY
    )
    if not raw_value or not isinstance(raw_value, str):
        return None

    candidate = Path(raw_value).expanduser()
    if candidate.exists() and not candidate.is_dir():
        return None
    return candidate
