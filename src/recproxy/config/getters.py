"""Configuration getter functions."""

import os
from pathlib import Path
from typing import Any

from recproxy.exceptions import ProxyConfigError

from .env_loader import load_global_config, load_project_config

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off", "")


def get_config(key: str, project_dir: Path | None = None, default: Any = None) -> Any:
    """
    Get configuration value with priority:
    1. Environment variable
    2. Project .env file
    3. Global config file
    4. Default value

    Args:
        key: Configuration key
        project_dir: Optional project directory
        default: Default value if not found

    Returns:
        Configuration value or default
    """
    # 1. Check environment variable
    env_value = os.environ.get(key)
    if env_value:
        return env_value

    # 2. Check project .env file
    project_config = load_project_config(project_dir)
    if key in project_config:
        return project_config[key]

    # 3. Check global config
    global_config = load_global_config()
    if key in global_config:
        return global_config[key]

    # 4. Return default
    return default


def get_bool(key: str, project_dir: Path | None = None, default: bool = False) -> bool:
    """Get a boolean setting; raises ProxyConfigError on unparseable values."""
    value = get_config(key, project_dir, default=default)
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    raise ProxyConfigError(f"{key} must be a boolean, got {value!r}")


def get_int(key: str, project_dir: Path | None = None, default: int = 0) -> int:
    """Get an integer setting; raises ProxyConfigError on unparseable values."""
    value = get_config(key, project_dir, default=default)
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ProxyConfigError(f"{key} must be an integer, got {value!r}") from None
