"""Environment variable and configuration file loading."""

from pathlib import Path
from typing import Any

import yaml


def global_config_path() -> Path:
    """Return the path of the global ~/.recproxy/config.yml file."""
    return Path.home() / ".recproxy" / "config.yml"


def parse_env_line(line: str) -> tuple[str, str] | None:
    """Parse one ``KEY=VALUE`` or ``KEY VALUE`` line.

    Returns None for blank lines, comments, and lines without a value.
    """
    line = line.strip()
    if not line or line.startswith("#"):
        return None

    key, sep, _ = line.partition("=")
    if sep and not any(c.isspace() for c in key.strip()):
        key, value = line.split("=", 1)
    else:
        # KEY VALUE; the value may itself contain "=" (connection strings)
        parts = line.split()
        if len(parts) != 2:
            return None
        key, value = parts

    key = key.strip()
    if not key:
        return None
    # Remove quotes if present
    return key, value.strip().strip("\"'")


def load_env_file(env_path: Path) -> dict[str, str]:
    """Load environment variables from .env file."""
    env_vars = {}
    if env_path.exists():
        with open(env_path) as f:
            for line in f:
                parsed = parse_env_line(line)
                if parsed:
                    key, value = parsed
                    env_vars[key] = value
    return env_vars


def load_global_config() -> dict[str, Any]:
    """Load global configuration from ~/.recproxy/config.yml."""
    config_path = global_config_path()
    if config_path.exists():
        with open(config_path) as f:
            return yaml.safe_load(f) or {}
    return {}


def load_project_config(project_dir: Path | None = None) -> dict[str, str]:
    """Load project-specific configuration from ``<project_dir>/.env``."""
    if project_dir is None:
        project_dir = Path.cwd()
    return load_env_file(project_dir / ".env")
