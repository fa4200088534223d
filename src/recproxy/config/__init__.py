"""
Configuration management for recproxy.

Supports multiple configuration sources in order of priority:
1. Environment variables (highest priority)
2. Project .env file (<project>/.env)
3. Global config file (~/.recproxy/config.yml)
4. Default values (lowest priority)
"""

from .env_loader import (
    global_config_path,
    load_env_file,
    load_global_config,
    load_project_config,
    parse_env_line,
)
from .getters import get_bool, get_config, get_int
from .settings import ENV_KEYS, ProxySettings, get_proxy_settings

__all__ = [
    # env_loader
    "global_config_path",
    "load_env_file",
    "load_global_config",
    "load_project_config",
    "parse_env_line",
    # getters
    "get_bool",
    "get_config",
    "get_int",
    # settings
    "ENV_KEYS",
    "ProxySettings",
    "get_proxy_settings",
]
