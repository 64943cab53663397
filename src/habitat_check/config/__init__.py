"""Configuration value and environment-backed helpers."""

from .check_config import (
    DEFAULT_MAX_CONCURRENCY,
    DEFAULT_SUPERVISOR_URL,
    DEFAULT_TIMEOUT_SECONDS,
    CheckConfig,
)
from .errors import ConfigurationError
from .runtime import env_int, env_list, env_seconds, env_str

__all__ = [
    "CheckConfig",
    "ConfigurationError",
    "DEFAULT_MAX_CONCURRENCY",
    "DEFAULT_SUPERVISOR_URL",
    "DEFAULT_TIMEOUT_SECONDS",
    "env_int",
    "env_list",
    "env_seconds",
    "env_str",
]
