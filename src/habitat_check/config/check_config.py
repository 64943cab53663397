"""Immutable configuration for a single check run."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence

from .runtime import env_int, env_list, env_seconds, env_str

DEFAULT_SUPERVISOR_URL = "http://127.0.0.1:9631"
DEFAULT_TIMEOUT_SECONDS = 15
DEFAULT_MAX_CONCURRENCY = 1

SUPERVISOR_URL_ENV = "HABITAT_SUPERVISOR_URL"
SERVICES_ENV = "HABITAT_SERVICES"
TIMEOUT_ENV = "HABITAT_CHECK_TIMEOUT"
MAX_CONCURRENCY_ENV = "HABITAT_CHECK_MAX_CONCURRENCY"


@dataclass(frozen=True)
class CheckConfig:
    """Settings for one supervisor health check; built once at startup."""

    supervisor_url: str = DEFAULT_SUPERVISOR_URL
    services: tuple[str, ...] = field(default_factory=tuple)
    timeout_seconds: int = DEFAULT_TIMEOUT_SECONDS
    max_concurrency: int = DEFAULT_MAX_CONCURRENCY

    @classmethod
    def from_sources(
        cls,
        *,
        supervisor_url: Optional[str] = None,
        services: Optional[Sequence[str]] = None,
        timeout_seconds: Optional[int] = None,
        max_concurrency: Optional[int] = None,
    ) -> "CheckConfig":
        """
        Build a config from explicit values, falling back to the environment.

        Explicit (command-line) values win; anything left unset is read from
        the environment or ``.env`` files, then from the built-in defaults.

        Raises:
            ConfigurationError: If an environment value cannot be coerced
        """
        if supervisor_url is None:
            supervisor_url = env_str(SUPERVISOR_URL_ENV, DEFAULT_SUPERVISOR_URL)
        if not services:
            services = env_list(SERVICES_ENV, or_value=())
        if timeout_seconds is None:
            timeout_seconds = env_seconds(TIMEOUT_ENV, DEFAULT_TIMEOUT_SECONDS)
        if max_concurrency is None:
            max_concurrency = env_int(MAX_CONCURRENCY_ENV, DEFAULT_MAX_CONCURRENCY)

        return cls(
            supervisor_url=supervisor_url,
            services=tuple(services),
            timeout_seconds=timeout_seconds,
            max_concurrency=max_concurrency,
        )


__all__ = [
    "CheckConfig",
    "DEFAULT_MAX_CONCURRENCY",
    "DEFAULT_SUPERVISOR_URL",
    "DEFAULT_TIMEOUT_SECONDS",
]
