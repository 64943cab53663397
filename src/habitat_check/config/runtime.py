from __future__ import annotations

"""Runtime helpers for working with environment-backed configuration."""


import os
from pathlib import Path
from typing import Optional, Sequence

from .errors import ConfigurationError

_DOTENV_CANDIDATES = (Path(".env"), Path.home() / ".habitat_check.env")

_DEFAULT_VALUES: dict[str, str] | None = None


def _load_default_values() -> dict[str, str]:
    """Load configuration values from .env-style files."""
    from .runtime_helpers import DotenvLoader

    global _DEFAULT_VALUES
    if _DEFAULT_VALUES is not None:
        return _DEFAULT_VALUES

    defaults: dict[str, str] = {}

    for path in _DOTENV_CANDIDATES:
        for key, value in DotenvLoader.load_from_file(path).items():
            if key not in defaults:
                defaults[key] = value

    _DEFAULT_VALUES = defaults
    return defaults


def _default_value(name: str) -> Optional[str]:
    """Return the default value for *name* if declared in config."""

    defaults = _load_default_values()
    return defaults.get(name)


def _normalize(value: str | None, *, strip: bool) -> str | None:
    if value is None:
        return None
    return value.strip() if strip else value


def env_str(
    name: str,
    or_value: str | None = None,
    *,
    required: bool = False,
    strip: bool = True,
    allow_blank: bool = False,
) -> str | None:
    """Fetch an environment variable as a string with validation."""

    value = _normalize(os.getenv(name), strip=strip)

    if value is None or (not allow_blank and value == ""):
        configured_default = _default_value(name)
        if configured_default is not None:
            value = _normalize(configured_default, strip=strip)

    if value is None or (not allow_blank and value == ""):
        if required:
            raise ConfigurationError(f"Required environment variable {name!r} is not set")
        return or_value
    return value


def env_int(name: str, or_value: int | None = None, *, required: bool = False) -> int | None:
    """Fetch an environment variable and coerce it to ``int``."""

    raw = env_str(name, strip=True, allow_blank=False)
    if raw is None:
        if required and or_value is None:
            raise ConfigurationError(f"Required environment variable {name!r} is not set")
        return or_value
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"Environment variable {name!r} must be an integer (got {raw!r})") from exc


def env_list(
    name: str,
    *,
    or_value: Sequence[str] | None = None,
    separator: str = ",",
    strip_items: bool = True,
    unique: bool = True,
    required: bool = False,
) -> tuple[str, ...] | None:
    """Fetch a delimited list from the environment."""
    from .runtime_helpers import ListNormalizer

    raw = env_str(name, strip=True, allow_blank=False)
    if raw is None or raw == "":
        if required and not or_value:
            raise ConfigurationError(f"Required environment variable {name!r} is not set")
        if or_value is None:
            return None
        return tuple(or_value)

    normalized = tuple(ListNormalizer.split_and_normalize(raw, separator, strip_items))

    if not normalized and required:
        raise ConfigurationError(f"Environment variable {name!r} must contain at least one value")

    if unique:
        return ListNormalizer.deduplicate_preserving_order(normalized)

    return normalized


def env_seconds(name: str, or_value: int | None = None, *, required: bool = False) -> int | None:
    """Convenience wrapper for fetching durations stored as seconds."""

    value = env_int(name, or_value=or_value, required=required)
    if value is None:
        return None
    if value < 0:
        raise ConfigurationError(f"Environment variable {name!r} must be non-negative (got {value})")
    return value
