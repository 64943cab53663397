"""
Centralized logging configuration for the check.

Standard output carries the check result consumed by the monitoring
pipeline, so all diagnostics go to stderr through a single console handler.
"""

import logging
import sys
import threading
from typing import Optional

from .config import ConfigurationError, env_str

# Thread-safe lock for logging configuration
_config_lock = threading.Lock()

LOG_LEVEL_ENV = "HABITAT_CHECK_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"

_TECHNICAL_FORMAT = "%(asctime)s.%(msecs)03d - %(name)s - %(levelname)s - %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _resolve_level(level: Optional[str]) -> int:
    name = level if level else env_str(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)
    resolved = logging.getLevelName(str(name).upper())
    if not isinstance(resolved, int):
        raise ConfigurationError.invalid_value("log level", name, "Use DEBUG, INFO, WARNING, ERROR or CRITICAL")
    return resolved


def _close_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        try:
            handler.close()
        except OSError as e:
            logging.getLogger(__name__).debug("Handler close failed: %s", e)
        logger.removeHandler(handler)


def _build_console_handler(level: int) -> logging.Handler:
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter(_TECHNICAL_FORMAT, _DATE_FORMAT))
    console_handler.setLevel(level)
    return console_handler


def _suppress_noisy_third_parties() -> None:
    logging.getLogger("asyncio").setLevel(logging.WARNING)
    logging.getLogger("aiohttp").setLevel(logging.WARNING)


def setup_logging(level: Optional[str] = None) -> None:
    """
    Configure logging for the check process.

    Args:
        level: Level name; falls back to HABITAT_CHECK_LOG_LEVEL, then WARNING

    Raises:
        ConfigurationError: If the level name is not recognised
    """
    resolved_level = _resolve_level(level)

    with _config_lock:
        root_logger = logging.getLogger()
        _close_handlers(root_logger)
        root_logger.addHandler(_build_console_handler(resolved_level))
        root_logger.setLevel(resolved_level)
        _suppress_noisy_third_parties()


__all__ = ["setup_logging", "LOG_LEVEL_ENV", "DEFAULT_LOG_LEVEL"]
