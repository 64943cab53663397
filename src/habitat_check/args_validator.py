"""Pre-flight validation of the check configuration. No network access."""

from .config import CheckConfig
from .exceptions import CheckError
from .http_utils import ensure_http_url
from .service_identifier import ServiceIdentifier


def validate_args(config: CheckConfig) -> None:
    """
    Reject configuration that cannot produce a meaningful check.

    Args:
        config: Check configuration built at startup

    Raises:
        CheckError: At WARNING level for an unusable URL, a malformed
            service identifier, or a non-positive timeout/concurrency
    """
    try:
        ensure_http_url(config.supervisor_url)
    except ValueError as exc:
        raise CheckError.invalid_supervisor_url(config.supervisor_url, str(exc)) from exc

    for service in config.services:
        try:
            ServiceIdentifier.parse(service)
        except ValueError as exc:
            raise CheckError.malformed_service(service) from exc

    if config.timeout_seconds <= 0:
        raise CheckError.invalid_setting("timeout", config.timeout_seconds, "Must be a positive number of seconds")
    if config.max_concurrency < 1:
        raise CheckError.invalid_setting("max-concurrency", config.max_concurrency, "Must be at least 1")


__all__ = ["validate_args"]
