"""Exception classes for the habitat check.

Exception classes support two patterns:
1. No-argument raise: raise DataError()
2. Contextual attributes: err = DataError(field="x", value=123); raise err
"""

from typing import Any

from .check_state import CheckState


class ApplicationError(Exception):
    """Base exception for all application errors.

    Supports keyword arguments that are stored as attributes for debugging.
    """

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = self.__class__.__doc__ or "Application error occurred"
        super().__init__(message)
        for key, value in kwargs.items():
            setattr(self, key, value)


class DataError(ApplicationError):
    """Data processing or parsing error."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = "Data processing or parsing error"
        super().__init__(message, **kwargs)


class CheckError(ApplicationError):
    """Check could not complete; reported at ``state``."""

    def __init__(self, message: str = "", *, state: CheckState = CheckState.CRITICAL, **kwargs: Any) -> None:
        if not message:
            message = "Check failed"
        super().__init__(message, **kwargs)
        self.state = state

    @classmethod
    def invalid_supervisor_url(cls, url: str, reason: str) -> "CheckError":
        return cls(f"Failed to parse supervisor URL {url}: {reason}", state=CheckState.WARNING, url=url)

    @classmethod
    def malformed_service(cls, service: str) -> "CheckError":
        return cls(
            f'--service {service!r} value malformed should be "service_name.service_group"',
            state=CheckState.WARNING,
            service=service,
        )

    @classmethod
    def invalid_setting(cls, name: str, value: Any, reason: str) -> "CheckError":
        return cls(f"Invalid value for {name}: {value!r}. {reason}", state=CheckState.WARNING, setting=name)

    @classmethod
    def enumeration_failed(cls, url: str, reason: str) -> "CheckError":
        return cls(f"Failed to list services from {url}: {reason}", state=CheckState.CRITICAL, url=url)

    @classmethod
    def enumeration_decode_failed(cls, url: str, reason: str) -> "CheckError":
        return cls(f"Failed to decode service response from {url}: {reason}", state=CheckState.CRITICAL, url=url)


__all__ = ["ApplicationError", "CheckError", "DataError"]
