"""Check result states shared by the validator, executor and CLI."""

from enum import Enum
from typing import Any


class CheckState(Enum):
    """Monitoring check states; the value doubles as the process exit code."""

    OK = 0
    WARNING = 1
    CRITICAL = 2
    UNKNOWN = 3


_STATES_BY_WORD = {state.name.lower(): state for state in CheckState}


def parse_health_status(raw: Any) -> CheckState:
    """
    Map a supervisor status word onto a CheckState.

    Args:
        raw: Value of the ``status`` field from a health response

    Returns:
        Matching CheckState, or UNKNOWN for anything unrecognised
    """
    if not isinstance(raw, str):
        return CheckState.UNKNOWN
    return _STATES_BY_WORD.get(raw.strip().lower(), CheckState.UNKNOWN)


__all__ = ["CheckState", "parse_health_status"]
