"""Reduce per-service states into the overall check state."""

from typing import Iterable

from ..check_state import CheckState

_CRITICAL_STATES = (CheckState.CRITICAL, CheckState.UNKNOWN)


def aggregate_states(states: Iterable[CheckState]) -> CheckState:
    """
    Collapse per-service states into one.

    Any CRITICAL or UNKNOWN service makes the check CRITICAL; otherwise any
    WARNING makes it WARNING; otherwise (including no services) it is OK.
    """
    has_warning = False
    for state in states:
        if state in _CRITICAL_STATES:
            return CheckState.CRITICAL
        if state == CheckState.WARNING:
            has_warning = True
    return CheckState.WARNING if has_warning else CheckState.OK
