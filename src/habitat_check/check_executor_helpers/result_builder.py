"""Build the CheckResult handed back to the monitoring pipeline."""

from typing import Sequence

from ..check_state import CheckState
from ..health_types import CheckResult, ServiceHealth
from .status_aggregator import aggregate_states

NO_SERVICES_MESSAGE = "no services loaded"
ALL_OK_MESSAGE = "all health checks OK"


def format_service_line(health: ServiceHealth) -> str:
    return f"{health.service} {health.status.name}"


def build_result(healths: Sequence[ServiceHealth]) -> CheckResult:
    """
    Aggregate service healths into a result.

    Args:
        healths: Per-service health, in the order the services were checked

    Returns:
        CheckResult with one line per non-OK service, in input order
    """
    state = aggregate_states(health.status for health in healths)
    lines = [format_service_line(health) for health in healths if not health.is_ok]

    message = None
    if state == CheckState.OK:
        message = ALL_OK_MESSAGE if healths else NO_SERVICES_MESSAGE

    return CheckResult(state=state, lines=lines, message=message)
