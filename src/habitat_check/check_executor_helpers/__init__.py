"""Helper modules for the check executor."""

from .multi_service_checker import MultiServiceChecker
from .result_builder import ALL_OK_MESSAGE, NO_SERVICES_MESSAGE, build_result, format_service_line
from .status_aggregator import aggregate_states

__all__ = [
    "ALL_OK_MESSAGE",
    "MultiServiceChecker",
    "NO_SERVICES_MESSAGE",
    "aggregate_states",
    "build_result",
    "format_service_line",
]
