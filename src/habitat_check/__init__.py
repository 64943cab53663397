"""
Supervisor service health check.

Queries a local process supervisor's HTTP API, reads each managed service's
health and reduces them to a single OK/WARNING/CRITICAL/UNKNOWN result.
"""

from .args_validator import validate_args
from .check_executor import execute_check, run_check
from .check_state import CheckState, parse_health_status
from .config import CheckConfig, ConfigurationError
from .exceptions import CheckError
from .health_types import CheckResult, ServiceHealth
from .service_identifier import ServiceIdentifier
from .supervisor_client import SupervisorClient

__all__ = [
    "CheckConfig",
    "CheckError",
    "CheckResult",
    "CheckState",
    "ConfigurationError",
    "ServiceHealth",
    "ServiceIdentifier",
    "SupervisorClient",
    "execute_check",
    "parse_health_status",
    "run_check",
    "validate_args",
]
