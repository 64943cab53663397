"""
Check executor: one request/aggregate/report cycle against the supervisor.

Enumerates services (unless an explicit list was configured), fetches each
service's health and reduces the results into a single CheckResult.
"""

import logging
from typing import Callable, List

from .args_validator import validate_args
from .check_executor_helpers import MultiServiceChecker, build_result
from .config import CheckConfig
from .exceptions import CheckError
from .health_types import CheckResult
from .service_identifier import ServiceIdentifier
from .supervisor_client import SupervisorClient

logger = logging.getLogger(__name__)

PLUGIN_NAME = "habitat-check"

ClientFactory = Callable[[str, int], SupervisorClient]


def _explicit_services(config: CheckConfig) -> List[ServiceIdentifier]:
    return [ServiceIdentifier.parse(service) for service in config.services]


async def execute_check(config: CheckConfig, client_factory: ClientFactory = SupervisorClient) -> CheckResult:
    """
    Query the supervisor and aggregate service health.

    Args:
        config: Validated check configuration
        client_factory: Builds the supervisor client from (base_url, timeout_seconds)

    Returns:
        Aggregated CheckResult

    Raises:
        CheckError: At CRITICAL level when the service listing fails
    """
    async with client_factory(config.supervisor_url, config.timeout_seconds) as client:
        if config.services:
            services = _explicit_services(config)
            logger.debug("Checking %d explicitly configured services", len(services))
        else:
            services = await client.list_services()

        checker = MultiServiceChecker(client.fetch_health, max_concurrency=config.max_concurrency)
        healths = await checker.check_multiple_services(services)

    result = build_result(healths)
    logger.info("Checked %d services; overall state %s", len(healths), result.state.name)
    return result


async def run_check(config: CheckConfig, client_factory: ClientFactory = SupervisorClient) -> CheckResult:
    """
    Validate the configuration, then execute the check.

    CheckErrors become a result at the error's state so callers always get
    something to report.
    """
    try:
        validate_args(config)
        return await execute_check(config, client_factory=client_factory)
    except CheckError as exc:
        logger.debug("Check aborted at %s: %s", exc.state.name, exc)
        return CheckResult(state=exc.state, message=f"{PLUGIN_NAME} {exc.state.name}: {exc}")


__all__ = ["PLUGIN_NAME", "execute_check", "run_check"]
