"""Multi-service health checking with a bounded number of requests in flight."""

import asyncio
import logging
from typing import Callable, Coroutine, List, Sequence

from ..check_state import CheckState
from ..health_types import ServiceHealth
from ..service_identifier import ServiceIdentifier

logger = logging.getLogger(__name__)


class MultiServiceChecker:
    """Checks health for multiple services, at most ``max_concurrency`` at a time."""

    def __init__(
        self,
        check_service_health_fn: Callable[[ServiceIdentifier], Coroutine[None, None, ServiceHealth]],
        max_concurrency: int = 1,
    ):
        """
        Initialize multi-service checker.

        Args:
            check_service_health_fn: Function to check health of a single service
            max_concurrency: Requests allowed in flight; 1 means strictly sequential
        """
        if max_concurrency < 1:
            raise ValueError(f"max_concurrency must be at least 1 (got {max_concurrency})")
        self.check_service_health_fn = check_service_health_fn
        self.max_concurrency = max_concurrency

    async def check_multiple_services(self, services: Sequence[ServiceIdentifier]) -> List[ServiceHealth]:
        """
        Check health for every service.

        Args:
            services: Services to check

        Returns:
            ServiceHealth per service, in the same order as ``services``
        """
        semaphore = asyncio.Semaphore(self.max_concurrency)

        async def _bounded(service: ServiceIdentifier) -> ServiceHealth:
            async with semaphore:
                return await self.check_service_health_fn(service)

        results = await asyncio.gather(*(_bounded(service) for service in services), return_exceptions=True)

        healths: List[ServiceHealth] = []
        for service, result in zip(services, results):
            if isinstance(result, Exception):
                logger.error("Error checking health for %s: %s", service, result)
                healths.append(ServiceHealth(service, CheckState.UNKNOWN, error_message=str(result)))
            elif isinstance(result, BaseException):
                raise result
            else:
                healths.append(result)

        return healths
