"""
Supervisor API client.

Thin coordinator over one aiohttp session; request handling lives in
``supervisor_client_helpers``.
"""

import logging
from typing import List, Optional

import aiohttp
from aiohttp import ClientTimeout

from .health_types import ServiceHealth
from .service_identifier import ServiceIdentifier
from .supervisor_client_helpers import fetch_health, list_services

logger = logging.getLogger(__name__)

DEFAULT_HEADERS = {"Accept": "application/json"}


class SupervisorClient:
    """Async client for the supervisor's ``/services`` endpoints."""

    def __init__(self, base_url: str, timeout_seconds: int):
        """
        Initialize the client.

        Args:
            base_url: Supervisor base URL; a trailing slash is tolerated
            timeout_seconds: Total time budget for each request
        """
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self._session: Optional[aiohttp.ClientSession] = None

    async def __aenter__(self) -> "SupervisorClient":
        self._session = aiohttp.ClientSession(
            timeout=ClientTimeout(total=self.timeout_seconds),
            headers=DEFAULT_HEADERS,
        )
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def close(self) -> None:
        if self._session is not None:
            await self._session.close()
            self._session = None

    def _require_session(self) -> aiohttp.ClientSession:
        if self._session is None:
            raise RuntimeError("SupervisorClient used outside of 'async with'")
        return self._session

    async def list_services(self) -> List[ServiceIdentifier]:
        """Enumerate loaded services; raises CheckError (CRITICAL) on failure."""
        return await list_services(self._require_session(), self.base_url)

    async def fetch_health(self, service: ServiceIdentifier) -> ServiceHealth:
        """Fetch one service's health; failures come back as UNKNOWN."""
        return await fetch_health(self._require_session(), self.base_url, service)


__all__ = ["SupervisorClient", "DEFAULT_HEADERS"]
