"""Root pytest configuration and shared fixtures."""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, List, Optional
from unittest.mock import AsyncMock, MagicMock

import pytest

from habitat_check.check_state import CheckState
from habitat_check.config import runtime
from habitat_check.health_types import ServiceHealth
from habitat_check.service_identifier import ServiceIdentifier

_CHECK_ENV_VARS = (
    "HABITAT_SUPERVISOR_URL",
    "HABITAT_SERVICES",
    "HABITAT_CHECK_TIMEOUT",
    "HABITAT_CHECK_MAX_CONCURRENCY",
    "HABITAT_CHECK_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch):
    """Keep real environment variables and .env files out of every test."""
    for name in _CHECK_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(runtime, "_DOTENV_CANDIDATES", ())
    runtime._DEFAULT_VALUES = None
    yield
    runtime._DEFAULT_VALUES = None


def make_response_cm(status: int = 200, payload: Any = None, json_error: Optional[BaseException] = None) -> MagicMock:
    """Build the async context manager returned by ``session.get``."""
    mock_response = MagicMock()
    mock_response.status = status
    if json_error is not None:
        mock_response.json = AsyncMock(side_effect=json_error)
    else:
        mock_response.json = AsyncMock(return_value=payload)

    mock_get_cm = MagicMock()
    mock_get_cm.__aenter__ = AsyncMock(return_value=mock_response)
    mock_get_cm.__aexit__ = AsyncMock(return_value=None)
    return mock_get_cm


def make_failing_cm(error: BaseException) -> MagicMock:
    """Build a ``session.get`` context manager whose entry raises *error*."""
    mock_get_cm = MagicMock()
    mock_get_cm.__aenter__ = AsyncMock(side_effect=error)
    mock_get_cm.__aexit__ = AsyncMock(return_value=None)
    return mock_get_cm


@pytest.fixture
def mock_session() -> Callable[[Dict[str, MagicMock]], MagicMock]:
    """Return a factory for sessions that route ``get(url)`` through a URL map."""

    def _factory(routes: Dict[str, MagicMock]) -> MagicMock:
        session = MagicMock()

        def _get(url, *args, **kwargs):
            if url not in routes:
                raise AssertionError(f"Unexpected request to {url}")
            return routes[url]

        session.get.side_effect = _get
        return session

    return _factory


class FakeSupervisorClient:
    """In-memory stand-in for SupervisorClient."""

    def __init__(
        self,
        base_url: str,
        timeout_seconds: int,
        *,
        services: Optional[Iterable[str]] = None,
        statuses: Optional[Dict[str, CheckState]] = None,
        list_error: Optional[BaseException] = None,
        health_errors: Optional[Dict[str, BaseException]] = None,
    ):
        self.base_url = base_url
        self.timeout_seconds = timeout_seconds
        self._services = [ServiceIdentifier.parse(raw) for raw in (services or [])]
        self._statuses = statuses or {}
        self._list_error = list_error
        self._health_errors = health_errors or {}
        self.list_calls = 0
        self.health_calls: List[str] = []
        self.closed = False

    async def __aenter__(self) -> "FakeSupervisorClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        self.closed = True

    async def list_services(self) -> List[ServiceIdentifier]:
        self.list_calls += 1
        if self._list_error is not None:
            raise self._list_error
        return list(self._services)

    async def fetch_health(self, service: ServiceIdentifier) -> ServiceHealth:
        key = str(service)
        self.health_calls.append(key)
        if key in self._health_errors:
            raise self._health_errors[key]
        if key not in self._statuses:
            return ServiceHealth(service, CheckState.UNKNOWN, error_message="HTTP 404")
        return ServiceHealth(service, self._statuses[key])


@pytest.fixture
def fake_client_factory():
    """Return a factory that records the FakeSupervisorClient it builds."""
    created: List[FakeSupervisorClient] = []

    def _factory(**kwargs):
        def _build(base_url: str, timeout_seconds: int) -> FakeSupervisorClient:
            client = FakeSupervisorClient(base_url, timeout_seconds, **kwargs)
            created.append(client)
            return client

        _build.created = created
        return _build

    return _factory


@pytest.fixture
def response_cm():
    return make_response_cm


@pytest.fixture
def failing_cm():
    return make_failing_cm
