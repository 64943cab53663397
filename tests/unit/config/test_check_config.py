import dataclasses

import pytest

from habitat_check.config import (
    DEFAULT_MAX_CONCURRENCY,
    DEFAULT_SUPERVISOR_URL,
    DEFAULT_TIMEOUT_SECONDS,
    CheckConfig,
    ConfigurationError,
)
from habitat_check.config import runtime


def test_defaults():
    config = CheckConfig.from_sources()
    assert config.supervisor_url == DEFAULT_SUPERVISOR_URL == "http://127.0.0.1:9631"
    assert config.services == ()
    assert config.timeout_seconds == DEFAULT_TIMEOUT_SECONDS == 15
    assert config.max_concurrency == DEFAULT_MAX_CONCURRENCY == 1


def test_config_is_immutable():
    config = CheckConfig()
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.timeout_seconds = 30


def test_environment_values_are_used(monkeypatch):
    monkeypatch.setenv("HABITAT_SUPERVISOR_URL", "http://10.0.0.5:9631/")
    monkeypatch.setenv("HABITAT_SERVICES", "redis.default, nginx.prod,redis.default")
    monkeypatch.setenv("HABITAT_CHECK_TIMEOUT", "30")
    monkeypatch.setenv("HABITAT_CHECK_MAX_CONCURRENCY", "4")

    config = CheckConfig.from_sources()

    assert config.supervisor_url == "http://10.0.0.5:9631/"
    assert config.services == ("redis.default", "nginx.prod")
    assert config.timeout_seconds == 30
    assert config.max_concurrency == 4


def test_explicit_values_win_over_environment(monkeypatch):
    monkeypatch.setenv("HABITAT_SUPERVISOR_URL", "http://10.0.0.5:9631")
    monkeypatch.setenv("HABITAT_SERVICES", "nginx.prod")
    monkeypatch.setenv("HABITAT_CHECK_TIMEOUT", "30")

    config = CheckConfig.from_sources(
        supervisor_url="http://127.0.0.1:1234",
        services=["redis.default"],
        timeout_seconds=5,
        max_concurrency=2,
    )

    assert config.supervisor_url == "http://127.0.0.1:1234"
    assert config.services == ("redis.default",)
    assert config.timeout_seconds == 5
    assert config.max_concurrency == 2


def test_dotenv_defaults_are_consulted(monkeypatch, tmp_path):
    dotenv_path = tmp_path / ".env"
    dotenv_path.write_text("HABITAT_CHECK_TIMEOUT=45\n")
    monkeypatch.setattr(runtime, "_DOTENV_CANDIDATES", (dotenv_path,))

    assert CheckConfig.from_sources().timeout_seconds == 45


@pytest.mark.parametrize("value", ["soon", "-1"])
def test_malformed_timeout_raises_configuration_error(monkeypatch, value):
    monkeypatch.setenv("HABITAT_CHECK_TIMEOUT", value)
    with pytest.raises(ConfigurationError):
        CheckConfig.from_sources()
