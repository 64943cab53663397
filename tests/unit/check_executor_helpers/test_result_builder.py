from habitat_check.check_state import CheckState
from habitat_check.check_executor_helpers.result_builder import (
    ALL_OK_MESSAGE,
    NO_SERVICES_MESSAGE,
    build_result,
    format_service_line,
)
from habitat_check.health_types import ServiceHealth
from habitat_check.service_identifier import ServiceIdentifier

REDIS = ServiceIdentifier("redis", "default")
NGINX = ServiceIdentifier("nginx", "prod")


def test_no_services_loaded():
    result = build_result([])
    assert result.state is CheckState.OK
    assert result.lines == []
    assert result.message == NO_SERVICES_MESSAGE == "no services loaded"
    assert result.output_lines() == ["no services loaded"]


def test_all_ok():
    result = build_result([ServiceHealth(REDIS, CheckState.OK), ServiceHealth(NGINX, CheckState.OK)])
    assert result.state is CheckState.OK
    assert result.lines == []
    assert result.message == ALL_OK_MESSAGE == "all health checks OK"
    assert result.exit_code == 0


def test_warning_emits_line_for_warning_service_only():
    result = build_result([ServiceHealth(REDIS, CheckState.WARNING), ServiceHealth(NGINX, CheckState.OK)])
    assert result.state is CheckState.WARNING
    assert result.lines == ["redis.default WARNING"]
    assert result.message is None
    assert result.output_lines() == ["redis.default WARNING"]
    assert result.exit_code == 1


def test_lines_keep_input_order():
    result = build_result(
        [
            ServiceHealth(NGINX, CheckState.UNKNOWN, error_message="HTTP 404"),
            ServiceHealth(REDIS, CheckState.CRITICAL),
        ]
    )
    assert result.state is CheckState.CRITICAL
    assert result.lines == ["nginx.prod UNKNOWN", "redis.default CRITICAL"]


def test_format_service_line():
    assert format_service_line(ServiceHealth(REDIS, CheckState.UNKNOWN)) == "redis.default UNKNOWN"
