"""Decoding of supervisor JSON payloads."""

from typing import Any, List

import aiohttp

from ..check_state import CheckState, parse_health_status
from ..exceptions import DataError
from ..service_identifier import ServiceIdentifier

SERVICE_GROUP_FIELD = "service_group"
STATUS_FIELD = "status"


async def decode_json(response: aiohttp.ClientResponse) -> Any:
    """
    Read and decode a JSON response body.

    The supervisor does not always label its bodies as JSON, so the
    content type is not enforced.

    Raises:
        DataError: If the body is not valid JSON
    """
    try:
        return await response.json(content_type=None)
    except (aiohttp.ContentTypeError, ValueError) as exc:
        raise DataError(f"Invalid JSON body: {exc}") from exc


def extract_service_groups(payload: Any) -> List[ServiceIdentifier]:
    """
    Pull the service group identifiers out of a ``/services`` listing.

    Raises:
        DataError: If the listing is not an array of objects carrying a
            well-formed ``service_group``
    """
    if not isinstance(payload, list):
        raise DataError(f"Expected a JSON array of services, got {type(payload).__name__}")

    services: List[ServiceIdentifier] = []
    for index, entry in enumerate(payload):
        if not isinstance(entry, dict):
            raise DataError(f"Service entry {index} is not an object")
        raw_group = entry.get(SERVICE_GROUP_FIELD)
        if not isinstance(raw_group, str):
            raise DataError(f"Service entry {index} has no {SERVICE_GROUP_FIELD!r} field")
        try:
            services.append(ServiceIdentifier.parse(raw_group))
        except ValueError as exc:
            raise DataError(str(exc), index=index) from exc
    return services


def extract_status(payload: Any) -> CheckState:
    """
    Read the ``status`` field of a health response.

    Unrecognised or missing status words map to UNKNOWN.

    Raises:
        DataError: If the payload is not a JSON object
    """
    if not isinstance(payload, dict):
        raise DataError(f"Expected a JSON object, got {type(payload).__name__}")
    return parse_health_status(payload.get(STATUS_FIELD))
