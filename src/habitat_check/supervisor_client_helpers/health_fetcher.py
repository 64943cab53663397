"""Per-service health retrieval."""

import logging

import aiohttp

from ..check_state import CheckState
from ..exceptions import DataError
from ..health_types import ServiceHealth
from ..http_utils import join_url
from ..network_errors import REQUEST_ERROR_TYPES, is_network_unreachable_error
from ..service_identifier import ServiceIdentifier
from .response_decoder import decode_json, extract_status

logger = logging.getLogger(__name__)

HTTP_OK = 200


async def fetch_health(
    session: aiohttp.ClientSession, base_url: str, service: ServiceIdentifier
) -> ServiceHealth:
    """
    Fetch the health of one service.

    Failures are attributed to the service as UNKNOWN instead of being raised,
    so one stopped or misbehaving service does not abort the whole check.

    Args:
        session: Open session used for the request
        base_url: Supervisor base URL
        service: Service to query

    Returns:
        ServiceHealth for the service
    """
    url = join_url(base_url, service.health_path)
    logger.debug("Fetching health for %s from %s", service, url)

    try:
        async with session.get(url) as response:
            if response.status != HTTP_OK:
                logger.warning("Health request for %s returned HTTP %s", service, response.status)
                return ServiceHealth(service, CheckState.UNKNOWN, error_message=f"HTTP {response.status}")
            payload = await decode_json(response)
            status = extract_status(payload)
    except REQUEST_ERROR_TYPES as exc:
        if is_network_unreachable_error(exc):
            detail = "supervisor unreachable"
        else:
            detail = "HTTP error"
        logger.warning("Health request for %s failed (%s): %s", service, detail, exc)
        return ServiceHealth(service, CheckState.UNKNOWN, error_message=detail)
    except DataError as exc:
        logger.warning("Health response for %s could not be decoded: %s", service, exc)
        return ServiceHealth(service, CheckState.UNKNOWN, error_message=str(exc))

    return ServiceHealth(service, status)
