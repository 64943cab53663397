"""Enumeration of the services currently loaded by the supervisor."""

import logging
from typing import List

import aiohttp

from ..exceptions import CheckError, DataError
from ..http_utils import join_url
from ..network_errors import REQUEST_ERROR_TYPES
from ..service_identifier import ServiceIdentifier
from .response_decoder import decode_json, extract_service_groups

logger = logging.getLogger(__name__)

SERVICES_PATH = "/services"
HTTP_OK = 200


async def list_services(session: aiohttp.ClientSession, base_url: str) -> List[ServiceIdentifier]:
    """
    List all loaded services.

    Args:
        session: Open session used for the request
        base_url: Supervisor base URL

    Returns:
        Service identifiers in the order the supervisor reported them

    Raises:
        CheckError: At CRITICAL level on any request, status or decode failure
    """
    url = join_url(base_url, SERVICES_PATH)
    logger.debug("Listing services from %s", url)

    try:
        async with session.get(url) as response:
            if response.status != HTTP_OK:
                raise CheckError.enumeration_failed(url, f"HTTP {response.status}")
            payload = await decode_json(response)
    except REQUEST_ERROR_TYPES as exc:
        logger.error("Service listing request to %s failed: %s", url, exc)
        raise CheckError.enumeration_failed(url, str(exc) or type(exc).__name__) from exc
    except DataError as exc:
        logger.error("Service listing from %s was not valid JSON", url)
        raise CheckError.enumeration_decode_failed(url, str(exc)) from exc

    try:
        services = extract_service_groups(payload)
    except DataError as exc:
        logger.error("Service listing from %s had an unexpected shape: %s", url, exc)
        raise CheckError.enumeration_decode_failed(url, str(exc)) from exc

    logger.debug("Supervisor reported %d loaded services", len(services))
    return services
