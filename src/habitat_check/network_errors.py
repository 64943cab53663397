"""
Network error detection and classification.

Separates "the supervisor could not be reached" from application-level
failures such as bad status codes or undecodable bodies.
"""

import asyncio
import socket

import aiohttp

NETWORK_ERROR_TYPES = (
    aiohttp.ClientConnectorError,
    aiohttp.ServerTimeoutError,
    aiohttp.ServerDisconnectedError,
    asyncio.TimeoutError,
    socket.gaierror,
    OSError,
)

REQUEST_ERROR_TYPES = NETWORK_ERROR_TYPES + (aiohttp.ClientError,)


def is_network_unreachable_error(exception: BaseException) -> bool:
    """
    Determine if an exception represents a network connectivity failure.

    Args:
        exception: Exception to check

    Returns:
        True if this is a network-level error that indicates connectivity issues
    """
    if isinstance(exception, NETWORK_ERROR_TYPES):
        return True

    os_error = getattr(exception, "os_error", None)
    return isinstance(os_error, OSError)


__all__ = ["is_network_unreachable_error", "NETWORK_ERROR_TYPES", "REQUEST_ERROR_TYPES"]
