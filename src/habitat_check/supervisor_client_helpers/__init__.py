"""Helper modules for the SupervisorClient coordinator."""

from .health_fetcher import fetch_health
from .response_decoder import decode_json, extract_service_groups, extract_status
from .service_lister import list_services

__all__ = [
    "decode_json",
    "extract_service_groups",
    "extract_status",
    "fetch_health",
    "list_services",
]
