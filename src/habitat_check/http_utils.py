from __future__ import annotations

"""HTTP helper utilities for talking to the supervisor API."""

from urllib.parse import urlsplit


def ensure_http_url(request_url: str) -> str:
    """Ensure the provided URL uses an allowed HTTP/HTTPS scheme."""
    try:
        parsed = urlsplit(request_url)
    except (TypeError, ValueError, AttributeError) as exc:
        raise ValueError(f"Unparseable URL: {request_url!r}") from exc
    scheme = parsed.scheme.lower()
    if scheme not in {"http", "https"}:
        raise ValueError(f"Unsupported URL scheme: {request_url}")
    if not parsed.netloc:
        raise ValueError(f"URL missing network location: {request_url}")
    hostname = parsed.hostname
    if not hostname or any(char.isspace() for char in hostname):
        raise ValueError(f"URL has an invalid host: {request_url}")
    try:
        parsed.port
    except ValueError as exc:
        raise ValueError(f"URL has an invalid port: {request_url}") from exc
    return request_url


def join_url(base_url: str, path: str) -> str:
    """Append *path* to *base_url* without doubling the slash between them."""
    return f"{base_url.rstrip('/')}/{path.lstrip('/')}"


__all__ = ["ensure_http_url", "join_url"]
