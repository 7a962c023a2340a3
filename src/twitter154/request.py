"""URL and request construction. Pure functions, no network."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, NamedTuple
from urllib.parse import quote_plus

import httpx

if TYPE_CHECKING:
    from twitter154.config import ClientConfig

API_KEY_HEADER = "X-RapidAPI-Key"
API_HOST_HEADER = "X-RapidAPI-Host"


class Param(NamedTuple):
    """A single query parameter. Order of params is preserved in the URL."""

    key: str
    value: Any


def render_value(value: Any) -> str:
    """Render a scalar the way the API expects it in a query string."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_url(host: str, path: Sequence[str]) -> str:
    """Join path segments onto https://{host}/."""
    segments = [segment.strip("/") for segment in path]
    return f"https://{host}/" + "/".join(segment for segment in segments if segment)


def build_url_with_params(host: str, path: Sequence[str], params: Sequence[Param]) -> str:
    """Build a URL with an ordered, escaped query string.

    Example:
        >>> build_url_with_params("h", ["user", "details"], [Param("username", "a b")])
        'https://h/user/details?username=a+b'
    """
    url = build_url(host, path)
    for i, param in enumerate(params):
        separator = "?" if i == 0 else "&"
        url = f"{url}{separator}{param.key}={quote_plus(render_value(param.value), safe='')}"
    return url


def build_request(config: ClientConfig, url: str) -> httpx.Request:
    """Create an authenticated GET request for the configured host."""
    return httpx.Request(
        "GET",
        url,
        headers={
            API_KEY_HEADER: config.api_key,
            API_HOST_HEADER: config.host,
        },
    )
