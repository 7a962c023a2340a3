"""Rate-limited, single-attempt request execution."""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx

from twitter154.errors import Twitter154Error
from twitter154.logging import get_logger
from twitter154.request import API_HOST_HEADER, API_KEY_HEADER

if TYPE_CHECKING:
    from twitter154.config import ClientConfig

log = get_logger("twitter154.executor")


def execute(config: ClientConfig, request: httpx.Request) -> bytes:
    """Send `request` once and return the full response body.

    Blocks on the config's rate limiter before sending. There are no retries
    and no size limit on the body.

    Raises:
        Twitter154Error: SEND_FAILED, BAD_STATUS or READ_FAILED.
    """
    request.headers[API_KEY_HEADER] = config.api_key
    request.headers[API_HOST_HEADER] = config.host

    config.rate_limiter.take()

    try:
        response = config.http_client.send(request, stream=True)
    except (httpx.RequestError, RuntimeError) as e:
        # httpx raises RuntimeError when the client has already been closed
        log.warning("request_failed", method=request.method, url=str(request.url), error=str(e))
        raise Twitter154Error.send_failed(str(e)) from e

    try:
        if not 200 <= response.status_code <= 299:
            log.warning("bad_status", url=str(request.url), status_code=response.status_code)
            raise Twitter154Error.bad_status(response.status_code)

        try:
            data = response.read()
        except (httpx.StreamError, httpx.RequestError) as e:
            raise Twitter154Error.read_failed(str(e)) from e
    finally:
        response.close()

    log.debug("request_sent", url=str(request.url), status_code=response.status_code, size=len(data))
    return data
