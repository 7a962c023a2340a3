"""Generic request/decode/pagination engine used by every endpoint."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, TypeVar

from twitter154.decode import PageResponse, SingleResponse, decode_page, decode_single
from twitter154.errors import Twitter154Error
from twitter154.executor import execute
from twitter154.logging import get_logger
from twitter154.request import Param, build_request, build_url_with_params

if TYPE_CHECKING:
    from twitter154.config import ClientConfig

log = get_logger("twitter154.engine")

T = TypeVar("T")

CONTINUATION_SEGMENT = "continuation"
CONTINUATION_TOKEN_PARAM = "continuation_token"


def get(config: ClientConfig, path: Sequence[str], params: Sequence[Param]) -> bytes:
    """Fetch the raw body of GET https://{host}/{path}?{params}."""
    url = build_url_with_params(config.host, path, params)
    request = build_request(config, url)

    try:
        return execute(config, request)
    except Twitter154Error as e:
        raise e.with_context("get") from e


def get_result(
    config: ClientConfig,
    path: Sequence[str],
    params: Sequence[Param],
    shape: type[SingleResponse[T]],
) -> T:
    """Fetch one response and decode it as a single value."""
    data = get(config, path, params)
    return decode_single(data, shape)


def get_result_paginated(
    config: ClientConfig,
    path: Sequence[str],
    params: Sequence[Param],
    shape: type[PageResponse[T]],
) -> list[T]:
    """Fetch every page of a paginated resource and return all items in order.

    The first page comes from `path`; every later page comes from
    `path/continuation` with a `continuation_token` param set to the token of
    the page before it. The first page with no items ends the walk, whatever
    its token says, so a complete walk always costs one trailing round trip
    that returns nothing.

    Raises:
        Twitter154Error: Any failure on any page. Items gathered so far are
            discarded; there is no partial result.
    """
    page = decode_page(get(config, path, params), shape)

    results: list[T] = []
    pages = 1
    continuation_path = [*path, CONTINUATION_SEGMENT]
    continuation_params = [*params, Param(CONTINUATION_TOKEN_PARAM, page.token)]

    while page.items:
        results.extend(page.items)
        log.debug("page_fetched", path="/".join(path), page=pages, items=len(page.items))

        data = get(config, continuation_path, continuation_params)
        page = decode_page(data, shape)
        pages += 1
        continuation_params[-1] = Param(CONTINUATION_TOKEN_PARAM, page.token)

    log.info("pagination_complete", path="/".join(path), pages=pages, items=len(results))
    return results
