"""Sequential page walking over offset/limit endpoints."""

import logging
from collections.abc import Callable

from .client import CongressClient
from .endpoints import Endpoint
from .models import PrimaryResponse

logger = logging.getLogger(__name__)

DEFAULT_PAGE_LIMIT = 250


def fetch_all[R: PrimaryResponse, I](
    client: CongressClient,
    endpoint_for: Callable[[int, int], Endpoint],
    extract: Callable[[R], list[I]],
    response_model: type[R],
    max_results: int,
    page_limit: int = DEFAULT_PAGE_LIMIT,
) -> list[I]:
    """
    Collect items from consecutive pages.

    Args:
        client: Client used for each request.
        endpoint_for: Builds the endpoint for ``(offset, limit)``.
        extract: Pulls the item list out of a page.
        response_model: Response type of each page.
        max_results: Stop once this many items are collected.
        page_limit: Items requested per page.

    Returns:
        At most ``max_results`` items, in page order.
    """
    items: list[I] = []
    offset = 0

    while len(items) < max_results:
        page = extract(client.fetch(endpoint_for(offset, page_limit), response_model))
        fetched = len(page)
        items.extend(page)
        logger.debug(f"Fetched {fetched} items at offset {offset} ({len(items)} total)")

        if len(items) >= max_results:
            del items[max_results:]
            break
        if fetched == 0 or fetched < page_limit:
            break
        offset += fetched

    return items
