"""Page-following for list endpoints.

List responses carry a ``meta`` envelope with the current page number and,
when more results exist, a ``next`` link. Pages are fetched one after another
until the server stops advertising a next page, or immediately stop after
the first request when the caller pinned a page in its options.

Request Flow:
    1. Initial path = base path + encoded options
    2. Await the fetch function for that path
    3. Accumulate the returned items in order
    4. Ask ``next_page_request`` for the following path; stop on ``None``

Cancellation:
    Cancelling the awaiting task, or running the call under
    ``asyncio.timeout``, interrupts the in-flight fetch and ends the loop.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Awaitable, Callable
from dataclasses import dataclass, field
from typing import Generic, TypeVar
from urllib.parse import urlsplit, urlunsplit

from ..models.meta import PageMeta
from .options import ListOptions, copy_or_new, get_page, with_query

logger = logging.getLogger(__name__)

T = TypeVar("T")

__all__ = [
    "FetchPage",
    "Page",
    "collect",
    "iterate_pages",
    "next_page_request",
    "strip_query",
]


@dataclass(frozen=True)
class Page(Generic[T]):
    """One decoded page of a list response."""

    items: list[T] = field(default_factory=list)
    meta: PageMeta | None = None


FetchPage = Callable[[str], Awaitable[Page[T]]]


def strip_query(url: str) -> str:
    """Drop the query component of ``url``, keeping scheme, host and path.

    Unparseable URLs yield an empty string rather than an error, so a bad
    ``next`` link degrades to a request against the API root with the
    re-encoded options.
    """
    try:
        parts = urlsplit(url)
    except ValueError:
        logger.warning("next_link_unparseable", extra={"href": url})
        return ""
    return urlunsplit(parts._replace(query=""))


def next_page_request(meta: PageMeta | None, opts: ListOptions | None) -> str | None:
    """Path of the page following ``meta``, or ``None`` when paging should stop.

    The next link's own query parameters are discarded; the path is rebuilt
    from a copy of ``opts`` advanced to ``meta.current_page + 1`` so that
    includes, search and sort settings carry forward.

    When paging stops (no next link, or ``opts`` pins a page), ``meta`` is
    recorded on ``opts`` for the caller to inspect.
    """
    if meta is not None and meta.next is not None and get_page(opts) == 0:
        advanced = copy_or_new(opts).with_page(meta.current_page + 1)
        return advanced.with_query(strip_query(meta.next.href or ""))
    if opts is not None and meta is not None:
        opts.record_meta(meta)
    return None


async def iterate_pages(
    fetch: FetchPage[T],
    base_path: str,
    opts: ListOptions | None = None,
) -> AsyncIterator[Page[T]]:
    """Yield pages from ``base_path`` onwards, following next links.

    Args:
        fetch: Async function fetching and decoding one page for a path
        base_path: Collection path without query string
        opts: Options for the first request; carried forward to later pages

    Yields:
        Each page in server order
    """
    path: str | None = with_query(opts, base_path)
    pages = 0
    while path is not None:
        page = await fetch(path)
        pages += 1
        logger.debug(
            "page_fetched",
            extra={"request_path": path, "page_index": pages, "item_count": len(page.items)},
        )
        yield page
        path = next_page_request(page.meta, opts)

    logger.debug("pagination_complete", extra={"base_path": base_path, "pages": pages})


async def collect(
    fetch: FetchPage[T],
    base_path: str,
    opts: ListOptions | None = None,
) -> list[T]:
    """Fetch every page and return all items in order.

    Any error raised by ``fetch`` propagates immediately; items gathered from
    earlier pages are discarded.
    """
    items: list[T] = []
    async for page in iterate_pages(fetch, base_path, opts):
        items.extend(page.items)
    return items
