"""Request options and pagination helpers used by every service."""

from .options import (
    GetOptions,
    ListOptions,
    SearchOptions,
    copy_or_new,
    encode,
    get_options,
    get_page,
    including,
    with_query,
)
from .pagination import (
    FetchPage,
    Page,
    collect,
    iterate_pages,
    next_page_request,
    strip_query,
)

__all__ = [
    "GetOptions",
    "ListOptions",
    "SearchOptions",
    "copy_or_new",
    "encode",
    "get_options",
    "get_page",
    "including",
    "with_query",
    "FetchPage",
    "Page",
    "collect",
    "iterate_pages",
    "next_page_request",
    "strip_query",
]
