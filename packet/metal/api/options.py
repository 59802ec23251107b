"""Request options shared by get, list and search calls.

Architecture:
    ``ListOptions`` is an immutable value object. Every transformation
    (``including``, ``excluding``, ``with_page``) returns a new instance, so an
    options value handed to a service call is never modified behind the
    caller's back. The only exception is the transient ``meta`` slot, which
    the pagination cursor fills in when it stops paging.

    Callers may pass ``None`` instead of options anywhere; the module-level
    helpers (``copy_or_new``, ``get_options``, ``get_page``, ``including``, ``encode``,
    ``with_query``) treat ``None`` as an empty options value.

Query Encoding:
    Non-default fields become ``key=value`` pairs, percent-encoded and joined
    with ``&``. Keys are emitted in sorted order, so a given options value
    always produces the same string::

        exclude, include, page, per_page, search, sort_by, sort_direction

    Sequence fields are comma-joined into a single value before encoding.
"""

from __future__ import annotations

from collections.abc import Iterable
from urllib.parse import urlencode

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, field_validator

from ..core.enums import SortDirection
from ..models.meta import PageMeta

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
]


def _unique(values: Iterable[str]) -> tuple[str, ...]:
    # dict keeps first-seen order
    return tuple(dict.fromkeys(values))


class ListOptions(BaseModel):
    """Expansion, sorting, search and paging parameters for one request.

    Attributes:
        includes: Dotted field paths (up to three levels, e.g.
            ``"memberships.projects"``) the server should expand inline instead
            of returning link-only stubs.
        excludes: Dotted field paths the server should collapse to stubs.
        page: Page to fetch. ``0`` leaves the page unpinned, letting list calls
            follow the server's ``next`` links through every page.
        per_page: Page size, or ``None`` for the server default.
        search: Keyword filter; matching rules are defined per resource.
        sort_by: Field to sort on.
        sort_direction: ``asc`` or ``desc``.
    """

    includes: tuple[str, ...] = ()
    excludes: tuple[str, ...] = ()
    page: int = Field(default=0, ge=0)
    per_page: int | None = Field(default=None, gt=0)
    search: str | None = None
    sort_by: str | None = None
    sort_direction: SortDirection | None = None

    _meta: PageMeta | None = PrivateAttr(default=None)

    model_config = ConfigDict(frozen=True)

    @field_validator("includes", "excludes")
    @classmethod
    def drop_duplicates(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Keep the first occurrence of each field path."""
        return _unique(v)

    @property
    def meta(self) -> PageMeta | None:
        """Pagination metadata from the last page of the call that used these options."""
        return self._meta

    def record_meta(self, meta: PageMeta) -> None:
        self._meta = meta

    def copy_or_new(self) -> ListOptions:
        """Return an equal but distinct options value."""
        return self.model_copy()

    def get_options(self) -> ListOptions:
        """Narrow to the expansion settings used by single-resource GETs.

        Paging, search and sort only apply to collections, so only
        ``includes`` and ``excludes`` are kept.
        """
        return ListOptions(includes=self.includes, excludes=self.excludes)

    def including(self, *refs: str) -> ListOptions:
        """Return a copy that also expands ``refs``.

        Refs already present are skipped; new ones are appended in the order
        given. Unknown field names are passed through, the API ignores them.
        """
        return self.model_copy(update={"includes": _unique((*self.includes, *refs))})

    def excluding(self, *refs: str) -> ListOptions:
        """Return a copy that also collapses ``refs``."""
        return self.model_copy(update={"excludes": _unique((*self.excludes, *refs))})

    def with_page(self, page: int) -> ListOptions:
        """Return a copy pinned to ``page`` (``0`` unpins it)."""
        if page < 0:
            raise ValueError(f"page must be >= 0, got {page}")
        return self.model_copy(update={"page": page})

    def to_query(self) -> dict[str, str]:
        """Query parameters for the non-default fields, in canonical key order."""
        params: dict[str, str] = {}
        if self.includes:
            params["include"] = ",".join(self.includes)
        if self.excludes:
            params["exclude"] = ",".join(self.excludes)
        if self.page:
            params["page"] = str(self.page)
        if self.per_page:
            params["per_page"] = str(self.per_page)
        if self.search:
            params["search"] = self.search
        if self.sort_by:
            params["sort_by"] = self.sort_by
        if self.sort_direction is not None:
            params["sort_direction"] = self.sort_direction.value
        return dict(sorted(params.items()))

    def encode(self) -> str:
        """Encode as a URL query string without the leading ``?``."""
        return urlencode(self.to_query())

    def with_query(self, path: str) -> str:
        """Append the encoded query to ``path``, or return ``path`` when there is none."""
        params = self.encode()
        if params:
            return f"{path}?{params}"
        return path


GetOptions = ListOptions
SearchOptions = ListOptions


def copy_or_new(opts: ListOptions | None) -> ListOptions:
    """Copy ``opts``, or create empty options when there are none."""
    if opts is None:
        return ListOptions()
    return opts.copy_or_new()


def get_options(opts: ListOptions | None) -> ListOptions:
    """Includes and excludes of ``opts``; empty options when absent."""
    if opts is None:
        return ListOptions()
    return opts.get_options()


def get_page(opts: ListOptions | None) -> int:
    """Pinned page of ``opts``; ``0`` when absent or unpinned."""
    if opts is None:
        return 0
    return opts.page


def including(opts: ListOptions | None, *refs: str) -> ListOptions:
    return copy_or_new(opts).including(*refs)


def encode(opts: ListOptions | None) -> str:
    if opts is None:
        return ""
    return opts.encode()


def with_query(opts: ListOptions | None, path: str) -> str:
    if opts is None:
        return path
    return opts.with_query(path)
