"""Pagination metadata returned in list response envelopes."""

from pydantic import BaseModel, ConfigDict, Field

from .common import Href


class PageMeta(BaseModel):
    """Server-reported pagination state.

    Mirrors the ``"meta"`` object of list responses::

        {"self": {...}, "first": {...}, "next": {"href": "/batches?page=3"},
         "total": 42, "current_page": 2, "last_page": 5}

    ``self`` is exposed as ``self_link`` since it would shadow the instance.
    """

    self_link: Href | None = Field(default=None, alias="self")
    first: Href | None = None
    last: Href | None = None
    previous: Href | None = None
    next: Href | None = None
    total: int = 0
    current_page: int = 0
    last_page: int = 0

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @property
    def has_next(self) -> bool:
        """Check whether the server advertised a following page."""
        return self.next is not None
