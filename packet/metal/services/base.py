"""Shared plumbing for resource services."""

from __future__ import annotations

import logging
from typing import Any, TypeVar

from pydantic import BaseModel

from ..api.options import ListOptions, get_options
from ..api.pagination import Page, collect
from ..core.exceptions import ValidationError
from ..models.meta import PageMeta
from ..runtime.rest import RESTTransport

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


def require_id(value: str, name: str) -> str:
    """Reject empty resource identifiers before they reach a URL."""
    if not value or not value.strip():
        raise ValidationError(f"{name} must not be empty")
    return value.strip()


def decode_page(data: Any, key: str, model: type[M]) -> Page[M]:
    """Decode a list envelope ``{key: [...], "meta": {...}}`` into a page."""
    data = data or {}
    items = [model.model_validate(item) for item in data.get(key) or []]
    meta = PageMeta.model_validate(data["meta"]) if data.get("meta") else None
    return Page(items=items, meta=meta)


class ServiceOp:
    """Base for services bound to one transport."""

    def __init__(self, transport: RESTTransport) -> None:
        self._t = transport

    async def _get_one(self, path: str, model: type[M], opts: ListOptions | None) -> M:
        data = await self._t.get(get_options(opts).with_query(path))
        return model.model_validate(data)

    async def _list(
        self,
        base_path: str,
        key: str,
        model: type[M],
        opts: ListOptions | None,
    ) -> list[M]:
        async def fetch(path: str) -> Page[M]:
            return decode_page(await self._t.get(path), key, model)

        items = await collect(fetch, base_path, opts)
        logger.debug("list_complete", extra={"base_path": base_path, "item_count": len(items)})
        return items
