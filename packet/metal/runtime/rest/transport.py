"""REST transport used by the resource services."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .http_client import HTTPClient, ResponseHook


class RESTTransport:
    """Thin request/response layer over ``HTTPClient``.

    Services only see paths and decoded JSON; sessions, timeouts and error
    mapping stay inside the HTTP client.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        self._http = HTTPClient(base_url=base_url, timeout=timeout, headers=headers)

    def add_response_hook(self, hook: ResponseHook) -> None:
        self._http.add_response_hook(hook)

    async def get(
        self,
        path: str,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        return await self._http.get(path, params=params, headers=headers)

    async def post(
        self,
        path: str,
        json_body: Any = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        return await self._http.post(path, json=json_body, headers=headers)

    async def delete(
        self,
        path: str,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        return await self._http.delete(path, params=params, headers=headers)

    async def close(self) -> None:
        await self._http.close()
