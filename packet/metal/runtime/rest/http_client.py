"""Async HTTP client wrapper."""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable, Mapping
from typing import Any

import aiohttp

from ...core.exceptions import APIError, NotFoundError, RateLimitError

logger = logging.getLogger(__name__)

ResponseHook = Callable[[aiohttp.ClientResponse], Any]

DEFAULT_RETRY_AFTER = 60.0


class HTTPClient:
    """Async HTTP client wrapper.

    Relative URLs are joined onto ``base_url``; absolute URLs (such as
    pagination links) are used as-is. Non-2xx responses raise ``APIError``
    subclasses and are never retried.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float = 30.0,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/") if base_url else None
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self.headers = dict(headers or {})
        self._session: aiohttp.ClientSession | None = None
        self._response_hooks: list[ResponseHook] = []

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout, headers=self.headers)
        return self._session

    def add_response_hook(self, hook: ResponseHook) -> None:
        """Register a callback (sync or async) invoked with every response."""
        self._response_hooks.append(hook)

    def _resolve(self, url: str) -> str:
        if self.base_url and not url.startswith("http"):
            return f"{self.base_url}{url}"
        return url

    async def _run_hooks(self, response: aiohttp.ClientResponse) -> None:
        for hook in self._response_hooks:
            try:
                result = hook(response)
                if inspect.isawaitable(result):
                    await result
            except Exception as e:
                logger.warning(f"Response hook failed: {e}", exc_info=True)

    async def _request(self, method: str, url: str, **kwargs: Any) -> Any:
        target = self._resolve(url)
        send = getattr(self.session, method.lower())
        logger.debug("http_request", extra={"method": method, "url": target})
        async with send(target, **kwargs) as response:
            await self._run_hooks(response)
            if response.status >= 400:
                raise await _error_from_response(method, url, response)
            if response.status == 204:
                return None
            return await response.json(content_type=None)

    async def get(
        self,
        url: str,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        """GET request."""
        return await self._request("GET", url, params=params, headers=headers)

    async def post(
        self,
        url: str,
        json: Any = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        """POST request with a JSON body."""
        return await self._request("POST", url, json=json, headers=headers)

    async def delete(
        self,
        url: str,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        """DELETE request."""
        return await self._request("DELETE", url, params=params, headers=headers)

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> HTTPClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()


def _error_messages(body: Any) -> list[str]:
    if not isinstance(body, dict):
        return []
    errors = body.get("errors")
    if isinstance(errors, list):
        return [str(e) for e in errors]
    if body.get("error"):
        return [str(body["error"])]
    return []


def _retry_after(response: aiohttp.ClientResponse) -> float:
    value = response.headers.get("Retry-After")
    if value is None:
        return DEFAULT_RETRY_AFTER
    try:
        return float(value)
    except ValueError:
        return DEFAULT_RETRY_AFTER


async def _error_from_response(method: str, path: str, response: aiohttp.ClientResponse) -> APIError:
    try:
        body = await response.json(content_type=None)
    except ValueError:
        body = None
    errors = _error_messages(body)
    message = f"{method} {path}: {response.status}"
    if errors:
        message = f"{message} {'; '.join(errors)}"

    logger.debug("http_error", extra={"method": method, "url": path, "status": response.status})

    if response.status == 404:
        return NotFoundError(message, status_code=404, errors=errors, path=path)
    if response.status == 429:
        return RateLimitError(message, retry_after=_retry_after(response), errors=errors, path=path)
    return APIError(message, status_code=response.status, errors=errors, path=path)
