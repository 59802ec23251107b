"""Precise unit tests for HTTPClient.

Tests focus on session management, URL resolution, response hooks, and error mapping.
"""

from __future__ import annotations

import json
from unittest.mock import AsyncMock, MagicMock

import aiohttp
import pytest

from packet.metal.core import APIError, NotFoundError, RateLimitError
from packet.metal.runtime.rest import HTTPClient


def _response(status: int = 200, body=None, headers=None):
    response = AsyncMock()
    response.status = status
    response.headers = headers or {}
    if isinstance(body, Exception):
        response.json = AsyncMock(side_effect=body)
    else:
        response.json = AsyncMock(return_value=body)
    response.__aenter__ = AsyncMock(return_value=response)
    response.__aexit__ = AsyncMock(return_value=None)
    return response


def _client_with(method: str, *responses, **kwargs) -> tuple[HTTPClient, MagicMock]:
    client = HTTPClient(**kwargs)
    mock_session = MagicMock()
    mock_session.closed = False
    setattr(mock_session, method, MagicMock(side_effect=list(responses)))
    client._session = mock_session
    return client, mock_session


class TestHTTPClientSessionManagement:
    """Test HTTPClient session management."""

    def test_init(self):
        """Test HTTPClient initialization."""
        client = HTTPClient(timeout=10.0)
        assert client.timeout.total == 10.0
        assert client._session is None
        assert client._response_hooks == []

    def test_base_url_trailing_slash_trimmed(self):
        """Test base_url is normalized."""
        client = HTTPClient(base_url="https://api.example.com/metal/v1/")
        assert client.base_url == "https://api.example.com/metal/v1"

    @pytest.mark.asyncio
    async def test_session_property_creates_session(self):
        """Test session property creates session when needed."""
        client = HTTPClient(headers={"X-Test": "1"})
        session = client.session
        assert isinstance(session, aiohttp.ClientSession)
        assert client._session is session
        await client.close()

    @pytest.mark.asyncio
    async def test_session_property_recreates_closed_session(self):
        """Test session property recreates closed session."""
        client = HTTPClient()
        session1 = client.session
        await session1.close()

        session2 = client.session
        assert session1 is not session2
        assert not session2.closed
        await client.close()

    @pytest.mark.asyncio
    async def test_close_idempotent(self):
        """Test close() can be called multiple times."""
        client = HTTPClient()
        await client.close()
        await client.close()

    @pytest.mark.asyncio
    async def test_context_manager(self):
        """Test HTTPClient as async context manager."""
        async with HTTPClient() as client:
            assert client.session is not None

        assert client._session is None or client._session.closed


class TestHTTPClientRequests:
    """Test request dispatch and decoding."""

    @pytest.mark.asyncio
    async def test_get_with_base_url(self):
        """Test get() combines base_url with relative path."""
        client, session = _client_with(
            "get", _response(body={"ok": True}), base_url="https://api.example.com"
        )

        result = await client.get("/batches?page=2")

        assert result == {"ok": True}
        assert session.get.call_args.args[0] == "https://api.example.com/batches?page=2"

    @pytest.mark.asyncio
    async def test_get_with_absolute_url(self):
        """Test absolute pagination links bypass base_url."""
        client, session = _client_with(
            "get", _response(body={}), base_url="https://api.example.com"
        )

        await client.get("https://other.example.com/batches")

        assert session.get.call_args.args[0] == "https://other.example.com/batches"

    @pytest.mark.asyncio
    async def test_post_sends_json(self):
        """Test post() passes the JSON body through."""
        client, session = _client_with("post", _response(status=201, body={"id": "b1"}))

        result = await client.post("/projects/p/devices/batch", json={"batches": []})

        assert result == {"id": "b1"}
        assert session.post.call_args.kwargs["json"] == {"batches": []}

    @pytest.mark.asyncio
    async def test_delete_no_content(self):
        """Test 204 responses decode to None without reading a body."""
        response = _response(status=204)
        client, session = _client_with("delete", response)

        result = await client.delete("/batches/b1", params={"remove_associated_instances": "true"})

        assert result is None
        response.json.assert_not_awaited()
        assert session.delete.call_args.kwargs["params"] == {"remove_associated_instances": "true"}


class TestHTTPClientErrors:
    """Test mapping of error responses to exceptions."""

    @pytest.mark.asyncio
    async def test_not_found(self):
        """Test 404 raises NotFoundError with server messages."""
        client, _ = _client_with("get", _response(status=404, body={"errors": ["Not found"]}))

        with pytest.raises(NotFoundError) as exc_info:
            await client.get("/batches/missing")

        assert exc_info.value.status_code == 404
        assert exc_info.value.errors == ["Not found"]
        assert exc_info.value.path == "/batches/missing"

    @pytest.mark.asyncio
    async def test_rate_limited_is_not_retried(self):
        """Test 429 raises RateLimitError once, with Retry-After parsed."""
        client, session = _client_with(
            "get", _response(status=429, body={"error": "slow down"}, headers={"Retry-After": "7"})
        )

        with pytest.raises(RateLimitError) as exc_info:
            await client.get("/batches")

        assert exc_info.value.retry_after == 7.0
        assert exc_info.value.errors == ["slow down"]
        assert session.get.call_count == 1

    @pytest.mark.asyncio
    async def test_rate_limited_without_retry_after(self):
        """Test a missing Retry-After header falls back to the default."""
        client, _ = _client_with("get", _response(status=429, body=None))

        with pytest.raises(RateLimitError) as exc_info:
            await client.get("/batches")

        assert exc_info.value.retry_after == 60.0

    @pytest.mark.asyncio
    async def test_server_error_with_non_json_body(self):
        """Test undecodable error bodies still raise APIError."""
        client, _ = _client_with(
            "get", _response(status=502, body=json.JSONDecodeError("bad", "<html>", 0))
        )

        with pytest.raises(APIError) as exc_info:
            await client.get("/projects")

        assert exc_info.value.status_code == 502
        assert exc_info.value.errors == []
        assert "502" in str(exc_info.value)


class TestHTTPClientResponseHooks:
    """Test HTTPClient response hooks."""

    @pytest.mark.asyncio
    async def test_response_hook_called(self):
        """Test response hooks are called for each response."""
        response = _response(body={"data": "test"})
        client, _ = _client_with("get", response)
        hook = MagicMock(return_value=None)
        client.add_response_hook(hook)

        await client.get("https://api.example.com/test")

        hook.assert_called_once_with(response)

    @pytest.mark.asyncio
    async def test_async_response_hook_awaited(self):
        """Test async hooks are awaited."""
        client, _ = _client_with("get", _response(body={}))
        hook = AsyncMock(return_value=None)
        client.add_response_hook(hook)

        await client.get("/test")

        hook.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_response_hook_exception_handled(self):
        """Test response hook exceptions don't break requests."""
        client, _ = _client_with("get", _response(body={"data": "test"}))

        def failing_hook(response):
            raise RuntimeError("Hook error")

        client.add_response_hook(failing_hook)

        result = await client.get("https://api.example.com/test")
        assert result == {"data": "test"}
