"""Precise unit tests for HTTPClient.

Tests focus on session management, response decoding, hooks and failure
mapping.
"""

from __future__ import annotations

import asyncio
from unittest.mock import AsyncMock, MagicMock

import aiohttp
import pytest

from gocardless.pro.core import TransportFailure
from gocardless.pro.runtime.rest import HTTPClient


def _mock_session(*, status=200, text='{"ok": true}', headers=None, error=None):
    response = AsyncMock()
    response.status = status
    response.headers = headers or {"Content-Type": "application/json"}
    response.text = AsyncMock(return_value=text)
    response.__aenter__ = AsyncMock(return_value=response)
    response.__aexit__ = AsyncMock(return_value=None)

    session = MagicMock()
    session.closed = False
    if error is not None:
        session.request = MagicMock(side_effect=error)
    else:
        session.request = MagicMock(return_value=response)
    return session, response


class TestHTTPClientSessionManagement:
    """Test HTTPClient session management."""

    def test_init(self):
        """Test HTTPClient initialization."""
        client = HTTPClient(timeout=10.0)
        assert client.timeout.total == 10.0
        assert client._session is None
        assert client._response_hooks == []

    def test_init_with_base_url(self):
        """Test HTTPClient with base_url."""
        client = HTTPClient(base_url="https://api.example.com", timeout=30.0)
        assert client.base_url == "https://api.example.com"

    @pytest.mark.asyncio
    async def test_session_property_creates_session(self):
        """Test session property creates session when needed."""
        client = HTTPClient()
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


class TestHTTPClientRequest:
    """Test request() behavior."""

    @pytest.mark.asyncio
    async def test_decodes_json_body(self):
        """Test status, headers and JSON body are returned."""
        client = HTTPClient(base_url="https://api.example.com")
        client._session, _ = _mock_session(text='{"creditors": {"id": "CR1"}}')

        raw = await client.request("GET", "/creditors/CR1")

        assert raw.status == 200
        assert raw.ok
        assert raw.body == {"creditors": {"id": "CR1"}}
        client._session.request.assert_called_once_with(
            "GET",
            "https://api.example.com/creditors/CR1",
            params=None,
            json=None,
            headers=None,
        )

    @pytest.mark.asyncio
    async def test_non_2xx_returned_not_raised(self):
        """Test error statuses are handed back to the caller."""
        client = HTTPClient()
        client._session, _ = _mock_session(status=404, text='{"error": {}}')

        raw = await client.request("GET", "https://api.example.com/x")

        assert raw.status == 404
        assert not raw.ok

    @pytest.mark.asyncio
    async def test_non_json_body(self):
        """Test non-JSON payloads keep the text and a None body."""
        client = HTTPClient()
        client._session, _ = _mock_session(status=502, text="<html>Bad Gateway</html>")

        raw = await client.request("GET", "https://api.example.com/x")

        assert raw.body is None
        assert raw.text == "<html>Bad Gateway</html>"

    @pytest.mark.asyncio
    async def test_empty_body(self):
        """Test empty responses decode to None."""
        client = HTTPClient()
        client._session, _ = _mock_session(status=204, text="")

        raw = await client.request("PUT", "https://api.example.com/x")

        assert raw.body is None

    @pytest.mark.asyncio
    async def test_undecodable_body_kept_as_lossy_text(self):
        """Test a body that is not valid UTF-8 yields text and a None body."""
        payload = b'{"creditors": {"id": "\xff\xfe"}}'
        client = HTTPClient()
        client._session, response = _mock_session()
        response.text = AsyncMock(
            side_effect=UnicodeDecodeError("utf-8", payload, 22, 23, "invalid start byte")
        )
        response.read = AsyncMock(return_value=payload)

        raw = await client.request("GET", "https://api.example.com/creditors/CR1")

        assert raw.status == 200
        assert raw.body is None
        assert raw.text.startswith('{"creditors"')
        assert "\ufffd" in raw.text

    @pytest.mark.asyncio
    async def test_client_error_becomes_transport_failure(self):
        """Test aiohttp errors are wrapped in TransportFailure."""
        client = HTTPClient()
        client._session, _ = _mock_session(error=aiohttp.ClientConnectionError("reset"))

        with pytest.raises(TransportFailure) as exc_info:
            await client.request("GET", "https://api.example.com/x")
        assert isinstance(exc_info.value.__cause__, aiohttp.ClientConnectionError)

    @pytest.mark.asyncio
    async def test_timeout_becomes_transport_failure(self):
        """Test timeouts are wrapped in TransportFailure."""
        client = HTTPClient()
        client._session, _ = _mock_session(error=asyncio.TimeoutError())

        with pytest.raises(TransportFailure, match="timed out"):
            await client.request("GET", "https://api.example.com/x")

    @pytest.mark.asyncio
    async def test_cancellation_propagates(self):
        """Test CancelledError is not converted."""
        client = HTTPClient()
        client._session, _ = _mock_session(error=asyncio.CancelledError())

        with pytest.raises(asyncio.CancelledError):
            await client.request("GET", "https://api.example.com/x")


class TestHTTPClientResponseHooks:
    """Test HTTPClient response hooks."""

    def test_add_response_hook(self):
        """Test add_response_hook registers hook."""
        client = HTTPClient()
        hook = MagicMock()

        client.add_response_hook(hook)
        assert client._response_hooks == [hook]

    @pytest.mark.asyncio
    async def test_response_hook_called(self):
        """Test response hooks are called for each response."""
        client = HTTPClient()
        hook = MagicMock(return_value=None)
        client.add_response_hook(hook)
        client._session, response = _mock_session()

        await client.request("GET", "https://api.example.com/test")

        hook.assert_called_once_with(response)
