"""HTTP client helper."""

from __future__ import annotations

import asyncio
import json
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

import aiohttp

from ...core.exceptions import TransportFailure

ResponseHook = Callable[[aiohttp.ClientResponse], None]


@dataclass(frozen=True)
class RawResponse:
    """Status, headers and decoded JSON body of one HTTP exchange.

    ``body`` is None when the response had no body or was not JSON; ``text``
    always holds the raw payload.
    """

    status: int
    headers: dict[str, str] = field(default_factory=dict)
    body: Any = None
    text: str = ""

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


class HTTPClient:
    """Async HTTP client wrapper."""

    def __init__(self, base_url: str | None = None, timeout: float = 30.0) -> None:
        self.base_url = base_url
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self._session: aiohttp.ClientSession | None = None
        self._response_hooks: list[ResponseHook] = []

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
        return self._session

    def add_response_hook(self, hook: ResponseHook) -> None:
        """Register a callable invoked with every raw response."""
        self._response_hooks.append(hook)

    def _url(self, url: str) -> str:
        if self.base_url and not url.startswith("http"):
            return f"{self.base_url.rstrip('/')}{url}"
        return url

    async def request(
        self,
        method: str,
        url: str,
        *,
        params: dict[str, Any] | None = None,
        json_body: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> RawResponse:
        """Send a request and return status, headers and decoded body.

        Non-2xx statuses are returned, not raised; interpreting them is the
        runner's job.

        Raises:
            TransportFailure: On connection errors and timeouts.
        """
        full_url = self._url(url)
        try:
            async with self.session.request(
                method, full_url, params=params, json=json_body, headers=headers
            ) as response:
                for hook in self._response_hooks:
                    hook(response)
                try:
                    text = await response.text()
                    body = _decode_json(text)
                except UnicodeDecodeError:
                    # Undecodable payloads keep a lossy text and no body
                    text = (await response.read()).decode("utf-8", errors="replace")
                    body = None
                return RawResponse(
                    status=response.status,
                    headers=dict(response.headers),
                    body=body,
                    text=text,
                )
        except asyncio.TimeoutError as e:
            raise TransportFailure(f"{method} {full_url} timed out") from e
        except aiohttp.ClientError as e:
            raise TransportFailure(f"{method} {full_url} failed: {e}") from e

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


def _decode_json(text: str) -> Any:
    if not text:
        return None
    try:
        return json.loads(text)
    except ValueError:
        return None
