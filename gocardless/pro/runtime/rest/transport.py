"""REST transport: default headers and the execute() contract."""

from __future__ import annotations

from typing import Any, Protocol

from ...config import API_VERSION, DEFAULT_TIMEOUT, USER_AGENT
from .http_client import HTTPClient, RawResponse, ResponseHook


class Transport(Protocol):
    """Executes one resolved HTTP exchange.

    Implementations own authentication, connection pooling and any retry
    policy. Network failures must surface as TransportFailure; cancellation
    must propagate unchanged.
    """

    async def execute(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
        body: dict[str, Any] | None = None,
    ) -> RawResponse: ...


class RESTTransport:
    """aiohttp-backed Transport injecting auth and versioning headers."""

    def __init__(
        self,
        base_url: str,
        *,
        access_token: str | None = None,
        api_version: str = API_VERSION,
        timeout: float = DEFAULT_TIMEOUT,
        default_headers: dict[str, str] | None = None,
    ) -> None:
        self._http = HTTPClient(base_url=base_url, timeout=timeout)
        self._default_headers: dict[str, str] = {
            "Accept": "application/json",
            "GoCardless-Version": api_version,
            "User-Agent": USER_AGENT,
        }
        if access_token:
            self._default_headers["Authorization"] = f"Bearer {access_token}"
        if default_headers:
            self._default_headers.update(default_headers)

    @property
    def base_url(self) -> str | None:
        return self._http.base_url

    def add_response_hook(self, hook: ResponseHook) -> None:
        self._http.add_response_hook(hook)

    async def execute(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
        body: dict[str, Any] | None = None,
    ) -> RawResponse:
        merged = dict(self._default_headers)
        if body is not None:
            merged["Content-Type"] = "application/json"
        if headers:
            merged.update(headers)
        return await self._http.request(
            method,
            path,
            params=_normalize_params(params),
            json_body=body,
            headers=merged,
        )

    async def close(self) -> None:
        await self._http.close()

    async def __aenter__(self) -> RESTTransport:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()


def _normalize_params(params: dict[str, Any] | None) -> dict[str, str | int | float] | None:
    """Drop unset values and render booleans the way the API expects."""
    if not params:
        return None
    out: dict[str, str | int | float] = {}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, bool):
            out[key] = "true" if value else "false"
        elif isinstance(value, (int, float, str)):
            out[key] = value
        else:
            out[key] = str(value)
    return out
