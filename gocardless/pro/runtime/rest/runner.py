"""REST request runner using request descriptors and response adapters."""

from __future__ import annotations

import logging
from time import perf_counter
from typing import Any

from ...core.exceptions import HttpError
from ...core.request import CreateRequest, GetRequest, ListRequest, Request, UpdateRequest
from ...models import Page, Resource
from .adapters import PageAdapter, ResourceAdapter, ResponseAdapter
from .http_client import RawResponse
from .transport import Transport

logger = logging.getLogger(__name__)


class RestRunner:
    def __init__(self, transport: Transport) -> None:
        self._t = transport

    @property
    def transport(self) -> Transport:
        return self._t

    async def run(self, *, request: Request, adapter: ResponseAdapter) -> Any:
        # Raises MissingPathParameter before any network call
        path = request.path()
        query = request.query_params() or None
        body = request.body() if request.has_body else None
        headers = request.request_headers() or None

        start = perf_counter()
        raw = await self._t.execute(
            request.method.value, path, params=query, headers=headers, body=body
        )
        latency_ms = (perf_counter() - start) * 1000.0

        if not raw.ok:
            error = HttpError.from_response(raw)
            _log_request_failed(request, path, raw, error)
            raise error

        logger.debug(
            "request_completed",
            extra={
                "endpoint_id": request.endpoint.id,
                "method": request.method.value,
                "path": path,
                "status": raw.status,
                "latency_ms": latency_ms,
            },
        )
        return adapter.parse(raw.body, request)

    async def execute(
        self, request: CreateRequest | GetRequest | UpdateRequest | ListRequest
    ) -> Resource | Page[Any]:
        """Run a request with the adapter its variant implies.

        List requests return a single Page; use pagination.iterate() for
        transparent traversal.
        """
        match request:
            case CreateRequest() | GetRequest() | UpdateRequest():
                adapter: ResponseAdapter = ResourceAdapter(request.endpoint.model)
            case ListRequest():
                adapter = PageAdapter(request.endpoint.model)
            case _:
                raise TypeError(f"Unsupported request type: {type(request).__name__}")
        return await self.run(request=request, adapter=adapter)


def _log_request_failed(
    request: Request, path: str, raw: RawResponse, error: HttpError
) -> None:
    logger.warning(
        "request_failed",
        extra={
            "endpoint_id": request.endpoint.id,
            "method": request.method.value,
            "path": path,
            "status": raw.status,
            "error_type": type(error).__name__,
            "request_id": error.request_id,
        },
    )
