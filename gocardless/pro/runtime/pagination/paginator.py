"""Cursor pagination strategies for list requests.

Architecture:
    Two explicit entry points consume the same ListRequest:
    - fetch_page(): one HTTP call, returns a Page with both cursors; the
      caller drives further calls with the returned cursors
    - iterate(): returns a PageIterator, a lazy forward-only async sequence
      of resources that follows ``after`` cursors on demand

    ``limit`` is forwarded per HTTP call and never caps the traversal.

Design Decisions:
    - Lazy failure: a continuation page is fetched only when the next element
      is demanded, so transport and HTTP errors surface from that
      ``__anext__`` call and already-yielded resources stay valid
    - Forward only: ``before`` is accepted by fetch_page() alone
    - A continuation cursor equal to the one just sent raises MalformedEnvelope
    - Single use: a PageIterator is its own iterator and cannot be restarted;
      after an error or exhaustion it stays finished

Concurrency:
    A PageIterator must be advanced by one task at a time. Independent
    iterators share no state.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from ...core.exceptions import InvalidRequestError, MalformedEnvelope
from ...core.request import ListRequest
from ...models import Page, Resource
from ..rest.adapters import PageAdapter
from ..rest.runner import RestRunner
from .telemetry import log_iteration_complete, log_iteration_error, log_page_fetched

R = TypeVar("R", bound=Resource)


async def fetch_page(runner: RestRunner, request: ListRequest, *, page_index: int = 0) -> Page[Any]:
    """Execute exactly one list call and return its Page.

    Args:
        runner: Runner bound to a transport
        request: List request carrying optional after/before/limit
        page_index: Position of this page within a traversal (for logs)

    Returns:
        Page with resources in server order and its continuation cursors
    """
    page: Page[Any] = await runner.run(
        request=request, adapter=PageAdapter(request.endpoint.model)
    )
    log_page_fetched(
        endpoint_id=request.endpoint.id,
        page_index=page_index,
        items=len(page.items),
        after=page.after,
        before=page.before,
    )
    return page


def iterate(runner: RestRunner, request: ListRequest) -> PageIterator[Any]:
    """Return a lazy sequence over every resource reachable via ``after``.

    No HTTP call is made until the first element is demanded.

    Raises:
        InvalidRequestError: If the request carries a ``before`` cursor.
    """
    if request.before is not None:
        raise InvalidRequestError(
            "'before' is only supported when fetching a single page; "
            "auto-iteration moves forward with 'after'"
        )
    return PageIterator(runner, request)


class PageIterator(Generic[R]):
    """Async iterator following ``after`` cursors across pages."""

    def __init__(self, runner: RestRunner, request: ListRequest) -> None:
        self._runner = runner
        self._request = request
        self._page: Page[R] | None = None
        self._cursor: str | None = None
        self._index = 0
        self._pages_fetched = 0
        self._items_yielded = 0
        self._finished = False

    @property
    def pages_fetched(self) -> int:
        return self._pages_fetched

    @property
    def current_page(self) -> Page[R] | None:
        return self._page

    def __aiter__(self) -> PageIterator[R]:
        return self

    async def __anext__(self) -> R:
        while not self._finished:
            if self._page is not None and self._index < len(self._page.items):
                item = self._page.items[self._index]
                self._index += 1
                self._items_yielded += 1
                return item

            if self._page is not None and self._page.after is None:
                self._finish()
                break

            await self._fetch_next()

        raise StopAsyncIteration

    async def _fetch_next(self) -> None:
        try:
            request = self._next_request()
            page = await fetch_page(self._runner, request, page_index=self._pages_fetched)
        except Exception as e:
            self._finished = True
            log_iteration_error(
                endpoint_id=self._request.endpoint.id,
                page_index=self._pages_fetched,
                error_type=type(e).__name__,
                error_message=str(e),
            )
            raise

        self._page = page
        self._cursor = request.after
        self._index = 0
        self._pages_fetched += 1

    def _next_request(self) -> ListRequest:
        if self._page is None:
            return self._request
        if self._page.after == self._cursor:
            raise MalformedEnvelope(
                f"List cursor '{self._page.after}' did not advance",
                envelope=self._request.envelope,
            )
        return self._request.with_after(self._page.after)

    def _finish(self) -> None:
        self._finished = True
        log_iteration_complete(
            endpoint_id=self._request.endpoint.id,
            pages=self._pages_fetched,
            items=self._items_yielded,
        )
