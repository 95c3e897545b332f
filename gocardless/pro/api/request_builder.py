"""Fluent builders producing immutable request descriptors.

Architecture:
    Builders are the mutable half of a request: setters record values in a
    FieldContainer (or cursor attributes for lists) and return the builder
    for chaining. ``build()`` snapshots that state into a frozen descriptor
    from core.request, so a built request never changes when the builder is
    reused or mutated afterwards.

    Builders optionally hold a RestRunner. When they do, ``execute()`` (and
    ``fetch_page()`` / ``iterate()`` for lists) build and run in one step.

Design Decisions:
    - Explicit build(): the descriptor, not the builder, is what travels to
      the runner
    - Generic setters (set, set_link) stay available on every builder;
      resource builders add named setters on top
    - Two list builders: PagingListRequestBuilder (single page, accepts
      before) and IteratingListRequestBuilder (auto-iterating, forward only)

Example:
    >>> request = (
    ...     CreateRequestBuilder(endpoint)
    ...     .set("name", "Acme")
    ...     .set_link("logo", "LO123")
    ...     .build()
    ... )
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Generic, Self, TypeVar

from ..core.exceptions import InvalidRequestError
from ..core.fields import FieldContainer, NestedFields
from ..core.request import (
    CreateRequest,
    GetRequest,
    ListRequest,
    ResourceEndpoint,
    UpdateRequest,
)
from ..models import Page, Resource
from ..runtime.pagination import PageIterator, fetch_page, iterate

if TYPE_CHECKING:
    from ..runtime.rest import RestRunner

__all__ = [
    "RequestBuilder",
    "CreateRequestBuilder",
    "GetRequestBuilder",
    "UpdateRequestBuilder",
    "ListRequestBuilder",
    "PagingListRequestBuilder",
    "IteratingListRequestBuilder",
]

R = TypeVar("R", bound=Resource)

LINKS = "links"


class RequestBuilder(Generic[R]):
    """Shared builder state: endpoint, optional runner and extra headers."""

    def __init__(self, endpoint: ResourceEndpoint, runner: RestRunner | None = None) -> None:
        self._endpoint = endpoint
        self._runner = runner
        self._headers: dict[str, str] = {}

    @property
    def endpoint(self) -> ResourceEndpoint:
        return self._endpoint

    def header(self, name: str, value: str) -> Self:
        """Add a custom header to this request only."""
        self._headers[name] = value
        return self

    def _require_runner(self) -> RestRunner:
        if self._runner is None:
            raise InvalidRequestError(
                "Builder is not bound to a client; call build() and run the request yourself"
            )
        return self._runner


class _BodyBuilder(RequestBuilder[R]):
    _reserved: tuple[str, ...] = ()

    def __init__(self, endpoint: ResourceEndpoint, runner: RestRunner | None = None) -> None:
        super().__init__(endpoint, runner)
        self._fields = FieldContainer(reserved=self._reserved)

    def set(self, name: str, value: Any) -> Self:
        """Set a body field; None is sent as an explicit null."""
        self._fields.set(name, value)
        return self

    def set_link(self, name: str, identity: str | None) -> Self:
        """Set one entry of the ``links`` sub-object, creating it if needed."""
        self._fields.set_nested(LINKS, name, identity)
        return self

    def links(self, links: NestedFields | Mapping[str, Any] | None) -> Self:
        """Replace the whole ``links`` sub-object."""
        self._fields.replace_nested(LINKS, links)
        return self

    def fields(self) -> dict[str, Any]:
        """Body fields set so far (a copy)."""
        return self._fields.to_dict()


class CreateRequestBuilder(_BodyBuilder[R]):
    def __init__(self, endpoint: ResourceEndpoint, runner: RestRunner | None = None) -> None:
        super().__init__(endpoint, runner)
        self._idempotency_key: str | None = None

    def idempotency_key(self, key: str) -> Self:
        """Use a caller-chosen Idempotency-Key instead of a random one."""
        self._idempotency_key = key
        return self

    def build(self) -> CreateRequest:
        kwargs: dict[str, Any] = {}
        if self._idempotency_key is not None:
            kwargs["idempotency_key"] = self._idempotency_key
        return CreateRequest(
            endpoint=self._endpoint,
            fields=self._fields.to_dict(),
            headers=dict(self._headers),
            **kwargs,
        )

    async def execute(self) -> R:
        return await self._require_runner().execute(self.build())


class UpdateRequestBuilder(_BodyBuilder[R]):
    _reserved = ("identity",)

    def __init__(
        self, endpoint: ResourceEndpoint, identity: str, runner: RestRunner | None = None
    ) -> None:
        super().__init__(endpoint, runner)
        self._identity = identity

    def build(self) -> UpdateRequest:
        return UpdateRequest(
            endpoint=self._endpoint,
            identity=self._identity,
            fields=self._fields.to_dict(),
            headers=dict(self._headers),
        )

    async def execute(self) -> R:
        return await self._require_runner().execute(self.build())


class GetRequestBuilder(RequestBuilder[R]):
    def __init__(
        self, endpoint: ResourceEndpoint, identity: str, runner: RestRunner | None = None
    ) -> None:
        super().__init__(endpoint, runner)
        self._identity = identity

    def build(self) -> GetRequest:
        return GetRequest(
            endpoint=self._endpoint, identity=self._identity, headers=dict(self._headers)
        )

    async def execute(self) -> R:
        return await self._require_runner().execute(self.build())


class ListRequestBuilder(RequestBuilder[R]):
    """Cursor, limit and filter setters shared by both list strategies."""

    def __init__(self, endpoint: ResourceEndpoint, runner: RestRunner | None = None) -> None:
        super().__init__(endpoint, runner)
        self._after: str | None = None
        self._before: str | None = None
        self._limit: int | None = None
        self._filters: dict[str, Any] = {}

    def after(self, cursor: str | None) -> Self:
        """Cursor pointing to the start of the desired set."""
        self._after = cursor
        return self

    def limit(self, limit: int | None) -> Self:
        """Number of records to return per underlying call."""
        self._limit = limit
        return self

    def filter(self, name: str, value: Any) -> Self:
        """Resource-specific query filter; None removes it."""
        if value is None:
            self._filters.pop(name, None)
        else:
            self._filters[name] = value
        return self

    def build(self) -> ListRequest:
        """Raises InvalidRequestError when both cursors are set."""
        return ListRequest(
            endpoint=self._endpoint,
            after=self._after,
            before=self._before,
            limit=self._limit,
            filters=dict(self._filters),
            headers=dict(self._headers),
        )


class PagingListRequestBuilder(ListRequestBuilder[R]):
    """List builder for the single-page strategy."""

    def before(self, cursor: str | None) -> Self:
        """Cursor pointing to the end of the desired set."""
        self._before = cursor
        return self

    async def fetch_page(self) -> Page[R]:
        return await fetch_page(self._require_runner(), self.build())

    async def execute(self) -> Page[R]:
        return await self.fetch_page()


class IteratingListRequestBuilder(ListRequestBuilder[R]):
    """List builder for the auto-iterating strategy (forward only)."""

    def iterate(self) -> PageIterator[R]:
        return iterate(self._require_runner(), self.build())

    def execute(self) -> PageIterator[R]:
        return self.iterate()

    def __aiter__(self) -> PageIterator[R]:
        return self.iterate()
