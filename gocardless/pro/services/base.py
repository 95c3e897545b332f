"""Generic resource service.

Architecture:
    A ResourceService binds one ResourceEndpoint to a RestRunner and hands
    out builders. It holds no per-request state, so one service instance can
    be shared by concurrent tasks; each call returns a fresh builder.

    Subclasses only declare the endpoint and, optionally, resource-specific
    builder classes with named setters.
"""

from __future__ import annotations

from typing import ClassVar, Generic, TypeVar

from ..api.request_builder import (
    CreateRequestBuilder,
    GetRequestBuilder,
    IteratingListRequestBuilder,
    PagingListRequestBuilder,
    UpdateRequestBuilder,
)
from ..core.request import ResourceEndpoint
from ..models import Resource
from ..runtime.rest import RestRunner

R = TypeVar("R", bound=Resource)


class ResourceService(Generic[R]):
    """create / get / update / list / all for one resource collection."""

    endpoint: ClassVar[ResourceEndpoint]
    create_builder: ClassVar[type[CreateRequestBuilder]] = CreateRequestBuilder
    update_builder: ClassVar[type[UpdateRequestBuilder]] = UpdateRequestBuilder
    get_builder: ClassVar[type[GetRequestBuilder]] = GetRequestBuilder
    list_builder: ClassVar[type[PagingListRequestBuilder]] = PagingListRequestBuilder
    all_builder: ClassVar[type[IteratingListRequestBuilder]] = IteratingListRequestBuilder

    def __init__(self, runner: RestRunner) -> None:
        self._runner = runner

    def create(self) -> CreateRequestBuilder[R]:
        return self.create_builder(self.endpoint, self._runner)

    def get(self, identity: str) -> GetRequestBuilder[R]:
        return self.get_builder(self.endpoint, identity, self._runner)

    def update(self, identity: str) -> UpdateRequestBuilder[R]:
        return self.update_builder(self.endpoint, identity, self._runner)

    def list(self) -> PagingListRequestBuilder[R]:
        """Single page of results; the caller follows cursors."""
        return self.list_builder(self.endpoint, self._runner)

    def all(self) -> IteratingListRequestBuilder[R]:
        """Every result, fetching further pages lazily."""
        return self.all_builder(self.endpoint, self._runner)
