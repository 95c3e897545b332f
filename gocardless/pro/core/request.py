"""Immutable request descriptors.

Architecture:
    Each variant is a frozen dataclass carrying only what its HTTP exchange
    needs. The runner dispatches on the concrete type with ``match``:

    - CreateRequest: POST collection path, body, single-object response
    - GetRequest: GET member path, no body, single-object response
    - UpdateRequest: PUT member path, body, single-object response
    - ListRequest: GET collection path, cursor query, list response

    All variants share the same surface (path_template, path_params,
    query_params, body, request_headers) so the runner never needs
    per-resource code.

See Also:
    - api.request_builder: Fluent builders producing these descriptors
    - ResourceEndpoint: Per-resource paths, envelope key and model
"""

from __future__ import annotations

import uuid
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import Any, ClassVar, TypeAlias

from ..models import Resource
from .envelope import encode
from .enums import HttpMethod
from .exceptions import InvalidRequestError
from .path import PathTemplate

IDEMPOTENCY_KEY_HEADER = "Idempotency-Key"


@dataclass(frozen=True)
class ResourceEndpoint:
    """Protocol description of one resource collection.

    Attributes:
        id: Endpoint identifier used in logs (e.g. "creditors")
        envelope: Top-level JSON key wrapping bodies (e.g. "creditors")
        collection_path: Template for create/list (e.g. "/creditors")
        member_path: Template for get/update (e.g. "/creditors/:identity")
        model: Resource model decoded from responses
    """

    id: str
    envelope: str
    collection_path: str
    member_path: str
    model: type[Resource] = Resource

    @classmethod
    def for_collection(cls, name: str, model: type[Resource] = Resource) -> ResourceEndpoint:
        """Endpoint following the ``/name`` and ``/name/:identity`` convention."""
        return cls(
            id=name,
            envelope=name,
            collection_path=f"/{name}",
            member_path=f"/{name}/:identity",
            model=model,
        )


@dataclass(frozen=True, kw_only=True)
class Request:
    """Fields shared by every request variant."""

    endpoint: ResourceEndpoint
    headers: Mapping[str, str] = field(default_factory=dict)

    method: ClassVar[HttpMethod]
    has_body: ClassVar[bool] = False

    @property
    def path_template(self) -> PathTemplate:
        return PathTemplate(self.endpoint.collection_path)

    @property
    def envelope(self) -> str:
        return self.endpoint.envelope

    def path_params(self) -> dict[str, str]:
        return {}

    def query_params(self) -> dict[str, Any]:
        return {}

    def body(self) -> dict[str, Any] | None:
        return None

    def request_headers(self) -> dict[str, str]:
        return dict(self.headers)

    def path(self) -> str:
        """Resolve the concrete path; raises MissingPathParameter."""
        return self.path_template.resolve(self.path_params())


@dataclass(frozen=True, kw_only=True)
class CreateRequest(Request):
    fields: Mapping[str, Any] = field(default_factory=dict)
    idempotency_key: str = field(default_factory=lambda: str(uuid.uuid4()))

    method: ClassVar[HttpMethod] = HttpMethod.POST
    has_body: ClassVar[bool] = True

    def body(self) -> dict[str, Any]:
        return encode(self.envelope, dict(self.fields))

    def request_headers(self) -> dict[str, str]:
        headers = {IDEMPOTENCY_KEY_HEADER: self.idempotency_key}
        headers.update(self.headers)
        return headers


@dataclass(frozen=True, kw_only=True)
class GetRequest(Request):
    identity: str

    method: ClassVar[HttpMethod] = HttpMethod.GET

    @property
    def path_template(self) -> PathTemplate:
        return PathTemplate(self.endpoint.member_path)

    def path_params(self) -> dict[str, str]:
        return {"identity": self.identity}


@dataclass(frozen=True, kw_only=True)
class UpdateRequest(Request):
    identity: str
    fields: Mapping[str, Any] = field(default_factory=dict)

    method: ClassVar[HttpMethod] = HttpMethod.PUT
    has_body: ClassVar[bool] = True

    def __post_init__(self) -> None:
        if "identity" in self.fields:
            raise InvalidRequestError("identity is a path parameter, not a body field")

    @property
    def path_template(self) -> PathTemplate:
        return PathTemplate(self.endpoint.member_path)

    def path_params(self) -> dict[str, str]:
        return {"identity": self.identity}

    def body(self) -> dict[str, Any]:
        return encode(self.envelope, dict(self.fields))


@dataclass(frozen=True, kw_only=True)
class ListRequest(Request):
    after: str | None = None
    before: str | None = None
    limit: int | None = None
    filters: Mapping[str, Any] = field(default_factory=dict)

    method: ClassVar[HttpMethod] = HttpMethod.GET

    def __post_init__(self) -> None:
        if self.after is not None and self.before is not None:
            raise InvalidRequestError("'after' and 'before' cursors are mutually exclusive")
        if self.limit is not None and (
            isinstance(self.limit, bool) or not isinstance(self.limit, int)
        ):
            raise InvalidRequestError(f"limit must be an integer, got {self.limit!r}")
        reserved = {"after", "before", "limit"} & set(self.filters)
        if reserved:
            raise InvalidRequestError(
                f"Pagination controls cannot be passed as filters: {sorted(reserved)}"
            )

    def query_params(self) -> dict[str, Any]:
        query: dict[str, Any] = {k: v for k, v in self.filters.items() if v is not None}
        if self.after is not None:
            query["after"] = self.after
        if self.before is not None:
            query["before"] = self.before
        if self.limit is not None:
            query["limit"] = self.limit
        return query

    def with_after(self, cursor: str) -> ListRequest:
        """Copy of this request continuing forward from ``cursor``."""
        return replace(self, after=cursor, before=None)


ResourceRequest: TypeAlias = CreateRequest | GetRequest | UpdateRequest | ListRequest
