"""Adapters decoding envelopes into resource models."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Generic, TypeVar

from pydantic import ValidationError

from ...core.envelope import decode, decode_list
from ...core.exceptions import MalformedEnvelope
from ...models import Cursors, Page, Resource

if TYPE_CHECKING:
    from ...core.request import Request

R = TypeVar("R", bound=Resource)


class ResponseAdapter:
    def parse(self, response: Any, request: Request) -> Any:
        return response


class ResourceAdapter(ResponseAdapter, Generic[R]):
    """Adapter for single-object envelopes (create, get, update)."""

    def __init__(self, model: type[R]) -> None:
        self.model = model

    def parse(self, response: Any, request: Request) -> R:
        data = decode(response, request.envelope)
        try:
            return self.model.model_validate(data)
        except ValidationError as e:
            raise MalformedEnvelope(
                f"'{request.envelope}' did not match {self.model.__name__}: {e}",
                envelope=request.envelope,
            ) from e


class PageAdapter(ResponseAdapter, Generic[R]):
    """Adapter for list envelopes, producing one Page."""

    def __init__(self, model: type[R]) -> None:
        self.model = model

    def parse(self, response: Any, request: Request) -> Page[R]:
        rows, meta = decode_list(response, request.envelope)
        try:
            items = [self.model.model_validate(row) for row in rows]
        except ValidationError as e:
            raise MalformedEnvelope(
                f"'{request.envelope}' item did not match {self.model.__name__}: {e}",
                envelope=request.envelope,
            ) from e
        return Page[self.model](
            items=items,
            cursors=Cursors(before=meta.before, after=meta.after),
            limit=meta.limit,
        )
