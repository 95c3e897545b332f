"""Single page of a cursor-paginated list."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from .resource import Resource

R = TypeVar("R", bound=Resource)


class Cursors(BaseModel):
    """Continuation cursors of a page."""

    before: str | None = None
    after: str | None = None

    model_config = ConfigDict(frozen=True)


class Page(BaseModel, Generic[R]):
    """Ordered resources from one list response plus continuation cursors."""

    items: list[R] = Field(default_factory=list)
    cursors: Cursors = Field(default_factory=Cursors)
    limit: int | None = None

    model_config = ConfigDict(frozen=True)

    @property
    def after(self) -> str | None:
        return self.cursors.after

    @property
    def before(self) -> str | None:
        return self.cursors.before

    @property
    def has_next(self) -> bool:
        return self.cursors.after is not None

    def __len__(self) -> int:
        return len(self.items)
