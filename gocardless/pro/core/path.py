"""Endpoint path templates with ``:name`` placeholders."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .exceptions import MissingPathParameter

_PLACEHOLDER = re.compile(r":([A-Za-z_][A-Za-z0-9_]*)")


@dataclass(frozen=True)
class PathTemplate:
    """Immutable path template such as ``/creditors/:identity``.

    Values are substituted verbatim; identities issued by the API are
    already URL-safe.
    """

    template: str
    placeholders: tuple[str, ...] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "placeholders", tuple(_PLACEHOLDER.findall(self.template))
        )

    def resolve(self, params: Mapping[str, Any] | None = None) -> str:
        """Return the concrete path.

        Raises:
            MissingPathParameter: If any placeholder has no value, or a None
                or empty one.
        """
        params = params or {}
        for name in self.placeholders:
            value = params.get(name)
            if value is None or value == "":
                raise MissingPathParameter(
                    f"Missing value for path parameter '{name}' in '{self.template}'",
                    parameter=name,
                )
        return _PLACEHOLDER.sub(lambda m: str(params[m.group(1)]), self.template)

    def __str__(self) -> str:
        return self.template


def resolve_path(template: str | PathTemplate, params: Mapping[str, Any] | None = None) -> str:
    if isinstance(template, str):
        template = PathTemplate(template)
    return template.resolve(params)
