"""Field container backing request builders.

Architecture:
    A FieldContainer records only the fields a caller explicitly set, so the
    serialized body distinguishes three states for every field:
    - omitted: never set, absent from the body
    - null: set to None, serialized as JSON null
    - value: set to anything else (including "")

    Nested sub-objects (for example ``links``) are NestedFields instances
    created lazily on first use. Later nested setters reuse the same
    instance rather than replacing it.

See Also:
    - CreateRequestBuilder / UpdateRequestBuilder: Own one container each
    - envelope.encode: Wraps the serialized container for the wire
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Self


class NestedFields:
    """Mutable mapping of relation name to value inside a FieldContainer."""

    def __init__(self, values: Mapping[str, Any] | None = None) -> None:
        self._values: dict[str, Any] = dict(values or {})

    def set(self, name: str, value: Any) -> Self:
        self._values[name] = value
        return self

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __len__(self) -> int:
        return len(self._values)

    def to_dict(self) -> dict[str, Any]:
        return dict(self._values)


class FieldContainer:
    """Bag of explicitly-set request fields.

    Example:
        >>> fields = FieldContainer()
        >>> fields.set("name", "Acme").set_nested("links", "logo", "LO123").to_dict()
        {'name': 'Acme', 'links': {'logo': 'LO123'}}
    """

    def __init__(self, *, reserved: Iterable[str] = ()) -> None:
        self._fields: dict[str, Any] = {}
        self._nested: dict[str, NestedFields] = {}
        self._reserved = frozenset(reserved)

    def _check_name(self, name: str) -> None:
        if name in self._reserved:
            raise ValueError(f"'{name}' cannot be set as a body field")

    def set(self, name: str, value: Any) -> FieldContainer:
        """Set a scalar field. Setting None sends an explicit null."""
        self._check_name(name)
        if isinstance(value, NestedFields):
            return self.replace_nested(name, value)
        if name in self._nested:
            raise ValueError(f"'{name}' is a nested object; use replace_nested()")
        self._fields[name] = value
        return self

    def unset(self, name: str) -> FieldContainer:
        """Remove a field so it is omitted from the body again."""
        self._fields.pop(name, None)
        self._nested.pop(name, None)
        return self

    def nested(self, parent: str) -> NestedFields:
        """Return the sub-object for ``parent``, creating it on first use."""
        self._check_name(parent)
        if parent in self._fields:
            if self._fields[parent] is not None:
                raise ValueError(f"'{parent}' is already set as a scalar field")
            del self._fields[parent]
        sub = self._nested.get(parent)
        if sub is None:
            sub = NestedFields()
            self._nested[parent] = sub
        return sub

    def set_nested(self, parent: str, name: str, value: Any) -> FieldContainer:
        self.nested(parent).set(name, value)
        return self

    def replace_nested(
        self, parent: str, values: NestedFields | Mapping[str, Any] | None
    ) -> FieldContainer:
        """Replace a whole sub-object. None sends an explicit null."""
        self._check_name(parent)
        if values is None:
            self._nested.pop(parent, None)
            self._fields[parent] = None
            return self
        self._fields.pop(parent, None)
        source = values.to_dict() if isinstance(values, NestedFields) else values
        self._nested[parent] = NestedFields(source)
        return self

    def is_set(self, name: str) -> bool:
        return name in self._fields or name in self._nested

    def to_dict(self) -> dict[str, Any]:
        """Serialize only the fields that were explicitly set.

        The result is a fresh copy; mutating it does not affect the container.
        """
        out: dict[str, Any] = dict(self._fields)
        for parent, sub in self._nested.items():
            out[parent] = sub.to_dict()
        return out
