"""Envelope codec for request and response bodies.

Every body on the wire is a JSON object keyed by the resource collection
name::

    {"creditors": {...}}
    {"creditors": [...], "meta": {"cursors": {"before": ..., "after": ...}, "limit": 50}}
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .exceptions import MalformedEnvelope

META_KEY = "meta"


@dataclass(frozen=True)
class ListMeta:
    """Pagination metadata of a list envelope."""

    before: str | None = None
    after: str | None = None
    limit: int | None = None


def encode(key: str, body: Any) -> dict[str, Any]:
    return {key: body}


def decode(wire: Any, key: str) -> dict[str, Any]:
    """Unwrap a single-object envelope.

    Raises:
        MalformedEnvelope: If the key is missing or its value is not an object.
    """
    value = _unwrap(wire, key)
    if not isinstance(value, Mapping):
        raise MalformedEnvelope(
            f"Expected an object under '{key}', got {type(value).__name__}",
            envelope=key,
        )
    return dict(value)


def decode_list(wire: Any, key: str) -> tuple[list[dict[str, Any]], ListMeta]:
    """Unwrap a list envelope into its items and pagination metadata.

    Raises:
        MalformedEnvelope: If the key is missing, the value is not an array of
            objects, or ``meta`` does not have the cursor shape.
    """
    value = _unwrap(wire, key)
    if not isinstance(value, list):
        raise MalformedEnvelope(
            f"Expected an array under '{key}', got {type(value).__name__}",
            envelope=key,
        )
    for index, item in enumerate(value):
        if not isinstance(item, Mapping):
            raise MalformedEnvelope(
                f"Expected object at '{key}[{index}]', got {type(item).__name__}",
                envelope=key,
            )
    return [dict(item) for item in value], _decode_meta(wire.get(META_KEY), key)


def _unwrap(wire: Any, key: str) -> Any:
    if not isinstance(wire, Mapping):
        raise MalformedEnvelope(
            f"Expected a JSON object envelope, got {type(wire).__name__}", envelope=key
        )
    if key not in wire:
        raise MalformedEnvelope(f"Envelope key '{key}' missing from response", envelope=key)
    return wire[key]


def _decode_meta(meta: Any, key: str) -> ListMeta:
    if meta is None:
        return ListMeta()
    if not isinstance(meta, Mapping):
        raise MalformedEnvelope("'meta' must be an object", envelope=key)

    cursors = meta.get("cursors") or {}
    if not isinstance(cursors, Mapping):
        raise MalformedEnvelope("'meta.cursors' must be an object", envelope=key)
    before = cursors.get("before")
    after = cursors.get("after")
    for name, cursor in (("before", before), ("after", after)):
        if cursor is not None and not isinstance(cursor, str):
            raise MalformedEnvelope(f"'meta.cursors.{name}' must be a string", envelope=key)

    limit = meta.get("limit")
    if limit is not None and (isinstance(limit, bool) or not isinstance(limit, int)):
        raise MalformedEnvelope("'meta.limit' must be an integer", envelope=key)

    return ListMeta(before=before or None, after=after or None, limit=limit)
