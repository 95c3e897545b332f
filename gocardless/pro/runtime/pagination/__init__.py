"""Cursor pagination engine."""

from .paginator import PageIterator, fetch_page, iterate

__all__ = [
    "PageIterator",
    "fetch_page",
    "iterate",
]
