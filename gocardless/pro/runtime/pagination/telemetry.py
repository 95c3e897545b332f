"""Structured logging for pagination.

This module provides telemetry hooks for page fetches, emitting structured
logs for observability.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def log_page_fetched(
    *,
    endpoint_id: str,
    page_index: int,
    items: int,
    after: str | None,
    before: str | None,
) -> None:
    """Log one fetched page.

    Args:
        endpoint_id: Endpoint identifier
        page_index: Zero-based index of the page within a traversal
        items: Number of resources on the page
        after: Forward cursor returned with the page
        before: Backward cursor returned with the page
    """
    logger.debug(
        "page_fetched",
        extra={
            "endpoint_id": endpoint_id,
            "page_index": page_index,
            "items": items,
            "after": after,
            "before": before,
        },
    )


def log_iteration_complete(*, endpoint_id: str, pages: int, items: int) -> None:
    """Log the end of an auto-iterating traversal."""
    logger.debug(
        "iteration_complete",
        extra={"endpoint_id": endpoint_id, "pages": pages, "items": items},
    )


def log_iteration_error(
    *, endpoint_id: str, page_index: int, error_type: str, error_message: str
) -> None:
    """Log a failure while fetching a continuation page."""
    logger.error(
        "iteration_error",
        extra={
            "endpoint_id": endpoint_id,
            "page_index": page_index,
            "error_type": error_type,
            "error_message": error_message,
        },
    )
