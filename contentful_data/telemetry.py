"""Structured logging for search and flatten operations.

This module provides lifecycle hooks for client calls, emitting structured
log records that a JSON log formatter or log shipper can pick up.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def log_search_started(*, endpoint_id: str, path: str, query: dict[str, str]) -> None:
    """Log the start of a search request.

    Args:
        endpoint_id: Endpoint identifier
        path: Request path
        query: Encoded query parameters
    """
    logger.debug(
        "search_started",
        extra={"endpoint_id": endpoint_id, "path": path, "query": query},
    )


def log_search_completed(
    *,
    endpoint_id: str,
    total: int,
    items: int,
    latency_ms: float | None = None,
) -> None:
    """Log a completed search request.

    Args:
        endpoint_id: Endpoint identifier
        total: Total matching entries reported by the API
        items: Number of items in the returned page
        latency_ms: Latency in milliseconds (optional)
    """
    logger.info(
        "search_completed",
        extra={
            "endpoint_id": endpoint_id,
            "total": total,
            "items": items,
            "latency_ms": latency_ms,
        },
    )


def log_rate_limited(*, url: str, retry_after: int, will_retry: bool) -> None:
    """Log a rate-limited response.

    Args:
        url: Requested URL
        retry_after: Seconds to wait before retrying
        will_retry: Whether the request will be retried before its deadline
    """
    logger.warning(
        "rate_limited",
        extra={"url": url, "retry_after": retry_after, "will_retry": will_retry},
    )


def log_flatten_completed(*, items: int, latency_ms: float | None = None) -> None:
    logger.debug("flatten_completed", extra={"items": items, "latency_ms": latency_ms})


def log_request_error(*, operation: str, error: Exception) -> None:
    """Log a failed client operation before it propagates to the caller."""
    logger.error(
        "request_error",
        extra={
            "operation": operation,
            "error_type": type(error).__name__,
            "error_kind": getattr(getattr(error, "kind", None), "value", None),
            "error_message": str(error),
        },
    )
