"""Error types raised by field summary computation."""

from __future__ import annotations


class FieldStatsError(Exception):
    """Base error class for field summaries."""


class UnsupportedSummaryError(FieldStatsError):
    """Raised when a summary kind cannot be computed for the requested field."""


class QueryExecutionError(FieldStatsError):
    """Raised when the query runner fails to execute an aggregate query."""


class InvalidQueryResponseError(QueryExecutionError):
    """Raised when a query response does not have the expected shape."""
