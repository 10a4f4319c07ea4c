"""Core types and helpers for field summaries."""

from .cache import QueryCache
from .capability import (
    available_kinds,
    can_compute_distribution,
    can_compute_top_values,
    companion_count_field,
    ensure_computable,
)
from .errors import (
    FieldStatsError,
    InvalidQueryResponseError,
    QueryExecutionError,
    UnsupportedSummaryError,
)
from .formatting import format_cell, format_number, localize
from .models import (
    Histogram,
    HistogramBin,
    SimpleDatum,
    SimpleResult,
    SummaryConfig,
    SummaryKind,
    SummaryRequest,
)

__all__ = [
    "QueryCache",
    "available_kinds",
    "can_compute_distribution",
    "can_compute_top_values",
    "companion_count_field",
    "ensure_computable",
    "FieldStatsError",
    "InvalidQueryResponseError",
    "QueryExecutionError",
    "UnsupportedSummaryError",
    "format_cell",
    "format_number",
    "localize",
    "Histogram",
    "HistogramBin",
    "SimpleDatum",
    "SimpleResult",
    "SummaryConfig",
    "SummaryKind",
    "SummaryRequest",
]
