"""
Field summaries for analytics explores.

Computes top-value frequency tables and numeric distributions (with
histograms) for a single field by issuing aggregate queries through a
``QueryRunner`` and shaping the rows into a ``SimpleResult``.
"""

from .capabilities.metadata import Explore, ExploreField, ExploreFields, LookmlModel
from .capabilities.query_runner import InlineQuery, QueryResponse, QueryRunner
from .core import (
    FieldStatsError,
    Histogram,
    HistogramBin,
    InvalidQueryResponseError,
    QueryCache,
    QueryExecutionError,
    SimpleDatum,
    SimpleResult,
    SummaryConfig,
    SummaryKind,
    SummaryRequest,
    UnsupportedSummaryError,
    available_kinds,
    can_compute_distribution,
    can_compute_top_values,
    companion_count_field,
)
from .summaries import FieldSummaryService

__all__ = [
    "Explore",
    "ExploreField",
    "ExploreFields",
    "LookmlModel",
    "InlineQuery",
    "QueryResponse",
    "QueryRunner",
    "FieldStatsError",
    "Histogram",
    "HistogramBin",
    "InvalidQueryResponseError",
    "QueryCache",
    "QueryExecutionError",
    "SimpleDatum",
    "SimpleResult",
    "SummaryConfig",
    "SummaryKind",
    "SummaryRequest",
    "UnsupportedSummaryError",
    "available_kinds",
    "can_compute_distribution",
    "can_compute_top_values",
    "companion_count_field",
    "FieldSummaryService",
]
