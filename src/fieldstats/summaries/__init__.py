"""Summarizers and the service that dispatches to them."""

from .distribution import get_distribution
from .service import FieldSummaryService
from .top_values import get_top_values

__all__ = [
    "FieldSummaryService",
    "get_distribution",
    "get_top_values",
]
