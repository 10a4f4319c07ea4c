"""Query runner capability exports."""

from .base import QueryRunner
from .models import (
    CellLink,
    CellValue,
    DynamicField,
    InlineQuery,
    QueryCell,
    QueryResponse,
)

__all__ = [
    "QueryRunner",
    "CellLink",
    "CellValue",
    "DynamicField",
    "InlineQuery",
    "QueryCell",
    "QueryResponse",
]
