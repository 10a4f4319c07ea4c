"""Turn raw query cells into display data."""

from __future__ import annotations

import math
from typing import Any, Mapping, Union

from fieldstats.capabilities.query_runner import CellValue, QueryCell

from .models import SimpleDatum


def is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def format_number(value: Union[int, float]) -> str:
    """Render a number with comma thousands separators.

    At most three fraction digits are kept and trailing zeros are dropped,
    so ``1234.5`` becomes ``"1,234.5"`` and ``165.0`` becomes ``"165"``.
    """
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            return str(value)
        if value.is_integer():
            return f"{int(value):,}"
        text = f"{value:,.3f}".rstrip("0").rstrip(".")
        return "0" if text in ("-0", "") else text
    return f"{value:,}"


def localize(value: CellValue) -> str:
    """Thousands-separated text for truthy numbers, empty text otherwise."""
    if not value:
        return ""
    if is_number(value):
        return format_number(value)
    return str(value)


def value_to_text(value: CellValue) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_cell(raw: Union[QueryCell, Mapping[str, Any]]) -> SimpleDatum:
    """Normalize one result cell into a ``SimpleDatum``."""
    cell = raw if isinstance(raw, QueryCell) else QueryCell.model_validate(raw)
    link = cell.links[0].url if cell.links else None
    text = cell.rendered or value_to_text(cell.value)
    number = cell.value if is_number(cell.value) else None
    return SimpleDatum(v=text, l=link, n=number)
