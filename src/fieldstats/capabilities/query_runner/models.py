"""Aggregate query request/response models exchanged with query runners."""

from __future__ import annotations

from typing import Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Field


DynamicMeasureType = Literal["min", "max", "average"]

CellValue = Union[bool, int, float, str, None]


class DynamicField(BaseModel):
    """Ad-hoc field defined inline on a query.

    A dynamic field is either a measure aggregating ``based_on`` with
    ``type``, or a dimension computed from a textual ``expression``.
    """

    measure: Optional[str] = None
    dimension: Optional[str] = None
    type: Optional[DynamicMeasureType] = None
    based_on: Optional[str] = None
    expression: Optional[str] = None


class InlineQuery(BaseModel):
    model: str
    view: str
    fields: List[str] = Field(default_factory=list)
    dynamic_fields: List[DynamicField] = Field(default_factory=list)
    sorts: List[str] = Field(default_factory=list)
    limit: Optional[int] = None
    total: bool = False


class CellLink(BaseModel):
    url: Optional[str] = None
    label: Optional[str] = None
    type: Optional[str] = None


class QueryCell(BaseModel):
    """One cell of a ``json_detail`` result row."""

    value: CellValue = None
    rendered: Optional[str] = None
    links: List[CellLink] = Field(default_factory=list)


class QueryResponse(BaseModel):
    data: List[Dict[str, QueryCell]] = Field(default_factory=list)
    totals_data: Optional[Dict[str, QueryCell]] = None
