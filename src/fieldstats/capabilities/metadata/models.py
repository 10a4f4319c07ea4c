"""Read-only descriptors for LookML models, explores and fields."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ExploreField(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    category: Optional[str] = None
    type: Optional[str] = None
    view_label: Optional[str] = None
    label_short: Optional[str] = None
    label: Optional[str] = None


class ExploreFields(BaseModel):
    model_config = ConfigDict(frozen=True)

    dimensions: List[ExploreField] = Field(default_factory=list)
    measures: List[ExploreField] = Field(default_factory=list)


class Explore(BaseModel):
    """One queryable view inside a LookML model."""

    model_config = ConfigDict(frozen=True, protected_namespaces=())

    name: str
    model_name: Optional[str] = None
    label: Optional[str] = None
    fields: ExploreFields = Field(default_factory=ExploreFields)


class LookmlModel(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    label: Optional[str] = None
