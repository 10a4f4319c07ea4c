"""
Pydantic models for field summaries.

Defines the summary request (the unit of work and its cache key), the
uniform display result returned to hosts, and the tunables shared by the
summarizers.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from fieldstats.capabilities.metadata import Explore, ExploreField, LookmlModel


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------


class SummaryKind(str, Enum):
    """Summary types a field can be asked for."""

    VALUES = "Values"
    DISTRIBUTION = "Distribution"


class SummaryRequest(BaseModel):
    """A field in an explore plus the kind of summary wanted for it."""

    model_config = ConfigDict(frozen=True)

    model: LookmlModel
    explore: Explore
    field: ExploreField
    kind: SummaryKind

    def cache_key(self) -> str:
        """Canonical serialization; field order follows the model declarations."""
        return self.model_dump_json()


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------


Alignment = Literal["left", "right"]

Number = Union[int, float]


class SimpleDatum(BaseModel):
    """One display cell: text ``v``, optional link ``l``, optional number ``n``."""

    v: str
    l: Optional[str] = None
    n: Optional[Number] = None


class HistogramBin(BaseModel):
    value: Number = 0
    min: Number
    max: Number


class Histogram(BaseModel):
    data: List[HistogramBin] = Field(default_factory=list)


class SimpleResult(BaseModel):
    """Uniform tabular result with an optional histogram."""

    align: List[Alignment]
    data: List[List[SimpleDatum]] = Field(default_factory=list)
    max: List[Optional[Number]] = Field(default_factory=list)
    aux: Optional[str] = None
    histogram: Optional[Histogram] = None

    @model_validator(mode="after")
    def validate_grid(self) -> "SimpleResult":
        width = len(self.align)
        for index, row in enumerate(self.data):
            if len(row) != width:
                raise ValueError(
                    f"Row {index} has {len(row)} cells, expected {width}"
                )
        if self.max and len(self.max) != width:
            raise ValueError(
                f"max has {len(self.max)} entries, expected {width}"
            )
        return self


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


class SummaryConfig(BaseModel):
    """Tunables for the summarizers."""

    top_values_limit: int = Field(
        default=10, ge=1, description="Rows returned by a top-values query"
    )
    histogram_bin_count: int = Field(
        default=20, ge=1, description="Number of bins in a distribution histogram"
    )
    count_label: str = Field(
        default="Count",
        description="label_short identifying an explore's count measures",
    )
