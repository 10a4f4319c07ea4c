"""Decide which summaries a field supports."""

from __future__ import annotations

from typing import List, Optional

from fieldstats.capabilities.metadata import Explore, ExploreField

from .errors import UnsupportedSummaryError
from .models import SummaryKind, SummaryRequest

COUNT_LABEL = "Count"


def companion_count_field(
    explore: Explore,
    field: ExploreField,
    *,
    count_label: str = COUNT_LABEL,
) -> Optional[ExploreField]:
    """Return the explore's count measure from the same view as ``field``.

    A count measure can only group a dimension that shares its view label.
    """
    for measure in explore.fields.measures:
        if measure.label_short == count_label and measure.view_label == field.view_label:
            return measure
    return None


def can_compute_top_values(
    field: ExploreField,
    explore: Explore,
    *,
    count_label: str = COUNT_LABEL,
) -> bool:
    return field.category == "dimension" and (
        companion_count_field(explore, field, count_label=count_label) is not None
    )


def can_compute_distribution(field: ExploreField) -> bool:
    return field.type == "number" and field.category == "dimension"


def available_kinds(
    explore: Explore,
    field: ExploreField,
    *,
    count_label: str = COUNT_LABEL,
) -> List[SummaryKind]:
    kinds: List[SummaryKind] = []
    if can_compute_top_values(field, explore, count_label=count_label):
        kinds.append(SummaryKind.VALUES)
    if can_compute_distribution(field):
        kinds.append(SummaryKind.DISTRIBUTION)
    return kinds


def ensure_computable(
    request: SummaryRequest, *, count_label: str = COUNT_LABEL
) -> None:
    """Raise ``UnsupportedSummaryError`` unless the request's kind fits its field."""
    field = request.field
    if request.kind == SummaryKind.VALUES:
        if field.category != "dimension":
            raise UnsupportedSummaryError(
                f"Top values need a dimension; '{field.name}' is a {field.category}"
            )
        if companion_count_field(request.explore, field, count_label=count_label) is None:
            raise UnsupportedSummaryError(
                f"No '{count_label}' measure shares view label "
                f"{field.view_label!r} with '{field.name}' "
                f"in explore '{request.explore.name}'"
            )
        return

    if request.kind == SummaryKind.DISTRIBUTION:
        if not can_compute_distribution(field):
            raise UnsupportedSummaryError(
                f"Distribution needs a numeric dimension; '{field.name}' is "
                f"a {field.type} {field.category}"
            )
        return

    raise UnsupportedSummaryError(f"Unhandled summary kind: {request.kind}")
