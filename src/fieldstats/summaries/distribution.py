"""
Numeric distribution for a dimension: min/max/average plus a histogram.

Runs a stats query first, then (when a minimum is available) a second query
that counts rows per bin using a derived ``bin`` dimension.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from fieldstats.capabilities.query_runner import (
    CellValue,
    DynamicField,
    InlineQuery,
    QueryCell,
    QueryResponse,
    QueryRunner,
)
from fieldstats.core.capability import companion_count_field
from fieldstats.core.expression import bin_boundaries, bin_expression
from fieldstats.core.formatting import is_number, localize
from fieldstats.core.models import (
    Histogram,
    HistogramBin,
    SimpleDatum,
    SimpleResult,
    SummaryConfig,
    SummaryRequest,
)

logger = logging.getLogger(__name__)

BIN_DIMENSION = "bin"
STAT_MEASURES = ("min", "max", "average")


def build_stats_query(request: SummaryRequest) -> InlineQuery:
    return InlineQuery(
        model=request.model.name,
        view=request.explore.name,
        fields=list(STAT_MEASURES),
        dynamic_fields=[
            DynamicField(measure=name, type=name, based_on=request.field.name)
            for name in STAT_MEASURES
        ],
    )


def build_histogram_query(
    request: SummaryRequest,
    count_field_name: str,
    edges: List[float],
) -> InlineQuery:
    expression = bin_expression(request.field.name, edges[1:])
    return InlineQuery(
        model=request.model.name,
        view=request.explore.name,
        fields=[BIN_DIMENSION, count_field_name],
        dynamic_fields=[
            DynamicField(dimension=BIN_DIMENSION, expression=expression.render())
        ],
        limit=len(edges) - 1,
    )


def _bin_index(value: CellValue) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return int(number) if number.is_integer() else None


def assemble_histogram(
    response: QueryResponse,
    count_field_name: str,
    edges: List[float],
) -> Histogram:
    """One bin per edge pair; bins with no matching row count zero."""
    counts: Dict[int, CellValue] = {}
    for row in response.data:
        index = _bin_index((row.get(BIN_DIMENSION) or QueryCell()).value)
        if index is None or index in counts:
            continue
        counts[index] = (row.get(count_field_name) or QueryCell()).value

    bins = []
    for index in range(len(edges) - 1):
        count = counts.get(index)
        bins.append(
            HistogramBin(
                value=count if is_number(count) else 0,
                min=edges[index],
                max=edges[index + 1],
            )
        )
    return Histogram(data=bins)


def _stat(response: QueryResponse, name: str) -> CellValue:
    if not response.data:
        return None
    cell = response.data[0].get(name)
    return cell.value if cell is not None else None


async def get_distribution(
    request: SummaryRequest,
    runner: QueryRunner,
    config: Optional[SummaryConfig] = None,
) -> SimpleResult:
    config = config or SummaryConfig()
    field = request.field

    logger.debug("Running distribution stats query for %s", field.name)
    stats = await runner.run_inline_query(build_stats_query(request))
    minimum = _stat(stats, "min")
    maximum = _stat(stats, "max")
    average = _stat(stats, "average")

    histogram = None
    # A zero minimum skips the histogram just like a missing one.
    if minimum and is_number(minimum) and is_number(maximum):
        count_field = companion_count_field(
            request.explore, field, count_label=config.count_label
        )
        if count_field is None:
            logger.warning(
                "Skipping histogram for %s: no count measure shares view label %r",
                field.name,
                field.view_label,
            )
        else:
            edges = bin_boundaries(minimum, maximum, config.histogram_bin_count)
            logger.debug(
                "Running histogram query for %s over %d bins",
                field.name,
                len(edges) - 1,
            )
            response = await runner.run_inline_query(
                build_histogram_query(request, count_field.name, edges)
            )
            histogram = assemble_histogram(response, count_field.name, edges)

    return SimpleResult(
        align=["left", "right"],
        data=[
            [SimpleDatum(v="Min"), SimpleDatum(v=localize(minimum))],
            [SimpleDatum(v="Max"), SimpleDatum(v=localize(maximum))],
            [SimpleDatum(v="Average"), SimpleDatum(v=localize(average))],
        ],
        max=[None, None],
        histogram=histogram,
    )
