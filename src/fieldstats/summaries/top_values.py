"""Top-N value frequencies for a dimension."""

from __future__ import annotations

import logging
from typing import Optional

from fieldstats.capabilities.query_runner import InlineQuery, QueryCell, QueryRunner
from fieldstats.core.capability import companion_count_field
from fieldstats.core.errors import UnsupportedSummaryError
from fieldstats.core.formatting import format_cell, format_number, is_number
from fieldstats.core.models import SimpleResult, SummaryConfig, SummaryRequest

logger = logging.getLogger(__name__)


def build_top_values_query(
    request: SummaryRequest, count_field_name: str, *, limit: int
) -> InlineQuery:
    return InlineQuery(
        model=request.model.name,
        view=request.explore.name,
        fields=[request.field.name, count_field_name],
        sorts=[f"{count_field_name} desc"],
        limit=limit,
        total=True,
    )


async def get_top_values(
    request: SummaryRequest,
    runner: QueryRunner,
    config: Optional[SummaryConfig] = None,
) -> SimpleResult:
    """Most frequent values of the field with their row counts."""
    config = config or SummaryConfig()
    field = request.field
    count_field = companion_count_field(
        request.explore, field, count_label=config.count_label
    )
    if count_field is None:
        raise UnsupportedSummaryError(
            f"No count measure available for '{field.name}'"
        )

    query = build_top_values_query(
        request, count_field.name, limit=config.top_values_limit
    )
    logger.debug("Running top values query for %s", field.name)
    response = await runner.run_inline_query(query)

    data = []
    for row in response.data:
        data.append(
            [
                format_cell(row.get(field.name) or QueryCell()),
                format_cell(row.get(count_field.name) or QueryCell()),
            ]
        )

    # Rows come back sorted by count descending, so the first is the largest.
    top_count = data[0][1].n if data else None

    aux = None
    totals = response.totals_data or {}
    total_cell = totals.get(count_field.name)
    if total_cell is not None and is_number(total_cell.value):
        aux = f"{format_number(total_cell.value)} rows"

    return SimpleResult(
        align=["left", "right"],
        data=data,
        max=[None, top_count],
        aux=aux,
    )
