"""Golden path: top values and distribution for two fields with a mock runner."""

import asyncio

from fieldstats import (
    Explore,
    ExploreField,
    ExploreFields,
    FieldSummaryService,
    LookmlModel,
    SummaryKind,
    SummaryRequest,
)
from fieldstats.capabilities.query_runner import InlineQuery, QueryResponse
from fieldstats.integrations.mock import MockQueryRunner

STATUS = ExploreField(
    name="orders.status", category="dimension", type="string", view_label="Orders"
)
PRICE = ExploreField(
    name="orders.price", category="dimension", type="number", view_label="Orders"
)
COUNT = ExploreField(
    name="orders.count",
    category="measure",
    type="count",
    view_label="Orders",
    label_short="Count",
)
EXPLORE = Explore(
    name="orders",
    fields=ExploreFields(dimensions=[STATUS, PRICE], measures=[COUNT]),
)
MODEL = LookmlModel(name="ecommerce")


def answer(query: InlineQuery) -> QueryResponse:
    if "orders.status" in query.fields:
        return QueryResponse.model_validate(
            {
                "data": [
                    {"orders.status": {"value": "Shipped"}, "orders.count": {"value": 1200}},
                    {"orders.status": {"value": "Pending"}, "orders.count": {"value": 450}},
                ],
                "totals_data": {"orders.count": {"value": 1650}},
            }
        )
    if "bin" in query.fields:
        return QueryResponse.model_validate(
            {
                "data": [
                    {"bin": {"value": i}, "orders.count": {"value": 10 + i}}
                    for i in range(0, 20, 2)
                ]
            }
        )
    return QueryResponse.model_validate(
        {
            "data": [
                {
                    "min": {"value": 5},
                    "max": {"value": 105},
                    "average": {"value": 48.25},
                }
            ]
        }
    )


async def main() -> None:
    service = FieldSummaryService(MockQueryRunner(handler=answer))
    for field in (STATUS, PRICE):
        for kind in service.available_kinds(EXPLORE, field):
            result = await service.summarize(
                SummaryRequest(model=MODEL, explore=EXPLORE, field=field, kind=kind)
            )
            print(f"{field.name} [{kind.value}]")
            for row in result.data:
                print("  " + " | ".join(cell.v for cell in row))
            if result.aux:
                print("  " + result.aux)
            if kind == SummaryKind.DISTRIBUTION and result.histogram:
                print(f"  {len(result.histogram.data)} histogram bins")


if __name__ == "__main__":
    asyncio.run(main())
