"""
FastAPI routes for field summaries: capabilities, summaries, cache lookup.
"""

from __future__ import annotations

from typing import Any, Dict

from pydantic import BaseModel, Field

try:
    from fastapi import APIRouter, HTTPException
except ImportError:
    raise ImportError(
        "FastAPI is required for field summary routes. "
        "Install with: pip install 'fieldstats[fastapi]'"
    )

from fieldstats.capabilities.metadata import Explore, ExploreField, LookmlModel
from fieldstats.core.errors import QueryExecutionError, UnsupportedSummaryError
from fieldstats.core.models import SimpleResult, SummaryKind, SummaryRequest
from fieldstats.summaries import FieldSummaryService


# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------


class CapabilitiesRequest(BaseModel):
    explore: Explore = Field(description="Explore the field belongs to")
    field: ExploreField = Field(description="Field the user selected")


class SummaryRequestBody(BaseModel):
    model: LookmlModel
    explore: Explore
    field: ExploreField
    kind: SummaryKind = Field(description="Values or Distribution")

    def to_request(self) -> SummaryRequest:
        return SummaryRequest(
            model=self.model,
            explore=self.explore,
            field=self.field,
            kind=self.kind,
        )


def _result_payload(result: SimpleResult) -> Dict[str, Any]:
    payload = result.model_dump(mode="json", exclude_none=True)
    # Column maxima keep their positions even when a column has none.
    payload["max"] = list(result.max)
    return payload


# ---------------------------------------------------------------------------
# Route registration
# ---------------------------------------------------------------------------


def register_summary_routes(app: Any, service: FieldSummaryService) -> None:
    """Register field summary API routes on a FastAPI app."""
    router = APIRouter(prefix="/api/v1/field-summaries", tags=["field-summaries"])

    @router.post("/capabilities")
    async def capabilities(body: CapabilitiesRequest) -> Dict[str, Any]:
        kinds = service.available_kinds(body.explore, body.field)
        return {"kinds": [kind.value for kind in kinds]}

    @router.post("")
    async def summarize(body: SummaryRequestBody) -> Dict[str, Any]:
        try:
            result = await service.summarize(body.to_request())
        except UnsupportedSummaryError as e:
            raise HTTPException(status_code=400, detail=str(e))
        except QueryExecutionError as e:
            raise HTTPException(status_code=502, detail=str(e))
        return _result_payload(result)

    @router.post("/cached")
    async def cached(body: SummaryRequestBody) -> Dict[str, Any]:
        result = service.get_cached(body.to_request())
        return {"result": _result_payload(result) if result is not None else None}

    app.include_router(router)
