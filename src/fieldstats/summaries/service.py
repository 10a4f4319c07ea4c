"""Field summary service: validates, dispatches and memoizes requests."""

from __future__ import annotations

import logging
from typing import List, Optional

from fieldstats.capabilities.metadata import Explore, ExploreField
from fieldstats.capabilities.query_runner import QueryRunner
from fieldstats.core.cache import QueryCache
from fieldstats.core.capability import available_kinds, ensure_computable
from fieldstats.core.errors import UnsupportedSummaryError
from fieldstats.core.models import (
    SimpleResult,
    SummaryConfig,
    SummaryKind,
    SummaryRequest,
)

from .distribution import get_distribution
from .top_values import get_top_values

logger = logging.getLogger(__name__)


class FieldSummaryService:
    """Computes field summaries, at most once per distinct request.

    The cache lives as long as the service instance, so hosts choose its
    lifetime (per UI session, per process) by how long they keep the service.
    """

    def __init__(
        self,
        runner: QueryRunner,
        *,
        config: Optional[SummaryConfig] = None,
        cache: Optional[QueryCache[SimpleResult]] = None,
    ) -> None:
        self._runner = runner
        self._config = config or SummaryConfig()
        self._cache: QueryCache[SimpleResult] = cache if cache is not None else QueryCache()

    @property
    def cache(self) -> QueryCache[SimpleResult]:
        return self._cache

    @property
    def config(self) -> SummaryConfig:
        return self._config

    def available_kinds(
        self, explore: Explore, field: ExploreField
    ) -> List[SummaryKind]:
        return available_kinds(explore, field, count_label=self._config.count_label)

    async def summarize(self, request: SummaryRequest) -> SimpleResult:
        """Return the summary for ``request``, computing it on first use."""
        ensure_computable(request, count_label=self._config.count_label)
        return await self._cache.get_or_compute(
            request.cache_key(), lambda: self._compute(request)
        )

    def get_cached(self, request: SummaryRequest) -> Optional[SimpleResult]:
        return self._cache.peek(request.cache_key())

    async def _compute(self, request: SummaryRequest) -> SimpleResult:
        logger.debug(
            "Computing %s summary for %s.%s",
            request.kind.value,
            request.explore.name,
            request.field.name,
        )
        if request.kind == SummaryKind.VALUES:
            return await get_top_values(request, self._runner, self._config)
        if request.kind == SummaryKind.DISTRIBUTION:
            return await get_distribution(request, self._runner, self._config)
        raise UnsupportedSummaryError(f"Unhandled summary kind: {request.kind}")
