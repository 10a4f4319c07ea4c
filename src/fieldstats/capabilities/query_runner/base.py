"""Query runner interface."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .models import InlineQuery, QueryResponse


class QueryRunner(ABC):
    """Executes ad-hoc aggregate queries against a semantic model."""

    @abstractmethod
    async def run_inline_query(self, query: InlineQuery) -> QueryResponse:
        """Run the query and return its rows (and totals when requested)."""
        pass
