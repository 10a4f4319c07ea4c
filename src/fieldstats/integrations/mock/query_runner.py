"""Mock query runner used as a golden reference implementation."""

from __future__ import annotations

import asyncio
from typing import Any, Callable, Dict, Iterable, List, Optional, Union

from fieldstats.capabilities.query_runner import (
    InlineQuery,
    QueryResponse,
    QueryRunner,
)

ResponseLike = Union[QueryResponse, Dict[str, Any], Exception]


class MockQueryRunner(QueryRunner):
    """Replays canned responses and records every query it receives.

    Responses are served in order. A ``handler`` may be given instead to
    build a response from each query. Exceptions in the queue are raised.
    """

    def __init__(
        self,
        responses: Optional[Iterable[ResponseLike]] = None,
        *,
        handler: Optional[Callable[[InlineQuery], ResponseLike]] = None,
        delay: float = 0.0,
    ):
        self._responses: List[ResponseLike] = list(responses or [])
        self._handler = handler
        self.delay = delay
        self.queries: List[InlineQuery] = []

    def add_response(self, response: ResponseLike) -> None:
        self._responses.append(response)

    async def run_inline_query(self, query: InlineQuery) -> QueryResponse:
        self.queries.append(query)
        if self.delay:
            await asyncio.sleep(self.delay)

        if self._handler is not None:
            response = self._handler(query)
        elif self._responses:
            response = self._responses.pop(0)
        else:
            response = QueryResponse()

        if isinstance(response, Exception):
            raise response
        if isinstance(response, QueryResponse):
            return response
        return QueryResponse.model_validate(response)
