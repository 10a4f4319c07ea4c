"""
In-process memoization of summary computations.

Each key maps to the task computing its result. Concurrent callers for the
same key share that task, so at most one computation per key is ever in
flight. Failed computations are dropped so the next call retries.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Awaitable, Callable, Dict, Generic, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class QueryCache(Generic[T]):
    """Memoizes async computations by canonical key for the cache's lifetime."""

    def __init__(self) -> None:
        self._entries: Dict[str, "asyncio.Task[T]"] = {}

    async def get_or_compute(
        self, key: str, compute: Callable[[], Awaitable[T]]
    ) -> T:
        task = self._entries.get(key)
        if task is not None and _failed(task):
            # The eviction callback may not have run yet.
            task = None
        if task is None:
            logger.debug("Cache miss for %s", key)
            task = asyncio.ensure_future(compute())
            self._entries[key] = task
            task.add_done_callback(lambda done: self._forget_failure(key, done))
        else:
            logger.debug("Cache hit for %s (done=%s)", key, task.done())

        try:
            # Shielded so a cancelled waiter leaves the shared task running.
            return await asyncio.shield(task)
        except Exception:
            self._forget_failure(key, task)
            raise

    def peek(self, key: str) -> Optional[T]:
        """Return the stored result without computing; None if absent or pending."""
        task = self._entries.get(key)
        if task is None or not task.done() or task.cancelled():
            return None
        if task.exception() is not None:
            return None
        return task.result()

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, key: Any) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def _forget_failure(self, key: str, task: "asyncio.Task[T]") -> None:
        if _failed(task):
            if self._entries.get(key) is task:
                del self._entries[key]


def _failed(task: "asyncio.Task[Any]") -> bool:
    return task.done() and (task.cancelled() or task.exception() is not None)
