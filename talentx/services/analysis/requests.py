# talentx/services/analysis/requests.py
"""
Generation-keyed analysis requests.

Each run() is tagged with the tracker's generation at the time it starts.
advance() bumps the generation (the user picked another tool or reset the
workspace) and cancels whatever is still in flight, so a late reply can
never overwrite newer state.
"""

import asyncio
import logging
from typing import Awaitable, Set, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class StaleRequestError(Exception):
    def __init__(self, generation: int, current: int):
        super().__init__(f"Request from generation {generation} superseded by generation {current}")
        self.generation = generation
        self.current = current


class AnalysisRequestTracker:
    def __init__(self):
        self._generation = 0
        self._inflight: Set[asyncio.Task] = set()

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def in_flight(self) -> int:
        return len(self._inflight)

    def advance(self) -> int:
        self._generation += 1
        pending = [t for t in self._inflight if not t.done()]
        for task in pending:
            task.cancel()
        if pending:
            logger.info("Cancelled %d in-flight analysis request(s); generation now %d", len(pending), self._generation)
        return self._generation

    async def run(self, coro: Awaitable[T]) -> T:
        generation = self._generation
        task = asyncio.ensure_future(coro)
        self._inflight.add(task)
        try:
            result = await task
        except asyncio.CancelledError:
            # cancelled by advance(); anything else (client gone) propagates
            if task.cancelled() and generation != self._generation:
                raise StaleRequestError(generation, self._generation) from None
            raise
        finally:
            self._inflight.discard(task)
        if generation != self._generation:
            logger.info("Discarding stale analysis result from generation %d", generation)
            raise StaleRequestError(generation, self._generation)
        return result
