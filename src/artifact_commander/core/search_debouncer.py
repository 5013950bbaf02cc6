"""Keystroke debouncing with last-request-wins result delivery."""

from __future__ import annotations

import asyncio
import inspect
import logging
from typing import Any, Awaitable, Callable, Union

from artifact_commander.config.settings import settings
from artifact_commander.core.errors import CommanderError

logger = logging.getLogger(__name__)

SearchFn = Callable[[str], Union[Any, Awaitable[Any]]]
ResultCallback = Callable[[str, Any], None]
ErrorCallback = Callable[[str, CommanderError], None]


class SearchDebouncer:
    """Coalesce rapid query changes into one search per quiet window.

    Every ``submit()`` bumps a generation counter and cancels the scheduled
    search if its timer has not fired yet.  A search that is already in
    flight is left alone, but its outcome is only delivered when its
    generation is still the latest one, so a slow stale response can never
    overwrite newer results.

    ``search`` may be a plain callable (e.g. ``ArtifactCatalogClient.search``)
    or a coroutine function.  Plain callables run in a worker thread.  Must
    be used from inside a running event loop.
    """

    def __init__(
        self,
        search: SearchFn,
        on_result: ResultCallback,
        on_error: ErrorCallback | None = None,
        delay: float | None = None,
    ):
        self.search = search
        self.on_result = on_result
        self.on_error = on_error
        self.delay = settings.debounce_seconds if delay is None else delay
        self.generation = 0
        self.searches_run = 0
        self._timer: asyncio.TimerHandle | None = None
        self._in_flight: set[asyncio.Task] = set()

    def is_current(self, generation: int) -> bool:
        return generation == self.generation

    def submit(self, query: str) -> int:
        """Schedule a search for ``query``, superseding any pending one."""
        self.generation += 1
        generation = self.generation
        if self._timer is not None:
            self._timer.cancel()
        loop = asyncio.get_running_loop()
        self._timer = loop.call_later(self.delay, self._fire, generation, query)
        return generation

    def cancel(self) -> None:
        """Drop the pending search and invalidate anything in flight."""
        self.generation += 1
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    async def drain(self) -> None:
        """Wait until the scheduled search (if any) and all in-flight ones finish."""
        while True:
            if self._timer is not None and not self._timer.cancelled():
                remaining = self._timer.when() - asyncio.get_running_loop().time()
                await asyncio.sleep(max(remaining, 0) + 0.001)
                continue
            if self._in_flight:
                await asyncio.gather(*self._in_flight, return_exceptions=True)
                continue
            return

    def _fire(self, generation: int, query: str) -> None:
        self._timer = None
        task = asyncio.get_running_loop().create_task(self._run(generation, query))
        self._in_flight.add(task)
        task.add_done_callback(self._in_flight.discard)

    async def _run(self, generation: int, query: str) -> None:
        self.searches_run += 1
        try:
            if inspect.iscoroutinefunction(self.search):
                result = await self.search(query)
            else:
                # Blocking HTTP calls must not stall the loop's timers.
                result = await asyncio.to_thread(self.search, query)
                if inspect.isawaitable(result):
                    result = await result
        except CommanderError as exc:
            if self.is_current(generation) and self.on_error is not None:
                self.on_error(query, exc)
            else:
                logger.debug("Discarding stale error for %r: %s", query, exc)
            return

        if not self.is_current(generation):
            logger.debug("Discarding stale result for %r (generation %d < %d)", query, generation, self.generation)
            return
        self.on_result(query, result)
