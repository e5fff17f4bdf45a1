"""Wall-clock access and the periodic tick scheduler.

The timing engines never read the clock or sleep on their own. A
``ClockSource`` answers "what hour is it" and a ``TickScheduler`` calls
``tick`` on the dashboard session at a fixed period from the event loop.
"""

import asyncio
import logging
from collections.abc import Callable
from datetime import datetime
from typing import Protocol

logger = logging.getLogger(__name__)


class ClockSource(Protocol):
    def current_hour(self) -> int:
        """Local wall-clock hour, 0-23."""
        ...


class SystemClock:
    def current_hour(self) -> int:
        return datetime.now().hour


class FixedClock:
    """Clock pinned to a settable hour."""

    def __init__(self, hour: int = 9):
        self.hour = hour

    def current_hour(self) -> int:
        return self.hour


class TickScheduler:
    """Runs tick callbacks periodically on the running event loop.

    Each callback gets its own task so the 100 ms stopwatch loop and the
    1 s countdown loop do not delay each other. Callbacks are synchronous,
    so a single tick always finishes before the next one is scheduled.
    """

    def __init__(self):
        self._loops: list[tuple[str, float, Callable[[], object]]] = []
        self._tasks: list[asyncio.Task] = []

    def every(self, name: str, period_seconds: float, callback: Callable[[], object]) -> None:
        self._loops.append((name, period_seconds, callback))

    @property
    def running(self) -> bool:
        return any(not t.done() for t in self._tasks)

    def start(self) -> None:
        if self.running:
            return
        self._tasks = [
            asyncio.create_task(self._run(name, period, callback), name=f"tick:{name}")
            for name, period, callback in self._loops
        ]
        logger.info("Tick scheduler started with %d loop(s)", len(self._tasks))

    async def stop(self) -> None:
        for task in self._tasks:
            task.cancel()
        for task in self._tasks:
            try:
                await task
            except asyncio.CancelledError:
                pass
        self._tasks = []
        logger.info("Tick scheduler stopped")

    async def _run(self, name: str, period: float, callback: Callable[[], object]) -> None:
        while True:
            await asyncio.sleep(period)
            try:
                callback()
            except Exception:
                logger.exception("Tick callback %s failed", name)
