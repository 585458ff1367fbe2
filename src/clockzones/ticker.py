"""Ticker — re-projects a clock at a fixed cadence."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from clockzones.projector import ProjectedTime, TimeProjector

logger = logging.getLogger(__name__)

DIGITAL_INTERVAL = 1.0
ANALOG_INTERVAL = 1 / 60

# The callback can be sync or async.
TickCallback = Callable[["ProjectedTime"], Any]
Sleep = Callable[[float], Awaitable[Any]]


class Ticker:
    """Calls *callback* with a fresh projection every *interval* seconds.

    Each tick reads the projector's clock, so a slow callback never makes
    the displayed time lag: the next tick simply shows a later instant.

    Parameters:
        projector:    Source of projections (and of the current instant).
        offset_hours: Offset to project into.
        callback:     Receives each :class:`ProjectedTime`.  May be async.
        interval:     Seconds between ticks.
        sleep:        Injectable sleep for testing.
    """

    def __init__(
        self,
        projector: TimeProjector,
        offset_hours: float,
        callback: TickCallback,
        *,
        interval: float = DIGITAL_INTERVAL,
        sleep: Sleep = asyncio.sleep,
    ) -> None:
        if interval < 0:
            raise ValueError(f"interval must be non-negative, got {interval}")
        self._projector = projector
        self._offset_hours = offset_hours
        self._callback = callback
        self._interval = interval
        self._sleep = sleep
        self._task: asyncio.Task[None] | None = None

    @property
    def interval(self) -> float:
        return self._interval

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def tick(self) -> ProjectedTime:
        """Project once and deliver the result."""
        projected = self._projector.now(self._offset_hours)
        result = self._callback(projected)
        if asyncio.iscoroutine(result):
            await result
        return projected

    async def run(self, ticks: int | None = None) -> None:
        """Tick until cancelled, or *ticks* times.  Callback errors propagate."""
        count = 0
        while ticks is None or count < ticks:
            await self.tick()
            count += 1
            if ticks is not None and count >= ticks:
                break
            await self._sleep(self._interval)

    def start(self) -> None:
        """Run in the background on the current event loop."""
        if self.running:
            return
        self._task = asyncio.get_running_loop().create_task(self.run())
        logger.debug("Ticker started (offset=%s, interval=%ss)", self._offset_hours, self._interval)

    async def stop(self) -> None:
        """Cancel the background task and wait for it to finish."""
        task, self._task = self._task, None
        if task is None:
            return
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            current = asyncio.current_task()
            if current is not None and current.cancelling():
                raise
        logger.debug("Ticker stopped (offset=%s)", self._offset_hours)
