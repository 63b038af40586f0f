"""Repeating timers for playback.

The playback controller only sees ``IntervalScheduler``; the asyncio
implementation runs callbacks on the event loop thread, which keeps every
cursor mutation on one thread.
"""

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from collections.abc import Callable

logger = logging.getLogger(__name__)


class TimerHandle(ABC):
    """A running repeating timer."""

    @abstractmethod
    def cancel(self) -> None:
        """Stop the timer. Safe to call repeatedly and from inside its own callback."""
        ...

    @property
    @abstractmethod
    def cancelled(self) -> bool: ...


class IntervalScheduler(ABC):
    """Abstract base for repeating-timer sources."""

    @abstractmethod
    def schedule_interval(
        self, interval_ms: int, callback: Callable[[], None]
    ) -> TimerHandle:
        """Call ``callback`` every ``interval_ms`` milliseconds until cancelled."""
        ...


class _AsyncioTimerHandle(TimerHandle):
    def __init__(
        self,
        loop: asyncio.AbstractEventLoop,
        interval_s: float,
        callback: Callable[[], None],
    ):
        self._loop = loop
        self._interval_s = interval_s
        self._callback = callback
        self._cancelled = False
        self._handle = loop.call_later(interval_s, self._fire)

    def _fire(self) -> None:
        if self._cancelled:
            return
        # Next tick is booked before the callback so the period stays fixed
        self._handle = self._loop.call_later(self._interval_s, self._fire)
        self._callback()

    def cancel(self) -> None:
        if self._cancelled:
            return
        self._cancelled = True
        self._handle.cancel()

    @property
    def cancelled(self) -> bool:
        return self._cancelled


class AsyncioIntervalScheduler(IntervalScheduler):
    """Schedules repeating callbacks with ``loop.call_later``.

    Args:
        loop: Event loop to schedule on. Defaults to the loop running at the
            time ``schedule_interval`` is called.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None):
        self._loop = loop

    def schedule_interval(
        self, interval_ms: int, callback: Callable[[], None]
    ) -> TimerHandle:
        if interval_ms <= 0:
            raise ValueError(f"Interval must be positive, got {interval_ms}ms")
        loop = self._loop or asyncio.get_running_loop()
        logger.debug("Scheduling %dms interval on %r", interval_ms, loop)
        return _AsyncioTimerHandle(loop, interval_ms / 1000, callback)
