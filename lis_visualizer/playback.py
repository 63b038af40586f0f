"""Playback controller — timer-driven auto-advance over the navigator."""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import Enum

from .config import VisualizerConfig
from .interfaces import NavigatorHandle, PlaybackHandle
from .scheduler import AsyncioIntervalScheduler, IntervalScheduler, TimerHandle

logger = logging.getLogger(__name__)


class PlaybackState(str, Enum):
    STOPPED = "stopped"
    PLAYING = "playing"


class PlaybackController(PlaybackHandle):
    """Advances the navigator on a repeating timer.

    The controller is the only owner of the timer handle: ``start`` acquires
    it, ``stop``/``dispose``/a restart release it. No method raises.

    Args:
        get_navigator: Returns the navigator currently on display. Looked up
            on every tick so a replaced navigator is picked up.
        on_step_update: Called after each tick that moved the cursor.
        scheduler: Timer source; defaults to the running asyncio loop.
        config: Supplies the initial interval and its bounds.
        on_state_change: Called with the new state on every transition.
    """

    def __init__(
        self,
        get_navigator: Callable[[], NavigatorHandle],
        on_step_update: Callable[[], None],
        scheduler: IntervalScheduler | None = None,
        config: VisualizerConfig = VisualizerConfig(),
        on_state_change: Callable[[PlaybackState], None] | None = None,
    ):
        self._get_navigator = get_navigator
        self._on_step_update = on_step_update
        self._scheduler = scheduler or AsyncioIntervalScheduler()
        self._config = config
        self._on_state_change = on_state_change
        self._speed = config.clamp_speed(config.speed)
        self._state = PlaybackState.STOPPED
        self._timer: TimerHandle | None = None

    @property
    def state(self) -> PlaybackState:
        return self._state

    @property
    def is_playing(self) -> bool:
        return self._state == PlaybackState.PLAYING

    @property
    def speed(self) -> int:
        return self._speed

    def start(self) -> None:
        """Begin auto-advancing; a running timer is fully stopped first.

        When the scheduler cannot install a timer the controller stays
        STOPPED.
        """
        self.stop()
        if not self._schedule():
            return
        logger.info("Playback started at %dms per step", self._speed)
        self._set_state(PlaybackState.PLAYING)

    def stop(self) -> None:
        self._release_timer()
        if self._state == PlaybackState.PLAYING:
            logger.info("Playback stopped")
        self._set_state(PlaybackState.STOPPED)

    def toggle(self) -> None:
        if self.is_playing:
            self.stop()
        else:
            self.start()

    def update_speed(self, new_speed: int) -> None:
        """Store a new interval, clamped to the configured bounds.

        A running timer is replaced so the next tick uses the new interval;
        the playback state does not change.
        """
        self._speed = self._config.clamp_speed(new_speed)
        logger.debug("Playback speed set to %dms", self._speed)
        if not self.is_playing:
            return
        self._release_timer()
        if not self._schedule():
            self._set_state(PlaybackState.STOPPED)

    def dispose(self) -> None:
        self.stop()

    def _tick(self) -> None:
        snapshot = self._get_navigator().next()
        if snapshot is None:
            logger.debug("Trace exhausted, stopping playback")
            self.stop()
            return
        logger.debug("Playback tick reached step %d", snapshot.step_index)
        self._on_step_update()

    def _schedule(self) -> bool:
        try:
            self._timer = self._scheduler.schedule_interval(self._speed, self._tick)
        except (RuntimeError, ValueError) as exc:
            logger.warning("Could not schedule playback timer: %s", exc)
            self._timer = None
            return False
        return True

    def _release_timer(self) -> None:
        if self._timer is not None and not self._timer.cancelled:
            self._timer.cancel()
        self._timer = None

    def _set_state(self, state: PlaybackState) -> None:
        if state == self._state:
            return
        self._state = state
        if self._on_state_change is not None:
            self._on_state_change(state)
