"""Visualizer session — composition root for one interactive view.

Owns the current trace and navigator and wires the hover manager, playback
controller, event handlers and keyboard shortcuts around them.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from .config import VisualizerConfig
from .handlers import EventHandlers
from .hover import HoverManager
from .keyboard import KeyboardActions, KeyboardHandler
from .navigator import StepNavigator, create_navigator
from .playback import PlaybackController, PlaybackState
from .scheduler import IntervalScheduler
from .state import StateManager
from .trace import compute_trace
from .trace_types import Trace
from .view import VisualizationView, build_view

logger = logging.getLogger(__name__)


class VisualizerSession:
    """Everything one open visualizer needs.

    Args:
        config: Defaults and speed bounds.
        scheduler: Timer source for playback; defaults to asyncio.
        initial_input: Overrides ``config.default_input``. Must already be
            deduplicated.
    """

    def __init__(
        self,
        config: VisualizerConfig = VisualizerConfig(),
        scheduler: IntervalScheduler | None = None,
        initial_input: Sequence[int] | None = None,
    ):
        self.config = config
        self.state = StateManager(config)
        if initial_input is not None:
            self.state.set_input(initial_input)

        self._trace = compute_trace(self.state.input)
        self._navigator = create_navigator(self._trace)
        self._disposed = False

        self.hover = HoverManager(get_current_step=self._current_step)
        self.playback = PlaybackController(
            get_navigator=self.get_navigator,
            on_step_update=self.update_step,
            scheduler=scheduler,
            config=config,
            on_state_change=self._on_playback_state_change,
        )
        self.handlers = EventHandlers(
            state_manager=self.state,
            get_navigator=self.get_navigator,
            playback=self.playback,
            hover=self.hover,
            reset_navigator=self.reset_navigator,
            update_step=self.update_step,
            config=config,
        )
        self.keyboard = KeyboardHandler(
            KeyboardActions(
                on_previous=self.handlers.handle_previous,
                on_next=self.handlers.handle_next,
                on_reset=self.handlers.handle_reset,
                on_go_to_end=self.handlers.handle_go_to_end,
                on_toggle_play=self.handlers.handle_toggle_play,
                on_speed_up=self.handlers.handle_speed_up,
                on_speed_down=self.handlers.handle_speed_down,
            )
        )
        self.keyboard.register()

    @property
    def trace(self) -> Trace:
        return self._trace

    def get_navigator(self) -> StepNavigator:
        return self._navigator

    def reset_navigator(self) -> None:
        """Recompute the trace from the current input and start a new cursor."""
        self._trace = compute_trace(self.state.input)
        self._navigator = create_navigator(self._trace)

    def update_step(self) -> None:
        self.hover.refresh_hover_state()
        self.state.notify()

    def subscribe(self, observer: Callable[[], None]) -> Callable[[], None]:
        return self.state.subscribe(observer)

    def view(self) -> VisualizationView:
        navigator = self._navigator
        return build_view(
            trace=self._trace,
            navigator_state=navigator.get_state(),
            current=navigator.get_current_step(),
            previous=navigator.get_previous_step(),
            hover_state=self.hover.state,
            is_playing=self.playback.is_playing,
            speed=self.playback.speed,
            version=self.state.version,
        )

    def dispose(self) -> None:
        """Stop playback and detach shortcuts and observers; idempotent."""
        if self._disposed:
            return
        self._disposed = True
        self.playback.dispose()
        self.keyboard.dispose()
        self.state.dispose()
        logger.debug("Session disposed")

    def __enter__(self) -> VisualizerSession:
        return self

    def __exit__(self, *exc_info) -> None:
        self.dispose()

    def _current_step(self):
        return self._navigator.get_current_step()

    def _on_playback_state_change(self, state: PlaybackState) -> None:
        self.state.notify()
