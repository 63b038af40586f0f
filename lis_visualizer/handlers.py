"""Event handlers — routes input events to the right control operation.

Two orderings hold for every handler:

* an input change stops playback before the trace and navigator are
  replaced, so no tick can reach a navigator that is being discarded;
* every cursor move is followed by ``update_step`` (hover refresh, then one
  notification), never by a bare notification.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Callable, Sequence

from .config import VisualizerConfig
from .input_parsing import ParseResult, generate_random_sequence, parse_input
from .interfaces import HoverHandle, NavigatorHandle, PlaybackHandle
from .state import StateManager

logger = logging.getLogger(__name__)


class EventHandlers:
    """Control operations exposed to the input layer.

    Args:
        state_manager: Holds the input and notifies observers.
        get_navigator: Returns the navigator for the current trace.
        playback: Auto-play controller.
        hover: Hover manager.
        reset_navigator: Recomputes the trace from the current input and
            installs a fresh navigator.
        update_step: Refreshes hover state, then notifies observers.
        config: Speed bounds for speed up/down.
    """

    def __init__(
        self,
        state_manager: StateManager,
        get_navigator: Callable[[], NavigatorHandle],
        playback: PlaybackHandle,
        hover: HoverHandle,
        reset_navigator: Callable[[], None],
        update_step: Callable[[], None],
        config: VisualizerConfig = VisualizerConfig(),
    ):
        self._state = state_manager
        self._get_navigator = get_navigator
        self._playback = playback
        self._hover = hover
        self._reset_navigator = reset_navigator
        self._update_step = update_step
        self._config = config

    # ── Input ────────────────────────────────────────────────────

    def handle_input_change(self, new_input: Sequence[int]) -> None:
        self._playback.stop()
        self._state.set_input(new_input)
        self._hover.handle_chain_leave()
        self._reset_navigator()
        logger.info("Input changed to %s", list(new_input))
        self._update_step()

    def handle_text_input(self, text: str) -> ParseResult:
        """Parse ``text`` and apply it; a failed parse leaves everything as is."""
        result = parse_input(text)
        if result.success:
            self.handle_input_change(result.data)
        else:
            logger.info("Rejected input %r: %s", text, result.error)
        return result

    def handle_random_input(self, rng: random.Random | None = None) -> list[int]:
        values = generate_random_sequence(rng)
        self.handle_input_change(values)
        return values

    def handle_restore_default_input(self) -> None:
        """Restore the configured default input and clear hover state."""
        self._playback.stop()
        self._state.reset_state()
        self._hover.reset()
        self._reset_navigator()
        logger.info("Input restored to default %s", list(self._state.input))
        self._update_step()

    # ── Navigation ───────────────────────────────────────────────

    def handle_previous(self) -> None:
        self._get_navigator().prev()
        self._update_step()

    def handle_next(self) -> None:
        self._get_navigator().next()
        self._update_step()

    def handle_reset(self) -> None:
        self._playback.stop()
        self._get_navigator().reset()
        self._update_step()

    def handle_go_to_end(self) -> None:
        self._playback.stop()
        self._get_navigator().go_to_end()
        self._update_step()

    def handle_index_click(self, index: int) -> None:
        """Seek to the step that processed input position ``index``.

        Step 0 is INIT, so position ``i`` lives at step ``i + 1``.
        """
        self._playback.stop()
        self._get_navigator().go_to(index + 1)
        self._update_step()

    # ── Playback ─────────────────────────────────────────────────

    def handle_toggle_play(self) -> None:
        self._playback.toggle()

    def handle_speed_change(self, new_speed: int) -> None:
        self._playback.update_speed(new_speed)

    def handle_speed_up(self) -> None:
        self._playback.update_speed(
            self._config.clamp_speed(self._playback.speed - self._config.speed_step)
        )

    def handle_speed_down(self) -> None:
        self._playback.update_speed(
            self._config.clamp_speed(self._playback.speed + self._config.speed_step)
        )

    # ── Hover ────────────────────────────────────────────────────

    def handle_chain_hover(self, indexes: Sequence[int], chain_position: int) -> None:
        self._hover.handle_chain_hover(indexes, chain_position)
        self._state.notify()

    def handle_chain_leave(self) -> None:
        self._hover.handle_chain_leave()
        self._state.notify()

    def handle_sequence_hover(self) -> None:
        self._hover.handle_sequence_hover()
        self._state.notify()

    def handle_sequence_leave(self) -> None:
        self._hover.handle_sequence_leave()
        self._state.notify()

    def handle_predecessors_hover(self) -> None:
        self._hover.handle_predecessors_hover()
        self._state.notify()

    def handle_predecessors_leave(self) -> None:
        self._hover.handle_predecessors_leave()
        self._state.notify()
