"""Keyboard shortcuts mapped onto control operations."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class KeyboardActions:
    """Callbacks the shortcuts trigger."""

    on_previous: Callable[[], None]
    on_next: Callable[[], None]
    on_reset: Callable[[], None]
    on_go_to_end: Callable[[], None]
    on_toggle_play: Callable[[], None]
    on_speed_up: Callable[[], None]
    on_speed_down: Callable[[], None]


class KeyboardHandler:
    """Dispatches key names (DOM ``KeyboardEvent.key`` spelling) to actions.

    Keys are only consumed while the handler is registered and no text
    input has focus.
    """

    def __init__(self, actions: KeyboardActions):
        self._registered = False
        self._bindings: dict[str, Callable[[], None]] = {
            "ArrowLeft": actions.on_previous,
            "ArrowRight": actions.on_next,
            "Home": actions.on_reset,
            "End": actions.on_go_to_end,
            " ": actions.on_toggle_play,
            "+": actions.on_speed_up,
            "=": actions.on_speed_up,
            "-": actions.on_speed_down,
            "_": actions.on_speed_down,
        }

    @property
    def registered(self) -> bool:
        return self._registered

    @property
    def bound_keys(self) -> frozenset[str]:
        return frozenset(self._bindings)

    def register(self) -> None:
        self._registered = True

    def dispose(self) -> None:
        self._registered = False

    def handle_key(self, key: str, input_focused: bool = False) -> bool:
        """Run the action bound to ``key``; return whether the key was consumed."""
        if not self._registered or input_focused:
            return False
        action = self._bindings.get(key)
        if action is None:
            return False
        logger.debug("Key %r triggered %s", key, getattr(action, "__name__", action))
        action()
        return True
