"""State manager — current input, observer list and the navigator version."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from .config import VisualizerConfig

logger = logging.getLogger(__name__)

Observer = Callable[[], None]


class StateManager:
    """Single source of truth for the input and change notifications.

    Observers are called in subscription order on every ``notify()``; the
    version counter lets a renderer tell whether anything moved since it
    last drew.
    """

    def __init__(self, config: VisualizerConfig = VisualizerConfig()):
        self._initial_input = tuple(config.default_input)
        self._input: tuple[int, ...] = self._initial_input
        self._version = 0
        self._observers: list[Observer] = []

    @property
    def input(self) -> tuple[int, ...]:
        return self._input

    @property
    def version(self) -> int:
        return self._version

    def set_input(self, values: Sequence[int]) -> None:
        self._input = tuple(values)

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """Register ``observer``; the returned callable unsubscribes it."""
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def notify(self) -> None:
        self._version += 1
        for observer in list(self._observers):
            observer()

    def reset_state(self) -> None:
        self._input = self._initial_input
        self._version = 0

    def dispose(self) -> None:
        self._observers.clear()
