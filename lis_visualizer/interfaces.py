"""Capability interfaces handed to the orchestration layer.

Each collaborator is reached only through its interface, so handlers can be
exercised against fakes without building a whole session.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .navigator import NavigatorState
    from .trace_types import StepSnapshot


class NavigatorHandle(ABC):
    @abstractmethod
    def get_state(self) -> NavigatorState: ...

    @abstractmethod
    def get_current_step(self) -> StepSnapshot | None: ...

    @abstractmethod
    def get_previous_step(self) -> StepSnapshot | None: ...

    @abstractmethod
    def next(self) -> StepSnapshot | None: ...

    @abstractmethod
    def prev(self) -> StepSnapshot | None: ...

    @abstractmethod
    def go_to(self, step_index: int) -> StepSnapshot | None: ...

    @abstractmethod
    def go_to_end(self) -> StepSnapshot | None: ...

    @abstractmethod
    def reset(self) -> None: ...


class PlaybackHandle(ABC):
    @property
    @abstractmethod
    def is_playing(self) -> bool: ...

    @property
    @abstractmethod
    def speed(self) -> int: ...

    @abstractmethod
    def start(self) -> None: ...

    @abstractmethod
    def stop(self) -> None: ...

    @abstractmethod
    def toggle(self) -> None: ...

    @abstractmethod
    def update_speed(self, new_speed: int) -> None: ...

    @abstractmethod
    def dispose(self) -> None: ...


class HoverHandle(ABC):
    @abstractmethod
    def handle_chain_hover(self, indexes: Sequence[int], chain_position: int) -> None: ...

    @abstractmethod
    def handle_chain_leave(self) -> None: ...

    @abstractmethod
    def handle_sequence_hover(self) -> None: ...

    @abstractmethod
    def handle_sequence_leave(self) -> None: ...

    @abstractmethod
    def handle_predecessors_hover(self) -> None: ...

    @abstractmethod
    def handle_predecessors_leave(self) -> None: ...

    @abstractmethod
    def refresh_hover_state(self) -> None: ...

    @abstractmethod
    def reset(self) -> None: ...
