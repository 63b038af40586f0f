"""Hover manager — interaction-only state and on-demand chain rebuilding."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, replace

from .chains import chain_at
from .interfaces import HoverHandle
from .trace_types import StepSnapshot

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HoverState:
    """What the pointer is over.

    ``chain_position`` is the ``sequence`` position the hovered chain was
    taken from; None means no chain is hovered.
    """

    chain_indexes: tuple[int, ...] = ()
    chain_position: int | None = None
    is_sequence_hovered: bool = False
    is_predecessors_hovered: bool = False


NO_HOVER = HoverState()


class HoverManager(HoverHandle):
    """Owns hover state and keeps the hovered chain in step with the cursor.

    Args:
        get_current_step: Returns the snapshot currently displayed, or None.
    """

    def __init__(self, get_current_step: Callable[[], StepSnapshot | None]):
        self._get_current_step = get_current_step
        self._state = NO_HOVER

    @property
    def state(self) -> HoverState:
        return self._state

    @property
    def hovered_chain_indexes(self) -> list[int]:
        return list(self._state.chain_indexes)

    @property
    def hovered_chain_position(self) -> int | None:
        return self._state.chain_position

    def handle_chain_hover(self, indexes: Sequence[int], chain_position: int) -> None:
        """Record a chain computed by the caller against the displayed snapshot."""
        self._state = replace(
            self._state, chain_indexes=tuple(indexes), chain_position=chain_position
        )

    def handle_chain_leave(self) -> None:
        self._clear_chain()

    def handle_sequence_hover(self) -> None:
        self._state = replace(self._state, is_sequence_hovered=True)

    def handle_sequence_leave(self) -> None:
        self._state = replace(self._state, is_sequence_hovered=False)

    def handle_predecessors_hover(self) -> None:
        self._state = replace(self._state, is_predecessors_hovered=True)

    def handle_predecessors_leave(self) -> None:
        self._state = replace(self._state, is_predecessors_hovered=False)

    def refresh_hover_state(self) -> None:
        """Rebuild the hovered chain against the snapshot now displayed.

        Must run after every cursor move. When the hovered position does not
        exist in the new snapshot the chain hover is dropped.
        """
        position = self._state.chain_position
        if position is None:
            return

        current = self._get_current_step()
        if current is None:
            logger.debug("No current step, clearing hovered chain")
            self._clear_chain()
            return

        chain = chain_at(position, current.sequence, current.predecessors)
        if chain is None:
            logger.debug(
                "Chain position %d out of range at step %d, clearing hover",
                position,
                current.step_index,
            )
            self._clear_chain()
            return

        self._state = replace(self._state, chain_indexes=tuple(chain))

    def reset(self) -> None:
        self._state = NO_HOVER

    def _clear_chain(self) -> None:
        self._state = replace(self._state, chain_indexes=(), chain_position=None)
