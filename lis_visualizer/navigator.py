"""Step navigator — a single cursor over a completed trace."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .interfaces import NavigatorHandle
from .trace_types import StepSnapshot, Trace

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NavigatorState:
    """Read-only projection of the cursor."""

    current_step: int
    total_steps: int
    can_go_back: bool
    can_go_forward: bool


class StepNavigator(NavigatorHandle):
    """Moves a cursor over ``trace.steps``.

    The cursor always stays within ``[0, total_steps - 1]``. Moves that would
    leave that range are no-ops returning None, which callers use to detect
    the ends of the trace.
    """

    def __init__(self, trace: Trace):
        self._trace = trace
        self._cursor = 0

    @property
    def trace(self) -> Trace:
        return self._trace

    @property
    def total_steps(self) -> int:
        return len(self._trace.steps)

    def get_state(self) -> NavigatorState:
        return NavigatorState(
            current_step=self._cursor,
            total_steps=self.total_steps,
            can_go_back=self._cursor > 0,
            can_go_forward=self._cursor < self.total_steps - 1,
        )

    def get_current_step(self) -> StepSnapshot | None:
        if 0 <= self._cursor < self.total_steps:
            return self._trace.steps[self._cursor]
        return None

    def get_previous_step(self) -> StepSnapshot | None:
        if self._cursor > 0:
            return self._trace.steps[self._cursor - 1]
        return None

    def next(self) -> StepSnapshot | None:
        if self._cursor < self.total_steps - 1:
            self._cursor += 1
            logger.debug("Cursor advanced to %d", self._cursor)
            return self.get_current_step()
        return None

    def prev(self) -> StepSnapshot | None:
        if self._cursor > 0:
            self._cursor -= 1
            logger.debug("Cursor moved back to %d", self._cursor)
            return self.get_current_step()
        return None

    def go_to(self, step_index: int) -> StepSnapshot | None:
        if 0 <= step_index < self.total_steps:
            self._cursor = step_index
            logger.debug("Cursor jumped to %d", self._cursor)
            return self.get_current_step()
        logger.debug(
            "Ignoring jump to %d, valid range is [0, %d]",
            step_index,
            self.total_steps - 1,
        )
        return None

    def go_to_end(self) -> StepSnapshot | None:
        return self.go_to(self.total_steps - 1)

    def reset(self) -> None:
        self._cursor = 0


def create_navigator(trace: Trace) -> StepNavigator:
    """Return a fresh navigator positioned on the INIT step."""
    return StepNavigator(trace)
