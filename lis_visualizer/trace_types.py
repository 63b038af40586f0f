"""Trace data types for step-by-step LIS replay."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from pydantic import BaseModel, ConfigDict


class ActionType(str, Enum):
    INIT = "init"
    APPEND = "append"
    REPLACE = "replace"
    SKIP = "skip"


class StepAction(BaseModel):
    """What the algorithm did with one input element.

    ``index`` is set for every variant except INIT; ``position`` only for
    REPLACE. Build instances through the classmethods so the payload always
    matches the variant.
    """

    model_config = ConfigDict(frozen=True)

    type: ActionType
    index: int | None = None
    position: int | None = None

    @classmethod
    def init(cls) -> StepAction:
        return cls(type=ActionType.INIT)

    @classmethod
    def append(cls, index: int) -> StepAction:
        return cls(type=ActionType.APPEND, index=index)

    @classmethod
    def replace(cls, position: int, index: int) -> StepAction:
        return cls(type=ActionType.REPLACE, index=index, position=position)

    @classmethod
    def skip(cls, index: int) -> StepAction:
        return cls(type=ActionType.SKIP, index=index)

    @property
    def is_chain_action(self) -> bool:
        return self.type in (ActionType.APPEND, ActionType.REPLACE)

    def __str__(self) -> str:
        if self.type == ActionType.INIT:
            return "init"
        if self.type == ActionType.REPLACE:
            return f"replace({self.position}, {self.index})"
        return f"{self.type.value}({self.index})"


@dataclass(frozen=True)
class StepSnapshot:
    """Algorithm state after processing one input element.

    ``sequence`` and ``predecessors`` are tuples copied out of the working
    lists, so no later step can alter an earlier snapshot.
    """

    step_index: int
    current_index: int
    current_value: int
    action: StepAction
    sequence: tuple[int, ...] = ()
    predecessors: tuple[int, ...] = ()


@dataclass(frozen=True)
class Trace:
    """Complete record of one LIS run.

    ``steps[0]`` is the INIT snapshot and ``steps[i + 1]`` is the state after
    ``input[i]`` was processed. ``result`` holds the indices of the final LIS
    in positional order.
    """

    input: tuple[int, ...] = ()
    steps: tuple[StepSnapshot, ...] = field(default_factory=tuple)
    result: tuple[int, ...] = ()

    @property
    def total_steps(self) -> int:
        return len(self.steps)

    def result_values(self) -> list[int]:
        return [self.input[i] for i in self.result]
