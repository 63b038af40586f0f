"""Derived display data for one step: descriptions, highlights, change markers.

Labels, descriptions, indicators and node roles are tables keyed by
``ActionType``. Each table covers every member, so a new variant fails
loudly instead of rendering nothing.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from .constants import NO_CHANGE_TEXT, SENTINEL
from .trace_types import ActionType, StepAction


@dataclass(frozen=True)
class HighlightState:
    """Positions to emphasise for the current step; -1 when absent."""

    seq_position: int = SENTINEL
    pred_index: int = SENTINEL
    previous_seq_position: int = SENTINEL


@dataclass(frozen=True)
class PredecessorHighlight:
    predecessor_value: int | None = None
    previous_predecessor_value: int | None = None


ACTION_LABELS: dict[ActionType, str] = {
    ActionType.INIT: "init",
    ActionType.APPEND: "append",
    ActionType.REPLACE: "replace",
    ActionType.SKIP: "skip",
}


def _describe_init(action: StepAction, value: int) -> str:
    return "Initialised: sequence is empty, every predecessor is -1"


def _describe_append(action: StepAction, value: int) -> str:
    return f"Append index {action.index} (value {value}) to sequence"


def _describe_replace(action: StepAction, value: int) -> str:
    return (
        f"Replace sequence[{action.position}] with index {action.index} (value {value})"
    )


def _describe_skip(action: StepAction, value: int) -> str:
    if value == SENTINEL:
        return f"Skip index {action.index} (value -1, placeholder)"
    return f"Skip index {action.index} (value {value}, duplicate needs no replacement)"


_DESCRIBERS: dict[ActionType, Callable[[StepAction, int], str]] = {
    ActionType.INIT: _describe_init,
    ActionType.APPEND: _describe_append,
    ActionType.REPLACE: _describe_replace,
    ActionType.SKIP: _describe_skip,
}


def action_label(action: StepAction) -> str:
    return ACTION_LABELS[action.type]


def describe_action(action: StepAction, current_value: int) -> str:
    return _DESCRIBERS[action.type](action, current_value)


def change_details(
    action: StepAction, sequence: Sequence[int], predecessors: Sequence[int]
) -> tuple[str, str]:
    """Return ``(sequence_change, predecessors_change)`` for the action panel."""
    if action.type == ActionType.INIT:
        joined = ", ".join(str(p) for p in predecessors)
        return "sequence = []", f"predecessors = [{joined}]"
    if action.type == ActionType.APPEND:
        return (
            f"sequence[{len(sequence) - 1}] = {action.index}",
            f"predecessors[{action.index}] = {predecessors[action.index]}",
        )
    if action.type == ActionType.REPLACE:
        return (
            f"sequence[{action.position}] = {action.index}",
            f"predecessors[{action.index}] = {predecessors[action.index]}",
        )
    return NO_CHANGE_TEXT, NO_CHANGE_TEXT


def compute_highlight_state(
    action: StepAction | None, sequence: Sequence[int]
) -> HighlightState:
    if action is None:
        return HighlightState()
    if action.type == ActionType.APPEND:
        return HighlightState(seq_position=len(sequence) - 1, pred_index=action.index)
    if action.type == ActionType.REPLACE:
        return HighlightState(
            seq_position=action.position,
            pred_index=action.index,
            previous_seq_position=action.position,
        )
    return HighlightState()


def compute_predecessor_highlight(
    pred_index: int, predecessors: Sequence[int], action: StepAction | None
) -> PredecessorHighlight:
    predecessor_value = None
    if 0 <= pred_index < len(predecessors) and predecessors[pred_index] >= 0:
        predecessor_value = predecessors[pred_index]

    previous_value = None
    if action is not None and action.is_chain_action and predecessor_value is not None:
        previous_value = predecessor_value
    return PredecessorHighlight(predecessor_value, previous_value)


_SEQUENCE_INDICATORS: dict[ActionType, Callable[[StepAction], str]] = {
    ActionType.INIT: lambda action: "",
    ActionType.APPEND: lambda action: "<- append",
    ActionType.REPLACE: lambda action: f"<- replace position {action.position}",
    ActionType.SKIP: lambda action: NO_CHANGE_TEXT,
}


def sequence_change_indicator(action: StepAction | None, has_previous: bool) -> str:
    if not has_previous:
        return ""
    if action is None:
        return NO_CHANGE_TEXT
    return _SEQUENCE_INDICATORS[action.type](action)


def predecessor_change_indicator(
    has_previous: bool,
    previous_predecessors: Sequence[int] | None,
    pred_index: int,
    predecessors: Sequence[int],
) -> str:
    if not has_previous or previous_predecessors is None:
        return ""
    changed = tuple(predecessors) != tuple(previous_predecessors)
    if not changed:
        return NO_CHANGE_TEXT
    if pred_index >= 0:
        return f"<- position {pred_index} changed"
    return ""


_NODE_HIGHLIGHT_ROLES: dict[ActionType, str] = {
    ActionType.INIT: "plain",
    ActionType.APPEND: "highlight-append",
    ActionType.REPLACE: "highlight-replace",
    ActionType.SKIP: "highlight-skip",
}


def node_role(
    is_chain_tail_highlight: bool,
    is_highlight_node: bool,
    is_changed_node: bool,
    action_type: ActionType | None,
) -> str:
    """Rendering role for a chain node: tail > primary highlight > changed > plain."""
    if is_chain_tail_highlight:
        return "tail"
    if is_highlight_node:
        if action_type is None:
            return "plain"
        return _NODE_HIGHLIGHT_ROLES[action_type]
    if is_changed_node and action_type in (ActionType.APPEND, ActionType.REPLACE):
        return f"changed-{action_type.value}"
    return "plain"
