"""Rendering boundary — plain, serializable models built from core state."""

from __future__ import annotations

from pydantic import BaseModel

from .chains import build_all_chains, compute_changed_nodes_by_chain
from .highlight import (
    action_label,
    change_details,
    compute_highlight_state,
    compute_predecessor_highlight,
    describe_action,
    predecessor_change_indicator,
    sequence_change_indicator,
)
from .hover import HoverState
from .navigator import NavigatorState
from .trace_types import StepAction, StepSnapshot, Trace


class SnapshotView(BaseModel):
    step_index: int
    current_index: int
    current_value: int
    action: StepAction
    action_label: str
    description: str
    sequence: list[int]
    predecessors: list[int]
    chains: list[list[int]]
    sequence_change: str
    predecessors_change: str

    @classmethod
    def from_snapshot(cls, snapshot: StepSnapshot) -> SnapshotView:
        sequence_change, predecessors_change = change_details(
            snapshot.action, snapshot.sequence, snapshot.predecessors
        )
        return cls(
            step_index=snapshot.step_index,
            current_index=snapshot.current_index,
            current_value=snapshot.current_value,
            action=snapshot.action,
            action_label=action_label(snapshot.action),
            description=describe_action(snapshot.action, snapshot.current_value),
            sequence=list(snapshot.sequence),
            predecessors=list(snapshot.predecessors),
            chains=build_all_chains(snapshot.sequence, snapshot.predecessors),
            sequence_change=sequence_change,
            predecessors_change=predecessors_change,
        )


class NavigatorStateView(BaseModel):
    current_step: int
    total_steps: int
    can_go_back: bool
    can_go_forward: bool

    @classmethod
    def from_state(cls, state: NavigatorState) -> NavigatorStateView:
        return cls(
            current_step=state.current_step,
            total_steps=state.total_steps,
            can_go_back=state.can_go_back,
            can_go_forward=state.can_go_forward,
        )


class HoverView(BaseModel):
    chain_indexes: list[int] = []
    chain_position: int | None = None
    is_sequence_hovered: bool = False
    is_predecessors_hovered: bool = False

    @classmethod
    def from_state(cls, state: HoverState) -> HoverView:
        return cls(
            chain_indexes=list(state.chain_indexes),
            chain_position=state.chain_position,
            is_sequence_hovered=state.is_sequence_hovered,
            is_predecessors_hovered=state.is_predecessors_hovered,
        )


class HighlightView(BaseModel):
    seq_position: int = -1
    pred_index: int = -1
    previous_seq_position: int = -1
    predecessor_value: int | None = None
    previous_predecessor_value: int | None = None
    sequence_indicator: str = ""
    predecessor_indicator: str = ""
    changed_nodes: dict[int, list[int]] = {}


class VisualizationView(BaseModel):
    input: list[int]
    result: list[int]
    result_values: list[int]
    navigator: NavigatorStateView
    current: SnapshotView | None = None
    previous: SnapshotView | None = None
    hover: HoverView
    highlight: HighlightView
    is_playing: bool = False
    speed: int
    version: int = 0


def build_highlight(
    current: StepSnapshot | None, previous: StepSnapshot | None
) -> HighlightView:
    """Derive highlight positions and change markers for ``current``."""
    if current is None:
        return HighlightView()

    action = current.action
    highlight = compute_highlight_state(action, current.sequence)
    predecessor = compute_predecessor_highlight(
        highlight.pred_index, current.predecessors, action
    )
    previous_chains = None
    if previous is not None:
        previous_chains = build_all_chains(previous.sequence, previous.predecessors)
    changed = compute_changed_nodes_by_chain(
        build_all_chains(current.sequence, current.predecessors),
        previous_chains,
        action.is_chain_action,
        highlight.pred_index,
    )
    has_previous = previous is not None
    return HighlightView(
        seq_position=highlight.seq_position,
        pred_index=highlight.pred_index,
        previous_seq_position=highlight.previous_seq_position,
        predecessor_value=predecessor.predecessor_value,
        previous_predecessor_value=predecessor.previous_predecessor_value,
        sequence_indicator=sequence_change_indicator(action, has_previous),
        predecessor_indicator=predecessor_change_indicator(
            has_previous,
            previous.predecessors if previous is not None else None,
            highlight.pred_index,
            current.predecessors,
        ),
        changed_nodes={
            position: sorted(nodes) for position, nodes in changed.items()
        },
    )


def build_view(
    trace: Trace,
    navigator_state: NavigatorState,
    current: StepSnapshot | None,
    previous: StepSnapshot | None,
    hover_state: HoverState,
    is_playing: bool,
    speed: int,
    version: int,
) -> VisualizationView:
    return VisualizationView(
        input=list(trace.input),
        result=list(trace.result),
        result_values=trace.result_values(),
        navigator=NavigatorStateView.from_state(navigator_state),
        current=SnapshotView.from_snapshot(current) if current else None,
        previous=SnapshotView.from_snapshot(previous) if previous else None,
        hover=HoverView.from_state(hover_state),
        highlight=build_highlight(current, previous),
        is_playing=is_playing,
        speed=speed,
        version=version,
    )
