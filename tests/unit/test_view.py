"""Tests for the rendering view models built from core state."""

import json

from lis_visualizer.hover import HoverState
from lis_visualizer.navigator import create_navigator
from lis_visualizer.trace import compute_trace
from lis_visualizer.view import (
    HighlightView,
    SnapshotView,
    build_highlight,
    build_view,
)


def _steps(values=(2, 1, 3, 0, 4)):
    return compute_trace(list(values)).steps


class TestSnapshotView:
    def test_append_step(self):
        view = SnapshotView.from_snapshot(_steps()[3])

        assert view.action_label == "append"
        assert view.sequence == [1, 2]
        assert view.chains == [[1], [1, 2]]
        assert view.sequence_change == "sequence[1] = 2"
        assert view.predecessors_change == "predecessors[2] = 1"

    def test_init_step(self):
        view = SnapshotView.from_snapshot(_steps()[0])

        assert view.action_label == "init"
        assert view.chains == []
        assert view.sequence_change == "sequence = []"


class TestBuildHighlight:
    def test_no_current_step(self):
        assert build_highlight(None, None) == HighlightView()

    def test_final_append(self):
        steps = _steps()

        highlight = build_highlight(steps[5], steps[4])

        assert highlight.seq_position == 2
        assert highlight.pred_index == 4
        assert highlight.predecessor_value == 2
        assert highlight.sequence_indicator == "<- append"
        assert highlight.predecessor_indicator == "<- position 4 changed"
        assert highlight.changed_nodes == {2: [1, 2, 4]}

    def test_replace_reports_replaced_chain(self):
        steps = _steps()

        highlight = build_highlight(steps[4], steps[3])

        assert highlight.seq_position == 0
        assert highlight.previous_seq_position == 0
        assert highlight.sequence_indicator == "<- replace position 0"
        assert highlight.changed_nodes == {0: [3]}

    def test_first_step_has_no_indicators(self):
        highlight = build_highlight(_steps()[0], None)

        assert highlight.sequence_indicator == ""
        assert highlight.predecessor_indicator == ""
        assert highlight.changed_nodes == {}


class TestBuildView:
    def test_view_at_end_serializes(self):
        trace = compute_trace([2, 1, 3, 0, 4])
        navigator = create_navigator(trace)
        navigator.go_to_end()

        view = build_view(
            trace=trace,
            navigator_state=navigator.get_state(),
            current=navigator.get_current_step(),
            previous=navigator.get_previous_step(),
            hover_state=HoverState(chain_indexes=(1, 2), chain_position=1),
            is_playing=False,
            speed=500,
            version=3,
        )
        data = json.loads(view.model_dump_json())

        assert data["result"] == [1, 2, 4]
        assert data["result_values"] == [1, 3, 4]
        assert data["navigator"]["current_step"] == 5
        assert data["navigator"]["can_go_forward"] is False
        assert data["current"]["action"]["type"] == "append"
        assert data["previous"]["step_index"] == 4
        assert data["hover"]["chain_indexes"] == [1, 2]
        assert data["version"] == 3

    def test_view_at_start_has_no_previous(self):
        trace = compute_trace([5])
        navigator = create_navigator(trace)

        view = build_view(
            trace=trace,
            navigator_state=navigator.get_state(),
            current=navigator.get_current_step(),
            previous=navigator.get_previous_step(),
            hover_state=HoverState(),
            is_playing=True,
            speed=200,
            version=0,
        )

        assert view.previous is None
        assert view.current.step_index == 0
        assert view.is_playing is True
