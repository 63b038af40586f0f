"""Tests for StepNavigator — cursor moves over a completed trace."""

import pytest

from lis_visualizer.navigator import NavigatorState, create_navigator
from lis_visualizer.trace import compute_trace


@pytest.fixture
def navigator():
    return create_navigator(compute_trace([2, 1, 3, 0, 4]))


class TestInitialState:
    def test_starts_on_init_step(self, navigator):
        state = navigator.get_state()

        assert state == NavigatorState(
            current_step=0, total_steps=6, can_go_back=False, can_go_forward=True
        )

    def test_no_previous_step_at_start(self, navigator):
        assert navigator.get_previous_step() is None
        assert navigator.get_current_step().step_index == 0

    def test_get_state_has_no_side_effects(self, navigator):
        navigator.get_state()
        navigator.get_state()

        assert navigator.get_state().current_step == 0


class TestForwardAndBack:
    def test_next_returns_new_snapshot(self, navigator):
        step = navigator.next()

        assert step.step_index == 1
        assert navigator.get_previous_step().step_index == 0

    def test_walking_to_the_end(self, navigator):
        navigator.reset()
        for _ in range(navigator.total_steps - 1):
            assert navigator.next() is not None

        assert navigator.get_state().can_go_forward is False
        assert navigator.next() is None
        assert navigator.get_state().current_step == navigator.total_steps - 1

    def test_prev_at_start_is_noop(self, navigator):
        assert navigator.prev() is None
        assert navigator.get_state().current_step == 0

    def test_prev_after_next(self, navigator):
        navigator.next()
        navigator.next()

        assert navigator.prev().step_index == 1
        assert navigator.get_state().can_go_back is True


class TestGoTo:
    @pytest.mark.parametrize("k", range(6))
    def test_round_trip(self, navigator, k):
        assert navigator.go_to(k).step_index == k
        assert navigator.get_state().current_step == k

    @pytest.mark.parametrize("target", [-1, 6, 100])
    def test_out_of_range_is_noop(self, navigator, target):
        navigator.go_to(3)

        assert navigator.go_to(target) is None
        assert navigator.get_state().current_step == 3

    def test_go_to_end(self, navigator):
        assert navigator.go_to_end().step_index == 5
        assert navigator.get_state().can_go_forward is False

    def test_reset_returns_to_start(self, navigator):
        navigator.go_to(4)
        navigator.reset()

        assert navigator.get_state().current_step == 0


class TestEmptyTrace:
    def test_single_init_step(self):
        navigator = create_navigator(compute_trace([]))

        assert navigator.get_state() == NavigatorState(0, 1, False, False)
        assert navigator.next() is None
        assert navigator.prev() is None
        assert navigator.go_to_end().step_index == 0
