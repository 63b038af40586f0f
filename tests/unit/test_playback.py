"""Tests for PlaybackController — timer-driven auto-advance."""

from __future__ import annotations

import pytest

from lis_visualizer.config import VisualizerConfig
from lis_visualizer.navigator import create_navigator
from lis_visualizer.playback import PlaybackController, PlaybackState
from lis_visualizer.scheduler import IntervalScheduler, TimerHandle
from lis_visualizer.trace import compute_trace


class FakeTimerHandle(TimerHandle):
    def __init__(self, interval_ms, callback):
        self.interval_ms = interval_ms
        self.callback = callback
        self._cancelled = False

    def cancel(self):
        self._cancelled = True

    @property
    def cancelled(self):
        return self._cancelled


class FakeScheduler(IntervalScheduler):
    """Records scheduled timers; ``fire`` runs one tick of the live timer."""

    def __init__(self):
        self.handles: list[FakeTimerHandle] = []

    def schedule_interval(self, interval_ms, callback):
        handle = FakeTimerHandle(interval_ms, callback)
        self.handles.append(handle)
        return handle

    @property
    def live(self) -> list[FakeTimerHandle]:
        return [h for h in self.handles if not h.cancelled]

    def fire(self, times: int = 1) -> None:
        for _ in range(times):
            for handle in self.live:
                handle.callback()


@pytest.fixture
def scheduler():
    return FakeScheduler()


@pytest.fixture
def navigator():
    return create_navigator(compute_trace([2, 1, 3, 0, 4]))


@pytest.fixture
def updates():
    return []


@pytest.fixture
def controller(scheduler, navigator, updates):
    return PlaybackController(
        get_navigator=lambda: navigator,
        on_step_update=lambda: updates.append(navigator.get_state().current_step),
        scheduler=scheduler,
    )


class TestStartStop:
    def test_starts_stopped(self, controller, scheduler):
        assert controller.state == PlaybackState.STOPPED
        assert controller.is_playing is False
        assert scheduler.handles == []

    def test_start_installs_timer_at_speed(self, controller, scheduler):
        controller.start()

        assert controller.is_playing is True
        assert len(scheduler.live) == 1
        assert scheduler.live[0].interval_ms == 500

    def test_stop_cancels_timer(self, controller, scheduler):
        controller.start()
        controller.stop()

        assert controller.state == PlaybackState.STOPPED
        assert scheduler.live == []

    def test_stop_when_stopped_is_safe(self, controller):
        controller.stop()
        controller.stop()

        assert controller.state == PlaybackState.STOPPED

    def test_start_twice_keeps_one_timer(self, controller, scheduler):
        controller.start()
        controller.start()

        assert len(scheduler.handles) == 2
        assert len(scheduler.live) == 1

    def test_toggle(self, controller):
        controller.toggle()
        assert controller.is_playing is True
        controller.toggle()
        assert controller.is_playing is False

    def test_dispose_stops(self, controller, scheduler):
        controller.start()
        controller.dispose()
        controller.dispose()

        assert scheduler.live == []
        assert controller.is_playing is False


class TestTicks:
    def test_tick_advances_and_reports(self, controller, scheduler, updates):
        controller.start()
        scheduler.fire(2)

        assert updates == [1, 2]

    def test_exhaustion_stops_without_update(self, controller, scheduler, updates):
        controller.start()
        scheduler.fire(10)

        assert updates == [1, 2, 3, 4, 5]
        assert controller.is_playing is False
        assert scheduler.live == []

    def test_stops_on_first_tick_at_end(self, controller, scheduler, navigator, updates):
        navigator.go_to_end()
        controller.start()
        scheduler.fire()

        assert updates == []
        assert controller.is_playing is False

    def test_uses_current_navigator_on_each_tick(self, scheduler):
        navigators = [create_navigator(compute_trace([1, 2, 3]))]
        controller = PlaybackController(
            get_navigator=lambda: navigators[-1],
            on_step_update=lambda: None,
            scheduler=scheduler,
        )
        controller.start()
        scheduler.fire()
        navigators.append(create_navigator(compute_trace([5, 6])))
        scheduler.fire()

        assert navigators[0].get_state().current_step == 1
        assert navigators[1].get_state().current_step == 1


class TestSpeed:
    def test_update_speed_while_stopped_only_stores(self, controller, scheduler):
        controller.update_speed(300)

        assert controller.speed == 300
        assert scheduler.handles == []

    def test_update_speed_while_playing_restarts(self, controller, scheduler):
        controller.start()
        controller.update_speed(300)

        assert controller.is_playing is True
        assert [h.interval_ms for h in scheduler.live] == [300]
        assert scheduler.handles[0].cancelled is True

    def test_speed_is_clamped(self, controller):
        controller.update_speed(5)
        assert controller.speed == 100
        controller.update_speed(99999)
        assert controller.speed == 2000

    def test_initial_speed_from_config(self, scheduler, navigator):
        controller = PlaybackController(
            get_navigator=lambda: navigator,
            on_step_update=lambda: None,
            scheduler=scheduler,
            config=VisualizerConfig(speed=250),
        )
        controller.start()

        assert scheduler.live[0].interval_ms == 250


class TestStateChanges:
    def test_callback_sees_each_transition(self, scheduler, navigator):
        seen = []
        controller = PlaybackController(
            get_navigator=lambda: navigator,
            on_step_update=lambda: None,
            scheduler=scheduler,
            on_state_change=seen.append,
        )
        controller.start()
        controller.stop()
        controller.stop()

        assert seen == [PlaybackState.PLAYING, PlaybackState.STOPPED]

    def test_speed_change_keeps_playing_state(self, scheduler, navigator):
        seen = []
        controller = PlaybackController(
            get_navigator=lambda: navigator,
            on_step_update=lambda: None,
            scheduler=scheduler,
            on_state_change=seen.append,
        )
        controller.start()
        controller.update_speed(200)

        assert seen == [PlaybackState.PLAYING]
        assert controller.is_playing is True
        assert [h.interval_ms for h in scheduler.live] == [200]


class TestSchedulerFailure:
    def test_default_scheduler_outside_loop_stays_stopped(self, navigator):
        seen = []
        controller = PlaybackController(
            get_navigator=lambda: navigator,
            on_step_update=lambda: None,
            on_state_change=seen.append,
        )

        controller.toggle()

        assert controller.is_playing is False
        assert controller.state == PlaybackState.STOPPED
        assert seen == []

    def test_failed_reschedule_on_speed_change_stops(self, navigator):
        class OneShotScheduler(FakeScheduler):
            def schedule_interval(self, interval_ms, callback):
                if self.handles:
                    raise RuntimeError("timer source closed")
                return super().schedule_interval(interval_ms, callback)

        scheduler = OneShotScheduler()
        controller = PlaybackController(
            get_navigator=lambda: navigator,
            on_step_update=lambda: None,
            scheduler=scheduler,
        )
        controller.start()

        controller.update_speed(300)

        assert controller.is_playing is False
        assert scheduler.live == []
