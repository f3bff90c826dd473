"""Tests for src.snake.scheduler."""

from __future__ import annotations

import pygame  # type: ignore
import pytest

from src.snake.scheduler import TICK_EVENT, TickScheduler
from tests.helpers import FakeTimer


class TestArm:
    def test_starts_pygame_timer(self) -> None:
        timer = FakeTimer()
        sched = TickScheduler(set_timer=timer)
        sched.arm(120, lambda: None)
        assert timer.calls == [(TICK_EVENT, 120)]
        assert sched.armed
        assert sched.interval_ms == 120

    def test_rearm_cancels_first(self) -> None:
        timer = FakeTimer()
        sched = TickScheduler(set_timer=timer)
        sched.arm(120, lambda: None)
        sched.arm(114, lambda: None)
        assert timer.calls == [(TICK_EVENT, 120), (TICK_EVENT, 0), (TICK_EVENT, 114)]
        assert sched.interval_ms == 114

    def test_rejects_non_positive_interval(self) -> None:
        sched = TickScheduler(set_timer=FakeTimer())
        with pytest.raises(ValueError):
            sched.arm(0, lambda: None)


class TestCancel:
    def test_cancel_disables_timer(self) -> None:
        timer = FakeTimer()
        sched = TickScheduler(set_timer=timer)
        sched.arm(120, lambda: None)
        sched.cancel()
        assert timer.calls[-1] == (TICK_EVENT, 0)
        assert not sched.armed
        assert sched.interval_ms is None

    def test_cancel_when_idle_is_silent(self) -> None:
        timer = FakeTimer()
        TickScheduler(set_timer=timer).cancel()
        assert timer.calls == []


class TestDispatch:
    def test_runs_callback_for_tick_event(self) -> None:
        ticks = []
        sched = TickScheduler(set_timer=FakeTimer())
        sched.arm(100, lambda: ticks.append(1))
        assert sched.dispatch(pygame.event.Event(TICK_EVENT))
        assert ticks == [1]

    def test_ignores_other_events(self) -> None:
        ticks = []
        sched = TickScheduler(set_timer=FakeTimer())
        sched.arm(100, lambda: ticks.append(1))
        assert not sched.dispatch(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_UP))
        assert ticks == []

    def test_stale_tick_after_cancel_is_dropped(self) -> None:
        ticks = []
        sched = TickScheduler(set_timer=FakeTimer())
        sched.arm(100, lambda: ticks.append(1))
        sched.cancel()
        assert sched.dispatch(pygame.event.Event(TICK_EVENT))
        assert ticks == []
