"""Tests for the fixed-cadence accrual scheduler."""

import pytest

from cozycat.engine.game_state import ProgressionState
from cozycat.engine.scheduler import AccrualScheduler


class FakeTimer:
    def __init__(self) -> None:
        self.stopped = False

    def stop(self) -> None:
        self.stopped = True


class FakeSetInterval:
    """Records what the scheduler asked for instead of running a loop."""

    def __init__(self) -> None:
        self.calls = []
        self.timer = FakeTimer()

    def __call__(self, interval, callback):
        self.calls.append((interval, callback))
        return self.timer


def test_fire_accrues_a_tenth():
    state = ProgressionState(passive_rate=0.5)
    scheduler = AccrualScheduler(state)
    assert scheduler.fire()
    assert state.currency == pytest.approx(0.05)
    assert state.peak_currency == pytest.approx(0.05)


def test_ten_firings_make_one_second():
    state = ProgressionState(passive_rate=3.0)
    scheduler = AccrualScheduler(state)
    for _ in range(10):
        scheduler.fire()
    assert state.currency == pytest.approx(3.0)


def test_fire_without_rate_is_noop():
    calls = []
    state = ProgressionState(currency=4.0)
    scheduler = AccrualScheduler(state, on_accrued=lambda: calls.append(1))
    assert not scheduler.fire()
    assert state.currency == 4.0
    assert state.peak_currency == 0.0
    assert calls == []


def test_on_accrued_called_per_firing():
    calls = []
    state = ProgressionState(passive_rate=1.0)
    scheduler = AccrualScheduler(state, on_accrued=lambda: calls.append(1))
    scheduler.fire()
    scheduler.fire()
    assert len(calls) == 2


def test_start_and_stop():
    state = ProgressionState()
    scheduler = AccrualScheduler(state)
    set_interval = FakeSetInterval()

    scheduler.start(set_interval)
    assert scheduler.running
    interval, callback = set_interval.calls[0]
    assert interval == pytest.approx(0.1)
    assert callback == scheduler.fire

    scheduler.stop()
    assert set_interval.timer.stopped
    assert not scheduler.running


def test_start_twice_keeps_one_timer():
    scheduler = AccrualScheduler(ProgressionState())
    set_interval = FakeSetInterval()
    scheduler.start(set_interval)
    scheduler.start(set_interval)
    assert len(set_interval.calls) == 1


def test_timer_keeps_firing_while_rate_is_zero():
    """A firing is counted even when it accrues nothing."""
    state = ProgressionState()
    scheduler = AccrualScheduler(state)
    for _ in range(5):
        scheduler.fire()
    assert scheduler.firings == 5
    state.passive_rate = 1.0
    scheduler.fire()
    assert state.currency == pytest.approx(0.1)


def test_catch_up_fires_whole_intervals():
    state = ProgressionState(passive_rate=1.0)
    scheduler = AccrualScheduler(state)
    assert scheduler.catch_up(1.05) == 10
    assert state.currency == pytest.approx(1.0)


def test_catch_up_carries_leftover_time():
    scheduler = AccrualScheduler(ProgressionState(passive_rate=1.0))
    assert scheduler.catch_up(0.05) == 0
    assert scheduler.catch_up(0.06) == 1


def test_catch_up_is_capped():
    scheduler = AccrualScheduler(ProgressionState(passive_rate=1.0))
    count = scheduler.catch_up(3600.0, max_catch_up_s=60.0)
    assert 590 <= count <= 600


def test_catch_up_ignores_clock_going_backwards():
    scheduler = AccrualScheduler(ProgressionState(passive_rate=1.0))
    assert scheduler.catch_up(-5.0) == 0
