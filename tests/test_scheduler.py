from datetime import timedelta

import pytest

from media_studio.scheduler import ManualScheduler, ThreadingScheduler


def test_manual_scheduler_fires_in_due_order():
    scheduler = ManualScheduler()
    fired = []
    scheduler.after(timedelta(seconds=5), lambda: fired.append("late"))
    scheduler.after(timedelta(seconds=1), lambda: fired.append("early"))
    scheduler.after(timedelta(seconds=1), lambda: fired.append("early-2"))
    assert scheduler.run_all() == 3
    assert fired == ["early", "early-2", "late"]
    assert scheduler.now == timedelta(seconds=5)


def test_manual_scheduler_advance_only_fires_due():
    scheduler = ManualScheduler()
    fired = []
    scheduler.after(timedelta(days=7), lambda: fired.append(1))
    assert scheduler.advance(timedelta(days=6)) == 0
    assert fired == []
    assert scheduler.advance(timedelta(days=1)) == 1
    assert fired == [1]
    assert scheduler.now == timedelta(days=7)


def test_manual_scheduler_run_next_on_empty():
    scheduler = ManualScheduler()
    assert scheduler.run_next() is False
    assert scheduler.next_due() is None


def test_threading_scheduler_runs_nested_callbacks():
    scheduler = ThreadingScheduler()
    fired = []

    def first():
        fired.append("first")
        scheduler.after(timedelta(milliseconds=10), lambda: fired.append("second"))

    scheduler.after(timedelta(milliseconds=10), first)
    assert scheduler.wait(timeout=5)
    assert fired == ["first", "second"]
    assert scheduler.pending == 0


def test_manual_scheduler_clock_never_goes_backwards():
    scheduler = ManualScheduler()
    scheduler.advance(timedelta(days=2))
    with pytest.raises(ValueError):
        scheduler.advance(timedelta(days=-5))
    assert scheduler.now == timedelta(days=2)
