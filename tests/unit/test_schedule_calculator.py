"""Tests for scheduler calculator functions (pure, deterministic)."""

from __future__ import annotations

from datetime import timedelta

import pytest

from tickheap.core.models.schedule import Counted
from tickheap.core.models.tasks import ScheduledTask, Task
from tickheap.core.scheduler.calculator import (
    calculate_next_run,
    remaining_wait,
    should_run_now,
)
from tickheap.core.types.time_point import TimePoint


@pytest.mark.unit
class TestRemainingWait:
    def test_due_in_past_is_zero(self) -> None:
        assert remaining_wait(TimePoint(100), TimePoint(500)) == timedelta(0)

    def test_due_now_is_zero(self) -> None:
        assert remaining_wait(TimePoint(500), TimePoint(500)) == timedelta(0)

    def test_whole_microseconds_exact(self) -> None:
        assert remaining_wait(TimePoint(5_000_000), TimePoint(0)) == timedelta(
            milliseconds=5
        )

    def test_sub_microsecond_rounds_up(self) -> None:
        """A 1ns wait becomes 1us, never zero, so the loop cannot fire early."""
        assert remaining_wait(TimePoint(1), TimePoint(0)) == timedelta(microseconds=1)
        assert remaining_wait(TimePoint(1_001), TimePoint(0)) == timedelta(
            microseconds=2
        )


@pytest.mark.unit
class TestShouldRunNow:
    def test_due_before_check_time(self) -> None:
        assert should_run_now(TimePoint(1), TimePoint(2))

    def test_due_at_check_time(self) -> None:
        assert should_run_now(TimePoint(2), TimePoint(2))

    def test_due_after_check_time(self) -> None:
        assert not should_run_now(TimePoint(3), TimePoint(2))


@pytest.mark.unit
class TestCalculateNextRun:
    def test_uses_fired_at_not_completion(self) -> None:
        task = Task.every(timedelta(milliseconds=10), lambda: None)
        entry = ScheduledTask(due=TimePoint(0), task=task)

        nxt = calculate_next_run(entry, entry.due)

        assert nxt is not None
        assert nxt.due == TimePoint(10_000_000)

    def test_counted_exhausts(self) -> None:
        task = Task(schedule=Counted(remaining=2, interval=1), action=lambda: None)
        entry = ScheduledTask(due=TimePoint(0), task=task)

        second = calculate_next_run(entry, entry.due)
        assert second is not None
        assert calculate_next_run(second, second.due) is None
