"""Tests for TimePoint arithmetic and ordering, and the default clock."""

from __future__ import annotations

from datetime import timedelta

import pytest

from tickheap.core.types.clock import Clock, MonotonicClock
from tickheap.core.types.time_point import TimePoint, duration_to_nanos

pytestmark = pytest.mark.unit


class TestDurationToNanos:
    def test_whole_units(self) -> None:
        assert duration_to_nanos(timedelta(seconds=1)) == 1_000_000_000
        assert duration_to_nanos(timedelta(milliseconds=125)) == 125_000_000
        assert duration_to_nanos(timedelta(microseconds=1)) == 1_000

    def test_zero(self) -> None:
        assert duration_to_nanos(timedelta(0)) == 0


class TestTimePoint:
    def test_ordering_is_chronological(self) -> None:
        early = TimePoint(100)
        late = TimePoint(200)

        assert early < late
        assert min(late, early) == early
        assert sorted([late, early, TimePoint(150)]) == [
            early,
            TimePoint(150),
            late,
        ]

    def test_plus_is_exact(self) -> None:
        """Repeated additions accumulate without float drift."""
        point = TimePoint(0)
        step = timedelta(milliseconds=61)
        for _ in range(1000):
            point = point.plus(step)

        assert point.nanos == 61_000_000_000

    def test_add_operator_matches_plus(self) -> None:
        point = TimePoint(5)
        assert point + timedelta(seconds=2) == point.plus(timedelta(seconds=2))

    def test_add_rejects_non_duration(self) -> None:
        with pytest.raises(TypeError):
            TimePoint(5) + 3  # type: ignore[operator]

    def test_elapsed_since_earlier(self) -> None:
        earlier = TimePoint(1_000_000)
        later = earlier.plus(timedelta(milliseconds=250))

        assert later.elapsed_since(earlier) == timedelta(milliseconds=250)

    def test_elapsed_since_saturates_at_zero(self) -> None:
        """A 'later' point that is actually earlier yields zero, not negative."""
        earlier = TimePoint(1_000_000)
        later = earlier.plus(timedelta(seconds=1))

        assert earlier.elapsed_since(later) == timedelta(0)
        assert earlier.elapsed_since(earlier) == timedelta(0)

    def test_now_is_monotonic(self) -> None:
        first = TimePoint.now()
        second = TimePoint.now()

        assert second >= first

    def test_is_hashable_and_frozen(self) -> None:
        point = TimePoint(7)
        assert {point: 'x'}[TimePoint(7)] == 'x'
        with pytest.raises(AttributeError):
            point.nanos = 8  # type: ignore[misc]


class TestMonotonicClock:
    def test_satisfies_clock_protocol(self) -> None:
        assert isinstance(MonotonicClock(), Clock)

    def test_sleep_blocks_at_least_duration(self) -> None:
        clock = MonotonicClock()
        before = clock.now()
        clock.sleep(timedelta(milliseconds=20))

        assert clock.now().elapsed_since(before) >= timedelta(milliseconds=20)
