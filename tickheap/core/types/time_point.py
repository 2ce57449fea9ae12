# tickheap/core/types/time_point.py
"""
Monotonic instants used as the due-time sort key.

This module should not import from other tickheap modules.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from datetime import timedelta

_NANOS_PER_MICRO = 1_000
_ONE_MICROSECOND = timedelta(microseconds=1)


def duration_to_nanos(duration: timedelta) -> int:
    """Exact integer nanoseconds in a timedelta (no float rounding)."""
    return (duration // _ONE_MICROSECOND) * _NANOS_PER_MICRO


@dataclass(slots=True, frozen=True, order=True)
class TimePoint:
    """
    A monotonic instant with nanosecond resolution.

    Ordering is chronological, so the earliest TimePoint compares smallest.
    Only differences between two TimePoints are meaningful; the absolute
    value is whatever the monotonic clock reports.
    """

    nanos: int

    @classmethod
    def now(cls) -> TimePoint:
        return cls(time.monotonic_ns())

    def elapsed_since(self, earlier: TimePoint) -> timedelta:
        """Duration from ``earlier`` to self, zero if self is not strictly later."""
        diff = self.nanos - earlier.nanos
        if diff <= 0:
            return timedelta(0)
        return timedelta(microseconds=diff // _NANOS_PER_MICRO)

    def plus(self, duration: timedelta) -> TimePoint:
        return TimePoint(self.nanos + duration_to_nanos(duration))

    def __add__(self, duration: timedelta) -> TimePoint:
        if not isinstance(duration, timedelta):
            return NotImplemented
        return self.plus(duration)
