# tickheap/core/types/clock.py
from __future__ import annotations

import time
from datetime import timedelta
from typing import Protocol, runtime_checkable

from tickheap.core.types.time_point import TimePoint


@runtime_checkable
class Clock(Protocol):
    """Time source and blocking primitive consumed by the scheduler.

    ``now`` must never go backwards. ``sleep`` blocks the calling thread for
    the given duration; returning early is allowed, the run loop re-checks.
    """

    def now(self) -> TimePoint: ...

    def sleep(self, duration: timedelta) -> None: ...


class MonotonicClock:
    """Default clock backed by ``time.monotonic_ns`` and ``time.sleep``."""

    def now(self) -> TimePoint:
        return TimePoint.now()

    def sleep(self, duration: timedelta) -> None:
        time.sleep(duration.total_seconds())

    def __repr__(self) -> str:
        return 'MonotonicClock()'
