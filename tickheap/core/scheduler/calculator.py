# tickheap/core/scheduler/calculator.py
from __future__ import annotations
from datetime import timedelta
from typing import Optional
from tickheap.core.defaults import SLEEP_RESOLUTION
from tickheap.core.models.tasks import ScheduledTask
from tickheap.core.types.time_point import TimePoint, duration_to_nanos

_RESOLUTION_NANOS = duration_to_nanos(SLEEP_RESOLUTION)


def calculate_next_run(
    entry: ScheduledTask, fired_at: TimePoint
) -> Optional[ScheduledTask]:
    """
    Calculate the queue entry that follows a firing.

    Args:
        entry: The entry that just fired
        fired_at: The instant the firing was due (not when it finished), so
            repeating tasks accumulate ``due + interval`` without drift

    Returns:
        The next entry, or None when the task's policy is spent
    """
    return entry.reschedule(fired_at)


def remaining_wait(due: TimePoint, now: TimePoint) -> timedelta:
    """
    Wait until ``due`` as seen from ``now``.

    Zero when ``due`` is at or before ``now``. Otherwise rounded up to whole
    SLEEP_RESOLUTION units so the wait never ends before ``due``.
    """
    diff = due.nanos - now.nanos
    if diff <= 0:
        return timedelta(0)
    units = -(-diff // _RESOLUTION_NANOS)
    return SLEEP_RESOLUTION * units


def should_run_now(due: TimePoint, check_time: TimePoint) -> bool:
    """True when an entry due at ``due`` may fire at ``check_time``."""
    return due <= check_time
