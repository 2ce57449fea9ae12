# tickheap/core/scheduler/__init__.py
"""
Scheduler module for running tasks at their due times.

Main components:
- Scheduler: owns the due queue and runs the blocking loop
- DueQueue: min-heap of ScheduledTask ordered by due time
- calculate_next_run: follow-up entry after a firing

Example usage:
    from tickheap.core.scheduler import Scheduler

    scheduler = Scheduler.with_tasks(tasks)
    scheduler.run()
"""

from tickheap.core.scheduler.service import Scheduler
from tickheap.core.scheduler.queue import DueQueue
from tickheap.core.scheduler.calculator import (
    calculate_next_run,
    remaining_wait,
    should_run_now,
)

__all__ = [
    'Scheduler',
    'DueQueue',
    'calculate_next_run',
    'remaining_wait',
    'should_run_now',
]
