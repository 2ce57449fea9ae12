"""Shared default constants for the tickheap library."""

from datetime import timedelta

# Logger component used by a scheduler when SchedulerConfig.name is not given.
DEFAULT_SCHEDULER_NAME: str = 'scheduler'

# Granularity of computed sleeps. Remaining waits are rounded up to this
# so a wake-up never lands before the due instant.
SLEEP_RESOLUTION: timedelta = timedelta(microseconds=1)
