# tickheap/core/scheduler/queue.py
from __future__ import annotations
import heapq
import itertools
from typing import Iterator, Optional
from tickheap.core.models.tasks import ScheduledTask
from tickheap.core.types.time_point import TimePoint


class DueQueue:
    """
    Min-heap of ScheduledTask keyed by due time.

    Entries with equal due time come out in insertion order: every push is
    stamped with a monotonically increasing sequence number that breaks ties.
    Not thread-safe; owned by a single run loop.
    """

    def __init__(self) -> None:
        self._heap: list[tuple[TimePoint, int, ScheduledTask]] = []
        self._sequence = itertools.count()

    def push(self, entry: ScheduledTask) -> None:
        heapq.heappush(self._heap, (entry.due, next(self._sequence), entry))

    def peek(self) -> Optional[ScheduledTask]:
        """Earliest entry without removing it, or None when empty."""
        if not self._heap:
            return None
        return self._heap[0][2]

    def pop(self) -> ScheduledTask:
        """Remove and return the earliest entry."""
        if not self._heap:
            raise RuntimeError('pop from an empty DueQueue')
        return heapq.heappop(self._heap)[2]

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def __iter__(self) -> Iterator[ScheduledTask]:
        """Entries in due order. Does not modify the queue."""
        return (item[2] for item in sorted(self._heap))
