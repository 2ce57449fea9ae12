# tickheap/core/scheduler/service.py
from __future__ import annotations
from typing import Iterable, Optional
from tickheap.core.errors import ErrorCode, SchedulerStateError
from tickheap.core.logging import get_logger
from tickheap.core.models.config import SchedulerConfig
from tickheap.core.models.tasks import ScheduledTask, Task
from tickheap.core.scheduler.calculator import (
    calculate_next_run,
    remaining_wait,
    should_run_now,
)
from tickheap.core.scheduler.queue import DueQueue
from tickheap.core.types.time_point import TimePoint


class Scheduler:
    """
    Runs a fixed batch of tasks on the calling thread.

    Lifecycle:
    1. ``Scheduler.with_tasks(tasks)`` reads the clock once (the baseline)
       and queues every task at ``baseline + initial_wait``
    2. ``run()`` fires due entries in due order and sleeps in between
    3. ``run()`` returns once the queue drains, which never happens while an
       Every task is queued

    A scheduler runs once. Tasks cannot be added, removed or cancelled after
    construction, and exceptions raised by an action propagate out of run().
    """

    def __init__(
        self,
        queue: DueQueue,
        baseline: TimePoint,
        config: Optional[SchedulerConfig] = None,
    ):
        self.config = config or SchedulerConfig()
        self.clock = self.config.clock
        self.baseline = baseline
        self._queue = queue
        self._consumed = False
        self.logger = get_logger(self.config.name)

    @classmethod
    def with_tasks(
        cls,
        tasks: Iterable[Task],
        config: Optional[SchedulerConfig] = None,
    ) -> Scheduler:
        config = config or SchedulerConfig()
        baseline = config.clock.now()

        queue = DueQueue()
        for task in tasks:
            queue.push(ScheduledTask.first(task, baseline))

        scheduler = cls(queue, baseline, config)
        scheduler.logger.info(f'Scheduler initialized with {len(queue)} tasks')
        return scheduler

    def __len__(self) -> int:
        return len(self._queue)

    def run(self) -> None:
        """Block until every queued task is spent."""
        if self._consumed:
            raise SchedulerStateError(
                message='scheduler has already been run',
                code=ErrorCode.SCHEDULER_ALREADY_RUN,
                notes=['run() consumes the scheduler and its queue'],
                help_text='build a new Scheduler.with_tasks(...) for another run',
            )
        self._consumed = True

        queue = self._queue
        while True:
            head = queue.peek()
            if head is None:
                self.logger.info('All tasks finished; scheduler stopping')
                return

            now = self.clock.now()
            if should_run_now(head.due, now):
                self._fire(queue.pop())
            else:
                # A short or spurious wake just loops back to peek.
                self.clock.sleep(remaining_wait(head.due, now))

    def _fire(self, entry: ScheduledTask) -> None:
        task = entry.task
        self.logger.debug(f'Running {task.name} ({task.schedule.type})')
        task.run()

        following = calculate_next_run(entry, entry.due)
        if following is None:
            self.logger.debug(f'Task {task.name} finished')
            return
        self._queue.push(following)
