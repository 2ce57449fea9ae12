# tickheap/core/models/tasks.py
from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import timedelta
from typing import Any, Callable, Optional

from tickheap.core.errors import ErrorCode, task_definition_error
from tickheap.core.models.schedule import Counted, Every, Once, Schedule
from tickheap.core.types.time_point import TimePoint

TaskAction = Callable[[], Any]

_SCHEDULE_TYPES = (Once, Every, Counted)


def describe_action(action: TaskAction) -> str:
    """Readable identifier for a callable, e.g. ``jobs.cleanup:flush``."""
    module = getattr(action, '__module__', None) or '?'
    qualname = getattr(action, '__qualname__', None)
    if qualname is None:
        qualname = type(action).__qualname__
    return f'{module}:{qualname}'


@dataclass(frozen=True)
class Task:
    """
    A firing policy bound to a zero-argument action.

    The action may mutate state it closed over and is invoked once per
    firing; its return value is ignored. A Task carries no due time and
    building one schedules nothing.

    Builders:
        - Task.once(fn): fire immediately, once
        - Task.offset(delay, fn): fire once after ``delay``
        - Task.every(interval, fn): fire every ``interval``, forever

    A counted policy has no builder; use
    ``Task(schedule=Counted(remaining=n, interval=i), action=fn)``.
    """

    schedule: Schedule
    action: TaskAction = field(repr=False)
    name: Optional[str] = None

    def __post_init__(self) -> None:
        if not isinstance(self.schedule, _SCHEDULE_TYPES):
            raise TypeError(
                f'schedule must be Once, Every or Counted, got {type(self.schedule).__name__}'
            )
        if not callable(self.action):
            raise task_definition_error(
                message='task action is not callable',
                code=ErrorCode.TASK_NOT_CALLABLE,
                notes=[f'got {type(self.action).__name__}: {self.action!r}'],
                help_text='pass a zero-argument function, lambda or callable object',
            )
        if self.name is None:
            object.__setattr__(self, 'name', describe_action(self.action))

    @classmethod
    def once(cls, action: TaskAction) -> Task:
        return cls(schedule=Once(), action=action)

    @classmethod
    def offset(cls, delay: timedelta | float, action: TaskAction) -> Task:
        return cls(schedule=Once(delay=delay), action=action)  # type: ignore[arg-type]

    @classmethod
    def every(cls, interval: timedelta | float, action: TaskAction) -> Task:
        return cls(schedule=Every(interval=interval), action=action)  # type: ignore[arg-type]

    def run(self) -> None:
        self.action()


@dataclass(frozen=True, order=True)
class ScheduledTask:
    """A Task together with the instant it becomes due. Ordered by due time only."""

    due: TimePoint
    task: Task = field(compare=False)

    @classmethod
    def first(cls, task: Task, baseline: TimePoint) -> ScheduledTask:
        return cls(due=baseline.plus(task.schedule.initial_wait()), task=task)

    def reschedule(self, reference_time: TimePoint) -> Optional[ScheduledTask]:
        """
        Next queue entry for this task after a firing.

        Returns None when the policy is spent. Otherwise the new entry is due
        at ``reference_time`` plus the next policy's wait.
        """
        next_schedule = self.task.schedule.reschedule()
        if next_schedule is None:
            return None

        task = self.task
        if next_schedule is not task.schedule:
            task = replace(task, schedule=next_schedule)
        return ScheduledTask(
            due=reference_time.plus(next_schedule.as_duration()),
            task=task,
        )
