# tickheap/core/models/schedule.py
from __future__ import annotations
from datetime import timedelta
from typing import TYPE_CHECKING, Any, Callable, Literal, Optional, Union
from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing_extensions import Self
from tickheap.core.errors import (
    ConfigurationError,
    ErrorCode,
    ValidationReport,
    raise_collected,
)

if TYPE_CHECKING:
    from tickheap.core.models.tasks import Task


def _check_non_negative(
    report: ValidationReport, policy: str, field_name: str, value: timedelta
) -> None:
    if value < timedelta(0):
        report.add(
            ConfigurationError(
                message=f'{policy} {field_name} must be non-negative',
                code=ErrorCode.SCHEDULE_NEGATIVE_DURATION,
                notes=[f'got {field_name}={value!r}'],
                help_text='use a zero or positive timedelta (or number of seconds)',
            )
        )


class _SchedulePolicy(BaseModel):
    """Shared behaviour of the firing policies."""

    model_config = ConfigDict(frozen=True)

    def as_duration(self) -> timedelta:
        """Wait applied before the first firing and after every reschedule."""
        raise NotImplementedError

    def initial_wait(self) -> timedelta:
        return self.as_duration()

    def reschedule(self) -> Optional[Schedule]:
        """Next policy state after a firing, or None when the policy is spent."""
        raise NotImplementedError

    def is_once(self) -> bool:
        return False

    def with_action(
        self, action: Callable[[], Any], name: Optional[str] = None
    ) -> Task:
        """Bind this policy to a callable, producing a Task."""
        from tickheap.core.models.tasks import Task

        return Task(schedule=self, action=action, name=name)  # type: ignore[arg-type]


class Once(_SchedulePolicy):
    """
    Fire exactly once.

    Examples:
        - Immediately: Once()
        - After five seconds: Once(delay=timedelta(seconds=5)) or Once(delay=5)
    """

    type: Literal['once'] = 'once'
    delay: Optional[timedelta] = Field(
        default=None, description='Wait before firing (None = fire immediately)'
    )

    @model_validator(mode='after')
    def validate_delay(self) -> Self:
        report = ValidationReport('schedule')
        if self.delay is not None:
            _check_non_negative(report, 'Once', 'delay', self.delay)
        raise_collected(report)
        return self

    def as_duration(self) -> timedelta:
        return self.delay if self.delay is not None else timedelta(0)

    def reschedule(self) -> Optional[Schedule]:
        return None

    def is_once(self) -> bool:
        return True


class Every(_SchedulePolicy):
    """
    Fire forever, waiting ``interval`` before every firing including the first.

    Examples:
        - Every 125 ms: Every(interval=timedelta(milliseconds=125))
        - Every 2 seconds: Every(interval=2)
    """

    type: Literal['every'] = 'every'
    interval: timedelta = Field(description='Wait before each firing')

    @model_validator(mode='after')
    def validate_interval(self) -> Self:
        report = ValidationReport('schedule')
        _check_non_negative(report, 'Every', 'interval', self.interval)
        raise_collected(report)
        return self

    def as_duration(self) -> timedelta:
        return self.interval

    def reschedule(self) -> Optional[Schedule]:
        return self


class Counted(_SchedulePolicy):
    """
    Fire ``remaining`` times in total, waiting ``interval`` before each firing.

    ``remaining`` counts the firings still owed, including the next one.
    Counted(remaining=3, interval=1) fires three times, one second apart.
    """

    type: Literal['counted'] = 'counted'
    remaining: int = Field(ge=1, description='Firings left, including the next one')
    interval: timedelta = Field(description='Wait before each firing')

    @model_validator(mode='after')
    def validate_interval(self) -> Self:
        report = ValidationReport('schedule')
        _check_non_negative(report, 'Counted', 'interval', self.interval)
        raise_collected(report)
        return self

    def as_duration(self) -> timedelta:
        return self.interval

    def reschedule(self) -> Optional[Schedule]:
        if self.remaining > 1:
            return self.model_copy(update={'remaining': self.remaining - 1})
        return None


Schedule = Union[Once, Every, Counted]
