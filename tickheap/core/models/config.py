# tickheap/core/models/config.py
from typing import Any
from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing_extensions import Self
from tickheap.core.defaults import DEFAULT_SCHEDULER_NAME
from tickheap.core.errors import (
    ConfigurationError,
    ErrorCode,
    ValidationReport,
    raise_collected,
)
from tickheap.core.types.clock import Clock, MonotonicClock


class SchedulerConfig(BaseModel):
    """
    Scheduler configuration.

    Fields:
        - clock: time source and sleep primitive (default: MonotonicClock)
        - name: logger component name for this scheduler (default: 'scheduler')
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    clock: Any = Field(
        default_factory=MonotonicClock, description='Provides now() and sleep()'
    )
    name: str = Field(default=DEFAULT_SCHEDULER_NAME, description='Logger component name')

    @model_validator(mode='after')
    def validate_config(self) -> Self:
        """Collects every independent problem and raises them together."""
        report = ValidationReport('config')

        if not isinstance(self.clock, Clock):
            report.add(
                ConfigurationError(
                    message='clock must provide now() and sleep()',
                    code=ErrorCode.CONFIG_INVALID_CLOCK,
                    notes=[f'got clock of type {type(self.clock).__name__}'],
                    help_text='use MonotonicClock() or an object implementing the Clock protocol',
                )
            )

        if not self.name.strip() or '.' in self.name:
            report.add(
                ConfigurationError(
                    message='scheduler name must be a non-empty dot-free string',
                    code=ErrorCode.CONFIG_INVALID_NAME,
                    notes=[f'got name={self.name!r}'],
                    help_text="the name becomes the logger suffix 'tickheap.<name>'",
                )
            )

        raise_collected(report)
        return self
