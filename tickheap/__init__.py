"""tickheap - run callables once, after a delay, every interval, or N times"""

# Install Rust-style error handler on import
from .core.errors import install_error_handler as _install_error_handler

_install_error_handler()

from .core.types.time_point import TimePoint
from .core.types.clock import Clock, MonotonicClock
from .core.models.schedule import Once, Every, Counted, Schedule
from .core.models.tasks import Task, ScheduledTask, TaskAction
from .core.models.config import SchedulerConfig
from .core.scheduler import Scheduler, DueQueue
from .core.errors import (
    TickheapError,
    ConfigurationError,
    TaskDefinitionError,
    SchedulerStateError,
    MultipleValidationErrors,
    ErrorCode,
)
from .core.logging import get_logger, set_default_level

__all__ = [
    'TimePoint',
    'Clock',
    'MonotonicClock',
    'Once',
    'Every',
    'Counted',
    'Schedule',
    'Task',
    'ScheduledTask',
    'TaskAction',
    'SchedulerConfig',
    'Scheduler',
    'DueQueue',
    'TickheapError',
    'ConfigurationError',
    'TaskDefinitionError',
    'SchedulerStateError',
    'MultipleValidationErrors',
    'ErrorCode',
    'get_logger',
    'set_default_level',
]

__version__ = '0.1.0'
