"""Tests for SchedulerConfig validation and defaults."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from tickheap.core.errors import ConfigurationError, ErrorCode, MultipleValidationErrors
from tickheap.core.models.config import SchedulerConfig
from tickheap.core.types.clock import MonotonicClock
from tests.helpers.clock import VirtualClock


@pytest.mark.unit
class TestSchedulerConfig:
    def test_defaults(self) -> None:
        config = SchedulerConfig()

        assert isinstance(config.clock, MonotonicClock)
        assert config.name == 'scheduler'

    def test_custom_clock_kept_by_identity(self) -> None:
        clock = VirtualClock()

        assert SchedulerConfig(clock=clock).clock is clock

    def test_clock_without_sleep_rejected(self) -> None:
        class NowOnly:
            def now(self) -> None:
                return None

        with pytest.raises(ConfigurationError) as exc_info:
            SchedulerConfig(clock=NowOnly())

        assert exc_info.value.code == ErrorCode.CONFIG_INVALID_CLOCK
        assert any('NowOnly' in note for note in exc_info.value.notes)

    def test_dotted_name_rejected(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            SchedulerConfig(name='a.b')

        assert exc_info.value.code == ErrorCode.CONFIG_INVALID_NAME

    def test_collects_all_problems(self) -> None:
        with pytest.raises(MultipleValidationErrors) as exc_info:
            SchedulerConfig(clock=object(), name='  ')

        codes = {e.code for e in exc_info.value.report.errors}
        assert codes == {ErrorCode.CONFIG_INVALID_CLOCK, ErrorCode.CONFIG_INVALID_NAME}

    def test_frozen(self) -> None:
        config = SchedulerConfig()
        with pytest.raises(ValidationError):
            config.name = 'other'  # type: ignore[misc]
