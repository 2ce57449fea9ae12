"""Root test configuration for tickheap tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from dotenv import load_dotenv

# Load test environment before anything imports tickheap loggers
load_dotenv(dotenv_path=Path(__file__).parent.parent / '.env.test')

from tests.helpers.clock import VirtualClock  # noqa: E402


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line('markers', 'unit: Unit tests (virtual clock, no sleeping)')
    config.addinivalue_line(
        'markers', 'integration: Integration tests (real monotonic clock)'
    )
    config.addinivalue_line('markers', 'slow: Long-running tests')


@pytest.fixture
def clock() -> VirtualClock:
    return VirtualClock()
