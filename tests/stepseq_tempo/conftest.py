"""
Pytest fixtures for stepseq_tempo tests.

Provides fake collaborators and a scheduler wired to them.
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from mocks import FakeClock, FakeTimerHost, StepRecorder

from stepseq_tempo import factory
from stepseq_tempo.config import Settings
from stepseq_tempo.engine import StepScheduler


@pytest.fixture
def fake_clock() -> FakeClock:
    """Create a fresh FakeClock for testing."""
    return FakeClock()


@pytest.fixture
def fake_timer(fake_clock: FakeClock) -> FakeTimerHost:
    """Create a FakeTimerHost driving fake_clock."""
    return FakeTimerHost(fake_clock)


@pytest.fixture
def recorder() -> StepRecorder:
    return StepRecorder()


@pytest.fixture
def scheduler(
    fake_clock: FakeClock,
    fake_timer: FakeTimerHost,
    recorder: StepRecorder,
) -> StepScheduler:
    """
    Create a StepScheduler with fake clock and timer.

    Defaults: 140 BPM, 4/4, stopped.
    """
    return StepScheduler(recorder, clock=fake_clock, timer=fake_timer)


@pytest.fixture
def test_settings() -> Settings:
    """Settings independent of the environment and any .env file."""
    return Settings(_env_file=None)


@pytest.fixture(autouse=True)
def reset_shared_scheduler() -> Iterator[None]:
    """Make sure no shared scheduler leaks between tests."""
    factory.shutdown_step_scheduler()
    yield
    factory.shutdown_step_scheduler()
