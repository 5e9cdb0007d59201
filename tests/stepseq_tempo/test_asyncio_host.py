"""
Tests for the asyncio host services and the scheduler running on a real loop.

Timing assertions are kept loose; exact drift arithmetic is covered with
fakes in test_tick_loop.py.
"""

from __future__ import annotations

import asyncio

import pytest

from stepseq_core.protocols import Clock, TimerHost
from stepseq_tempo.engine import StepScheduler
from stepseq_tempo.hosts import AsyncioTimerHost, MonotonicClock


class TestMonotonicClock:
    """Test MonotonicClock."""

    def test_implements_protocol(self) -> None:
        assert isinstance(MonotonicClock(), Clock)

    def test_never_goes_backwards(self) -> None:
        clock = MonotonicClock()
        first = clock.now()
        assert clock.now() >= first


class TestAsyncioTimerHost:
    """Test AsyncioTimerHost."""

    def test_implements_protocol(self) -> None:
        assert isinstance(AsyncioTimerHost(), TimerHost)

    @pytest.mark.asyncio
    async def test_schedule_after_fires(self) -> None:
        host = AsyncioTimerHost()
        fired = asyncio.Event()

        host.schedule_after(5, fired.set)

        await asyncio.wait_for(fired.wait(), timeout=1.0)

    @pytest.mark.asyncio
    async def test_cancel_prevents_call(self) -> None:
        host = AsyncioTimerHost()
        calls: list[int] = []

        handle = host.schedule_after(5, lambda: calls.append(1))
        host.cancel(handle)
        await asyncio.sleep(0.05)

        assert calls == []

    @pytest.mark.asyncio
    async def test_cancel_none_and_fired_handles(self) -> None:
        host = AsyncioTimerHost()
        fired = asyncio.Event()

        handle = host.schedule_after(0, fired.set)
        await asyncio.wait_for(fired.wait(), timeout=1.0)

        host.cancel(handle)
        host.cancel(None)

    @pytest.mark.asyncio
    async def test_explicit_loop(self) -> None:
        host = AsyncioTimerHost(asyncio.get_running_loop())
        fired = asyncio.Event()

        host.schedule_after(1, fired.set)

        await asyncio.wait_for(fired.wait(), timeout=1.0)


class TestSchedulerOnEventLoop:
    """StepScheduler driven by the default asyncio collaborators."""

    @pytest.mark.asyncio
    async def test_steps_fire_and_stop(self) -> None:
        # 600 BPM quarter-note beat: 25ms per step
        steps: list[float] = []
        enough = asyncio.Event()
        scheduler = StepScheduler()

        def on_step() -> None:
            steps.append(scheduler.get_drift_ratio())
            if len(steps) >= 4:
                enough.set()

        scheduler.set_tempo(600).set_step_callback(on_step).toggle(True)
        try:
            await asyncio.wait_for(enough.wait(), timeout=5.0)
        finally:
            scheduler.toggle(False)

        fired = len(steps)
        await asyncio.sleep(0.1)

        assert fired >= 4
        assert len(steps) == fired
        assert scheduler.is_playing() is False
        assert all(ratio > 0 for ratio in steps)
