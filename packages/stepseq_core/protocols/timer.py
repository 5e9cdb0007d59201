"""
Timer Protocols

Interfaces for the host services the step scheduler consumes:
a clock and a deferred-execution facility.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Clock(Protocol):
    """
    Millisecond time source.

    Implementations:
        - MonotonicClock: time.monotonic() based
        - FakeClock: Test double with manually advanced time
    """

    def now(self) -> float:
        """Current time in milliseconds."""
        ...


@runtime_checkable
class TimerHost(Protocol):
    """
    Deferred execution facility.

    Implementations:
        - AsyncioTimerHost: asyncio event loop call_later
        - FakeTimerHost: Test double firing callbacks on demand
    """

    def schedule_after(self, delay_ms: float, fn: Callable[[], None]) -> Any:
        """
        Run fn once after delay_ms milliseconds.

        Returns:
            Opaque handle accepted by cancel()
        """
        ...

    def cancel(self, handle: Any) -> None:
        """
        Cancel a scheduled call.

        Cancelling an already fired or unknown handle is a no-op.
        """
        ...
