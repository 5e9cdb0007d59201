"""Host services (clock and timer) for the step scheduler"""

from .asyncio_host import AsyncioTimerHost
from .clock import MonotonicClock

__all__ = [
    "AsyncioTimerHost",
    "MonotonicClock",
]
