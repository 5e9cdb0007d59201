"""
Asyncio Timer Host

Deferred execution on an asyncio event loop via loop.call_later().
Exceptions raised by scheduled callbacks go to the loop's exception handler.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable


class AsyncioTimerHost:
    """
    TimerHost protocol implementation for asyncio.

    The loop is resolved lazily, so a host created outside of a running loop
    can still be used once the loop is running.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None):
        """
        Initialize timer host.

        Args:
            loop: Event loop to schedule on (default: the running loop)
        """
        self._loop = loop

    def schedule_after(
        self,
        delay_ms: float,
        fn: Callable[[], None],
    ) -> asyncio.TimerHandle:
        loop = self._loop if self._loop is not None else asyncio.get_running_loop()
        return loop.call_later(max(0.0, delay_ms) / 1000, fn)

    def cancel(self, handle: asyncio.TimerHandle | None) -> None:
        if handle is not None:
            handle.cancel()
