"""Millisecond clock backed by time.monotonic()"""

from __future__ import annotations

import time


class MonotonicClock:
    """Clock protocol implementation in milliseconds"""

    def now(self) -> float:
        return time.monotonic() * 1000
