"""Stepseq Tempo State"""

from .scheduler_state import PlaybackState, SchedulerState, TimeSignature, noop

__all__ = [
    "PlaybackState",
    "SchedulerState",
    "TimeSignature",
    "noop",
]
