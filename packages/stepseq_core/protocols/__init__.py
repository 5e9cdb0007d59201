"""
Stepseq Protocols

Abstract interfaces for the scheduler's external collaborators.
Uses typing.Protocol for structural subtyping (duck typing).
"""

from .timer import Clock, TimerHost

__all__ = [
    "Clock",
    "TimerHost",
]
