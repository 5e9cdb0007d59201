"""Stepseq Tempo Engine"""

from .step_scheduler import StepScheduler

__all__ = [
    "StepScheduler",
]
