"""
Stepseq Tempo Service

Drift-corrected step (16th note) scheduler for a step sequencer.
"""

__version__ = "0.1.0"

from .controller import TempoController
from .engine import StepScheduler
from .factory import (
    create_step_scheduler,
    get_step_scheduler,
    init_step_scheduler,
    shutdown_step_scheduler,
)
from .result import CommandResult
from .state import PlaybackState, TimeSignature

__all__ = [
    "CommandResult",
    "PlaybackState",
    "StepScheduler",
    "TempoController",
    "TimeSignature",
    "create_step_scheduler",
    "get_step_scheduler",
    "init_step_scheduler",
    "shutdown_step_scheduler",
]
