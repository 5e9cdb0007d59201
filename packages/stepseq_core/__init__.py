"""
Stepseq Core

Framework-level building blocks shared by the step scheduler:
timing arithmetic, constants, exceptions and collaborator protocols.
"""

__version__ = "0.1.0"

from .exceptions import InvalidArgument, StepSeqError
from .timing import nearest_int_divisor, step_interval_ms

__all__ = [
    "InvalidArgument",
    "StepSeqError",
    "nearest_int_divisor",
    "step_interval_ms",
]
