"""Constants for the stepseq framework."""

from .steps import (
    DEFAULT_BEAT_LENGTH,
    DEFAULT_BEATS_PER_MEASURE,
    DEFAULT_BPM,
    MAX_BEATS_PER_MEASURE,
    MAX_BPM,
    MIN_BEATS_PER_MEASURE,
    MIN_BPM,
    STEPS_PER_WHOLE_NOTE,
)

__all__ = [
    "DEFAULT_BEAT_LENGTH",
    "DEFAULT_BEATS_PER_MEASURE",
    "DEFAULT_BPM",
    "MAX_BEATS_PER_MEASURE",
    "MAX_BPM",
    "MIN_BEATS_PER_MEASURE",
    "MIN_BPM",
    "STEPS_PER_WHOLE_NOTE",
]
