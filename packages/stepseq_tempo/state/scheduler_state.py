"""
Stepseq Scheduler State

Private state record owned by a single StepScheduler.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, NamedTuple

from stepseq_core.constants.steps import (
    DEFAULT_BEAT_LENGTH,
    DEFAULT_BEATS_PER_MEASURE,
    DEFAULT_BPM,
)
from stepseq_core.timing import step_interval_ms


def noop() -> None:
    pass


class PlaybackState(Enum):
    """Playback state enumeration"""
    STOPPED = "stopped"
    PLAYING = "playing"


class TimeSignature(NamedTuple):
    """Time signature snapshot, e.g. (3, 4, "3/4")"""
    beats_per_measure: int
    beat_length: int
    simple: str

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for command results"""
        return self._asdict()


@dataclass
class SchedulerState:
    """
    Tempo and loop state for the step scheduler.

    step_interval_ms is derived: call update_step_interval() after changing
    bpm or beat_length. A fresh interval has no drift history, so the drift
    ratio is reset along with it.
    """

    bpm: float = DEFAULT_BPM
    beats_per_measure: int = DEFAULT_BEATS_PER_MEASURE
    beat_length: int = DEFAULT_BEAT_LENGTH

    step_interval_ms: float = field(init=False)
    drift_ratio: float = 1.0
    last_tick_time: float = 0.0

    playback_state: PlaybackState = PlaybackState.STOPPED
    pending_handle: Any = None
    on_step: Callable[[], Any] = field(default=noop, repr=False)

    # Steps fired since the last start
    step_count: int = 0

    def __post_init__(self) -> None:
        self.update_step_interval()

    @property
    def playing(self) -> bool:
        """Check if actively playing"""
        return self.playback_state == PlaybackState.PLAYING

    def update_step_interval(self) -> None:
        """Recalculate the step interval from bpm and beat length"""
        self.step_interval_ms = step_interval_ms(self.bpm, self.beat_length)
        self.drift_ratio = 1.0

    def time_signature(self) -> TimeSignature:
        return TimeSignature(
            self.beats_per_measure,
            self.beat_length,
            f"{self.beats_per_measure}/{self.beat_length}",
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for command results"""
        return {
            "bpm": self.bpm,
            "time_signature": self.time_signature().to_dict(),
            "step_interval_ms": self.step_interval_ms,
            "playing": self.playing,
        }
