"""
Step Scheduler

Fires a callback every step (16th note) at the tempo and time signature set,
correcting for host timer inaccuracy.

Drift correction is a single-sample proportional corrector: every tick the
actual elapsed time since the previous tick is measured, and the ratio
nominal / actual scales the delay requested for the following tick.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from stepseq_core.constants.steps import (
    MAX_BEATS_PER_MEASURE,
    MAX_BPM,
    MIN_BEATS_PER_MEASURE,
    MIN_BPM,
    STEPS_PER_WHOLE_NOTE,
)
from stepseq_core.exceptions import InvalidArgument
from stepseq_core.protocols import Clock, TimerHost
from stepseq_core.timing import (
    clamp,
    nearest_int_divisor,
    round_half_up,
    validate_number,
)

from ..hosts import AsyncioTimerHost, MonotonicClock
from ..state import PlaybackState, SchedulerState, TimeSignature, noop

logger = logging.getLogger(__name__)


class StepScheduler:
    """
    Self-correcting periodic step scheduler.

    Each tick schedules only the next single tick, so at most one timer
    handle is pending at any time.

    Collaborators are injected for testability; omitted ones default to
    MonotonicClock and AsyncioTimerHost. Use create_step_scheduler() or
    get_step_scheduler() from stepseq_tempo.factory for configured instances.
    """

    # Per-tick drift (actual minus nominal interval) worth a warning
    DRIFT_WARNING_THRESHOLD_MS: float = 20.0

    # Floor for the measured elapsed time, avoids dividing by zero when
    # two ticks land within the clock resolution
    DEFAULT_MIN_ELAPSED_MS: float = 1.0

    def __init__(
        self,
        on_step: Callable[[], Any] | None = None,
        *,
        clock: Clock | None = None,
        timer: TimerHost | None = None,
        min_elapsed_ms: float = DEFAULT_MIN_ELAPSED_MS,
    ):
        """
        Initialize step scheduler.

        Args:
            on_step: Callback run every step (None for no-op)
            clock: Millisecond clock (MonotonicClock or mock)
            timer: Deferred execution host (AsyncioTimerHost or mock)
            min_elapsed_ms: Floor applied to the measured tick interval

        Raises:
            InvalidArgument: If on_step is neither callable nor None
        """
        self._clock = clock if clock is not None else MonotonicClock()
        self._timer = timer if timer is not None else AsyncioTimerHost()
        self._min_elapsed_ms = min_elapsed_ms

        self._state = SchedulerState(last_tick_time=self._clock.now())

        self._drift_stats: dict[str, float | int] = {
            "tick_count": 0,
            "max_drift_ms": 0.0,
            "last_elapsed_ms": 0.0,
            "guarded_ticks": 0,
        }

        self.set_step_callback(on_step)

    # ================================================================
    # Mutators
    # ================================================================

    def set_tempo(self, bpm: float) -> StepScheduler:
        """
        Update the tempo, limited to [MIN_BPM, MAX_BPM].

        Takes effect on the next scheduled delay; an already pending tick
        is not rescheduled.

        Args:
            bpm: Beats per minute

        Returns:
            self, for chaining

        Raises:
            InvalidArgument: If bpm is not a number
        """
        validate_number(bpm, "bpm", "set_tempo")

        self._state.bpm = clamp(bpm, MIN_BPM, MAX_BPM)
        self._state.update_step_interval()
        logger.info(
            f"Tempo set to {self._state.bpm} BPM "
            f"(step interval {self._state.step_interval_ms:.2f}ms)"
        )
        return self

    def set_time_signature(
        self,
        beats_per_measure: float,
        beat_length: float,
    ) -> StepScheduler:
        """
        Update the time signature.

        The beat length is replaced by the nearest value that divides
        STEPS_PER_WHOLE_NOTE, so one beat is always a whole number of steps
        (e.g. 5 becomes 4).

        Args:
            beats_per_measure: Top part of the time signature
            beat_length: Bottom part of the time signature

        Returns:
            self, for chaining

        Raises:
            InvalidArgument: If either argument is not a number
        """
        validate_number(beats_per_measure, "beats_per_measure", "set_time_signature")
        validate_number(beat_length, "beat_length", "set_time_signature")

        # Bounds are integers, so clamping before rounding gives the same result
        # as rounding first and also copes with infinities.
        self._state.beats_per_measure = round_half_up(
            clamp(beats_per_measure, MIN_BEATS_PER_MEASURE, MAX_BEATS_PER_MEASURE)
        )
        self._state.beat_length = nearest_int_divisor(
            STEPS_PER_WHOLE_NOTE,
            round_half_up(clamp(beat_length, 1, STEPS_PER_WHOLE_NOTE)),
        )
        self._state.update_step_interval()
        logger.info(
            f"Time signature set to {self._state.time_signature().simple} "
            f"(step interval {self._state.step_interval_ms:.2f}ms)"
        )
        return self

    def set_step_callback(self, on_step: Callable[[], Any] | None) -> StepScheduler:
        """
        Set the function called every step. Pass None to do nothing.

        Raises:
            InvalidArgument: If on_step is neither callable nor None
        """
        if on_step is not None and not callable(on_step):
            raise InvalidArgument(
                "set_step_callback: on_step should be callable or None, "
                f"{type(on_step).__name__} given."
            )

        self._state.on_step = on_step if on_step is not None else noop
        return self

    def toggle(self, on: bool | None = None) -> StepScheduler:
        """
        Start or stop the step loop.

        Args:
            on: Desired state; None flips the current one.
                Requesting the current state does nothing.

        Returns:
            self, for chaining
        """
        new_state = bool(on) if on is not None else not self._state.playing

        if new_state == self._state.playing:
            return self

        if new_state:
            self._start()
        else:
            self._stop()
        return self

    # ================================================================
    # Loop
    # ================================================================

    def _start(self) -> None:
        state = self._state
        state.playback_state = PlaybackState.PLAYING
        state.step_count = 0
        # Pretend the previous tick happened exactly one interval ago so the
        # first measurement yields a ratio of 1.
        state.last_tick_time = self._clock.now() - state.step_interval_ms
        logger.info(
            f"Step loop started at {state.bpm} BPM, {state.time_signature().simple}"
        )
        self._tick()

    def _stop(self) -> None:
        state = self._state
        state.playback_state = PlaybackState.STOPPED
        self._timer.cancel(state.pending_handle)
        state.pending_handle = None
        logger.info(f"Step loop stopped after {state.step_count} steps")

    def _tick(self) -> None:
        """
        Run one step.

        The next tick is scheduled before anything else so the cadence is kept
        while the correction is computed. Exceptions raised by the step
        callback propagate to the caller (the host timer).
        """
        state = self._state

        if state.playing:
            state.pending_handle = self._timer.schedule_after(
                state.step_interval_ms * state.drift_ratio, self._tick
            )

        elapsed = self._clock.now() - state.last_tick_time
        if elapsed < self._min_elapsed_ms:
            logger.debug(
                f"Tick elapsed {elapsed:.3f}ms below floor, using {self._min_elapsed_ms}ms"
            )
            self._drift_stats["guarded_ticks"] = int(self._drift_stats["guarded_ticks"]) + 1
            elapsed = self._min_elapsed_ms

        state.drift_ratio = state.step_interval_ms / elapsed
        state.last_tick_time = self._clock.now()
        state.step_count += 1
        self._record_drift(elapsed)

        state.on_step()

    def _record_drift(self, elapsed: float) -> None:
        drift_ms = elapsed - self._state.step_interval_ms

        self._drift_stats["tick_count"] = int(self._drift_stats["tick_count"]) + 1
        self._drift_stats["last_elapsed_ms"] = elapsed
        if abs(drift_ms) > self._drift_stats["max_drift_ms"]:
            self._drift_stats["max_drift_ms"] = abs(drift_ms)

        if abs(drift_ms) > self.DRIFT_WARNING_THRESHOLD_MS:
            direction = "late" if drift_ms > 0 else "early"
            logger.warning(
                f"Step drift {drift_ms:.1f}ms {direction} "
                f"(next ratio {self._state.drift_ratio:.3f})"
            )
        else:
            logger.debug(
                f"Step {self._state.step_count}: elapsed {elapsed:.2f}ms, "
                f"ratio {self._state.drift_ratio:.3f}"
            )

    # ================================================================
    # Accessors
    # ================================================================

    def get_bpm(self) -> float:
        return self._state.bpm

    def get_time_signature(self) -> TimeSignature:
        """Current time signature, including its "B/L" string form"""
        return self._state.time_signature()

    def is_playing(self) -> bool:
        return self._state.playing

    def get_step_interval_ms(self) -> float:
        return self._state.step_interval_ms

    def get_drift_ratio(self) -> float:
        return self._state.drift_ratio

    def get_step_count(self) -> int:
        """Steps fired since the loop was last started"""
        return self._state.step_count

    def get_drift_stats(self) -> dict[str, float | int]:
        """Get drift statistics for monitoring."""
        return {
            **self._drift_stats,
            "drift_ratio": self._state.drift_ratio,
        }

    def snapshot(self) -> dict[str, Any]:
        """Tempo state as a plain dict"""
        return self._state.to_dict()
