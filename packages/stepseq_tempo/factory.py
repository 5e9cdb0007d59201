"""
Stepseq Tempo Factory

Factory functions for creating StepScheduler instances, and the single
shared instance the application routes all tempo access through.

The shared instance is constructed on first use and lives until process
exit. shutdown_step_scheduler() stops it, which releases its pending timer
handle, the only resource it holds.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from stepseq_core.protocols import Clock, TimerHost

from .config import Settings, settings as default_settings
from .engine import StepScheduler

logger = logging.getLogger(__name__)

# Global instance (created by get_step_scheduler)
_step_scheduler: StepScheduler | None = None


def create_step_scheduler(
    on_step: Callable[[], Any] | None = None,
    clock: Clock | None = None,
    timer: TimerHost | None = None,
    settings: Settings | None = None,
) -> StepScheduler:
    """
    Create a StepScheduler configured from settings.

    Args:
        on_step: Callback run every step
        clock: Clock implementation (default: MonotonicClock)
        timer: TimerHost implementation (default: AsyncioTimerHost)
        settings: Settings to read initial tempo from (default: global settings)

    Returns:
        Configured, stopped StepScheduler
    """
    cfg = settings if settings is not None else default_settings

    scheduler = StepScheduler(
        on_step,
        clock=clock,
        timer=timer,
        min_elapsed_ms=cfg.min_elapsed_ms,
    )
    scheduler.set_tempo(cfg.default_bpm)
    scheduler.set_time_signature(
        cfg.default_beats_per_measure,
        cfg.default_beat_length,
    )
    return scheduler


def get_step_scheduler() -> StepScheduler:
    """
    Get the shared StepScheduler, creating it on first use.

    Later calls return the same instance. To inject collaborators, call
    init_step_scheduler() before anything else asks for the scheduler.
    """
    global _step_scheduler
    if _step_scheduler is None:
        _step_scheduler = create_step_scheduler()
        logger.debug("Shared step scheduler created")
    return _step_scheduler


def init_step_scheduler(
    on_step: Callable[[], Any] | None = None,
    clock: Clock | None = None,
    timer: TimerHost | None = None,
    settings: Settings | None = None,
) -> StepScheduler:
    """
    Create the shared StepScheduler at startup with explicit dependencies.

    Returns the existing instance untouched if one was already created.
    """
    global _step_scheduler
    if _step_scheduler is not None:
        return _step_scheduler

    _step_scheduler = create_step_scheduler(
        on_step=on_step,
        clock=clock,
        timer=timer,
        settings=settings,
    )
    logger.debug("Shared step scheduler initialized")
    return _step_scheduler


def shutdown_step_scheduler() -> None:
    """Stop and forget the shared StepScheduler, if any"""
    global _step_scheduler
    if _step_scheduler is None:
        return

    _step_scheduler.toggle(False)
    _step_scheduler = None
    logger.debug("Shared step scheduler shut down")
