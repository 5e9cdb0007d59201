"""
Stepseq Metronome Entry Point

Run as:
    python -m stepseq_tempo
    stepseq-metronome (after pip install)
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from stepseq_core.constants.steps import STEPS_PER_WHOLE_NOTE

from .config import settings
from .controller import TempoController
from .engine import StepScheduler
from .factory import init_step_scheduler, shutdown_step_scheduler
from .state import TimeSignature

logger = logging.getLogger(__name__)


def setup_logging(debug: bool = False) -> None:
    """Configure logging"""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def parse_time_signature(value: str) -> tuple[float, float]:
    """Parse "B/L" (e.g. "7/8") for argparse"""
    try:
        top, bottom = value.split("/")
        return float(top), float(bottom)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"time signature should look like 4/4, got {value!r}"
        ) from None


def describe_position(step_count: int, time_signature: TimeSignature) -> str:
    """
    Format a 1-based step count as bar.beat.step.

    Example: step 6 in 4/4 is "1.2.2" (bar 1, beat 2, second 16th).
    """
    steps_per_beat = STEPS_PER_WHOLE_NOTE // time_signature.beat_length
    steps_per_bar = steps_per_beat * time_signature.beats_per_measure
    index = step_count - 1

    bar = index // steps_per_bar + 1
    beat = (index % steps_per_bar) // steps_per_beat + 1
    step = index % steps_per_beat + 1
    return f"{bar}.{beat}.{step}"


async def run_metronome(scheduler: StepScheduler, steps: int | None) -> None:
    """
    Play until `steps` steps have fired (forever when None).

    Args:
        scheduler: Stopped scheduler to drive
        steps: Number of steps to play
    """
    done = asyncio.Event()

    def on_step() -> None:
        count = scheduler.get_step_count()
        logger.info(
            f"step {describe_position(count, scheduler.get_time_signature())}"
        )
        if steps is not None and count >= steps:
            scheduler.toggle(False)
            done.set()

    scheduler.set_step_callback(on_step)
    scheduler.toggle(True)
    try:
        await done.wait()
    finally:
        scheduler.toggle(False)

    logger.info(f"Drift stats: {scheduler.get_drift_stats()}")


def main() -> int:
    """Main entry point"""
    parser = argparse.ArgumentParser(
        description="Stepseq Metronome - drift-corrected step scheduler"
    )
    parser.add_argument(
        "--bpm",
        type=float,
        default=None,
        help=f"Tempo in beats per minute (default: {settings.default_bpm})",
    )
    parser.add_argument(
        "--time-signature",
        type=parse_time_signature,
        default=None,
        help="Time signature as B/L, e.g. 7/8 (default: from settings)",
    )
    parser.add_argument(
        "--steps",
        type=int,
        default=None,
        help="Stop after this many steps (default: run until interrupted)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args()

    setup_logging(args.debug or settings.debug)

    scheduler = init_step_scheduler(settings=settings)
    controller = TempoController(scheduler)

    if args.bpm is not None:
        result = controller.handle("bpm", {"bpm": args.bpm})
        if not result.success:
            parser.error(result.message or "invalid bpm")
        logger.debug(f"bpm command: {result.to_dict()}")
    if args.time_signature is not None:
        beats_per_measure, beat_length = args.time_signature
        result = controller.handle(
            "time_signature",
            {"beats_per_measure": beats_per_measure, "beat_length": beat_length},
        )
        if not result.success:
            parser.error(result.message or "invalid time signature")

    logger.info("Starting Stepseq Metronome")

    try:
        asyncio.run(run_metronome(scheduler, args.steps))
    except KeyboardInterrupt:
        logger.info("Keyboard interrupt")
    finally:
        shutdown_step_scheduler()

    return 0


if __name__ == "__main__":
    sys.exit(main())
