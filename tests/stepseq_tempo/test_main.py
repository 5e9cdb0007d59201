"""Tests for the metronome entry point helpers."""

from __future__ import annotations

import argparse
import asyncio

import pytest

from stepseq_tempo.config import Settings
from stepseq_tempo.factory import create_step_scheduler
from stepseq_tempo.main import describe_position, parse_time_signature, run_metronome
from stepseq_tempo.state import TimeSignature


class TestDescribePosition:
    """Test bar.beat.step formatting."""

    @pytest.mark.parametrize(
        ("count", "expected"),
        [(1, "1.1.1"), (4, "1.1.4"), (5, "1.2.1"), (6, "1.2.2"), (16, "1.4.4"), (17, "2.1.1")],
    )
    def test_four_four(self, count: int, expected: str) -> None:
        assert describe_position(count, TimeSignature(4, 4, "4/4")) == expected

    def test_seven_eight(self) -> None:
        # 2 steps per eighth-note beat, 14 steps per bar
        ts = TimeSignature(7, 8, "7/8")
        assert describe_position(14, ts) == "1.7.2"
        assert describe_position(15, ts) == "2.1.1"


class TestParseTimeSignature:
    """Test --time-signature parsing."""

    def test_valid(self) -> None:
        assert parse_time_signature("7/8") == (7.0, 8.0)

    @pytest.mark.parametrize("value", ["4", "4/4/4", "a/b", ""])
    def test_invalid(self, value: str) -> None:
        with pytest.raises(argparse.ArgumentTypeError):
            parse_time_signature(value)


class TestRunMetronome:
    """Test run_metronome on a real event loop."""

    @pytest.mark.asyncio
    async def test_stops_after_steps(self, test_settings: Settings) -> None:
        scheduler = create_step_scheduler(settings=test_settings).set_tempo(600)

        await asyncio.wait_for(run_metronome(scheduler, 3), timeout=5.0)

        assert scheduler.is_playing() is False
        assert scheduler.get_step_count() == 3
