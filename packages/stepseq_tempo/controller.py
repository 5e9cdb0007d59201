"""
Tempo Controller

Dispatches named commands with dict payloads to a StepScheduler.
Payloads are validated with Pydantic before the scheduler is touched.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from pydantic import ValidationError

from stepseq_core.exceptions import InvalidArgument

from .commands import (
    BpmCommand,
    PlayCommand,
    StopCommand,
    TimeSignatureCommand,
    ToggleCommand,
)
from .engine import StepScheduler
from .result import CommandResult

logger = logging.getLogger(__name__)

CommandHandler = Callable[[dict[str, Any]], CommandResult]


class TempoController:
    """Command front-end for a StepScheduler"""

    def __init__(self, scheduler: StepScheduler):
        self._scheduler = scheduler
        self._handlers: dict[str, CommandHandler] = {}
        self._register_handlers()

    def _register_handlers(self) -> None:
        """Register command handlers"""
        self._handlers["bpm"] = self._handle_bpm
        self._handlers["time_signature"] = self._handle_time_signature
        self._handlers["toggle"] = self._handle_toggle
        self._handlers["play"] = self._handle_play
        self._handlers["stop"] = self._handle_stop

    @property
    def commands(self) -> list[str]:
        return sorted(self._handlers)

    def handle(self, command: str, payload: dict[str, Any] | None = None) -> CommandResult:
        """
        Run a command.

        Args:
            command: Command name (see commands)
            payload: Command payload

        Returns:
            CommandResult with the tempo snapshot as data on success
        """
        handler = self._handlers.get(command)
        if handler is None:
            logger.warning(f"Unknown command: {command}")
            return CommandResult.error(f"Unknown command: {command}")

        try:
            return handler(payload or {})
        except InvalidArgument as e:
            return CommandResult.error(f"Invalid {command} command: {e}")

    def _ok(self, message: str) -> CommandResult:
        return CommandResult.ok(message, data=self._scheduler.snapshot())

    def _handle_bpm(self, payload: dict[str, Any]) -> CommandResult:
        try:
            cmd = BpmCommand(**payload)
        except ValidationError as e:
            return CommandResult.error(f"Invalid bpm command: {e}")

        self._scheduler.set_tempo(cmd.bpm)
        return self._ok(f"BPM set to {self._scheduler.get_bpm()}")

    def _handle_time_signature(self, payload: dict[str, Any]) -> CommandResult:
        try:
            cmd = TimeSignatureCommand(**payload)
        except ValidationError as e:
            return CommandResult.error(f"Invalid time_signature command: {e}")

        self._scheduler.set_time_signature(cmd.beats_per_measure, cmd.beat_length)
        return self._ok(
            f"Time signature set to {self._scheduler.get_time_signature().simple}"
        )

    def _handle_toggle(self, payload: dict[str, Any]) -> CommandResult:
        try:
            cmd = ToggleCommand(**payload)
        except ValidationError as e:
            return CommandResult.error(f"Invalid toggle command: {e}")

        self._scheduler.toggle(cmd.playing)
        return self._ok("Playing" if self._scheduler.is_playing() else "Stopped")

    def _handle_play(self, payload: dict[str, Any]) -> CommandResult:
        try:
            PlayCommand(**payload)
        except ValidationError as e:
            return CommandResult.error(f"Invalid play command: {e}")

        if self._scheduler.is_playing():
            return self._ok("Already playing")

        self._scheduler.toggle(True)
        return self._ok("Playback started")

    def _handle_stop(self, payload: dict[str, Any]) -> CommandResult:
        try:
            StopCommand(**payload)
        except ValidationError as e:
            return CommandResult.error(f"Invalid stop command: {e}")

        if not self._scheduler.is_playing():
            return self._ok("Already stopped")

        self._scheduler.toggle(False)
        return self._ok("Playback stopped")
