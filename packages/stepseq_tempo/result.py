"""
Command result type for the tempo controller.

Commands never raise for bad input; they report it through CommandResult.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass
class CommandResult:
    """
    Outcome of a tempo command.

    Attributes:
        success: True if the command was applied
        message: Human readable outcome or error
        data: Tempo snapshot after the command (success only)
    """

    success: bool
    message: str | None = None
    data: dict[str, Any] | None = None

    @classmethod
    def ok(cls, message: str | None = None, data: dict[str, Any] | None = None) -> CommandResult:
        return cls(success=True, message=message, data=data)

    @classmethod
    def error(cls, message: str) -> CommandResult:
        return cls(success=False, message=message)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
