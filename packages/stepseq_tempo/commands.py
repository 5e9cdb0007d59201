"""
Pydantic models for command validation.

Each command has a corresponding model that validates the payload structure.
Strict numbers are required: strings such as "120" are rejected rather than
coerced, matching the scheduler's own argument checks.
"""

from pydantic import BaseModel, ConfigDict, StrictBool, StrictFloat, StrictInt


class BpmCommand(BaseModel):
    """
    Tempo change command payload.

    Fields:
        bpm: Beats per minute (clamped by the scheduler)
    """

    model_config = ConfigDict(extra="forbid")

    bpm: StrictInt | StrictFloat


class TimeSignatureCommand(BaseModel):
    """
    Time signature change command payload.

    Fields:
        beats_per_measure: Top part of the time signature
        beat_length: Bottom part of the time signature
    """

    model_config = ConfigDict(extra="forbid")

    beats_per_measure: StrictInt | StrictFloat
    beat_length: StrictInt | StrictFloat


class ToggleCommand(BaseModel):
    """
    Toggle command payload.

    Fields:
        playing: Desired state, or None to flip the current one
    """

    model_config = ConfigDict(extra="forbid")

    playing: StrictBool | None = None


class PlayCommand(BaseModel):
    """Play command payload (empty)."""

    model_config = ConfigDict(extra="forbid")


class StopCommand(BaseModel):
    """Stop command payload (empty)."""

    model_config = ConfigDict(extra="forbid")
