"""Centralized configuration using Pydantic Settings

All environment variables are managed here (prefix: STEPSEQ_).
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from stepseq_core.constants.steps import (
    DEFAULT_BEAT_LENGTH,
    DEFAULT_BEATS_PER_MEASURE,
    DEFAULT_BPM,
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    model_config = SettingsConfigDict(
        env_prefix="STEPSEQ_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Initial tempo
    default_bpm: float = DEFAULT_BPM
    default_beats_per_measure: int = DEFAULT_BEATS_PER_MEASURE
    default_beat_length: int = DEFAULT_BEAT_LENGTH

    # Drift correction: floor for the measured tick interval (ms)
    min_elapsed_ms: float = Field(default=1.0, gt=0)

    # Logging
    debug: bool = False


# Global settings instance
settings = Settings()
