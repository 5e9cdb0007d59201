"""Step and tempo constants for the stepseq framework.

A step is a 16th note: the shortest note the sequencer can trigger.
"""

from typing import Final

# Steps a whole note is divided into
STEPS_PER_WHOLE_NOTE: Final[int] = 16

# Tempo bounds (beats per minute)
MIN_BPM: Final[int] = 40
MAX_BPM: Final[int] = 600

# Top part of the time signature. 24 is arbitrary but plenty.
MIN_BEATS_PER_MEASURE: Final[int] = 1
MAX_BEATS_PER_MEASURE: Final[int] = 24

# Defaults (140 BPM, 4/4)
DEFAULT_BPM: Final[int] = 140
DEFAULT_BEATS_PER_MEASURE: Final[int] = 4
DEFAULT_BEAT_LENGTH: Final[int] = 4

MS_PER_MINUTE: Final[int] = 60 * 1000
