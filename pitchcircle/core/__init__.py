"""Core types and constants for pitchcircle."""

from .constants import (
    PITCH_NAMES,
    PITCH_COUNT,
    FIFTHS_INTERVAL,
    CHROMATIC_INTERVAL,
    INTERVAL_COLORS,
)
from .errors import PitchCircleError, UnknownPitchName
from .pitch_space import (
    name_of,
    index_of,
    is_pitch_name,
    normalize,
    mod,
    transpose,
    reflect,
    interval_quality,
)

__all__ = [
    "PITCH_NAMES",
    "PITCH_COUNT",
    "FIFTHS_INTERVAL",
    "CHROMATIC_INTERVAL",
    "INTERVAL_COLORS",
    "PitchCircleError",
    "UnknownPitchName",
    "name_of",
    "index_of",
    "is_pitch_name",
    "normalize",
    "mod",
    "transpose",
    "reflect",
    "interval_quality",
]
