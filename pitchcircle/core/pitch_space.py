"""Pitch space - the 12-class pitch alphabet and modular interval arithmetic.

Pitch classes are identified by single-letter names drawn from PITCH_NAMES.
The alphabet order is chromatic adjacency, so index arithmetic modulo 12
is transposition.
"""

from typing import Optional

from .constants import PITCH_NAMES, PITCH_COUNT
from .errors import UnknownPitchName

_INDEX = {name: i for i, name in enumerate(PITCH_NAMES)}


def mod(n: int, m: int = PITCH_COUNT) -> int:
    """Non-negative remainder of n modulo m."""
    return n % m


def name_of(index: int) -> str:
    """Get the pitch name for an index (taken modulo 12)."""
    return PITCH_NAMES[mod(index)]


def index_of(name: str) -> int:
    """
    Get the index (0-11) of a pitch name.

    Raises:
        UnknownPitchName: If name is not in the alphabet
    """
    try:
        return _INDEX[name]
    except (KeyError, TypeError):
        raise UnknownPitchName(name) from None


def is_pitch_name(name) -> bool:
    """Check whether name belongs to the pitch alphabet."""
    try:
        return name in _INDEX
    except TypeError:
        return False


def normalize(interval: int) -> int:
    """
    Fold an interval into the range [-6, 6].

    Intervals beyond an octave are reduced by octaves first; intervals
    between a tritone and an octave are reflected to their complement
    (7 -> 5, -7 -> -5, 12 -> 0).

    Args:
        interval: Any signed semitone difference

    Returns:
        The folded interval
    """
    while interval > PITCH_COUNT:
        interval -= PITCH_COUNT
    while interval < -PITCH_COUNT:
        interval += PITCH_COUNT

    half = PITCH_COUNT // 2
    if interval > half:
        return PITCH_COUNT - interval
    if interval < -half:
        return -PITCH_COUNT - interval
    return interval


def transpose(name: str, n: int) -> str:
    """Shift a pitch name by n semitones, wrapping around the octave."""
    return name_of(index_of(name) + n)


def reflect(name: str, center: str) -> str:
    """Invert a pitch name around the axis pitch center."""
    return name_of(2 * index_of(center) - index_of(name))


def interval_quality(source: str, target: str) -> Optional[int]:
    """
    Get the interval quality (1-6) from source to target.

    Only positive normalized intervals have a quality, so for any two
    distinct pitches exactly one direction yields a value.

    Returns:
        1-6, or None for unisons and the negative direction
    """
    interval = normalize(index_of(target) - index_of(source))
    if 1 <= interval <= PITCH_COUNT // 2:
        return interval
    return None
