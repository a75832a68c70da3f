"""Chord table - static catalog of chord qualities and functional numerals.

Qualities are interval templates measured in semitones from the root.
Numerals form a small major-key harmonic grammar: each numeral has a
quality, a root offset from the key centre, and the numerals it may
move to next.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, List, Mapping, Tuple

from ..core import PITCH_NAMES, transpose


@dataclass(frozen=True)
class ChordQuality:
    """A chord type defined by its intervals from the root."""

    name: str
    intervals: Tuple[int, ...]
    suffix: str = ""  # Symbol suffix, e.g. "m" or "7"

    def __contains__(self, interval: int) -> bool:
        return interval in self.intervals


@dataclass(frozen=True)
class FunctionalNumeral:
    """A harmonic function in a key, with its idiomatic successors."""

    name: str
    quality: str
    relative_root: int  # Semitones above the key centre
    destinations: Tuple[str, ...] = ()


# Chord templates, in matching priority order
QUALITIES: Mapping[str, ChordQuality] = MappingProxyType({
    q.name: q
    for q in [
        ChordQuality("major", (4, 7)),
        ChordQuality("minor", (3, 7), "m"),
        ChordQuality("diminished", (3, 6), "dim"),
        ChordQuality("augmented", (4, 8), "aug"),
        ChordQuality("dominant", (4, 7, 10), "7"),
        ChordQuality("major7", (4, 7, 11), "maj7"),
        ChordQuality("minor7", (3, 7, 10), "m7"),
        ChordQuality("half_diminished", (3, 6, 10), "m7b5"),
        ChordQuality("diminished7", (3, 6, 9), "dim7"),
    ]
})

# Major-key progression grammar
NUMERALS: Mapping[str, FunctionalNumeral] = MappingProxyType({
    n.name: n
    for n in [
        FunctionalNumeral("I", "major", 0, ("ii", "iii", "IV", "V", "vi", "vii°")),
        FunctionalNumeral("ii", "minor", 2, ("V", "V7", "vii°")),
        FunctionalNumeral("iii", "minor", 4, ("IV", "vi")),
        FunctionalNumeral("IV", "major", 5, ("I", "ii", "V", "V7", "vii°")),
        FunctionalNumeral("V", "major", 7, ("I", "vi")),
        FunctionalNumeral("V7", "dominant", 7, ("I", "vi")),
        FunctionalNumeral("vi", "minor", 9, ("ii", "IV", "V")),
        FunctionalNumeral("vii°", "diminished", 11, ("I",)),
        FunctionalNumeral("Imaj7", "major7", 0, ("ii7", "IVmaj7", "vi")),
        FunctionalNumeral("ii7", "minor7", 2, ("V7", "viiø7")),
        FunctionalNumeral("IVmaj7", "major7", 5, ("V7", "ii7", "Imaj7")),
        FunctionalNumeral("viiø7", "half_diminished", 11, ("I", "Imaj7")),
    ]
})


def get_quality(name: str) -> ChordQuality:
    """Look up a chord quality by name (KeyError if unknown)."""
    return QUALITIES[name]


def get_numeral(name: str) -> FunctionalNumeral:
    """Look up a functional numeral by name (KeyError if unknown)."""
    return NUMERALS[name]


def numerals_for_quality(quality: str) -> List[FunctionalNumeral]:
    """Get all numerals with the given quality, in declared order."""
    return [n for n in NUMERALS.values() if n.quality == quality]


def chord_pitches(root: str, quality: str) -> List[str]:
    """Get the pitch names of a chord: the root, then each interval above it."""
    template = get_quality(quality)
    return [root] + [transpose(root, i) for i in template.intervals]


def chord_spelling(root: str, quality: str) -> str:
    """Human-readable spelling of a chord, e.g. "ceg" for c major."""
    return "".join(chord_pitches(root, quality))


def chord_state(root: str, quality: str) -> Dict[str, bool]:
    """Get the full 12-pitch on/off state of a chord."""
    members = set(chord_pitches(root, quality))
    return {name: name in members for name in PITCH_NAMES}
