"""Chord detection - identify the chord in a verticality and suggest successors.

Detection is exact template matching:
- Roots are tried in pitch-index order, starting at the first active pitch
- A quality matches only if every one of the 11 offsets from the root is
  on exactly when the quality contains it (no missing or extra pitches)
- The first root/quality pair that matches wins

Once a chord is found, every numeral with the same quality implies a key,
and that numeral's destinations in the key become candidate transitions.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Tuple

from ..core import PITCH_NAMES, PITCH_COUNT, name_of, transpose
from .chord_table import (
    QUALITIES,
    ChordQuality,
    get_numeral,
    numerals_for_quality,
    chord_pitches,
    chord_spelling,
    chord_state,
)


@dataclass(frozen=True)
class DetectedChord:
    """A chord identified in a verticality."""

    root: str  # Root pitch name, e.g. "c"
    quality: str  # Quality name, e.g. "minor"

    @property
    def pitches(self) -> List[str]:
        """Chord members, root first."""
        return chord_pitches(self.root, self.quality)

    @property
    def spelling(self) -> str:
        return chord_spelling(self.root, self.quality)

    @property
    def symbol(self) -> str:
        """Get chord symbol (e.g., 'c', 'sm', 'g7')."""
        return f"{self.root}{QUALITIES[self.quality].suffix}"


@dataclass
class Transition:
    """A legal next chord reached from the current one."""

    numeral: str  # Destination numeral, e.g. "V"
    source: str  # Numeral the current chord was read as
    key: str  # Implied key centre
    root: str
    quality: str
    state: Dict[str, bool] = field(default_factory=dict)

    @property
    def chord(self) -> DetectedChord:
        return DetectedChord(self.root, self.quality)

    @property
    def label(self) -> str:
        """Get label such as 'V (g) in c'."""
        return f"{self.numeral} ({self.chord.symbol}) in {self.key}"


class ChordDetector:
    """Identify chords from pitch-class on/off states.

    Features:
    - Exact interval-template matching over the quality table
    - First-match-wins root search in pitch-index order
    - Functional transition suggestions from the numeral grammar
    """

    def __init__(self, qualities: Optional[Mapping[str, ChordQuality]] = None):
        """
        Initialize ChordDetector.

        Args:
            qualities: Quality templates in priority order (default: QUALITIES)
        """
        self.qualities = dict(qualities if qualities is not None else QUALITIES)

    def detect(self, state: Mapping[str, bool]) -> Optional[DetectedChord]:
        """
        Detect the chord in a verticality snapshot.

        Args:
            state: Mapping of pitch name to on/off; missing names count as off

        Returns:
            The detected chord, or None if no quality matches
        """
        on = [bool(state.get(name, False)) for name in PITCH_NAMES]

        for root in range(PITCH_COUNT):
            if not on[root]:
                continue
            quality = self._match_quality(on, root)
            if quality is not None:
                return DetectedChord(root=name_of(root), quality=quality)

        return None

    def _match_quality(self, on: List[bool], root: int) -> Optional[str]:
        """Find the first quality whose template fits exactly at root."""
        for name, template in self.qualities.items():
            if self._matches(on, root, template):
                return name
        return None

    @staticmethod
    def _matches(on: List[bool], root: int, template: ChordQuality) -> bool:
        for interval in range(1, PITCH_COUNT):
            if on[(root + interval) % PITCH_COUNT] != (interval in template):
                return False
        return True

    def transitions(self, chord: Optional[DetectedChord]) -> List[Transition]:
        """
        Enumerate the chords that may follow a detected chord.

        Every numeral sharing the chord's quality is tried, so one chord
        can be read in several keys. Duplicate destinations are kept.

        Args:
            chord: Detected chord, or None

        Returns:
            List of Transition objects (empty if chord is None)
        """
        if chord is None:
            return []

        result = []
        for numeral in numerals_for_quality(chord.quality):
            key = transpose(chord.root, -numeral.relative_root)
            for destination_name in numeral.destinations:
                destination = get_numeral(destination_name)
                root = transpose(key, destination.relative_root)
                result.append(Transition(
                    numeral=destination.name,
                    source=numeral.name,
                    key=key,
                    root=root,
                    quality=destination.quality,
                    state=chord_state(root, destination.quality),
                ))
        return result

    def analyze(
        self, state: Mapping[str, bool]
    ) -> Tuple[Optional[DetectedChord], List[Transition]]:
        """Detect the chord and its transitions in one call."""
        chord = self.detect(state)
        return chord, self.transitions(chord)
