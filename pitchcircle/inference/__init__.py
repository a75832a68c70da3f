"""Inference layer - Harmonic understanding of a verticality.

This layer derives musical meaning from the set of active pitches:
- Chord quality and numeral tables (static grammar)
- Chord detection by exact interval templates
- Functional transition suggestions
- Interval edges between active pitches

Pipeline: Verticality snapshot → [Chord, Transitions, Interval edges]
"""

from .chord_table import (
    ChordQuality,
    FunctionalNumeral,
    QUALITIES,
    NUMERALS,
    get_quality,
    get_numeral,
    numerals_for_quality,
    chord_pitches,
    chord_spelling,
    chord_state,
)
from .chords import ChordDetector, DetectedChord, Transition
from .intervals import IntervalEdge, interval_edges, interval_vector

__all__ = [
    # Chord table
    "ChordQuality",
    "FunctionalNumeral",
    "QUALITIES",
    "NUMERALS",
    "get_quality",
    "get_numeral",
    "numerals_for_quality",
    "chord_pitches",
    "chord_spelling",
    "chord_state",
    # Chord detection
    "ChordDetector",
    "DetectedChord",
    "Transition",
    # Intervals
    "IntervalEdge",
    "interval_edges",
    "interval_vector",
]
