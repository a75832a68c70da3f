"""Interval edges between the active pitches of a verticality.

Each unordered pair of active pitches is reported once, directed so that
its normalized interval is positive, with that interval as its quality
(1 = semitone ... 6 = tritone). Renderers draw these as coloured lines.
"""

from dataclasses import dataclass
from typing import List, Mapping

import numpy as np

from ..core import PITCH_NAMES, INTERVAL_COLORS, interval_quality


@dataclass(frozen=True)
class IntervalEdge:
    """A line between two active pitches."""

    source: str
    target: str
    quality: int  # 1-6

    @property
    def color(self) -> str:
        return INTERVAL_COLORS[self.quality]


def interval_edges(state: Mapping[str, bool]) -> List[IntervalEdge]:
    """
    Get the interval edges between active pitches.

    Args:
        state: Mapping of pitch name to on/off

    Returns:
        Edges ordered by source then target pitch index
    """
    active = [name for name in PITCH_NAMES if state.get(name, False)]

    edges = []
    for source in active:
        for target in active:
            quality = interval_quality(source, target)
            if quality is not None:
                edges.append(IntervalEdge(source, target, quality))
    return edges


def interval_vector(state: Mapping[str, bool]) -> np.ndarray:
    """Count edges per interval quality; element 0 is quality 1."""
    vector = np.zeros(len(INTERVAL_COLORS), dtype=int)
    for edge in interval_edges(state):
        vector[edge.quality - 1] += 1
    return vector
