"""Circle layouts - place the pitch classes around a circle.

A layout steps a fixed number of semitones per angular slot:
- interval 7 gives the circle of fifths
- interval 1 gives the chromatic circle

Rotating the circle by one slot transposes the verticality by the step
interval, so the same gesture has different musical effects on
differently stepped circles.
"""

import math
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

import numpy as np

from ..core import (
    PITCH_NAMES,
    PITCH_COUNT,
    FIFTHS_INTERVAL,
    CHROMATIC_INTERVAL,
    index_of,
    name_of,
)
from ..core.constants import DEFAULT_CANVAS_SIZE, DEFAULT_MARGIN, DEFAULT_DOT_RATIO
from ..inference import IntervalEdge, interval_edges
from ..model import Verticality

SLOT_ANGLE = 2 * math.pi / PITCH_COUNT

Point = Tuple[float, float]


def _default_center() -> Tuple[float, float]:
    width, _ = DEFAULT_CANVAS_SIZE
    return (width / 2, width / 2)


def _default_radius() -> float:
    width, height = DEFAULT_CANVAS_SIZE
    return min(width / 2, height / 2) - DEFAULT_MARGIN


@dataclass
class LayoutConfig:
    """Configuration for a circle layout.

    Attributes:
        interval: Semitones advanced per angular slot (default: 7)
        center: Circle centre in canvas coordinates
        radius: Circle radius (default: derived from the canvas size)
        dot_ratio: Pitch dot radius as a fraction of the circle radius
    """

    interval: int = FIFTHS_INTERVAL
    center: Tuple[float, float] = field(default_factory=_default_center)
    radius: float = field(default_factory=_default_radius)
    dot_ratio: float = DEFAULT_DOT_RATIO

    @classmethod
    def for_canvas(
        cls,
        width: float,
        height: float,
        interval: int = FIFTHS_INTERVAL,
        margin: float = DEFAULT_MARGIN,
    ) -> "LayoutConfig":
        """Centre a circle on a canvas, leaving a margin at the short side."""
        return cls(
            interval=interval,
            center=(width / 2, height / 2),
            radius=min(width / 2, height / 2) - margin,
        )


@dataclass(frozen=True)
class PlacedEdge:
    """An interval edge with the coordinates of both ends."""

    edge: IntervalEdge
    start: Point
    end: Point


class CircleLayout:
    """Geometry of one circle of pitch dots bound to a verticality."""

    def __init__(self, verticality: Verticality, config: Optional[LayoutConfig] = None):
        """
        Initialize CircleLayout.

        Args:
            verticality: The pitch state this circle shows and rotates
            config: Layout configuration (default: circle of fifths)
        """
        self.verticality = verticality
        self.config = config or LayoutConfig()

    @classmethod
    def circle_of_fifths(cls, verticality: Verticality, **kwargs) -> "CircleLayout":
        return cls(verticality, LayoutConfig(interval=FIFTHS_INTERVAL, **kwargs))

    @classmethod
    def chromatic(cls, verticality: Verticality, **kwargs) -> "CircleLayout":
        return cls(verticality, LayoutConfig(interval=CHROMATIC_INTERVAL, **kwargs))

    @property
    def interval(self) -> int:
        return self.config.interval

    @property
    def center(self) -> np.ndarray:
        return np.asarray(self.config.center, dtype=float)

    @property
    def radius(self) -> float:
        return self.config.radius

    @property
    def dot_radius(self) -> float:
        return self.config.radius * self.config.dot_ratio

    def angle(self, name: str) -> float:
        """Angle of a pitch in radians (unreduced)."""
        return index_of(name) * self.interval * SLOT_ANGLE

    def position(self, name: str) -> Point:
        """Canvas coordinates of a pitch dot."""
        angle = self.angle(name)
        x, y = self.center + self.radius * np.array([np.cos(angle), np.sin(angle)])
        return (float(x), float(y))

    def positions(self) -> Dict[str, Point]:
        """Coordinates of every pitch dot, in index order."""
        return {name: self.position(name) for name in PITCH_NAMES}

    def slots(self) -> List[str]:
        """Pitch names in angular order, starting at angle 0."""
        return [name_of(slot * self.interval) for slot in range(PITCH_COUNT)]

    def pitch_at(self, point: Point) -> Optional[str]:
        """
        Find the pitch whose dot contains a point.

        Returns:
            The pitch name, or None if the point is outside every dot
        """
        target = np.asarray(point, dtype=float)
        for name in PITCH_NAMES:
            if np.linalg.norm(np.asarray(self.position(name)) - target) < self.dot_radius:
                return name
        return None

    def click(self, point: Point) -> Optional[str]:
        """Toggle the pitch under a point, returning its name if any."""
        name = self.pitch_at(point)
        if name is not None:
            self.verticality.toggle_pitch(name)
        return name

    def rotate(self, n: int) -> None:
        """Rotate the circle by n slots, transposing by n * interval."""
        self.verticality.transpose(self.interval * n)

    def edges(self) -> List[PlacedEdge]:
        """Interval edges between active pitches, with dot coordinates."""
        return [
            PlacedEdge(edge, self.position(edge.source), self.position(edge.target))
            for edge in interval_edges(self.verticality.get())
        ]


class DragRotator:
    """Turn continuous pointer drags into discrete circle rotations.

    The angular delta of the pointer around the circle centre is
    accumulated; each time it covers whole slots, the layout is rotated
    by that many slots and the remainder is carried forward.
    """

    def __init__(self, layout: CircleLayout):
        self.layout = layout
        self._last_angle: Optional[float] = None
        self._accumulated = 0.0

    @property
    def dragging(self) -> bool:
        return self._last_angle is not None

    def _angle(self, point: Point) -> float:
        dx, dy = np.asarray(point, dtype=float) - self.layout.center
        return math.atan2(dy, dx)

    def begin(self, point: Point) -> None:
        """Start a drag at a pointer position."""
        self._last_angle = self._angle(point)
        self._accumulated = 0.0

    def move(self, point: Point) -> int:
        """
        Continue a drag.

        Returns:
            Number of slots rotated by this move (0 if none)
        """
        if self._last_angle is None:
            return 0

        angle = self._angle(point)
        delta = angle - self._last_angle
        # Unwrap across the -pi/pi seam
        if delta > math.pi:
            delta -= 2 * math.pi
        elif delta < -math.pi:
            delta += 2 * math.pi
        self._last_angle = angle
        self._accumulated += delta

        steps = int(self._accumulated / SLOT_ANGLE)
        if steps != 0:
            self.layout.rotate(steps)
            self._accumulated -= steps * SLOT_ANGLE
        return steps

    def end(self) -> None:
        """Finish the drag, discarding any partial slot."""
        self._last_angle = None
        self._accumulated = 0.0
