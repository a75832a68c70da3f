"""Geometry layer - circular arrangements of the pitch classes."""

from .circle import CircleLayout, LayoutConfig, DragRotator, PlacedEdge, SLOT_ANGLE

__all__ = [
    "CircleLayout",
    "LayoutConfig",
    "DragRotator",
    "PlacedEdge",
    "SLOT_ANGLE",
]
