"""pitchcircle - Pitch-set model for chord detection and circle transforms.

Architecture Layers:
    1. core/      - Pitch alphabet, interval arithmetic, errors, constants
    2. inference/ - Chord table, chord detection, transitions, interval edges
    3. model/     - Verticality (mutable pitch state) and sound hooks
    4. geometry/  - Circle layouts, hit testing and drag rotation
"""

__version__ = "0.3.0"

# Core
from .core import (
    PITCH_NAMES,
    PitchCircleError,
    UnknownPitchName,
    name_of,
    index_of,
    normalize,
    mod,
    transpose,
)

# Inference layer
from .inference import (
    ChordDetector,
    DetectedChord,
    Transition,
    chord_spelling,
    interval_edges,
)

# Model layer
from .model import Verticality, SoundDevice, SilentDevice, RecordingDevice

# Geometry layer
from .geometry import CircleLayout, LayoutConfig, DragRotator

__all__ = [
    # Core
    "PITCH_NAMES",
    "PitchCircleError",
    "UnknownPitchName",
    "name_of",
    "index_of",
    "normalize",
    "mod",
    "transpose",
    # Inference
    "ChordDetector",
    "DetectedChord",
    "Transition",
    "chord_spelling",
    "interval_edges",
    # Model
    "Verticality",
    "SoundDevice",
    "SilentDevice",
    "RecordingDevice",
    # Geometry
    "CircleLayout",
    "LayoutConfig",
    "DragRotator",
]
