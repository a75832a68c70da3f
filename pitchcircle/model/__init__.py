"""Model layer - mutable pitch state and its audio hooks."""

from .sound import SoundDevice, SilentDevice, RecordingDevice
from .verticality import Verticality

__all__ = [
    "SoundDevice",
    "SilentDevice",
    "RecordingDevice",
    "Verticality",
]
