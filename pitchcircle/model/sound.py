"""Sound devices - hooks through which a verticality asks for sound."""

from abc import ABC, abstractmethod
from typing import List, Tuple


class SoundDevice(ABC):
    """Abstract base class for the audio collaborator."""

    @abstractmethod
    def start_sound(self, pitch: str) -> None:
        """
        Start sounding a pitch class.

        Args:
            pitch: Pitch name
        """
        pass

    @abstractmethod
    def stop_sound(self, pitch: str) -> None:
        """
        Stop sounding a pitch class. Stopping a silent pitch is allowed.

        Args:
            pitch: Pitch name
        """
        pass


class SilentDevice(SoundDevice):
    """Device that ignores all requests."""

    def start_sound(self, pitch: str) -> None:
        pass

    def stop_sound(self, pitch: str) -> None:
        pass


class RecordingDevice(SoundDevice):
    """Device that records requests as ("start" | "stop", pitch) events."""

    def __init__(self):
        self.events: List[Tuple[str, str]] = []
        self.sounding = set()

    def start_sound(self, pitch: str) -> None:
        self.events.append(("start", pitch))
        self.sounding.add(pitch)

    def stop_sound(self, pitch: str) -> None:
        self.events.append(("stop", pitch))
        self.sounding.discard(pitch)

    def clear(self) -> None:
        self.events.clear()
