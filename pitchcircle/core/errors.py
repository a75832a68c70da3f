"""Exceptions raised by pitchcircle."""


class PitchCircleError(Exception):
    """Base class for pitchcircle errors."""


class UnknownPitchName(PitchCircleError, ValueError):
    """A pitch name is not part of the 12-symbol alphabet."""

    def __init__(self, name):
        self.name = name
        super().__init__(f"Unknown pitch name: {name!r}")
