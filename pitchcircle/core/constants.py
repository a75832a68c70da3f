"""Global constants for pitchcircle."""

# Pitch names, in chromatic order (index 0 = c)
PITCH_NAMES = ["c", "n", "d", "s", "e", "f", "t", "g", "l", "a", "h", "b"]
PITCH_COUNT = len(PITCH_NAMES)

# Circle step intervals (semitones per angular slot)
FIFTHS_INTERVAL = 7
CHROMATIC_INTERVAL = 1

# Layout defaults
DEFAULT_CANVAS_SIZE = (600, 600)
DEFAULT_MARGIN = 20
DEFAULT_DOT_RATIO = 1 / 20  # dot radius as a fraction of circle radius

# Line colours by interval quality
INTERVAL_COLORS = {
    1: "yellow",
    2: "cyan",
    3: "green",
    4: "lime",
    5: "blue",
    6: "red",
}
