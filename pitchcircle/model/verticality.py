"""Verticality - the set of currently sounding pitch classes.

A Verticality owns one on/off cell per pitch class and a global playing
flag. All mutation goes through its methods so that, before any method
returns, the detected chord and transitions have been re-derived and
observers have been notified once.
"""

import logging
from typing import Callable, Dict, Iterable, List, Mapping, Optional, Sequence, Union

from ..core import PITCH_NAMES, PITCH_COUNT, name_of, index_of, is_pitch_name, mod
from ..inference import ChordDetector, DetectedChord, Transition
from .sound import SoundDevice, SilentDevice

logger = logging.getLogger(__name__)

Observer = Callable[["Verticality"], None]
StateLike = Union[Mapping[str, bool], Sequence[bool]]


class Verticality:
    """Mutable set of active pitch classes with derived chord analysis.

    Features:
    - Per-pitch set/toggle and full-state assignment
    - Transposition (rotation) and mirroring (inversion) of the whole set
    - Chord detection and transition suggestions kept in sync
    - Playback requests forwarded to a SoundDevice
    - Observer notification after each mutation
    """

    def __init__(
        self,
        pitches: Iterable[str] = (),
        detector: Optional[ChordDetector] = None,
        device: Optional[SoundDevice] = None,
    ):
        """
        Initialize Verticality.

        Args:
            pitches: Pitch names that start out on
            detector: Chord detector (default: ChordDetector())
            device: Sound device for playback (default: SilentDevice())

        Raises:
            UnknownPitchName: If an initial pitch is not in the alphabet
        """
        self.detector = detector or ChordDetector()
        self.device = device or SilentDevice()
        self.playing = False

        self._cells = [False] * PITCH_COUNT
        for name in pitches:
            self._cells[index_of(name)] = True

        self._observers: List[Observer] = []
        self._chord: Optional[DetectedChord] = None
        self._transitions: List[Transition] = []
        self._refresh()

    def __repr__(self) -> str:
        return f"Verticality({''.join(self.active())!r})"

    def __contains__(self, name) -> bool:
        return is_pitch_name(name) and self._cells[index_of(name)]

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get(self) -> Dict[str, bool]:
        """Get a copy of the state as a mapping of pitch name to on/off."""
        return {name: self._cells[i] for i, name in enumerate(PITCH_NAMES)}

    def is_on(self, name: str) -> bool:
        """Check whether a pitch is on (UnknownPitchName if not a pitch)."""
        return self._cells[index_of(name)]

    def active(self) -> List[str]:
        """Get the names of all active pitches, in index order."""
        return [name for i, name in enumerate(PITCH_NAMES) if self._cells[i]]

    @property
    def chord(self) -> Optional[DetectedChord]:
        """The chord detected in the current state, if any."""
        return self._chord

    @property
    def transitions(self) -> List[Transition]:
        """Chords that may follow the current one."""
        return list(self._transitions)

    # ------------------------------------------------------------------
    # Observers
    # ------------------------------------------------------------------

    def subscribe(self, callback: Observer) -> Callable[[], None]:
        """
        Register a callback invoked after every mutation.

        Returns:
            A function that removes the callback again
        """
        self._observers.append(callback)

        def unsubscribe():
            if callback in self._observers:
                self._observers.remove(callback)

        return unsubscribe

    def _refresh(self) -> None:
        self._chord, self._transitions = self.detector.analyze(self.get())

    def _changed(self) -> None:
        self._refresh()
        for callback in list(self._observers):
            callback(self)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def _assign(self, index: int, value: bool) -> None:
        """Set one cell and request sound for the transition if playing."""
        value = bool(value)
        if self._cells[index] == value:
            return
        self._cells[index] = value
        if self.playing:
            if value:
                self.device.start_sound(name_of(index))
            else:
                self.device.stop_sound(name_of(index))

    def _apply(self, cells: Sequence[bool]) -> None:
        # Index order keeps per-cell sound requests deterministic
        for index in range(PITCH_COUNT):
            self._assign(index, cells[index])
        self._changed()

    def set_pitch(self, name: str, value: bool) -> None:
        """
        Set one pitch on or off. Unknown names are ignored.

        Args:
            name: Pitch name
            value: True to turn the pitch on
        """
        if not is_pitch_name(name):
            logger.debug("Ignoring unknown pitch %r", name)
            return
        self._assign(index_of(name), value)
        self._changed()

    def set(self, state: StateLike) -> None:
        """
        Replace the whole state.

        Args:
            state: Mapping of pitch name to on/off (missing names are off),
                or a sequence of 12 booleans in index order

        Raises:
            UnknownPitchName: If the mapping contains an unknown name
            ValueError: If a sequence does not have 12 entries
        """
        if isinstance(state, Mapping):
            cells = [False] * PITCH_COUNT
            for name, value in state.items():
                cells[index_of(name)] = bool(value)
        else:
            cells = [bool(v) for v in state]
            if len(cells) != PITCH_COUNT:
                raise ValueError(
                    f"Expected {PITCH_COUNT} pitch states, got {len(cells)}"
                )
        self._apply(cells)

    def reset(self) -> None:
        """Turn every pitch off."""
        self._apply([False] * PITCH_COUNT)

    def toggle_pitch(self, name: str) -> bool:
        """
        Flip one pitch.

        Returns:
            The new state of the pitch

        Raises:
            UnknownPitchName: If name is not in the alphabet
        """
        index = index_of(name)
        self._assign(index, not self._cells[index])
        self._changed()
        return self._cells[index]

    def transpose(self, n: int) -> None:
        """Rotate the active set up by n semitones."""
        snapshot = list(self._cells)
        logger.debug("Transposing %s by %d", self, n)
        self._apply([snapshot[mod(p - n)] for p in range(PITCH_COUNT)])

    def mirror(self, center: str) -> None:
        """
        Invert the active set around an axis pitch.

        Raises:
            UnknownPitchName: If center is not in the alphabet
        """
        axis = 2 * index_of(center)
        snapshot = list(self._cells)
        logger.debug("Mirroring %s around %s", self, center)
        self._apply([snapshot[mod(axis - p)] for p in range(PITCH_COUNT)])

    def go_to(self, transition: Transition) -> None:
        """Replace the state with a suggested next chord."""
        logger.debug("Moving to %s", transition.label)
        self.set(transition.state)

    # ------------------------------------------------------------------
    # Playback
    # ------------------------------------------------------------------

    def play(self) -> None:
        """Start playback: every active pitch starts sounding.

        Does nothing if already playing.
        """
        if self.playing:
            return
        self.playing = True
        for name in self.active():
            self.device.start_sound(name)

    def stop(self) -> None:
        """Stop playback: every pitch is silenced, active or not."""
        self.playing = False
        for name in PITCH_NAMES:
            self.device.stop_sound(name)
