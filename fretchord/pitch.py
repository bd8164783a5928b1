"""PitchClass: the twelve-element cyclic note domain."""

from __future__ import annotations

from enum import Enum, unique
from typing import Final

from fretchord.errors import UnknownPitchClass

SEMITONES_PER_OCTAVE: Final[int] = 12


@unique
class PitchClass(Enum):
    """
    One of the twelve chromatic pitch classes.

    Member values are the stable index (0-11) used for all modular
    arithmetic. Enumeration starts at A; the ordering carries no musical
    meaning beyond that index.
    """

    A = 0
    A_SHARP = 1
    B = 2
    C = 3
    C_SHARP = 4
    D = 5
    D_SHARP = 6
    E = 7
    F = 8
    F_SHARP = 9
    G = 10
    G_SHARP = 11

    @property
    def index(self) -> int:
        """Stable position in the 12-cycle (A = 0 ... G# = 11)."""
        return self.value

    @property
    def label(self) -> str:
        """ASCII note name, e.g. 'F#'."""
        return _LABELS[self.value]

    def __str__(self) -> str:
        return self.label

    @classmethod
    def from_index(cls, index: int) -> PitchClass:
        """Return the pitch class at ``index mod 12``."""
        return _BY_INDEX[index % SEMITONES_PER_OCTAVE]

    @classmethod
    def parse(cls, text: str) -> PitchClass:
        """
        Parse a note name such as ``"C"``, ``"c#"``, ``"F♯"`` or ``"Bb"``.

        Flat spellings are accepted and mapped onto the equivalent sharp
        member; output is always spelled with sharps.

        Raises:
            UnknownPitchClass: If ``text`` is not a note name.
        """
        cleaned = text.strip().replace("♯", "#").replace("♭", "b")
        if not cleaned:
            raise UnknownPitchClass(f"Unknown pitch class '{text}'.")
        letter = cleaned[0].upper()
        accidentals = cleaned[1:]
        if letter not in _NATURALS or any(ch not in "#b" for ch in accidentals):
            raise UnknownPitchClass(f"Unknown pitch class '{text}'.")
        shift = accidentals.count("#") - accidentals.count("b")
        return at_offset(_NATURALS[letter], shift)


_LABELS: Final[list[str]] = ["A", "A#", "B", "C", "C#", "D", "D#", "E", "F", "F#", "G", "G#"]

_BY_INDEX: Final[dict[int, PitchClass]] = {p.value: p for p in PitchClass}

_NATURALS: Final[dict[str, PitchClass]] = {
    "A": PitchClass.A,
    "B": PitchClass.B,
    "C": PitchClass.C,
    "D": PitchClass.D,
    "E": PitchClass.E,
    "F": PitchClass.F,
    "G": PitchClass.G,
}


def successor(note: PitchClass) -> PitchClass:
    """Next pitch class one semitone up, wrapping G# -> A."""
    return at_offset(note, 1)


def predecessor(note: PitchClass) -> PitchClass:
    """Previous pitch class one semitone down, wrapping A -> G#."""
    return at_offset(note, -1)


def at_offset(root: PitchClass, offset: int) -> PitchClass:
    """
    Return the pitch class ``offset`` semitones above ``root``.

    Equivalent to applying ``successor`` ``offset`` times, computed in O(1)
    as ``(index(root) + offset) mod 12``. Negative offsets move downwards.
    """
    return _BY_INDEX[(root.value + offset) % SEMITONES_PER_OCTAVE]


def semitone_distance(start: PitchClass, end: PitchClass) -> int:
    """Upward distance in semitones from ``start`` to ``end`` (0-11)."""
    return (end.value - start.value) % SEMITONES_PER_OCTAVE
