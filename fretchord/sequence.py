"""NoteSequence: ordered, immutable runs of pitch classes (scales and chords)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Iterator

from fretchord.errors import IndexOutOfRange
from fretchord.formulas import IntervalFormula
from fretchord.pitch import PitchClass, at_offset, semitone_distance


@dataclass(frozen=True)
class NoteSequence:
    """
    An ordered list of pitch classes built from a root and a formula.

    A chord is simply a short sequence. The first element is the root;
    duplicates (octave repetitions) are kept. Equality compares notes only,
    so a relabelled sequence still equals the original.

    Attributes:
        notes: The pitch classes in construction order.
        label: Optional description, e.g. "E major triad".
    """

    notes: tuple[PitchClass, ...]
    label: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "notes", tuple(self.notes))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NoteSequence):
            return NotImplemented
        return self.notes == other.notes

    def __hash__(self) -> int:
        return hash(self.notes)

    def __len__(self) -> int:
        return len(self.notes)

    def __iter__(self) -> Iterator[PitchClass]:
        return iter(self.notes)

    def __contains__(self, note: object) -> bool:
        return note in self.notes

    def __str__(self) -> str:
        return " ".join(str(note) for note in self.notes)

    @property
    def root(self) -> PitchClass:
        """First element of the sequence."""
        return self.at(0)

    def at(self, index: int) -> PitchClass:
        """
        Element at ``index``.

        Raises:
            IndexOutOfRange: If ``index < 0`` or ``index >= len(self)``.
        """
        if index < 0 or index >= len(self.notes):
            raise IndexOutOfRange(index, len(self.notes))
        return self.notes[index]

    def map(self, transform: Callable[[PitchClass], PitchClass]) -> NoteSequence:
        """Apply ``transform`` to every note, keeping order and length."""
        return NoteSequence(tuple(transform(note) for note in self.notes), self.label)

    def transpose(self, from_root: PitchClass, to_root: PitchClass) -> NoteSequence:
        """Shift every note by the upward distance from ``from_root`` to ``to_root``."""
        shift = semitone_distance(from_root, to_root)
        if shift == 0:
            return self
        return self.map(lambda note: at_offset(note, shift))


def build(root: PitchClass, formula: IntervalFormula | Iterable[int], label: str | None = None) -> NoteSequence:
    """
    Apply a formula's offsets (mod 12) to ``root``.

    ``formula`` may be an :class:`IntervalFormula` or a bare iterable of
    offsets, which is validated as an anonymous formula.
    """
    if not isinstance(formula, IntervalFormula):
        formula = IntervalFormula.of(formula)
    if label is None:
        label = f"{root} {formula.name}" if formula.name else str(root)
    return NoteSequence(tuple(at_offset(root, offset) for offset in formula.offsets), label)


def size(seq: NoteSequence) -> int:
    """Number of notes, duplicates included."""
    return len(seq)


def contains(seq: NoteSequence, note: PitchClass) -> bool:
    """True if ``note`` occurs anywhere in ``seq``."""
    return note in seq


def at(seq: NoteSequence, index: int) -> PitchClass:
    """Element of ``seq`` at ``index``; see :meth:`NoteSequence.at`."""
    return seq.at(index)


def transpose(seq: NoteSequence, from_root: PitchClass, to_root: PitchClass) -> NoteSequence:
    """Transposed copy of ``seq``; the identity when the roots match."""
    return seq.transpose(from_root, to_root)


def map_notes(seq: NoteSequence, transform: Callable[[PitchClass], PitchClass]) -> NoteSequence:
    """Element-wise transform of ``seq``."""
    return seq.map(transform)
