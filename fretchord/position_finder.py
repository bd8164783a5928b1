"""PositionFinder: which frets on which strings sound a target set of notes."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Sequence

import numpy as np

from fretchord.errors import NoPlayablePosition
from fretchord.instrument import Instrument
from fretchord.pitch import PitchClass
from fretchord.sequence import NoteSequence

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FrettingResult:
    """
    One fret per string for a target chord or scale.

    Attributes:
        frets:        Fret index per string in instrument order; ``None`` marks
                      a string with no playable position.
        minimum_fret: Lowest fret the search was allowed to use.
        errors:       One :class:`NoPlayablePosition` per ``None`` entry, each
                      tagged with its string index.
    """

    frets: tuple[int | None, ...]
    minimum_fret: int = 0
    errors: tuple[NoPlayablePosition, ...] = field(default=(), compare=False)

    def __len__(self) -> int:
        return len(self.frets)

    @property
    def playable(self) -> bool:
        """True when every string has a fret."""
        return all(fret is not None for fret in self.frets)

    @property
    def unplayable_strings(self) -> list[int]:
        """Indices of strings without a playable position."""
        return [index for index, fret in enumerate(self.frets) if fret is None]

    @property
    def max_fret(self) -> int | None:
        """Highest fret used, or ``None`` when no string is playable."""
        used = [fret for fret in self.frets if fret is not None]
        return max(used) if used else None

    def raise_for_unplayable(self) -> None:
        """Raise :class:`NoPlayablePosition` for the first string without a fret, if any."""
        unplayable = self.unplayable_strings
        if not unplayable:
            return
        first = unplayable[0]
        for error in self.errors:
            if error.string_index == first:
                raise error
        raise NoPlayablePosition(self.minimum_fret, string_index=first)


def _note_indices(notes: Iterable[PitchClass]) -> np.ndarray:
    return np.fromiter((note.index for note in notes), dtype=np.int64)


def positions_on_string(string: NoteSequence, target: NoteSequence | Iterable[PitchClass]) -> list[int]:
    """
    Fret indices of ``string`` whose note belongs to ``target``, ascending.

    Only indices in ``[0, len(string))`` are considered. An empty ``target``
    matches every fret, so the full index range is returned.
    """
    string_notes = _note_indices(string)
    target_notes = _note_indices(target)
    if target_notes.size == 0:
        return list(range(len(string_notes)))
    mask = np.isin(string_notes, target_notes)
    return [int(fret) for fret in np.flatnonzero(mask)]


def lowest_position_at_or_above(positions: Sequence[int], minimum_fret: int) -> int:
    """
    Smallest element of ``positions`` that is ``>= minimum_fret``.

    Raises:
        NoPlayablePosition: If no element qualifies.
    """
    candidates = [fret for fret in positions if fret >= minimum_fret]
    if not candidates:
        raise NoPlayablePosition(minimum_fret)
    return min(candidates)


def instrument_fretting(
    instrument: Instrument | Iterable[NoteSequence],
    target: NoteSequence | Iterable[PitchClass],
    minimum_fret: int = 0,
) -> FrettingResult:
    """
    Lowest matching fret at or above ``minimum_fret`` on every string.

    A string that cannot reach any target note is reported as ``None`` in
    ``frets`` together with a tagged :class:`NoPlayablePosition`; the rest of
    the instrument is still solved. An empty ``target`` yields
    ``minimum_fret`` on every string long enough to reach it.

    Raises:
        ValueError: If ``minimum_fret`` is negative.
    """
    if minimum_fret < 0:
        raise ValueError(f"minimum_fret must be non-negative, got {minimum_fret}.")

    target_notes = tuple(target)
    frets: list[int | None] = []
    errors: list[NoPlayablePosition] = []

    for string_index, string in enumerate(instrument):
        positions = positions_on_string(string, target_notes)
        try:
            fret: int | None = lowest_position_at_or_above(positions, minimum_fret)
        except NoPlayablePosition:
            logger.debug("String %d (%s): nothing playable at or above fret %d",
                         string_index, string.root, minimum_fret)
            errors.append(NoPlayablePosition(minimum_fret, string_index=string_index))
            fret = None
        else:
            logger.debug("String %d (%s): fret %d", string_index, string.root, fret)
        frets.append(fret)

    return FrettingResult(tuple(frets), minimum_fret, tuple(errors))
