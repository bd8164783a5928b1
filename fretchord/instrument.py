"""String and instrument models: chromatic runs rooted at each open string."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Iterable, Iterator

from fretchord.errors import UnknownTuning
from fretchord.pitch import PitchClass
from fretchord.sequence import NoteSequence, build

# ── Fret range ───────────────────────────────────────────────────────────────
DEFAULT_FRET_RANGE: Final[int] = 20  # highest fret; a string spans frets 0..20
MIN_FRET_RANGE: Final[int] = 12  # at least one full octave per string


def make_string(open_note: PitchClass, fret_range: int = DEFAULT_FRET_RANGE) -> NoteSequence:
    """
    Model one string as the chromatic run ``open_note + 0 .. fret_range``.

    Index ``i`` of the returned sequence is the note sounded at fret ``i``
    (0 = open string).

    Raises:
        ValueError: If ``fret_range`` is below :data:`MIN_FRET_RANGE`.
    """
    if fret_range < MIN_FRET_RANGE:
        raise ValueError(f"fret_range must be at least {MIN_FRET_RANGE}, got {fret_range}.")
    return build(open_note, range(fret_range + 1), label=f"{open_note} string")


@dataclass(frozen=True)
class Instrument:
    """
    An ordered set of independently rooted strings.

    Attributes:
        strings: One chromatic run per string, in caller order (the shipped
                 tunings list the thickest string first).
        name:    Tuning name, e.g. "standard". Empty for ad-hoc tunings.
    """

    strings: tuple[NoteSequence, ...]
    name: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "strings", tuple(self.strings))

    def __len__(self) -> int:
        return len(self.strings)

    def __iter__(self) -> Iterator[NoteSequence]:
        return iter(self.strings)

    @property
    def open_notes(self) -> tuple[PitchClass, ...]:
        """Pitch class of each open string."""
        return tuple(string.root for string in self.strings)


def make_instrument(
    open_notes: Iterable[PitchClass],
    fret_range: int = DEFAULT_FRET_RANGE,
    name: str = "",
) -> Instrument:
    """Build one string per open note. Zero strings is allowed."""
    return Instrument(tuple(make_string(note, fret_range) for note in open_notes), name)


# ── Tunings ──────────────────────────────────────────────────────────────────

E, A, D, G, B = PitchClass.E, PitchClass.A, PitchClass.D, PitchClass.G, PitchClass.B

TUNINGS: Final[dict[str, tuple[PitchClass, ...]]] = {
    "standard": (E, A, D, G, B, E),
    "drop-d": (D, A, D, G, B, E),
    "dadgad": (D, A, D, G, A, D),
    "open-g": (D, G, D, G, B, D),
    "bass": (E, A, D, G),
    "ukulele": (G, PitchClass.C, E, A),
}

DEFAULT_TUNING: Final[str] = "standard"


def get_tuning(name: str) -> tuple[PitchClass, ...]:
    """
    Open notes of a registered tuning (case-insensitive).

    Raises:
        UnknownTuning: If ``name`` is not registered.
    """
    notes = TUNINGS.get(name.strip().lower())
    if notes is None:
        supported = ", ".join(TUNINGS)
        raise UnknownTuning(f"Unknown tuning '{name}'. Use one of: {supported}.")
    return notes


def parse_tuning(text: str) -> tuple[PitchClass, ...]:
    """Parse a comma- or space-separated list of open notes, e.g. ``"E,A,D,G,B,E"``."""
    names = [part for part in text.replace(",", " ").split() if part]
    return tuple(PitchClass.parse(part) for part in names)


def standard_tuning(fret_range: int = DEFAULT_FRET_RANGE) -> Instrument:
    """Six-string guitar in E A D G B E."""
    return make_instrument(TUNINGS["standard"], fret_range, name="standard")
