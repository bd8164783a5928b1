"""Exception hierarchy shared by every fretchord module."""

from __future__ import annotations


class FretchordError(Exception):
    """Base class for all fretchord errors."""


class IndexOutOfRange(FretchordError, IndexError):
    """A sequence position outside ``[0, size)`` was requested."""

    def __init__(self, index: int, size: int) -> None:
        super().__init__(f"Index {index} is out of range for a sequence of size {size}.")
        self.index = index
        self.size = size


class NoPlayablePosition(FretchordError):
    """
    No fret at or above ``minimum_fret`` produces a target note.

    Raised per string; ``string_index`` is filled in when the failure is
    reported as part of a whole-instrument fretting.
    """

    def __init__(self, minimum_fret: int, string_index: int | None = None) -> None:
        where = "" if string_index is None else f" on string {string_index}"
        super().__init__(f"No playable position at or above fret {minimum_fret}{where}.")
        self.minimum_fret = minimum_fret
        self.string_index = string_index


class MalformedFormula(FretchordError, ValueError):
    """An interval formula contains an offset that cannot be applied."""


class UnknownPitchClass(FretchordError, ValueError):
    """A note name could not be parsed."""


class UnknownFormula(FretchordError, ValueError):
    """No interval formula is registered under the requested name."""


class UnknownTuning(FretchordError, ValueError):
    """No tuning is registered under the requested name."""
