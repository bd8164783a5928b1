"""Data models for chord diagram rendering outputs."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Diagram:
    """A rendered fret grid: header line, divider line and one row per fret."""

    header: str
    divider: str
    rows: tuple[str, ...]

    @property
    def lines(self) -> list[str]:
        return [self.header, self.divider, *self.rows]

    @property
    def text(self) -> str:
        """Exact text form, ending with a trailing blank line."""
        return "\n".join(self.lines) + "\n\n"

    def __str__(self) -> str:
        return self.text
