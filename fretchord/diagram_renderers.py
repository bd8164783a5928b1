"""Renderer implementations for chord diagram output."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Final

from fretchord.diagram_models import Diagram
from fretchord.position_finder import FrettingResult


class DiagramRenderer(ABC):
    """Abstract chord diagram renderer."""

    @abstractmethod
    def render(self, fretting: FrettingResult, fret_window: int | None = None) -> Diagram:
        """Render a fretting into a diagram."""


class TextDiagramRenderer(DiagramRenderer):
    """
    Render a fretting as a fixed-width ASCII grid.

    Layout
    ------
    ::

        0 2 2 1 0 0      <- header: fret per string, "x" if unplayable
        ===========      <- divider, DIVIDER_WIDTH wide
        o | | | o o      <- one row per fret, starting at fret 0
        | | | o | |
        | o o | | |
        ...

    The number of rows defaults to ``minimum_fret + number_of_strings``,
    widened to ``max_fret + 1`` when a chosen fret would fall below the grid.
    """

    DIVIDER_WIDTH: Final[int] = 11
    PRESSED: Final[str] = "o"
    OPEN: Final[str] = "|"
    MUTED: Final[str] = "x"

    def render(self, fretting: FrettingResult, fret_window: int | None = None) -> Diagram:
        window = self.default_window(fretting) if fret_window is None else fret_window
        if window < 0:
            raise ValueError(f"fret_window must be non-negative, got {window}.")

        return Diagram(
            header=self.render_header(fretting),
            divider="=" * self.DIVIDER_WIDTH,
            rows=tuple(self.render_row(fretting, fret) for fret in range(window)),
        )

    def default_window(self, fretting: FrettingResult) -> int:
        """Row count covering both minimum_fret + number_of_strings and the highest chosen fret."""
        highest = fretting.max_fret
        reach = 0 if highest is None else highest + 1
        return max(fretting.minimum_fret + len(fretting.frets), reach)

    def render_header(self, fretting: FrettingResult) -> str:
        return " ".join(self.MUTED if fret is None else str(fret) for fret in fretting.frets)

    def render_row(self, fretting: FrettingResult, row_fret: int) -> str:
        return " ".join(self.PRESSED if fret == row_fret else self.OPEN for fret in fretting.frets)


def parse_header(diagram_text: str) -> tuple[int | None, ...]:
    """
    Recover the per-string frets from the header of a rendered diagram.

    Raises:
        ValueError: If the header contains a token that is neither a fret
                    number nor the muted marker.
    """
    lines = diagram_text.splitlines()
    header = lines[0] if lines else ""
    frets: list[int | None] = []
    for token in header.split():
        if token == TextDiagramRenderer.MUTED:
            frets.append(None)
        elif token.isdigit():
            frets.append(int(token))
        else:
            raise ValueError(f"Unexpected token '{token}' in diagram header.")
    return tuple(frets)
