"""Unit tests for the text chord diagram renderer."""

import pytest

from fretchord.diagram_models import Diagram
from fretchord.diagram_renderers import DiagramRenderer, TextDiagramRenderer, parse_header
from fretchord.formulas import MAJOR_TRIAD, MINOR_TRIAD, IntervalFormula
from fretchord.instrument import make_instrument, standard_tuning
from fretchord.pitch import PitchClass
from fretchord.position_finder import FrettingResult, instrument_fretting
from fretchord.sequence import build

E_MAJOR_OPEN = """\
0 2 2 1 0 0
===========
o | | | o o
| | | o | |
| o o | | |
| | | | | |
| | | | | |
| | | | | |

"""


def _open_e_major() -> FrettingResult:
    return instrument_fretting(standard_tuning(), build(PitchClass.E, MAJOR_TRIAD), 0)


def test_renderer_is_a_diagram_renderer() -> None:
    assert isinstance(TextDiagramRenderer(), DiagramRenderer)


def test_open_e_major_text_is_exact() -> None:
    diagram = TextDiagramRenderer().render(_open_e_major())
    assert diagram.text == E_MAJOR_OPEN
    assert str(diagram) == E_MAJOR_OPEN


def test_header_and_divider() -> None:
    diagram = TextDiagramRenderer().render(_open_e_major())
    assert diagram.header == "0 2 2 1 0 0"
    assert diagram.divider == "=" * 11


def test_window_defaults_to_minimum_fret_plus_strings() -> None:
    result = instrument_fretting(standard_tuning(), build(PitchClass.E, MAJOR_TRIAD), 7)
    diagram = TextDiagramRenderer().render(result)
    assert len(diagram.rows) == 13
    assert diagram.rows[7] == "o o | | | o"
    assert diagram.rows[9] == "| | o o o |"
    assert diagram.rows[12] == "| | | | | |"


def test_caller_supplied_window() -> None:
    diagram = TextDiagramRenderer().render(_open_e_major(), fret_window=3)
    assert diagram.rows == ("o | | | o o", "| | | o | |", "| o o | | |")


def test_zero_window_has_no_rows() -> None:
    diagram = TextDiagramRenderer().render(_open_e_major(), fret_window=0)
    assert diagram.rows == ()
    assert diagram.text == "0 2 2 1 0 0\n===========\n\n"


def test_negative_window_rejected() -> None:
    with pytest.raises(ValueError):
        TextDiagramRenderer().render(_open_e_major(), fret_window=-1)


def test_unplayable_string_is_muted_and_never_pressed() -> None:
    diagram = TextDiagramRenderer().render(FrettingResult((1, None), 0), fret_window=2)
    assert diagram.header == "1 x"
    assert diagram.rows == ("| |", "o |")


def test_text_ends_with_blank_line() -> None:
    text = TextDiagramRenderer().render(_open_e_major()).text
    assert text.endswith("\n\n")
    assert not text.endswith("\n\n\n")


def test_rendering_is_deterministic() -> None:
    renderer = TextDiagramRenderer()
    assert renderer.render(_open_e_major()).text == renderer.render(_open_e_major()).text


def test_diagram_lines() -> None:
    diagram = Diagram(header="0", divider="=", rows=("o",))
    assert diagram.lines == ["0", "=", "o"]


@pytest.mark.parametrize(
    "root, formula, minimum_fret",
    [
        (PitchClass.E, MAJOR_TRIAD, 0),
        (PitchClass.E, MAJOR_TRIAD, 7),
        (PitchClass.A, MINOR_TRIAD, 5),
        (PitchClass.C, MAJOR_TRIAD, 19),
    ],
)
def test_header_round_trip(root: PitchClass, formula: IntervalFormula, minimum_fret: int) -> None:
    result = instrument_fretting(standard_tuning(), build(root, formula), minimum_fret)
    text = TextDiagramRenderer().render(result).text
    assert parse_header(text) == result.frets


def test_header_round_trip_zero_strings() -> None:
    result = instrument_fretting(make_instrument([]), build(PitchClass.E, MAJOR_TRIAD), 0)
    assert parse_header(TextDiagramRenderer().render(result).text) == ()


def test_parse_header_rejects_garbage() -> None:
    with pytest.raises(ValueError):
        parse_header("0 2 ? 1\n===\n")


def test_default_window_reaches_highest_fret_on_bass() -> None:
    bass = make_instrument([PitchClass.E, PitchClass.A, PitchClass.D, PitchClass.G])
    result = instrument_fretting(bass, build(PitchClass.F_SHARP, MAJOR_TRIAD), 0)
    assert result.frets == (2, 1, 4, 3)
    diagram = TextDiagramRenderer().render(result)
    assert len(diagram.rows) == 5
    assert diagram.rows[4] == "| | o |"


@pytest.mark.parametrize(
    "open_notes, root, minimum_fret",
    [
        ((PitchClass.E, PitchClass.A, PitchClass.D, PitchClass.G), PitchClass.F_SHARP, 0),
        ((PitchClass.E, PitchClass.A, PitchClass.D, PitchClass.G, PitchClass.B, PitchClass.E), PitchClass.E, 0),
        ((PitchClass.E, PitchClass.A, PitchClass.D, PitchClass.G, PitchClass.B, PitchClass.E), PitchClass.C, 5),
        ((PitchClass.G, PitchClass.C), PitchClass.B, 3),
    ],
)
def test_every_playable_string_is_marked_once(
    open_notes: tuple[PitchClass, ...], root: PitchClass, minimum_fret: int
) -> None:
    result = instrument_fretting(make_instrument(open_notes), build(root, MAJOR_TRIAD), minimum_fret)
    diagram = TextDiagramRenderer().render(result)
    for string_index, fret in enumerate(result.frets):
        column = [row.split(" ")[string_index] for row in diagram.rows]
        assert column.count("o") == (0 if fret is None else 1)


def test_reference_windows_are_unchanged() -> None:
    renderer = TextDiagramRenderer()
    triad = build(PitchClass.E, MAJOR_TRIAD)
    assert len(renderer.render(instrument_fretting(standard_tuning(), triad, 0)).rows) == 6
    assert len(renderer.render(instrument_fretting(standard_tuning(), triad, 7)).rows) == 13
