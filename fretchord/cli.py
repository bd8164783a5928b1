"""fretchord CLI entry point."""

import logging
import sys
from typing import Any, Callable

import click

from fretchord import __version__
from fretchord.diagram_renderers import TextDiagramRenderer
from fretchord.errors import FretchordError
from fretchord.formulas import FORMULAS, get_formula
from fretchord.instrument import (
    DEFAULT_FRET_RANGE,
    DEFAULT_TUNING,
    MIN_FRET_RANGE,
    TUNINGS,
    Instrument,
    get_tuning,
    make_instrument,
    parse_tuning,
)
from fretchord.pitch import PitchClass
from fretchord.position_finder import instrument_fretting, positions_on_string
from fretchord.sequence import NoteSequence, build

logger = logging.getLogger(__name__)


def _parse_root(value: str) -> PitchClass:
    try:
        return PitchClass.parse(value)
    except FretchordError as exc:
        raise click.BadParameter(str(exc), param_hint="ROOT") from exc


def _build_target(root: str, formula: str) -> NoteSequence:
    pitch = _parse_root(root)
    try:
        return build(pitch, get_formula(formula))
    except FretchordError as exc:
        raise click.BadParameter(str(exc), param_hint="FORMULA") from exc


def _build_instrument(tuning: str, strings: str | None, fret_range: int) -> Instrument:
    """Resolve --strings (custom open notes) or else --tuning into an Instrument."""
    try:
        if strings is not None:
            return make_instrument(parse_tuning(strings), fret_range)
        return make_instrument(get_tuning(tuning), fret_range, name=tuning.lower())
    except FretchordError as exc:
        raise click.BadParameter(str(exc), param_hint="--strings/--tuning") from exc


# ── Shared options ─────────────────────────────────────────────────────────────

_instrument_options = [
    click.option(
        "--tuning",
        "-t",
        type=click.Choice(list(TUNINGS), case_sensitive=False),
        default=DEFAULT_TUNING,
        show_default=True,
        help="Named tuning of the instrument.",
    ),
    click.option(
        "--strings",
        default=None,
        metavar="NOTES",
        help='Custom open notes, thickest first, e.g. "E,A,D,G,B,E". Overrides --tuning.',
    ),
    click.option(
        "--fret-range",
        type=click.IntRange(MIN_FRET_RANGE, None),
        default=DEFAULT_FRET_RANGE,
        show_default=True,
        help="Highest fret on every string.",
    ),
]


def _with_instrument_options(func: Callable[..., Any]) -> Callable[..., Any]:
    for option in reversed(_instrument_options):
        func = option(func)
    return func


# ── CLI group ──────────────────────────────────────────────────────────────────

@click.group(context_settings={"help_option_names": ["-h", "--help"], "auto_envvar_prefix": "FRETCHORD"})
@click.version_option(version=__version__, prog_name="fretchord")
@click.option("--verbose", "-v", is_flag=True, help="Log per-string search details to stderr.")
def main(verbose: bool) -> None:
    """fretchord — scales, chords and fretboard diagrams for stringed instruments."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


# ── chord subcommand ───────────────────────────────────────────────────────────

@main.command()
@click.argument("root")
@click.argument("formula")
@_with_instrument_options
@click.option(
    "--min-fret",
    type=click.IntRange(0, None),
    default=0,
    show_default=True,
    help="Lowest fret the fingering may use (barre position).",
)
@click.option(
    "--window",
    type=click.IntRange(0, None),
    default=None,
    help="Number of fret rows to draw. Defaults to min-fret + number of strings, or highest fret + 1 if larger.",
)
@click.option("--strict", is_flag=True, help="Exit with an error if any string is unplayable.")
def chord(
    root: str,
    formula: str,
    tuning: str,
    strings: str | None,
    fret_range: int,
    min_fret: int,
    window: int | None,
    strict: bool,
) -> None:
    """
    Print a chord diagram for ROOT and FORMULA.

    \b
    Examples:
      fretchord chord E major-triad
      fretchord chord E major-triad --min-fret 7
      fretchord chord D 6/9 --tuning drop-d
    """
    target = _build_target(root, formula)
    instrument = _build_instrument(tuning, strings, fret_range)
    logger.debug("Target %s (%s) on %d string(s)", target.label, target, len(instrument))

    fretting = instrument_fretting(instrument, target, min_fret)
    click.echo(TextDiagramRenderer().render(fretting, window).text, nl=False)

    if not fretting.playable:
        unplayable = ", ".join(str(index) for index in fretting.unplayable_strings)
        click.echo(f"  WARNING: no playable fret on string(s) {unplayable}.", err=True)
        if strict:
            sys.exit(1)


# ── scale subcommand ───────────────────────────────────────────────────────────

@main.command()
@click.argument("root")
@click.argument("formula")
@_with_instrument_options
def scale(root: str, formula: str, tuning: str, strings: str | None, fret_range: int) -> None:
    """
    List the notes of ROOT FORMULA and every fret that sounds one of them.

    \b
    Examples:
      fretchord scale E major
      fretchord scale A minor-pentatonic --tuning bass
    """
    target = _build_target(root, formula)
    instrument = _build_instrument(tuning, strings, fret_range)

    click.echo(f"{target.label}: {target}")
    for string in instrument:
        frets = " ".join(str(fret) for fret in positions_on_string(string, target))
        click.echo(f"  {str(string.root):<2} | {frets}")


# ── listing subcommands ────────────────────────────────────────────────────────

@main.command()
def formulas() -> None:
    """List the registered interval formulas."""
    for key, formula in FORMULAS.items():
        offsets = ",".join(str(offset) for offset in formula.offsets)
        click.echo(f"{key:<18} {formula.name:<24} {offsets}")


@main.command()
def tunings() -> None:
    """List the registered tunings."""
    for name, notes in TUNINGS.items():
        click.echo(f"{name:<10} {' '.join(str(note) for note in notes)}")
