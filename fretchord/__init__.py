"""fretchord: twelve-tone note algebra, fretboard positions and chord diagrams."""

__version__ = "0.1.0"
