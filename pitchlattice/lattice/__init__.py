"""pitchlattice.lattice — Coordinate types and integer arithmetic."""

from pitchlattice.lattice.arithmetic import (
    add_intervals,
    enharmonics,
    fifths_between,
    height,
    interval_between,
    invert_interval,
    respell,
    semitones_between,
    simplify_enharmonic,
    simplify_interval,
    subtract_intervals,
    transpose,
    transpose_fifths,
)
from pitchlattice.lattice.coords import Interval, Pitch, decompose

__all__: list[str] = [
    "Pitch",
    "Interval",
    "decompose",
    "transpose",
    "interval_between",
    "add_intervals",
    "subtract_intervals",
    "height",
    "semitones_between",
    "fifths_between",
    "transpose_fifths",
    "simplify_interval",
    "invert_interval",
    "respell",
    "enharmonics",
    "simplify_enharmonic",
]
