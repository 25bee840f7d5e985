"""pitchlattice.data — Packaged chord and scale pattern tables."""

from pitchlattice.data.loader import RawTable, load_table

__all__: list[str] = [
    "RawTable",
    "load_table",
]
