"""
pitchlattice.data.loader
~~~~~~~~~~~~~~~~~~~~~~~~

Reads the packaged pattern tables.

Each table is a JSON object mapping a canonical name to
``[interval-list text, [alias, ...]]``::

    {"maj7": ["1P 3M 5P 7M", ["M7", "Maj7"]]}

The alias list may be omitted.
"""

from __future__ import annotations

import json
import logging
from importlib import resources
from typing import Dict, List, Tuple

logger = logging.getLogger(__name__)

RawTable = Dict[str, Tuple[str, List[str]]]


def load_table(filename: str) -> RawTable:
    """Load a pattern table shipped inside :mod:`pitchlattice.data`.

    Parameters
    ----------
    filename : str
        File name inside the package, e.g. ``'chords.json'``.

    Returns
    -------
    dict[str, tuple[str, list[str]]]
        ``name -> (interval text, aliases)`` in file order.

    Raises
    ------
    FileNotFoundError
        If the file is not part of the package.
    ValueError
        If an entry is not a ``[text]`` or ``[text, [aliases]]`` pair.
    """
    text = resources.files(__package__).joinpath(filename).read_text(encoding="utf-8")
    raw = json.loads(text)
    table: RawTable = {}
    for name, value in raw.items():
        if not isinstance(value, list) or not 1 <= len(value) <= 2:
            raise ValueError(f"{filename}: bad entry for {name!r}: {value!r}")
        intervals = value[0]
        aliases = list(value[1]) if len(value) == 2 else []
        table[name] = (intervals, aliases)
    logger.debug("read %d entries from %s", len(table), filename)
    return table
