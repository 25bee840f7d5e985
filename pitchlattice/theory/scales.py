"""
pitchlattice.theory.scales
~~~~~~~~~~~~~~~~~~~~~~~~~~

Build scales from names such as ``'C major'`` or ``'Eb4 dorian'``.
"""

from __future__ import annotations

import re
from typing import List, Optional, Tuple

from pitchlattice.lattice.arithmetic import transpose
from pitchlattice.notation.codec import default_codec, format_interval, format_pitch
from pitchlattice.notation.inputs import NotationLike
from pitchlattice.theory.dictionary import scale_dictionary

SCALE_NAME_REGEX = re.compile(r"^([a-gA-G](?:#+|b+|x+)?-?[0-9]*)\s+(.+)$")


def tokenize_scale(name: str) -> Tuple[str, str]:
    """``'C4 major'`` → ``('C4', 'major')``; ``('', name)`` without a tonic."""
    name = name.strip()
    m = SCALE_NAME_REGEX.match(name)
    if m is None or default_codec.pitch(m.group(1)) is None:
        return "", name
    return m.group(1), m.group(2).strip()


def scale(name: str, tonic: Optional[NotationLike] = None) -> List[str]:
    """Intervals or notes of a scale.

    Parameters
    ----------
    name : str
        Scale name or alias, optionally led by a tonic (``'A minor'``), or a
        literal interval list.
    tonic : str or Pitch, optional
        Root to build on; overrides a tonic inside *name*.

    Returns
    -------
    list[str]
        Interval names without a tonic, notes with one, ``[]`` if unknown.

    Examples
    --------
    >>> scale('dorian')
    ['1P', '2M', '3m', '4P', '5P', '6M', '7m']
    >>> scale('A minor')
    ['A', 'B', 'C', 'D', 'E', 'F', 'G']
    >>> scale('major', 'Bb3')
    ['Bb3', 'C4', 'D4', 'Eb4', 'F4', 'G4', 'A4']
    """
    if tonic is None:
        root, kind = tokenize_scale(name)
        tonic = root or None
    else:
        kind = name
    intervals = scale_dictionary().intervals_for(kind)
    if intervals is None:
        return []
    if tonic is None:
        return [format_interval(i) for i in intervals]
    start = default_codec.pitch(tonic)
    if start is None:
        return []
    return [format_pitch(transpose(start, i)) for i in intervals]


def scale_notes(name: str) -> List[str]:
    """Notes of a scale named with its tonic; ``[]`` if there is none."""
    root, kind = tokenize_scale(name)
    return scale(kind, root) if root else []


def scale_names(aliases: bool = False) -> List[str]:
    """Known scale names, optionally including every alias."""
    return scale_dictionary().names(aliases)
