"""
pitchlattice.theory.chords
~~~~~~~~~~~~~~~~~~~~~~~~~~

Build chords from names.

A chord name is a tonic followed by a chord type (``'Cmaj7'``, ``'Bb7'``,
``'F#m7b5'``). Types are resolved through the packaged chord dictionary,
aliases included.

Examples
--------
>>> chord('maj7')
['1P', '3M', '5P', '7M']
>>> chord('maj7', 'C2')
['C2', 'E2', 'G2', 'B2']
>>> chord_notes('Cmaj7')
['C', 'E', 'G', 'B']
"""

from __future__ import annotations

import re
from typing import List, Optional, Tuple

from pitchlattice.lattice.arithmetic import transpose
from pitchlattice.lattice.coords import Interval
from pitchlattice.notation.codec import default_codec, format_interval, format_pitch
from pitchlattice.notation.inputs import NotationLike
from pitchlattice.theory.dictionary import chord_dictionary

CHORD_NAME_REGEX = re.compile(r"^([a-gA-G](?:#+|b+|x+)?)(.*)$")


def tokenize_chord(name: str) -> Tuple[str, str]:
    """Split a chord name into ``(tonic, type)``.

    The tonic is a letter with optional accidentals; everything after it is
    the type. Names without a tonic give ``('', name)``.

    Examples
    --------
    >>> tokenize_chord('Bb7')
    ('Bb', '7')
    >>> tokenize_chord('C')
    ('C', '')
    >>> tokenize_chord('maj7')
    ('', 'maj7')
    """
    name = name.strip()
    if name in chord_dictionary():
        return "", name
    m = CHORD_NAME_REGEX.match(name)
    if m is None:
        return "", name
    return m.group(1), m.group(2).strip()


def _realize(intervals: Tuple[Interval, ...], tonic: Optional[NotationLike]) -> List[str]:
    if tonic is None:
        return [format_interval(i) for i in intervals]
    root = default_codec.pitch(tonic)
    if root is None:
        return []
    return [format_pitch(transpose(root, i)) for i in intervals]


def chord(source: str, tonic: Optional[NotationLike] = None) -> List[str]:
    """Intervals or notes of a chord.

    Parameters
    ----------
    source : str
        A chord type (``'maj7'``), a full chord name (``'Cmaj7'``) or a
        literal interval list (``'1P 3M 5P 7m'``).
    tonic : str or Pitch, optional
        Root to build on. When given, *source* is taken as the type.

    Returns
    -------
    list[str]
        Interval names when there is no tonic, otherwise notes. Empty if
        the chord cannot be resolved.
    """
    if tonic is None:
        root, kind = tokenize_chord(source)
        tonic = root or None
    else:
        kind = source
    intervals = chord_dictionary().intervals_for(kind)
    if intervals is None:
        return []
    return _realize(intervals, tonic)


def chord_notes(name: str) -> List[str]:
    """Notes of a chord named with its tonic; ``[]`` if there is none."""
    root, kind = tokenize_chord(name)
    if not root:
        return []
    return chord(kind, root)


def chord_names(aliases: bool = False) -> List[str]:
    """Known chord types, optionally including every alias."""
    return chord_dictionary().names(aliases)
