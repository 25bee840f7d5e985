"""
pitchlattice.utils.collections
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

Helpers for lists of notes and intervals written as text.

Note lists may be given as a sequence or as a single string whose items are
separated by spaces, commas or bars (``'C E G'``, ``'C, E, G'``,
``'C | E | G'``).
"""

from __future__ import annotations

import re
from typing import Callable, Iterable, List, Optional, Sequence, TypeVar, Union

from pitchlattice.core import interval_from, transposer
from pitchlattice.lattice.coords import Interval, Pitch
from pitchlattice.notation.codec import default_codec, format_pitch
from pitchlattice.notation.inputs import NotationLike, Parsed, Raw

T = TypeVar("T")

_SEPARATOR = re.compile(r"\s*\|\s*|\s*,\s*|\s+")


def split(source: Union[str, Iterable[T], None]) -> List:
    """Coerce *source* into a list.

    Examples
    --------
    >>> split('a |  b    |  c   ')
    ['a', 'b', 'c']
    >>> split('a , b  | c    d')
    ['a', 'b', 'c', 'd']
    >>> split(None)
    []
    """
    if source is None:
        return []
    if isinstance(source, str):
        source = source.strip()
        return _SEPARATOR.split(source) if source else []
    if isinstance(source, (Pitch, Interval, Raw, Parsed)):
        return [source]
    return list(source)


def compact(items: Iterable[Optional[T]]) -> List[T]:
    """Drop ``None`` and empty strings, keeping zeros."""
    return [item for item in items if item is not None and item != ""]


def rotate(n: int, items: Union[str, Sequence[T]]) -> List:
    """Rotate left by *n* places (negative *n* rotates right)."""
    values = split(items)
    if not values:
        return []
    n %= len(values)
    return values[n:] + values[:n]


def harmonize(
    items: Union[str, Iterable[NotationLike]],
    tonic: NotationLike,
) -> List[Optional[str]]:
    """Transpose every item by *tonic*.

    Intervals are realised above a tonic pitch, or pitches are moved by a
    tonic interval; unparseable items become ``None``.

    Examples
    --------
    >>> harmonize('1P 3M 5P', 'A4')
    ['A4', 'C#5', 'E5']
    >>> harmonize('C E G', 'M3')
    ['E', 'G#', 'B']
    """
    move = transposer(tonic)
    return [move(item) for item in split(items)]


def intervals_from(
    root: NotationLike,
    notes: Union[str, Iterable[NotationLike]],
) -> List[Optional[str]]:
    """Interval from *root* to each note.

    Examples
    --------
    >>> intervals_from('C4', 'C D E F G A B C5')
    ['1P', '2M', '3M', '4P', '5P', '6M', '7M', '8P']
    """
    measure: Callable[[NotationLike], Optional[str]] = interval_from(root)
    return [measure(note) for note in split(notes)]


def pitch_set(notes: Union[str, Iterable[NotationLike]]) -> List[str]:
    """Distinct pitch classes in order of first appearance.

    Enharmonic spellings count once; the first spelling wins.

    Examples
    --------
    >>> pitch_set('E4 G# b2 e5 Ab')
    ['E', 'G#', 'B']
    """
    seen: set[int] = set()
    result: List[str] = []
    for pitch in default_codec.pitches(split(notes)):
        if pitch.chroma in seen:
            continue
        seen.add(pitch.chroma)
        result.append(format_pitch(pitch.pitch_class()))
    return result
