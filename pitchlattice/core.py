"""
pitchlattice.core
~~~~~~~~~~~~~~~~~

High-level text API — the "glue" that connects the notation codec and the
lattice arithmetic into one-liner calls.

Every function accepts notation text or an already-decoded coordinate,
resolves its arguments once through the default codec, does integer
arithmetic, and formats the result back to text. An argument that does not
parse yields ``None`` instead of an exception.
"""

from __future__ import annotations

from typing import Callable, List, Optional

from pitchlattice.lattice import arithmetic
from pitchlattice.lattice.coords import Interval, Pitch
from pitchlattice.notation.codec import default_codec, format_interval, format_pitch
from pitchlattice.notation.inputs import NotationLike


def transpose(first: NotationLike, second: NotationLike) -> Optional[str]:
    """Transpose a pitch by an interval (arguments in either order).

    Parameters
    ----------
    first, second : str | Pitch | Interval
        One pitch (or pitch class) and one interval.

    Returns
    -------
    str or None
        The transposed pitch, or ``None`` unless exactly one argument is a
        pitch and the other an interval.

    Examples
    --------
    >>> transpose('C2', 'm3')
    'Eb2'
    >>> transpose('6m', 'C')
    'Ab'
    """
    a = default_codec.coordinate(first)
    b = default_codec.coordinate(second)
    if isinstance(a, Pitch) and isinstance(b, Interval):
        return format_pitch(arithmetic.transpose(a, b))
    if isinstance(a, Interval) and isinstance(b, Pitch):
        return format_pitch(arithmetic.transpose(b, a))
    return None


def transposer(by: NotationLike) -> Callable[[NotationLike], Optional[str]]:
    """Single-argument form of :func:`transpose` with one side fixed.

    Examples
    --------
    >>> up_a_third = transposer('3M')
    >>> [up_a_third(n) for n in ['C', 'D', 'E']]
    ['E', 'F#', 'G#']
    """
    fixed = default_codec.coordinate(by)

    def apply(other: NotationLike) -> Optional[str]:
        if fixed is None:
            return None
        return transpose(fixed, other)

    return apply


def interval(start: NotationLike, end: NotationLike) -> Optional[str]:
    """Interval between two pitches.

    With pitch classes the result is always the ascending simple interval.

    Examples
    --------
    >>> interval('C2', 'C3')
    '8P'
    >>> interval('G', 'B')
    '3M'
    >>> interval('C3', 'A2')
    '-3m'
    """
    a = default_codec.pitch(start)
    b = default_codec.pitch(end)
    if a is None or b is None:
        return None
    return format_interval(arithmetic.interval_between(a, b))


def interval_from(root: NotationLike) -> Callable[[NotationLike], Optional[str]]:
    """Single-argument form of :func:`interval` measuring from *root*."""
    fixed = default_codec.pitch(root)

    def measure(note: NotationLike) -> Optional[str]:
        if fixed is None:
            return None
        return interval(fixed, note)

    return measure


def add(first: NotationLike, second: NotationLike) -> Optional[str]:
    """Sum of two intervals, e.g. ``add('3m', '5P') == '7m'``."""
    a = default_codec.interval(first)
    b = default_codec.interval(second)
    if a is None or b is None:
        return None
    return format_interval(arithmetic.add_intervals(a, b))


def subtract(minuend: NotationLike, subtrahend: NotationLike) -> Optional[str]:
    """Difference of two intervals, e.g. ``subtract('5P', '2M') == '4P'``."""
    a = default_codec.interval(minuend)
    b = default_codec.interval(subtrahend)
    if a is None or b is None:
        return None
    return format_interval(arithmetic.subtract_intervals(a, b))


def semitones(ivl: NotationLike) -> Optional[int]:
    """Signed size of an interval in semitones."""
    parsed = default_codec.interval(ivl)
    return None if parsed is None else parsed.semitones


def distance_in_semitones(start: NotationLike, end: NotationLike) -> Optional[int]:
    """Semitones from *start* to *end*, e.g. ``('C3', 'A2') → -3``."""
    a = default_codec.pitch(start)
    b = default_codec.pitch(end)
    if a is None or b is None:
        return None
    return arithmetic.semitones_between(a, b)


def fifths(start: NotationLike, end: NotationLike) -> Optional[int]:
    """Distance in perfect fifths between two pitch classes."""
    a = default_codec.pitch(start)
    b = default_codec.pitch(end)
    if a is None or b is None:
        return None
    return arithmetic.fifths_between(a, b)


def transpose_fifths(note: NotationLike, n: int) -> Optional[str]:
    """Pitch class *n* fifths away, e.g. ``('G4', 1) → 'D'``."""
    p = default_codec.pitch(note)
    return None if p is None else format_pitch(arithmetic.transpose_fifths(p, n))


def note_name(note: NotationLike) -> Optional[str]:
    """Canonical spelling, e.g. ``'cx4' → 'C##4'``."""
    p = default_codec.pitch(note)
    return None if p is None else format_pitch(p)


def pitch_class(note: NotationLike) -> Optional[str]:
    """Spelling without octave, e.g. ``'Db5' → 'Db'``."""
    p = default_codec.pitch(note)
    return None if p is None else format_pitch(p.pitch_class())


def enharmonics(note: NotationLike) -> List[str]:
    """``'C' → ['B#', 'C', 'Dbb']``; ``[]`` if *note* does not parse."""
    p = default_codec.pitch(note)
    if p is None:
        return []
    return [format_pitch(e) for e in arithmetic.enharmonics(p)]


def simplify_enharmonic(note: NotationLike) -> Optional[str]:
    """Fewest-accidental spelling, e.g. ``'C##' → 'D'``, ``'Fb4' → 'E4'``."""
    p = default_codec.pitch(note)
    return None if p is None else format_pitch(arithmetic.simplify_enharmonic(p))


def simplify(ivl: NotationLike) -> Optional[str]:
    """``'9M' → '2M'``, ``'-10m' → '-3m'``."""
    i = default_codec.interval(ivl)
    return None if i is None else format_interval(arithmetic.simplify_interval(i))


def invert(ivl: NotationLike) -> Optional[str]:
    """``'3M' → '6m'``, ``'4P' → '5P'``."""
    i = default_codec.interval(ivl)
    return None if i is None else format_interval(arithmetic.invert_interval(i))
