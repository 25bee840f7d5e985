"""
pitchlattice.lattice.arithmetic
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

Integer arithmetic on lattice coordinates.

Every function here is total on well-formed coordinates: transposition,
distance and respelling are additions and subtractions of small integer
vectors, with no lookup of rendered strings.
"""

from __future__ import annotations

from typing import List

from pitchlattice.lattice.coords import Interval, Pitch, decompose


def transpose(pitch: Pitch, interval: Interval) -> Pitch:
    """Apply an interval to a pitch or pitch class.

    A pitch class has no octave component and keeps none.

    Examples
    --------
    >>> transpose(Pitch(0, 4), Interval(4, -2))     # C4 + 3M
    Pitch(fifths=4, octaves=2)
    """
    d_fifths, d_octaves = interval.vector
    if pitch.octaves is None:
        return Pitch(pitch.fifths + d_fifths)
    return Pitch(pitch.fifths + d_fifths, pitch.octaves + d_octaves)


def interval_between(start: Pitch, end: Pitch) -> Interval:
    """Interval that takes ``start`` to ``end``.

    When either argument is a pitch class the result is the ascending simple
    interval (number 1–7) between the two classes, since a pair of pitch
    classes has no inherent direction.
    """
    fifths = end.fifths - start.fifths
    if start.octaves is None or end.octaves is None:
        step, alteration = decompose(fifths)
        return Interval.from_parts(step, alteration, 0)
    return Interval.from_vector(fifths, end.octaves - start.octaves)


def add_intervals(first: Interval, second: Interval) -> Interval:
    f1, o1 = first.vector
    f2, o2 = second.vector
    return Interval.from_vector(f1 + f2, o1 + o2)


def subtract_intervals(minuend: Interval, subtrahend: Interval) -> Interval:
    f1, o1 = minuend.vector
    f2, o2 = subtrahend.vector
    return Interval.from_vector(f1 - f2, o1 - o2)


def height(pitch: Pitch) -> int:
    """Semitones above C0 (chroma for pitch classes)."""
    return pitch.height


def semitones_between(start: Pitch, end: Pitch) -> int:
    """Signed semitone distance; pitch classes give the ascending 0–11 distance."""
    if start.octaves is None or end.octaves is None:
        return (end.chroma - start.chroma) % 12
    return end.height - start.height


def fifths_between(start: Pitch, end: Pitch) -> int:
    """Steps along the line of fifths from ``start`` to ``end``."""
    return end.fifths - start.fifths


def transpose_fifths(pitch: Pitch, fifths: int) -> Pitch:
    """Move a pitch class ``fifths`` steps along the line of fifths.

    The result is always a pitch class.
    """
    return Pitch(pitch.fifths + fifths)


def simplify_interval(interval: Interval) -> Interval:
    """Reduce a compound interval to its simple form, keeping direction.

    ``9M`` becomes ``2M`` and ``-10m`` becomes ``-3m``; octaves reduce to
    unisons.
    """
    return Interval.from_parts(
        interval.step, interval.alteration, 0, interval.direction
    )


def invert_interval(interval: Interval) -> Interval:
    """Complement of the simple interval within the octave.

    Inversion negates the fifths coordinate (``3M`` ↔ ``6m``, ``4P`` ↔
    ``5P``, ``2A`` ↔ ``7d``).
    """
    step, alteration = decompose(-interval.fifths)
    return Interval.from_parts(step, alteration, 0, interval.direction)


# Respelling by a Pythagorean comma keeps the height: 12 fifths up and 7
# octaves down is a net zero semitones (12·7 − 7·12).
_COMMA = (12, -7)


def respell(pitch: Pitch, commas: int) -> Pitch:
    """Shift a pitch ``commas`` Pythagorean commas along the lattice."""
    fifths = pitch.fifths + commas * _COMMA[0]
    if pitch.octaves is None:
        return Pitch(fifths)
    return Pitch(fifths, pitch.octaves + commas * _COMMA[1])


def enharmonics(pitch: Pitch) -> List[Pitch]:
    """The pitch with its neighbour spellings a diminished second away.

    Examples
    --------
    ``C`` gives ``[B#, C, Dbb]``.
    """
    dim_second = Interval.from_parts(1, -2)
    return [
        transpose(pitch, Interval(dim_second.fifths, dim_second.octaves, -1)),
        pitch,
        transpose(pitch, dim_second),
    ]


def simplify_enharmonic(pitch: Pitch) -> Pitch:
    """Respell with the fewest accidentals, keeping the height.

    On a tie (``G#`` vs ``Ab``) the given spelling is kept.

    Examples
    --------
    ``Fb`` → ``E``, ``C##`` → ``D``, ``B#4`` → ``C5``, ``Ab`` → ``Ab``.
    """
    if pitch.alteration == 0:
        return pitch
    best = pitch
    for commas in (-1, 1):
        candidate = respell(pitch, commas)
        while abs(candidate.alteration) < abs(best.alteration):
            best = candidate
            candidate = respell(candidate, commas)
    return best
