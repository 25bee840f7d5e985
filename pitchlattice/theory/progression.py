"""
pitchlattice.theory.progression
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

Roman-numeral chord progressions.

A numeral names a degree of the major scale of some tonic (``I`` … ``VII``,
either case), optionally altered by leading accidentals and followed by a
chord type: ``'bVImaj7'``, ``'#iv'``, ``'V7'``.

Examples
--------
>>> build_progression('I IIm7 V7', 'C')
['C', 'Dm7', 'G7']
>>> abstract_progression('Cmaj7 Dm7 G7', 'C')
['Imaj7', 'IIm7', 'V7']
"""

from __future__ import annotations

import re
from typing import Iterable, List, NamedTuple, Optional, Union

from pitchlattice.lattice.arithmetic import interval_between, transpose
from pitchlattice.lattice.coords import Interval
from pitchlattice.notation.codec import (
    accidentals_to_alteration,
    alteration_to_accidentals,
    default_codec,
    format_pitch,
)
from pitchlattice.notation.inputs import NotationLike
from pitchlattice.theory.chords import tokenize_chord
from pitchlattice.utils.collections import split

ROMAN_REGEX = re.compile(r"^(#+|b+|x+|)(IV|I{1,3}|VI{0,2}|iv|i{1,3}|vi{0,2})\s*(.*)$")
NUMERALS = ("I", "II", "III", "IV", "V", "VI", "VII")


class RomanNumeral(NamedTuple):
    """``'bVImaj7'`` → ``RomanNumeral('b', 'VI', 'maj7')``."""

    accidentals: str
    numeral: str
    suffix: str

    @property
    def step(self) -> int:
        """Scale degree, 0-based."""
        return NUMERALS.index(self.numeral.upper())

    @property
    def alteration(self) -> int:
        return accidentals_to_alteration(self.accidentals)

    @property
    def is_upper(self) -> bool:
        return self.numeral.isupper()

    @property
    def interval(self) -> Interval:
        """Ascending interval from the tonic to this degree."""
        return Interval.from_parts(self.step, self.alteration)


def parse_roman(text: str) -> Optional[RomanNumeral]:
    """Split a roman-numeral chord, or ``None`` if it is not one.

    Examples
    --------
    >>> parse_roman('III dom')
    RomanNumeral(accidentals='', numeral='III', suffix='dom')
    >>> parse_roman('2') is None
    True
    """
    m = ROMAN_REGEX.match(text.strip())
    if m is None:
        return None
    return RomanNumeral(*m.groups())


def build_progression(
    numerals: Union[str, Iterable[str]],
    tonic: NotationLike,
) -> List[Optional[str]]:
    """Realise roman numerals as chord names over *tonic*.

    Items that are not numerals become ``None``. Case is kept as written:
    ``ii`` does not imply a minor chord, spell it ``IIm`` or ``iim``.

    Examples
    --------
    >>> build_progression('Imaj7 2 IIIm7', 'C')
    ['Cmaj7', None, 'Em7']
    """
    root = default_codec.pitch(tonic)
    if root is None:
        return [None for _ in split(numerals)]
    root = root.pitch_class()

    result: List[Optional[str]] = []
    for item in split(numerals):
        roman = parse_roman(item)
        if roman is None:
            result.append(None)
            continue
        result.append(format_pitch(transpose(root, roman.interval)) + roman.suffix)
    return result


def abstract_progression(
    chords: Union[str, Iterable[str]],
    tonic: NotationLike,
) -> List[Optional[str]]:
    """Inverse of :func:`build_progression`: chord names to numerals.

    Chords without a readable root become ``None``.
    """
    root = default_codec.pitch(tonic)
    if root is None:
        return [None for _ in split(chords)]
    root = root.pitch_class()

    result: List[Optional[str]] = []
    for name in split(chords):
        chord_root, kind = tokenize_chord(name)
        target = default_codec.pitch(chord_root) if chord_root else None
        if target is None:
            result.append(None)
            continue
        ivl = interval_between(root, target.pitch_class())
        result.append(
            alteration_to_accidentals(ivl.alteration) + NUMERALS[ivl.step] + kind
        )
    return result
