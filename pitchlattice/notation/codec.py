"""
pitchlattice.notation.codec
~~~~~~~~~~~~~~~~~~~~~~~~~~~

Scientific pitch notation and interval shorthand ↔ lattice coordinates.

Pitch grammar::

    letter [accidentals] [octave]      C  Db5  f#-1  Bbb  Cx3

* letter is ``A``–``G`` in either case;
* accidentals are a run of ``#``, of ``b``, or of ``x`` (double sharp);
* the octave is one optional signed decimal digit.

Interval grammar, in two surface orders that decode identically::

    tonal     [+-]number quality        3M  -9m  5P  4#  7bb
    standard  quality[+-]number         M3  m-9  P5  AA4

Quality is ``d…`` (up to four), ``m``, ``M``, ``P``, ``A…`` (up to four), or
in tonal order a run of up to four ``#``/``b`` meaning that many semitones
above/below the major or perfect interval.

Parsing never raises: text that does not match decodes to ``None``.
"""

from __future__ import annotations

import re
from typing import Final, Iterable, List, Optional, Pattern

from pitchlattice.config import INTERVAL_TYPES, PARSE_CACHE_SIZE, STEP_LETTERS
from pitchlattice.errors import MalformedNotation
from pitchlattice.lattice.coords import (
    Interval,
    Pitch,
    quality_to_alteration,
)
from pitchlattice.notation.cache import ParseCache
from pitchlattice.notation.inputs import (
    Coordinate,
    NotationLike,
    Parsed,
    as_notation,
    is_notation,
)

# ── Grammars ─────────────────────────────────────────────────────────
PITCH_REGEX: Final[Pattern[str]] = re.compile(r"([a-gA-G])(#+|b+|x+|)(-?[0-9])?")
"""Groups: letter, accidentals, octave."""

_QUALITY = r"d{1,4}|m|M|P|A{1,4}"
_IVL_TONAL = rf"([-+]?)([0-9]+)({_QUALITY}|#{{1,4}}|b{{1,4}})"
_IVL_STANDARD = rf"({_QUALITY})([-+]?)([0-9]+)"

INTERVAL_REGEX: Final[Pattern[str]] = re.compile(
    rf"(?:{_IVL_TONAL}|{_IVL_STANDARD})"
)
"""Groups 1–3: tonal sign, number, quality; groups 4–6: standard quality,
sign, number."""


# ── Accidentals ──────────────────────────────────────────────────────
def accidentals_to_alteration(accidentals: str) -> int:
    """``'#'`` → 1, ``'bbb'`` → -3, ``'x'`` → 2, ``''`` → 0."""
    if accidentals.startswith("b"):
        return -len(accidentals)
    return len(accidentals.replace("x", "##"))


def alteration_to_accidentals(alteration: int) -> str:
    """``2`` → ``'##'``, ``-2`` → ``'bb'``, ``0`` → ``''``."""
    return "#" * alteration if alteration > 0 else "b" * -alteration


# ── Pitches ──────────────────────────────────────────────────────────
def decode_pitch(text: str) -> Optional[Pitch]:
    """Uncached pitch parser (see :meth:`NotationCodec.parse_pitch`)."""
    match = PITCH_REGEX.fullmatch(text)
    if match is None:
        return None
    letter, accidentals, octave = match.groups()
    step = STEP_LETTERS.index(letter.upper())
    alteration = accidentals_to_alteration(accidentals)
    return Pitch.from_parts(
        step, alteration, int(octave) if octave is not None else None
    )


def format_pitch(pitch: Pitch) -> str:
    """Render a pitch in scientific notation.

    Examples
    --------
    >>> format_pitch(Pitch(-8))
    'Fb'
    >>> format_pitch(Pitch(2, 1))
    'D2'
    """
    octave = pitch.octave
    return (
        pitch.letter
        + alteration_to_accidentals(pitch.alteration)
        + ("" if octave is None else str(octave))
    )


# ── Intervals ────────────────────────────────────────────────────────
def decode_interval(text: str) -> Optional[Interval]:
    """Uncached interval parser (see :meth:`NotationCodec.parse_interval`)."""
    match = INTERVAL_REGEX.fullmatch(text)
    if match is None:
        return None
    t_sign, t_num, t_quality, s_quality, s_sign, s_num = match.groups()
    if t_num is not None:
        sign, number, quality = t_sign, int(t_num), t_quality
    else:
        sign, number, quality = s_sign, int(s_num), s_quality
    if number < 1:
        return None
    step = (number - 1) % 7
    alteration = quality_to_alteration(INTERVAL_TYPES[step], quality)
    if alteration is None:
        return None
    return Interval.from_parts(
        step,
        alteration,
        (number - 1) // 7,
        -1 if sign == "-" else 1,
    )


def format_interval(interval: Interval) -> str:
    """Render an interval in tonal order (``[-]number quality``).

    Qualities beyond four ``d``/``A`` letters (reachable through interval
    arithmetic) are rendered in full but fall outside the parse grammar,
    so such text does not decode back.

    Examples
    --------
    >>> format_interval(Interval(4, -2))
    '3M'
    >>> format_interval(Interval(-3, 3, -1))
    '-10m'
    """
    sign = "-" if interval.direction == -1 else ""
    return f"{sign}{interval.number}{interval.quality}"


def format_coordinate(value: Coordinate) -> str:
    if isinstance(value, Interval):
        return format_interval(value)
    return format_pitch(value)


# ── Codec ────────────────────────────────────────────────────────────
class NotationCodec:
    """Pitch and interval parsers sharing one :class:`ParseCache`.

    Parameters
    ----------
    cache : ParseCache, optional
        Memo table for parse results. A fresh unbounded cache is created
        when omitted.
    """

    def __init__(self, cache: Optional[ParseCache] = None) -> None:
        self.cache = cache if cache is not None else ParseCache()

    # -- text → coordinate ------------------------------------------------
    def parse_pitch(self, text: str) -> Optional[Pitch]:
        """Parse scientific pitch notation.

        Examples
        --------
        >>> NotationCodec().parse_pitch('Cb4')
        Pitch(fifths=-7, octaves=8)
        >>> NotationCodec().parse_pitch('Cmaj7') is None
        True
        """
        return self.cache.get_or_compute(("pitch", text), lambda: decode_pitch(text))

    def parse_interval(self, text: str) -> Optional[Interval]:
        """Parse interval shorthand in tonal or standard order.

        Examples
        --------
        >>> NotationCodec().parse_interval('10m')
        Interval(fifths=-3, octaves=3, direction=1)
        >>> NotationCodec().parse_interval('m10')
        Interval(fifths=-3, octaves=3, direction=1)
        """
        return self.cache.get_or_compute(
            ("interval", text), lambda: decode_interval(text)
        )

    # -- tagged input resolution -----------------------------------------
    def pitch(self, obj: NotationLike) -> Optional[Pitch]:
        """Resolve text or a coordinate to a :class:`Pitch` (or ``None``)."""
        tagged = as_notation(obj)
        if isinstance(tagged, Parsed):
            return tagged.value if isinstance(tagged.value, Pitch) else None
        return self.parse_pitch(tagged.text)

    def pitches(self, entries: Iterable[object]) -> List[Pitch]:
        """Resolve a note collection, skipping entries that are not pitches.

        Unlike :meth:`pitch`, values of unsupported types (``None``,
        numbers) are skipped rather than raising :class:`TypeError`.

        Examples
        --------
        >>> NotationCodec().pitches(['C', None, 5, 'blah', 'E4'])
        [Pitch(fifths=0, octaves=None), Pitch(fifths=4, octaves=2)]
        """
        resolved = (self.pitch(e) for e in entries if is_notation(e))
        return [p for p in resolved if p is not None]

    def interval(self, obj: NotationLike) -> Optional[Interval]:
        """Resolve text or a coordinate to an :class:`Interval` (or ``None``)."""
        tagged = as_notation(obj)
        if isinstance(tagged, Parsed):
            return tagged.value if isinstance(tagged.value, Interval) else None
        return self.parse_interval(tagged.text)

    def coordinate(self, obj: NotationLike) -> Optional[Coordinate]:
        """Resolve to whichever of pitch or interval the input denotes."""
        tagged = as_notation(obj)
        if isinstance(tagged, Parsed):
            return tagged.value
        return self.parse_pitch(tagged.text) or self.parse_interval(tagged.text)

    def require_pitch(self, obj: NotationLike) -> Pitch:
        """Like :meth:`pitch` but raises :class:`MalformedNotation`."""
        pitch = self.pitch(obj)
        if pitch is None:
            raise MalformedNotation(str(obj), "pitch")
        return pitch

    def require_interval(self, obj: NotationLike) -> Interval:
        """Like :meth:`interval` but raises :class:`MalformedNotation`."""
        interval = self.interval(obj)
        if interval is None:
            raise MalformedNotation(str(obj), "interval")
        return interval

    # -- canonical text ---------------------------------------------------
    def canonical_pitch(self, text: str) -> Optional[str]:
        """``'c#4'`` → ``'C#4'``, ``'Cx'`` → ``'C##'``; ``None`` if invalid."""
        pitch = self.parse_pitch(text)
        return None if pitch is None else format_pitch(pitch)

    def canonical_interval(self, text: str) -> Optional[str]:
        """``'M-3'`` → ``'-3M'``, ``'3b'`` → ``'3m'``; ``None`` if invalid."""
        interval = self.parse_interval(text)
        return None if interval is None else format_interval(interval)


default_codec = NotationCodec(ParseCache(PARSE_CACHE_SIZE))
"""Codec used by the module-level helpers throughout the package."""


def parse_pitch(text: str) -> Optional[Pitch]:
    return default_codec.parse_pitch(text)


def parse_interval(text: str) -> Optional[Interval]:
    return default_codec.parse_interval(text)
