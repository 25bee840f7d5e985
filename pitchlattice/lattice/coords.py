"""
pitchlattice.lattice.coords
~~~~~~~~~~~~~~~~~~~~~~~~~~~

Lattice coordinates for pitches and intervals.

A pitch class is a single integer, its position on the line of fifths
(``C = 0``, ``G = 1``, ``F = -1``, ``F# = 6``, ``Bb = -2`` …). A pitch adds an
``octaves`` component chosen so that the semitone height above C0 is::

    height = fifths * 7 + octaves * 12

Letter, accidentals and octave are recovered from the two integers by floor
division alone, so every coordinate decodes to exactly one spelling and every
spelling encodes to exactly one coordinate. Intervals use the same encoding
(the interval *from C* to the target pitch) plus a direction sign.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from pitchlattice.config import (
    FIFTHS_LETTERS,
    FIFTHS_PER_ALTERATION,
    INTERVAL_TYPES,
    N_CHROMA,
    OCTAVES_PER_ALTERATION,
    STEP_FIFTHS,
    STEP_LETTERS,
    STEP_OCTAVES,
)


# ── Decomposition ────────────────────────────────────────────────────
def decompose(fifths: int) -> Tuple[int, int]:
    """Split a fifths coordinate into ``(step, alteration)``.

    ``step`` is the letter index in ``C D E F G A B`` order and
    ``alteration`` the number of sharps (positive) or flats (negative).

    Examples
    --------
    >>> decompose(-8)      # Fb
    (3, -1)
    >>> decompose(6)       # F#
    (3, 1)
    """
    alteration = (fifths + 1) // 7
    letter = FIFTHS_LETTERS[(fifths + 1) % 7]
    return STEP_LETTERS.index(letter), alteration


def encode_fifths(step: int, alteration: int = 0) -> int:
    """Fifths coordinate of a letter step with the given alteration."""
    return STEP_FIFTHS[step] + FIFTHS_PER_ALTERATION * alteration


def encode_octaves(step: int, alteration: int, octave: int) -> int:
    """Octave component for a spelled pitch in the given scientific octave."""
    return octave - STEP_OCTAVES[step] - OCTAVES_PER_ALTERATION * alteration


def decode_octave(fifths: int, octaves: int) -> int:
    """Inverse of :func:`encode_octaves`."""
    step, alteration = decompose(fifths)
    return octaves + STEP_OCTAVES[step] + OCTAVES_PER_ALTERATION * alteration


# ── Interval qualities ───────────────────────────────────────────────
def quality_to_alteration(kind: str, quality: str) -> Optional[int]:
    """Map a quality string to an alteration for an interval family.

    Parameters
    ----------
    kind : str
        ``'P'`` for perfectable, ``'M'`` for majorable intervals.
    quality : str
        ``d…``, ``m``, ``M``, ``P``, ``A…``, or a bare run of ``#``/``b``
        (sharps raise, flats lower, regardless of family).

    Returns
    -------
    int or None
        ``None`` if the quality does not exist for that family
        (``'M'`` for a fifth, ``'P'`` for a third …).
    """
    if not quality:
        return None
    head = quality[0]
    if head == "#":
        return len(quality)
    if head == "b":
        return -len(quality)
    if head == "A":
        return len(quality)
    if kind == "P":
        if quality == "P":
            return 0
        if head == "d":
            return -len(quality)
        return None
    if quality == "M":
        return 0
    if quality == "m":
        return -1
    if head == "d":
        return -(len(quality) + 1)
    return None


def alteration_to_quality(kind: str, alteration: int) -> str:
    """Inverse of :func:`quality_to_alteration` (never emits ``#``/``b``)."""
    if alteration > 0:
        return "A" * alteration
    if kind == "P":
        return "P" if alteration == 0 else "d" * -alteration
    if alteration == 0:
        return "M"
    if alteration == -1:
        return "m"
    return "d" * (-alteration - 1)


# ── Value types ──────────────────────────────────────────────────────
@dataclass(frozen=True)
class Pitch:
    """A pitch, or a pitch class when ``octaves`` is ``None``.

    Parameters
    ----------
    fifths : int
        Position on the line of fifths.
    octaves : int, optional
        Octave component of the lattice coordinate (not the scientific
        octave; see :attr:`octave`).
    """

    fifths: int
    octaves: Optional[int] = None

    @classmethod
    def from_parts(
        cls,
        step: int,
        alteration: int = 0,
        octave: Optional[int] = None,
    ) -> Pitch:
        """Build from letter step (0 = C), alteration and scientific octave."""
        fifths = encode_fifths(step, alteration)
        if octave is None:
            return cls(fifths)
        return cls(fifths, encode_octaves(step, alteration, octave))

    @property
    def is_pitch_class(self) -> bool:
        return self.octaves is None

    @property
    def step(self) -> int:
        return decompose(self.fifths)[0]

    @property
    def letter(self) -> str:
        return STEP_LETTERS[self.step]

    @property
    def alteration(self) -> int:
        return decompose(self.fifths)[1]

    @property
    def octave(self) -> Optional[int]:
        """Scientific octave number, ``None`` for pitch classes."""
        if self.octaves is None:
            return None
        return decode_octave(self.fifths, self.octaves)

    @property
    def chroma(self) -> int:
        """Pitch class number 0–11 (C = 0), independent of spelling."""
        return (self.fifths * 7) % N_CHROMA

    @property
    def height(self) -> int:
        """Semitones above C0; pitch classes report their chroma."""
        if self.octaves is None:
            return self.chroma
        return self.fifths * 7 + self.octaves * 12

    def pitch_class(self) -> Pitch:
        return Pitch(self.fifths)

    def with_octave(self, octave: int) -> Pitch:
        return Pitch.from_parts(self.step, self.alteration, octave)


@dataclass(frozen=True)
class Interval:
    """A directed interval.

    ``(fifths, octaves)`` is the ascending shape (the coordinate of the
    target pitch when measured up from C0) and ``direction`` its sign, so the
    transposition vector is ``direction * (fifths, octaves)``.
    """

    fifths: int
    octaves: int
    direction: int = 1

    def __post_init__(self) -> None:
        if self.direction not in (1, -1):
            raise ValueError(f"direction must be 1 or -1, got {self.direction!r}")

    @classmethod
    def from_parts(
        cls,
        step: int,
        alteration: int = 0,
        octave: int = 0,
        direction: int = 1,
    ) -> Interval:
        """Build from simple step (0 = unison), alteration, octave span and sign."""
        return cls(
            encode_fifths(step, alteration),
            encode_octaves(step, alteration, octave),
            direction,
        )

    @classmethod
    def from_vector(cls, fifths: int, octaves: int) -> Interval:
        """Normalize a raw transposition vector into a directed interval.

        The vector is descending when it lowers the pitch, or when it keeps
        the height but spans a negative number of octaves (``C4 → B#3``).
        """
        ascending = cls(fifths, octaves, 1)
        height = fifths * 7 + octaves * 12
        if height < 0 or (height == 0 and ascending.octave < 0):
            return cls(-fifths, -octaves, -1)
        return ascending

    @property
    def vector(self) -> Tuple[int, int]:
        return self.direction * self.fifths, self.direction * self.octaves

    @property
    def step(self) -> int:
        """Simple step, 0-based (0 = unison, 1 = second … 6 = seventh)."""
        return decompose(self.fifths)[0]

    @property
    def alteration(self) -> int:
        return decompose(self.fifths)[1]

    @property
    def octave(self) -> int:
        """Whole octaves spanned by the interval."""
        return decode_octave(self.fifths, self.octaves)

    @property
    def number(self) -> int:
        """Interval number, 1-based (1 = unison, 8 = octave, 9 = ninth …)."""
        return self.step + 1 + 7 * self.octave

    @property
    def simple_number(self) -> int:
        return self.step + 1

    @property
    def type(self) -> str:
        """``'P'`` (perfectable) or ``'M'`` (majorable)."""
        return INTERVAL_TYPES[self.step]

    @property
    def quality(self) -> str:
        return alteration_to_quality(self.type, self.alteration)

    @property
    def semitones(self) -> int:
        """Signed size in semitones."""
        return self.direction * (self.fifths * 7 + self.octaves * 12)

    @property
    def chroma(self) -> int:
        return self.semitones % 12

    @property
    def is_descending(self) -> bool:
        return self.direction == -1
