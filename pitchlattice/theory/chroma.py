"""
pitchlattice.theory.chroma
~~~~~~~~~~~~~~~~~~~~~~~~~~

Pitch-class set signatures.

A :class:`Chroma` records which of the 12 chromatic pitch classes occur in a
note collection, discarding spelling, octave, order and duplicates. Its
external forms follow the dictionary data format:

* ``binary``: 12 characters, position 0 is C: ``'100010010001'``
* ``decimal``: that string read as a base-2 integer: ``2193``
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Tuple, Union

import numpy as np

from pitchlattice.config import N_CHROMA
from pitchlattice.lattice.coords import Pitch
from pitchlattice.notation.codec import NotationCodec, default_codec
from pitchlattice.notation.inputs import NotationLike
from pitchlattice.utils.collections import split

_FULL = (1 << N_CHROMA) - 1


@dataclass(frozen=True)
class Chroma:
    """12-bit pitch-class signature (bit *i* set ⇔ pitch class *i* present)."""

    mask: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.mask <= _FULL:
            raise ValueError(f"chroma mask out of range: {self.mask}")

    # ── Constructors ────────────────────────────────────────────────
    @classmethod
    def from_pitch_classes(cls, pitch_classes: Iterable[int]) -> Chroma:
        mask = 0
        for pc in pitch_classes:
            mask |= 1 << (pc % N_CHROMA)
        return cls(mask)

    @classmethod
    def from_pitches(cls, pitches: Iterable[Pitch]) -> Chroma:
        return cls.from_pitch_classes(p.chroma for p in pitches)

    @classmethod
    def from_binary(cls, binary: str) -> Chroma:
        """Inverse of :attr:`binary`.

        Raises
        ------
        ValueError
            If *binary* is not 12 characters of ``0``/``1``.
        """
        if len(binary) != N_CHROMA or set(binary) - {"0", "1"}:
            raise ValueError(f"not a chroma string: {binary!r}")
        return cls.from_pitch_classes(i for i, c in enumerate(binary) if c == "1")

    @classmethod
    def from_decimal(cls, decimal: int) -> Chroma:
        """Inverse of :attr:`decimal`."""
        return cls.from_binary(format(decimal, f"0{N_CHROMA}b"))

    # ── External forms ──────────────────────────────────────────────
    @property
    def binary(self) -> str:
        return "".join(
            "1" if self.mask >> pc & 1 else "0" for pc in range(N_CHROMA)
        )

    @property
    def decimal(self) -> int:
        return int(self.binary, 2)

    @property
    def pitch_classes(self) -> Tuple[int, ...]:
        return tuple(pc for pc in range(N_CHROMA) if self.mask >> pc & 1)

    @property
    def vector(self) -> np.ndarray:
        """Boolean array of shape ``(12,)``."""
        v = np.zeros(N_CHROMA, dtype=bool)
        v[list(self.pitch_classes)] = True
        return v

    # ── Set operations ──────────────────────────────────────────────
    def rotate(self, root: int) -> Chroma:
        """Re-anchor the set so that pitch class *root* becomes 0."""
        return Chroma.from_pitch_classes(pc - root for pc in self.pitch_classes)

    def modes(self) -> List[Chroma]:
        """Rotations anchored on each member, in ascending pitch-class order."""
        return [self.rotate(pc) for pc in self.pitch_classes]

    def is_subset_of(self, other: Chroma) -> bool:
        return self.mask & other.mask == self.mask

    def is_superset_of(self, other: Chroma) -> bool:
        return other.is_subset_of(self)

    @property
    def is_empty(self) -> bool:
        return self.mask == 0

    def __len__(self) -> int:
        return bin(self.mask).count("1")

    def __contains__(self, pc: object) -> bool:
        return isinstance(pc, int) and bool(self.mask >> (pc % N_CHROMA) & 1)

    def __iter__(self) -> Iterator[int]:
        return iter(self.pitch_classes)

    def __str__(self) -> str:
        return self.binary


def chroma(
    notes: Union[str, Iterable[NotationLike]],
    codec: NotationCodec = default_codec,
) -> Chroma:
    """Signature of a note collection.

    Entries that do not parse as pitches, or are not text or a
    :class:`Pitch` at all, are skipped.

    Examples
    --------
    >>> chroma(['C4', 'E', 'G', 'B']).binary
    '100010010001'
    >>> chroma('c e g blah').binary
    '100010010000'
    """
    return Chroma.from_pitches(codec.pitches(split(notes)))


def relative_chroma(root: Pitch, pitches: Iterable[Pitch]) -> Chroma:
    """Signature of *pitches* measured from *root* (root at position 0)."""
    return Chroma.from_pitch_classes(p.chroma - root.chroma for p in pitches)
