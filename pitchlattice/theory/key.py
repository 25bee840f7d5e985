"""
pitchlattice.theory.key
~~~~~~~~~~~~~~~~~~~~~~~

Key and mode properties: scale, signature, diatonic chords and relatives.

A key is named by a tonic pitch class and a mode, e.g. ``'Eb major'`` or
``'C# dorian'``. The seven modes are the rotations of the white-note scale;
``major``/``ionian`` and ``minor``/``aeolian`` are interchangeable.

Examples
--------
>>> key('E mixolydian').scale
('E', 'F#', 'G#', 'A', 'B', 'C#', 'D')
>>> key('C major').relative('minor')
'A minor'
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Final, List, Optional, Tuple

from pitchlattice.config import STEP_LETTERS
from pitchlattice.core import fifths, interval, transpose, transpose_fifths
from pitchlattice.notation.codec import alteration_to_accidentals, default_codec, format_pitch
from pitchlattice.utils.collections import rotate

MODES: Final[Tuple[str, ...]] = (
    "major", "dorian", "phrygian", "lydian", "mixolydian",
    "minor", "locrian", "ionian", "aeolian",
)
MODE_NUMBERS: Final[Tuple[int, ...]] = (0, 1, 2, 3, 4, 5, 6, 0, 5)
# Fifths from the mode's white-note tonic back to C.
MODE_FIFTHS: Final[Tuple[int, ...]] = (0, 2, 4, -1, 1, 3, 5, 0, 3)

DEGREES: Final[Tuple[str, ...]] = ("I", "II", "III", "IV", "V", "VI", "VII")
DIATONIC_CHORDS: Final[Tuple[str, ...]] = ("maj7", "m7", "m7", "maj7", "7", "m7", "m7b5")

KEY_NAME_REGEX = re.compile(r"^([a-gA-G](?:#+|b+|x+)?)-?[0-9]*\s*(.*)$")


def _mode_index(mode: str) -> Optional[int]:
    mode = mode.strip().lower()
    return MODES.index(mode) if mode in MODES else None


def mode_names(aliases: bool = False) -> List[str]:
    """Modes from ionian to locrian; *aliases* adds ``ionian``/``aeolian``.

    >>> mode_names()
    ['major', 'dorian', 'phrygian', 'lydian', 'mixolydian', 'minor', 'locrian']
    """
    return list(MODES if aliases else MODES[:7])


def tokenize_key(name: str) -> Optional[Tuple[str, str]]:
    """``'C3 Dorian'`` → ``('C', 'dorian')``; ``None`` if not a key name.

    The octave of the tonic, if any, is dropped. A bare tonic is major.
    """
    m = KEY_NAME_REGEX.match(name.strip())
    if m is None:
        return None
    tonic = default_codec.pitch(m.group(1))
    mode = (m.group(2) or "major").lower()
    if tonic is None or _mode_index(mode) is None:
        return None
    return format_pitch(tonic.pitch_class()), mode


@dataclass(frozen=True)
class Key:
    """Properties of one key. Build with :func:`key`."""

    tonic: str
    mode: str
    modenum: int
    intervals: Tuple[str, ...]
    scale: Tuple[str, ...]
    alteration: int
    accidentals: str

    @property
    def name(self) -> str:
        return f"{self.tonic} {self.mode}"

    def degrees(self) -> List[str]:
        """Roman degrees, lowercase where the diatonic chord is minor.

        >>> key('C major').degrees()
        ['I', 'ii', 'iii', 'IV', 'V', 'vi', 'vii']
        """
        qualities = rotate(self.modenum, DIATONIC_CHORDS)
        return [
            deg.lower() if q.startswith("m") and not q.startswith("maj") else deg
            for deg, q in zip(DEGREES, qualities)
        ]

    def chords(self) -> List[str]:
        """Diatonic seventh chords, e.g. ``['Amaj7', 'Bm7', 'C#m7', ...]``."""
        qualities = rotate(self.modenum, DIATONIC_CHORDS)
        return [tonic + q for tonic, q in zip(self.scale, qualities)]

    def secondary_dominants(self) -> List[str]:
        """Dominant seventh a fifth above each degree."""
        return [f"{transpose(note, '5P')}7" for note in self.scale]

    def altered_notes(self) -> List[str]:
        """Notes of the key signature in signature order.

        >>> key('Eb major').altered_notes()
        ['Bb', 'Eb', 'Ab']
        """
        if self.alteration > 0:
            return [transpose_fifths("B", i) for i in range(1, self.alteration + 1)]
        return [transpose_fifths("F", -i) for i in range(1, -self.alteration + 1)]

    def relative(self, mode: str) -> Optional[str]:
        """Name of the key in *mode* that shares this key's signature.

        >>> key('B major').relative('dorian')
        'C# dorian'
        """
        index = _mode_index(mode)
        if index is None:
            return None
        shift = MODE_FIFTHS[index] - MODE_FIFTHS[MODES.index(self.mode)]
        return f"{transpose_fifths(self.tonic, shift)} {mode.strip().lower()}"


@lru_cache(maxsize=None)
def key(name: str) -> Optional[Key]:
    """Key properties for a name such as ``'A minor'``; ``None`` if invalid.

    Examples
    --------
    >>> k = key('A major')
    >>> k.alteration, k.accidentals
    (3, '###')
    >>> key('Bb minor').scale
    ('Bb', 'C', 'Db', 'Eb', 'F', 'Gb', 'Ab')
    """
    parts = tokenize_key(name)
    if parts is None:
        return None
    tonic, mode = parts
    index = MODES.index(mode)
    modenum = MODE_NUMBERS[index]

    white = rotate(modenum, list(STEP_LETTERS))
    intervals = tuple(interval(white[0], note) for note in white)
    scale = tuple(transpose(tonic, ivl) for ivl in intervals)
    alteration = fifths("C", tonic) - MODE_FIFTHS[index]
    return Key(
        tonic=tonic,
        mode=mode,
        modenum=modenum,
        intervals=intervals,
        scale=scale,
        alteration=alteration,
        accidentals=alteration_to_accidentals(alteration),
    )


def from_alteration(alteration: int) -> str:
    """Major key with the given signature, e.g. ``2`` → ``'D major'``."""
    return f"{transpose_fifths('C', alteration)} major"


def key_names(alteration: int = 4) -> List[str]:
    """Major keys from *alteration* flats to *alteration* sharps."""
    n = abs(alteration)
    return [from_alteration(i) for i in range(-n, n + 1)]
