"""
pitchlattice.utils.tuning
~~~~~~~~~~~~~~~~~~~~~~~~~

MIDI numbers and equal-tempered frequencies.

The lattice height is measured in semitones above C0, so a pitch's MIDI
number is simply ``height + 12``. Hz conversion is delegated to
:mod:`librosa`, scaled to the requested A4 reference.
"""

from __future__ import annotations

from typing import Optional

import librosa
import numpy as np

from pitchlattice.config import (
    A4_FREQ,
    CHROMATIC_FLATS,
    CHROMATIC_SHARPS,
    MIDI_MAX,
    MIDI_MIN,
    MIDI_OFFSET,
)
from pitchlattice.notation.codec import default_codec
from pitchlattice.notation.inputs import NotationLike


def is_midi(value: object) -> bool:
    """``True`` for integers in the MIDI note range 0–127."""
    return (
        isinstance(value, (int, np.integer))
        and not isinstance(value, bool)
        and MIDI_MIN <= value <= MIDI_MAX
    )


def midi(note: NotationLike) -> Optional[int]:
    """MIDI number of a pitch; ``None`` for pitch classes and invalid text.

    Examples
    --------
    >>> midi('C4')
    60
    >>> midi('Cb4')
    59
    """
    pitch = default_codec.pitch(note)
    if pitch is None or pitch.is_pitch_class:
        return None
    return pitch.height + MIDI_OFFSET


def from_midi(number: int, sharps: bool = False) -> Optional[str]:
    """Pitch name for a MIDI number (flats by default).

    Examples
    --------
    >>> from_midi(61)
    'Db4'
    >>> from_midi(61, sharps=True)
    'C#4'
    """
    if not is_midi(number):
        return None
    names = CHROMATIC_SHARPS if sharps else CHROMATIC_FLATS
    return f"{names[number % 12]}{number // 12 - 1}"


def freq(note: NotationLike, tuning: float = A4_FREQ) -> Optional[float]:
    """Equal-tempered frequency in Hz.

    Parameters
    ----------
    note : str | Pitch
        A pitch with octave.
    tuning : float
        Frequency of A4 (default 440 Hz).

    Examples
    --------
    >>> round(freq('A4'), 2)
    440.0
    >>> round(freq('C4'), 3)
    261.626
    """
    number = midi(note)
    if number is None:
        return None
    return float(librosa.midi_to_hz(number)) * tuning / A4_FREQ


def from_freq(hz: float, sharps: bool = False, tuning: float = A4_FREQ) -> Optional[str]:
    """Nearest equal-tempered pitch name for a frequency."""
    if not hz > 0:
        return None
    number = int(np.round(librosa.hz_to_midi(hz * A4_FREQ / tuning)))
    return from_midi(number, sharps)
