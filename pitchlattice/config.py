"""
pitchlattice.config
~~~~~~~~~~~~~~~~~~~

Global constants for the notation codec and the lattice algebra.
Centralises all lookup tables so they can be imported once and
shared across every submodule.
"""

from typing import Final, Optional

# ── Letters ──────────────────────────────────────────────────────────
STEP_LETTERS: Final[str] = "CDEFGAB"
"""Letter names in step order (0 = C … 6 = B)."""

FIFTHS_LETTERS: Final[str] = "FCGDAEB"
"""Letter names in line-of-fifths order, starting one fifth below C."""

# ── Lattice tables ───────────────────────────────────────────────────
STEP_FIFTHS: Final[tuple[int, ...]] = (0, 2, 4, -1, 1, 3, 5)
"""Perfect fifths from C to each natural letter, in step order."""

STEP_OCTAVES: Final[tuple[int, ...]] = tuple(f * 7 // 12 for f in STEP_FIFTHS)
"""Octaves spanned by stacking :data:`STEP_FIFTHS` fifths (floor division)."""

STEP_SEMITONES: Final[tuple[int, ...]] = (0, 2, 4, 5, 7, 9, 11)
"""Semitones above C of each natural letter."""

OCTAVES_PER_ALTERATION: Final[int] = 4
"""A chromatic semitone is +7 fifths and −4 octaves (7·7 − 4·12 = 1)."""

FIFTHS_PER_ALTERATION: Final[int] = 7

# ── Intervals ────────────────────────────────────────────────────────
INTERVAL_TYPES: Final[str] = "PMMPPMM"
"""Interval family per simple step: P = perfectable, M = majorable."""

# ── Chroma ───────────────────────────────────────────────────────────
N_CHROMA: Final[int] = 12
"""Number of chroma bins (one per pitch class)."""

# ── MIDI / tuning ────────────────────────────────────────────────────
MIDI_OFFSET: Final[int] = 12
"""MIDI number of C0 (the zero of the lattice height)."""

MIDI_MIN: Final[int] = 0
MIDI_MAX: Final[int] = 127

A4_FREQ: Final[float] = 440.0
"""Default tuning reference in Hz."""

CHROMATIC_FLATS: Final[tuple[str, ...]] = (
    "C", "Db", "D", "Eb", "E", "F", "Gb", "G", "Ab", "A", "Bb", "B",
)
CHROMATIC_SHARPS: Final[tuple[str, ...]] = (
    "C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B",
)

# ── Codec ────────────────────────────────────────────────────────────
PARSE_CACHE_SIZE: Final[Optional[int]] = None
"""Size of the default codec's parse cache (``None`` = never evicted)."""

# ── Dictionary data ──────────────────────────────────────────────────
CHORDS_FILE: Final[str] = "chords.json"
SCALES_FILE: Final[str] = "scales.json"
