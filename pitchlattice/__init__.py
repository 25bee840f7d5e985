"""
pitchlattice
~~~~~~~~~~~~

Music notation on the line of fifths: exact pitch and interval arithmetic,
plus chord and scale recognition.

Quick-start::

    import pitchlattice as pl

    # Text in, text out
    pl.transpose("C4", "3M")            # 'E4'
    pl.interval("C3", "A2")             # '-3m'
    pl.simplify_enharmonic("C##")       # 'D'

    # Lattice coordinates
    p = pl.parse_pitch("Cb4")           # Pitch(fifths=-7, octaves=8)

    # Recognition
    pl.detect(["F#", "A", "C", "D"])    # ['D7/F#']
    pl.chroma("C E G B").binary         # '100010010001'

    # Builders
    pl.chord("maj7", "C")               # ['C', 'E', 'G', 'B']
    pl.key("A major").scale             # ('A', 'B', 'C#', 'D', 'E', 'F#', 'G#')

Subpackages
-----------
lattice   Pitch/Interval coordinates and integer arithmetic.
notation  Parsing and formatting of note and interval names.
theory    Chroma, chord/scale dictionaries, detection, keys, progressions.
data      Packaged chord and scale tables.
utils     Note-list helpers and MIDI/frequency conversion.
"""

from __future__ import annotations

__version__: str = "0.1.0"

# ── Text API ─────────────────────────────────────────────────────────
from pitchlattice.core import (
    add,
    distance_in_semitones,
    enharmonics,
    fifths,
    interval,
    interval_from,
    invert,
    note_name,
    pitch_class,
    semitones,
    simplify,
    simplify_enharmonic,
    subtract,
    transpose,
    transpose_fifths,
    transposer,
)

# ── Coordinates ──────────────────────────────────────────────────────
from pitchlattice.lattice.coords import Interval, Pitch

# ── Notation ─────────────────────────────────────────────────────────
from pitchlattice.notation import (
    NotationCodec,
    ParseCache,
    Parsed,
    Raw,
    default_codec,
    parse_interval,
    parse_pitch,
)

# ── Theory ───────────────────────────────────────────────────────────
from pitchlattice.theory import (
    Chroma,
    Detector,
    Key,
    PatternDictionary,
    build_progression,
    chord,
    chord_notes,
    chroma,
    detect,
    detect_scale,
    key,
    parse_roman,
    scale,
    scale_notes,
)

# ── Utils ────────────────────────────────────────────────────────────
from pitchlattice.utils import freq, from_freq, from_midi, harmonize, midi, split

# ── Errors ───────────────────────────────────────────────────────────
from pitchlattice.errors import MalformedNotation, PitchLatticeError, UnresolvedLookup

# ── Config (re-export constants for convenience) ─────────────────────
from pitchlattice.config import A4_FREQ, MIDI_OFFSET

__all__: list[str] = [
    # text api
    "transpose",
    "transposer",
    "interval",
    "interval_from",
    "add",
    "subtract",
    "semitones",
    "distance_in_semitones",
    "fifths",
    "transpose_fifths",
    "note_name",
    "pitch_class",
    "enharmonics",
    "simplify_enharmonic",
    "simplify",
    "invert",
    # coordinates
    "Pitch",
    "Interval",
    # notation
    "NotationCodec",
    "ParseCache",
    "Raw",
    "Parsed",
    "default_codec",
    "parse_pitch",
    "parse_interval",
    # theory
    "Chroma",
    "chroma",
    "PatternDictionary",
    "Detector",
    "detect",
    "detect_scale",
    "chord",
    "chord_notes",
    "scale",
    "scale_notes",
    "Key",
    "key",
    "parse_roman",
    "build_progression",
    # utils
    "split",
    "harmonize",
    "midi",
    "from_midi",
    "freq",
    "from_freq",
    # errors
    "PitchLatticeError",
    "MalformedNotation",
    "UnresolvedLookup",
    # config
    "A4_FREQ",
    "MIDI_OFFSET",
]
