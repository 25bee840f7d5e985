"""pitchlattice.theory — Chroma signatures, pattern dictionaries, detection, keys."""

from pitchlattice.theory.chords import chord, chord_names, chord_notes, tokenize_chord
from pitchlattice.theory.chroma import Chroma, chroma, relative_chroma
from pitchlattice.theory.detect import Detector, detect, detect_scale
from pitchlattice.theory.dictionary import (
    DictionaryEntry,
    PatternDictionary,
    chord_dictionary,
    scale_dictionary,
)
from pitchlattice.theory.key import Key, from_alteration, key, key_names, mode_names
from pitchlattice.theory.progression import (
    ROMAN_REGEX,
    RomanNumeral,
    abstract_progression,
    build_progression,
    parse_roman,
)
from pitchlattice.theory.scales import scale, scale_names, scale_notes, tokenize_scale

__all__: list[str] = [
    "Chroma",
    "chroma",
    "relative_chroma",
    "DictionaryEntry",
    "PatternDictionary",
    "chord_dictionary",
    "scale_dictionary",
    "Detector",
    "detect",
    "detect_scale",
    "chord",
    "chord_notes",
    "chord_names",
    "tokenize_chord",
    "scale",
    "scale_notes",
    "scale_names",
    "tokenize_scale",
    "Key",
    "key",
    "mode_names",
    "from_alteration",
    "key_names",
    "ROMAN_REGEX",
    "RomanNumeral",
    "parse_roman",
    "build_progression",
    "abstract_progression",
]
