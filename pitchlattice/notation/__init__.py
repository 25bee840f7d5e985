"""pitchlattice.notation — Text ↔ coordinate codec and its parse cache."""

from pitchlattice.notation.cache import CacheInfo, ParseCache
from pitchlattice.notation.codec import (
    INTERVAL_REGEX,
    PITCH_REGEX,
    NotationCodec,
    accidentals_to_alteration,
    alteration_to_accidentals,
    default_codec,
    format_coordinate,
    format_interval,
    format_pitch,
    parse_interval,
    parse_pitch,
)
from pitchlattice.notation.inputs import (
    Notation,
    NotationLike,
    Parsed,
    Raw,
    as_notation,
    is_notation,
)

__all__: list[str] = [
    "CacheInfo",
    "ParseCache",
    "NotationCodec",
    "default_codec",
    "PITCH_REGEX",
    "INTERVAL_REGEX",
    "parse_pitch",
    "parse_interval",
    "format_pitch",
    "format_interval",
    "format_coordinate",
    "accidentals_to_alteration",
    "alteration_to_accidentals",
    "Raw",
    "Parsed",
    "Notation",
    "NotationLike",
    "as_notation",
    "is_notation",
]
