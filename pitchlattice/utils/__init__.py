"""pitchlattice.utils — Note-list helpers and MIDI/frequency conversion."""

from pitchlattice.utils.collections import (
    compact,
    harmonize,
    intervals_from,
    pitch_set,
    rotate,
    split,
)
from pitchlattice.utils.tuning import freq, from_freq, from_midi, is_midi, midi

__all__: list[str] = [
    "split",
    "compact",
    "rotate",
    "harmonize",
    "intervals_from",
    "pitch_set",
    "midi",
    "is_midi",
    "from_midi",
    "freq",
    "from_freq",
]
