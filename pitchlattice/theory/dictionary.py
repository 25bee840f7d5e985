"""
pitchlattice.theory.dictionary
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

Name ↔ interval pattern ↔ chroma tables for chords and scales.

A :class:`PatternDictionary` is built once from a raw table and is
read-only afterwards. It keeps two levels of names (canonical name → entry,
alias → canonical name) and two value indexes (chroma → entries, canonical
pattern text → entries). Every lookup is an exact match.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Sequence, Tuple

from pitchlattice.config import CHORDS_FILE, SCALES_FILE
from pitchlattice.data.loader import load_table
from pitchlattice.errors import UnresolvedLookup
from pitchlattice.lattice.coords import Interval
from pitchlattice.notation.codec import NotationCodec, default_codec, format_interval
from pitchlattice.theory.chroma import Chroma
from pitchlattice.utils.collections import split

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DictionaryEntry:
    """One chord or scale type."""

    name: str
    intervals: Tuple[Interval, ...]
    aliases: Tuple[str, ...] = ()

    @property
    def interval_names(self) -> Tuple[str, ...]:
        return tuple(format_interval(i) for i in self.intervals)

    @property
    def pattern(self) -> str:
        """Canonical interval-list text, e.g. ``'1P 3M 5P 7M'``."""
        return " ".join(self.interval_names)

    @property
    def chroma(self) -> Chroma:
        return Chroma.from_pitch_classes(i.chroma for i in self.intervals)


class PatternDictionary:
    """Immutable two-level name table with chroma and pattern indexes.

    Parameters
    ----------
    entries : iterable of DictionaryEntry
        Entries in display order.
    label : str
        Name used in error messages (``'chords'``, ``'scales'``).

    Raises
    ------
    ValueError
        If a name or alias is declared twice.
    """

    def __init__(self, entries: Iterable[DictionaryEntry], label: str = "dictionary") -> None:
        self.label = label
        canonical: Dict[str, DictionaryEntry] = {}
        aliases: Dict[str, str] = {}
        by_chroma: Dict[int, List[DictionaryEntry]] = {}
        by_pattern: Dict[str, List[DictionaryEntry]] = {}

        for entry in entries:
            for key in (entry.name, *entry.aliases):
                if key in canonical or key in aliases:
                    raise ValueError(f"{label}: duplicate name {key!r}")
                aliases[key] = entry.name
            canonical[entry.name] = entry
            by_chroma.setdefault(entry.chroma.mask, []).append(entry)
            by_pattern.setdefault(entry.pattern, []).append(entry)

        self._entries = MappingProxyType(canonical)
        self._aliases = MappingProxyType(aliases)
        self._by_chroma = MappingProxyType({k: tuple(v) for k, v in by_chroma.items()})
        self._by_pattern = MappingProxyType({k: tuple(v) for k, v in by_pattern.items()})

    @classmethod
    def from_table(
        cls,
        table: Mapping[str, Tuple[str, Sequence[str]]],
        label: str = "dictionary",
        codec: NotationCodec = default_codec,
    ) -> PatternDictionary:
        """Build from ``name -> (interval text, aliases)``.

        Raises
        ------
        MalformedNotation
            If an interval token does not parse.
        """
        entries = []
        for name, (intervals_text, aliases) in table.items():
            intervals = tuple(codec.require_interval(tok) for tok in split(intervals_text))
            entries.append(DictionaryEntry(name, intervals, tuple(aliases)))
        dictionary = cls(entries, label)
        logger.debug(
            "built %s dictionary: %d entries, %d names",
            label, len(dictionary), len(dictionary._aliases),
        )
        return dictionary

    # ── Names ───────────────────────────────────────────────────────
    def resolve(self, name: str) -> Optional[str]:
        """Canonical name for a name or alias, ``None`` if unknown."""
        return self._aliases.get(name)

    def get(self, name: str) -> Optional[DictionaryEntry]:
        canonical = self.resolve(name)
        return None if canonical is None else self._entries[canonical]

    def __getitem__(self, name: str) -> DictionaryEntry:
        entry = self.get(name)
        if entry is None:
            raise UnresolvedLookup(name, self.label)
        return entry

    def __contains__(self, name: object) -> bool:
        return name in self._aliases

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def names(self, aliases: bool = False) -> List[str]:
        """Canonical names, or every accepted name when *aliases* is true."""
        return list(self._aliases if aliases else self._entries)

    # ── Values ──────────────────────────────────────────────────────
    def lookup(self, chroma: Chroma) -> Tuple[DictionaryEntry, ...]:
        """Entries whose chroma equals *chroma* exactly."""
        return self._by_chroma.get(chroma.mask, ())

    def lookup_pattern(
        self, pattern: str, codec: NotationCodec = default_codec
    ) -> Tuple[DictionaryEntry, ...]:
        """Entries whose interval list equals *pattern* token for token.

        Tokens are canonicalized first, so ``'P1 M3 P5'`` finds the same
        entries as ``'1P 3M 5P'``. Unparseable patterns match nothing.
        """
        names = [codec.canonical_interval(tok) for tok in split(pattern)]
        if None in names:
            return ()
        return self._by_pattern.get(" ".join(names), ())  # type: ignore[arg-type]

    def intervals_for(
        self, name: str, codec: NotationCodec = default_codec
    ) -> Optional[Tuple[Interval, ...]]:
        """Intervals of the entry called *name*.

        Unknown names are read as a literal interval list instead
        (``'1P 3M 5P 7m'``). Returns ``None`` if that fails too.
        """
        entry = self.get(name)
        if entry is not None:
            return entry.intervals
        parsed = [codec.interval(tok) for tok in split(name)]
        if not parsed or any(i is None for i in parsed):
            return None
        return tuple(parsed)  # type: ignore[arg-type]


@lru_cache(maxsize=None)
def chord_dictionary() -> PatternDictionary:
    """The packaged chord table (built on first use)."""
    return PatternDictionary.from_table(load_table(CHORDS_FILE), "chords")


@lru_cache(maxsize=None)
def scale_dictionary() -> PatternDictionary:
    """The packaged scale table (built on first use)."""
    return PatternDictionary.from_table(load_table(SCALES_FILE), "scales")
