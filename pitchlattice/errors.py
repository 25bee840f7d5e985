"""
pitchlattice.errors
~~~~~~~~~~~~~~~~~~~

Exception hierarchy.

Parsing itself never raises: malformed text decodes to ``None`` so callers
can fall back to treating the token as opaque data. The exceptions below are
raised only by the strict helpers and by dictionary lookups.
"""

from __future__ import annotations


class PitchLatticeError(Exception):
    """Base class for all library errors."""


class MalformedNotation(PitchLatticeError, ValueError):
    """Text does not match the pitch or interval grammar.

    Parameters
    ----------
    text : str
        The offending input.
    kind : str
        What the text was expected to be (``'pitch'``, ``'interval'``, …).
    """

    def __init__(self, text: str, kind: str = "notation") -> None:
        super().__init__(f"not a valid {kind}: {text!r}")
        self.text = text
        self.kind = kind


class UnresolvedLookup(PitchLatticeError, KeyError):
    """A name, alias or pattern is absent from a dictionary."""

    def __init__(self, key: str, dictionary: str = "dictionary") -> None:
        super().__init__(key)
        self.key = key
        self.dictionary = dictionary

    def __str__(self) -> str:
        return f"{self.key!r} not found in {self.dictionary}"
