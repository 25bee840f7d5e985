"""
pitchlattice.notation.inputs
~~~~~~~~~~~~~~~~~~~~~~~~~~~~

Tagged input type shared by every public entry point.

Functions accept either notation text or an already-decoded coordinate.
:func:`as_notation` turns whatever was passed into exactly one of
:class:`Raw` or :class:`Parsed` at the function boundary; the codec then
decodes ``Raw`` values and passes ``Parsed`` ones through untouched.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from pitchlattice.lattice.coords import Interval, Pitch

Coordinate = Union[Pitch, Interval]


@dataclass(frozen=True)
class Raw:
    """Undecoded notation text."""

    text: str


@dataclass(frozen=True)
class Parsed:
    """An already-decoded coordinate."""

    value: Coordinate


Notation = Union[Raw, Parsed]
NotationLike = Union[str, Pitch, Interval, Raw, Parsed]


def is_notation(obj: object) -> bool:
    """True when :func:`as_notation` accepts ``obj``."""
    return isinstance(obj, (str, Pitch, Interval, Raw, Parsed))


def as_notation(obj: NotationLike) -> Notation:
    """Tag ``obj`` as :class:`Raw` text or a :class:`Parsed` coordinate.

    Raises
    ------
    TypeError
        If ``obj`` is neither text nor a coordinate.
    """
    if isinstance(obj, (Raw, Parsed)):
        return obj
    if isinstance(obj, str):
        return Raw(obj)
    if isinstance(obj, (Pitch, Interval)):
        return Parsed(obj)
    raise TypeError(
        f"expected notation text or a Pitch/Interval, got {type(obj).__name__}"
    )
