"""
pitchlattice.theory.detect
~~~~~~~~~~~~~~~~~~~~~~~~~~

Chord and scale recognition from arbitrary note collections.

Every distinct pitch class in the input is tried as a root. The chroma of
the whole collection measured from that root is looked up in a
:class:`~pitchlattice.theory.dictionary.PatternDictionary`; each hit becomes
a label. When the root is not the first (bass) note the label gets a
``/Bass`` suffix.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Union

from pitchlattice.lattice.coords import Pitch
from pitchlattice.notation.codec import NotationCodec, default_codec, format_pitch
from pitchlattice.notation.inputs import NotationLike
from pitchlattice.theory.chroma import relative_chroma
from pitchlattice.theory.dictionary import PatternDictionary, chord_dictionary, scale_dictionary
from pitchlattice.utils.collections import split

logger = logging.getLogger(__name__)

CHORD_TEMPLATE = "{root}{name}"
SCALE_TEMPLATE = "{root} {name}"


class Detector:
    """Matches note collections against one pattern dictionary.

    Parameters
    ----------
    dictionary : PatternDictionary
        Table to match against.
    template : str
        Label format with ``{root}`` and ``{name}`` fields.
    slash_bass : bool
        Append ``/Bass`` when the root is not the first note.
    codec : NotationCodec, optional
        Parser used for text input.
    """

    def __init__(
        self,
        dictionary: PatternDictionary,
        template: str = CHORD_TEMPLATE,
        slash_bass: bool = True,
        codec: NotationCodec = default_codec,
    ) -> None:
        self.dictionary = dictionary
        self.template = template
        self.slash_bass = slash_bass
        self.codec = codec

    def _resolve(self, notes: Union[str, Iterable[NotationLike]]) -> List[Pitch]:
        return self.codec.pitches(split(notes))

    def detect(self, notes: Union[str, Iterable[NotationLike]]) -> List[str]:
        """Every name the collection matches, in rotation order.

        Parameters
        ----------
        notes : str or iterable
            Notes as text or :class:`Pitch`; unparseable entries are
            skipped. The first parseable note is the bass.

        Returns
        -------
        list[str]
            Labels such as ``'D7'`` or ``'D7/F#'``. Empty when nothing
            matches or nothing parses.

        Examples
        --------
        >>> detect(['F#', 'A', 'C', 'D'])
        ['D7/F#']
        """
        pitches = self._resolve(notes)
        if not pitches:
            return []

        bass = pitches[0]
        roots: List[Pitch] = []
        seen = set()
        for p in pitches:
            if p.chroma not in seen:
                seen.add(p.chroma)
                roots.append(p)

        found: List[str] = []
        for root in roots:
            signature = relative_chroma(root, pitches)
            for entry in self.dictionary.lookup(signature):
                label = self.template.format(
                    root=format_pitch(root.pitch_class()), name=entry.name
                )
                if self.slash_bass and root.chroma != bass.chroma:
                    label += "/" + format_pitch(bass.pitch_class())
                if label not in found:
                    found.append(label)

        logger.debug(
            "%s: %d candidate roots, %d matches",
            self.dictionary.label, len(roots), len(found),
        )
        return found

    __call__ = detect


def detect(notes: Union[str, Iterable[NotationLike]]) -> List[str]:
    """Chord names for a note collection (see :meth:`Detector.detect`).

    Examples
    --------
    >>> detect(['E', 'G#', 'B', 'C#'])
    ['E6', 'C#m7/E']
    >>> detect(['C', 'E', 'G#'])
    ['Caug', 'Eaug/C', 'G#aug/C']
    """
    return Detector(chord_dictionary(), CHORD_TEMPLATE).detect(notes)


def detect_scale(notes: Union[str, Iterable[NotationLike]]) -> List[str]:
    """Scale names for a note collection.

    Every mode that fits is reported under its own root, without a bass
    suffix.

    Examples
    --------
    >>> detect_scale('C D E F G A B')[:2]
    ['C major', 'D dorian']
    """
    return Detector(scale_dictionary(), SCALE_TEMPLATE, slash_bass=False).detect(notes)
