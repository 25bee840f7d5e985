"""
pitchlattice.notation.cache
~~~~~~~~~~~~~~~~~~~~~~~~~~~

Memo table for parse results.

The cache is an ordinary object handed to a :class:`~pitchlattice.notation.
codec.NotationCodec`; nothing is stored at module level. Unbounded caches
are append-only and never invalidated. Bounded caches drop their oldest
entry first.
"""

from __future__ import annotations

import logging
from collections import OrderedDict
from typing import Callable, Hashable, NamedTuple, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class CacheInfo(NamedTuple):
    hits: int
    misses: int
    maxsize: Optional[int]
    currsize: int


class ParseCache:
    """Key → parse result store.

    Parameters
    ----------
    maxsize : int, optional
        Maximum number of entries. ``None`` (default) never evicts.
    """

    def __init__(self, maxsize: Optional[int] = None) -> None:
        if maxsize is not None and maxsize < 1:
            raise ValueError(f"maxsize must be positive or None, got {maxsize}")
        self.maxsize = maxsize
        self._store: OrderedDict[Hashable, object] = OrderedDict()
        self._hits = 0
        self._misses = 0

    def get_or_compute(self, key: Hashable, compute: Callable[[], T]) -> T:
        """Return the stored value for ``key``, computing it on first use.

        ``None`` results are stored too, so invalid text is only matched
        against the grammar once.
        """
        if key in self._store:
            self._hits += 1
            return self._store[key]  # type: ignore[return-value]
        self._misses += 1
        value = compute()
        self._store[key] = value
        if self.maxsize is not None and len(self._store) > self.maxsize:
            evicted, _ = self._store.popitem(last=False)
            logger.debug("parse cache full (%d), evicted %r", self.maxsize, evicted)
        return value

    def info(self) -> CacheInfo:
        return CacheInfo(self._hits, self._misses, self.maxsize, len(self._store))

    def clear(self) -> None:
        self._store.clear()
        self._hits = 0
        self._misses = 0

    def __len__(self) -> int:
        return len(self._store)

    def __contains__(self, key: Hashable) -> bool:
        return key in self._store
