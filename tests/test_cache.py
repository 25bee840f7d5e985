import logging

import pytest

from pitchlattice.notation.cache import CacheInfo, ParseCache


def test_unbounded_cache_keeps_everything():
    cache = ParseCache()
    for i in range(1000):
        cache.get_or_compute(i, lambda i=i: i * 2)
    assert len(cache) == 1000
    assert cache.info() == CacheInfo(hits=0, misses=1000, maxsize=None, currsize=1000)


def test_compute_runs_once_per_key():
    calls = []

    def compute():
        calls.append(1)
        return "value"

    cache = ParseCache()
    assert cache.get_or_compute("k", compute) == "value"
    assert cache.get_or_compute("k", compute) == "value"
    assert len(calls) == 1
    assert "k" in cache


def test_bounded_cache_evicts_oldest_first(caplog):
    cache = ParseCache(maxsize=2)
    with caplog.at_level(logging.DEBUG, logger="pitchlattice.notation.cache"):
        cache.get_or_compute("a", lambda: 1)
        cache.get_or_compute("b", lambda: 2)
        cache.get_or_compute("a", lambda: 99)
        cache.get_or_compute("c", lambda: 3)
    assert "a" not in cache
    assert "b" in cache and "c" in cache
    assert cache.info().currsize == 2
    assert any("evicted" in r.message for r in caplog.records)


def test_clear_resets_counters():
    cache = ParseCache()
    cache.get_or_compute("x", lambda: None)
    cache.get_or_compute("x", lambda: None)
    cache.clear()
    assert cache.info() == CacheInfo(0, 0, None, 0)


@pytest.mark.parametrize("maxsize", [0, -1])
def test_rejects_non_positive_size(maxsize):
    with pytest.raises(ValueError):
        ParseCache(maxsize)
