"""Tests for the LRU cache."""

import time
import pytest
from hypothesis import given, strategies as st

from uiforge.core.cache import LRUCache


@pytest.mark.unit
def test_lru_basic():
    cache = LRUCache[str](max_size=3)

    cache.set("a", "value_a")
    cache.set("b", "value_b")
    cache.set("c", "value_c")

    assert cache.get("a") == "value_a"
    assert cache.get("c") == "value_c"
    assert len(cache) == 3


@pytest.mark.unit
def test_lru_order():
    """Most recently used entries survive eviction."""
    cache = LRUCache[str](max_size=2)

    cache.set("a", "value_a")
    cache.set("b", "value_b")
    _ = cache.get("a")
    cache.set("c", "value_c")

    assert cache.get("a") == "value_a"
    assert cache.get("b") is None
    assert cache.get("c") == "value_c"
    assert cache.stats.evictions == 1


@pytest.mark.unit
def test_lru_ttl():
    cache = LRUCache[str](max_size=10, ttl_seconds=1)

    cache.set("key", "value")
    assert cache.get("key") == "value"

    time.sleep(1.1)

    assert cache.get("key") is None
    assert "key" not in cache


@pytest.mark.unit
def test_lru_update():
    cache = LRUCache[str](max_size=10)

    cache.set("key", "value1")
    cache.set("key", "value2")

    assert cache.get("key") == "value2"
    assert len(cache) == 1


@pytest.mark.unit
def test_lru_delete_and_clear():
    cache = LRUCache[str](max_size=10)
    cache.set("a", "1")
    cache.set("b", "2")

    assert cache.delete("a") is True
    assert cache.delete("a") is False

    cache.clear()

    assert len(cache) == 0
    assert cache.stats.size == 0


@pytest.mark.unit
def test_stats():
    cache = LRUCache[str](max_size=10)
    cache.set("key", "value")

    _ = cache.get("key")
    _ = cache.get("missing")

    stats = cache.stats.to_dict()
    assert stats["hits"] == 1
    assert stats["misses"] == 1
    assert stats["hit_rate"] == 0.5
    assert stats["size"] == 1


@pytest.mark.unit
def test_invalid_size():
    with pytest.raises(ValueError):
        LRUCache(max_size=0)


@given(st.lists(st.text(min_size=1, max_size=8), max_size=50))
def test_size_bounded(keys):
    """Property test: the cache never exceeds max_size."""
    cache = LRUCache[int](max_size=5)
    for i, key in enumerate(keys):
        cache.set(key, i)
        assert len(cache) <= 5
