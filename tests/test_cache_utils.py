"""Tests for utils/cache.py — bounded LRU memo cache."""
from utils.cache import LRUCache


class TestLRUCache:
    def test_basic_set_get(self):
        cache = LRUCache()
        cache.set("key", "value")
        assert cache.get("key") == "value"

    def test_miss_returns_none(self):
        cache = LRUCache()
        assert cache.get("nonexistent") is None

    def test_clear(self):
        cache = LRUCache()
        cache.set("k1", "v1")
        cache.set("k2", "v2")
        cache.clear()
        assert cache.get("k1") is None
        assert len(cache) == 0

    def test_stats_tracks_hits_misses(self):
        cache = LRUCache()
        cache.set("k", "v")
        cache.get("k")    # hit
        cache.get("nope") # miss
        stats = cache.stats()
        assert stats["hits"] == 1
        assert stats["misses"] == 1

    def test_stats_size_and_maxsize(self):
        cache = LRUCache(maxsize=5)
        cache.set("a", 1)
        cache.set("b", 2)
        assert cache.stats()["size"] == 2
        assert cache.stats()["maxsize"] == 5

    def test_evicts_least_recently_used(self):
        cache = LRUCache(maxsize=2)
        cache.set("k1", "v1")
        cache.set("k2", "v2")
        cache.get("k1")          # k2 is now the oldest
        cache.set("k3", "v3")
        assert cache.get("k2") is None
        assert cache.get("k1") == "v1"
        assert cache.get("k3") == "v3"

    def test_overwrite_existing(self):
        cache = LRUCache()
        cache.set("k", "old")
        cache.set("k", "new")
        assert cache.get("k") == "new"
        assert len(cache) == 1

    def test_zero_maxsize_disables(self):
        cache = LRUCache(maxsize=0)
        cache.set("k", "v")
        assert cache.get("k") is None


class TestGetOrCompute:
    def test_computes_once(self):
        cache = LRUCache()
        calls = []

        def compute():
            calls.append(1)
            return "value"

        assert cache.get_or_compute("k", compute) == "value"
        assert cache.get_or_compute("k", compute) == "value"
        assert len(calls) == 1

    def test_tuple_keys(self):
        cache = LRUCache()
        cache.get_or_compute(("view", 1), lambda: "a")
        assert cache.get(("view", 1)) == "a"
        assert cache.get(("view", 2)) is None
