"""Lightweight in-memory LRU cache for memoising pure computations.

Used by the view builder: filter/sort/aggregate results depend only on the
dataset generation and the filter state, so they never go stale and need no
expiry, only a size bound.
"""

import threading
from collections import OrderedDict
from typing import Any, Callable


class LRUCache:
    """Thread-safe least-recently-used cache.

    Usage::

        cache = LRUCache(maxsize=128)
        cache.set(("view", 1), view)
        value = cache.get(("view", 1))   # None if absent
        value = cache.get_or_compute(key, lambda: build(...))
    """

    def __init__(self, maxsize: int = 128) -> None:
        """Initialise the cache.

        Args:
            maxsize: Maximum number of entries to store (default 128).
                A value of 0 disables caching.
        """
        self._maxsize = max(0, maxsize)
        self._store: "OrderedDict[Any, Any]" = OrderedDict()
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0

    def get(self, key: Any) -> Any | None:
        """Return cached value for *key*, or ``None`` if absent."""
        with self._lock:
            if key not in self._store:
                self._misses += 1
                return None
            self._store.move_to_end(key)
            self._hits += 1
            return self._store[key]

    def set(self, key: Any, value: Any) -> None:
        """Store *value* under *key*, evicting the least recently used entry."""
        if self._maxsize == 0:
            return
        with self._lock:
            self._store[key] = value
            self._store.move_to_end(key)
            while len(self._store) > self._maxsize:
                self._store.popitem(last=False)

    def get_or_compute(self, key: Any, compute: Callable[[], Any]) -> Any:
        value = self.get(key)
        if value is None:
            value = compute()
            self.set(key, value)
        return value

    def clear(self) -> None:
        """Remove all entries and reset statistics."""
        with self._lock:
            self._store.clear()
            self._hits = 0
            self._misses = 0

    def stats(self) -> dict:
        """Return a snapshot of cache statistics.

        Returns:
            Dict with keys ``hits``, ``misses``, ``size``, ``maxsize``.
        """
        with self._lock:
            return {
                "hits": self._hits,
                "misses": self._misses,
                "size": len(self._store),
                "maxsize": self._maxsize,
            }

    def __len__(self) -> int:
        with self._lock:
            return len(self._store)
