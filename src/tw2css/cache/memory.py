"""In-memory LRU cache with a fixed entry capacity."""

from __future__ import annotations

from collections import OrderedDict
from typing import Generic, Hashable, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class LRUCache(Generic[K, V]):
    """Bounded key → value store with least-recently-used eviction.

    Not synchronized: one logical sequence of conversions at a time.
    """

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError(f"Cache capacity must be positive, got {capacity}")
        self._store: OrderedDict[K, V] = OrderedDict()
        self._capacity = capacity

    @property
    def capacity(self) -> int:
        return self._capacity

    def get(self, key: K) -> V | None:
        if key not in self._store:
            return None
        # Move to end (most recently used)
        self._store.move_to_end(key)
        return self._store[key]

    def set(self, key: K, value: V) -> None:
        if key in self._store:
            del self._store[key]
        elif len(self._store) >= self._capacity:
            self._evict_oldest()
        self._store[key] = value

    def clear(self) -> None:
        self._store.clear()

    def size(self) -> int:
        return len(self._store)

    def keys(self) -> list[K]:
        """Keys from least to most recently used."""
        return list(self._store)

    def __len__(self) -> int:
        return len(self._store)

    def __contains__(self, key: object) -> bool:
        return key in self._store

    def _evict_oldest(self) -> None:
        if self._store:
            self._store.popitem(last=False)
