"""Cache subsystem: bounded in-memory LRU keyed on trimmed input."""

from tw2css.cache.memory import LRUCache
from tw2css.cache.stats import CacheStatus

__all__ = [
    "CacheStatus",
    "LRUCache",
]
