"""LRU cache with TTL and statistics for generated code.

Keys are design fingerprints (see ``hash_fields``); values are whatever the
caller memoizes, typically a ``GenerationResult``.
"""

import time
from typing import Generic, TypeVar, Any
from collections import OrderedDict
from dataclasses import dataclass

T = TypeVar("T")


@dataclass
class Stats:
    """Cache statistics."""

    size: int = 0
    max_size: int = 0
    hits: int = 0
    misses: int = 0
    evictions: int = 0

    @property
    def hit_rate(self) -> float:
        """Calculate hit rate (0.0 to 1.0)."""
        total = self.hits + self.misses
        return self.hits / total if total > 0 else 0.0

    def to_dict(self) -> dict[str, Any]:
        """Export as dictionary."""
        return {
            "size": self.size,
            "max_size": self.max_size,
            "hits": self.hits,
            "misses": self.misses,
            "evictions": self.evictions,
            "hit_rate": self.hit_rate,
        }


class LRUCache(Generic[T]):
    """
    LRU cache with optional TTL expiration.

    Examples:
        >>> cache = LRUCache[str](max_size=100, ttl_seconds=600)
        >>> cache.set("fingerprint", "<div />")
        >>> cache.get("fingerprint")
        '<div />'
        >>> cache.stats.hit_rate
        1.0
    """

    def __init__(self, max_size: int = 128, ttl_seconds: int | None = None):
        """
        Initialize LRU cache.

        Args:
            max_size: Maximum number of entries
            ttl_seconds: Time-to-live in seconds (None = no expiration)
        """
        if max_size <= 0:
            raise ValueError("max_size must be positive")

        self.max_size = max_size
        self.ttl_seconds = ttl_seconds

        self._entries: OrderedDict[str, tuple[T, float]] = OrderedDict()
        self._stats = Stats(max_size=max_size)

    def _is_expired(self, stored_at: float) -> bool:
        if self.ttl_seconds is None:
            return False
        return time.monotonic() - stored_at >= self.ttl_seconds

    def get(self, key: str) -> T | None:
        """Return the cached value, or None when missing or expired."""
        entry = self._entries.get(key)
        if entry is None:
            self._stats.misses += 1
            return None

        value, stored_at = entry
        if self._is_expired(stored_at):
            del self._entries[key]
            self._stats.size = len(self._entries)
            self._stats.misses += 1
            return None

        self._entries.move_to_end(key)
        self._stats.hits += 1
        return value

    def set(self, key: str, value: T) -> None:
        """Store value, evicting the least recently used entry when full."""
        self._entries.pop(key, None)
        self._entries[key] = (value, time.monotonic())

        if len(self._entries) > self.max_size:
            self._entries.popitem(last=False)
            self._stats.evictions += 1

        self._stats.size = len(self._entries)

    def delete(self, key: str) -> bool:
        """Delete entry; returns False if it was not cached."""
        if key in self._entries:
            del self._entries[key]
            self._stats.size = len(self._entries)
            return True
        return False

    def clear(self) -> None:
        """Clear entire cache."""
        self._entries.clear()
        self._stats.size = 0

    @property
    def stats(self) -> Stats:
        return self._stats

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: str) -> bool:
        """Check if key exists (doesn't update LRU order)."""
        return key in self._entries


__all__ = ["LRUCache", "Stats"]
