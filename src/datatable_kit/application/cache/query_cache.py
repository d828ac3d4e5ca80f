"""Application cache – QueryCache for fetched pages."""
from __future__ import annotations

import dataclasses
import time
from typing import Callable, Generic, TypeVar

T = TypeVar("T")

__all__ = ["CacheEntry", "QueryCache"]


@dataclasses.dataclass(frozen=True)
class CacheEntry(Generic[T]):
    value: T
    stored_at: float
    expires_at: float


class QueryCache(Generic[T]):
    """In-memory TTL cache keyed by a table query's cache key.

    Expired entries are dropped on access. When more than ``max_size``
    entries are held, expired entries go first, then the oldest ones.
    """

    def __init__(
        self,
        ttl_seconds: float = 300.0,
        max_size: int = 100,
        now: Callable[[], float] | None = None,
    ) -> None:
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be > 0")
        if max_size < 1:
            raise ValueError("max_size must be >= 1")
        self.ttl_seconds = ttl_seconds
        self.max_size = max_size
        self._now = now or time.monotonic
        self._entries: dict[str, CacheEntry[T]] = {}

    @property
    def size(self) -> int:
        return len(self._entries)

    def get(self, key: str) -> T | None:
        entry = self._entries.get(key)
        if entry is None:
            return None
        if entry.expires_at <= self._now():
            self._entries.pop(key, None)
            return None
        return entry.value

    def set(self, key: str, value: T, ttl: float | None = None) -> None:
        now = self._now()
        self._entries.pop(key, None)
        ttl = ttl if ttl is not None else self.ttl_seconds
        self._entries[key] = CacheEntry(value=value, stored_at=now, expires_at=now + ttl)
        if len(self._entries) > self.max_size:
            self._evict()

    def has(self, key: str) -> bool:
        return self.get(key) is not None

    def is_expired(self, key: str) -> bool:
        """``True`` for unknown keys and for entries past their TTL."""
        entry = self._entries.get(key)
        return entry is None or entry.expires_at <= self._now()

    def remove(self, key: str) -> bool:
        return self._entries.pop(key, None) is not None

    def clear(self) -> None:
        self._entries.clear()

    def keys(self) -> list[str]:
        return list(self._entries)

    def _evict(self) -> None:
        now = self._now()
        for key in [k for k, e in self._entries.items() if e.expires_at <= now]:
            del self._entries[key]
        overflow = len(self._entries) - self.max_size
        if overflow > 0:
            oldest = sorted(self._entries.items(), key=lambda item: item[1].stored_at)[:overflow]
            for key, _ in oldest:
                del self._entries[key]
