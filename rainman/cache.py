"""In-process TTL cache for provider payloads."""

import logging
from time import time

from rainman.models import CacheEntry, CacheKey

LOGGER = logging.getLogger("rainman.cache")


class WeatherCache:
    """Map rounded coordinates to payloads; expired entries are dropped when read."""

    def __init__(self, ttl_seconds: float, clock_fn=None):
        self.ttl_seconds = ttl_seconds
        self.clock_fn = clock_fn or time
        self._entries: dict[CacheKey, CacheEntry] = {}

    def _now_ms(self) -> float:
        return self.clock_fn() * 1000

    def __contains__(self, key: CacheKey) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def entry(self, key: CacheKey) -> CacheEntry | None:
        return self._entries.get(key)

    def is_valid(self, key: CacheKey) -> bool:
        """Return True if a live entry exists for `key`; an expired entry is deleted."""
        entry = self._entries.get(key)
        if entry is None:
            return False
        if entry.is_live(self._now_ms()):
            return True
        del self._entries[key]
        LOGGER.debug("Cache entry %s expired; removed.", key)
        return False

    def lookup(self, key: CacheKey) -> CacheEntry | None:
        if self.is_valid(key):
            return self._entries[key]
        return None

    def put(self, key: CacheKey, data) -> CacheEntry:
        entry = CacheEntry(data=data, expires_at=self._now_ms() + self.ttl_seconds * 1000)
        self._entries[key] = entry
        return entry
