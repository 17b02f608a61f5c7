"""
Chart Image Cache

In-memory, content-addressed store for rendered chart images shared by all
callers in the process. Entries are immutable once written; the cache is
bounded by entry count (oldest inserted evicted first) and optionally by
age.
"""

from __future__ import annotations

import hashlib
import json
import threading
import time
from collections import OrderedDict
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from loguru import logger


@dataclass(frozen=True)
class CacheEntry:
    value: str
    created_at: float
    size: int


def build_cache_key(chart_type: str, tier: str, payload: Any) -> str:
    """
    Derive a deterministic key from chart type, tier and a JSON-serialisable payload.

    Dict keys are sorted before hashing so logically equal inputs share a key.
    """
    serialized = json.dumps(payload, sort_keys=True, separators=(',', ':'), default=str)
    digest = hashlib.sha256(serialized.encode('utf-8')).hexdigest()[:16]
    return f"chart_{chart_type}_{tier}_{digest}"


class ChartCache:
    """
    Bounded chart image cache

    - FIFO eviction once more than max_size entries are stored
    - Entries older than ttl_seconds are treated as misses and dropped
    - All operations are guarded by a single lock
    """

    def __init__(
        self,
        max_size: int = 100,
        ttl_seconds: Optional[float] = 1800.0,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Initialize cache

        Args:
            max_size: Maximum number of entries
            ttl_seconds: Entry lifetime in seconds; None or 0 disables expiry
            clock: Time source (seconds), injectable for tests
        """
        if max_size < 1:
            raise ValueError("max_size must be at least 1")
        self.max_size = max_size
        self.ttl_seconds = ttl_seconds or None
        self._clock = clock
        self._entries: OrderedDict[str, CacheEntry] = OrderedDict()
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0

    def _is_expired(self, entry: CacheEntry) -> bool:
        return self.ttl_seconds is not None and self._clock() - entry.created_at > self.ttl_seconds

    def get(self, key: str) -> Optional[str]:
        with self._lock:
            entry = self._entries.get(key)
            if entry is not None and self._is_expired(entry):
                del self._entries[key]
                logger.debug(f"Chart cache entry expired: {key}")
                entry = None

            if entry is None:
                self._misses += 1
                return None

            self._hits += 1
            return entry.value

    def set(self, key: str, value: str) -> None:
        with self._lock:
            # A racing writer may have stored the same key; keep the first insertion slot
            if key in self._entries and not self._is_expired(self._entries[key]):
                return
            self._entries.pop(key, None)
            self._entries[key] = CacheEntry(value=value, created_at=self._clock(), size=len(value))

            while len(self._entries) > self.max_size:
                evicted, _ = self._entries.popitem(last=False)
                logger.debug(f"Chart cache evicted oldest entry: {evicted}")

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self._hits = 0
            self._misses = 0

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def stats(self) -> Dict[str, Any]:
        """Snapshot of cache size and hit statistics"""
        with self._lock:
            lookups = self._hits + self._misses
            return {
                'size': len(self._entries),
                'max_size': self.max_size,
                'total_data_size': sum(entry.size for entry in self._entries.values()),
                'hits': self._hits,
                'misses': self._misses,
                'hit_rate': self._hits / lookups if lookups else 0.0,
            }


__all__ = ["CacheEntry", "ChartCache", "build_cache_key"]
