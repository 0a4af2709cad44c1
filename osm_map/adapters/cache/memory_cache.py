"""Thread-safe in-memory response cache with TTL.

Default ResponseCachePort implementation:
- Thread-safe with RLock (last writer wins on duplicate keys)
- Time-based expiry, removed lazily on read
- Injectable clock for deterministic tests
- Statistics tracking
"""

from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from ...domain.errors import ConfigurationError
from ...domain.models import CacheEntry, Coordinate

DEFAULT_TTL_SECONDS = 24 * 60 * 60


@dataclass
class InMemoryResponseCache:
    """In-memory TTL map of resolved coordinates.

    Attributes:
        ttl_seconds: Lifetime of each entry
        name: Cache name for logging
        clock: Monotonic time source, in seconds

    Example:
        cache = InMemoryResponseCache(ttl_seconds=3600)
        cache.put(cache_key("Paris"), Coordinate(48.85, 2.35))
    """

    ttl_seconds: float = DEFAULT_TTL_SECONDS
    name: str = "geocode"
    clock: Callable[[], float] = field(default=time.monotonic, repr=False)

    _store: Dict[str, CacheEntry] = field(default_factory=dict, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    # Statistics
    _hits: int = field(default=0, repr=False)
    _misses: int = field(default=0, repr=False)

    def __post_init__(self) -> None:
        if self.ttl_seconds <= 0:
            raise ConfigurationError(
                f"Cache TTL must be positive, got {self.ttl_seconds}",
                setting_name="ttl_seconds",
                expected_type="float > 0",
            )
        self._logger = logging.getLogger(f"{__name__}.{self.name}")

    def get(self, key: str) -> Optional[Coordinate]:
        entry = self.entry(key)
        return entry.coordinate if entry is not None else None

    def entry(self, key: str) -> Optional[CacheEntry]:
        """Return the live entry for ``key``, dropping it if expired."""
        with self._lock:
            entry = self._store.get(key)
            if entry is None:
                self._misses += 1
                self._logger.debug("Cache miss", extra={"key": key})
                return None

            if entry.is_expired(self.clock()):
                del self._store[key]
                self._logger.debug("Cache entry expired", extra={"key": key})
                self._misses += 1
                return None

            self._hits += 1
            self._logger.debug("Cache hit", extra={"key": key})
            return entry

    def put(self, key: str, coordinate: Coordinate) -> None:
        with self._lock:
            now = self.clock()
            self._store[key] = CacheEntry(
                key=key,
                coordinate=coordinate,
                inserted_at=now,
                expires_at=now + self.ttl_seconds,
            )
            self._logger.debug(
                "Cache entry set",
                extra={"key": key, "ttl": self.ttl_seconds},
            )

    def invalidate(self, key: str) -> bool:
        with self._lock:
            if key in self._store:
                del self._store[key]
                self._logger.debug("Cache entry invalidated", extra={"key": key})
                return True
            return False

    def clear(self) -> int:
        with self._lock:
            count = len(self._store)
            self._store.clear()
            self._hits = 0
            self._misses = 0
            self._logger.info("Cache cleared", extra={"entries_cleared": count})
            return count

    def size(self) -> int:
        with self._lock:
            return len(self._store)

    def stats(self) -> Dict[str, Any]:
        """Return cache statistics.

        Returns:
            Dictionary with hit/miss counts and size.
        """
        with self._lock:
            total = self._hits + self._misses
            hit_rate = (self._hits / total * 100) if total > 0 else 0.0
            return {
                "size": len(self._store),
                "hits": self._hits,
                "misses": self._misses,
                "hit_rate_percent": round(hit_rate, 1),
            }
