"""Cache port - Injectable store for geocoding responses.

Any store honoring this protocol can back a CoordinateResolver: the
in-memory TTL map, the null cache, or an adapter over a distributed
cache. The resolver only ever calls ``get`` and ``put``.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Optional, Protocol

if TYPE_CHECKING:
    from ..domain.models import Coordinate

DEFAULT_NAMESPACE = "osm_map.geocode"

_WHITESPACE_RE = re.compile(r"\s+")


def normalize_query(text: str) -> str:
    """Trim and collapse whitespace runs to one space; case is preserved."""
    return _WHITESPACE_RE.sub(" ", text).strip()


def cache_key(text: str, namespace: str = DEFAULT_NAMESPACE) -> str:
    """Build the namespaced cache key for a free-text query.

    Example:
        >>> cache_key("  New   York ")
        'osm_map.geocode:New York'
    """
    return f"{namespace}:{normalize_query(text)}"


class ResponseCachePort(Protocol):
    """Port for caching resolved coordinates.

    Implementations:
    - adapters/cache/memory_cache.py (InMemoryResponseCache) - Default
    - adapters/cache/null_cache.py (NullResponseCache) - Never hits

    Entries expire after a TTL; an expired entry behaves as absent.
    Implementations must be safe under concurrent get/put.
    """

    def get(self, key: str) -> Optional[Coordinate]:
        """Get a live coordinate from the cache.

        Args:
            key: The cache key.

        Returns:
            The cached coordinate, or None if not found or expired.
        """
        ...

    def put(self, key: str, coordinate: Coordinate) -> None:
        """Store a coordinate under ``key``, replacing any previous entry.

        Args:
            key: The cache key.
            coordinate: The resolved coordinate.
        """
        ...

    def invalidate(self, key: str) -> bool:
        """Remove a specific entry.

        Returns:
            True if the key existed and was removed, False otherwise.
        """
        ...

    def clear(self) -> int:
        """Remove all entries.

        Returns:
            Number of entries that were cleared.
        """
        ...

    def size(self) -> int:
        """Return the number of stored entries, live or not yet swept."""
        ...
