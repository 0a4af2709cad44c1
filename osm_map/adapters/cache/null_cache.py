"""Null response cache.

Always misses, so every free-text resolution goes to the backend.
Useful in tests that count backend calls, and to rule out caching
when debugging.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

from ...domain.models import Coordinate


@dataclass
class NullResponseCache:
    """No-op cache - always misses."""

    name: str = "null"

    def get(self, key: str) -> Optional[Coordinate]:
        return None

    def put(self, key: str, coordinate: Coordinate) -> None:
        pass

    def invalidate(self, key: str) -> bool:
        return False

    def clear(self) -> int:
        return 0

    def size(self) -> int:
        return 0

    def stats(self) -> Dict[str, int]:
        return {
            "size": 0,
            "hits": 0,
            "misses": 0,
            "hit_rate_percent": 0,
        }
