"""Cache adapters - Implementations of ResponseCachePort.

Available implementations:
- InMemoryResponseCache: Thread-safe in-memory cache with TTL
- NullResponseCache: No-op cache (always misses)
"""

from .memory_cache import DEFAULT_TTL_SECONDS, InMemoryResponseCache
from .null_cache import NullResponseCache

__all__ = ["InMemoryResponseCache", "NullResponseCache", "DEFAULT_TTL_SECONDS"]
