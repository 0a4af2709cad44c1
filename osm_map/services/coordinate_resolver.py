"""Coordinate resolver - turns one map entry into a Coordinate.

Resolution order for a single entry:
1. explicit coordinates are validated and returned (no I/O)
2. blank labels fail with EMPTY_QUERY
3. a live cache entry is returned without throttling or backend calls
4. otherwise throttle, call the backend, cache the success

Failures come back as ResolutionFailure values. Nothing is retried and
failed lookups are never cached.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Any, Iterable, List, Optional, Union

from ..adapters.cache.memory_cache import InMemoryResponseCache
from ..domain.errors import (
    GeocodingError,
    InvalidCoordinateFormat,
    InvalidCoordinateRange,
    UnresolvableLocation,
)
from ..domain.models import Coordinate, FailureReason, LocationQuery, ResolutionFailure
from ..ports.cache import DEFAULT_NAMESPACE, ResponseCachePort, cache_key, normalize_query
from ..ports.geocoding import GeocodeBackendPort
from .. import validation
from .rate_limiter import RateLimiter

Resolution = Union[Coordinate, ResolutionFailure]


@dataclass
class CoordinateResolver:
    """Resolves LocationQuery entries through cache, limiter and backend.

    One instance owns one cache and one rate limiter; separate instances
    share nothing. Safe to call from several threads at once.

    Attributes:
        backend: Geocoding backend for free-text queries
        cache: Response cache (shared by all calls on this instance)
        rate_limiter: Throttle applied before each backend call
        namespace: Cache key prefix
    """

    backend: GeocodeBackendPort
    cache: ResponseCachePort = field(default_factory=InMemoryResponseCache)
    rate_limiter: RateLimiter = field(default_factory=RateLimiter)
    namespace: str = DEFAULT_NAMESPACE

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def resolve(self, query: Union[LocationQuery, Any]) -> Resolution:
        """Resolve one entry.

        Args:
            query: A LocationQuery, or any shape accepted by
                LocationQuery.from_entry.

        Returns:
            The Coordinate, or a ResolutionFailure describing why not.

        Raises:
            TypeError, ValueError: If the entry itself is malformed.
        """
        query = LocationQuery.from_entry(query)

        if query.has_coordinates:
            return self._resolve_coordinates(query)

        label = query.label or ""
        if not label.strip():
            return self._fail(query, FailureReason.EMPTY_QUERY, "Empty location query")

        key = cache_key(label, self.namespace)
        cached = self.cache.get(key)
        if cached is not None:
            self._logger.debug("Geocode cache hit", extra={"query": label})
            return cached

        self.rate_limiter.wait()
        try:
            coordinate = self.backend.resolve(normalize_query(label))
        except UnresolvableLocation as e:
            return self._fail(query, FailureReason.UNRESOLVABLE, str(e), e)
        except GeocodingError as e:
            return self._fail(query, FailureReason.BACKEND_UNAVAILABLE, str(e), e)

        # Backends validate, but a third-party port implementation may not.
        if not isinstance(coordinate, Coordinate):
            return self._fail(
                query,
                FailureReason.UNRESOLVABLE,
                f"Backend returned {type(coordinate).__name__}, not a Coordinate",
            )

        self.cache.put(key, coordinate)
        self._logger.debug(
            "Geocode resolved",
            extra={"query": label, "lat": coordinate.lat, "lon": coordinate.lon},
        )
        return coordinate

    def resolve_or_raise(self, query: Union[LocationQuery, Any]) -> Coordinate:
        """Like resolve(), but raise the failure's domain error."""
        result = self.resolve(query)
        if isinstance(result, ResolutionFailure):
            raise result.to_error()
        return result

    def resolve_many(
        self,
        queries: Iterable[Union[LocationQuery, Any]],
        max_workers: int = 1,
    ) -> List[Resolution]:
        """Resolve several entries, preserving input order.

        Args:
            queries: Entries to resolve.
            max_workers: Worker threads; 1 resolves sequentially.

        Raises:
            ValueError: If max_workers is less than 1, or an entry is malformed.
        """
        if max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {max_workers}")

        # Malformed entries fail here, before any lookup starts.
        entries = [LocationQuery.from_entry(q) for q in queries]
        if max_workers == 1 or len(entries) <= 1:
            return [self.resolve(entry) for entry in entries]

        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            return list(executor.map(self.resolve, entries))

    def _resolve_coordinates(self, query: LocationQuery) -> Resolution:
        try:
            return validation.check(query.lat, query.lon)
        except InvalidCoordinateFormat as e:
            return self._fail(query, FailureReason.INVALID_FORMAT, str(e), e)
        except InvalidCoordinateRange as e:
            return self._fail(query, FailureReason.INVALID_RANGE, str(e), e)

    def _fail(
        self,
        query: LocationQuery,
        reason: FailureReason,
        detail: str,
        cause: Optional[Exception] = None,
    ) -> ResolutionFailure:
        self._logger.warning(
            "Could not resolve entry",
            extra={"query": query.text, "reason": reason.name, "detail": detail},
        )
        return ResolutionFailure(query=query, reason=reason, detail=detail, cause=cause)
