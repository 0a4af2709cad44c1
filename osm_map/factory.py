"""Composition root.

Builds resolvers and map models from configuration, with optional
overrides for the geocoder, the HTTP session, the cache and the clock.
Every call returns fresh, independent instances.
"""

from __future__ import annotations

import time
from typing import Any, Callable, Optional, Sequence

import requests

from .adapters.cache import InMemoryResponseCache, NullResponseCache
from .adapters.geocoding import (
    PluggableGeocoderBackend,
    RemoteHTTPBackend,
    create_nominatim_geocoder,
)
from .config import AppConfig, get_config
from .domain.models import MapSize
from .ports.cache import ResponseCachePort
from .ports.geocoding import GeocodeBackendPort, GeocoderCapability
from .services import CoordinateResolver, MapModel, RateLimiter


def create_backend(
    config: Optional[AppConfig] = None,
    geocoder: Optional[GeocoderCapability] = None,
    session: Optional[requests.Session] = None,
) -> GeocodeBackendPort:
    """Pick the geocoding backend.

    A caller-supplied geocoder always wins. Otherwise ``geocoding.backend``
    selects the raw HTTP backend or a geopy Nominatim geocoder.
    """
    config = config or get_config()

    if geocoder is not None:
        return PluggableGeocoderBackend(geocoder, name=type(geocoder).__name__)
    if config.geocoding.backend == "geopy":
        return PluggableGeocoderBackend(
            create_nominatim_geocoder(config.geocoding, session=session),
            name="nominatim-geopy",
        )
    return RemoteHTTPBackend(config.geocoding, session=session)


def create_cache(
    config: Optional[AppConfig] = None,
    clock: Callable[[], float] = time.monotonic,
) -> ResponseCachePort:
    config = config or get_config()
    if not config.cache.enabled:
        return NullResponseCache()
    return InMemoryResponseCache(ttl_seconds=config.cache.ttl_seconds, clock=clock)


def create_resolver(
    config: Optional[AppConfig] = None,
    geocoder: Optional[GeocoderCapability] = None,
    session: Optional[requests.Session] = None,
    cache: Optional[ResponseCachePort] = None,
    clock: Callable[[], float] = time.monotonic,
    sleep: Callable[[float], None] = time.sleep,
) -> CoordinateResolver:
    """Create a fully wired CoordinateResolver.

    Args:
        config: Optional configuration override.
        geocoder: Optional pluggable geocoder (anything with ``geocode``).
        session: Optional requests session for HTTP backends.
        cache: Optional cache override; otherwise built from config.
        clock: Time source shared by the cache and the rate limiter.
        sleep: Sleep function for the rate limiter.
    """
    config = config or get_config()
    return CoordinateResolver(
        backend=create_backend(config, geocoder=geocoder, session=session),
        cache=cache if cache is not None else create_cache(config, clock=clock),
        rate_limiter=RateLimiter(
            min_interval_seconds=config.geocoding.min_interval_seconds,
            clock=clock,
            sleep=sleep,
        ),
        namespace=config.cache.namespace,
    )


def create_map_model(
    entries: Sequence[Any],
    config: Optional[AppConfig] = None,
    resolver: Optional[CoordinateResolver] = None,
    **overrides: Any,
) -> MapModel:
    """Create a MapModel with zoom and size taken from configuration.

    Keyword overrides (``zoom``, ``center``, ``size``, ``max_workers``)
    are passed through to MapModel.
    """
    config = config or get_config()
    overrides.setdefault("zoom", config.map.zoom)
    overrides.setdefault("size", MapSize(width=config.map.width, height=config.map.height))
    return MapModel(
        entries=entries,
        resolver=resolver if resolver is not None else create_resolver(config),
        **overrides,
    )
