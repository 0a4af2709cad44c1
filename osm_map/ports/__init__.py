"""Ports layer - Abstract interfaces (Protocols) for the package.

Ports define the contracts between the resolution core and the
adapters it drives, so caches and geocoding backends can be swapped
without touching the resolver.
"""

from .cache import DEFAULT_NAMESPACE, ResponseCachePort, cache_key, normalize_query
from .geocoding import GeocodeBackendPort, GeocoderCapability

__all__ = [
    # Cache
    "ResponseCachePort",
    "cache_key",
    "normalize_query",
    "DEFAULT_NAMESPACE",
    # Geocoding
    "GeocodeBackendPort",
    "GeocoderCapability",
]
