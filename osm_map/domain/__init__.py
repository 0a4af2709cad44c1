"""Domain layer - Core value models and errors.

This module contains immutable domain models and typed errors
used throughout the package. No external dependencies.
"""

from .errors import (
    BackendUnavailable,
    ConfigurationError,
    EmptyQuery,
    GeocodingError,
    InvalidCoordinateError,
    InvalidCoordinateFormat,
    InvalidCoordinateRange,
    InvalidZoomValue,
    NoMarkersToRender,
    OsmMapError,
    UnresolvableLocation,
)
from .models import (
    BoundingBox,
    CacheEntry,
    Coordinate,
    FailureReason,
    LocationQuery,
    MapSize,
    MapSnapshot,
    Marker,
    ResolutionFailure,
    ResolverState,
    Viewport,
)

__all__ = [
    # Models
    "Coordinate",
    "LocationQuery",
    "Marker",
    "BoundingBox",
    "Viewport",
    "CacheEntry",
    "ResolverState",
    "FailureReason",
    "ResolutionFailure",
    "MapSize",
    "MapSnapshot",
    # Errors
    "OsmMapError",
    "InvalidCoordinateError",
    "InvalidCoordinateFormat",
    "InvalidCoordinateRange",
    "EmptyQuery",
    "GeocodingError",
    "BackendUnavailable",
    "UnresolvableLocation",
    "NoMarkersToRender",
    "InvalidZoomValue",
    "ConfigurationError",
]
