"""Typed domain errors for osm-map.

All errors inherit from OsmMapError and can optionally wrap a root
cause exception for debugging.

Per-entry resolution errors (format, range, empty query, backend
failures) are recoverable: the resolver turns them into a
ResolutionFailure and the entry is skipped. NoMarkersToRender and
InvalidZoomValue are raised to the caller.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class OsmMapError(Exception):
    """Base error for the osm-map domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class InvalidCoordinateError(OsmMapError):
    """A latitude/longitude pair was rejected by the validator.

    Attributes:
        lat: The raw latitude value as given
        lon: The raw longitude value as given
    """

    lat: Any = None
    lon: Any = None


@dataclass
class InvalidCoordinateFormat(InvalidCoordinateError):
    """A coordinate component is not a signed decimal number."""


@dataclass
class InvalidCoordinateRange(InvalidCoordinateError):
    """A coordinate component is numeric but outside its valid range."""


@dataclass
class EmptyQuery(OsmMapError):
    """A free-text query was empty or whitespace only."""


@dataclass
class GeocodingError(OsmMapError):
    """Failed to geocode a location.

    Attributes:
        query: The location query that failed
        backend: Name of the backend that reported the failure
    """

    query: str = ""
    backend: str = ""


@dataclass
class BackendUnavailable(GeocodingError):
    """The geocoding backend could not be reached or answered with an error.

    Attributes:
        status_code: HTTP status code, when the failure came from a response
    """

    status_code: Optional[int] = None


@dataclass
class UnresolvableLocation(GeocodingError):
    """The backend answered but returned nothing usable for the query."""


@dataclass
class NoMarkersToRender(OsmMapError):
    """No valid marker is left and no explicit center was given.

    Attributes:
        skipped: Number of entries that were skipped before this error
    """

    skipped: int = 0


@dataclass
class InvalidZoomValue(OsmMapError):
    """Zoom must be a non-negative integer.

    Attributes:
        value: The rejected value
    """

    value: Any = None


@dataclass
class ConfigurationError(OsmMapError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None
