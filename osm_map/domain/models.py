"""Immutable domain models for osm-map.

All value models are frozen dataclasses with slots. They carry no
external dependencies and represent the core concepts handed between
the resolver, the marker set and the external renderer.
"""

from __future__ import annotations

import json
import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Iterable, Optional

from .errors import (
    BackendUnavailable,
    EmptyQuery,
    InvalidCoordinateFormat,
    InvalidCoordinateRange,
    OsmMapError,
    UnresolvableLocation,
)


@dataclass(frozen=True, slots=True)
class Coordinate:
    """A validated latitude/longitude pair in decimal degrees."""

    lat: float
    lon: float

    def __post_init__(self) -> None:
        """Validate coordinate ranges."""
        for name, value in (("lat", self.lat), ("lon", self.lon)):
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise InvalidCoordinateFormat(
                    f"{name} must be a number, got {value!r}",
                    lat=self.lat,
                    lon=self.lon,
                )
            if isinstance(value, float) and not math.isfinite(value):
                raise InvalidCoordinateFormat(
                    f"{name} must be finite, got {value!r}",
                    lat=self.lat,
                    lon=self.lon,
                )
        if not -90 <= self.lat <= 90:
            raise InvalidCoordinateRange(
                f"Latitude must be between -90 and 90, got {self.lat}",
                lat=self.lat,
                lon=self.lon,
            )
        if not -180 <= self.lon <= 180:
            raise InvalidCoordinateRange(
                f"Longitude must be between -180 and 180, got {self.lon}",
                lat=self.lat,
                lon=self.lon,
            )
        object.__setattr__(self, "lat", float(self.lat))
        object.__setattr__(self, "lon", float(self.lon))

    def as_tuple(self) -> tuple[float, float]:
        return (self.lat, self.lon)


@dataclass(frozen=True, slots=True)
class LocationQuery:
    """One raw map entry, before resolution.

    Either a coordinate pair or a free-text label. When ``lat`` or ``lon``
    is present the entry is a coordinate query and the label is only used
    as the popup caption; the raw values are validated later by the
    resolver, not here.

    Attributes:
        lat: Raw latitude (number or numeric string), or None
        lon: Raw longitude (number or numeric string), or None
        label: Free-text place description or popup caption
        icon: Optional marker icon URL
    """

    lat: Any = None
    lon: Any = None
    label: Optional[str] = None
    icon: Optional[str] = None

    def __post_init__(self) -> None:
        if self.lat is None and self.lon is None and self.label is None:
            raise ValueError("LocationQuery needs coordinates or a label")

    @property
    def has_coordinates(self) -> bool:
        """True when the entry carries a coordinate pair (valid or not)."""
        return self.lat is not None or self.lon is not None

    @property
    def text(self) -> str:
        """Short description used in logs and failure reports."""
        if self.has_coordinates:
            return f"({self.lat}, {self.lon})"
        return self.label or ""

    @classmethod
    def from_coordinates(
        cls,
        lat: Any,
        lon: Any,
        label: Optional[str] = None,
        icon: Optional[str] = None,
    ) -> LocationQuery:
        if lat is None and lon is None:
            raise ValueError("Coordinate entry needs a latitude and a longitude")
        return cls(lat=lat, lon=lon, label=label, icon=icon)

    @classmethod
    def from_place(cls, label: str, icon: Optional[str] = None) -> LocationQuery:
        if not isinstance(label, str):
            raise TypeError(f"Place label must be a string, got {type(label).__name__}")
        return cls(label=label, icon=icon)

    @classmethod
    def from_entry(cls, entry: Any) -> LocationQuery:
        """Build a query from any accepted entry shape.

        Accepted shapes:
            - an existing LocationQuery
            - a string (free-text place)
            - a sequence ``[lat, lon]``, ``[lat, lon, label]`` or
              ``[lat, lon, label, icon]``
            - a mapping with ``lat``/``lon`` keys, or ``label``/``address``

        Raises:
            TypeError: If the entry is of an unsupported type.
            ValueError: If a sequence has the wrong arity or a mapping
                has none of the expected keys.
        """
        if isinstance(entry, LocationQuery):
            return entry
        if isinstance(entry, str):
            return cls.from_place(entry)
        if isinstance(entry, Mapping):
            if "lat" in entry or "lon" in entry:
                return cls.from_coordinates(
                    entry.get("lat"),
                    entry.get("lon"),
                    label=entry.get("label"),
                    icon=entry.get("icon"),
                )
            place = entry.get("label", entry.get("address"))
            if place is None:
                raise ValueError(
                    f"Entry mapping needs 'lat'/'lon' or 'label'/'address', got {sorted(entry)}"
                )
            return cls.from_place(place, icon=entry.get("icon"))
        if isinstance(entry, (list, tuple)):
            if not 2 <= len(entry) <= 4:
                raise ValueError(
                    f"Coordinate entry must have 2 to 4 elements, got {len(entry)}"
                )
            return cls.from_coordinates(*entry)
        raise TypeError(f"Unsupported map entry type: {type(entry).__name__}")


@dataclass(frozen=True, slots=True)
class Marker:
    """A resolved map marker.

    Attributes:
        coordinate: Validated position
        label: Popup caption
        icon: Optional icon URL
    """

    coordinate: Coordinate
    label: Optional[str] = None
    icon: Optional[str] = None

    @property
    def lat(self) -> float:
        return self.coordinate.lat

    @property
    def lon(self) -> float:
        return self.coordinate.lon

    def to_dict(self) -> dict[str, Any]:
        return {
            "lat": self.lat,
            "lon": self.lon,
            "label": self.label,
            "icon": self.icon,
        }


@dataclass(frozen=True, slots=True)
class BoundingBox:
    """Tightest axis-aligned rectangle covering a set of coordinates.

    No antimeridian handling: markers at lon 179 and -179 give a box
    spanning the whole globe.
    """

    min_lat: float
    min_lon: float
    max_lat: float
    max_lon: float

    @property
    def center(self) -> Coordinate:
        """Midpoint of the box."""
        return Coordinate(
            (self.min_lat + self.max_lat) / 2,
            (self.min_lon + self.max_lon) / 2,
        )

    @classmethod
    def covering(cls, coordinates: Iterable[Coordinate]) -> BoundingBox:
        """Compute the box for the given coordinates.

        Raises:
            ValueError: If no coordinate is given.
        """
        coords = list(coordinates)
        if not coords:
            raise ValueError("Cannot compute a bounding box without coordinates")
        lats = [c.lat for c in coords]
        lons = [c.lon for c in coords]
        return cls(min(lats), min(lons), max(lats), max(lons))

    def to_list(self) -> list[list[float]]:
        """South-west and north-east corners, Leaflet ``fitBounds`` order."""
        return [[self.min_lat, self.min_lon], [self.max_lat, self.max_lon]]


@dataclass(frozen=True, slots=True)
class Viewport:
    """Map view: center point and zoom level."""

    center: Coordinate
    zoom: int


@dataclass(frozen=True, slots=True)
class CacheEntry:
    """A cached geocoding result.

    Attributes:
        key: Namespaced, normalized query string
        coordinate: Resolved position
        inserted_at: Clock reading when the entry was stored
        expires_at: Clock reading after which the entry is stale
    """

    key: str
    coordinate: Coordinate
    inserted_at: float
    expires_at: float

    def is_expired(self, now: float) -> bool:
        return now >= self.expires_at


@dataclass
class ResolverState:
    """Mutable rate-limiter state owned by one resolver instance."""

    min_interval_seconds: float = 0.0
    last_request_at: Optional[float] = None


class FailureReason(Enum):
    """Why a single entry could not be turned into a marker."""

    INVALID_FORMAT = auto()
    INVALID_RANGE = auto()
    EMPTY_QUERY = auto()
    BACKEND_UNAVAILABLE = auto()
    UNRESOLVABLE = auto()


_FAILURE_ERRORS: dict[FailureReason, type[OsmMapError]] = {
    FailureReason.INVALID_FORMAT: InvalidCoordinateFormat,
    FailureReason.INVALID_RANGE: InvalidCoordinateRange,
    FailureReason.EMPTY_QUERY: EmptyQuery,
    FailureReason.BACKEND_UNAVAILABLE: BackendUnavailable,
    FailureReason.UNRESOLVABLE: UnresolvableLocation,
}


@dataclass(frozen=True, slots=True)
class ResolutionFailure:
    """Non-fatal outcome of resolving one entry.

    Attributes:
        query: The entry that failed
        reason: Failure category
        detail: Human-readable description
        cause: Underlying error, if any
    """

    query: LocationQuery
    reason: FailureReason
    detail: str = ""
    cause: Optional[Exception] = field(default=None, compare=False, repr=False)

    def to_error(self) -> OsmMapError:
        """Return the domain error matching this failure."""
        if self.cause is not None and isinstance(self.cause, OsmMapError):
            return self.cause
        error_type = _FAILURE_ERRORS[self.reason]
        return error_type(self.detail or f"Could not resolve {self.query.text}")


@dataclass(frozen=True, slots=True)
class MapSize:
    """CSS dimensions of the rendered map element."""

    width: str = "100%"
    height: str = "500px"


@dataclass(frozen=True, slots=True)
class MapSnapshot:
    """Finished map model handed to an external renderer.

    Attributes:
        markers: Resolved markers, in input order
        viewport: Center and zoom
        bounds: Box covering the markers, or None when there are none
        size: Map element dimensions
        failures: Entries that were skipped
    """

    markers: tuple[Marker, ...]
    viewport: Viewport
    bounds: Optional[BoundingBox] = None
    size: MapSize = field(default_factory=MapSize)
    failures: tuple[ResolutionFailure, ...] = field(default_factory=tuple)

    def markers_fragment(self) -> list[dict[str, Any]]:
        """Serializable marker list."""
        return [marker.to_dict() for marker in self.markers]

    def view_fragment(self) -> dict[str, Any]:
        """Serializable view description."""
        return {
            "center": [self.viewport.center.lat, self.viewport.center.lon],
            "zoom": self.viewport.zoom,
            "bounds": self.bounds.to_list() if self.bounds else None,
            "width": self.size.width,
            "height": self.size.height,
        }

    def to_json(self, **kwargs: Any) -> str:
        """Both fragments as one JSON document."""
        return json.dumps(
            {"markers": self.markers_fragment(), "view": self.view_fragment()},
            **kwargs,
        )
