"""Normalization of geocoder results into Coordinates.

Caller-supplied geocoders return results in several shapes. Only the
shapes listed in ResultShape are accepted; each is validated before
it becomes a Coordinate. Anything else is UnresolvableLocation.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any, Tuple

from ...domain.errors import InvalidCoordinateError, UnresolvableLocation
from ...domain.models import Coordinate
from ... import validation


class ResultShape(Enum):
    """Accepted geocoder result variants."""

    LAT_LON_OBJECT = "object with latitude/longitude"
    LAT_LON_MAPPING = "mapping with lat/lon"
    GEOMETRY_MAPPING = "mapping with geometry.location.lat/lng"
    PAIR = "two-element pair"
    RESULT_LIST = "list of results"


def _is_scalar(value: Any) -> bool:
    return isinstance(value, (int, float, str)) and not isinstance(value, bool)


def classify_result(result: Any) -> ResultShape:
    """Identify which accepted variant ``result`` is.

    Raises:
        UnresolvableLocation: If the result is empty or of no known shape.
    """
    if result is None:
        raise UnresolvableLocation("Geocoder returned no result")

    if isinstance(result, Mapping):
        geometry = result.get("geometry")
        if isinstance(geometry, Mapping) and isinstance(geometry.get("location"), Mapping):
            return ResultShape.GEOMETRY_MAPPING
        if "lat" in result and "lon" in result:
            return ResultShape.LAT_LON_MAPPING
        raise UnresolvableLocation(
            f"Unsupported geocoder mapping with keys {sorted(map(str, result))}"
        )

    if isinstance(result, (list, tuple)):
        if not result:
            raise UnresolvableLocation("Geocoder returned an empty result list")
        if len(result) == 2 and all(_is_scalar(v) for v in result):
            return ResultShape.PAIR
        if isinstance(result, list) and not isinstance(result[0], (list, tuple)):
            return ResultShape.RESULT_LIST
        raise UnresolvableLocation(
            f"Unsupported geocoder sequence of length {len(result)}"
        )

    if hasattr(result, "latitude") and hasattr(result, "longitude"):
        return ResultShape.LAT_LON_OBJECT

    raise UnresolvableLocation(
        f"Unsupported geocoder result type: {type(result).__name__}"
    )


def _attribute(obj: Any, name: str) -> Any:
    value = getattr(obj, name)
    return value() if callable(value) else value


def extract_pair(result: Any) -> Tuple[Any, Any]:
    """Pull the raw ``(lat, lon)`` values out of an accepted result."""
    shape = classify_result(result)
    if shape is ResultShape.LAT_LON_OBJECT:
        return _attribute(result, "latitude"), _attribute(result, "longitude")
    if shape is ResultShape.LAT_LON_MAPPING:
        return result["lat"], result["lon"]
    if shape is ResultShape.GEOMETRY_MAPPING:
        location = result["geometry"]["location"]
        if "lat" not in location or "lng" not in location:
            raise UnresolvableLocation("Geometry location lacks lat/lng")
        return location["lat"], location["lng"]
    if shape is ResultShape.PAIR:
        return result[0], result[1]
    # RESULT_LIST: first hit wins, nested lists are rejected above
    return extract_pair(result[0])


def normalize_geocoder_result(result: Any) -> Coordinate:
    """Convert an accepted geocoder result into a validated Coordinate.

    Raises:
        UnresolvableLocation: If the shape is unknown or the values
            fail validation.
    """
    lat, lon = extract_pair(result)
    try:
        return validation.check(lat, lon)
    except InvalidCoordinateError as e:
        raise UnresolvableLocation(
            f"Geocoder returned an invalid coordinate ({lat!r}, {lon!r})",
            cause=e,
        ) from e
