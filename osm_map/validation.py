"""Coordinate and zoom validation.

Everything here is pure: functions either return a value or raise a
domain error. Logging rejected input is the caller's job.
"""

from __future__ import annotations

import math
import re
from typing import Any

from .domain.errors import (
    InvalidCoordinateFormat,
    InvalidCoordinateRange,
    InvalidZoomValue,
)
from .domain.models import Coordinate

# Whole-string signed decimal: "12", "-12.5", "+.5", "7." ; no exponent.
_DECIMAL_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)")

LAT_RANGE = (-90.0, 90.0)
LON_RANGE = (-180.0, 180.0)


def parse_component(value: Any) -> float:
    """Parse one latitude or longitude value into a finite float.

    Args:
        value: An int, a float, or a string holding a signed decimal.

    Returns:
        The parsed value.

    Raises:
        InvalidCoordinateFormat: If the value is not a finite number.
        InvalidCoordinateRange: If an int is too large to convert.
    """
    if isinstance(value, bool):
        raise InvalidCoordinateFormat(f"Not a coordinate value: {value!r}")
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError as e:
            raise InvalidCoordinateRange(
                f"Value too large for a coordinate: {value!r}", cause=e
            ) from e
    elif isinstance(value, str):
        text = value.strip()
        if not _DECIMAL_RE.fullmatch(text):
            raise InvalidCoordinateFormat(f"Not a decimal number: {value!r}")
        number = float(text)
    else:
        raise InvalidCoordinateFormat(
            f"Not a coordinate value: {value!r} ({type(value).__name__})"
        )
    if not math.isfinite(number):
        raise InvalidCoordinateFormat(f"Not a finite number: {value!r}")
    return number


def check(lat: Any, lon: Any) -> Coordinate:
    """Validate a raw pair and build a Coordinate.

    Raises:
        InvalidCoordinateFormat: If either component is not numeric.
        InvalidCoordinateRange: If either component is out of range.
    """
    try:
        lat_value = parse_component(lat)
        lon_value = parse_component(lon)
    except InvalidCoordinateFormat as e:
        raise InvalidCoordinateFormat(e.message, lat=lat, lon=lon) from e
    except InvalidCoordinateRange as e:
        raise InvalidCoordinateRange(e.message, lat=lat, lon=lon) from e

    if not LAT_RANGE[0] <= lat_value <= LAT_RANGE[1]:
        raise InvalidCoordinateRange(
            f"Latitude out of range: {lat_value}", lat=lat, lon=lon
        )
    if not LON_RANGE[0] <= lon_value <= LON_RANGE[1]:
        raise InvalidCoordinateRange(
            f"Longitude out of range: {lon_value}", lat=lat, lon=lon
        )
    return Coordinate(lat_value, lon_value)


def validate(lat: Any, lon: Any) -> bool:
    """Return True if ``(lat, lon)`` is a well-formed, in-range pair."""
    try:
        check(lat, lon)
    except (InvalidCoordinateFormat, InvalidCoordinateRange):
        return False
    return True


def check_zoom(value: Any) -> int:
    """Validate a zoom level.

    Raises:
        InvalidZoomValue: If the value is not a non-negative int.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidZoomValue(f"Zoom must be an integer, got {value!r}", value=value)
    if value < 0:
        raise InvalidZoomValue(f"Zoom must be >= 0, got {value}", value=value)
    return value
