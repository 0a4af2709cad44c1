"""Geocoding adapters - Implementations of GeocodeBackendPort.

Available implementations:
- RemoteHTTPBackend: Nominatim-compatible search API over requests
- PluggableGeocoderBackend: any object with ``geocode(text)``

create_nominatim_geocoder builds a geopy Nominatim geocoder suitable
for PluggableGeocoderBackend.
"""

from .http_backend import RemoteHTTPBackend
from .nominatim import create_nominatim_geocoder
from .normalize import ResultShape, classify_result, normalize_geocoder_result
from .pluggable_backend import PluggableGeocoderBackend

__all__ = [
    "RemoteHTTPBackend",
    "PluggableGeocoderBackend",
    "create_nominatim_geocoder",
    "normalize_geocoder_result",
    "classify_result",
    "ResultShape",
]
