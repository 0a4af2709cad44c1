"""Geocoding ports - Abstractions for turning free text into coordinates.

GeocodeBackendPort is what the resolver talks to. GeocoderCapability is
the minimal shape a caller-supplied geocoder must have to be wrapped by
PluggableGeocoderBackend (geopy geocoders qualify).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from ..domain.models import Coordinate


class GeocodeBackendPort(Protocol):
    """Port for geocoding backends.

    Implementations:
    - adapters/geocoding/http_backend.py (RemoteHTTPBackend)
    - adapters/geocoding/pluggable_backend.py (PluggableGeocoderBackend)

    Backends do not cache, rate-limit or retry; the resolver owns that.
    """

    name: str

    def resolve(self, label: str) -> Coordinate:
        """Resolve a free-text location.

        Args:
            label: Non-blank place description (e.g., "Paris").

        Returns:
            A validated Coordinate.

        Raises:
            BackendUnavailable: On transport or service failure.
            UnresolvableLocation: When the backend found nothing usable.
        """
        ...


class GeocoderCapability(Protocol):
    """Anything with a ``geocode(text)`` method."""

    def geocode(self, query: str) -> Any:
        ...
