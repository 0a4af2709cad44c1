"""Backend wrapping a caller-supplied geocoder.

Any object with ``geocode(text)`` can be plugged in: a geopy geocoder,
a googlemaps-style client, or a test double. Results are normalized by
normalize_geocoder_result; errors raised by the geocoder are reported
as BackendUnavailable and never escape as anything else.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from geopy.exc import GeocoderQueryError, GeocoderServiceError

from ...domain.errors import BackendUnavailable, UnresolvableLocation
from ...domain.models import Coordinate
from ...ports.geocoding import GeocoderCapability
from .normalize import normalize_geocoder_result


@dataclass
class PluggableGeocoderBackend:
    """GeocodeBackendPort over an arbitrary geocoder object.

    Attributes:
        geocoder: Object exposing ``geocode(text)``
        name: Backend name used in logs and errors
    """

    geocoder: GeocoderCapability
    name: str = "geocoder"

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if not callable(getattr(self.geocoder, "geocode", None)):
            raise TypeError(
                f"Geocoder must expose a geocode() method, got {type(self.geocoder).__name__}"
            )
        self._logger = logging.getLogger(__name__)

    def resolve(self, label: str) -> Coordinate:
        """Geocode ``label`` and normalize the result.

        Raises:
            BackendUnavailable: If the geocoder raised.
            UnresolvableLocation: If the result is empty or unusable.
        """
        try:
            result = self.geocoder.geocode(label)
        except GeocoderQueryError as e:
            raise UnresolvableLocation(
                f"Geocoder rejected query {label!r}",
                cause=e,
                query=label,
                backend=self.name,
            ) from e
        except GeocoderServiceError as e:
            self._logger.warning(
                "Geocode service error",
                extra={"query": label, "backend": self.name, "error": str(e)},
            )
            raise BackendUnavailable(
                "Geocoder service error", cause=e, query=label, backend=self.name
            ) from e
        except Exception as e:
            self._logger.error(
                "Geocode unexpected error",
                extra={"query": label, "backend": self.name, "error": str(e)},
            )
            raise BackendUnavailable(
                "Geocoder failed", cause=e, query=label, backend=self.name
            ) from e

        try:
            coordinate = normalize_geocoder_result(result)
        except UnresolvableLocation as e:
            e.query = label
            e.backend = self.name
            raise
        except Exception as e:
            self._logger.warning(
                "Geocode result unreadable",
                extra={"query": label, "backend": self.name, "error": str(e)},
            )
            raise UnresolvableLocation(
                f"Could not read geocoder result for {label!r}",
                cause=e,
                query=label,
                backend=self.name,
            ) from e

        self._logger.debug(
            "Geocode success",
            extra={"query": label, "lat": coordinate.lat, "lon": coordinate.lon},
        )
        return coordinate
