"""Remote HTTP geocoding backend.

Queries a Nominatim-compatible search endpoint directly with requests:

    GET {api_host}{api_path}?format=json&q=<text>
    User-Agent: osm-map/<version>

The first element of the returned JSON array (or a single JSON object)
supplies ``lat``/``lon``, as strings or numbers.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Optional

import requests

from ...config import GeocodingConfig, get_config
from ...domain.errors import (
    BackendUnavailable,
    InvalidCoordinateError,
    UnresolvableLocation,
)
from ...domain.models import Coordinate
from ... import validation


@dataclass
class RemoteHTTPBackend:
    """GeocodeBackendPort over a Nominatim-compatible HTTP API.

    Attributes:
        config: Geocoding configuration (endpoint, user agent, timeout)
        session: Optional HTTP client override
        name: Backend name used in logs and errors
    """

    config: GeocodingConfig = field(default_factory=lambda: get_config().geocoding)
    session: Optional[requests.Session] = None
    name: str = "nominatim-http"

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        if self.session is None:
            self.session = requests.Session()

    @property
    def headers(self) -> dict[str, str]:
        return {
            "User-Agent": self.config.user_agent,
            "Accept": "application/json",
        }

    def resolve(self, label: str) -> Coordinate:
        """Look ``label`` up on the remote endpoint.

        Raises:
            BackendUnavailable: On transport errors, non-2xx statuses or
                a body that is not JSON.
            UnresolvableLocation: On an empty result or missing/invalid
                lat/lon fields.
        """
        url = self.config.search_url
        self._logger.debug("Geocode request", extra={"url": url, "query": label})

        try:
            response = self.session.get(  # type: ignore[union-attr]
                url,
                params={"format": "json", "q": label},
                headers=self.headers,
                timeout=self.config.timeout_seconds,
            )
        except requests.RequestException as e:
            self._logger.warning(
                "Geocode transport error",
                extra={"query": label, "error": str(e)},
            )
            raise BackendUnavailable(
                "Geocoding request failed", cause=e, query=label, backend=self.name
            ) from e

        if not 200 <= response.status_code < 300:
            self._logger.warning(
                "Geocode HTTP error",
                extra={"query": label, "status_code": response.status_code},
            )
            raise BackendUnavailable(
                f"Geocoding endpoint answered HTTP {response.status_code}",
                query=label,
                backend=self.name,
                status_code=response.status_code,
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise BackendUnavailable(
                "Geocoding endpoint returned a non-JSON body",
                cause=e,
                query=label,
                backend=self.name,
                status_code=response.status_code,
            ) from e

        return self._parse(label, payload)

    def _parse(self, label: str, payload: Any) -> Coordinate:
        if isinstance(payload, list):
            if not payload:
                raise UnresolvableLocation(
                    f"No match for {label!r}", query=label, backend=self.name
                )
            payload = payload[0]

        if not isinstance(payload, dict) or "lat" not in payload or "lon" not in payload:
            raise UnresolvableLocation(
                "Geocoding result lacks lat/lon", query=label, backend=self.name
            )

        try:
            coordinate = validation.check(payload["lat"], payload["lon"])
        except InvalidCoordinateError as e:
            raise UnresolvableLocation(
                "Geocoding result has an invalid coordinate",
                cause=e,
                query=label,
                backend=self.name,
            ) from e

        self._logger.debug(
            "Geocode success",
            extra={"query": label, "lat": coordinate.lat, "lon": coordinate.lon},
        )
        return coordinate
