"""geopy Nominatim geocoder for use with PluggableGeocoderBackend.

geopy's own RateLimiter is deliberately not applied: the resolver owns
throttling, and geopy's limiter retries, which the resolver must not.
"""

from __future__ import annotations

import logging
from typing import Optional
from urllib.parse import urlsplit

import requests
from geopy.adapters import RequestsAdapter
from geopy.geocoders import Nominatim

from ...config import GeocodingConfig, get_config

logger = logging.getLogger(__name__)


def _no_retry_adapter(proxies, ssl_context) -> RequestsAdapter:
    return RequestsAdapter(proxies=proxies, ssl_context=ssl_context, max_retries=0)


def create_nominatim_geocoder(
    config: Optional[GeocodingConfig] = None,
    session: Optional[requests.Session] = None,
) -> Nominatim:
    """Build a geopy Nominatim geocoder from the geocoding settings.

    Both ``api_host`` and ``api_path`` are honoured; the path replaces
    geopy's built-in search endpoint.

    Args:
        config: Geocoding settings; defaults to the global configuration.
        session: Optional requests session to reuse for HTTP.

    Returns:
        A configured ``Nominatim`` instance.
    """
    config = config or get_config().geocoding
    parts = urlsplit(config.api_host)
    domain = parts.netloc or parts.path
    scheme = parts.scheme or "https"

    logger.debug(
        "Initializing Nominatim geocoder",
        extra={
            "domain": domain,
            "user_agent": config.user_agent,
            "timeout": config.timeout_seconds,
        },
    )

    geolocator = Nominatim(
        user_agent=config.user_agent,
        timeout=config.timeout_seconds,
        domain=domain,
        scheme=scheme,
        adapter_factory=_no_retry_adapter,
    )
    geolocator.api = f"{scheme}://{domain}/{config.api_path.lstrip('/')}"
    if session is not None:
        geolocator.adapter.session = session
    return geolocator
