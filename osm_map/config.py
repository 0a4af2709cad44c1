"""Centralized configuration using Pydantic Settings.

Configuration can be overridden via environment variables:
- OSM_GEO_API_HOST=https://nominatim.example.org
- OSM_GEO_MIN_INTERVAL_SECONDS=1
- OSM_CACHE_TTL_SECONDS=3600
- OSM_MAP_ZOOM=10
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from . import USER_AGENT


class GeocodingConfig(BaseSettings):
    """Geocoding backend configuration.

    Environment variables prefixed with OSM_GEO_.
    """

    model_config = SettingsConfigDict(env_prefix="OSM_GEO_")

    backend: Literal["http", "geopy"] = "http"
    api_host: str = "https://nominatim.openstreetmap.org"
    api_path: str = "/search"
    user_agent: str = USER_AGENT
    timeout_seconds: float = Field(default=10.0, gt=0)
    min_interval_seconds: float = Field(default=0.0, ge=0)

    @property
    def search_url(self) -> str:
        """Full URL of the search endpoint."""
        return self.api_host.rstrip("/") + "/" + self.api_path.lstrip("/")


class CacheConfig(BaseSettings):
    """Response cache configuration.

    Environment variables prefixed with OSM_CACHE_.
    """

    model_config = SettingsConfigDict(env_prefix="OSM_CACHE_")

    enabled: bool = True
    ttl_seconds: float = Field(default=24 * 60 * 60, gt=0)
    namespace: str = "osm_map.geocode"


class MapConfig(BaseSettings):
    """Map view defaults.

    Environment variables prefixed with OSM_MAP_.
    """

    model_config = SettingsConfigDict(env_prefix="OSM_MAP_")

    zoom: int = Field(default=12, ge=0)
    width: str = "100%"
    height: str = "500px"


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with OSM_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="OSM_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main configuration aggregating all sub-configs.

        config = get_config()
        print(config.geocoding.search_url)
        print(config.cache.ttl_seconds)

    Environment variables prefixed with OSM_.
    """

    model_config = SettingsConfigDict(env_prefix="OSM_")

    geocoding: GeocodingConfig = Field(default_factory=GeocodingConfig)
    cache: CacheConfig = Field(default_factory=CacheConfig)
    map: MapConfig = Field(default_factory=MapConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache."""
    get_config.cache_clear()
