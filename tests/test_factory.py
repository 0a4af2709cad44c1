"""Tests for configuration loading and the composition root."""

from unittest.mock import MagicMock

import pytest
import requests
from pydantic import ValidationError

from osm_map.adapters.cache import InMemoryResponseCache, NullResponseCache
from osm_map.adapters.geocoding import PluggableGeocoderBackend, RemoteHTTPBackend
from osm_map.config import AppConfig, CacheConfig, GeocodingConfig, MapConfig, get_config, reset_config
from osm_map.domain.models import Coordinate, MapSize
from osm_map.factory import create_backend, create_cache, create_map_model, create_resolver


@pytest.fixture(autouse=True)
def fresh_config():
    reset_config()
    yield
    reset_config()


class TestConfig:
    def test_defaults(self):
        config = get_config()
        assert config.geocoding.search_url == "https://nominatim.openstreetmap.org/search"
        assert config.geocoding.min_interval_seconds == 0.0
        assert config.cache.ttl_seconds == 86400
        assert config.map.zoom == 12

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("OSM_GEO_API_HOST", "http://localhost:7070")
        monkeypatch.setenv("OSM_GEO_MIN_INTERVAL_SECONDS", "1.5")
        monkeypatch.setenv("OSM_CACHE_TTL_SECONDS", "60")
        monkeypatch.setenv("OSM_MAP_ZOOM", "3")

        config = get_config()

        assert config.geocoding.search_url == "http://localhost:7070/search"
        assert config.geocoding.min_interval_seconds == 1.5
        assert config.cache.ttl_seconds == 60
        assert config.map.zoom == 3

    def test_get_config_is_cached(self):
        assert get_config() is get_config()

    @pytest.mark.parametrize(
        "factory, kwargs",
        [
            (GeocodingConfig, {"min_interval_seconds": -1}),
            (GeocodingConfig, {"backend": "carrier-pigeon"}),
            (CacheConfig, {"ttl_seconds": 0}),
            (MapConfig, {"zoom": -1}),
        ],
    )
    def test_invalid_values_are_rejected(self, factory, kwargs):
        with pytest.raises(ValidationError):
            factory(**kwargs)


class TestFactory:
    def test_default_backend_is_http(self):
        session = MagicMock(spec=requests.Session)
        backend = create_backend(AppConfig(), session=session)
        assert isinstance(backend, RemoteHTTPBackend)
        assert backend.session is session

    def test_geopy_backend(self):
        config = AppConfig(geocoding=GeocodingConfig(backend="geopy"))
        backend = create_backend(config)
        assert isinstance(backend, PluggableGeocoderBackend)
        assert backend.name == "nominatim-geopy"

    def test_caller_geocoder_wins(self):
        geocoder = MagicMock(spec=["geocode"])
        backend = create_backend(AppConfig(), geocoder=geocoder)
        assert isinstance(backend, PluggableGeocoderBackend)
        assert backend.geocoder is geocoder

    def test_cache_selection(self):
        assert isinstance(create_cache(AppConfig()), InMemoryResponseCache)
        disabled = AppConfig(cache=CacheConfig(enabled=False))
        assert isinstance(create_cache(disabled), NullResponseCache)

    def test_resolver_wiring(self):
        config = AppConfig(
            geocoding=GeocodingConfig(min_interval_seconds=2),
            cache=CacheConfig(ttl_seconds=120, namespace="ns"),
        )
        geocoder = MagicMock(spec=["geocode"])
        geocoder.geocode.return_value = (48.85, 2.35)

        resolver = create_resolver(config, geocoder=geocoder)

        assert resolver.rate_limiter.min_interval_seconds == 2
        assert resolver.cache.ttl_seconds == 120
        assert resolver.namespace == "ns"
        assert resolver.resolve("Paris") == Coordinate(48.85, 2.35)

    def test_resolvers_do_not_share_state(self):
        first = create_resolver(AppConfig(), geocoder=MagicMock(spec=["geocode"]))
        second = create_resolver(AppConfig(), geocoder=MagicMock(spec=["geocode"]))
        assert first.cache is not second.cache
        assert first.rate_limiter is not second.rate_limiter

    def test_map_model_takes_view_defaults_from_config(self):
        config = AppConfig(map=MapConfig(zoom=6, width="320px", height="200px"))
        geocoder = MagicMock(spec=["geocode"])
        model = create_map_model([[1, 2]], config=config, resolver=create_resolver(config, geocoder=geocoder))

        snapshot = model.build()

        assert snapshot.viewport.zoom == 6
        assert snapshot.size == MapSize(width="320px", height="200px")
        geocoder.geocode.assert_not_called()
