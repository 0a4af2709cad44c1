"""Tests for PluggableGeocoderBackend."""

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from geopy.exc import GeocoderQueryError, GeocoderTimedOut, GeocoderUnavailable

from osm_map.adapters.geocoding import PluggableGeocoderBackend
from osm_map.domain.errors import BackendUnavailable, UnresolvableLocation
from osm_map.domain.models import Coordinate


@pytest.fixture
def geocoder():
    return MagicMock(spec=["geocode"])


def test_object_result_is_normalized(geocoder):
    geocoder.geocode.return_value = SimpleNamespace(latitude=48.85, longitude=2.35)
    backend = PluggableGeocoderBackend(geocoder)

    assert backend.resolve("Paris") == Coordinate(48.85, 2.35)
    geocoder.geocode.assert_called_once_with("Paris")


def test_no_result_is_unresolvable(geocoder):
    geocoder.geocode.return_value = None
    backend = PluggableGeocoderBackend(geocoder, name="stub")

    with pytest.raises(UnresolvableLocation) as exc_info:
        backend.resolve("Atlantis")
    assert exc_info.value.query == "Atlantis"
    assert exc_info.value.backend == "stub"


@pytest.mark.parametrize(
    "error",
    [GeocoderTimedOut("slow"), GeocoderUnavailable("down"), RuntimeError("boom")],
)
def test_geocoder_errors_become_backend_unavailable(geocoder, error):
    geocoder.geocode.side_effect = error
    backend = PluggableGeocoderBackend(geocoder)

    with pytest.raises(BackendUnavailable) as exc_info:
        backend.resolve("Paris")
    assert exc_info.value.cause is error


def test_rejected_query_is_unresolvable(geocoder):
    geocoder.geocode.side_effect = GeocoderQueryError("bad query")
    backend = PluggableGeocoderBackend(geocoder)

    with pytest.raises(UnresolvableLocation):
        backend.resolve("???")


def test_geocoder_without_geocode_method_is_refused():
    with pytest.raises(TypeError):
        PluggableGeocoderBackend(object())  # type: ignore[arg-type]


def test_result_raising_on_read_is_unresolvable(geocoder):
    class BrokenLocation:
        def latitude(self):
            raise RuntimeError("boom")

        def longitude(self):
            return 2.35

    geocoder.geocode.return_value = BrokenLocation()
    backend = PluggableGeocoderBackend(geocoder, name="stub")

    with pytest.raises(UnresolvableLocation) as exc_info:
        backend.resolve("Paris")
    assert isinstance(exc_info.value.cause, RuntimeError)
    assert exc_info.value.query == "Paris"
    assert exc_info.value.backend == "stub"
