"""Tests for MarkerSet."""

from unittest.mock import MagicMock

import pytest

from osm_map.adapters.geocoding import PluggableGeocoderBackend
from osm_map.domain.models import Coordinate, FailureReason, Marker
from osm_map.services import CoordinateResolver, MarkerSet


@pytest.fixture
def marker_set(backend):
    return MarkerSet(resolver=CoordinateResolver(backend=backend))


def test_add_appends_in_order():
    markers = MarkerSet()
    markers.add(Marker(Coordinate(1, 1), label="a"))
    markers.add(Marker(Coordinate(2, 2), label="b"))
    assert [m.label for m in markers] == ["a", "b"]
    assert len(markers) == 2


def test_add_rejects_non_markers():
    with pytest.raises(TypeError):
        MarkerSet().add((1, 2))  # type: ignore[arg-type]


def test_add_from_query_with_coordinates(marker_set):
    assert marker_set.add_from_query([37.7749, -122.4194, "San Francisco", "sf.png"]) is True
    marker = marker_set.markers[0]
    assert marker.coordinate == Coordinate(37.7749, -122.4194)
    assert marker.label == "San Francisco"
    assert marker.icon == "sf.png"


def test_add_from_query_with_place(marker_set, backend):
    assert marker_set.add_from_query("Paris") is True
    assert marker_set.markers[0] == Marker(Coordinate(48.85, 2.35), label="Paris")
    assert backend.calls == ["Paris"]


def test_out_of_range_is_skipped(marker_set):
    assert marker_set.add_from_query([91, 0]) is False
    assert len(marker_set) == 0
    assert marker_set.failures[0].reason is FailureReason.INVALID_RANGE


def test_huge_int_coordinate_is_skipped(marker_set):
    assert marker_set.add_from_query([0, 10**400]) is False
    assert len(marker_set) == 0
    assert marker_set.failures[0].reason is FailureReason.INVALID_RANGE


def test_unreadable_geocoder_result_is_skipped():
    class BrokenLocation:
        def latitude(self):
            raise RuntimeError("boom")

        def longitude(self):
            return 2.35

    geocoder = MagicMock(spec=["geocode"])
    geocoder.geocode.return_value = BrokenLocation()
    markers = MarkerSet(resolver=CoordinateResolver(backend=PluggableGeocoderBackend(geocoder)))

    assert markers.add_from_query("Paris") is False
    assert markers.failures[0].reason is FailureReason.UNRESOLVABLE


def test_unresolvable_place_is_skipped(marker_set):
    assert marker_set.add_from_query("Atlantis") is False
    assert marker_set.add_from_query("Down") is False
    assert len(marker_set) == 0
    assert [f.reason for f in marker_set.failures] == [
        FailureReason.UNRESOLVABLE,
        FailureReason.BACKEND_UNAVAILABLE,
    ]


def test_malformed_entry_raises(marker_set):
    with pytest.raises(ValueError):
        marker_set.add_from_query([1.0])
    with pytest.raises(TypeError):
        marker_set.add_from_query(None)


def test_add_from_query_needs_resolver():
    with pytest.raises(RuntimeError):
        MarkerSet().add_from_query("Paris")


def test_extend_counts_successes(marker_set):
    added = marker_set.extend_from_queries(["Paris", [91, 0], "London", "  "])
    assert added == 2
    assert len(marker_set) == 2
    assert len(marker_set.failures) == 2


def test_markers_are_copies(marker_set):
    marker_set.add_from_query([1, 2])
    snapshot = marker_set.markers
    marker_set.add_from_query([3, 4])
    assert len(snapshot) == 1
    assert isinstance(snapshot, tuple)


def test_bounding_box_and_clear(marker_set):
    marker_set.extend_from_queries([[10, 10], [20, 30]])
    box = marker_set.bounding_box()
    assert (box.min_lat, box.min_lon, box.max_lat, box.max_lon) == (10, 10, 20, 30)
    marker_set.clear()
    assert len(marker_set) == 0
    with pytest.raises(ValueError):
        marker_set.bounding_box()
