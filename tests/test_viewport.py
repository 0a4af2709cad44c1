"""Tests for ViewportCalculator."""

import pytest

from osm_map.domain.errors import InvalidZoomValue, NoMarkersToRender
from osm_map.domain.models import Coordinate, Marker
from osm_map.services import MarkerSet, ViewportCalculator


def markers_at(*points):
    markers = MarkerSet()
    for lat, lon in points:
        markers.add(Marker(Coordinate(lat, lon)))
    return markers


def test_center_of_two_markers():
    viewport = ViewportCalculator().compute(markers_at((10, 10), (20, 20)))
    assert viewport.center == Coordinate(15, 15)
    assert viewport.zoom == 12


def test_center_of_single_marker():
    viewport = ViewportCalculator(zoom=5).compute(markers_at((5, 5)))
    assert viewport.center == Coordinate(5, 5)
    assert viewport.zoom == 5


def test_center_uses_bounding_box_not_mean():
    viewport = ViewportCalculator().compute(markers_at((0, 0), (1, 1), (1, 1), (10, 10)))
    assert viewport.center == Coordinate(5, 5)


def test_no_markers_raises():
    with pytest.raises(NoMarkersToRender):
        ViewportCalculator().compute(MarkerSet())


def test_explicit_center_wins():
    calculator = ViewportCalculator(zoom=7)
    override = Coordinate(-33.86, 151.21)

    viewport = calculator.compute(markers_at((10, 10), (20, 20)), explicit_center=override)
    assert viewport.center == override
    assert viewport.zoom == 7

    assert calculator.compute(MarkerSet(), explicit_center=override).center == override


def test_zoom_setter_validates():
    calculator = ViewportCalculator()
    calculator.zoom = 3
    assert calculator.zoom == 3

    for bad in (-1, 2.5, "4", None, False):
        with pytest.raises(InvalidZoomValue):
            calculator.zoom = bad
    assert calculator.zoom == 3


def test_constructor_validates_zoom():
    with pytest.raises(InvalidZoomValue):
        ViewportCalculator(zoom=-2)
