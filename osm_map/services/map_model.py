"""Map model service - entry point for renderers.

Collects raw entries, resolves them once, and hands back a MapSnapshot:
ordered markers, a viewport and two serializable fragments. Turning the
snapshot into HTML/JS is the renderer's job.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple, Union

from ..domain.errors import NoMarkersToRender
from ..domain.models import Coordinate, LocationQuery, MapSize, MapSnapshot
from .. import validation
from .coordinate_resolver import CoordinateResolver
from .marker_set import MarkerSet
from .viewport import DEFAULT_ZOOM, ViewportCalculator

CenterLike = Union[Coordinate, Tuple[Any, Any]]


@dataclass
class MapModel:
    """A map under construction.

    Usage:
        model = MapModel(
            entries=[
                [37.7749, -122.4194, "San Francisco"],
                "London",
            ],
            resolver=create_resolver(),
            zoom=10,
        )
        snapshot = model.build()
        snapshot.to_json()

    Attributes:
        entries: Raw entries (coordinate sequences, place strings,
            mappings or LocationQuery objects)
        resolver: Resolver for the entries
        zoom: Initial zoom level
        center: Optional center override as ``(lat, lon)`` or Coordinate
        size: Map element dimensions
        max_workers: Threads used to resolve pending entries
    """

    entries: Sequence[Any]
    resolver: CoordinateResolver
    zoom: int = DEFAULT_ZOOM
    center: Optional[CenterLike] = None
    size: MapSize = field(default_factory=MapSize)
    max_workers: int = 1

    _pending: List[LocationQuery] = field(init=False, repr=False)
    _markers: MarkerSet = field(init=False, repr=False)
    _viewport: ViewportCalculator = field(init=False, repr=False)
    _center: Optional[Coordinate] = field(init=False, default=None, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if isinstance(self.entries, (str, bytes)) or not isinstance(self.entries, Sequence):
            raise TypeError(
                f"entries must be a sequence of map entries, got {type(self.entries).__name__}"
            )
        self._pending = [LocationQuery.from_entry(entry) for entry in self.entries]
        self._markers = MarkerSet(resolver=self.resolver)
        self._viewport = ViewportCalculator(zoom=self.zoom)
        if self.center is not None:
            self.set_center(*self._center_pair(self.center))
        self._logger = logging.getLogger(__name__)

    @staticmethod
    def _center_pair(center: CenterLike) -> Tuple[Any, Any]:
        if isinstance(center, Coordinate):
            return center.lat, center.lon
        if isinstance(center, (list, tuple)) and len(center) == 2:
            return center[0], center[1]
        raise ValueError(f"center must be a (lat, lon) pair, got {center!r}")

    @property
    def markers(self) -> MarkerSet:
        return self._markers

    @property
    def explicit_center(self) -> Optional[Coordinate]:
        return self._center

    def get_zoom(self) -> int:
        return self._viewport.zoom

    def set_zoom(self, value: int) -> None:
        """Set the zoom level.

        Raises:
            InvalidZoomValue: If value is not a non-negative integer.
        """
        self._viewport.zoom = value
        self.zoom = value

    def set_center(self, lat: Any, lon: Any) -> Coordinate:
        """Pin the map center, overriding the derived one.

        Raises:
            InvalidCoordinateFormat, InvalidCoordinateRange: On bad input.
        """
        self._center = validation.check(lat, lon)
        return self._center

    def clear_center(self) -> None:
        self._center = None

    def add_marker(self, entry: Any) -> bool:
        """Resolve and add one entry right away.

        Returns:
            True if the entry became a marker, False if it was skipped.
        """
        return self._markers.add_from_query(entry)

    def build(self) -> MapSnapshot:
        """Resolve pending entries and produce the render model.

        Raises:
            NoMarkersToRender: If no marker survived and no center is set.
        """
        if self._pending:
            pending, self._pending = self._pending, []
            results = self.resolver.resolve_many(pending, max_workers=self.max_workers)
            for query, result in zip(pending, results):
                self._markers.record(query, result)

        try:
            viewport = self._viewport.compute(self._markers, self._center)
        except NoMarkersToRender:
            self._logger.error(
                "Nothing to render",
                extra={"skipped": len(self._markers.failures)},
            )
            raise

        bounds = self._markers.bounding_box() if len(self._markers) else None
        snapshot = MapSnapshot(
            markers=self._markers.markers,
            viewport=viewport,
            bounds=bounds,
            size=self.size,
            failures=self._markers.failures,
        )
        self._logger.info(
            "Map model built",
            extra={
                "markers": len(snapshot.markers),
                "skipped": len(snapshot.failures),
                "zoom": viewport.zoom,
            },
        )
        return snapshot
