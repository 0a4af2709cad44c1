"""Viewport calculation from a marker set."""

from __future__ import annotations

import logging
from typing import Optional

from ..domain.errors import NoMarkersToRender
from ..domain.models import Coordinate, Viewport
from ..validation import check_zoom
from .marker_set import MarkerSet

DEFAULT_ZOOM = 12


class ViewportCalculator:
    """Derives the map center from the markers' bounding box.

    The center is the midpoint of the tightest lat/lon rectangle around
    all markers. Longitudes are not wrapped at the antimeridian.
    """

    def __init__(self, zoom: int = DEFAULT_ZOOM) -> None:
        self._zoom = check_zoom(zoom)
        self._logger = logging.getLogger(__name__)

    def __repr__(self) -> str:
        return f"ViewportCalculator(zoom={self._zoom})"

    @property
    def zoom(self) -> int:
        """Current zoom level; never recomputed from the markers."""
        return self._zoom

    @zoom.setter
    def zoom(self, value: int) -> None:
        self._zoom = check_zoom(value)

    def compute(
        self,
        marker_set: MarkerSet,
        explicit_center: Optional[Coordinate] = None,
    ) -> Viewport:
        """Compute the viewport for ``marker_set``.

        Args:
            marker_set: Markers to frame.
            explicit_center: Overrides the derived center when given.

        Returns:
            Viewport with the chosen center and the current zoom.

        Raises:
            NoMarkersToRender: If the set is empty and no center is given.
        """
        if explicit_center is not None:
            return Viewport(center=explicit_center, zoom=self._zoom)

        if len(marker_set) == 0:
            raise NoMarkersToRender(
                "No valid markers to render",
                skipped=len(marker_set.failures),
            )

        box = marker_set.bounding_box()
        self._logger.debug(
            "Viewport computed",
            extra={"markers": len(marker_set), "bounds": box.to_list()},
        )
        return Viewport(center=box.center, zoom=self._zoom)
