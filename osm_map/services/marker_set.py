"""Ordered collection of resolved markers."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator, List, Optional, Tuple

from ..domain.models import (
    BoundingBox,
    LocationQuery,
    Marker,
    ResolutionFailure,
)
from .coordinate_resolver import CoordinateResolver, Resolution


@dataclass
class MarkerSet:
    """Markers in insertion order, plus the entries that were skipped.

    Markers are immutable and only ever appended. Accessors hand out
    tuples, never the internal list.

    Attributes:
        resolver: Resolver used by add_from_query; optional when only
            pre-built markers are added
    """

    resolver: Optional[CoordinateResolver] = None

    _markers: List[Marker] = field(default_factory=list, repr=False)
    _failures: List[ResolutionFailure] = field(default_factory=list, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def __len__(self) -> int:
        return len(self._markers)

    def __iter__(self) -> Iterator[Marker]:
        return iter(tuple(self._markers))

    @property
    def markers(self) -> Tuple[Marker, ...]:
        return tuple(self._markers)

    @property
    def failures(self) -> Tuple[ResolutionFailure, ...]:
        return tuple(self._failures)

    def add(self, marker: Marker) -> None:
        """Append a pre-built marker.

        Raises:
            TypeError: If ``marker`` is not a Marker.
        """
        if not isinstance(marker, Marker):
            raise TypeError(f"Expected a Marker, got {type(marker).__name__}")
        self._markers.append(marker)

    def add_from_query(self, query: Any) -> bool:
        """Resolve an entry and append it as a marker.

        Args:
            query: A LocationQuery or any shape LocationQuery.from_entry
                accepts.

        Returns:
            True if a marker was added, False if resolution failed.

        Raises:
            TypeError, ValueError: If the entry is malformed.
            RuntimeError: If the set has no resolver.
        """
        query = LocationQuery.from_entry(query)
        if self.resolver is None:
            raise RuntimeError("MarkerSet has no resolver; use add() instead")

        return self.record(query, self.resolver.resolve(query))

    def record(self, query: LocationQuery, result: Resolution) -> bool:
        """Append the outcome of an already-resolved entry.

        Returns:
            True if a marker was added, False if ``result`` is a failure.
        """
        if isinstance(result, ResolutionFailure):
            self._failures.append(result)
            self._logger.debug(
                "Skipping map entry",
                extra={"query": query.text, "reason": result.reason.name},
            )
            return False

        self._markers.append(Marker(coordinate=result, label=query.label, icon=query.icon))
        return True

    def extend_from_queries(self, queries: Iterable[Any]) -> int:
        """Add several entries; returns how many became markers."""
        return sum(1 for query in queries if self.add_from_query(query))

    def bounding_box(self) -> BoundingBox:
        """Box covering every marker.

        Raises:
            ValueError: If the set is empty.
        """
        return BoundingBox.covering(marker.coordinate for marker in self._markers)

    def clear(self) -> None:
        self._markers.clear()
        self._failures.clear()
