"""Services layer - Resolution and map-model orchestration.

Available services:
- CoordinateResolver: entry -> Coordinate through cache, limiter, backend
- RateLimiter: minimum interval between backend calls
- MarkerSet: ordered resolved markers and skipped entries
- ViewportCalculator: center and zoom from a marker set
- MapModel: entries in, MapSnapshot out
"""

from .coordinate_resolver import CoordinateResolver, Resolution
from .map_model import MapModel
from .marker_set import MarkerSet
from .rate_limiter import RateLimiter
from .viewport import DEFAULT_ZOOM, ViewportCalculator

__all__ = [
    "CoordinateResolver",
    "Resolution",
    "RateLimiter",
    "MarkerSet",
    "ViewportCalculator",
    "DEFAULT_ZOOM",
    "MapModel",
]
