"""
OpenStreetMap transit data module

Components:
- Tags: Tag parsing (speed limits, routes, stop types)
- Query: Overpass QL construction
- API client: Overpass API communication with endpoint rotation
- Parser: Response parsing into OSMNode/OSMWay
- Geometry: Way node ids -> coordinate polylines
- Roads, Railways, Stops: Entity construction
- Normalizer: Raw response -> roads, railways, stops
- Cache: Raw response caching on disk
- AreaCache: Incremental dataset keyed by fetched bounding boxes
"""

from .models import OSMNode, OSMWay
from .api_client import EndpointRotation, OverpassAPIClient
from .query import OverpassQueryBuilder
from .normalizer import ElementKind, NormalizedData, OSMNormalizer
from .area_cache import AreaCache, AreaLoadResult, CacheStats

__all__ = [
    "OSMNode",
    "OSMWay",
    "EndpointRotation",
    "OverpassAPIClient",
    "OverpassQueryBuilder",
    "ElementKind",
    "NormalizedData",
    "OSMNormalizer",
    "AreaCache",
    "AreaLoadResult",
    "CacheStats",
]
