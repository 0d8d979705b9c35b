"""
TransitBuilder OSM ingestion

Loads roads, railways and public transport stops from OpenStreetMap
for a map viewport and accumulates them across fetches.
"""

from .models import BBox, Road, Railway, Stop, RoadType, RailwayType, StopType
from .collectors import AreaCache, AreaLoadResult, CacheStats
from .pipeline import MapSession

__version__ = "1.0.0"

__all__ = [
    "BBox",
    "Road",
    "Railway",
    "Stop",
    "RoadType",
    "RailwayType",
    "StopType",
    "AreaCache",
    "AreaLoadResult",
    "CacheStats",
    "MapSession",
]
