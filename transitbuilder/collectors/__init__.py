"""
Data collectors for TransitBuilder

- AreaCache: Roads, railways and stops from OpenStreetMap
"""

from .osm import AreaCache, AreaLoadResult, CacheStats

__all__ = [
    "AreaCache",
    "AreaLoadResult",
    "CacheStats",
]
