"""
Map session orchestration

Owns the AreaCache for one map session and exposes what a viewport
provider needs: load the visible area, look up stops, export GeoJSON.
"""

import json
import os
from typing import Any, Dict, List, Optional

from loguru import logger

from .collectors import AreaCache, AreaLoadResult
from .config import TransitConfig, get_config
from .models import BBox, Stop


class MapSession:
    """
    Map session holding an incrementally loaded dataset

    Usage:
        session = MapSession()
        result = session.load_viewport(BBox(south=52.51, west=13.40, north=52.52, east=13.41))
        session.save("output/berlin.geojson")
    """

    def __init__(self, config: Optional[TransitConfig] = None, area_cache: Optional[AreaCache] = None):
        self.config = config or get_config()
        self.area_cache = area_cache or AreaCache(self.config)

    def load_viewport(self, bbox: BBox, max_attempts: Optional[int] = None) -> AreaLoadResult:
        """
        Load a viewport, retrying when the source is unavailable

        Each failure rotates the client to its next endpoint, so by default
        every configured endpoint is tried once.

        Args:
            bbox: Visible map bounds
            max_attempts: Attempts before giving up (default: number of endpoints
                in the client's rotation)

        Returns:
            AreaLoadResult of the last attempt

        Raises:
            ValueError: If max_attempts is less than 1
        """
        if max_attempts is None:
            attempts = len(self.area_cache.api_client.rotation)
        elif max_attempts < 1:
            raise ValueError(f"max_attempts must be at least 1, got {max_attempts}")
        else:
            attempts = max_attempts
        result = AreaLoadResult()
        for attempt in range(1, attempts + 1):
            result = self.area_cache.load_area(bbox)
            if not result.retryable:
                break
            if attempt < attempts:
                logger.warning(f"Retrying {bbox.key} (attempt {attempt + 1}/{attempts})")
        if not result.ok:
            logger.error(f"Giving up on {bbox.key}: {result.error}")
        return result

    def nearby_stops(self, lat: float, lng: float, radius_m: float = 100) -> List[Stop]:
        return self.area_cache.find_nearby_stops(lat, lng, radius_m)

    def to_geojson(self) -> Dict[str, Any]:
        """All accumulated entities as a GeoJSON FeatureCollection"""
        features = [road.to_feature() for road in self.area_cache.roads]
        features += [railway.to_feature() for railway in self.area_cache.railways]
        features += [stop.to_feature() for stop in self.area_cache.stops]
        return {"type": "FeatureCollection", "features": features}

    def save(self, output_path: str) -> str:
        """Save accumulated entities to a GeoJSON file"""
        os.makedirs(os.path.dirname(output_path) or ".", exist_ok=True)

        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(self.to_geojson(), f, indent=2, ensure_ascii=False)

        logger.info(f"Saved map data to {output_path}")
        return output_path
