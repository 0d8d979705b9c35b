"""
OSM response caching

Handles caching of raw Overpass responses to disk, keyed by bounding box
"""

import os
import json
import hashlib
from typing import Dict, Any, Optional
from loguru import logger

from ...models import BBox


class OSMResponseCache:
    """Handles caching of raw OSM responses to disk"""

    def __init__(self, cache_dir: Optional[str] = None):
        self.cache_dir = cache_dir

    def get_cache_path(self, bbox: BBox) -> Optional[str]:
        """Get cache file path for a bounding box"""
        if not self.cache_dir:
            return None
        cache_hash = hashlib.md5(bbox.key.encode()).hexdigest()[:12]
        return os.path.join(self.cache_dir, f"osm_{cache_hash}.json")

    def load(self, bbox: BBox) -> Optional[Dict[str, Any]]:
        """Load a raw response from cache if it exists"""
        cache_path = self.get_cache_path(bbox)
        if not cache_path or not os.path.exists(cache_path):
            return None
        try:
            with open(cache_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning(f"Failed to load cache {cache_path}: {e}")
            return None
        logger.info(f"Loaded OSM data from cache: {cache_path}")
        return data

    def save(self, bbox: BBox, data: Dict[str, Any]):
        """Save a raw response to cache"""
        cache_path = self.get_cache_path(bbox)
        if not cache_path:
            return
        try:
            os.makedirs(os.path.dirname(cache_path), exist_ok=True)
            with open(cache_path, 'w', encoding='utf-8') as f:
                json.dump(data, f, ensure_ascii=False)
            logger.info(f"Saved OSM data to cache: {cache_path}")
        except OSError as e:
            logger.warning(f"Failed to save cache {cache_path}: {e}")
