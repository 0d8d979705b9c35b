"""
Incremental area cache

Tracks fetched bounding boxes and accumulates normalized entities by id
"""

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Set

from loguru import logger

from .api_client import OverpassAPIClient
from .cache import OSMResponseCache
from .normalizer import OSMNormalizer
from .query import OverpassQueryBuilder
from ...config import TransitConfig, get_config
from ...exceptions import AreaTooLarge, MalformedResponse, OSMDataError, SourceUnavailable
from ...geo import bbox_area_deg2, distance_meters
from ...models import BBox, Railway, Road, Stop


@dataclass
class AreaLoadResult:
    """Entities contributed by one load_area call"""
    roads: List[Road] = field(default_factory=list)
    railways: List[Railway] = field(default_factory=list)
    stops: List[Stop] = field(default_factory=list)
    error: Optional[OSMDataError] = None
    # True when the bbox was already in the fetched ledger
    cached: bool = False

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def retryable(self) -> bool:
        return isinstance(self.error, SourceUnavailable)


@dataclass(frozen=True)
class CacheStats:
    road_count: int
    railway_count: int
    stop_count: int
    fetched_region_count: int


class AreaCache:
    """
    Accumulated road/railway/stop dataset for a map session

    Regions are remembered by exact bbox key: a bbox lying inside an
    already fetched one but with different bounds is fetched again.
    Overlapping results are merged by id, so this only costs a request.

    Not safe for concurrent load_area calls; callers serialize them.
    """

    def __init__(
        self,
        config: Optional[TransitConfig] = None,
        api_client: Optional[OverpassAPIClient] = None,
        query_builder: Optional[OverpassQueryBuilder] = None,
        normalizer: Optional[OSMNormalizer] = None,
        response_cache: Optional[OSMResponseCache] = None
    ):
        self.config = config or get_config()
        self.api_client = api_client or OverpassAPIClient(self.config.overpass)
        self.query_builder = query_builder or OverpassQueryBuilder(self.config.overpass)
        self.normalizer = normalizer or OSMNormalizer()
        self.response_cache = response_cache or OSMResponseCache(self.config.cache_dir)

        self._roads: Dict[int, Road] = {}
        self._railways: Dict[int, Railway] = {}
        self._stops: Dict[int, Stop] = {}
        self._fetched: Set[str] = set()

    # ------------------------------------------------------------
    # Accumulated data
    # ------------------------------------------------------------

    @property
    def roads(self) -> Iterator[Road]:
        return iter(self._roads.values())

    @property
    def railways(self) -> Iterator[Railway]:
        return iter(self._railways.values())

    @property
    def stops(self) -> Iterator[Stop]:
        return iter(self._stops.values())

    def is_area_loaded(self, bbox: BBox) -> bool:
        return bbox.key in self._fetched

    # ------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------

    def load_area(self, bbox: BBox) -> AreaLoadResult:
        """
        Load roads, railways and stops for a bounding box

        Returns only the entities produced by this call. Network and
        response failures are returned in AreaLoadResult.error with empty
        collections; the region is then not marked as fetched.
        """
        key = bbox.key
        if key in self._fetched:
            logger.debug(f"Area {key} already loaded")
            return AreaLoadResult(cached=True)

        max_area = self.config.overpass.max_area_deg2
        area = bbox_area_deg2(bbox)
        if max_area is not None and area > max_area:
            error = AreaTooLarge(area, max_area)
            logger.warning(f"Not loading {key}: {error}")
            return AreaLoadResult(error=error)

        try:
            data = self._fetch_raw(bbox)
            normalized = self.normalizer.normalize(data)
        except SourceUnavailable as e:
            logger.error(f"Failed to load OSM data for {key}: {e}")
            return AreaLoadResult(error=e)
        except MalformedResponse as e:
            logger.error(f"Malformed OSM response for {key}: {e}")
            return AreaLoadResult(error=e)

        for road in normalized.roads:
            self._roads[road.id] = road
        for railway in normalized.railways:
            self._railways[railway.id] = railway
        for stop in normalized.stops:
            self._stops[stop.id] = stop

        self._fetched.add(key)
        logger.info(f"Loaded area {key}: {len(normalized.roads)} roads, "
                    f"{len(normalized.railways)} railways, {len(normalized.stops)} stops")

        return AreaLoadResult(
            roads=normalized.roads,
            railways=normalized.railways,
            stops=normalized.stops
        )

    def _fetch_raw(self, bbox: BBox):
        data = self.response_cache.load(bbox)
        if data is not None:
            return data

        query = self.query_builder.build(bbox)
        data = self.api_client.fetch(query)
        # Only well-formed responses are worth keeping
        if isinstance(data, dict) and isinstance(data.get("elements"), list):
            self.response_cache.save(bbox, data)
        return data

    # ------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------

    def find_nearby_stops(self, lat: float, lng: float, radius_m: float = 100) -> List[Stop]:
        """All accumulated stops within radius_m meters (unordered)"""
        return [
            stop for stop in self._stops.values()
            if distance_meters(lat, lng, stop.coordinates[0], stop.coordinates[1]) <= radius_m
        ]

    def clear(self):
        """Drop all entities and forget fetched regions"""
        self._roads.clear()
        self._railways.clear()
        self._stops.clear()
        self._fetched.clear()
        logger.info("Area cache cleared")

    def stats(self) -> CacheStats:
        return CacheStats(
            road_count=len(self._roads),
            railway_count=len(self._railways),
            stop_count=len(self._stops),
            fetched_region_count=len(self._fetched)
        )
