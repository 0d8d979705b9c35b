"""
Road-specific logic

Builds Road entities from highway ways
"""

from typing import List, Optional, Tuple

from .models import OSMWay
from .tags import is_oneway, parse_lanes, parse_max_speed
from ...models import Road, RoadType

_ROAD_TYPES = {t.value: t for t in RoadType}


class RoadProcessor:
    """Processes and classifies roads from OSM data"""

    @staticmethod
    def road_type(tags) -> Optional[RoadType]:
        """Road type for a highway tag, None when it is not a supported road"""
        return _ROAD_TYPES.get(tags.get("highway"))

    def parse_road(self, way: OSMWay, coordinates: List[Tuple[float, float]]) -> Road:
        tags = way.tags
        return Road(
            id=way.id,
            type=self.road_type(tags),
            name=tags.get("name") or "",
            max_speed_kph=parse_max_speed(tags.get("maxspeed")),
            coordinates=tuple(coordinates),
            lanes=parse_lanes(tags.get("lanes")),
            oneway=is_oneway(tags)
        )
