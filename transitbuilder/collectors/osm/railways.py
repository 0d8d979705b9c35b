"""
Railway-specific logic

Builds Railway entities from railway ways
"""

from typing import List, Optional, Tuple

from .models import OSMWay
from .tags import is_electrified, parse_max_speed
from ...models import Railway, RailwayType

_RAILWAY_TYPES = {t.value: t for t in RailwayType}


class RailwayProcessor:
    """Processes railway ways (tram, subway, light rail, rail)"""

    @staticmethod
    def railway_type(tags) -> Optional[RailwayType]:
        return _RAILWAY_TYPES.get(tags.get("railway"))

    def parse_railway(self, way: OSMWay, coordinates: List[Tuple[float, float]]) -> Railway:
        tags = way.tags
        return Railway(
            id=way.id,
            type=self.railway_type(tags),
            # Lines are often only labelled by ref
            name=tags.get("name") or tags.get("ref") or "",
            max_speed_kph=parse_max_speed(tags.get("maxspeed")),
            coordinates=tuple(coordinates),
            electrified=is_electrified(tags)
        )
