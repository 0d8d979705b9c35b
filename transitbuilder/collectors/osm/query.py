"""
Overpass query construction

Builds the Overpass QL query for roads, railways and stops in a bounding box
"""

from typing import Optional

from ...config import OverpassConfig, get_config
from ...models import BBox, RailwayType, RoadType
from .tags import STOP_RULES


class OverpassQueryBuilder:
    """Builds deterministic Overpass QL queries"""

    def __init__(self, config: Optional[OverpassConfig] = None):
        self.config = config or get_config().overpass
        self.query_timeout_s = self.config.query_timeout_s

    def build(self, bbox: BBox) -> str:
        """
        Build the query for a bounding box

        Selects ways by highway/railway type and stop nodes, then recurses
        down to way nodes so geometry can be assembled.
        Identical bbox -> identical string.
        """
        road_types = "|".join(t.value for t in RoadType)
        railway_types = "|".join(t.value for t in RailwayType)

        lines = [
            f"[out:json][timeout:{self.query_timeout_s}][bbox:{bbox.key}];",
            "(",
            f'  way["highway"~"^({road_types})$"];',
            f'  way["railway"~"^({railway_types})$"];',
        ]
        for key, value, _ in STOP_RULES:
            lines.append(f'  node["{key}"="{value}"];')
        lines += [
            ");",
            "out body;",
            ">;",
            "out skel qt;",
        ]
        return "\n".join(lines) + "\n"
