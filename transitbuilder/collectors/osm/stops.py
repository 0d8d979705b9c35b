"""
Stop-specific logic

Builds Stop entities from tagged nodes
"""

from typing import Optional

from .models import OSMNode
from .tags import classify_stop, has_shelter, parse_routes
from ...models import Stop

DEFAULT_STOP_NAME = "Unbenannt"


class StopProcessor:
    """Processes public transport stops"""

    def parse_stop(self, node: OSMNode) -> Optional[Stop]:
        """Stop for a node, or None if the node is not a stop"""
        tags = node.tags
        stop_type = classify_stop(tags)
        if stop_type is None:
            return None
        return Stop(
            id=node.id,
            type=stop_type,
            name=tags.get("name") or DEFAULT_STOP_NAME,
            coordinates=(node.lat, node.lon),
            routes=parse_routes(tags),
            shelter=has_shelter(tags)
        )
