"""
OSM response parser

Parses Overpass API responses into OSMNode and OSMWay objects
"""

from typing import Dict, Any, Tuple, List
from loguru import logger

from .models import OSMNode, OSMWay
from ...exceptions import MalformedResponse


def _parse_tags(raw: Any) -> Dict[str, str]:
    """Tag dict with string values; raises TypeError for non-dict tags"""
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise TypeError(f"tags must be an object, got {type(raw).__name__}")
    return {str(key): str(value) for key, value in raw.items()}


class OSMResponseParser:
    """Parses Overpass API responses"""

    @staticmethod
    def parse_elements(data: Dict[str, Any]) -> Tuple[List[OSMNode], List[OSMWay]]:
        """
        Parse Overpass response into nodes and ways

        Nodes and ways keep response order. Elements of other types
        (relations, areas) and elements missing required fields or carrying
        non-object tags are skipped. Tag values are coerced to strings.

        Args:
            data: JSON response from Overpass API

        Returns:
            Tuple of (nodes list, ways list)

        Raises:
            MalformedResponse: If 'elements' is missing or not a list
        """
        if not isinstance(data, dict) or not isinstance(data.get("elements"), list):
            raise MalformedResponse("Overpass response has no 'elements' list")

        nodes = []
        ways = []
        skipped = 0

        for element in data["elements"]:
            if not isinstance(element, dict):
                skipped += 1
                continue
            element_type = element.get("type")
            try:
                if element_type == "node":
                    nodes.append(OSMNode(
                        id=int(element["id"]),
                        lat=float(element["lat"]),
                        lon=float(element["lon"]),
                        tags=_parse_tags(element.get("tags"))
                    ))
                elif element_type == "way":
                    ways.append(OSMWay(
                        id=int(element["id"]),
                        node_ids=[int(n) for n in element.get("nodes", [])],
                        tags=_parse_tags(element.get("tags"))
                    ))
            except (KeyError, TypeError, ValueError) as e:
                skipped += 1
                logger.debug(f"Skipping malformed {element_type} element {element.get('id')}: {e}")

        if skipped:
            logger.debug(f"Skipped {skipped} malformed elements")

        return nodes, ways
