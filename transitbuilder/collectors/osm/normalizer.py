"""
OSM normalization

Turns a raw Overpass response into Road, Railway and Stop entities
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List

from loguru import logger

from .geometry import assemble_coordinates, build_node_index
from .models import OSMNode, OSMWay
from .parser import OSMResponseParser
from .railways import RailwayProcessor
from .roads import RoadProcessor
from .stops import StopProcessor
from .tags import classify_stop
from ...models import Railway, Road, Stop


class ElementKind(Enum):
    """Classification of a raw element"""
    ROAD = "road"
    RAILWAY = "railway"
    STOP = "stop"
    DISCARD = "discard"


def classify_way(way: OSMWay) -> ElementKind:
    """
    Classify a way by its tags

    A supported highway type wins over a railway tag; anything else is
    discarded.
    """
    if not way.tags:
        return ElementKind.DISCARD
    if RoadProcessor.road_type(way.tags) is not None:
        return ElementKind.ROAD
    if RailwayProcessor.railway_type(way.tags) is not None:
        return ElementKind.RAILWAY
    return ElementKind.DISCARD


def classify_node(node: OSMNode) -> ElementKind:
    if node.tags and classify_stop(node.tags) is not None:
        return ElementKind.STOP
    return ElementKind.DISCARD


@dataclass
class NormalizedData:
    """Entities produced by one normalization pass"""
    roads: List[Road] = field(default_factory=list)
    railways: List[Railway] = field(default_factory=list)
    stops: List[Stop] = field(default_factory=list)


class OSMNormalizer:
    """Two-pass normalizer: nodes first (index + stops), then ways"""

    def __init__(self):
        self.parser = OSMResponseParser()
        self.road_processor = RoadProcessor()
        self.railway_processor = RailwayProcessor()
        self.stop_processor = StopProcessor()

    def normalize(self, data: Dict[str, Any]) -> NormalizedData:
        """
        Normalize an Overpass response

        Args:
            data: JSON response from Overpass API

        Returns:
            NormalizedData with roads, railways and stops

        Raises:
            MalformedResponse: If the response has no 'elements' list
        """
        nodes, ways = self.parser.parse_elements(data)

        # Keyed by id so an element repeated in one response appears once
        roads: Dict[int, Road] = {}
        railways: Dict[int, Railway] = {}
        stops: Dict[int, Stop] = {}

        # Pass 1: node index and stops
        node_index = build_node_index(nodes)
        for node in nodes:
            if classify_node(node) is ElementKind.STOP:
                stops[node.id] = self.stop_processor.parse_stop(node)

        # Pass 2: ways
        discarded = 0
        for way in ways:
            kind = classify_way(way)
            if kind is ElementKind.DISCARD:
                discarded += 1
                continue

            coordinates = assemble_coordinates(way.node_ids, node_index)
            if len(coordinates) < 2:
                logger.debug(f"Discarding way {way.id}: {len(coordinates)} resolvable nodes")
                discarded += 1
                continue

            if kind is ElementKind.ROAD:
                roads[way.id] = self.road_processor.parse_road(way, coordinates)
            else:
                railways[way.id] = self.railway_processor.parse_railway(way, coordinates)

        result = NormalizedData(
            roads=list(roads.values()),
            railways=list(railways.values()),
            stops=list(stops.values())
        )
        logger.info(f"Normalized {len(result.roads)} roads, {len(result.railways)} railways, "
                    f"{len(result.stops)} stops ({discarded} ways discarded)")
        return result
