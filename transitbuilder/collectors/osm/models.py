"""
OSM data models

Data classes for raw OSM nodes and ways as returned by Overpass
"""

from typing import List, Dict
from dataclasses import dataclass, field


@dataclass
class OSMNode:
    """Represents an OSM node (point)"""
    id: int
    lat: float
    lon: float
    tags: Dict[str, str] = field(default_factory=dict)


@dataclass
class OSMWay:
    """Represents an OSM way (ordered node references)"""
    id: int
    node_ids: List[int]
    tags: Dict[str, str] = field(default_factory=dict)
