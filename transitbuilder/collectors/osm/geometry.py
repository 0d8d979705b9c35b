"""
Way geometry assembly

Resolves way node references into coordinate polylines
"""

from typing import Dict, Iterable, List, Tuple

LatLng = Tuple[float, float]


def build_node_index(nodes) -> Dict[int, LatLng]:
    """Map node id -> (lat, lon); a later duplicate id wins"""
    return {node.id: (node.lat, node.lon) for node in nodes}


def assemble_coordinates(way_node_ids: Iterable[int], node_index: Dict[int, LatLng]) -> List[LatLng]:
    """
    Look up each node id in order

    Ids missing from the index are dropped, so edge-clipped ways come back
    shorter than their node list.
    """
    return [node_index[node_id] for node_id in way_node_ids if node_id in node_index]
