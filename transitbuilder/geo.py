"""
Geodesic helpers

Haversine distance and degree/radian conversion
"""

import math
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import BBox

EARTH_RADIUS_M = 6371000


def to_radians(deg: float) -> float:
    return deg * (math.pi / 180)


def to_degrees(rad: float) -> float:
    return rad * (180 / math.pi)


def distance_meters(
    lat1: float,
    lon1: float,
    lat2: float,
    lon2: float
) -> float:
    """Calculate great-circle distance between two points in meters"""
    phi1 = to_radians(lat1)
    phi2 = to_radians(lat2)
    delta_phi = to_radians(lat2 - lat1)
    delta_lambda = to_radians(lon2 - lon1)

    a = math.sin(delta_phi/2)**2 + math.cos(phi1) * math.cos(phi2) * math.sin(delta_lambda/2)**2
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1-a))

    return EARTH_RADIUS_M * c


def bbox_area_deg2(bbox: "BBox") -> float:
    """Area of a bounding box in square degrees"""
    return (bbox.north - bbox.south) * (bbox.east - bbox.west)
