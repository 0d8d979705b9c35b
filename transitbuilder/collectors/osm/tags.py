"""
OSM tag parsing

Maps raw tag dictionaries to typed attributes
"""

import re
from typing import Dict, FrozenSet, Optional

from ...models import StopType

DEFAULT_MAX_SPEED_KPH = 50
WALK_SPEED_KPH = 5
UNLIMITED_SPEED_KPH = 999
DEFAULT_LANES = 2

_LEADING_DIGITS = re.compile(r"\s*(\d+)")

# Checked in order; the first match wins
STOP_RULES = (
    ("highway", "bus_stop", StopType.BUS_STOP),
    ("railway", "tram_stop", StopType.TRAM_STOP),
    ("railway", "station", StopType.STATION),
    ("railway", "halt", StopType.HALT),
    ("public_transport", "platform", StopType.PLATFORM),
)


def parse_max_speed(raw: Optional[str]) -> int:
    """
    Parse a maxspeed tag into km/h

    "50" and "50 km/h" -> 50, "walk" -> 5, "none" -> 999.
    Absent or unrecognized values (e.g. "DE:urban") -> 50.
    """
    if not raw:
        return DEFAULT_MAX_SPEED_KPH

    match = _LEADING_DIGITS.match(raw)
    if match:
        return int(match.group(1))

    if raw == "walk":
        return WALK_SPEED_KPH
    if raw == "none":
        return UNLIMITED_SPEED_KPH

    return DEFAULT_MAX_SPEED_KPH


def parse_routes(tags: Dict[str, str]) -> FrozenSet[str]:
    """Collect route identifiers from ref and route_ref (';'-separated)"""
    routes = set()
    for key in ("ref", "route_ref"):
        value = tags.get(key)
        if not value:
            continue
        for route in value.split(";"):
            route = route.strip()
            if route:
                routes.add(route)
    return frozenset(routes)


def classify_stop(tags: Dict[str, str]) -> Optional[StopType]:
    """Return the stop type for a node, or None if it is not a stop"""
    for key, value, stop_type in STOP_RULES:
        if tags.get(key) == value:
            return stop_type
    return None


def is_electrified(tags: Dict[str, str]) -> bool:
    return tags.get("electrified") != "no"


def parse_lanes(raw: Optional[str]) -> int:
    """Leading integer of a lanes tag; 2 when absent, non-numeric or zero"""
    if not raw:
        return DEFAULT_LANES
    match = _LEADING_DIGITS.match(raw)
    if not match:
        return DEFAULT_LANES
    return int(match.group(1)) or DEFAULT_LANES


def is_oneway(tags: Dict[str, str]) -> bool:
    return tags.get("oneway") == "yes"


def has_shelter(tags: Dict[str, str]) -> bool:
    return tags.get("shelter") == "yes"
