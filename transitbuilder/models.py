"""
Pydantic models for TransitBuilder map data
Roads, railways and stops normalized from OpenStreetMap
"""

from enum import Enum
from typing import Any, Dict, FrozenSet, List, Literal, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator


LatLng = Tuple[float, float]


# ============================================================
# GeoJSON Types
# ============================================================

class GeoJSONPoint(BaseModel):
    type: Literal["Point"] = "Point"
    coordinates: List[float]  # [longitude, latitude]


class GeoJSONLineString(BaseModel):
    type: Literal["LineString"] = "LineString"
    coordinates: List[List[float]]  # [[lon, lat], ...]


def _line_string(coordinates: Tuple[LatLng, ...]) -> GeoJSONLineString:
    return GeoJSONLineString(coordinates=[[lng, lat] for lat, lng in coordinates])


# ============================================================
# Entity types
# ============================================================

class RoadType(str, Enum):
    PRIMARY = "primary"
    SECONDARY = "secondary"
    TERTIARY = "tertiary"
    RESIDENTIAL = "residential"
    UNCLASSIFIED = "unclassified"
    LIVING_STREET = "living_street"


class RailwayType(str, Enum):
    TRAM = "tram"
    SUBWAY = "subway"
    LIGHT_RAIL = "light_rail"
    RAIL = "rail"


class StopType(str, Enum):
    BUS_STOP = "bus_stop"
    TRAM_STOP = "tram_stop"
    STATION = "station"
    HALT = "halt"
    PLATFORM = "platform"


# ============================================================
# Bounding box
# ============================================================

class BBox(BaseModel):
    """Closed geographic rectangle in degrees"""
    model_config = ConfigDict(frozen=True)

    south: float = Field(ge=-90, le=90)
    west: float = Field(ge=-180, le=180)
    north: float = Field(ge=-90, le=90)
    east: float = Field(ge=-180, le=180)

    @model_validator(mode="after")
    def check_order(self) -> "BBox":
        if self.south > self.north:
            raise ValueError(f"south ({self.south}) must not exceed north ({self.north})")
        if self.west > self.east:
            raise ValueError(f"west ({self.west}) must not exceed east ({self.east})")
        return self

    @property
    def key(self) -> str:
        """Canonical "south,west,north,east" string, also used in queries"""
        return f"{self.south},{self.west},{self.north},{self.east}"

    @classmethod
    def from_string(cls, value: str) -> "BBox":
        """Parse "south,west,north,east" """
        parts = value.split(",")
        if len(parts) != 4:
            raise ValueError(f"Expected 4 comma-separated values, got {len(parts)}: {value!r}")
        try:
            south, west, north, east = (float(p.strip()) for p in parts)
        except ValueError as e:
            raise ValueError(f"Bounding box values must be numeric: {value!r}") from e
        return cls(south=south, west=west, north=north, east=east)


# ============================================================
# Map entities
# ============================================================

class Road(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    type: RoadType
    name: str = ""
    max_speed_kph: int
    coordinates: Tuple[LatLng, ...] = Field(min_length=2)
    lanes: int = 2
    oneway: bool = False

    def to_feature(self) -> Dict[str, Any]:
        return {
            "type": "Feature",
            "id": self.id,
            "geometry": _line_string(self.coordinates).model_dump(),
            "properties": {
                "kind": "road",
                "type": self.type.value,
                "name": self.name,
                "max_speed_kph": self.max_speed_kph,
                "lanes": self.lanes,
                "oneway": self.oneway,
            },
        }


class Railway(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    type: RailwayType
    name: str = ""
    max_speed_kph: int
    coordinates: Tuple[LatLng, ...] = Field(min_length=2)
    electrified: bool = True

    def to_feature(self) -> Dict[str, Any]:
        return {
            "type": "Feature",
            "id": self.id,
            "geometry": _line_string(self.coordinates).model_dump(),
            "properties": {
                "kind": "railway",
                "type": self.type.value,
                "name": self.name,
                "max_speed_kph": self.max_speed_kph,
                "electrified": self.electrified,
            },
        }


class Stop(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    type: StopType
    name: str = "Unbenannt"
    coordinates: LatLng
    routes: FrozenSet[str] = frozenset()
    shelter: bool = False

    def to_feature(self) -> Dict[str, Any]:
        lat, lng = self.coordinates
        return {
            "type": "Feature",
            "id": self.id,
            "geometry": GeoJSONPoint(coordinates=[lng, lat]).model_dump(),
            "properties": {
                "kind": "stop",
                "type": self.type.value,
                "name": self.name,
                "routes": sorted(self.routes),
                "shelter": self.shelter,
            },
        }
