"""
Unit tests for domain models.
"""

import pytest
from pydantic import ValidationError

from transitbuilder.models import BBox, Railway, RailwayType, Road, RoadType, Stop, StopType


class TestBBox:

    @pytest.mark.unit
    def test_key(self):
        bbox = BBox(south=52.5, west=13.4, north=52.6, east=13.5)
        assert bbox.key == "52.5,13.4,52.6,13.5"

    @pytest.mark.unit
    def test_south_above_north_rejected(self):
        with pytest.raises(ValueError):
            BBox(south=52.6, west=13.4, north=52.5, east=13.5)

    @pytest.mark.unit
    def test_west_above_east_rejected(self):
        with pytest.raises(ValidationError):
            BBox(south=52.5, west=13.5, north=52.6, east=13.4)

    @pytest.mark.unit
    def test_degenerate_bbox_allowed(self):
        bbox = BBox(south=52.5, west=13.4, north=52.5, east=13.4)
        assert bbox.key == "52.5,13.4,52.5,13.4"

    @pytest.mark.unit
    def test_from_string(self):
        bbox = BBox.from_string("52.5, 13.4, 52.6, 13.5")
        assert (bbox.south, bbox.west, bbox.north, bbox.east) == (52.5, 13.4, 52.6, 13.5)

    @pytest.mark.unit
    @pytest.mark.parametrize("value", ["52.5,13.4,52.6", "a,b,c,d", "52.6,13.4,52.5,13.5"])
    def test_from_string_invalid(self, value):
        with pytest.raises(ValueError):
            BBox.from_string(value)

    @pytest.mark.unit
    def test_hashable(self):
        a = BBox(south=1, west=2, north=3, east=4)
        b = BBox(south=1, west=2, north=3, east=4)
        assert len({a, b}) == 1


class TestEntities:

    @pytest.mark.unit
    def test_road_needs_two_points(self):
        with pytest.raises(ValidationError):
            Road(id=1, type=RoadType.PRIMARY, max_speed_kph=50, coordinates=((52.0, 13.0),))

    @pytest.mark.unit
    def test_road_rejects_unknown_type(self):
        with pytest.raises(ValidationError):
            Road(id=1, type="motorway", max_speed_kph=50, coordinates=((52.0, 13.0), (52.1, 13.1)))

    @pytest.mark.unit
    def test_road_immutable(self):
        road = Road(id=1, type=RoadType.PRIMARY, max_speed_kph=50, coordinates=((52.0, 13.0), (52.1, 13.1)))
        with pytest.raises(ValidationError):
            road.name = "changed"

    @pytest.mark.unit
    def test_road_feature_uses_lon_lat(self):
        road = Road(id=7, type=RoadType.RESIDENTIAL, max_speed_kph=30, coordinates=((52.0, 13.0), (52.1, 13.1)))
        feature = road.to_feature()
        assert feature["geometry"] == {"type": "LineString", "coordinates": [[13.0, 52.0], [13.1, 52.1]]}
        assert feature["properties"]["type"] == "residential"
        assert feature["properties"]["lanes"] == 2

    @pytest.mark.unit
    def test_railway_defaults(self):
        railway = Railway(id=8, type=RailwayType.SUBWAY, max_speed_kph=70, coordinates=((0.0, 0.0), (1.0, 1.0)))
        assert railway.electrified is True
        assert railway.to_feature()["properties"]["kind"] == "railway"

    @pytest.mark.unit
    def test_stop_defaults_and_feature(self):
        stop = Stop(id=9, type=StopType.HALT, coordinates=(52.0, 13.0), routes=frozenset({"S1", "RE7"}))
        assert stop.name == "Unbenannt"
        assert stop.shelter is False
        feature = stop.to_feature()
        assert feature["geometry"] == {"type": "Point", "coordinates": [13.0, 52.0]}
        assert feature["properties"]["routes"] == ["RE7", "S1"]
