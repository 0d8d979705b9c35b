"""
Unit tests for OSM tag parsing.
"""

import pytest

from transitbuilder.collectors.osm.tags import (
    classify_stop,
    has_shelter,
    is_electrified,
    is_oneway,
    parse_lanes,
    parse_max_speed,
    parse_routes,
)
from transitbuilder.models import StopType


class TestParseMaxSpeed:

    @pytest.mark.unit
    @pytest.mark.parametrize("raw,expected", [
        ("50", 50),
        ("50 km/h", 50),
        ("30 mph", 30),
        ("walk", 5),
        ("none", 999),
        (None, 50),
        ("", 50),
        ("DE:urban", 50),
        ("signals", 50),
    ])
    def test_values(self, raw, expected):
        assert parse_max_speed(raw) == expected

    @pytest.mark.unit
    def test_digits_must_lead(self):
        assert parse_max_speed("DE:zone30") == 50


class TestParseRoutes:

    @pytest.mark.unit
    def test_ref_and_route_ref_merged(self):
        routes = parse_routes({"ref": "M4", "route_ref": "M4;M5; 100 "})
        assert routes == {"M4", "M5", "100"}

    @pytest.mark.unit
    def test_no_route_tags(self):
        assert parse_routes({"name": "Hauptbahnhof"}) == frozenset()

    @pytest.mark.unit
    def test_empty_fragments_dropped(self):
        assert parse_routes({"route_ref": "1;;2;"}) == {"1", "2"}


class TestClassifyStop:

    @pytest.mark.unit
    def test_bus_stop(self):
        assert classify_stop({"highway": "bus_stop"}) is StopType.BUS_STOP

    @pytest.mark.unit
    def test_station(self):
        assert classify_stop({"railway": "station"}) is StopType.STATION

    @pytest.mark.unit
    def test_not_a_stop(self):
        assert classify_stop({"shop": "bakery"}) is None

    @pytest.mark.unit
    def test_priority_order(self):
        """highway=bus_stop beats public_transport=platform."""
        tags = {"highway": "bus_stop", "public_transport": "platform"}
        assert classify_stop(tags) is StopType.BUS_STOP

    @pytest.mark.unit
    def test_tram_stop_beats_platform(self):
        tags = {"railway": "tram_stop", "public_transport": "platform"}
        assert classify_stop(tags) is StopType.TRAM_STOP

    @pytest.mark.unit
    def test_platform_and_halt(self):
        assert classify_stop({"public_transport": "platform"}) is StopType.PLATFORM
        assert classify_stop({"railway": "halt"}) is StopType.HALT


class TestFlags:

    @pytest.mark.unit
    def test_electrified_default_true(self):
        assert is_electrified({})
        assert is_electrified({"electrified": "contact_line"})
        assert not is_electrified({"electrified": "no"})

    @pytest.mark.unit
    def test_oneway_only_yes(self):
        assert is_oneway({"oneway": "yes"})
        assert not is_oneway({"oneway": "-1"})
        assert not is_oneway({})

    @pytest.mark.unit
    def test_shelter(self):
        assert has_shelter({"shelter": "yes"})
        assert not has_shelter({"shelter": "no"})

    @pytest.mark.unit
    @pytest.mark.parametrize("raw,expected", [
        (None, 2), ("4", 4), ("2;3", 2), ("abc", 2), ("0", 2),
    ])
    def test_lanes(self, raw, expected):
        assert parse_lanes(raw) == expected
