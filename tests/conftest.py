"""
Shared pytest fixtures for TransitBuilder tests.
"""

import os
import sys
import pytest

# Add project root to path for imports
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, PROJECT_ROOT)

from transitbuilder.collectors.osm import EndpointRotation
from transitbuilder.config import OverpassConfig, TransitConfig
from transitbuilder.exceptions import SourceUnavailable
from transitbuilder.models import BBox


ENDPOINTS = [
    "https://overpass.example.org/api/interpreter",
    "https://mirror-a.example.org/api/interpreter",
    "https://mirror-b.example.org/api/interpreter",
]


class FakeOverpassClient:
    """Stands in for OverpassAPIClient; returns or raises queued outcomes."""

    def __init__(self, *outcomes, endpoints=ENDPOINTS):
        self.outcomes = list(outcomes)
        self.queries = []
        self.rotation = EndpointRotation(endpoints)

    @property
    def calls(self):
        return len(self.queries)

    def fetch(self, query):
        self.queries.append(query)
        outcome = self.outcomes.pop(0) if len(self.outcomes) > 1 else self.outcomes[0]
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


@pytest.fixture
def test_config():
    """Config with fake endpoints and no rate limiting."""
    return TransitConfig(overpass=OverpassConfig(
        endpoints=list(ENDPOINTS),
        timeout_ms=5000,
        min_request_interval_s=0.0,
    ))


@pytest.fixture
def berlin_bbox():
    return BBox(south=52.515, west=13.40, north=52.525, east=13.41)


@pytest.fixture
def sample_response():
    """One primary road over two nodes and one tram stop."""
    return {
        "version": 0.6,
        "elements": [
            {"type": "node", "id": 1, "lat": 52.5200, "lon": 13.4050},
            {"type": "node", "id": 2, "lat": 52.5210, "lon": 13.4060},
            {
                "type": "node", "id": 3, "lat": 52.5205, "lon": 13.4052,
                "tags": {"railway": "tram_stop", "name": "Alexanderplatz", "route_ref": "M4;M5"},
            },
            {
                "type": "way", "id": 100, "nodes": [1, 2],
                "tags": {"highway": "primary", "name": "Karl-Liebknecht-Straße", "maxspeed": "50"},
            },
        ],
    }


@pytest.fixture
def mixed_response():
    """Roads, railways, stops and elements that must be discarded."""
    return {
        "elements": [
            {"type": "node", "id": 1, "lat": 52.5200, "lon": 13.4050},
            {"type": "node", "id": 2, "lat": 52.5210, "lon": 13.4060},
            {"type": "node", "id": 3, "lat": 52.5220, "lon": 13.4070},
            {"type": "node", "id": 10, "lat": 52.5201, "lon": 13.4051,
             "tags": {"highway": "bus_stop", "ref": "100; 200", "shelter": "yes"}},
            {"type": "node", "id": 11, "lat": 52.5202, "lon": 13.4052,
             "tags": {"shop": "bakery", "name": "Bäckerei"}},
            {"type": "way", "id": 200, "nodes": [1, 2, 3],
             "tags": {"highway": "residential", "lanes": "1", "oneway": "yes", "maxspeed": "30 km/h"}},
            {"type": "way", "id": 201, "nodes": [2, 3],
             "tags": {"railway": "tram", "ref": "M10", "electrified": "contact_line"}},
            {"type": "way", "id": 202, "nodes": [1, 99],
             "tags": {"highway": "secondary"}},
            {"type": "way", "id": 203, "nodes": [1, 2],
             "tags": {"highway": "footway"}},
            {"type": "way", "id": 204, "nodes": [1, 3]},
            {"type": "relation", "id": 300, "members": []},
        ],
    }


@pytest.fixture
def fake_client(sample_response):
    return FakeOverpassClient(sample_response)


@pytest.fixture
def unavailable():
    return SourceUnavailable("Overpass HTTP error 504", endpoint=ENDPOINTS[0], status_code=504)
