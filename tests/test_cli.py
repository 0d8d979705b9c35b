"""
Tests for the command-line interface.
"""

import json
import sys
from unittest.mock import patch

import pytest
from loguru import logger

import cli


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    for name in ("TRANSIT_OVERPASS_ENDPOINTS", "TRANSIT_OVERPASS_TIMEOUT_MS",
                 "TRANSIT_MAX_AREA_DEG2", "TRANSIT_CACHE_DIR"):
        monkeypatch.delenv(name, raising=False)
    yield
    # setup_logging points loguru at the captured stderr
    logger.remove()
    logger.add(sys.stderr)


class TestCli:

    @pytest.mark.unit
    def test_no_command(self):
        assert cli.main([]) == 1

    @pytest.mark.unit
    def test_query(self, capsys):
        assert cli.main(["query", "--bbox", "52.515,13.4,52.525,13.41"]) == 0
        out = capsys.readouterr().out
        assert "[bbox:52.515,13.4,52.525,13.41]" in out

    @pytest.mark.unit
    def test_invalid_bbox(self):
        with pytest.raises(SystemExit):
            cli.main(["query", "--bbox", "52.525,13.4,52.515,13.41"])

    @pytest.mark.unit
    def test_load_writes_geojson(self, sample_response, tmp_path, capsys):
        output = tmp_path / "map.geojson"
        with patch("transitbuilder.collectors.osm.api_client.OverpassAPIClient.fetch",
                   return_value=sample_response) as fetch:
            code = cli.main(["load", "--bbox", "52.515,13.4,52.525,13.41",
                             "--bbox", "52.515,13.4,52.525,13.41",
                             "-o", str(output), "--summary"])

        assert code == 0
        assert fetch.call_count == 1
        summary = json.loads(capsys.readouterr().out)
        assert summary == {"roads": 1, "railways": 0, "stops": 1, "regions": 1, "failed": 0}
        assert output.exists()

    @pytest.mark.unit
    def test_nearby(self, sample_response, capsys):
        with patch("transitbuilder.collectors.osm.api_client.OverpassAPIClient.fetch",
                   return_value=sample_response):
            code = cli.main(["nearby", "--bbox", "52.515,13.4,52.525,13.41",
                             "--lat", "52.5205", "--lng", "13.4052", "--radius", "50"])

        assert code == 0
        stops = json.loads(capsys.readouterr().out)
        assert [s["id"] for s in stops] == [3]
