import json

import pytest
from aiohttp import test_utils, web

from features.common.exceptions.generation_exceptions import GenerationSource
from main import run_all_generators


def make_app(table_status, table_text, tide_status, tide_body, calls):
    async def station_table(request):
        calls.append("buoy")
        return web.Response(status=table_status, text=table_text)

    async def tide_stations(request):
        calls.append("tide")
        assert request.query["type"] == "tidepredictions"
        return web.Response(status=tide_status, body=tide_body, content_type="application/json")

    app = web.Application()
    app.router.add_get("/data/stations/station_table.txt", station_table)
    app.router.add_get("/mdapi/prod/webapi/stations.json", tide_stations)
    return app


@pytest.fixture
def settings_for(test_settings):
    def _settings_for(server):
        return test_settings.model_copy(update={
            "ndbc_station_table_url": str(server.make_url("/data/stations/station_table.txt")),
            "coops_stations_url": str(server.make_url("/mdapi/prod/webapi/stations.json?type=tidepredictions")),
        })
    return _settings_for


async def test_runs_both_flows_in_order(settings_for, station_table_text, tide_payload_bytes, tmp_path):
    calls = []
    app = make_app(200, station_table_text, 200, tide_payload_bytes, calls)

    async with test_utils.TestServer(app) as server:
        summaries = await run_all_generators(settings_for(server))

    assert calls == ["buoy", "tide"]
    assert [s.source for s in summaries] == [GenerationSource.BUOY, GenerationSource.TIDE]
    assert all(s.succeeded for s in summaries)
    assert len(json.loads((tmp_path / "all_noaa_buoys.json").read_text())) == 2
    assert len(json.loads((tmp_path / "all_noaa_tide_stations.json").read_text())) == 3


async def test_buoy_bad_response_does_not_stop_tides(settings_for, tide_payload_bytes, tmp_path):
    calls = []
    app = make_app(503, "Service Unavailable", 200, tide_payload_bytes, calls)

    async with test_utils.TestServer(app) as server:
        buoy_summary, tide_summary = await run_all_generators(settings_for(server))

    assert calls == ["buoy", "tide"]
    assert not buoy_summary.succeeded
    assert "bad_response" in buoy_summary.error
    assert "503" in buoy_summary.error
    assert tide_summary.succeeded
    assert not (tmp_path / "all_noaa_buoys.json").exists()
    assert (tmp_path / "all_noaa_tide_stations.json").exists()


async def test_tide_bad_response_keeps_buoy_output(settings_for, station_table_text, tmp_path):
    calls = []
    app = make_app(200, station_table_text, 500, b"{}", calls)

    async with test_utils.TestServer(app) as server:
        buoy_summary, tide_summary = await run_all_generators(settings_for(server))

    assert buoy_summary.succeeded
    assert not tide_summary.succeeded
    assert "bad_response" in tide_summary.error
    assert (tmp_path / "all_noaa_buoys.json").exists()
    assert not (tmp_path / "all_noaa_tide_stations.json").exists()


def test_main_exits_zero_when_flows_fail(monkeypatch):
    async def failing_run(settings=None):
        return []

    monkeypatch.setattr("main.run_all_generators", failing_run)
    monkeypatch.setattr("main.setup_logging", lambda level: None)

    import main

    assert main.main() == 0
