"""Shared fixtures: sample NOAA payloads and settings that write to a temp dir."""

import json

import pytest

from core.config import Settings


STATION_TABLE_HEADER = (
    "# STATION_ID | OWNER | TTYPE | HULL | NAME | PAYLOAD | LOCATION | TIMEZONE | FORECAST | NOTE\n"
    "#            |       |       |      |      |         |          |          |          |\n"
)


@pytest.fixture
def station_table_text() -> str:
    """A small station table with two buoys, a C-MAN station and a short row."""
    return STATION_TABLE_HEADER + (
        "0y2w3|CG|Weather Station| |Sturgeon Bay CG Station, WI| |"
        "44.794 N 87.313 W (44&#176;47'40\" N 87&#176;18'47\" W)| | |\n"
        "13001|PR|Atlas Buoy| |NE Extension| |"
        "12.000 N 23.000 W (12&#176;0'0\" N 23&#176;0'0\" W)| | |\n"
        "short|row|buoy\n"
        "\n"
        "45002|NDBC|3-meter discus buoy|3D|NORTH MICHIGAN- Halfway between North Manitou and Washington Island.|AMPS|"
        "45.344 N 86.411 W (45&#176;20'38\" N 86&#176;24'40\" W)|C| |\n"
    )


@pytest.fixture
def tide_payload() -> dict:
    """CO-OPS stations response with five stations, two lacking coordinates."""
    return {
        "count": 5,
        "units": None,
        "stations": [
            {"id": "1611400", "name": "Nawiliwili", "lat": 21.9544, "lng": -159.3561, "state": "HI"},
            {"id": "8410140", "name": "Eastport", "lat": None, "lng": -66.9824, "state": "ME"},
            {"id": "8418150", "name": "Portland", "lat": 43.6567, "lng": -70.2467, "state": "ME"},
            {"id": "8443970", "name": "Boston", "lat": 42.3548},
            {"id": "9414290", "name": "San Francisco", "lat": 37.8063, "lng": -122.4659, "state": "CA"},
        ],
    }


@pytest.fixture
def tide_payload_bytes(tide_payload) -> bytes:
    return json.dumps(tide_payload).encode("utf-8")


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    return Settings(output_dir=str(tmp_path), request_timeout=5)
