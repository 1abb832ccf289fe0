import logging
from typing import Iterable, List

from pydantic import ValidationError

from features.tides.models.tide_types import RawTideStation, TideStationRecord

logger = logging.getLogger(__name__)

def normalize_tide_stations(stations: Iterable[RawTideStation]) -> List[TideStationRecord]:
    """Map raw API stations to clean records, skipping stations with no location."""
    clean_stations = []
    for station in stations:
        if station.lat is None or station.lng is None:
            continue
        try:
            clean_stations.append(
                TideStationRecord(
                    station_id=station.id,
                    name=station.name,
                    latitude=station.lat,
                    longitude=station.lng
                )
            )
        except ValidationError as e:
            logger.warning(f"Dropping tide station {station.id!r}: {e.error_count()} invalid field(s)")
    return clean_stations
