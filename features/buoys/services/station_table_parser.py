import logging
from itertools import dropwhile
from typing import List, Optional, Tuple

from pydantic import ValidationError

from features.buoys.models.buoy_types import BuoyRecord
from features.common.exceptions.generation_exceptions import (
    GenerationSource,
    ParsingFailedError
)

logger = logging.getLogger(__name__)

# Column positions in station_table.txt
STATION_ID_COLUMN = 0
TYPE_COLUMN = 2
NAME_COLUMN = 4
LOCATION_COLUMN = 6
MIN_COLUMNS = 8

def _parse_float(value: str) -> Optional[float]:
    try:
        return float(value)
    except ValueError:
        return None

def parse_location(location: str) -> Optional[Tuple[float, float]]:
    """Parse a location field like '44.794 N 87.313 W (44°47'38" N 87°18'47" W)'.

    Returns:
        Tuple of (latitude, longitude) with S and W negated, or None if the
        field does not start with two magnitude/hemisphere pairs.
    """
    parts = location.split()
    if len(parts) < 4:
        return None

    lat_degrees = _parse_float(parts[0])
    lon_degrees = _parse_float(parts[2])
    if lat_degrees is None or lon_degrees is None:
        return None

    latitude = -lat_degrees if parts[1] == "S" else lat_degrees
    longitude = -lon_degrees if parts[3] == "W" else lon_degrees
    return latitude, longitude

def parse_row(line: str) -> Optional[BuoyRecord]:
    """Parse one table row, returning None for non-buoy or malformed rows."""
    fields = [field.strip() for field in line.split("|")]
    if len(fields) < MIN_COLUMNS:
        return None

    if "buoy" not in fields[TYPE_COLUMN].casefold():
        return None

    coordinates = parse_location(fields[LOCATION_COLUMN])
    if coordinates is None:
        return None

    latitude, longitude = coordinates
    try:
        return BuoyRecord(
            station_id=fields[STATION_ID_COLUMN],
            name=fields[NAME_COLUMN],
            latitude=latitude,
            longitude=longitude
        )
    except ValidationError as e:
        logger.debug(f"Skipping station {fields[STATION_ID_COLUMN]!r}: {e.error_count()} invalid field(s)")
        return None

def parse_station_table(table: str) -> List[BuoyRecord]:
    """Parse the NDBC pipe-delimited station table into buoy records.

    Only the leading block of '#' comment lines is treated as a header. Rows
    that are too short, are not a buoy type, or have an unparseable location
    are skipped.

    Raises:
        ParsingFailedError: no buoys were found
    """
    lines = dropwhile(lambda line: line.startswith("#"), table.splitlines())

    buoys = []
    for line in lines:
        if not line:
            continue
        buoy = parse_row(line)
        if buoy is not None:
            buoys.append(buoy)

    if not buoys:
        logger.warning("Parsing finished, but no buoys were found.")
        raise ParsingFailedError(GenerationSource.BUOY, "No buoys found in station table")

    return buoys
