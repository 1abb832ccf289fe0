from typing import List, Optional
from pydantic import BaseModel, ConfigDict

from features.common.models.station_types import StationRecord

class RawTideStation(BaseModel):
    """Station entry as returned by the CO-OPS metadata API."""
    id: str
    name: str
    lat: Optional[float] = None  # null for some stations
    lng: Optional[float] = None

    model_config = ConfigDict(extra="ignore")

class TideStationResponse(BaseModel):
    stations: List[RawTideStation]

    model_config = ConfigDict(extra="ignore")

class TideStationRecord(StationRecord):
    """Tide prediction station reference."""
