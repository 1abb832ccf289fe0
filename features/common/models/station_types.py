from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from features.common.exceptions.generation_exceptions import GenerationSource

class StationRecord(BaseModel):
    """Clean station reference written to the output files."""
    station_id: str = Field(alias="stationId", min_length=1)
    name: str
    latitude: float = Field(ge=-90, le=90, allow_inf_nan=False)
    longitude: float = Field(ge=-180, le=180, allow_inf_nan=False)

    model_config = ConfigDict(frozen=True, populate_by_name=True)

class GenerationSummary(BaseModel):
    """Outcome of one generation flow."""
    source: GenerationSource
    succeeded: bool
    records_received: int = 0
    records_written: int = 0
    output_path: Optional[str] = None
    error: Optional[str] = None
