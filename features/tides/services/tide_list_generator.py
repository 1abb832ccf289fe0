import logging
from typing import List

from pydantic import ValidationError

from features.common.exceptions.generation_exceptions import (
    GenerationSource,
    DataCorruptedError
)
from features.common.models.station_types import GenerationSummary
from features.common.services.station_list_generator import StationListGenerator
from features.tides.models.tide_types import TideStationRecord, TideStationResponse
from features.tides.services.tide_station_normalizer import normalize_tide_stations

logger = logging.getLogger(__name__)

class TideListGenerator(StationListGenerator):
    """Builds the tide station list from the CO-OPS metadata API."""

    source = GenerationSource.TIDE
    title = "Tide Station List"

    @property
    def url(self) -> str:
        return self.settings.coops_stations_url

    @property
    def user_agent(self) -> str:
        return self.settings.tide_user_agent

    @property
    def output_filename(self) -> str:
        return self.settings.tide_output_filename

    def build_records(self, body: bytes, summary: GenerationSummary) -> List[TideStationRecord]:
        try:
            api_response = TideStationResponse.model_validate_json(body)
        except ValidationError as e:
            raise DataCorruptedError(
                self.source,
                f"Unexpected stations response ({e.error_count()} error(s)): {e.errors()[0]['msg']}"
            ) from e

        summary.records_received = len(api_response.stations)
        logger.info(f"Received {len(api_response.stations)} total stations.")

        clean_stations = normalize_tide_stations(api_response.stations)
        logger.info(f"Found {len(clean_stations)} valid, plottable stations.")
        return clean_stations
