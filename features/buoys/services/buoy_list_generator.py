import logging
from typing import List

from features.buoys.models.buoy_types import BuoyRecord
from features.buoys.services.station_table_parser import parse_station_table
from features.common.exceptions.generation_exceptions import (
    GenerationSource,
    DataCorruptedError
)
from features.common.models.station_types import GenerationSummary
from features.common.services.station_list_generator import StationListGenerator

logger = logging.getLogger(__name__)

class BuoyListGenerator(StationListGenerator):
    """Builds the buoy list from the NDBC station table."""

    source = GenerationSource.BUOY
    title = "Buoy List"

    @property
    def url(self) -> str:
        return self.settings.ndbc_station_table_url

    @property
    def user_agent(self) -> str:
        return self.settings.buoy_user_agent

    @property
    def output_filename(self) -> str:
        return self.settings.buoy_output_filename

    def build_records(self, body: bytes, summary: GenerationSummary) -> List[BuoyRecord]:
        try:
            table = body.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DataCorruptedError(self.source, f"Station table is not valid UTF-8: {e}") from e

        lines = table.splitlines()
        summary.records_received = len(lines)
        logger.info(f"Parsing station table ({len(lines)} lines)...")

        buoys = parse_station_table(table)
        logger.info(f"Found {len(buoys)} active buoys.")
        return buoys
