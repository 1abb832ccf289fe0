import logging
from pathlib import Path
from typing import List, Optional

from core.config import Settings, settings as default_settings
from features.common.exceptions.generation_exceptions import (
    GenerationSource,
    StationListError
)
from features.common.models.station_types import GenerationSummary, StationRecord
from features.common.services.file_storage import (
    resolve_output_dir,
    serialize_records,
    write_output
)
from features.common.services.noaa_fetcher import NOAAFetcher

logger = logging.getLogger(__name__)

class StationListGenerator:
    """Fetch, normalize and persist one NOAA station list.

    Subclasses supply the source URL, user agent, output filename and the
    conversion from response body to records. Every failure is caught in
    ``generate`` so one list never prevents another from being built.
    """

    source: GenerationSource
    title: str = "Station List"

    def __init__(
        self,
        settings: Optional[Settings] = None,
        fetcher: Optional[NOAAFetcher] = None
    ) -> None:
        self.settings = settings or default_settings
        self.fetcher = fetcher or NOAAFetcher(self.source, self.user_agent, self.settings)

    @property
    def url(self) -> str:
        raise NotImplementedError

    @property
    def user_agent(self) -> str:
        raise NotImplementedError

    @property
    def output_filename(self) -> str:
        raise NotImplementedError

    def build_records(self, body: bytes, summary: GenerationSummary) -> List[StationRecord]:
        """Convert a response body to records, updating summary.records_received."""
        raise NotImplementedError

    def output_path(self) -> Path:
        return resolve_output_dir(self.settings) / self.output_filename

    async def generate(self) -> GenerationSummary:
        """Run the whole flow and report its outcome. Never raises."""
        logger.info(f"--- Starting {self.title} Generation ---")
        summary = GenerationSummary(source=self.source, succeeded=False)

        try:
            await self._run(summary)
        except StationListError as e:
            summary.error = str(e)
            logger.error(f"{self.title} generation FAILED: {e}")
        except Exception as e:
            summary.error = repr(e)
            logger.exception(f"{self.title} generation FAILED unexpectedly: {e!r}")

        logger.info(
            f"{self.title}: {summary.records_received} received, "
            f"{summary.records_written} written, output: {summary.output_path or 'none'}"
        )
        logger.info("-" * 43)
        return summary

    async def _run(self, summary: GenerationSummary) -> None:
        logger.info(f"Fetching data from {self.url}")
        body = await self.fetcher.fetch(self.url)

        records = self.build_records(body, summary)

        content = serialize_records(records, indent=self.settings.json_indent)
        file_path = write_output(self.output_path(), content, self.source)

        summary.records_written = len(records)
        summary.output_path = str(file_path)
        summary.succeeded = True
        logger.info(f"✅ Successfully generated {self.output_filename} at:")
        logger.info(f"{file_path}")
