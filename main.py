import asyncio
import logging
from typing import List, Optional

from core.config import Settings, settings as default_settings
from core.logging_config import setup_logging
from features.buoys.services.buoy_list_generator import BuoyListGenerator
from features.common.models.station_types import GenerationSummary
from features.tides.services.tide_list_generator import TideListGenerator

logger = logging.getLogger(__name__)

async def run_all_generators(settings: Optional[Settings] = None) -> List[GenerationSummary]:
    """Build the buoy list, then the tide station list.

    The tide list is only started once the buoy list has finished, whether
    or not it succeeded.
    """
    settings = settings or default_settings
    logger.info("Starting all data generators...")

    summaries = []
    for generator in (BuoyListGenerator(settings), TideListGenerator(settings)):
        summaries.append(await generator.generate())

    logger.info("All data generation complete.")
    for summary in summaries:
        status = "ok" if summary.succeeded else f"FAILED ({summary.error})"
        logger.info(f"   {summary.source.value}: {status}")
    return summaries

def main() -> int:
    setup_logging(default_settings.log_level)
    asyncio.run(run_all_generators())
    # Per-list failures are logged only; the process always exits cleanly.
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
