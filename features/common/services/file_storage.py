import json
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from core.config import Settings
from features.common.exceptions.generation_exceptions import (
    GenerationSource,
    FileWriteFailedError
)
from features.common.models.station_types import StationRecord

logger = logging.getLogger(__name__)

def resolve_output_dir(settings: Settings) -> Path:
    """Get the directory output files are written to.

    An explicit ``output_dir`` setting wins. Otherwise the directory of the
    running script is used, falling back to the current working directory.
    """
    if settings.output_dir:
        return Path(settings.output_dir)

    script_path = sys.argv[0] if sys.argv else ""
    if script_path:
        return Path(script_path).resolve().parent
    return Path.cwd()

def serialize_records(records: Sequence[StationRecord], indent: Optional[int] = 2) -> bytes:
    """Encode records as a pretty-printed JSON array using the output field names."""
    station_data = [record.model_dump(by_alias=True) for record in records]
    return json.dumps(station_data, indent=indent).encode("utf-8")

def write_output(file_path: Path, content: bytes, source: GenerationSource) -> Path:
    """Write content to file_path, replacing any existing file."""
    try:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        with open(file_path, 'wb') as f:
            f.write(content)
    except OSError as e:
        logger.error(f"Error saving file {file_path}: {str(e)}")
        raise FileWriteFailedError(source, f"Could not write {file_path}: {e}") from e

    logger.debug(f"Wrote {len(content)} bytes to {file_path}")
    return file_path
