from enum import Enum
from typing import Optional

class GenerationSource(str, Enum):
    """Which generation flow raised an error."""
    BUOY = "buoy"
    TIDE = "tide"

class ErrorKind(str, Enum):
    BAD_URL = "bad_url"
    NETWORK_ERROR = "network_error"
    BAD_RESPONSE = "bad_response"
    DATA_CORRUPTED = "data_corrupted"
    PARSING_FAILED = "parsing_failed"
    FILE_WRITE_FAILED = "file_write_failed"

class StationListError(Exception):
    """Base exception for station list generation errors."""
    kind: ErrorKind

    def __init__(self, source: GenerationSource, message: str):
        super().__init__(message)
        self.source = source
        self.message = message

    def __str__(self) -> str:
        return f"[{self.source.value}] {self.kind.value}: {self.message}"

class BadURLError(StationListError):
    """Raised when a configured URL is not well formed."""
    kind = ErrorKind.BAD_URL

class NetworkError(StationListError):
    """Raised when the connection to the server cannot be completed."""
    kind = ErrorKind.NETWORK_ERROR

class BadResponseError(StationListError):
    """Raised when the server answers with anything other than 200."""
    kind = ErrorKind.BAD_RESPONSE

    def __init__(self, source: GenerationSource, message: str, status_code: Optional[int] = None):
        super().__init__(source, message)
        self.status_code = status_code

class DataCorruptedError(StationListError):
    """Raised when a response body cannot be decoded as expected."""
    kind = ErrorKind.DATA_CORRUPTED

class ParsingFailedError(StationListError):
    """Raised when the station table yields no buoys."""
    kind = ErrorKind.PARSING_FAILED

class FileWriteFailedError(StationListError):
    """Raised when an output file cannot be written."""
    kind = ErrorKind.FILE_WRITE_FAILED
