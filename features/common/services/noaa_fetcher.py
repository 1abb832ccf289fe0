import asyncio
import logging
from typing import Optional

import aiohttp
from yarl import URL

from core.config import Settings, settings as default_settings
from features.common.exceptions.generation_exceptions import (
    GenerationSource,
    BadURLError,
    NetworkError,
    BadResponseError
)

logger = logging.getLogger(__name__)

class NOAAFetcher:
    """Fetches NOAA reference data with an identifying User-Agent."""

    def __init__(
        self,
        source: GenerationSource,
        user_agent: str,
        settings: Optional[Settings] = None
    ) -> None:
        self.source = source
        self.user_agent = user_agent
        self.settings = settings or default_settings

    def _validate_url(self, url_string: str) -> URL:
        """Reject malformed URLs before any network attempt."""
        try:
            url = URL(url_string)
        except (TypeError, ValueError) as e:
            raise BadURLError(self.source, f"Invalid URL {url_string!r}: {e}") from e

        if not url.is_absolute() or url.scheme not in ("http", "https") or not url.host:
            raise BadURLError(self.source, f"Invalid URL {url_string!r}")
        return url

    async def fetch(self, url_string: str) -> bytes:
        """Fetch a URL and return the raw response body.

        Args:
            url_string: Absolute http(s) URL to retrieve

        Returns:
            The response body bytes. Decoding is left to the caller.

        Raises:
            BadURLError: url_string is not a well-formed URL
            NetworkError: the connection could not be completed
            BadResponseError: the server returned a status other than 200
        """
        url = self._validate_url(url_string)
        headers = {"User-Agent": self.user_agent}
        timeout = aiohttp.ClientTimeout(total=self.settings.request_timeout)

        try:
            async with aiohttp.ClientSession(headers=headers, timeout=timeout) as session:
                async with session.get(url) as response:
                    if response.status != 200:
                        logger.error(f"{url.host} returned status: {response.status}")
                        raise BadResponseError(
                            self.source,
                            f"{url.host} returned status {response.status}",
                            status_code=response.status
                        )
                    body = await response.read()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise NetworkError(self.source, f"Request to {url} failed: {e!r}") from e

        logger.debug(f"Fetched {len(body)} bytes from {url}")
        return body
