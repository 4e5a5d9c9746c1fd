"""HTTP client for the current PWS observations API."""

import logging
from typing import NamedTuple, Optional
import httpx

from ..errors import UpstreamUnreachable


logger = logging.getLogger(__name__)


class UpstreamReply(NamedTuple):
    """Raw status and body of one provider response."""

    status_code: int
    body: str


class PwsClient:
    """Issues current-conditions requests for a single station."""

    def __init__(
        self,
        api_key: str,
        base_url: str,
        timeout: float = 10.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.api_key = api_key
        self.base_url = base_url
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(timeout=httpx.Timeout(timeout))

    async def fetch_current(self, station_id: str) -> UpstreamReply:
        """
        Request the current observation for a station.

        Any HTTP response is returned as-is, whatever its status; deciding what
        it means is left to the caller.

        Args:
            station_id: Trimmed PWS identifier

        Returns:
            UpstreamReply with the provider's status code and body text

        Raises:
            UpstreamUnreachable: If no response could be obtained
        """
        params = {
            "stationId": station_id,
            "format": "json",
            "units": "e",
            "apiKey": self.api_key,
        }

        logger.info(f"Fetching current observation for station: {station_id}")

        try:
            response = await self.client.get(self.base_url, params=params)
        except httpx.TimeoutException as e:
            logger.error(f"Timed out fetching observation for {station_id}: {type(e).__name__}")
            raise UpstreamUnreachable() from e
        except httpx.RequestError as e:
            # str(e) can carry the request URL, which includes the key
            logger.error(f"Network error fetching observation for {station_id}: {type(e).__name__}")
            raise UpstreamUnreachable() from e

        return UpstreamReply(status_code=response.status_code, body=response.text)

    async def close(self):
        """Close the HTTP client if this instance created it."""
        if self._owns_client:
            await self.client.aclose()
