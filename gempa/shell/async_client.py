"""Async BMKG API Client - Imperative Shell.

Awaitable counterpart of BMKGClient built on httpx. The full body is read
before decoding, so a cancelled call yields nothing rather than a partial
record. Each call opens its own httpx.AsyncClient; calls share no state and
may run concurrently.
"""

import logging

import httpx

from gempa.core.config import ClientConfig, Feed
from gempa.core.earthquake import EarthquakeRecord, decode_list, decode_single
from gempa.core.errors import NetworkError
from gempa.core.geo import record_coordinate
from gempa.shell.bmkg_client import LatestEarthquake


logger = logging.getLogger(__name__)


class AsyncBMKGClient:
    """Asynchronous client for the BMKG earthquake feeds."""

    def __init__(
        self,
        config: ClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize async BMKG client.

        Args:
            config: Endpoint and timeout configuration
            transport: Optional httpx transport (e.g. httpx.MockTransport)
        """
        self.config = config or ClientConfig()
        self.transport = transport

    def _client(self) -> httpx.AsyncClient:
        kwargs: dict = {"follow_redirects": True}
        if self.transport is not None:
            kwargs["transport"] = self.transport
        if self.config.timeout_seconds is not None:
            kwargs["timeout"] = self.config.timeout_seconds
        return httpx.AsyncClient(**kwargs)

    async def _get(self, url: str) -> bytes:
        """Issue a GET and return the raw body.

        Raises:
            NetworkError: On connection failure, timeout or non-2xx status
        """
        logger.info("Fetching %s", url)

        try:
            async with self._client() as client:
                response = await client.get(url)
        except httpx.TimeoutException as e:
            raise NetworkError(f"Request timed out: {url}", url=url) from e
        except httpx.HTTPError as e:
            raise NetworkError(f"Request failed: {e}", url=url) from e

        if not response.is_success:
            raise NetworkError(
                f"BMKG returned HTTP {response.status_code} for {url}",
                url=url,
                status_code=response.status_code,
            )

        logger.debug("Received %d bytes from %s", len(response.content), url)
        return response.content

    async def fetch_latest(self) -> LatestEarthquake:
        """Fetch the latest earthquake and derive its coordinate.

        Raises:
            NetworkError: If the request fails
            DecodeError: If the payload is malformed
            CoordinateParseError: Only with strict_coordinates enabled
        """
        body = await self._get(self.config.endpoint_url(Feed.LATEST))
        record = decode_single(body)
        coordinate = record_coordinate(record, strict=self.config.strict_coordinates)

        logger.info("Fetched latest earthquake %s", record.identity)

        return LatestEarthquake(record=record, coordinate=coordinate)

    async def fetch_recent(self) -> list[EarthquakeRecord]:
        """Fetch the recent earthquakes list, unfiltered."""
        return await self._fetch_list(Feed.RECENT)

    async def fetch_felt_reports(self) -> list[EarthquakeRecord]:
        """Fetch the list of earthquakes with felt reports."""
        return await self._fetch_list(Feed.FELT)

    async def fetch_feed(self, feed: Feed) -> LatestEarthquake | list[EarthquakeRecord]:
        """Fetch a named feed. SIGNIFICANT is the unfiltered RECENT list."""
        if feed is Feed.LATEST:
            return await self.fetch_latest()
        return await self._fetch_list(feed)

    async def _fetch_list(self, feed: Feed) -> list[EarthquakeRecord]:
        body = await self._get(self.config.endpoint_url(feed))
        records = decode_list(body)

        logger.info("Fetched %d earthquakes from %s feed", len(records), feed.value)

        return records
