"""BMKG API Client - Imperative Shell.

This module handles HTTP communication with the BMKG earthquake feeds.
All I/O is contained here; decoding and normalization are in the core module.
"""

import logging
from dataclasses import dataclass

import requests

from gempa.core.config import ClientConfig, Feed
from gempa.core.earthquake import EarthquakeRecord, decode_list, decode_single
from gempa.core.errors import NetworkError
from gempa.core.geo import GeoCoordinate, record_coordinate


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LatestEarthquake:
    """Result of a latest-earthquake query.

    Attributes:
        record: The decoded record
        coordinate: Coordinate derived from the record's raw strings
    """
    record: EarthquakeRecord
    coordinate: GeoCoordinate


class BMKGClient:
    """Blocking client for the BMKG earthquake feeds.

    This is part of the imperative shell - it handles HTTP I/O.
    Each call performs exactly one GET; nothing is cached or retried.
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        session: requests.Session | None = None,
    ) -> None:
        """Initialize BMKG client.

        Args:
            config: Endpoint and timeout configuration
            session: Optional requests session to issue requests with
        """
        self.config = config or ClientConfig()
        self.session = session

    def _get(self, url: str) -> bytes:
        """Issue a GET and return the raw body.

        Raises:
            NetworkError: On connection failure, timeout or non-2xx status
        """
        logger.info("Fetching %s", url)

        getter = self.session.get if self.session is not None else requests.get

        try:
            response = getter(url, timeout=self.config.timeout_seconds)
        except requests.Timeout as e:
            raise NetworkError(f"Request timed out: {url}", url=url) from e
        except requests.RequestException as e:
            raise NetworkError(f"Request failed: {e}", url=url) from e

        if not response.ok:
            raise NetworkError(
                f"BMKG returned HTTP {response.status_code} for {url}",
                url=url,
                status_code=response.status_code,
            )

        logger.debug("Received %d bytes from %s", len(response.content), url)
        return response.content

    def fetch_latest(self) -> LatestEarthquake:
        """Fetch the latest earthquake and derive its coordinate.

        Returns:
            LatestEarthquake with record and coordinate

        Raises:
            NetworkError: If the request fails
            DecodeError: If the payload is malformed
            CoordinateParseError: Only with strict_coordinates enabled
        """
        record = decode_single(self._get(self.config.endpoint_url(Feed.LATEST)))
        coordinate = record_coordinate(record, strict=self.config.strict_coordinates)

        logger.info("Fetched latest earthquake %s", record.identity)

        return LatestEarthquake(record=record, coordinate=coordinate)

    def fetch_recent(self) -> list[EarthquakeRecord]:
        """Fetch the recent earthquakes list, unfiltered.

        Raises:
            NetworkError: If the request fails
            DecodeError: If the payload is malformed
        """
        return self._fetch_list(Feed.RECENT)

    def fetch_felt_reports(self) -> list[EarthquakeRecord]:
        """Fetch the list of earthquakes with felt reports.

        Raises:
            NetworkError: If the request fails
            DecodeError: If the payload is malformed
        """
        return self._fetch_list(Feed.FELT)

    def fetch_feed(self, feed: Feed) -> LatestEarthquake | list[EarthquakeRecord]:
        """Fetch a named feed.

        SIGNIFICANT returns the same unfiltered list as RECENT; use
        filter_by_magnitude() to narrow it.
        """
        if feed is Feed.LATEST:
            return self.fetch_latest()
        return self._fetch_list(feed)

    def _fetch_list(self, feed: Feed) -> list[EarthquakeRecord]:
        records = decode_list(self._get(self.config.endpoint_url(feed)))

        logger.info("Fetched %d earthquakes from %s feed", len(records), feed.value)

        return records
