"""Configuration models - Pure data structures.

These are domain models for configuration. The actual loading
(I/O) is handled by the shell layer.
"""

from dataclasses import dataclass
from enum import Enum


# BMKG open data base URL for earthquake (TEWS) feeds
BMKG_BASE_URL = "https://data.bmkg.go.id/DataMKG/TEWS/"

LATEST_PATH = "autogempa.json"
RECENT_PATH = "gempaterkini.json"
FELT_PATH = "gempadirasakan.json"

# Threshold the "significant" feed is named after; applied by callers only
SIGNIFICANT_MAGNITUDE = 5.0


class Feed(Enum):
    """Named earthquake feeds.

    SIGNIFICANT is served by the same endpoint as RECENT; the feed itself
    is unfiltered.
    """
    LATEST = "latest"
    RECENT = "recent"
    SIGNIFICANT = "significant"
    FELT = "felt"


@dataclass(frozen=True)
class ClientConfig:
    """Fetch client configuration.

    Attributes:
        base_url: Base URL the endpoint paths are joined to
        latest_path: Path of the latest single-record feed
        recent_path: Path of the recent earthquakes list
        felt_path: Path of the felt-report list
        timeout_seconds: Request timeout, None for the transport default
        strict_coordinates: Raise on unparseable coordinates instead of
            falling back to (0, 0)
    """
    base_url: str = BMKG_BASE_URL
    latest_path: str = LATEST_PATH
    recent_path: str = RECENT_PATH
    felt_path: str = FELT_PATH
    timeout_seconds: float | None = None
    strict_coordinates: bool = False

    def endpoint_url(self, feed: Feed) -> str:
        """Return the absolute URL serving a feed."""
        paths = {
            Feed.LATEST: self.latest_path,
            Feed.RECENT: self.recent_path,
            Feed.SIGNIFICANT: self.recent_path,
            Feed.FELT: self.felt_path,
        }
        return self.base_url.rstrip("/") + "/" + paths[feed].lstrip("/")
