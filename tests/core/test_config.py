"""Unit tests for configuration models."""

import pytest

from gempa.core.config import BMKG_BASE_URL, ClientConfig, Feed


class TestEndpointUrl:
    """Tests for ClientConfig.endpoint_url()."""

    @pytest.mark.parametrize(
        "feed, url",
        [
            (Feed.LATEST, "https://data.bmkg.go.id/DataMKG/TEWS/autogempa.json"),
            (Feed.RECENT, "https://data.bmkg.go.id/DataMKG/TEWS/gempaterkini.json"),
            (Feed.SIGNIFICANT, "https://data.bmkg.go.id/DataMKG/TEWS/gempaterkini.json"),
            (Feed.FELT, "https://data.bmkg.go.id/DataMKG/TEWS/gempadirasakan.json"),
        ],
    )
    def test_default_endpoints(self, feed, url):
        """Default configuration targets the BMKG TEWS feeds."""
        assert ClientConfig().endpoint_url(feed) == url

    def test_significant_shares_recent_endpoint(self):
        """The significant feed is served by the recent endpoint."""
        config = ClientConfig()
        assert config.endpoint_url(Feed.SIGNIFICANT) == config.endpoint_url(Feed.RECENT)

    def test_joins_without_double_slash(self):
        """Slashes between base and path are normalized."""
        config = ClientConfig(base_url="http://mock/", latest_path="/latest.json")
        assert config.endpoint_url(Feed.LATEST) == "http://mock/latest.json"

    def test_defaults(self):
        """Defaults use the transport timeout and lenient coordinates."""
        config = ClientConfig()
        assert config.base_url == BMKG_BASE_URL
        assert config.timeout_seconds is None
        assert config.strict_coordinates is False
