"""Client for the BMKG (Indonesia) public earthquake feeds."""

from gempa.core import (
    NEUTRAL_COORDINATE,
    ClientConfig,
    CoordinateParseError,
    DecodeError,
    EarthquakeRecord,
    Feed,
    GempaError,
    GeoCoordinate,
    NetworkError,
    decode_list,
    decode_single,
    filter_by_magnitude,
    normalize,
    parse_coordinate,
    parse_coordinate_or_neutral,
)
from gempa.shell import AsyncBMKGClient, BMKGClient, LatestEarthquake

__version__ = "0.1.0"

__all__ = [
    "AsyncBMKGClient",
    "BMKGClient",
    "ClientConfig",
    "CoordinateParseError",
    "DecodeError",
    "EarthquakeRecord",
    "Feed",
    "GempaError",
    "GeoCoordinate",
    "LatestEarthquake",
    "NEUTRAL_COORDINATE",
    "NetworkError",
    "decode_list",
    "decode_single",
    "filter_by_magnitude",
    "normalize",
    "parse_coordinate",
    "parse_coordinate_or_neutral",
]
