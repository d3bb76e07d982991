"""Functional Core - Pure functions with no side effects.

This module contains all parsing logic as pure functions:
- Earthquake record decoding
- Coordinate normalization
- Record formatting

All functions here are deterministic and have no I/O.
"""

from gempa.core.earthquake import (
    EarthquakeRecord,
    decode_list,
    decode_record,
    decode_single,
    filter_by_magnitude,
)
from gempa.core.errors import (
    ConfigError,
    CoordinateParseError,
    DecodeError,
    GempaError,
    NetworkError,
)
from gempa.core.geo import (
    NEUTRAL_COORDINATE,
    GeoCoordinate,
    normalize,
    parse_coordinate,
    parse_coordinate_or_neutral,
    record_coordinate,
)
from gempa.core.config import ClientConfig, Feed

__all__ = [
    # Earthquake
    "EarthquakeRecord",
    "decode_record",
    "decode_single",
    "decode_list",
    "filter_by_magnitude",
    # Geo
    "GeoCoordinate",
    "NEUTRAL_COORDINATE",
    "normalize",
    "parse_coordinate",
    "parse_coordinate_or_neutral",
    "record_coordinate",
    # Config
    "ClientConfig",
    "Feed",
    # Errors
    "GempaError",
    "ConfigError",
    "NetworkError",
    "DecodeError",
    "CoordinateParseError",
]
