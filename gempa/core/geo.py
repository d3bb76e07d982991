"""Coordinate normalization - Pure functions.

BMKG publishes coordinates as free-form strings such as "2.5 LS" or
"120.5 BT". This module turns them into signed decimal degrees.
All functions are pure with no side effects.
"""

import re
from dataclasses import dataclass

from gempa.core.earthquake import EarthquakeRecord
from gempa.core.errors import CoordinateParseError


# Substrings that flip the sign. "LS" is covered by "S" but kept explicit.
SOUTH_MARKERS = ("S", "LS")
WEST_MARKERS = ("W", "BB")

# Stripped in order: two-letter forms first so "LS" is not left as "L".
MARKERS = (
    "LS",  # lintang selatan
    "LU",  # lintang utara
    "BT",  # bujur timur
    "BB",  # bujur barat
    "S",
    "N",
    "U",
    "E",  # also eats an exponent: "1.5E2" reads as 1.52
    "W",
    "°",
)

# What must remain once markers are stripped: an ASCII decimal number
DECIMAL_PATTERN = re.compile(r"[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)")


@dataclass(frozen=True)
class GeoCoordinate:
    """A point in signed decimal degrees.

    No range validation: values are whatever the source strings encode.
    """
    latitude: float
    longitude: float


NEUTRAL_COORDINATE = GeoCoordinate(latitude=0.0, longitude=0.0)


def normalize(raw: str) -> float:
    """Parse a coordinate string into signed decimal degrees.

    Pure function. Whitespace is removed, the sign is taken from the
    hemisphere marker (south and west are negative), every known marker is
    stripped and the remainder is parsed as a float.

    Args:
        raw: Coordinate string, e.g. "2.5 LS" or "120.5BT"

    Returns:
        Signed decimal degrees

    Raises:
        CoordinateParseError: If the remainder is not a plain decimal number
    """
    cleaned = "".join(raw.split())

    sign = 1.0
    if any(m in cleaned for m in SOUTH_MARKERS) or any(m in cleaned for m in WEST_MARKERS):
        sign = -1.0

    for marker in MARKERS:
        cleaned = cleaned.replace(marker, "")

    if DECIMAL_PATTERN.fullmatch(cleaned) is None:
        raise CoordinateParseError(f"Unparseable coordinate: {raw!r}", raw=raw)

    return float(cleaned) * sign


def parse_coordinate(latitude_raw: str, longitude_raw: str) -> GeoCoordinate:
    """Normalize a latitude/longitude pair, failing on bad input.

    Raises:
        CoordinateParseError: If either component is unparseable
    """
    return GeoCoordinate(
        latitude=normalize(latitude_raw),
        longitude=normalize(longitude_raw),
    )


def parse_coordinate_or_neutral(latitude_raw: str, longitude_raw: str) -> GeoCoordinate:
    """Normalize a latitude/longitude pair, falling back to (0, 0).

    Lenient counterpart of parse_coordinate(): if either component is
    unparseable the whole coordinate becomes NEUTRAL_COORDINATE, so a display
    is never blocked by a bad string.
    """
    try:
        return parse_coordinate(latitude_raw, longitude_raw)
    except CoordinateParseError:
        return NEUTRAL_COORDINATE


def record_coordinate(record: EarthquakeRecord, strict: bool = False) -> GeoCoordinate:
    """Derive the coordinate of a record.

    Args:
        record: Decoded earthquake record
        strict: Raise on unparseable input instead of returning (0, 0)

    Returns:
        GeoCoordinate for the record
    """
    if strict:
        return parse_coordinate(record.latitude_raw, record.longitude_raw)
    return parse_coordinate_or_neutral(record.latitude_raw, record.longitude_raw)
