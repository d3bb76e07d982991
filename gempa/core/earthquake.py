"""Earthquake data models and decoding - Pure functions.

This module decodes BMKG JSON payloads into typed EarthquakeRecord objects.
All functions are pure with no side effects: no I/O, no logging, no retry.
"""

import json
from dataclasses import dataclass
from typing import Any, Mapping

from gempa.core.errors import DecodeError


# Envelope keys wrapping the record(s): {"Infogempa": {"gempa": ...}}
ENVELOPE_KEY = "Infogempa"
RECORD_KEY = "gempa"

# External JSON key -> internal field name
REQUIRED_FIELDS: dict[str, str] = {
    "Tanggal": "date",
    "Jam": "time",
    "Lintang": "latitude_raw",
    "Bujur": "longitude_raw",
    "Magnitude": "magnitude",
    "Kedalaman": "depth",
    "Wilayah": "region",
}

OPTIONAL_FIELDS: dict[str, str] = {
    "Potensi": "potential_hazard",
    "Dirasakan": "felt_report",
    "Shakemap": "shakemap_ref",
}


@dataclass(frozen=True)
class EarthquakeRecord:
    """Immutable earthquake record as published by BMKG.

    Attributes:
        date: Event date as received (DD/MM/YY)
        time: Local event time with zone suffix (e.g. "10:00:00 WIB")
        latitude_raw: Raw latitude string (e.g. "2.5 LS")
        longitude_raw: Raw longitude string (e.g. "120.5 BT")
        magnitude: Magnitude as text (e.g. "5.4")
        depth: Depth as text (e.g. "10 km")
        region: Free-text location description
        potential_hazard: Hazard note such as tsunami potential (optional)
        felt_report: Where the shaking was felt, MMI scale (optional)
        shakemap_ref: Shakemap image file name (optional)
    """
    date: str
    time: str
    latitude_raw: str
    longitude_raw: str
    magnitude: str
    depth: str
    region: str
    potential_hazard: str | None = None
    felt_report: str | None = None
    shakemap_ref: str | None = None

    @property
    def identity(self) -> str:
        """Identity of the record within a batch: date followed by time."""
        return self.date + self.time

    @property
    def magnitude_value(self) -> float | None:
        """Magnitude as a float, or None if the text is not numeric."""
        try:
            return float(self.magnitude)
        except ValueError:
            return None


def _as_bytes(payload: bytes | str) -> bytes:
    if isinstance(payload, str):
        return payload.encode("utf-8")
    return bytes(payload)


def _load_envelope(payload: bytes | str) -> Any:
    """Parse the JSON payload and unwrap {"Infogempa": {"gempa": ...}}."""
    raw = _as_bytes(payload)

    try:
        data = json.loads(raw)
    except (ValueError, UnicodeDecodeError) as e:
        raise DecodeError(f"Malformed JSON: {e}", raw=raw) from e

    if not isinstance(data, dict) or not isinstance(data.get(ENVELOPE_KEY), dict):
        raise DecodeError(f"Missing '{ENVELOPE_KEY}' envelope", raw=raw)

    info = data[ENVELOPE_KEY]
    if RECORD_KEY not in info:
        raise DecodeError(f"Missing '{ENVELOPE_KEY}.{RECORD_KEY}'", raw=raw)

    return info[RECORD_KEY]


def decode_record(data: Mapping[str, Any], raw: bytes = b"") -> EarthquakeRecord:
    """Decode a single JSON object into an EarthquakeRecord.

    Pure function. Unknown keys are ignored. Optional fields that are missing
    or null decode to None.

    Args:
        data: Decoded JSON object for one earthquake
        raw: Raw payload bytes, attached to any DecodeError

    Returns:
        EarthquakeRecord

    Raises:
        DecodeError: If a required field is missing or a field is not a string
    """
    if not isinstance(data, Mapping):
        raise DecodeError(
            f"Expected a JSON object for a record, got {type(data).__name__}",
            raw=raw,
        )

    values: dict[str, str | None] = {}

    for key, name in REQUIRED_FIELDS.items():
        value = data.get(key)
        if value is None:
            raise DecodeError(f"Missing required field '{key}'", raw=raw)
        if not isinstance(value, str):
            raise DecodeError(
                f"Field '{key}' must be a string, got {type(value).__name__}",
                raw=raw,
            )
        values[name] = value

    for key, name in OPTIONAL_FIELDS.items():
        value = data.get(key)
        if value is not None and not isinstance(value, str):
            raise DecodeError(
                f"Field '{key}' must be a string, got {type(value).__name__}",
                raw=raw,
            )
        values[name] = value

    return EarthquakeRecord(**values)


def decode_single(payload: bytes | str) -> EarthquakeRecord:
    """Decode a single-record envelope.

    Pure function.

    Args:
        payload: Raw JSON of the form {"Infogempa": {"gempa": {...}}}

    Returns:
        The decoded EarthquakeRecord

    Raises:
        DecodeError: On malformed JSON, wrong envelope shape or missing fields
    """
    raw = _as_bytes(payload)
    record = _load_envelope(raw)

    if not isinstance(record, dict):
        raise DecodeError(
            f"Expected a single record object, got {type(record).__name__}",
            raw=raw,
        )

    return decode_record(record, raw=raw)


def decode_list(payload: bytes | str) -> list[EarthquakeRecord]:
    """Decode a multi-record envelope, preserving source order.

    Pure function. All-or-nothing: one malformed element fails the whole decode.

    Args:
        payload: Raw JSON of the form {"Infogempa": {"gempa": [{...}, ...]}}

    Returns:
        List of EarthquakeRecord in payload order

    Raises:
        DecodeError: On malformed JSON, wrong envelope shape or any bad element
    """
    raw = _as_bytes(payload)
    records = _load_envelope(raw)

    if not isinstance(records, list):
        raise DecodeError(
            f"Expected a list of records, got {type(records).__name__}",
            raw=raw,
        )

    return [decode_record(item, raw=raw) for item in records]


def filter_by_magnitude(
    records: list[EarthquakeRecord],
    min_magnitude: float | None = None,
    max_magnitude: float | None = None,
) -> list[EarthquakeRecord]:
    """Filter records by magnitude range.

    Pure function. Records whose magnitude is not numeric are dropped when
    any bound is given.

    Args:
        records: Records to filter
        min_magnitude: Minimum magnitude (inclusive), None for no minimum
        max_magnitude: Maximum magnitude (inclusive), None for no maximum

    Returns:
        Filtered list of records, in the original order
    """
    if min_magnitude is None and max_magnitude is None:
        return list(records)

    result = []
    for record in records:
        value = record.magnitude_value
        if value is None:
            continue
        if min_magnitude is not None and value < min_magnitude:
            continue
        if max_magnitude is not None and value > max_magnitude:
            continue
        result.append(record)

    return result
