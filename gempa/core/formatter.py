"""Record formatting - Pure functions.

This module renders earthquake records as text for list rows and detail
views, and as JSON-ready dicts. All functions are pure with no side effects.
"""

from typing import Any

from gempa.core.earthquake import EarthquakeRecord
from gempa.core.geo import GeoCoordinate


def format_record_summary(record: EarthquakeRecord) -> str:
    """Format a one-line summary of a record.

    Pure function.

    Args:
        record: Record to summarize

    Returns:
        One-line summary string
    """
    return (
        f"{record.date} | {record.time} - M{record.magnitude}, "
        f"depth {record.depth} - {record.region}"
    )


def format_record_detail(
    record: EarthquakeRecord,
    coordinate: GeoCoordinate | None = None,
) -> str:
    """Format a multi-line detail view of a record.

    Optional lines (potential hazard, felt report, shakemap) only appear
    when the field is present.

    Args:
        record: Record to describe
        coordinate: Normalized coordinate, if already computed

    Returns:
        Multi-line string
    """
    lines = [
        f"Region: {record.region}",
        f"Date: {record.date}",
        f"Time: {record.time}",
        f"Magnitude: {record.magnitude}",
        f"Depth: {record.depth}",
        f"Location: {record.latitude_raw}, {record.longitude_raw}",
    ]

    if coordinate is not None:
        lines.append(f"Coordinate: {coordinate.latitude:.4f}, {coordinate.longitude:.4f}")

    if record.potential_hazard is not None:
        lines.append(f"Potential: {record.potential_hazard}")

    if record.felt_report is not None:
        lines.append(f"Felt: {record.felt_report}")

    if record.shakemap_ref is not None:
        lines.append(f"Shakemap: {record.shakemap_ref}")

    return "\n".join(lines)


def record_to_dict(
    record: EarthquakeRecord,
    coordinate: GeoCoordinate | None = None,
) -> dict[str, Any]:
    """Convert a record to a JSON-serializable dict.

    Absent optional fields are kept as None (null), not dropped.
    """
    data: dict[str, Any] = {
        "identity": record.identity,
        "date": record.date,
        "time": record.time,
        "latitude_raw": record.latitude_raw,
        "longitude_raw": record.longitude_raw,
        "magnitude": record.magnitude,
        "depth": record.depth,
        "region": record.region,
        "potential_hazard": record.potential_hazard,
        "felt_report": record.felt_report,
        "shakemap_ref": record.shakemap_ref,
    }

    if coordinate is not None:
        data["coordinate"] = {
            "latitude": coordinate.latitude,
            "longitude": coordinate.longitude,
        }

    return data
