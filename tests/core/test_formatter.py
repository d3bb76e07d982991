"""Unit tests for record formatting."""

import json

from gempa.core.earthquake import EarthquakeRecord
from gempa.core.formatter import format_record_detail, format_record_summary, record_to_dict
from gempa.core.geo import GeoCoordinate


BASE = dict(
    date="21/04/25",
    time="10:00:00 WIB",
    latitude_raw="2.5 LS",
    longitude_raw="120.5 BT",
    magnitude="5.4",
    depth="10 km",
    region="Test Region",
)


class TestFormatRecordSummary:
    """Tests for format_record_summary()."""

    def test_summary_line(self):
        """Should include date, time, magnitude, depth and region."""
        record = EarthquakeRecord(**BASE)
        assert format_record_summary(record) == (
            "21/04/25 | 10:00:00 WIB - M5.4, depth 10 km - Test Region"
        )


class TestFormatRecordDetail:
    """Tests for format_record_detail()."""

    def test_omits_absent_optional_fields(self):
        """Absent optional fields produce no lines."""
        detail = format_record_detail(EarthquakeRecord(**BASE))

        assert "Region: Test Region" in detail
        assert "Potential:" not in detail
        assert "Felt:" not in detail
        assert "Shakemap:" not in detail
        assert "Coordinate:" not in detail

    def test_includes_present_optional_fields(self):
        """Present optional fields, even empty ones, are shown."""
        record = EarthquakeRecord(
            **BASE,
            potential_hazard="Tidak berpotensi tsunami",
            felt_report="",
        )
        detail = format_record_detail(record, GeoCoordinate(-2.5, 120.5))

        assert "Potential: Tidak berpotensi tsunami" in detail
        assert "Felt: " in detail
        assert "Coordinate: -2.5000, 120.5000" in detail


class TestRecordToDict:
    """Tests for record_to_dict()."""

    def test_keeps_absent_fields_as_none(self):
        """Absent optional fields serialize as null."""
        data = record_to_dict(EarthquakeRecord(**BASE))

        assert data["identity"] == "21/04/2510:00:00 WIB"
        assert data["potential_hazard"] is None
        assert "coordinate" not in data

    def test_is_json_serializable(self):
        """Output should round through json.dumps."""
        data = record_to_dict(EarthquakeRecord(**BASE), GeoCoordinate(-2.5, 120.5))
        decoded = json.loads(json.dumps(data))

        assert decoded["coordinate"] == {"latitude": -2.5, "longitude": 120.5}
