"""
Tests for UTM and geodetic text forms.
"""

import unittest

from mgrs_converter.errors import (
    MgrsError,
    InvalidZoneNumberError,
    InvalidHemisphereError,
    InvalidEastingCharError,
    InvalidNorthingCharError,
    CoordinateRangeError,
)
from mgrs_converter.io import parse_utm, format_utm, format_geodetic
from mgrs_converter.models import GeodeticPoint, ProjectedPoint, Hemisphere


class TestParseUtm(unittest.TestCase):
    """Test parsing UTM text."""

    def test_parse(self):
        """Test the four-field form."""
        point = parse_utm("31 N 448251 5411932")
        self.assertEqual(point.zone, 31)
        self.assertIs(point.hemisphere, Hemisphere.NORTH)
        self.assertEqual(point.easting, 448251.0)
        self.assertEqual(point.northing, 5411932.0)

    def test_parse_southern_lowercase(self):
        """Test lower-case hemisphere and decimal meters."""
        point = parse_utm("56 s 334000.5 6250000.25")
        self.assertIs(point.hemisphere, Hemisphere.SOUTH)
        self.assertEqual(point.easting, 334000.5)

    def test_wrong_field_count(self):
        """Test missing fields are rejected."""
        with self.assertRaises(MgrsError):
            parse_utm("31 N 448251")

    def test_invalid_fields(self):
        """Test each field raises its own error kind."""
        with self.assertRaises(InvalidZoneNumberError):
            parse_utm("AA N 1 2")
        with self.assertRaises(InvalidZoneNumberError):
            parse_utm("61 N 1 2")
        with self.assertRaises(InvalidHemisphereError):
            parse_utm("31 X 1 2")
        with self.assertRaises(InvalidEastingCharError):
            parse_utm("31 N abc 2")
        with self.assertRaises(InvalidNorthingCharError):
            parse_utm("31 N 1 2x")

    def test_non_finite_values(self):
        """Test infinite or NaN easting/northing raise a conversion error."""
        with self.assertRaises(CoordinateRangeError):
            parse_utm("31 N inf 5411932")
        with self.assertRaises(CoordinateRangeError):
            parse_utm("31 N 448251 nan")
        with self.assertRaises(MgrsError):
            ProjectedPoint(zone=31, hemisphere='N', easting=float('-inf'), northing=0.0)


class TestFormatText(unittest.TestCase):
    """Test formatting UTM and geodetic points."""

    def test_format_utm(self):
        """Test whole-meter and decimal output."""
        point = ProjectedPoint(zone=31, hemisphere='N', easting=448251.795, northing=5411932.678)
        self.assertEqual(format_utm(point), "31 N 448252 5411933")
        self.assertEqual(format_utm(point, decimals=1), "31 N 448251.8 5411932.7")

    def test_format_utm_round_trip(self):
        """Test formatted text parses back."""
        point = ProjectedPoint(zone=4, hemisphere='S', easting=500000.0, northing=7000000.0)
        self.assertEqual(parse_utm(format_utm(point)), point)

    def test_format_geodetic(self):
        """Test hemisphere suffixes."""
        self.assertEqual(
            format_geodetic(GeodeticPoint(48.8582, 2.2945)),
            "48.858200°N, 2.294500°E",
        )
        self.assertEqual(
            format_geodetic(GeodeticPoint(-33.8688, -70.5), decimals=2),
            "33.87°S, 70.50°W",
        )


if __name__ == '__main__':
    unittest.main()
