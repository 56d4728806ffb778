"""
Tests for conversions among geodetic, UTM and MGRS.
"""

import unittest

from mgrs_converter import (
    geodetic_to_utm,
    utm_to_geodetic,
    geodetic_to_mgrs,
    utm_to_mgrs,
    mgrs_to_utm,
    mgrs_to_geodetic,
    mgrs_bounds,
    latlon_to_mgrs_string,
    mgrs_string_to_latlon,
    format_mgrs,
    parse_mgrs,
    Accuracy,
    GeodeticPoint,
    ProjectedPoint,
    LatitudeBand,
    InvalidLatitudeError,
    CoordinateRangeError,
)


ROUND_TRIP_POINTS = [
    (48.8582, 2.2945),
    (0.0, 0.0),
    (-33.8688, 151.2093),
    (-0.5, -60.0),
    (60.0, 5.0),
    (83.62778, -32.66433),
    (40.7128, -74.0060),
    (-79.5, 20.0),
]


class TestGeodeticToMgrs(unittest.TestCase):
    """Test encoding geodetic points as grid references."""

    def test_paris(self):
        """Test a full-precision reference."""
        self.assertEqual(latlon_to_mgrs_string(48.8582, 2.2945), "31U DQ 48251 11932")

    def test_equator_prime_meridian(self):
        """Test the 0°, 0° reference and a point 1 m north of it."""
        self.assertEqual(latlon_to_mgrs_string(0.0, 0.0, compact=True), "31NAA6602100000")
        self.assertEqual(latlon_to_mgrs_string(0.00001, 0.0, compact=True), "31NAA6602100001")

    def test_reduced_accuracy(self):
        """Test 10km and 1km references."""
        self.assertEqual(latlon_to_mgrs_string(48.24949, 16.41450, 5, compact=True), "33UXP04")
        self.assertEqual(latlon_to_mgrs_string(48.24949, 16.41450, 4, compact=True), "33UXP0544")

    def test_high_latitude(self):
        """Test a band X reference at 100m."""
        self.assertEqual(
            latlon_to_mgrs_string(83.62778, -32.66433, Accuracy.ONE_HUNDRED_METERS, compact=True),
            "25XEN041865",
        )

    def test_default_accuracy(self):
        """Test references default to one meter."""
        reference = geodetic_to_mgrs(GeodeticPoint(48.8582, 2.2945))
        self.assertIs(reference.accuracy, Accuracy.ONE_METER)

    def test_latitude_limits(self):
        """Test the envelope edges encode and anything past them does not."""
        self.assertTrue(latlon_to_mgrs_string(84.0, 0.0).startswith("31X"))
        self.assertTrue(latlon_to_mgrs_string(-80.0, 0.0).startswith("31C"))
        with self.assertRaises(InvalidLatitudeError):
            latlon_to_mgrs_string(84.0000001, 0.0)
        with self.assertRaises(InvalidLatitudeError):
            latlon_to_mgrs_string(-80.0000001, 0.0)

    def test_norway_zone(self):
        """Test the widened zone 32V."""
        self.assertTrue(latlon_to_mgrs_string(60.0, 5.0).startswith("32V"))


class TestUtmToMgrs(unittest.TestCase):
    """Test encoding UTM coordinates as grid references."""

    def test_band_from_inverse_latitude(self):
        """Test the band is derived when not given."""
        projected = ProjectedPoint(zone=31, hemisphere='N', easting=448251.795, northing=5411932.678)
        reference = utm_to_mgrs(projected)
        self.assertEqual(format_mgrs(reference), "31U DQ 48251 11932")

    def test_explicit_band(self):
        """Test a caller-supplied band letter is used."""
        projected = ProjectedPoint(zone=31, hemisphere='N', easting=448251.0, northing=5411932.0)
        reference = utm_to_mgrs(projected, Accuracy.ONE_KILOMETER, band='u')
        self.assertIs(reference.band, LatitudeBand.U)
        self.assertEqual(format_mgrs(reference), "31U DQ 48 11")

    def test_easting_outside_columns(self):
        """Test eastings with no column letter are rejected."""
        projected = ProjectedPoint(zone=31, hemisphere='N', easting=50000.0, northing=5000000.0)
        with self.assertRaises(CoordinateRangeError):
            utm_to_mgrs(projected, band='U')


class TestMgrsDecode(unittest.TestCase):
    """Test decoding grid references."""

    def test_mgrs_to_utm(self):
        """Test a spaced reference decodes to its UTM corner."""
        projected = mgrs_to_utm("31U DQ 48251 11932")
        self.assertEqual(projected.zone, 31)
        self.assertEqual(projected.easting, 448251.0)
        self.assertEqual(projected.northing, 5411932.0)

    def test_mgrs_to_geodetic(self):
        """Test decoding to latitude/longitude."""
        point = mgrs_to_geodetic("31U DQ 48251 11932")
        self.assertAlmostEqual(point.lat, 48.8582, delta=1e-4)
        self.assertAlmostEqual(point.lon, 2.2945, delta=1e-4)

    def test_high_latitude_decode(self):
        """Test decoding a band X reference."""
        lat, lon = mgrs_string_to_latlon("24XWT783908")
        self.assertAlmostEqual(lat, 83.62778, delta=0.002)
        self.assertAlmostEqual(lon, -32.66433, delta=0.01)

    def test_accepts_reference_objects(self):
        """Test parsed references are accepted directly."""
        reference = parse_mgrs("31UDQ4825111932")
        self.assertEqual(mgrs_to_utm(reference), mgrs_to_utm("31UDQ4825111932"))

    def test_bounds(self):
        """Test the precision box corners."""
        south_west, north_east = mgrs_bounds("31U DQ 482 119")
        self.assertEqual(south_west, mgrs_to_geodetic("31U DQ 482 119"))
        self.assertLess(south_west.lat, north_east.lat)
        self.assertLess(south_west.lon, north_east.lon)
        self.assertAlmostEqual(north_east.lat - south_west.lat, 100 / 111200, delta=1e-4)

    def test_bounds_corner_utm(self):
        """Test the north-east corner is one box from the south-west corner."""
        reference = geodetic_to_mgrs(GeodeticPoint(48.8582, 2.2945), Accuracy.ONE_KILOMETER)
        south_west, north_east = mgrs_bounds(reference)
        corner = geodetic_to_utm(north_east)
        self.assertAlmostEqual(corner.easting, 449000.0, delta=1e-3)
        self.assertAlmostEqual(corner.northing, 5412000.0, delta=1e-3)

    def test_decode_at_southern_limit(self):
        """Test a reference encoded at -80° decodes at both accuracies."""
        text = latlon_to_mgrs_string(-80.0, 0.5)
        self.assertEqual(text, "31C DM 51550 17373")
        lat, lon = mgrs_string_to_latlon(text)
        self.assertGreaterEqual(lat, -80.0)
        self.assertAlmostEqual(lat, -80.0, delta=1e-5)
        self.assertAlmostEqual(lon, 0.5, delta=1e-4)

        text = latlon_to_mgrs_string(-80.0, 0.5, Accuracy.TEN_KILOMETERS)
        lat, lon = mgrs_string_to_latlon(text)
        self.assertEqual(lat, -80.0)
        self.assertAlmostEqual(lon, 0.5, delta=0.6)

    def test_bounds_clipped_to_band(self):
        """Test a band X box near 84° ends on the band's northern edge."""
        reference = geodetic_to_mgrs(GeodeticPoint(83.99, 10.0), Accuracy.TEN_KILOMETERS)
        self.assertEqual(reference.band, LatitudeBand.X)
        south_west, north_east = mgrs_bounds(reference)
        self.assertEqual(north_east.lat, 84.0)
        self.assertLess(south_west.lat, 83.99)
        self.assertLess(south_west.lon, north_east.lon)


class TestRoundTrip(unittest.TestCase):
    """Test encode/decode stays within the precision box."""

    def test_utm_within_precision_box(self):
        """Test the decoded corner is within one box of the projected point."""
        for lat, lon in ROUND_TRIP_POINTS:
            projected = geodetic_to_utm(GeodeticPoint(lat, lon))
            for accuracy in Accuracy:
                with self.subTest(lat=lat, lon=lon, accuracy=accuracy):
                    reference = utm_to_mgrs(projected, accuracy)
                    corner = mgrs_to_utm(reference)
                    self.assertEqual(corner.zone, projected.zone)
                    self.assertIs(corner.hemisphere, projected.hemisphere)
                    self.assertLessEqual(corner.easting, projected.easting)
                    self.assertLess(projected.easting - corner.easting, accuracy.meters)
                    self.assertLessEqual(corner.northing, projected.northing)
                    self.assertLess(projected.northing - corner.northing, accuracy.meters)

    def test_text_round_trip(self):
        """Test lat/lon -> text -> lat/lon within a meter."""
        for lat, lon in ROUND_TRIP_POINTS:
            with self.subTest(lat=lat, lon=lon):
                text = latlon_to_mgrs_string(lat, lon)
                decoded_lat, decoded_lon = mgrs_string_to_latlon(text)
                self.assertAlmostEqual(decoded_lat, lat, delta=2e-5)
                self.assertAlmostEqual(decoded_lon, lon, delta=2e-4)

    def test_utm_geodetic_round_trip(self):
        """Test UTM -> geodetic -> UTM."""
        projected = ProjectedPoint(zone=56, hemisphere='S', easting=334000.0, northing=6250000.0)
        again = geodetic_to_utm(utm_to_geodetic(projected))
        self.assertEqual(again.zone, 56)
        self.assertAlmostEqual(again.easting, 334000.0, delta=1e-3)
        self.assertAlmostEqual(again.northing, 6250000.0, delta=1e-3)


if __name__ == '__main__':
    unittest.main()
