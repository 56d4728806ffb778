"""
Cross-check the projector against PROJ (via pyproj).
"""

import unittest

import pytest

from mgrs_converter.models import GeodeticPoint, ProjectedPoint, Hemisphere
from mgrs_converter.projection import create_projector

pyproj = pytest.importorskip("pyproj")


def _utm_crs(zone: int, hemisphere: Hemisphere) -> str:
    base = 32600 if hemisphere is Hemisphere.NORTH else 32700
    return f"EPSG:{base + zone}"


POINTS = [
    (48.8582, 2.2945),
    (0.00001, 0.0),
    (-33.8688, 151.2093),
    (60.0, 5.0),
    (78.2232, 15.6267),
    (83.62778, -32.66433),
    (-79.9, 100.0),
    (40.7128, -74.0060),
    (-0.5, -60.0),
]


class TestPyprojCrossCheck(unittest.TestCase):
    """Compare forward and inverse projection with PROJ."""

    def setUp(self):
        self.projector = create_projector()

    def test_forward_matches_proj(self):
        """Test eastings and northings agree with PROJ to a millimeter."""
        for lat, lon in POINTS:
            with self.subTest(lat=lat, lon=lon):
                projected = self.projector.forward(GeodeticPoint(lat, lon))
                transformer = pyproj.Transformer.from_crs(
                    "EPSG:4326",
                    _utm_crs(projected.zone, projected.hemisphere),
                    always_xy=True,
                )
                easting, northing = transformer.transform(lon, lat)
                self.assertAlmostEqual(projected.easting, easting, delta=1e-3)
                self.assertAlmostEqual(projected.northing, northing, delta=1e-3)

    def test_inverse_matches_proj(self):
        """Test inverse latitudes and longitudes agree with PROJ."""
        cases = [
            (31, Hemisphere.NORTH, 448251.0, 5411932.0),
            (56, Hemisphere.SOUTH, 334000.0, 6250000.0),
            (24, Hemisphere.NORTH, 578300.0, 9290800.0),
            (1, Hemisphere.NORTH, 166100.0, 1.0),
        ]
        for zone, hemisphere, easting, northing in cases:
            with self.subTest(zone=zone, easting=easting, northing=northing):
                point = self.projector.inverse(
                    ProjectedPoint(zone=zone, hemisphere=hemisphere,
                                   easting=easting, northing=northing)
                )
                transformer = pyproj.Transformer.from_crs(
                    _utm_crs(zone, hemisphere),
                    "EPSG:4326",
                    always_xy=True,
                )
                lon, lat = transformer.transform(easting, northing)
                self.assertAlmostEqual(point.lat, lat, delta=1e-8)
                self.assertAlmostEqual(point.lon, lon, delta=1e-8)


if __name__ == '__main__':
    unittest.main()
