"""
Text representations of UTM and geodetic coordinates.

UTM text is four whitespace-separated fields: zone, hemisphere, easting,
northing, e.g. "31 N 448251 5411932". These forms are for display and
round-tripping only; the MGRS grid reference is the wire format.
"""

from ..errors import (
    MgrsError,
    InvalidZoneNumberError,
    InvalidEastingCharError,
    InvalidNorthingCharError,
)
from ..models.coordinates import GeodeticPoint, ProjectedPoint, Hemisphere
from ..models.datum import Datum


def parse_utm(text: str, datum: Datum = Datum.WGS84) -> ProjectedPoint:
    """
    Parse a UTM coordinate.

    Args:
        text: e.g. "31 N 448251 5411932"
        datum: Datum the coordinate is defined in

    Returns:
        ProjectedPoint

    Raises:
        MgrsError: If the text does not have four fields, or a field is invalid
    """
    fields = text.split()
    if len(fields) != 4:
        raise MgrsError(text, f"Invalid UTM coordinate: {text!r}")

    zone_text, hemisphere_text, easting_text, northing_text = fields

    try:
        zone = int(zone_text)
    except ValueError:
        raise InvalidZoneNumberError(zone_text) from None

    try:
        easting = float(easting_text)
    except ValueError:
        raise InvalidEastingCharError(easting_text) from None

    try:
        northing = float(northing_text)
    except ValueError:
        raise InvalidNorthingCharError(northing_text) from None

    return ProjectedPoint(
        zone=zone,
        hemisphere=Hemisphere.from_char(hemisphere_text),
        easting=easting,
        northing=northing,
        datum=datum,
    )


def format_utm(point: ProjectedPoint, decimals: int = 0) -> str:
    """
    Format a UTM coordinate, e.g. "31 N 448252 5411933".

    Args:
        point: ProjectedPoint to format
        decimals: Decimal places for easting/northing (rounded)
    """
    return (
        f"{point.zone:02d} {point.hemisphere.value} "
        f"{point.easting:.{decimals}f} {point.northing:.{decimals}f}"
    )


def format_geodetic(point: GeodeticPoint, decimals: int = 6) -> str:
    """
    Format a geodetic point, e.g. "48.858200°N, 2.294500°E".

    Args:
        point: GeodeticPoint to format
        decimals: Decimal places of a degree
    """
    ns = 'N' if point.lat >= 0 else 'S'
    ew = 'E' if point.lon >= 0 else 'W'
    return (
        f"{abs(point.lat):.{decimals}f}°{ns}, "
        f"{abs(point.lon):.{decimals}f}°{ew}"
    )
