"""
MGRS Converter

Converts WGS84 geodetic coordinates to and from UTM and the Military Grid
Reference System (MGRS).

Can be used as:
- Library: from mgrs_converter import latlon_to_mgrs_string
- CLI tool: python -m mgrs_converter.main (or mgrs-convert)
"""

__version__ = "0.1.0"

from .errors import (
    MgrsError,
    InvalidLatitudeError,
    InvalidLongitudeError,
    InvalidLatitudeBandError,
    InvalidZoneNumberError,
    InvalidZoneLetterError,
    InvalidColLetterError,
    InvalidRowLetterError,
    InvalidEastingCharError,
    InvalidNorthingCharError,
    InvalidDatumError,
    InvalidHemisphereError,
    InvalidAccuracyError,
    CoordinateRangeError,
    ProjectionConvergenceError,
)
from .models import (
    Datum,
    Hemisphere,
    GeodeticPoint,
    ProjectedPoint,
    LatitudeBand,
    ColumnLetter,
    RowLetter,
    Accuracy,
    GridZoneDesignator,
    GridSquareId,
    MgrsReference,
)
from .io import parse_mgrs, format_mgrs, parse_utm, format_utm, format_geodetic
from .converter import (
    geodetic_to_utm,
    utm_to_geodetic,
    geodetic_to_mgrs,
    utm_to_mgrs,
    mgrs_to_utm,
    mgrs_to_geodetic,
    mgrs_bounds,
    latlon_to_mgrs_string,
    mgrs_string_to_latlon,
)

__all__ = [
    '__version__',
    # Conversions
    'geodetic_to_utm',
    'utm_to_geodetic',
    'geodetic_to_mgrs',
    'utm_to_mgrs',
    'mgrs_to_utm',
    'mgrs_to_geodetic',
    'mgrs_bounds',
    'latlon_to_mgrs_string',
    'mgrs_string_to_latlon',
    # Text
    'parse_mgrs',
    'format_mgrs',
    'parse_utm',
    'format_utm',
    'format_geodetic',
    # Models
    'Datum',
    'Hemisphere',
    'GeodeticPoint',
    'ProjectedPoint',
    'LatitudeBand',
    'ColumnLetter',
    'RowLetter',
    'Accuracy',
    'GridZoneDesignator',
    'GridSquareId',
    'MgrsReference',
    # Errors
    'MgrsError',
    'InvalidLatitudeError',
    'InvalidLongitudeError',
    'InvalidLatitudeBandError',
    'InvalidZoneNumberError',
    'InvalidZoneLetterError',
    'InvalidColLetterError',
    'InvalidRowLetterError',
    'InvalidEastingCharError',
    'InvalidNorthingCharError',
    'InvalidDatumError',
    'InvalidHemisphereError',
    'InvalidAccuracyError',
    'CoordinateRangeError',
    'ProjectionConvergenceError',
]
