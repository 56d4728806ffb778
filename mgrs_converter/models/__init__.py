"""
Data models for the MGRS Converter.
"""

from .datum import Datum, Ellipsoid, WGS84_ELLIPSOID
from .coordinates import Hemisphere, GeodeticPoint, ProjectedPoint
from .letters import LatitudeBand, ColumnLetter, RowLetter, EXCLUDED_LETTERS
from .accuracy import Accuracy
from .reference import GridZoneDesignator, GridSquareId, MgrsReference

__all__ = [
    'Datum', 'Ellipsoid', 'WGS84_ELLIPSOID',
    'Hemisphere', 'GeodeticPoint', 'ProjectedPoint',
    'LatitudeBand', 'ColumnLetter', 'RowLetter', 'EXCLUDED_LETTERS',
    'Accuracy',
    'GridZoneDesignator', 'GridSquareId', 'MgrsReference',
]
