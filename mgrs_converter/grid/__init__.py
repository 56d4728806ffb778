"""
MGRS grid letter arithmetic: latitude bands and 100km grid squares.
"""

from .bands import (
    MIN_NORTHING_BY_BAND,
    band_for_lat,
    band_latitude_range,
    min_northing_for_band,
    hemisphere_for_band,
    resolve_northing,
)
from .squares import (
    COLUMN_SET_ORIGINS,
    ROW_SET_ORIGINS,
    column_set_for_zone,
    row_set_for_zone,
    column_letters_for_zone,
    row_letters_for_zone,
    encode_column,
    decode_column,
    encode_row,
    decode_row,
    grid_square_for,
)

__all__ = [
    # Latitude bands
    'MIN_NORTHING_BY_BAND',
    'band_for_lat',
    'band_latitude_range',
    'min_northing_for_band',
    'hemisphere_for_band',
    'resolve_northing',
    # 100km squares
    'COLUMN_SET_ORIGINS',
    'ROW_SET_ORIGINS',
    'column_set_for_zone',
    'row_set_for_zone',
    'column_letters_for_zone',
    'row_letters_for_zone',
    'encode_column',
    'decode_column',
    'encode_row',
    'decode_row',
    'grid_square_for',
]
