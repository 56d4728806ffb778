"""
Input/Output modules for the MGRS Converter.
"""

from .mgrs_parser import (
    ParserState,
    MgrsParser,
    parse_mgrs,
    reconstruct_projected,
)
from .mgrs_formatter import (
    as_accuracy,
    truncate_offset,
    format_mgrs,
)
from .utm_text import (
    parse_utm,
    format_utm,
    format_geodetic,
)

__all__ = [
    # MGRS parsing
    'ParserState',
    'MgrsParser',
    'parse_mgrs',
    'reconstruct_projected',
    # MGRS formatting
    'as_accuracy',
    'truncate_offset',
    'format_mgrs',
    # UTM / geodetic text
    'parse_utm',
    'format_utm',
    'format_geodetic',
]
