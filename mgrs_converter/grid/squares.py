"""
100km grid square encoder/decoder.

Column letters (easting) cycle through three sets keyed by
(zone - 1) mod 3, starting at A, J and S; each set holds the 8 columns a
zone can span. Row letters (northing) cycle through two sets keyed by
(zone - 1) mod 2, starting at A and F; each set holds 20 letters A..V and
repeats every 2,000,000m. I and O are never used.
"""

from typing import Tuple, Union
import logging
import math

from ..config import ZONE_COUNT, GRID_SQUARE_SIZE
from ..errors import (
    InvalidZoneNumberError,
    InvalidColLetterError,
    InvalidEastingCharError,
    InvalidNorthingCharError,
    CoordinateRangeError,
)
from ..models.letters import ColumnLetter, RowLetter, EXCLUDED_LETTERS
from ..models.reference import GridSquareId

logger = logging.getLogger(__name__)

# Letter at the origin of each set
COLUMN_SET_ORIGINS = (ColumnLetter.A, ColumnLetter.J, ColumnLetter.S)
ROW_SET_ORIGINS = (RowLetter.A, RowLetter.F)

# Last letter before wrapping back to A
LAST_COLUMN_CHAR = 'Z'
LAST_ROW_CHAR = 'V'

COLUMNS_PER_ZONE = 8
ROWS_PER_CYCLE = 20


def _next_letter(current: str, last: str) -> Tuple[str, bool]:
    """Next letter after current, skipping I/O; flags a wrap past last."""
    current = chr(ord(current) + 1)
    if current in EXCLUDED_LETTERS:
        current = chr(ord(current) + 1)
    if current > last:
        return ('A', True)
    return (current, False)


def _walk_letters(origin: str, target: str, last: str, error_cls) -> int:
    """
    Count steps from origin to target, wrapping past last at most once.

    Raises:
        error_cls: If target is not reached before a second wraparound
    """
    current = origin
    steps = 0
    wrapped = False
    while current != target:
        current, wrap = _next_letter(current, last)
        if wrap:
            # Only a target outside the alphabet wraps twice
            if wrapped:
                raise error_cls(target)
            wrapped = True
        steps += 1
    return steps


def _letter_cycle(origin: str, last: str, count: int) -> Tuple[str, ...]:
    letters = [origin]
    current = origin
    while len(letters) < count:
        current, _ = _next_letter(current, last)
        letters.append(current)
    return tuple(letters)


# Set tables: position -> letter
COLUMN_TABLES = tuple(
    tuple(ColumnLetter.from_char(c)
          for c in _letter_cycle(origin.char, LAST_COLUMN_CHAR, COLUMNS_PER_ZONE))
    for origin in COLUMN_SET_ORIGINS
)

ROW_TABLES = tuple(
    tuple(RowLetter.from_char(c)
          for c in _letter_cycle(origin.char, LAST_ROW_CHAR, ROWS_PER_CYCLE))
    for origin in ROW_SET_ORIGINS
)


def _check_zone(zone: int) -> None:
    if isinstance(zone, bool) or not isinstance(zone, int) or not (1 <= zone <= ZONE_COUNT):
        raise InvalidZoneNumberError(zone)


def column_set_for_zone(zone: int) -> int:
    """Column letter set (0, 1 or 2) used by a zone."""
    _check_zone(zone)
    return (zone - 1) % len(COLUMN_SET_ORIGINS)


def row_set_for_zone(zone: int) -> int:
    """Row letter set (0 or 1) used by a zone."""
    _check_zone(zone)
    return (zone - 1) % len(ROW_SET_ORIGINS)


def column_letters_for_zone(zone: int) -> Tuple[ColumnLetter, ...]:
    """The 8 column letters of a zone, west to east."""
    return COLUMN_TABLES[column_set_for_zone(zone)]


def row_letters_for_zone(zone: int) -> Tuple[RowLetter, ...]:
    """The 20 row letters of a zone, south to north within a 2,000,000m cycle."""
    return ROW_TABLES[row_set_for_zone(zone)]


def encode_column(zone: int, easting: float) -> ColumnLetter:
    """
    Column letter of the 100km square containing an easting.

    Args:
        zone: UTM zone number
        easting: Easting in meters (false easting included)

    Returns:
        ColumnLetter from the zone's set

    Raises:
        CoordinateRangeError: If the easting is outside the zone's 8 columns
    """
    index = int(math.floor(easting / GRID_SQUARE_SIZE)) - 1
    table = column_letters_for_zone(zone)
    if not (0 <= index < len(table)):
        raise CoordinateRangeError(easting)
    return table[index]


def decode_column(zone: int, letter: Union[ColumnLetter, str]) -> float:
    """
    Easting of the west edge of a column's 100km square.

    Walks forward from the set's origin letter to the target letter.

    Args:
        zone: UTM zone number
        letter: ColumnLetter or column character

    Returns:
        Easting in meters (100,000 for the set's origin letter)

    Raises:
        InvalidColLetterError: For I/O, non-letters, or a letter outside
            the zone's set
        InvalidEastingCharError: If the walk wraps past Z twice
    """
    if not isinstance(letter, ColumnLetter):
        letter = ColumnLetter.from_char(letter)

    origin = COLUMN_SET_ORIGINS[column_set_for_zone(zone)]
    steps = _walk_letters(origin.char, letter.char, LAST_COLUMN_CHAR,
                          InvalidEastingCharError)

    if steps >= COLUMNS_PER_ZONE:
        raise InvalidColLetterError(
            letter.char,
            f"column letter {letter.char!r} is not used in zone {zone}",
        )

    return float((steps + 1) * GRID_SQUARE_SIZE)


def encode_row(zone: int, northing: float) -> RowLetter:
    """
    Row letter of the 100km square containing a northing.

    Args:
        zone: UTM zone number
        northing: Northing in meters (false northing included)

    Returns:
        RowLetter from the zone's set

    Raises:
        CoordinateRangeError: If the northing is negative
    """
    if northing < 0:
        raise CoordinateRangeError(northing)
    index = int(math.floor(northing / GRID_SQUARE_SIZE)) % ROWS_PER_CYCLE
    return row_letters_for_zone(zone)[index]


def decode_row(zone: int, letter: Union[RowLetter, str]) -> float:
    """
    Northing of the south edge of a row's 100km square, modulo 2,000,000m.

    The result is ambiguous across 2,000,000m blocks; resolve it with
    grid.bands.resolve_northing.

    Args:
        zone: UTM zone number
        letter: RowLetter or row character

    Returns:
        Northing offset in meters, 0 <= offset < 2,000,000

    Raises:
        InvalidRowLetterError: For I/O, letters past V, or non-letters
        InvalidNorthingCharError: If the walk wraps past V twice
    """
    if not isinstance(letter, RowLetter):
        letter = RowLetter.from_char(letter)

    origin = ROW_SET_ORIGINS[row_set_for_zone(zone)]
    steps = _walk_letters(origin.char, letter.char, LAST_ROW_CHAR,
                          InvalidNorthingCharError)
    return float(steps * GRID_SQUARE_SIZE)


def grid_square_for(zone: int, easting: float, northing: float) -> GridSquareId:
    """Two-letter 100km square id for a UTM coordinate."""
    square = GridSquareId(
        column=encode_column(zone, easting),
        row=encode_row(zone, northing),
    )
    logger.debug(f"Zone {zone} E{easting} N{northing} -> square {square}")
    return square
