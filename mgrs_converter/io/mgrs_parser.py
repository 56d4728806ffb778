"""
MGRS grid reference parser.

Strict left-to-right scan with no backtracking:

    ZONE_DIGITS -> BAND_LETTER -> COLUMN_LETTER -> ROW_LETTER
                -> LOCATION_DIGITS -> DONE

Whitespace is allowed between the letter groups. The location is either
one contiguous digit run, split evenly into easting and northing, or two
whitespace-separated digit runs. Any character outside the class a state
expects aborts the parse; there is no partial result.

Examples:
    "31U DQ 48251 11932"
    "31UDQ4825111932"
    "33UXP04"
"""

from enum import Enum
from typing import Callable, Dict, Optional
import logging

from ..config import FULL_PRECISION_DIGITS, ZONE_COUNT
from ..errors import (
    InvalidZoneNumberError,
    InvalidZoneLetterError,
    InvalidColLetterError,
    InvalidRowLetterError,
    InvalidEastingCharError,
    InvalidNorthingCharError,
)
from ..grid.bands import resolve_northing, hemisphere_for_band
from ..grid.squares import decode_column, decode_row
from ..models.accuracy import Accuracy
from ..models.coordinates import ProjectedPoint
from ..models.letters import LatitudeBand, ColumnLetter, RowLetter
from ..models.reference import GridZoneDesignator, GridSquareId, MgrsReference

logger = logging.getLogger(__name__)

DIGITS = frozenset('0123456789')
BAND_CHARS = frozenset(band.char for band in LatitudeBand)
COLUMN_CHARS = frozenset(letter.char for letter in ColumnLetter)
ROW_CHARS = frozenset(letter.char for letter in RowLetter)

MAX_ZONE_DIGITS = 2


class ParserState(Enum):
    """States of the MGRS parser."""
    ZONE_DIGITS = "zone_digits"
    BAND_LETTER = "band_letter"
    COLUMN_LETTER = "column_letter"
    ROW_LETTER = "row_letter"
    LOCATION_DIGITS = "location_digits"
    DONE = "done"


class MgrsParser:
    """
    Single-use parser for one MGRS grid reference string.

    Attributes:
        text: Input with surrounding whitespace removed
        pos: Index of the next unread character
        state: Current ParserState
    """

    def __init__(self, text: str):
        self.text = text.strip()
        self.pos = 0
        self.state = ParserState.ZONE_DIGITS

        self.zone: Optional[int] = None
        self.band: Optional[LatitudeBand] = None
        self.column: Optional[ColumnLetter] = None
        self.row: Optional[RowLetter] = None
        self.easting_digits = ""
        self.northing_digits = ""

        self._handlers: Dict[ParserState, Callable[[], None]] = {
            ParserState.ZONE_DIGITS: self._zone_digits,
            ParserState.BAND_LETTER: self._band_letter,
            ParserState.COLUMN_LETTER: self._column_letter,
            ParserState.ROW_LETTER: self._row_letter,
            ParserState.LOCATION_DIGITS: self._location_digits,
        }

    def parse(self) -> MgrsReference:
        """
        Run the parser to completion.

        Returns:
            MgrsReference with within-square offsets scaled to meters

        Raises:
            MgrsError subclass describing the first malformed field
        """
        if self.state is not ParserState.ZONE_DIGITS:
            raise RuntimeError("MgrsParser instances are single-use")

        while self.state is not ParserState.DONE:
            self._handlers[self.state]()

        accuracy = Accuracy.derive_from_digit_strings(
            self.easting_digits, self.northing_digits
        )
        reference = MgrsReference(
            gzd=GridZoneDesignator(zone=self.zone, band=self.band),
            square=GridSquareId(column=self.column, row=self.row),
            easting=_scale_digits(self.easting_digits),
            northing=_scale_digits(self.northing_digits),
            accuracy=accuracy,
        )
        logger.debug(f"Parsed {self.text!r} -> {reference}")
        return reference

    # -------------------------------------------------------------------------
    # States
    # -------------------------------------------------------------------------

    def _peek(self) -> str:
        if self.pos < len(self.text):
            return self.text[self.pos]
        return ""

    def _skip_whitespace(self) -> None:
        while self._peek().isspace():
            self.pos += 1

    def _zone_digits(self) -> None:
        start = self.pos
        while self._peek() in DIGITS and self.pos - start < MAX_ZONE_DIGITS:
            self.pos += 1

        digits = self.text[start:self.pos]
        if not digits:
            raise InvalidZoneNumberError(self._peek() or self.text)

        zone = int(digits)
        if not (1 <= zone <= ZONE_COUNT):
            raise InvalidZoneNumberError(zone)

        self.zone = zone
        self.state = ParserState.BAND_LETTER

    def _band_letter(self) -> None:
        self._skip_whitespace()
        c = self._peek().upper()
        if not c or c not in BAND_CHARS:
            raise InvalidZoneLetterError(self._peek())

        self.band = LatitudeBand.from_char(c)
        self.pos += 1
        self.state = ParserState.COLUMN_LETTER

    def _column_letter(self) -> None:
        self._skip_whitespace()
        c = self._peek().upper()
        if not c or c not in COLUMN_CHARS:
            raise InvalidColLetterError(self._peek())

        self.column = ColumnLetter.from_char(c)
        self.pos += 1
        self.state = ParserState.ROW_LETTER

    def _row_letter(self) -> None:
        c = self._peek().upper()
        if not c or c not in ROW_CHARS:
            raise InvalidRowLetterError(self._peek())

        self.row = RowLetter.from_char(c)
        self.pos += 1
        self.state = ParserState.LOCATION_DIGITS

    def _location_digits(self) -> None:
        runs = self.text[self.pos:].split()

        if not runs:
            raise InvalidEastingCharError("", "missing easting and northing digits")

        if len(runs) == 1:
            easting, northing = _split_run(runs[0])
        elif len(runs) == 2:
            easting, northing = runs
            _check_digits(easting, InvalidEastingCharError)
            _check_digits(northing, InvalidNorthingCharError)
        else:
            raise InvalidNorthingCharError(
                runs[2], f"unexpected text after northing: {runs[2]!r}"
            )

        if len(easting) > FULL_PRECISION_DIGITS:
            raise InvalidEastingCharError(
                easting, f"easting has more than {FULL_PRECISION_DIGITS} digits"
            )
        if len(northing) > FULL_PRECISION_DIGITS:
            raise InvalidNorthingCharError(
                northing, f"northing has more than {FULL_PRECISION_DIGITS} digits"
            )

        self.easting_digits = easting
        self.northing_digits = northing
        self.pos = len(self.text)
        self.state = ParserState.DONE


def _check_digits(run: str, error_cls) -> None:
    """Raise error_cls for the first non-digit in run."""
    for c in run:
        if c not in DIGITS:
            raise error_cls(c)


def _split_run(run: str):
    """Split one contiguous digit run into (easting, northing) halves."""
    half = (len(run) + 1) // 2
    for i, c in enumerate(run):
        if c not in DIGITS:
            if i < half:
                raise InvalidEastingCharError(c)
            raise InvalidNorthingCharError(c)

    if len(run) % 2 != 0:
        raise InvalidNorthingCharError(
            run, f"odd number of location digits ({len(run)}) without a separator"
        )

    half = len(run) // 2
    return run[:half], run[half:]


def _scale_digits(digits: str) -> int:
    """A k-digit field holds the high-order k digits of a 5-digit value."""
    return int(digits) * 10 ** (FULL_PRECISION_DIGITS - len(digits))


def parse_mgrs(text: str) -> MgrsReference:
    """
    Parse an MGRS grid reference string.

    Args:
        text: Grid reference, e.g. "31U DQ 48251 11932" or "31UDQ4825111932"

    Returns:
        MgrsReference

    Raises:
        MgrsError subclass describing the first malformed field
    """
    return MgrsParser(text).parse()


def reconstruct_projected(reference: MgrsReference) -> ProjectedPoint:
    """
    Rebuild the full UTM coordinate of a grid reference's south-west corner.

    Steps:
    1. Convert the column/row letters to meter offsets in the zone's set
    2. Place the row offset in the band's 2,000,000m block
    3. Add the within-square easting/northing

    Args:
        reference: Parsed or constructed MgrsReference

    Returns:
        ProjectedPoint (no convergence/scale)
    """
    zone = reference.zone
    e100k = decode_column(zone, reference.column)
    n100k = resolve_northing(decode_row(zone, reference.row), reference.band)

    return ProjectedPoint(
        zone=zone,
        hemisphere=hemisphere_for_band(reference.band),
        easting=e100k + reference.easting,
        northing=n100k + reference.northing,
    )
