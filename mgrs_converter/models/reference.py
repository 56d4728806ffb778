"""
MGRS grid reference data model.

An MgrsReference is a quantized, letter-encoded view of a UTM coordinate:
grid zone designator, 100km grid square id, and easting/northing within
the square truncated to the reference's accuracy.
"""

from dataclasses import dataclass

from ..config import ZONE_COUNT, GRID_SQUARE_SIZE
from ..errors import (
    InvalidZoneNumberError,
    InvalidAccuracyError,
    CoordinateRangeError,
)
from .accuracy import Accuracy
from .letters import LatitudeBand, ColumnLetter, RowLetter


@dataclass(frozen=True, slots=True)
class GridZoneDesignator:
    """UTM zone number plus latitude band letter, e.g. 31U."""
    zone: int
    band: LatitudeBand

    def __post_init__(self):
        if isinstance(self.zone, bool) or not isinstance(self.zone, int):
            raise InvalidZoneNumberError(self.zone)
        if not (1 <= self.zone <= ZONE_COUNT):
            raise InvalidZoneNumberError(self.zone)
        if not isinstance(self.band, LatitudeBand):
            object.__setattr__(self, 'band', LatitudeBand.from_char(self.band))

    def __str__(self) -> str:
        return f"{self.zone:02d}{self.band.char}"


@dataclass(frozen=True, slots=True)
class GridSquareId:
    """Two-letter 100km grid square id, e.g. DQ."""
    column: ColumnLetter
    row: RowLetter

    def __post_init__(self):
        if not isinstance(self.column, ColumnLetter):
            object.__setattr__(self, 'column', ColumnLetter.from_char(self.column))
        if not isinstance(self.row, RowLetter):
            object.__setattr__(self, 'row', RowLetter.from_char(self.row))

    def __str__(self) -> str:
        return f"{self.column.char}{self.row.char}"


@dataclass(frozen=True, slots=True)
class MgrsReference:
    """
    MGRS grid reference.

    Attributes:
        gzd: Grid zone designator
        square: 100km grid square id
        easting: Meters east of the square's west edge (0-99999)
        northing: Meters north of the square's south edge (0-99999)
        accuracy: Precision of easting/northing; both are multiples of
            accuracy.meters
    """
    gzd: GridZoneDesignator
    square: GridSquareId
    easting: int
    northing: int
    accuracy: Accuracy = Accuracy.ONE_METER

    def __post_init__(self):
        """Check the within-square offsets against the accuracy."""
        for value in (self.easting, self.northing):
            if not (0 <= value < GRID_SQUARE_SIZE):
                raise CoordinateRangeError(value)
            if value % self.accuracy.meters != 0:
                raise InvalidAccuracyError(
                    value,
                    f"{value} carries more precision than {self.accuracy}",
                )

    @property
    def zone(self) -> int:
        """UTM zone number."""
        return self.gzd.zone

    @property
    def band(self) -> LatitudeBand:
        """Latitude band letter."""
        return self.gzd.band

    @property
    def column(self) -> ColumnLetter:
        """100km column letter."""
        return self.square.column

    @property
    def row(self) -> RowLetter:
        """100km row letter."""
        return self.square.row
