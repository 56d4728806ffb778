"""
Latitude band classifier.

Maps latitudes to the 20 MGRS band letters C..X (8° each, X widened to
12° to reach 84°N) and supplies the minimum northing at which each band
begins. Row letters of a 100km square repeat every 2,000,000m, so the
band's minimum northing is what picks the right 2,000,000m block when a
grid reference is decoded.
"""

from typing import Tuple, Union
import logging
import math

from ..config import MIN_LATITUDE, MAX_LATITUDE, ROW_CYCLE_METERS
from ..errors import InvalidLatitudeBandError
from ..models.coordinates import Hemisphere
from ..models.letters import LatitudeBand

logger = logging.getLogger(__name__)

BAND_HEIGHT_DEG = 8.0

# Minimum northing (meters) at which each band begins. Southern bands are
# relative to the 10,000,000m false northing. Values from the GeoTrans
# latitude band table.
MIN_NORTHING_BY_BAND = {
    LatitudeBand.C: 1100000.0,
    LatitudeBand.D: 2000000.0,
    LatitudeBand.E: 2800000.0,
    LatitudeBand.F: 3700000.0,
    LatitudeBand.G: 4600000.0,
    LatitudeBand.H: 5500000.0,
    LatitudeBand.J: 6400000.0,
    LatitudeBand.K: 7300000.0,
    LatitudeBand.L: 8200000.0,
    LatitudeBand.M: 9100000.0,
    LatitudeBand.N: 0.0,
    LatitudeBand.P: 800000.0,
    LatitudeBand.Q: 1700000.0,
    LatitudeBand.R: 2600000.0,
    LatitudeBand.S: 3500000.0,
    LatitudeBand.T: 4400000.0,
    LatitudeBand.U: 5300000.0,
    LatitudeBand.V: 6200000.0,
    LatitudeBand.W: 7000000.0,
    LatitudeBand.X: 7900000.0,
}

BandLike = Union[LatitudeBand, str]


def _as_band(band: BandLike) -> LatitudeBand:
    if isinstance(band, LatitudeBand):
        return band
    return LatitudeBand.from_char(band)


def band_for_lat(lat: float) -> LatitudeBand:
    """
    Latitude band letter for a latitude.

    Bands are half-open [south, north) except X, which is closed at 84°N.

    Args:
        lat: Latitude in degrees

    Returns:
        LatitudeBand containing lat

    Raises:
        InvalidLatitudeBandError: If lat is outside [-80, 84]
    """
    if not (MIN_LATITUDE <= lat <= MAX_LATITUDE):
        raise InvalidLatitudeBandError(lat)

    index = int(math.floor((lat - MIN_LATITUDE) / BAND_HEIGHT_DEG))
    members = list(LatitudeBand)
    return members[min(index, len(members) - 1)]


def band_latitude_range(band: BandLike) -> Tuple[float, float]:
    """(south, north) latitude limits of a band in degrees."""
    band = _as_band(band)
    south = MIN_LATITUDE + band.index * BAND_HEIGHT_DEG
    if band is LatitudeBand.X:
        return (south, MAX_LATITUDE)
    return (south, south + BAND_HEIGHT_DEG)


def min_northing_for_band(band: BandLike) -> float:
    """
    Minimum northing at which a band begins.

    Args:
        band: LatitudeBand or band letter

    Returns:
        Northing in meters (southern bands include the false northing)

    Raises:
        InvalidLatitudeBandError: If the letter is not a band letter
    """
    return MIN_NORTHING_BY_BAND[_as_band(band)]


def hemisphere_for_band(band: BandLike) -> Hemisphere:
    """Hemisphere a band lies in (N and above are north)."""
    band = _as_band(band)
    if band.index >= LatitudeBand.N.index:
        return Hemisphere.NORTH
    return Hemisphere.SOUTH


def resolve_northing(raw_northing: float, band: BandLike) -> float:
    """
    Place a row-letter northing in the band's 2,000,000m block.

    A decoded row letter only fixes the northing modulo 2,000,000m. Whole
    blocks are added until the northing reaches the band's minimum.

    Args:
        raw_northing: Northing decoded from the row letter (and optionally
            the digits within the square), 0 <= raw_northing < 2,000,000
        band: Latitude band of the grid reference

    Returns:
        Northing in meters from the zone's false origin
    """
    band = _as_band(band)
    min_northing = MIN_NORTHING_BY_BAND[band]

    northing = raw_northing
    blocks = 0
    while northing < min_northing:
        northing += ROW_CYCLE_METERS
        blocks += 1

    logger.debug(
        f"Band {band.char}: raw northing {raw_northing} + {blocks} x "
        f"{ROW_CYCLE_METERS} -> {northing}"
    )
    return northing
