"""
UTM zone selection.

Zones are 6° wide starting at 180°W, with the Norway and Svalbard
exceptions of the MGRS grid.
"""

import logging
import math

from ..config import ZONE_COUNT, ZONE_WIDTH_DEG, MAX_LONGITUDE
from ..errors import InvalidZoneNumberError

logger = logging.getLogger(__name__)

# Svalbard: (lon_min, lon_max, zone) for 72°N <= lat < 84°N
SVALBARD_ZONES = (
    (0.0, 9.0, 31),
    (9.0, 21.0, 33),
    (21.0, 33.0, 35),
    (33.0, 42.0, 37),
)


def zone_number_for(lat: float, lon: float) -> int:
    """
    UTM zone number for a geodetic position.

    Args:
        lat: Latitude in degrees
        lon: Longitude in degrees

    Returns:
        Zone number 1-60
    """
    zone = int(math.floor((lon + 180.0) / ZONE_WIDTH_DEG)) + 1

    # 180°E belongs to the last zone
    if lon == MAX_LONGITUDE:
        zone = ZONE_COUNT

    # Norway: 32V is widened west to 3°E
    if 56.0 <= lat < 64.0 and 3.0 <= lon < 12.0:
        logger.debug(f"Norway zone exception at ({lat}, {lon}): {zone} -> 32")
        zone = 32

    # Svalbard: 32X, 34X and 36X are not used
    if 72.0 <= lat < 84.0:
        for lon_min, lon_max, svalbard_zone in SVALBARD_ZONES:
            if lon_min <= lon < lon_max:
                if zone != svalbard_zone:
                    logger.debug(
                        f"Svalbard zone exception at ({lat}, {lon}): "
                        f"{zone} -> {svalbard_zone}"
                    )
                zone = svalbard_zone
                break

    return zone


def central_meridian(zone: int) -> float:
    """Longitude of a zone's central meridian in degrees."""
    if isinstance(zone, bool) or not isinstance(zone, int) or not (1 <= zone <= ZONE_COUNT):
        raise InvalidZoneNumberError(zone)
    return (zone - 1) * ZONE_WIDTH_DEG - 180.0 + ZONE_WIDTH_DEG / 2
