"""
Coordinate value types for the MGRS Converter.

Provides GeodeticPoint (latitude/longitude) and ProjectedPoint (UTM zone,
hemisphere, easting, northing). Both are immutable and validated at
construction; conversions always produce fresh values.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional
import math

from ..config import (
    MIN_LATITUDE,
    MAX_LATITUDE,
    MIN_LONGITUDE,
    MAX_LONGITUDE,
    ZONE_COUNT,
)
from ..errors import (
    InvalidLatitudeError,
    InvalidLongitudeError,
    InvalidZoneNumberError,
    InvalidHemisphereError,
    CoordinateRangeError,
)
from .datum import Datum


class Hemisphere(Enum):
    """Hemisphere of a UTM coordinate."""
    NORTH = "N"
    SOUTH = "S"

    @classmethod
    def from_char(cls, c) -> 'Hemisphere':
        """
        Convert 'N'/'S' (case-insensitive) to a Hemisphere.

        Raises:
            InvalidHemisphereError: For anything else
        """
        if isinstance(c, Hemisphere):
            return c
        key = str(c).strip().upper()
        for hemisphere in cls:
            if hemisphere.value == key:
                return hemisphere
        raise InvalidHemisphereError(c)

    @classmethod
    def for_latitude(cls, lat: float) -> 'Hemisphere':
        """Hemisphere containing a latitude (the equator is north)."""
        return cls.NORTH if lat >= 0 else cls.SOUTH

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class GeodeticPoint:
    """
    Geodetic latitude/longitude in degrees.

    Attributes:
        lat: Latitude, -80 <= lat <= 84 (UTM/MGRS operating envelope)
        lon: Longitude, -180 <= lon <= 180
        datum: Datum the coordinate is expressed in (WGS84)
    """
    lat: float
    lon: float
    datum: Datum = Datum.WGS84

    def __post_init__(self):
        """Reject coordinates outside the operating envelope."""
        if not (MIN_LATITUDE <= self.lat <= MAX_LATITUDE):
            raise InvalidLatitudeError(self.lat)

        if not (MIN_LONGITUDE <= self.lon <= MAX_LONGITUDE):
            raise InvalidLongitudeError(self.lon)

        object.__setattr__(self, 'datum', Datum.from_name(self.datum))

    @property
    def hemisphere(self) -> Hemisphere:
        """Hemisphere containing this point."""
        return Hemisphere.for_latitude(self.lat)


@dataclass(frozen=True, slots=True)
class ProjectedPoint:
    """
    UTM projected coordinate.

    Attributes:
        zone: UTM zone number (1-60)
        hemisphere: Hemisphere selecting the false northing
        easting: Meters from the zone's false origin
        northing: Meters from the zone's false origin
        datum: Datum the coordinate is expressed in (WGS84)
        convergence: Meridian convergence in degrees (forward projection only)
        scale: Point scale factor (forward projection only)
    """
    zone: int
    hemisphere: Hemisphere
    easting: float
    northing: float
    datum: Datum = Datum.WGS84
    convergence: Optional[float] = None
    scale: Optional[float] = None

    def __post_init__(self):
        """Validate zone and normalize hemisphere/datum."""
        if isinstance(self.zone, bool) or not isinstance(self.zone, int):
            raise InvalidZoneNumberError(self.zone)

        if not (1 <= self.zone <= ZONE_COUNT):
            raise InvalidZoneNumberError(self.zone)

        if not (math.isfinite(self.easting) and math.isfinite(self.northing)):
            raise CoordinateRangeError(
                (self.easting, self.northing),
                f"Non-finite easting/northing: {self.easting}, {self.northing}"
            )

        object.__setattr__(self, 'hemisphere', Hemisphere.from_char(self.hemisphere))
        object.__setattr__(self, 'datum', Datum.from_name(self.datum))
