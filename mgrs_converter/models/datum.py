"""
Datum and ellipsoid parameters for the MGRS Converter.

Only the WGS84 datum is supported. Ellipsoid constants are consumed as
inputs; derived quantities (eccentricity, third flattening) are exposed
as properties.
"""

from dataclasses import dataclass
from enum import Enum
import math

from ..config import WGS84_SEMI_MAJOR_AXIS, WGS84_FLATTENING
from ..errors import InvalidDatumError


@dataclass(frozen=True, slots=True)
class Ellipsoid:
    """Reference ellipsoid given by semi-major axis and flattening."""
    a: float
    f: float

    @property
    def b(self) -> float:
        """Semi-minor axis (meters)."""
        return self.a * (1 - self.f)

    @property
    def e2(self) -> float:
        """First eccentricity squared."""
        return self.f * (2 - self.f)

    @property
    def e(self) -> float:
        """First eccentricity."""
        return math.sqrt(self.e2)

    @property
    def n(self) -> float:
        """Third flattening."""
        return self.f / (2 - self.f)


WGS84_ELLIPSOID = Ellipsoid(a=WGS84_SEMI_MAJOR_AXIS, f=WGS84_FLATTENING)


class Datum(Enum):
    """Geodetic datum a coordinate is expressed in."""
    WGS84 = "WGS84"

    @property
    def ellipsoid(self) -> Ellipsoid:
        """Ellipsoid underlying this datum."""
        return _ELLIPSOIDS[self]

    @classmethod
    def from_name(cls, name) -> 'Datum':
        """
        Look up a datum by name (case-insensitive).

        Args:
            name: Datum name such as "WGS84", or a Datum instance

        Returns:
            Matching Datum

        Raises:
            InvalidDatumError: If the name is not a supported datum
        """
        if isinstance(name, Datum):
            return name

        key = str(name).strip().upper().replace('-', '').replace(' ', '')
        for datum in cls:
            if datum.value == key:
                return datum

        raise InvalidDatumError(name)

    def __str__(self) -> str:
        return self.value


_ELLIPSOIDS = {
    Datum.WGS84: WGS84_ELLIPSOID,
}
