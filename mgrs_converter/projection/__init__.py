"""
Projection module for the MGRS Converter.

Provides a pluggable projection interface and the UTM implementation for
converting between geodetic (lat/lon) and projected UTM coordinates.
"""

from abc import ABC, abstractmethod
from typing import Tuple

from ..models.coordinates import GeodeticPoint, ProjectedPoint
from ..models.datum import Datum
from .transverse_mercator import (
    TransverseMercatorProjector,
    KrugerSeries,
    ALPHA_COEFFICIENTS,
    BETA_COEFFICIENTS,
)
from .zones import zone_number_for, central_meridian


class IProjector(ABC):
    """
    Abstract interface for coordinate projection.

    Implementations convert between geodetic points and UTM projected
    points on a single datum.
    """

    @abstractmethod
    def forward(self, point: GeodeticPoint) -> ProjectedPoint:
        """
        Project geodetic coordinates to UTM.

        Args:
            point: Geodetic point

        Returns:
            ProjectedPoint in the point's UTM zone
        """
        pass

    @abstractmethod
    def inverse(self, projected: ProjectedPoint) -> GeodeticPoint:
        """
        Convert UTM coordinates back to geodetic.

        Args:
            projected: UTM coordinate

        Returns:
            GeodeticPoint
        """
        pass

    @abstractmethod
    def inverse_raw(self, projected: ProjectedPoint) -> Tuple[float, float, float, float]:
        """
        Convert UTM coordinates back to geodetic without range checks.

        Args:
            projected: UTM coordinate

        Returns:
            (lat, lon, convergence, scale) tuple
        """
        pass


IProjector.register(TransverseMercatorProjector)


def create_projector(datum: Datum = Datum.WGS84) -> IProjector:
    """
    Factory function to create the default projector.

    Currently uses the Krüger-series Transverse Mercator (UTM) projection.

    Args:
        datum: Datum or datum name (only WGS84 is supported)

    Returns:
        IProjector implementation

    Raises:
        InvalidDatumError: If the datum is not supported
    """
    return TransverseMercatorProjector(datum=Datum.from_name(datum))


__all__ = [
    'IProjector',
    'TransverseMercatorProjector',
    'KrugerSeries',
    'ALPHA_COEFFICIENTS',
    'BETA_COEFFICIENTS',
    'create_projector',
    'zone_number_for',
    'central_meridian',
]
