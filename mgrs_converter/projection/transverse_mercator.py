"""
Transverse Mercator (UTM) projection for the MGRS Converter.

Ellipsoidal forward and inverse projection using the 6th-order Krüger
series in the third flattening n, with the coefficients published in:

    C. F. F. Karney, "Transverse Mercator with an accuracy of a few
    nanometers", J. Geodesy 85(8), 475-485 (2011), eqs. 35 and 36.

Accuracy is about 5nm within 3900km of the central meridian.

Forward results are rounded to 1e-6m (easting/northing), 1e-9°
(convergence) and 1e-12 (scale). Inverse results are rounded to 1e-11°
(latitude/longitude) with the same convergence/scale precision.
"""

from dataclasses import dataclass
from typing import Optional, Tuple
import logging
import math

from ..config import (
    UTM_SCALE_FACTOR,
    FALSE_EASTING,
    FALSE_NORTHING,
    MIN_LATITUDE,
    MAX_LATITUDE,
    EASTING_NORTHING_DECIMALS,
    CONVERGENCE_DECIMALS,
    SCALE_DECIMALS,
    LAT_LON_DECIMALS,
    INVERSE_TOLERANCE,
    INVERSE_MAX_ITERATIONS,
)
from ..errors import (
    InvalidDatumError,
    InvalidLatitudeError,
    ProjectionConvergenceError,
)
from ..models.coordinates import GeodeticPoint, ProjectedPoint, Hemisphere
from ..models.datum import Datum, Ellipsoid
from .zones import zone_number_for, central_meridian

logger = logging.getLogger(__name__)


# =============================================================================
# KRÜGER SERIES COEFFICIENTS
# =============================================================================

# Row j holds the coefficients of n^1 .. n^6 in alpha_{j+1} (forward).
ALPHA_COEFFICIENTS = (
    (1 / 2, -2 / 3, 5 / 16, 41 / 180, -127 / 288, 7891 / 37800),
    (0, 13 / 48, -3 / 5, 557 / 1440, 281 / 630, -1983433 / 1935360),
    (0, 0, 61 / 240, -103 / 140, 15061 / 26880, 167603 / 181440),
    (0, 0, 0, 49561 / 161280, -179 / 168, 6601661 / 7257600),
    (0, 0, 0, 0, 34729 / 80640, -3418889 / 1995840),
    (0, 0, 0, 0, 0, 212378941 / 319334400),
)

# Row j holds the coefficients of n^1 .. n^6 in beta_{j+1} (inverse).
BETA_COEFFICIENTS = (
    (1 / 2, -2 / 3, 37 / 96, -1 / 360, -81 / 512, 96199 / 604800),
    (0, 1 / 48, 1 / 15, -437 / 1440, 46 / 105, -1118711 / 3870720),
    (0, 0, 17 / 480, -37 / 840, -209 / 4480, 5569 / 90720),
    (0, 0, 0, 4397 / 161280, -11 / 504, -830251 / 7257600),
    (0, 0, 0, 0, 4583 / 161280, -108847 / 3991680),
    (0, 0, 0, 0, 0, 20648693 / 638668800),
)


def _evaluate(coefficients: Tuple[float, ...], n: float) -> float:
    """Evaluate sum(c_k * n^k) for k = 1..6."""
    return sum(c * n ** k for k, c in enumerate(coefficients, start=1))


@dataclass(frozen=True)
class KrugerSeries:
    """
    Krüger series evaluated for one ellipsoid.

    Attributes:
        A: Rectifying radius (2*pi*A is the meridian circumference)
        alpha: Forward coefficients alpha_1..alpha_6
        beta: Inverse coefficients beta_1..beta_6
    """
    A: float
    alpha: Tuple[float, ...]
    beta: Tuple[float, ...]

    @classmethod
    def for_ellipsoid(cls, ellipsoid: Ellipsoid) -> 'KrugerSeries':
        """Evaluate the coefficient tables for an ellipsoid."""
        n = ellipsoid.n
        n2 = n * n
        A = ellipsoid.a / (1 + n) * (1 + n2 / 4 + n2 ** 2 / 64 + n2 ** 3 / 256)
        return cls(
            A=A,
            alpha=tuple(_evaluate(row, n) for row in ALPHA_COEFFICIENTS),
            beta=tuple(_evaluate(row, n) for row in BETA_COEFFICIENTS),
        )


# =============================================================================
# PROJECTOR
# =============================================================================

class TransverseMercatorProjector:
    """
    UTM projection on a datum's ellipsoid.

    Attributes:
        datum: Datum of all accepted and produced coordinates
        scale_factor: Scale on the central meridian (0.9996 for UTM)
        series: Krüger series for the datum's ellipsoid
    """

    def __init__(
        self,
        datum: Datum = Datum.WGS84,
        scale_factor: float = UTM_SCALE_FACTOR
    ):
        """
        Initialize projector for a datum.

        Args:
            datum: Datum (only WGS84 is supported)
            scale_factor: Central meridian scale factor
        """
        self.datum = Datum.from_name(datum)
        self.scale_factor = scale_factor

        ellipsoid = self.datum.ellipsoid
        self._a = ellipsoid.a
        self._e = ellipsoid.e
        self._e2 = ellipsoid.e2
        self.series = KrugerSeries.for_ellipsoid(ellipsoid)

    def forward(
        self,
        point: GeodeticPoint,
        zone: Optional[int] = None
    ) -> ProjectedPoint:
        """
        Project a geodetic point to UTM.

        Args:
            point: Geodetic point on this projector's datum
            zone: Zone to project into; defaults to the point's own zone
                (with the Norway/Svalbard exceptions)

        Returns:
            ProjectedPoint with convergence (degrees) and scale

        Raises:
            InvalidLatitudeError: If latitude is outside [-80, 84]
            InvalidDatumError: If the point is on a different datum
        """
        if point.datum is not self.datum:
            raise InvalidDatumError(point.datum)

        lat, lon = point.lat, point.lon
        if not (MIN_LATITUDE <= lat <= MAX_LATITUDE):
            raise InvalidLatitudeError(lat)

        if zone is None:
            zone = zone_number_for(lat, lon)
        lon0 = central_meridian(zone)

        e = self._e
        k0 = self.scale_factor
        A = self.series.A

        phi = math.radians(lat)
        lam = math.radians(lon - lon0)

        cos_lam = math.cos(lam)
        sin_lam = math.sin(lam)
        tan_lam = math.tan(lam)

        # Conformal latitude as tau' = tan(chi)
        tau = math.tan(phi)
        sigma = math.sinh(e * math.atanh(e * tau / math.sqrt(1 + tau * tau)))
        tau_p = tau * math.sqrt(1 + sigma * sigma) - sigma * math.sqrt(1 + tau * tau)

        # Spherical transverse Mercator (Gauss-Schreiber) coordinates
        xi_p = math.atan2(tau_p, cos_lam)
        eta_p = math.asinh(sin_lam / math.sqrt(tau_p * tau_p + cos_lam * cos_lam))

        xi = xi_p
        eta = eta_p
        p_p = 1.0
        q_p = 0.0
        for j, alpha_j in enumerate(self.series.alpha, start=1):
            two_j = 2 * j
            sin_xi = math.sin(two_j * xi_p)
            cos_xi = math.cos(two_j * xi_p)
            sinh_eta = math.sinh(two_j * eta_p)
            cosh_eta = math.cosh(two_j * eta_p)
            xi += alpha_j * sin_xi * cosh_eta
            eta += alpha_j * cos_xi * sinh_eta
            p_p += two_j * alpha_j * cos_xi * cosh_eta
            q_p += two_j * alpha_j * sin_xi * sinh_eta

        x = k0 * A * eta
        y = k0 * A * xi

        # Meridian convergence
        gamma = (math.atan(tau_p / math.sqrt(1 + tau_p * tau_p) * tan_lam)
                 + math.atan2(q_p, p_p))

        # Point scale
        sin_phi = math.sin(phi)
        k = (k0
             * math.sqrt(1 - self._e2 * sin_phi * sin_phi)
             * math.sqrt(1 + tau * tau)
             / math.sqrt(tau_p * tau_p + cos_lam * cos_lam)
             * (A / self._a)
             * math.sqrt(p_p * p_p + q_p * q_p))

        hemisphere = Hemisphere.for_latitude(lat)
        easting = x + FALSE_EASTING
        northing = y + FALSE_NORTHING if hemisphere is Hemisphere.SOUTH else y

        return ProjectedPoint(
            zone=zone,
            hemisphere=hemisphere,
            easting=round(easting, EASTING_NORTHING_DECIMALS),
            northing=round(northing, EASTING_NORTHING_DECIMALS),
            datum=self.datum,
            convergence=round(math.degrees(gamma), CONVERGENCE_DECIMALS),
            scale=round(k, SCALE_DECIMALS),
        )

    def inverse(self, projected: ProjectedPoint) -> GeodeticPoint:
        """
        Convert a UTM coordinate back to geodetic latitude/longitude.

        The conformal latitude is inverted by Newton iteration on
        tau = tan(latitude), stopping once the correction is at most
        1e-12. The iteration is capped at 6 steps; valid inputs converge
        in 2-4. Results are rounded to 1e-11°.

        Args:
            projected: UTM coordinate on this projector's datum

        Returns:
            GeodeticPoint

        Raises:
            ProjectionConvergenceError: If the iteration cap is reached
            InvalidLatitudeError: If the result is outside [-80, 84]
        """
        point, _, _ = self.inverse_full(projected)
        return point

    def inverse_full(
        self,
        projected: ProjectedPoint
    ) -> Tuple[GeodeticPoint, float, float]:
        """
        Inverse projection returning convergence and scale as well.

        Returns:
            (point, convergence in degrees, scale) tuple
        """
        lat, lon, convergence, scale = self.inverse_raw(projected)
        point = GeodeticPoint(lat=lat, lon=lon, datum=self.datum)
        return (point, convergence, scale)

    def inverse_raw(
        self,
        projected: ProjectedPoint
    ) -> Tuple[float, float, float, float]:
        """
        Inverse projection without the latitude envelope check.

        Grid squares on the edge of the UTM envelope extend a little past
        -80° and 84°; their corners are still computed here.

        Returns:
            (lat, lon, convergence in degrees, scale) tuple
        """
        if projected.datum is not self.datum:
            raise InvalidDatumError(projected.datum)

        k0 = self.scale_factor
        A = self.series.A

        x = projected.easting - FALSE_EASTING
        y = projected.northing
        if projected.hemisphere is Hemisphere.SOUTH:
            y -= FALSE_NORTHING

        eta = x / (k0 * A)
        xi = y / (k0 * A)

        xi_p = xi
        eta_p = eta
        p = 1.0
        q = 0.0
        for j, beta_j in enumerate(self.series.beta, start=1):
            two_j = 2 * j
            sin_xi = math.sin(two_j * xi)
            cos_xi = math.cos(two_j * xi)
            sinh_eta = math.sinh(two_j * eta)
            cosh_eta = math.cosh(two_j * eta)
            xi_p -= beta_j * sin_xi * cosh_eta
            eta_p -= beta_j * cos_xi * sinh_eta
            p -= two_j * beta_j * cos_xi * cosh_eta
            q += two_j * beta_j * sin_xi * sinh_eta

        sinh_eta_p = math.sinh(eta_p)
        sin_xi_p = math.sin(xi_p)
        cos_xi_p = math.cos(xi_p)

        tau_p = sin_xi_p / math.sqrt(sinh_eta_p * sinh_eta_p + cos_xi_p * cos_xi_p)
        tau = self._solve_tau(tau_p)

        phi = math.atan(tau)
        lam = math.atan2(sinh_eta_p, cos_xi_p)

        # Meridian convergence
        gamma = math.atan(math.tan(xi_p) * math.tanh(eta_p)) + math.atan2(q, p)

        # Point scale
        sin_phi = math.sin(phi)
        k = (k0
             * math.sqrt(1 - self._e2 * sin_phi * sin_phi)
             * math.sqrt(1 + tau * tau)
             * math.sqrt(sinh_eta_p * sinh_eta_p + cos_xi_p * cos_xi_p)
             * (A / self._a)
             / math.sqrt(p * p + q * q))

        lat = round(math.degrees(phi), LAT_LON_DECIMALS)
        lon = central_meridian(projected.zone) + math.degrees(lam)
        if lon > 180.0:
            lon -= 360.0
        elif lon < -180.0:
            lon += 360.0
        lon = round(lon, LAT_LON_DECIMALS)

        return (
            lat,
            lon,
            round(math.degrees(gamma), CONVERGENCE_DECIMALS),
            round(k, SCALE_DECIMALS),
        )

    def _solve_tau(self, tau_p: float) -> float:
        """
        Solve tau' = f(tau) for tau by Newton iteration (Karney 2011 eq. 19-21).

        Raises:
            ProjectionConvergenceError: If the correction is still above
                INVERSE_TOLERANCE after INVERSE_MAX_ITERATIONS steps
        """
        e = self._e
        one_minus_e2 = 1 - self._e2

        tau = tau_p
        delta = math.inf
        for iteration in range(1, INVERSE_MAX_ITERATIONS + 1):
            sigma = math.sinh(e * math.atanh(e * tau / math.sqrt(1 + tau * tau)))
            tau_i_p = tau * math.sqrt(1 + sigma * sigma) - sigma * math.sqrt(1 + tau * tau)
            delta = ((tau_p - tau_i_p) / math.sqrt(1 + tau_i_p * tau_i_p)
                     * (1 + one_minus_e2 * tau * tau)
                     / (one_minus_e2 * math.sqrt(1 + tau * tau)))
            tau += delta
            if abs(delta) <= INVERSE_TOLERANCE:
                logger.debug(f"Inverse latitude converged in {iteration} iterations")
                return tau

        raise ProjectionConvergenceError(
            f"Inverse projection did not converge after {INVERSE_MAX_ITERATIONS} "
            f"iterations (tau'={tau_p}, last correction {delta})"
        )
