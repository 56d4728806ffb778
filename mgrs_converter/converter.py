"""
Conversion facade for the MGRS Converter.

Composes the projection engine, the grid letter arithmetic and the MGRS
text codec into conversions among geodetic points, UTM coordinates and
MGRS grid references:

    GeodeticPoint <-> ProjectedPoint <-> MgrsReference <-> text

All functions are pure; the module-level projector is immutable.
"""

from typing import Optional, Tuple, Union
import logging

from .config import MIN_LATITUDE, MAX_LATITUDE
from .grid.bands import band_for_lat, band_latitude_range
from .grid.squares import grid_square_for
from .io.mgrs_formatter import as_accuracy, truncate_offset, format_mgrs, AccuracyLike
from .io.mgrs_parser import parse_mgrs, reconstruct_projected
from .models.accuracy import Accuracy
from .models.coordinates import GeodeticPoint, ProjectedPoint
from .models.letters import LatitudeBand
from .models.reference import GridZoneDesignator, MgrsReference
from .projection import create_projector

logger = logging.getLogger(__name__)

_PROJECTOR = create_projector()

ReferenceLike = Union[MgrsReference, str]


def _as_reference(reference: ReferenceLike) -> MgrsReference:
    if isinstance(reference, MgrsReference):
        return reference
    return parse_mgrs(reference)


def _corner_to_geodetic(
    projected: ProjectedPoint,
    south: float = MIN_LATITUDE,
    north: float = MAX_LATITUDE
) -> GeodeticPoint:
    """Inverse-project a box corner, clamping its latitude to [south, north]."""
    lat, lon, _, _ = _PROJECTOR.inverse_raw(projected)
    clamped = min(max(lat, south), north)
    if clamped != lat:
        logger.debug(f"Corner latitude {lat} clamped to {clamped}")
    return GeodeticPoint(clamped, lon, projected.datum)


def geodetic_to_utm(point: GeodeticPoint) -> ProjectedPoint:
    """Forward projection of a geodetic point into its UTM zone."""
    return _PROJECTOR.forward(point)


def utm_to_geodetic(projected: ProjectedPoint) -> GeodeticPoint:
    """Inverse projection of a UTM coordinate."""
    return _PROJECTOR.inverse(projected)


def utm_to_mgrs(
    projected: ProjectedPoint,
    accuracy: Optional[AccuracyLike] = None,
    band: Optional[LatitudeBand] = None
) -> MgrsReference:
    """
    Encode a UTM coordinate as an MGRS grid reference.

    Args:
        projected: UTM coordinate
        accuracy: Accuracy or ordinal; defaults to one meter
        band: Latitude band; derived from the inverse-projected latitude
            when omitted

    Returns:
        MgrsReference with offsets truncated to the accuracy

    Raises:
        CoordinateRangeError: If the easting has no column in the zone
    """
    accuracy = Accuracy.default() if accuracy is None else as_accuracy(accuracy)

    if band is None:
        band = band_for_lat(utm_to_geodetic(projected).lat)
    elif not isinstance(band, LatitudeBand):
        band = LatitudeBand.from_char(band)

    square = grid_square_for(projected.zone, projected.easting, projected.northing)

    return MgrsReference(
        gzd=GridZoneDesignator(zone=projected.zone, band=band),
        square=square,
        easting=truncate_offset(projected.easting, accuracy),
        northing=truncate_offset(projected.northing, accuracy),
        accuracy=accuracy,
    )


def geodetic_to_mgrs(
    point: GeodeticPoint,
    accuracy: Optional[AccuracyLike] = None
) -> MgrsReference:
    """
    Encode a geodetic point as an MGRS grid reference.

    Args:
        point: Geodetic point
        accuracy: Accuracy or ordinal; defaults to one meter

    Returns:
        MgrsReference
    """
    projected = geodetic_to_utm(point)
    reference = utm_to_mgrs(projected, accuracy, band=band_for_lat(point.lat))
    logger.debug(f"({point.lat}, {point.lon}) -> {format_mgrs(reference)}")
    return reference


def mgrs_to_utm(reference: ReferenceLike) -> ProjectedPoint:
    """
    UTM coordinate of a grid reference's south-west corner.

    Args:
        reference: MgrsReference or grid reference text
    """
    return reconstruct_projected(_as_reference(reference))


def mgrs_to_geodetic(reference: ReferenceLike) -> GeodeticPoint:
    """
    Geodetic position of a grid reference's south-west corner.

    Squares on the edge of the UTM envelope start a little south of -80°
    or end north of 84°; the corner latitude is clamped to [-80, 84].

    Args:
        reference: MgrsReference or grid reference text
    """
    return _corner_to_geodetic(mgrs_to_utm(reference))


def mgrs_bounds(reference: ReferenceLike) -> Tuple[GeodeticPoint, GeodeticPoint]:
    """
    Geodetic corners of a grid reference's precision box.

    Corner latitudes are clipped to the reference's latitude band.

    Args:
        reference: MgrsReference or grid reference text

    Returns:
        (south_west, north_east) tuple of GeodeticPoint
    """
    reference = _as_reference(reference)
    south_west = mgrs_to_utm(reference)
    size = reference.accuracy.meters

    north_east = ProjectedPoint(
        zone=south_west.zone,
        hemisphere=south_west.hemisphere,
        easting=south_west.easting + size,
        northing=south_west.northing + size,
        datum=south_west.datum,
    )
    south, north = band_latitude_range(reference.band)
    return (
        _corner_to_geodetic(south_west, south, north),
        _corner_to_geodetic(north_east, south, north),
    )


def latlon_to_mgrs_string(
    lat: float,
    lon: float,
    accuracy: Optional[AccuracyLike] = None,
    compact: bool = False
) -> str:
    """
    Grid reference text for a latitude/longitude.

    Example:
        >>> latlon_to_mgrs_string(48.8582, 2.2945)
        '31U DQ 48251 11932'
    """
    reference = geodetic_to_mgrs(GeodeticPoint(lat, lon), accuracy)
    return format_mgrs(reference, compact=compact)


def mgrs_string_to_latlon(text: str) -> Tuple[float, float]:
    """(lat, lon) of a grid reference's south-west corner."""
    point = mgrs_to_geodetic(text)
    return (point.lat, point.lon)
