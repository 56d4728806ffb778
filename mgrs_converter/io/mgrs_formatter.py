"""
MGRS grid reference formatter.

Assembles "ZZB CR EEEEE NNNNN": zone zero-padded to 2 digits, band letter,
column and row letters, then equal-width easting/northing digit groups.
Offsets are truncated to the requested accuracy, never rounded.
"""

from typing import Optional, Union
import math

from ..config import GRID_SQUARE_SIZE
from ..errors import InvalidAccuracyError
from ..models.accuracy import Accuracy
from ..models.reference import MgrsReference

AccuracyLike = Union[Accuracy, int]


def as_accuracy(accuracy: AccuracyLike) -> Accuracy:
    """Accept an Accuracy or its ordinal."""
    if isinstance(accuracy, Accuracy):
        return accuracy
    return Accuracy.from_ordinal(accuracy)


def truncate_offset(meters: float, accuracy: Accuracy) -> int:
    """
    Offset within a 100km square truncated to an accuracy.

    Args:
        meters: Easting or northing in meters (full or within-square)
        accuracy: Target accuracy

    Returns:
        Whole meters within the square, a multiple of accuracy.meters
    """
    within = int(math.floor(meters)) % GRID_SQUARE_SIZE
    return within - within % accuracy.meters


def format_mgrs(
    reference: MgrsReference,
    accuracy: Optional[AccuracyLike] = None,
    compact: bool = False
) -> str:
    """
    Format a grid reference as text.

    Args:
        reference: MgrsReference to format
        accuracy: Target accuracy; defaults to the reference's own. May be
            coarser than the reference, never finer.
        compact: Concatenate all groups with no separators

    Returns:
        e.g. "31U DQ 48251 11932", or "31UDQ4825111932" when compact

    Raises:
        InvalidAccuracyError: If accuracy is finer than the reference's
    """
    if accuracy is None:
        accuracy = reference.accuracy
    accuracy = as_accuracy(accuracy)

    if accuracy.ordinal < reference.accuracy.ordinal:
        raise InvalidAccuracyError(
            accuracy,
            f"cannot format a {reference.accuracy} reference at {accuracy}",
        )

    width = accuracy.digits_per_coordinate
    easting = truncate_offset(reference.easting, accuracy) // accuracy.meters
    northing = truncate_offset(reference.northing, accuracy) // accuracy.meters

    groups = [
        f"{reference.zone:02d}{reference.band.char}",
        f"{reference.column.char}{reference.row.char}",
        f"{easting:0{width}d}",
        f"{northing:0{width}d}",
    ]

    separator = "" if compact else " "
    return separator.join(groups)
