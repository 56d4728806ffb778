"""
MGRS Converter - Main CLI

Converts a location between latitude/longitude, UTM and MGRS and prints
all three representations.

Usage:
    python -m mgrs_converter.main --latlon <lat> <lon>
    python -m mgrs_converter.main --utm "<zone> <N|S> <easting> <northing>"
    python -m mgrs_converter.main --mgrs <reference>

Example:
    python -m mgrs_converter.main --latlon 48.8582 2.2945 --accuracy 3
    python -m mgrs_converter.main --mgrs "31U DQ 48251 11932"
"""

import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .config import ConverterConfig, DEFAULT_ACCURACY
from .converter import (
    geodetic_to_utm,
    geodetic_to_mgrs,
    utm_to_geodetic,
    utm_to_mgrs,
    mgrs_to_utm,
    mgrs_to_geodetic,
)
from .errors import MgrsError
from .io.mgrs_formatter import format_mgrs
from .io.mgrs_parser import parse_mgrs
from .io.utm_text import parse_utm, format_utm, format_geodetic
from .models.coordinates import GeodeticPoint
from .models.datum import Datum

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """
    Configure console logging.

    Args:
        verbose: If True, use DEBUG level; otherwise INFO
    """
    level = logging.DEBUG if verbose else logging.INFO

    formatter = logging.Formatter(
        '%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        datefmt='%H:%M:%S'
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Clear any existing handlers
    root_logger.handlers.clear()

    # Logs go to stderr so stdout carries only the conversion
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog='mgrs-convert',
        description='MGRS Converter - Convert between lat/lon, UTM and MGRS'
    )

    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        '--latlon',
        nargs=2,
        type=float,
        metavar=('LAT', 'LON'),
        help='Geodetic latitude and longitude in decimal degrees'
    )
    source.add_argument(
        '--utm',
        metavar='"ZZ H E N"',
        help='UTM coordinate, e.g. "31 N 448251 5411932"'
    )
    source.add_argument(
        '--mgrs',
        metavar='REF',
        help='MGRS grid reference, e.g. "31U DQ 48251 11932"'
    )

    parser.add_argument(
        '--accuracy',
        type=int,
        choices=range(1, 6),
        default=None,
        help='MGRS accuracy: 1=1m, 2=10m, 3=100m, 4=1km, 5=10km '
             '(default: 1, or the reference\'s own for --mgrs)'
    )

    parser.add_argument(
        '--compact',
        action='store_true',
        help='Print the MGRS reference without separators'
    )

    parser.add_argument(
        '--datum',
        default='WGS84',
        help='Datum of the input coordinates (default: WGS84)'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable verbose logging'
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )

    return parser


def convert(args: argparse.Namespace, config: ConverterConfig) -> List[str]:
    """
    Run the conversion selected by the parsed arguments.

    Returns:
        Output lines: geodetic, UTM, MGRS

    Raises:
        MgrsError: If the input is invalid
    """
    datum = Datum.from_name(config.datum)

    if args.mgrs is not None:
        reference = parse_mgrs(args.mgrs)
        projected = mgrs_to_utm(reference)
        point = mgrs_to_geodetic(reference)
        accuracy = args.accuracy if args.accuracy is not None else reference.accuracy
        mgrs_text = format_mgrs(reference, accuracy, compact=config.compact)
    elif args.latlon is not None:
        lat, lon = args.latlon
        point = GeodeticPoint(lat, lon, datum)
        projected = geodetic_to_utm(point)
        reference = geodetic_to_mgrs(point, config.default_accuracy)
        mgrs_text = format_mgrs(reference, compact=config.compact)
    else:
        projected = parse_utm(args.utm, datum)
        point = utm_to_geodetic(projected)
        reference = utm_to_mgrs(projected, config.default_accuracy)
        mgrs_text = format_mgrs(reference, compact=config.compact)

    return [
        f"Lat/Lon: {format_geodetic(point)}",
        f"UTM:     {format_utm(projected)}",
        f"MGRS:    {mgrs_text}",
    ]


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    config = ConverterConfig(
        default_accuracy=args.accuracy if args.accuracy is not None else DEFAULT_ACCURACY,
        compact=args.compact,
        verbose=args.verbose,
        datum=args.datum,
    )

    try:
        lines = convert(args, config)
    except MgrsError as e:
        logger.debug(f"Conversion failed: {e!r}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    for line in lines:
        print(line)
    return 0


if __name__ == '__main__':
    sys.exit(main())
