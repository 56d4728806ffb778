"""
Configuration constants for the MGRS Converter.

Contains the physical and grid constants used by the projection engine,
the 100km grid square encoder and the MGRS text codec, plus the runtime
options accepted by the CLI.
"""

from dataclasses import dataclass


# =============================================================================
# ELLIPSOID PARAMETERS
# =============================================================================

# WGS84 semi-major axis (meters) and flattening
WGS84_SEMI_MAJOR_AXIS = 6378137.0
WGS84_FLATTENING = 1 / 298.257223563

# =============================================================================
# UTM PROJECTION
# =============================================================================

# Scale factor on the central meridian
UTM_SCALE_FACTOR = 0.9996

# False origin offsets (meters)
FALSE_EASTING = 500000.0
FALSE_NORTHING = 10000000.0  # Southern hemisphere only

# Zone geometry
ZONE_COUNT = 60
ZONE_WIDTH_DEG = 6.0

# Operating envelope (degrees). Polar regions belong to UPS.
MIN_LATITUDE = -80.0
MAX_LATITUDE = 84.0
MIN_LONGITUDE = -180.0
MAX_LONGITUDE = 180.0

# =============================================================================
# ROUNDING
# =============================================================================

# Forward projection output (decimal places)
EASTING_NORTHING_DECIMALS = 6   # micrometers
CONVERGENCE_DECIMALS = 9        # degrees
SCALE_DECIMALS = 12

# Inverse projection output (decimal places of a degree)
LAT_LON_DECIMALS = 11

# =============================================================================
# INVERSE PROJECTION ITERATION
# =============================================================================

# Newton iteration on tan(conformal latitude). Valid inputs converge in
# 2-4 iterations; reaching the cap is a defect and raises.
INVERSE_TOLERANCE = 1e-12
INVERSE_MAX_ITERATIONS = 6

# =============================================================================
# MGRS GRID
# =============================================================================

# 100km grid square edge (meters)
GRID_SQUARE_SIZE = 100000

# Row letters repeat every 20 squares
ROW_CYCLE_METERS = 2000000

# Number of digits in a full-precision easting or northing field
FULL_PRECISION_DIGITS = 5

# Default accuracy ordinal (1 = one meter)
DEFAULT_ACCURACY = 1


# =============================================================================
# RUNTIME CONFIGURATION
# =============================================================================

@dataclass
class ConverterConfig:
    """
    Runtime options for the converter CLI.

    Attributes:
        default_accuracy: Accuracy ordinal (1 = 1m ... 5 = 10km) used when
            producing MGRS references
        compact: Emit MGRS references without separators
        verbose: Enable DEBUG logging
        datum: Datum name; only WGS84 is supported
    """

    default_accuracy: int = DEFAULT_ACCURACY
    compact: bool = False
    verbose: bool = False
    datum: str = "WGS84"

    def __post_init__(self):
        """Validate configuration values."""
        if not (1 <= self.default_accuracy <= 5):
            raise ValueError("default_accuracy must be between 1 and 5")

        if not self.datum:
            raise ValueError("datum must not be empty")


# Default configuration instance
DEFAULT_CONFIG = ConverterConfig()
