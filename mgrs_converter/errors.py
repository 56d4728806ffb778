"""
Exception types for the MGRS Converter.

Every user-input failure derives from MgrsError and carries the offending
value. ProjectionConvergenceError is a programming defect, not an input
failure, and is kept outside that hierarchy.
"""


class MgrsError(ValueError):
    """Base class for invalid coordinates and malformed grid references."""

    description = "invalid coordinate"

    def __init__(self, value=None, message: str = ""):
        self.value = value
        if not message:
            message = self.description
            if value is not None:
                message = f"{message}: {value!r}"
        super().__init__(message)


class InvalidLatitudeError(MgrsError):
    """Raised when a latitude is outside the UTM/MGRS envelope [-80, 84]."""
    description = "latitude outside [-80, 84]"


class InvalidLongitudeError(MgrsError):
    """Raised when a longitude is outside [-180, 180]."""
    description = "longitude outside [-180, 180]"


class InvalidLatitudeBandError(MgrsError):
    """Raised for a latitude with no band, or an unknown band letter."""
    description = "invalid latitude band"


class InvalidZoneNumberError(MgrsError):
    """Raised for a UTM zone number outside 1..60 or a missing zone."""
    description = "invalid zone number"


class InvalidZoneLetterError(MgrsError):
    """Raised when a grid reference carries an invalid band letter."""
    description = "invalid zone letter"


class InvalidColLetterError(MgrsError):
    """Raised for an invalid or out-of-set 100km column letter."""
    description = "invalid column letter"


class InvalidRowLetterError(MgrsError):
    """Raised for an invalid 100km row letter."""
    description = "invalid row letter"


class InvalidEastingCharError(MgrsError):
    """Raised when the easting field of a grid reference is malformed."""
    description = "MGRS point given invalid easting"


class InvalidNorthingCharError(MgrsError):
    """Raised when the northing field of a grid reference is malformed."""
    description = "MGRS point given invalid northing"


class InvalidDatumError(MgrsError):
    """Raised for a datum other than WGS84."""
    description = "unsupported datum"


class InvalidHemisphereError(MgrsError):
    """Raised when a hemisphere is not N or S."""
    description = "invalid hemisphere"


class InvalidAccuracyError(MgrsError):
    """Raised for an unknown accuracy or an unavailable precision."""
    description = "invalid accuracy"


class CoordinateRangeError(MgrsError):
    """Raised when an easting or northing has no 100km square in its zone."""
    description = "coordinate outside the zone's grid squares"


class ProjectionConvergenceError(RuntimeError):
    """Raised when the inverse projection iteration fails to converge."""
    pass
