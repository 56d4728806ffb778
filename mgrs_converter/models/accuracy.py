"""
Accuracy model for MGRS grid references.

An accuracy is an ordinal 1 (finest) through 5 (coarsest), bijective with
the edge of its precision box in meters and with the total number of
location digits in a grid reference:

    ordinal   meters   digits
       1          1       10
       2         10        8
       3        100        6
       4       1000        4
       5      10000        2
"""

from enum import Enum

from ..config import DEFAULT_ACCURACY, FULL_PRECISION_DIGITS
from ..errors import InvalidAccuracyError


class Accuracy(Enum):
    """Precision level of an MGRS reference."""
    ONE_METER = 1
    TEN_METERS = 2
    ONE_HUNDRED_METERS = 3
    ONE_KILOMETER = 4
    TEN_KILOMETERS = 5

    @property
    def ordinal(self) -> int:
        """Ordinal 1 (finest) .. 5 (coarsest)."""
        return self.value

    @property
    def meters(self) -> int:
        """Edge of the precision box in meters."""
        return 10 ** (self.value - 1)

    @property
    def digits_per_coordinate(self) -> int:
        """Digits in each of the easting and northing fields."""
        return FULL_PRECISION_DIGITS + 1 - self.value

    @property
    def digit_count(self) -> int:
        """Total location digits (easting plus northing)."""
        return 2 * self.digits_per_coordinate

    @classmethod
    def default(cls) -> 'Accuracy':
        """Default accuracy (one meter)."""
        return cls(DEFAULT_ACCURACY)

    @classmethod
    def from_ordinal(cls, ordinal: int) -> 'Accuracy':
        """Accuracy for ordinal 1..5."""
        try:
            return cls(ordinal)
        except ValueError:
            raise InvalidAccuracyError(ordinal) from None

    @classmethod
    def from_meters(cls, meters: int) -> 'Accuracy':
        """Accuracy for a precision of 1, 10, 100, 1000 or 10000 meters."""
        for accuracy in cls:
            if accuracy.meters == meters:
                return accuracy
        raise InvalidAccuracyError(meters)

    @classmethod
    def from_digit_count(cls, digits: int) -> 'Accuracy':
        """Accuracy for a total location digit count of 10, 8, 6, 4 or 2."""
        for accuracy in cls:
            if accuracy.digit_count == digits:
                return accuracy
        raise InvalidAccuracyError(digits)

    @classmethod
    def derive_from_digit_strings(cls, easting: str, northing: str) -> 'Accuracy':
        """
        Derive the accuracy demonstrated by parsed location digit strings.

        Each string holds the high-order digits of a 5-digit field, so it
        is padded with zeros to 5 characters on the low-order side. Trailing
        zeros are then stripped and the longer of the two remaining lengths
        decides the accuracy. Strings that are all zeros demonstrate no
        precision beyond 10km.

        Args:
            easting: Easting digits as parsed (1-5 characters)
            northing: Northing digits as parsed (1-5 characters)

        Returns:
            Derived Accuracy

        Raises:
            InvalidAccuracyError: If either string is longer than 5 digits
        """
        significant = 0
        for digits in (easting, northing):
            if len(digits) > FULL_PRECISION_DIGITS:
                raise InvalidAccuracyError(digits)
            padded = digits.ljust(FULL_PRECISION_DIGITS, '0')
            significant = max(significant, len(padded.rstrip('0')))

        # All-zero fields still locate the 10km square
        significant = max(significant, 1)
        return cls.from_digit_count(2 * significant)

    def __str__(self) -> str:
        return f"{self.meters}m"
