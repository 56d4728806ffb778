"""
Closed letter alphabets used by MGRS grid references.

Each alphabet is an Enum with one member per legal letter. Conversions to
and from characters and dense ordinal indices are total and lossless;
anything outside the alphabet is rejected. The letters I and O never
belong to any alphabet.
"""

from enum import Enum

from ..errors import (
    InvalidLatitudeBandError,
    InvalidColLetterError,
    InvalidRowLetterError,
)

EXCLUDED_LETTERS = frozenset('IO')


class _LetterMixin:
    """Character and index conversions shared by the letter alphabets."""

    # Set on each subclass
    _invalid_error = ValueError

    @property
    def char(self) -> str:
        """Upper-case character for this letter."""
        return self.value

    @property
    def index(self) -> int:
        """Dense ordinal position within the alphabet."""
        return _INDICES[type(self)][self]

    @classmethod
    def from_char(cls, c: str):
        """
        Convert a character to a letter (case-insensitive).

        Raises:
            MgrsError subclass for the alphabet if c is not a legal letter
        """
        if not isinstance(c, str) or len(c) != 1:
            raise cls._invalid_error(c)

        try:
            return cls(c.upper())
        except ValueError:
            raise cls._invalid_error(c) from None

    @classmethod
    def from_index(cls, index: int):
        """
        Convert a dense ordinal index back to a letter.

        Raises:
            MgrsError subclass for the alphabet if index is out of range
        """
        members = _MEMBERS[cls]
        if not (0 <= index < len(members)):
            raise cls._invalid_error(index)
        return members[index]

    def __str__(self) -> str:
        return self.value


class LatitudeBand(_LetterMixin, Enum):
    """8° latitude band letters C..X (X spans 12°, 72°N..84°N)."""
    C = 'C'
    D = 'D'
    E = 'E'
    F = 'F'
    G = 'G'
    H = 'H'
    J = 'J'
    K = 'K'
    L = 'L'
    M = 'M'
    N = 'N'
    P = 'P'
    Q = 'Q'
    R = 'R'
    S = 'S'
    T = 'T'
    U = 'U'
    V = 'V'
    W = 'W'
    X = 'X'


class ColumnLetter(_LetterMixin, Enum):
    """100km grid square column (easting) letters A..Z without I and O."""
    A = 'A'
    B = 'B'
    C = 'C'
    D = 'D'
    E = 'E'
    F = 'F'
    G = 'G'
    H = 'H'
    J = 'J'
    K = 'K'
    L = 'L'
    M = 'M'
    N = 'N'
    P = 'P'
    Q = 'Q'
    R = 'R'
    S = 'S'
    T = 'T'
    U = 'U'
    V = 'V'
    W = 'W'
    X = 'X'
    Y = 'Y'
    Z = 'Z'


class RowLetter(_LetterMixin, Enum):
    """100km grid square row (northing) letters A..V without I and O."""
    A = 'A'
    B = 'B'
    C = 'C'
    D = 'D'
    E = 'E'
    F = 'F'
    G = 'G'
    H = 'H'
    J = 'J'
    K = 'K'
    L = 'L'
    M = 'M'
    N = 'N'
    P = 'P'
    Q = 'Q'
    R = 'R'
    S = 'S'
    T = 'T'
    U = 'U'
    V = 'V'


LatitudeBand._invalid_error = InvalidLatitudeBandError
ColumnLetter._invalid_error = InvalidColLetterError
RowLetter._invalid_error = InvalidRowLetterError

_MEMBERS = {
    cls: tuple(cls)
    for cls in (LatitudeBand, ColumnLetter, RowLetter)
}

_INDICES = {
    cls: {letter: i for i, letter in enumerate(members)}
    for cls, members in _MEMBERS.items()
}
