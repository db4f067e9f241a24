"""Primitive value kinds used by Exif fields.

The TIFF datatype code of every kind is given by the Datatype enumeration.
DATATYPE2FMT maps each datatype to its struct format code, the width of a
single element in bytes, and the numpy datatype used to hold decoded
elements.
"""
# standard library imports
from enum import IntEnum
from fractions import Fraction
import math
import numbers

# 3rd party library imports
import numpy as np


class Datatype(IntEnum):
    """TIFF/Exif field type codes."""
    BYTE = 1
    ASCII = 2
    SHORT = 3
    LONG = 4
    RATIONAL = 5
    UNDEFINED = 7
    SSHORT = 8
    SLONG = 9
    SRATIONAL = 10
    FLOAT = 11
    DOUBLE = 12
    UTF8 = 129


class _Fraction(object):
    """Pair of 32-bit integers modeling a fraction.

    Equality and ordering follow fraction semantics by cross multiplication,
    so 1/2 == 2/4.  The pair is never reduced.

    A zero denominator is an Exif sentinel (0/0 is "unknown", n/0 is
    "infinity").  Such a pair is kept exactly as given; it only compares equal
    to the identical pair and cannot be ordered.
    """
    __slots__ = ('_numerator', '_denominator')

    _lo = 0
    _hi = 0

    def __init__(self, numerator, denominator=1):
        self._numerator = self._validate(numerator, 'numerator')
        self._denominator = self._validate(denominator, 'denominator')

    def _validate(self, value, label):
        if isinstance(value, (bool, np.bool_)):
            raise TypeError(f"The {label} must be an integer, not {value!r}.")
        if not isinstance(value, (numbers.Integral, np.integer)):
            msg = f"The {label} must be an integer, not {value!r}."
            raise TypeError(msg)
        value = int(value)
        if not self._lo <= value <= self._hi:
            msg = (
                f"The {label} {value} does not fit into a "
                f"{self.__class__.__name__} ([{self._lo}, {self._hi}])."
            )
            raise ValueError(msg)
        return value

    @property
    def numerator(self):
        return self._numerator

    @property
    def denominator(self):
        return self._denominator

    @property
    def degenerate(self):
        """True if the denominator is zero."""
        return self._denominator == 0

    def to_fraction(self):
        """Return an equivalent fractions.Fraction.

        Raises ZeroDivisionError for a zero denominator.
        """
        return Fraction(self._numerator, self._denominator)

    def __float__(self):
        if self._denominator == 0:
            if self._numerator == 0:
                return math.nan
            return math.copysign(math.inf, self._numerator)
        return self._numerator / self._denominator

    def _other_pair(self, other):
        if isinstance(other, _Fraction):
            return other.numerator, other.denominator
        if isinstance(other, (numbers.Integral, np.integer)):
            return int(other), 1
        if isinstance(other, numbers.Rational):
            other = Fraction(other)
            return other.numerator, other.denominator
        return None

    def __eq__(self, other):
        pair = self._other_pair(other)
        if pair is None:
            return NotImplemented
        numerator, denominator = pair
        if self._denominator == 0 or denominator == 0:
            return (self._numerator, self._denominator) == pair
        return self._numerator * denominator == numerator * self._denominator

    def __hash__(self):
        if self._denominator == 0:
            return hash((self._numerator, self._denominator))
        return hash(self.to_fraction())

    def _compare(self, other, op):
        pair = self._other_pair(other)
        if pair is None:
            return NotImplemented
        numerator, denominator = pair
        if self._denominator == 0 or denominator == 0:
            msg = (
                f"Cannot order {self!r} and {other!r}, a zero denominator has "
                f"no fraction value."
            )
            raise ValueError(msg)
        lhs = self._numerator * denominator
        rhs = numerator * self._denominator
        if self._denominator * denominator < 0:
            lhs, rhs = rhs, lhs
        return op(lhs, rhs)

    def __lt__(self, other):
        return self._compare(other, lambda a, b: a < b)

    def __le__(self, other):
        return self._compare(other, lambda a, b: a <= b)

    def __gt__(self, other):
        return self._compare(other, lambda a, b: a > b)

    def __ge__(self, other):
        return self._compare(other, lambda a, b: a >= b)

    def __repr__(self):
        return f"{self.__class__.__name__}({self._numerator}, {self._denominator})"  # noqa : E501

    def __str__(self):
        return f"{self._numerator}/{self._denominator}"


class Rational(_Fraction):
    """Two LONGs, numerator and denominator."""
    __slots__ = ()

    _lo = 0
    _hi = 2 ** 32 - 1


class SRational(_Fraction):
    """Two SLONGs, numerator and denominator."""
    __slots__ = ()

    _lo = -(2 ** 31)
    _hi = 2 ** 31 - 1


# Text and opaque kinds have a width of one byte per counted element.  The
# count of a text field includes the terminating NUL.
TEXT_TYPES = (Datatype.ASCII, Datatype.UTF8)
RATIONAL_TYPES = {Datatype.RATIONAL: Rational, Datatype.SRATIONAL: SRational}
FLOAT_TYPES = (Datatype.FLOAT, Datatype.DOUBLE)

# maps the TIFF enumerated datatype to the corresponding structs datatype code,
# the data width, and the corresponding numpy datatype
DATATYPE2FMT = {
    Datatype.BYTE: {"format": "B", "nbytes": 1, "nptype": np.uint8},
    Datatype.ASCII: {"format": "B", "nbytes": 1, "nptype": str},
    Datatype.SHORT: {"format": "H", "nbytes": 2, "nptype": np.uint16},
    Datatype.LONG: {"format": "I", "nbytes": 4, "nptype": np.uint32},
    Datatype.RATIONAL: {"format": "II", "nbytes": 8, "nptype": np.uint32},
    Datatype.UNDEFINED: {"format": "B", "nbytes": 1, "nptype": bytes},
    Datatype.SSHORT: {"format": "h", "nbytes": 2, "nptype": np.int16},
    Datatype.SLONG: {"format": "i", "nbytes": 4, "nptype": np.int32},
    Datatype.SRATIONAL: {"format": "ii", "nbytes": 8, "nptype": np.int32},
    Datatype.FLOAT: {"format": "f", "nbytes": 4, "nptype": np.float32},
    Datatype.DOUBLE: {"format": "d", "nbytes": 8, "nptype": np.float64},
    Datatype.UTF8: {"format": "B", "nbytes": 1, "nptype": str},
}


def width_of(datatype):
    """Number of bytes occupied by a single element of the datatype."""
    return DATATYPE2FMT[Datatype(datatype)]["nbytes"]
