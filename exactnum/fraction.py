"""
SimpleFraction, the exact fraction engine.

A SimpleFraction is a magnitude numerator over a positive denominator, plus a sign flag.
It is always in lowest terms.  Zero is never negative.

    SimpleFraction(6, 4)         3/2
    SimpleFraction(-6, 4)        -3/2
    SimpleFraction(6, 4, True)   -3/2
    SimpleFraction(1, 0)         raises DivisionByZero
"""

import math
import numbers

from .errors import DivisionByZero
from .leaf import RationalLeaf


class SimpleFraction(RationalLeaf):
    """
    p/q, reduced.

    Arithmetic here is same-kind only (_add, _sub, _mul, _truediv, _lt).
    Mixed arithmetic, e.g. SimpleFraction(1, 2) + 1, goes through RationalNumber.
    """
    __slots__ = ('_numerator', '_denominator', '_is_negative')

    RANK = 3

    def __init__(self, numerator, denominator=1, is_negative=False):
        for part in (numerator, denominator):
            if isinstance(part, bool) or not isinstance(part, numbers.Integral):
                raise TypeError("SimpleFraction() expects int parts, not {}".format(type(part).__name__))
        numerator = int(numerator)
        denominator = int(denominator)
        if denominator == 0:
            raise DivisionByZero("SimpleFraction({}, 0)".format(numerator))
        is_negative = bool(is_negative) != ((numerator < 0) != (denominator < 0))
        numerator = abs(numerator)
        denominator = abs(denominator)
        divisor = math.gcd(numerator, denominator)
        # NOTE:  divisor >= 1 here, because denominator != 0.
        self._numerator = numerator // divisor
        self._denominator = denominator // divisor
        self._is_negative = is_negative and self._numerator != 0

    @classmethod
    def _fits(cls, numerator, denominator):
        return True

    @classmethod
    def _from_parts(cls, numerator, denominator):
        return cls(numerator, denominator)

    @property
    def numerator(self):
        """Signed numerator, as with fractions.Fraction."""
        return -self._numerator if self._is_negative else self._numerator

    @property
    def denominator(self):
        return self._denominator

    def is_negative(self):
        return self._is_negative

    @property
    def magnitude(self):
        return SimpleFraction(self._numerator, self._denominator)

    @property
    def reciprocal(self):
        """Swap numerator and denominator, keep the sign."""
        if self._numerator == 0:
            raise DivisionByZero("Zero has no reciprocal")
        return SimpleFraction(self._denominator, self._numerator, self._is_negative)

    def is_repeating(self):
        """
        Does this fraction's decimal expansion repeat forever?

        Only if the denominator has some prime factor other than 2 or 5.
            1/8  = 0.125       terminates
            1/6  = 0.1666...   repeats
        """
        remainder = self._denominator
        for prime in (2, 5):
            while remainder % prime == 0:
                remainder //= prime
        return remainder > 1

    def _commonize(self, other):
        """Scale both numerators to the least common denominator."""
        common = self._denominator * other._denominator // math.gcd(self._denominator, other._denominator)
        return (
            self._numerator * (common // self._denominator),
            other._numerator * (common // other._denominator),
            common,
        )

    def _add(self, other):
        left, right, common = self._commonize(other)
        if self._is_negative == other._is_negative:
            return SimpleFraction(left + right, common, self._is_negative)
        # NOTE:  Opposite signs, so the result takes the sign of the bigger magnitude.
        if left >= right:
            return SimpleFraction(left - right, common, self._is_negative)
        else:
            return SimpleFraction(right - left, common, other._is_negative)

    def _sub(self, other):
        return self._add(other._negated())

    def _mul(self, other):
        return SimpleFraction(
            self._numerator * other._numerator,
            self._denominator * other._denominator,
            self._is_negative != other._is_negative,
        )

    def _truediv(self, other):
        if other._numerator == 0:
            raise DivisionByZero("{} / 0".format(self))
        return self._mul(other.reciprocal)

    def _lt(self, other):
        left, right, _ = self._commonize(other)
        signed_left = -left if self._is_negative else left
        signed_right = -right if other._is_negative else right
        return signed_left < signed_right

    def _negated(self):
        return SimpleFraction(self._numerator, self._denominator, not self._is_negative)

    def __repr__(self):
        return "SimpleFraction({}, {})".format(self.numerator, self._denominator)

    def __str__(self):
        if self._denominator == 1:
            return str(self.numerator)
        return "{}/{}".format(self.numerator, self._denominator)
