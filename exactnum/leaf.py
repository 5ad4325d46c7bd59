"""
Exact rational leaves of the classification lattice.

    NaturalNumber   1, 2, 3, ...
    WholeNumber     0, 1, 2, ...
    Integer         ..., -2, -1, 0, 1, 2, ...
    SimpleFraction  p/q in lowest terms (see fraction.py)

A value can usually be held by more than one leaf.  5 fits all four.
RationalNumber.canonicalize() picks the narrowest.

Leaves do no mixed-kind arithmetic themselves.  Their operators hand off to RationalNumber,
which promotes both operands to a common kind (rational.PROMOTION),
calls that kind's native method (_add, _sub, _mul, _lt, ...), and canonicalizes the result.
"""

import math
import numbers
import sys

from .errors import DomainError


_HASH_MODULUS = sys.hash_info.modulus
_HASH_INF = sys.hash_info.inf


def rational_hash(numerator, denominator):
    """
    Hash of numerator/denominator, agreeing with hash() of an equal int or fractions.Fraction.

    SEE:  Hashing of numeric types, https://docs.python.org/3/library/stdtypes.html#hashing-of-numeric-types
    """
    try:
        denominator_inverse = pow(denominator, -1, _HASH_MODULUS)
    except ValueError:
        hash_ = _HASH_INF
    else:
        hash_ = hash(hash(abs(numerator)) * denominator_inverse)
    result = hash_ if numerator >= 0 else -hash_
    return -2 if result == -1 else result


def fraction_parts(x):
    """
    (numerator, denominator) in lowest terms, with the sign on the numerator.

    Works for int, fractions.Fraction, and any exactnum value that is exactly rational.
    None for anything else, e.g. an irrational, a complex, a float, a string.
    """
    if isinstance(x, numbers.Integral):
        return int(x), 1
    if isinstance(x, numbers.Rational):
        numerator, denominator = int(x.numerator), int(x.denominator)
        if denominator < 0:
            numerator, denominator = -numerator, -denominator
        divisor = math.gcd(numerator, denominator)
        if divisor > 1:
            numerator //= divisor
            denominator //= divisor
        return numerator, denominator
    parts_method = getattr(x, 'fraction_parts', None)
    if parts_method is None:
        return None
    return parts_method()


def _rational_class():
    # NOTE:  Late import, rational.py imports this module.
    from .rational import RationalNumber
    return RationalNumber


class RationalLeaf(object):
    """
    Base class for NaturalNumber, WholeNumber, Integer, and SimpleFraction.

    Subclasses provide:
        RANK                           position in the lattice, narrowest is 0
        numerator, denominator         signed numerator, positive denominator, lowest terms
        _fits(numerator, denominator)  could this kind hold that value?
        _from_parts(n, d)              construct, assuming _fits()
        native operators               _add() _sub() _mul() _lt(), same-kind operands only
    """
    __slots__ = ()

    RANK = None

    @classmethod
    def _fits(cls, numerator, denominator):
        raise NotImplementedError

    @classmethod
    def _from_parts(cls, numerator, denominator):
        raise NotImplementedError

    @property
    def numerator(self):
        raise NotImplementedError

    @property
    def denominator(self):
        raise NotImplementedError

    @classmethod
    def try_from(cls, x):
        """
        Narrow x to this kind, or None if it does not fit.

        Never raises for an out-of-range value:
            assert WholeNumber.try_from(-3) is None
            assert WholeNumber.try_from(Integer(3)) == WholeNumber(3)
        """
        parts = fraction_parts(x)
        if parts is None or not cls._fits(*parts):
            return None
        return cls._from_parts(*parts)

    @classmethod
    def promote(cls, leaf):
        """Widen a leaf of the same or a narrower kind to this kind.  Total."""
        assert leaf.RANK <= cls.RANK, "Cannot promote {} down to {}".format(type(leaf).__name__, cls.__name__)
        if type(leaf) is cls:
            return leaf
        return cls._from_parts(leaf.numerator, leaf.denominator)

    def fraction_parts(self):
        return self.numerator, self.denominator

    def is_zero(self):
        return self.numerator == 0

    def is_negative(self):
        return self.numerator < 0

    def is_positive(self):
        return self.numerator > 0

    def __eq__(self, other):
        other_parts = fraction_parts(other)
        if other_parts is None:
            return NotImplemented
        return self.fraction_parts() == other_parts

    def __ne__(self, other):
        equal = self.__eq__(other)
        if equal is NotImplemented:
            return NotImplemented
        return not equal

    def __hash__(self):
        return rational_hash(self.numerator, self.denominator)

    def __bool__(self):
        return not self.is_zero()

    def __float__(self):
        return self.numerator / self.denominator

    def __repr__(self):
        return "{}({})".format(type(self).__name__, self.numerator)

    def __str__(self):
        return str(self.numerator)

    # NOTE:  Every operator below returns a RationalNumber, already canonical.
    #        So NaturalNumber(2) - NaturalNumber(5) is a RationalNumber holding Integer(-3).

    def _rational(self):
        return _rational_class()(self)

    def __pos__(self): return self._rational()
    def __neg__(self): return -self._rational()
    def __abs__(self): return abs(self._rational())

    def __add__(self, other): return self._rational().__add__(other)
    def __radd__(self, other): return self._rational().__radd__(other)
    def __sub__(self, other): return self._rational().__sub__(other)
    def __rsub__(self, other): return self._rational().__rsub__(other)
    def __mul__(self, other): return self._rational().__mul__(other)
    def __rmul__(self, other): return self._rational().__rmul__(other)
    def __truediv__(self, other): return self._rational().__truediv__(other)
    def __rtruediv__(self, other): return self._rational().__rtruediv__(other)

    def __lt__(self, other): return self._rational().__lt__(other)
    def __le__(self, other): return self._rational().__le__(other)
    def __gt__(self, other): return self._rational().__gt__(other)
    def __ge__(self, other): return self._rational().__ge__(other)


class _IntegralLeaf(RationalLeaf):
    """A leaf backed by a single int.  The denominator is always 1."""
    __slots__ = ('_value',)

    def __init__(self, value):
        if isinstance(value, bool) or not isinstance(value, numbers.Integral):
            raise TypeError("{}() expects an int, not {}".format(type(self).__name__, type(value).__name__))
        value = int(value)
        if not self._fits(value, 1):
            raise DomainError("{} is not a valid {}".format(value, type(self).__name__))
        self._value = value

    @classmethod
    def _from_parts(cls, numerator, denominator):
        assert denominator == 1
        return cls(numerator)

    @property
    def numerator(self):
        return self._value

    @property
    def denominator(self):
        return 1

    @property
    def value(self):
        """The plain int."""
        return self._value

    def __int__(self):
        return self._value

    __index__ = __int__

    def _lt(self, other):
        return self._value < other._value


class NaturalNumber(_IntegralLeaf):
    """A counting number, 1 or more."""
    __slots__ = ()

    RANK = 0

    @classmethod
    def _fits(cls, numerator, denominator):
        return denominator == 1 and numerator > 0

    def _add(self, other):
        return NaturalNumber(self._value + other._value)

    def _sub(self, other):
        return Integer(self._value - other._value)

    def _mul(self, other):
        return NaturalNumber(self._value * other._value)

    def factorial(self):
        """1 * 2 * ... * n, also a NaturalNumber."""
        return NaturalNumber(math.factorial(self._value))


class WholeNumber(_IntegralLeaf):
    """Zero or a counting number."""
    __slots__ = ()

    RANK = 1

    @classmethod
    def _fits(cls, numerator, denominator):
        return denominator == 1 and numerator >= 0

    def _add(self, other):
        return WholeNumber(self._value + other._value)

    def _sub(self, other):
        return Integer(self._value - other._value)

    def _mul(self, other):
        return WholeNumber(self._value * other._value)

    def is_multiple(self, other):
        """
        True if other divides this evenly.  other is an int or an integral leaf.

            WholeNumber(6).is_multiple(-3)   True
            WholeNumber(6).is_multiple(4)    False
            WholeNumber(0).is_multiple(0)    True, zero is the only multiple of zero
        """
        if isinstance(other, _IntegralLeaf):
            other = other.value
        if isinstance(other, bool) or not isinstance(other, numbers.Integral):
            raise TypeError("is_multiple() expects an int, not {}".format(type(other).__name__))
        if other == 0:
            return self._value == 0
        return self._value % other == 0


class Integer(_IntegralLeaf):
    """Any signed integer."""
    __slots__ = ()

    RANK = 2

    @classmethod
    def _fits(cls, numerator, denominator):
        return denominator == 1

    def _add(self, other):
        return Integer(self._value + other._value)

    def _sub(self, other):
        return Integer(self._value - other._value)

    def _mul(self, other):
        return Integer(self._value * other._value)
