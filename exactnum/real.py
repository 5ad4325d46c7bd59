"""
RealNumber, either a RationalNumber or an IrrationalNumber.

Arithmetic is exact between rationals.
Arithmetic touching an irrational raises UnsupportedOperation,
except negation and magnitude, which are exact on the formula.
Comparisons with an irrational use its rational approximation.
"""

import numbers

from .errors import UnsupportedOperation
from .irrational import IrrationalNumber
from .leaf import RationalLeaf
from .rational import RationalNumber


class RealNumber(object):
    """
    A real number, canonical.

    content - the type can be:
        int                42
        fractions.Fraction Fraction(1, 3)
        a rational leaf    NaturalNumber(42)
        RationalNumber     RationalNumber(42)
        IrrationalNumber   IrrationalNumber.square_root(2)
        RealNumber         RealNumber(42)
    """
    __slots__ = ('_value',)

    def __init__(self, content=0):
        if isinstance(content, RealNumber):
            self._value = content._value
        elif isinstance(content, IrrationalNumber):
            self._value = self.canonicalize(content)
        elif isinstance(content, (RationalNumber, RationalLeaf)):
            self._value = RationalNumber(content)
        elif isinstance(content, numbers.Rational) and not isinstance(content, bool):
            self._value = RationalNumber(content)
        else:
            raise TypeError("RealNumber({}) is not supported".format(type(content).__name__))

    @staticmethod
    def canonicalize(value):
        """A rational stays rational.  An irrational whose value is exactly rational becomes rational."""
        if isinstance(value, IrrationalNumber):
            if value.exact is not None:
                return value.exact
            return value
        return RationalNumber(value)

    @property
    def value(self):
        """RationalNumber or IrrationalNumber"""
        return self._value

    @property
    def classification(self):
        """The narrowest class, e.g. NaturalNumber, SimpleFraction, or IrrationalNumber."""
        if self.is_irrational():
            return IrrationalNumber
        return self._value.kind

    def is_rational(self):
        return isinstance(self._value, RationalNumber)

    def is_irrational(self):
        return isinstance(self._value, IrrationalNumber)

    @property
    def approximation(self):
        """A RationalNumber, exact for a rational."""
        if self.is_irrational():
            return self._value.approximation
        return self._value

    def fraction_parts(self):
        if self.is_irrational():
            return None
        return self._value.fraction_parts()

    def is_zero(self):
        return self._value.is_zero()

    def is_negative(self):
        return self._value.is_negative()

    def is_positive(self):
        return self._value.is_positive()

    @property
    def magnitude(self):
        return abs(self)

    def repr_content(self):
        """Short constructor argument, e.g. 5 or SimpleFraction(1, 2) or IrrationalNumber.pi(7)"""
        if self.is_irrational():
            return repr(self._value)
        if self._value.is_integral():
            return str(self._value)
        return repr(self._value.value)

    def __repr__(self):
        return "RealNumber({})".format(self.repr_content())

    def __str__(self):
        return str(self._value)

    def __hash__(self):
        return hash(self._value)

    def __bool__(self):
        return not self.is_zero()

    def __float__(self):
        return float(self._value)

    def __int__(self):
        return int(self.approximation)

    def __pos__(self):
        return self

    def __neg__(self):
        return RealNumber(-self._value)

    def __abs__(self):
        return RealNumber(abs(self._value))

    @classmethod
    def _coerce(cls, x):
        """A RealNumber for anything real we know, else None."""
        if isinstance(x, cls):
            return x
        if isinstance(x, (IrrationalNumber, RationalNumber, RationalLeaf)):
            return cls(x)
        if isinstance(x, numbers.Rational) and not isinstance(x, bool):
            return cls(x)
        return None

    def __eq__(self, other):
        other_real = self._coerce(other)
        if other_real is None:
            return NotImplemented
        if self.is_rational() and other_real.is_rational():
            return self._value == other_real._value
        return self.approximation == other_real.approximation

    def __ne__(self, other):
        equal = self.__eq__(other)
        if equal is NotImplemented:
            return NotImplemented
        return not equal

    def __lt__(self, other): return self._compare(other, lambda a, b: a < b)
    def __le__(self, other): return self._compare(other, lambda a, b: a <= b)
    def __gt__(self, other): return self._compare(other, lambda a, b: a > b)
    def __ge__(self, other): return self._compare(other, lambda a, b: a >= b)

    def _compare(self, other, comparison):
        other_real = self._coerce(other)
        if other_real is None:
            return NotImplemented
        return comparison(self.approximation, other_real.approximation)

    def __add__(self, other): return self._binary_op('+', self, other)
    def __radd__(self, other): return self._binary_op('+', other, self)
    def __sub__(self, other): return self._binary_op('-', self, other)
    def __rsub__(self, other): return self._binary_op('-', other, self)
    def __mul__(self, other): return self._binary_op('*', self, other)
    def __rmul__(self, other): return self._binary_op('*', other, self)
    def __truediv__(self, other): return self._binary_op('/', self, other)
    def __rtruediv__(self, other): return self._binary_op('/', other, self)

    _RATIONAL_OPS = {
        '+': RationalNumber.__add__,
        '-': RationalNumber.__sub__,
        '*': RationalNumber.__mul__,
        '/': RationalNumber.__truediv__,
    }

    @classmethod
    def _binary_op(cls, symbol, input_left, input_right):
        """
        Rational with rational is exact.  Anything with an irrational is unsupported.

        Operands that are not real, e.g. an ImaginaryNumber, get NotImplemented,
        so their own reflected operator can take over.
        """
        left = cls._coerce(input_left)
        right = cls._coerce(input_right)
        if left is None or right is None:
            return NotImplemented
        if left.is_irrational() or right.is_irrational():
            raise UnsupportedOperation("{} {} {} is not supported, it has an irrational operand".format(left, symbol, right))
        return cls(cls._RATIONAL_OPS[symbol](left._value, right._value))


RealNumber.ZERO = RealNumber(0)
RealNumber.ONE = RealNumber(1)
