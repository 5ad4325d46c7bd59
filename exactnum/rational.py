"""
RationalNumber, an exact rational value always held in its narrowest leaf.

    RationalNumber(5).kind           is NaturalNumber
    RationalNumber(0).kind           is WholeNumber
    RationalNumber(-5).kind          is Integer
    RationalNumber(Fraction(1, 2))   holds SimpleFraction(1, 2)

Binary operators promote both operands to a common leaf kind, per the PROMOTION table,
run that kind's native operator, then canonicalize the result back down.
    NaturalNumber(5) - NaturalNumber(5)  -->  Integer(0)  -->  WholeNumber(0)
    NaturalNumber(6) / NaturalNumber(2)  -->  SimpleFraction(3, 1)  -->  NaturalNumber(3)
"""

import numbers

from .fraction import SimpleFraction
from .leaf import Integer, NaturalNumber, RationalLeaf, WholeNumber, fraction_parts, rational_hash


NARROWEST_FIRST = (NaturalNumber, WholeNumber, Integer, SimpleFraction)


# The common kind for + - * and <, for every ordered pair of leaf kinds.
PROMOTION = {
    (NaturalNumber,  NaturalNumber):  NaturalNumber,
    (NaturalNumber,  WholeNumber):    WholeNumber,
    (NaturalNumber,  Integer):        Integer,
    (NaturalNumber,  SimpleFraction): SimpleFraction,
    (WholeNumber,    NaturalNumber):  WholeNumber,
    (WholeNumber,    WholeNumber):    WholeNumber,
    (WholeNumber,    Integer):        Integer,
    (WholeNumber,    SimpleFraction): SimpleFraction,
    (Integer,        NaturalNumber):  Integer,
    (Integer,        WholeNumber):    Integer,
    (Integer,        Integer):        Integer,
    (Integer,        SimpleFraction): SimpleFraction,
    (SimpleFraction, NaturalNumber):  SimpleFraction,
    (SimpleFraction, WholeNumber):    SimpleFraction,
    (SimpleFraction, Integer):        SimpleFraction,
    (SimpleFraction, SimpleFraction): SimpleFraction,
}

# Division always widens to SimpleFraction.  6 / 2 still canonicalizes back to NaturalNumber(3).
QUOTIENT_PROMOTION = {pair: SimpleFraction for pair in PROMOTION}


assert set(PROMOTION) == {(a, b) for a in NARROWEST_FIRST for b in NARROWEST_FIRST}
assert all(common.RANK == max(a.RANK, b.RANK) for (a, b), common in PROMOTION.items())
assert [kind.RANK for kind in NARROWEST_FIRST] == [0, 1, 2, 3]


class RationalNumber(object):
    """
    An exact rational number, canonical.

    content - the type can be:
        int                  42
        fractions.Fraction   Fraction(1, 3)
        a leaf               WholeNumber(0), SimpleFraction(1, 3)
        RationalNumber       RationalNumber(42)
    """
    __slots__ = ('_value',)

    def __init__(self, content=0):
        if isinstance(content, RationalNumber):
            self._value = content._value
        elif isinstance(content, RationalLeaf):
            self._value = self.canonicalize(content)
        elif isinstance(content, numbers.Rational) and not isinstance(content, bool):
            self._value = self.canonicalize(SimpleFraction(*fraction_parts(content)))
        else:
            raise TypeError("RationalNumber({}) is not supported".format(type(content).__name__))

    @staticmethod
    def canonicalize(leaf):
        """
        The narrowest leaf equal to this leaf.

        Idempotent, total, and value-preserving.
        """
        for kind in NARROWEST_FIRST:
            narrowed = kind.try_from(leaf)
            if narrowed is not None:
                return narrowed
        raise AssertionError("SimpleFraction holds every rational, so canonicalize() cannot get here")

    @classmethod
    def try_from(cls, x):
        """The RationalNumber equal to x, or None if x is not exactly rational (or not a number)."""
        if isinstance(x, cls):
            return x
        parts = fraction_parts(x)
        if parts is None:
            return None
        return cls(SimpleFraction(*parts))

    @property
    def value(self):
        """The leaf, NaturalNumber, WholeNumber, Integer, or SimpleFraction."""
        return self._value

    @property
    def kind(self):
        return type(self._value)

    @property
    def numerator(self):
        return self._value.numerator

    @property
    def denominator(self):
        return self._value.denominator

    def fraction_parts(self):
        return self._value.fraction_parts()

    def is_zero(self):
        return self._value.is_zero()

    def is_negative(self):
        return self._value.is_negative()

    def is_positive(self):
        return self._value.is_positive()

    def is_integral(self):
        return self.denominator == 1

    def is_repeating(self):
        """Does the decimal expansion repeat forever?  Never for an integer."""
        if self.is_integral():
            return False
        return self._value.is_repeating()

    @property
    def magnitude(self):
        return abs(self)

    @property
    def reciprocal(self):
        """1/x.  Raises DivisionByZero for zero."""
        return type(self)(SimpleFraction.promote(self._value).reciprocal)

    def __repr__(self):
        return "RationalNumber({})".format(repr(self._value))

    def __str__(self):
        return str(self._value)

    def __hash__(self):
        return rational_hash(self.numerator, self.denominator)

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

    def __bool__(self):
        return not self.is_zero()

    def __float__(self):
        return self.numerator / self.denominator

    def __int__(self):
        """Truncate toward zero."""
        whole = abs(self.numerator) // self.denominator
        return -whole if self.is_negative() else whole

    def __pos__(self):
        return self

    def __neg__(self):
        return type(self)(SimpleFraction(-self.numerator, self.denominator))

    def __abs__(self):
        return -self if self.is_negative() else self

    def __add__(self, other): return self._binary_op('_add', self, other)
    def __radd__(self, other): return self._binary_op('_add', other, self)
    def __sub__(self, other): return self._binary_op('_sub', self, other)
    def __rsub__(self, other): return self._binary_op('_sub', other, self)
    def __mul__(self, other): return self._binary_op('_mul', self, other)
    def __rmul__(self, other): return self._binary_op('_mul', other, self)
    def __truediv__(self, other): return self._binary_op('_truediv', self, other)
    def __rtruediv__(self, other): return self._binary_op('_truediv', other, self)

    def __lt__(self, other): return self._binary_op('_lt', self, other)
    def __gt__(self, other): return self._binary_op('_lt', other, self)
    def __le__(self, other): return self._negated_comparison(other, self)
    def __ge__(self, other): return self._negated_comparison(self, other)

    def _negated_comparison(self, left, right):
        """not (left < right), e.g. x <= y is not (y < x)"""
        less = self._binary_op('_lt', left, right)
        if less is NotImplemented:
            return NotImplemented
        return not less

    @classmethod
    def _coerce(cls, x):
        """A RationalNumber for an int, Fraction, leaf, or RationalNumber.  None for anything else."""
        if isinstance(x, cls):
            return x
        if isinstance(x, RationalLeaf) or (isinstance(x, numbers.Rational) and not isinstance(x, bool)):
            return cls(x)
        return None

    @classmethod
    def _binary_op(cls, native_op, input_left, input_right):
        """
        Promote both operands to their common leaf kind, then run that kind's native operator.

        Returns a canonical RationalNumber, or a bool for '_lt'.
        """
        left = cls._coerce(input_left)
        right = cls._coerce(input_right)
        if left is None or right is None:
            return NotImplemented
        table = QUOTIENT_PROMOTION if native_op == '_truediv' else PROMOTION
        common = table[left.kind, right.kind]
        result = getattr(common.promote(left._value), native_op)(common.promote(right._value))
        if native_op == '_lt':
            return result
        return cls(result)


RationalNumber.ZERO = RationalNumber(0)
RationalNumber.ONE = RationalNumber(1)
