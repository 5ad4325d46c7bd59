"""
IrrationalNumber, a real number known by its formula and approximated by a rational.

    IrrationalNumber.square_root(2)            ²√2, approximated to 42 digits
    IrrationalNumber.nth_root(3, 5, 10)        ³√5, approximated to 10 digits
    IrrationalNumber.pi()                      π, approximated to 7 digits

The approximation is computed once, at construction, and memoized.
Equality and ordering against anything else use the approximation.
The formula is kept for display and for negation, which never recomputes.
"""

import logging

from . import power
from .errors import DomainError, UnsupportedOperation
from .leaf import NaturalNumber, RationalLeaf
from .rational import RationalNumber


logger = logging.getLogger(__name__)


SUPERSCRIPT_DIGITS = str.maketrans('0123456789', '⁰¹²³⁴⁵⁶⁷⁸⁹')


class IrrationalNumber(object):
    """
    nth_root(degree, radicand, precision) or pi(precision), possibly negated.

    Construct with the class methods, not IrrationalNumber() directly.
    A root that happens to be rational, e.g. square_root(49), keeps it in .exact,
    and RealNumber narrows such a value back to a RationalNumber.
    """
    __slots__ = ('_formula', '_degree', '_radicand', '_precision', '_is_negative', '_exact', '_approximation')

    class Formula(object):
        NTH_ROOT = 'nth_root'
        PI = 'pi'

    PRECISION_DEFAULT = power.PRECISION_DEFAULT
    PI_PRECISION_DEFAULT = power.PI_PRECISION_DEFAULT

    def __init__(self, formula, precision, approximation, is_negative=False, degree=None, radicand=None, exact=None):
        assert formula in (self.Formula.NTH_ROOT, self.Formula.PI)
        assert isinstance(approximation, RationalNumber)
        self._formula = formula
        self._precision = precision
        self._approximation = approximation
        self._is_negative = is_negative
        self._degree = degree
        self._radicand = radicand
        self._exact = exact

    @classmethod
    def nth_root(cls, degree, radicand, precision=None):
        """
        The degree-th root of a rational radicand.

        A negative radicand needs an odd degree:  nth_root(3, -8) is -2.
        Even roots of negative numbers are imaginary, see Number.radication().
        """
        natural_degree = NaturalNumber.try_from(degree)
        if natural_degree is None:
            raise DomainError("Root degree must be a natural number, not {}".format(degree))
        degree = natural_degree.value
        rational_radicand = RationalNumber.try_from(radicand)
        if rational_radicand is None:
            raise UnsupportedOperation("Root of {} is not supported, only roots of rational numbers".format(radicand))
        if precision is None:
            precision = cls.PRECISION_DEFAULT
        is_negative = rational_radicand.is_negative()
        if is_negative and degree % 2 == 0:
            raise DomainError("Root {} of negative {} is not real".format(degree, rational_radicand))
        magnitude = abs(rational_radicand)
        if magnitude.is_zero():
            exact = magnitude
        else:
            exact = power.proper_root(magnitude, degree)
        if exact is None:
            approximation = power.newtons_method(magnitude, degree, precision)
            logger.debug("Root %d of %s approximated to %d digits", degree, magnitude, precision)
        else:
            approximation = exact
        if is_negative:
            approximation = -approximation
            exact = None if exact is None else -exact
        return cls(
            cls.Formula.NTH_ROOT,
            precision,
            approximation,
            is_negative=is_negative,
            degree=degree,
            radicand=magnitude,
            exact=exact,
        )

    @classmethod
    def square_root(cls, radicand, precision=None):
        return cls.nth_root(2, radicand, precision)

    @classmethod
    def cube_root(cls, radicand, precision=None):
        return cls.nth_root(3, radicand, precision)

    @classmethod
    def pi(cls, precision=None, is_negative=False):
        """π, or -π, as a sum of precision**2 series terms."""
        if precision is None:
            precision = cls.PI_PRECISION_DEFAULT
        approximation = power.pi_series(precision)
        if is_negative:
            approximation = -approximation
        return cls(cls.Formula.PI, precision, approximation, is_negative=is_negative)

    @property
    def formula(self):
        return self._formula

    @property
    def degree(self):
        """Root degree, an int, or None for pi."""
        return self._degree

    @property
    def radicand(self):
        """Root radicand, a non-negative RationalNumber, or None for pi.  The sign is separate."""
        return self._radicand

    @property
    def precision(self):
        return self._precision

    @property
    def approximation(self):
        """Memoized RationalNumber within 10**-precision of the true value."""
        return self._approximation

    @property
    def exact(self):
        """The RationalNumber value, for a root that turned out to be rational.  Otherwise None."""
        return self._exact

    def is_negative(self):
        return self._is_negative and not self._approximation.is_zero()

    def is_positive(self):
        return not self._is_negative and not self._approximation.is_zero()

    def is_zero(self):
        return self._approximation.is_zero()

    def _copy(self, is_negative):
        """Same formula, same magnitude, chosen sign.  No recomputing."""
        if is_negative == self._is_negative:
            return self
        exact = None if self._exact is None else -self._exact
        return type(self)(
            self._formula,
            self._precision,
            -self._approximation,
            is_negative=is_negative,
            degree=self._degree,
            radicand=self._radicand,
            exact=exact,
        )

    def __neg__(self):
        return self._copy(not self._is_negative)

    def __pos__(self):
        return self

    def __abs__(self):
        return self._copy(False)

    @property
    def magnitude(self):
        return abs(self)

    def __float__(self):
        return float(self._approximation)

    def __repr__(self):
        sign = '-' if self._is_negative else ''
        if self._formula == self.Formula.PI:
            return "{}IrrationalNumber.pi({})".format(sign, self._precision)
        return "{}IrrationalNumber.nth_root({}, {}, {})".format(sign, self._degree, self._radicand, self._precision)

    def __str__(self):
        """E.g. '²√2' or '-³√5' or 'π' or '-π'"""
        sign = '-' if self._is_negative else ''
        if self._formula == self.Formula.PI:
            return sign + 'π'
        radicand = str(self._radicand)
        if not self._radicand.is_integral():
            radicand = '(' + radicand + ')'
        return sign + str(self._degree).translate(SUPERSCRIPT_DIGITS) + '√' + radicand

    def __hash__(self):
        return hash(self._approximation)

    @classmethod
    def _comparable(cls, x):
        """The RationalNumber to compare against, or None if x is not a real number we know."""
        if isinstance(x, cls):
            return x._approximation
        if isinstance(x, (RationalNumber, RationalLeaf, int)) and not isinstance(x, bool):
            return RationalNumber(x)
        return None

    def __eq__(self, other):
        other_value = self._comparable(other)
        if other_value is None:
            return NotImplemented
        return self._approximation == other_value

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
        other_value = self._comparable(other)
        if other_value is None:
            return NotImplemented
        return comparison(self._approximation, other_value)

    def _arithmetic(self, other):
        """Arithmetic on an irrational would need symbolic algebra, which is not supported."""
        if self._comparable(other) is None:
            return NotImplemented
        raise UnsupportedOperation("Arithmetic with irrational {} and {} is not supported".format(self, other))

    __add__ = __radd__ = __sub__ = __rsub__ = _arithmetic
    __mul__ = __rmul__ = __truediv__ = __rtruediv__ = _arithmetic
