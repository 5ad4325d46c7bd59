"""
A Number is an exact real, imaginary, or complex number, always in its narrowest classification.

Features:
 - arbitrary precision integers and fractions, never rounded
 - irrational roots and pi, approximated to a chosen number of decimal digits
 - classification:  Number(5) - Number(5) is a WholeNumber, Number(2) ** Number('0.5') is irrational

    Number(5).classification          NaturalNumber
    Number(-5).classification         Integer
    Number('3.14')                    157/50
    Number(2).square_root()           ²√2
    Number(2) + 3 * Number.I          2 + 3i
"""

import fractions
import math
import numbers

from . import power
from .errors import MalformedInput, UnsupportedOperation
from .imaginary import (
    ADD,
    DIVIDE,
    MULTIPLY,
    SUBTRACT,
    ComplexNumber,
    ImaginaryNumber,
    branch_hash,
    branch_less,
    branch_parts,
    collapse,
)
from .irrational import IrrationalNumber
from .leaf import Integer, NaturalNumber, RationalLeaf, WholeNumber
from .parse import parse_rational
from .rational import RationalNumber
from .real import RealNumber


class Number(numbers.Complex):
    """
    Exact number, canonical.

    Internally a Number holds one of three branch values:
        RealNumber        wrapping a RationalNumber (one of four leaves) or an IrrationalNumber
        ImaginaryNumber   a nonzero real coefficient of i
        ComplexNumber     nonzero real and imaginary parts
    After construction, and after every operation, the value is collapsed to the narrowest one.
    So a Number is never a ComplexNumber with a zero part, never an ImaginaryNumber zero,
    and its RationalNumber is never an Integer that could be a WholeNumber, and so on.

    Precision is a count of decimal digits, for results that must be approximated.
    PRECISION_DEFAULT is used when a method's precision argument is None.
    """
    __slots__ = ('_value',)

    PRECISION_DEFAULT = power.PRECISION_DEFAULT

    def __init__(self, content=0):
        """
        Number constructor.

        content - the type can be:
            int                     10**100
            float                   3.14, by way of its exact decimal repr()
            numeric string          '1.5e-3', see parse()
            complex                 1+2j, each part by way of its decimal repr()
            fractions.Fraction      Fraction(1, 3)
            any exactnum value      NaturalNumber(1), RationalNumber(2), ComplexNumber(1, 2), ...
            another Number          Number(42)
        """
        if isinstance(content, Number):
            self._value = content._value
        elif isinstance(content, bool):
            self._value = RealNumber(int(content))
        elif isinstance(content, numbers.Rational):
            self._value = RealNumber(content)
        elif isinstance(content, float):
            self._value = self._real_from_float(content)
        elif isinstance(content, str):
            self._value = self._real_from_string(content)
        elif isinstance(content, complex):
            self._value = collapse(ComplexNumber(
                self._real_from_float(content.real),
                self._real_from_float(content.imag),
            ))
        elif isinstance(content, (RationalLeaf, RationalNumber, IrrationalNumber)):
            self._value = RealNumber(content)
        elif isinstance(content, (RealNumber, ImaginaryNumber, ComplexNumber)):
            self._value = collapse(content)
        else:
            raise self.ConstructorTypeError("Number({}) is not supported".format(type(content).__name__))

    class ConstructorTypeError(TypeError):
        """e.g. Number(object) or Number([])"""

    @staticmethod
    def _real_from_string(s):
        rational = parse_rational(s)
        if rational is None:
            raise MalformedInput("Number({}) is not a numeral".format(repr(s)))
        return RealNumber(rational)

    @classmethod
    def _real_from_float(cls, x):
        """
        Exact value of the shortest decimal that round-trips to this float.

        So Number(0.1) is 1/10, not 3602879701896397/36028797018963968.
        """
        if math.isnan(x) or math.isinf(x):
            raise MalformedInput("Number({}) has no exact value".format(x))
        return cls._real_from_string(repr(x))

    @classmethod
    def _coerce(cls, x):
        """A Number for anything exact, else None.  Floats and strings must go through Number() explicitly."""
        if isinstance(x, Number):
            return x
        if isinstance(x, (numbers.Rational, RationalLeaf, RationalNumber, IrrationalNumber,
                          RealNumber, ImaginaryNumber, ComplexNumber)):
            return cls(x)
        return None

    @property
    def value(self):
        """The RealNumber, ImaginaryNumber, or ComplexNumber."""
        return self._value

    @property
    def classification(self):
        """
        The narrowest class holding this value.

        NaturalNumber, WholeNumber, Integer, SimpleFraction, IrrationalNumber,
        ImaginaryNumber, or ComplexNumber
        """
        if isinstance(self._value, RealNumber):
            return self._value.classification
        return type(self._value)

    def is_natural(self):
        return self.classification is NaturalNumber

    def is_whole(self):
        return self.classification in (NaturalNumber, WholeNumber)

    def is_integer(self):
        return self.classification in (NaturalNumber, WholeNumber, Integer)

    def is_rational(self):
        return self.is_real() and self._value.is_rational()

    def is_irrational(self):
        return self.is_real() and self._value.is_irrational()

    def is_real(self):
        """Is the imaginary part zero?"""
        return isinstance(self._value, RealNumber)

    def is_imaginary(self):
        """Is this a nonzero multiple of i, with no real part?"""
        return isinstance(self._value, ImaginaryNumber)

    def is_complex(self):
        """Are both the real and imaginary parts nonzero?"""
        return isinstance(self._value, ComplexNumber)

    def is_zero(self):
        return self.is_real() and self._value.is_zero()

    def is_negative(self):
        """Is this a negative real number?  Never true for a non-real."""
        return self.is_real() and self._value.is_negative()

    def is_positive(self):
        """Is this a positive real number?  Never true for a non-real."""
        return self.is_real() and self._value.is_positive()

    def fraction_parts(self):
        """(numerator, denominator) for a rational Number, else None."""
        if self.is_rational():
            return self._value.fraction_parts()
        return None

    @property
    def real(self):
        """Real part, as a Number."""
        return type(self)(branch_parts(self._value)[0])

    @property
    def imag(self):
        """Imaginary part, as a real Number.  Number(2+3j).imag == 3"""
        return type(self)(branch_parts(self._value)[1])

    def conjugate(self):
        """Complex conjugate.  a + bi --> a - bi"""
        if self.is_real():
            return self
        return type(self)(self._value.conjugate())

    # Display
    # -------
    def __repr__(self):
        if self.is_real():
            return "Number({})".format(self._value.repr_content())
        return "Number({})".format(repr(self._value))

    def __str__(self):
        return str(self._value)

    # Comparison
    # ----------
    # NOTE:  Complex numbers are ordered too, real part first, then imaginary part.
    #        So the order is total, and 1 < 1+i < 2-i.

    @classmethod
    def _exact_binary(cls, x):
        """
        The exact binary value of a float or complex, for == only.  None for nan and inf.

        Not the decimal repr() the constructor uses.  So Number(2) == 2.0 and Number(1j) == 1j,
        but Number('0.1') != 0.1, the same as Fraction(1, 10) != 0.1.
        """
        if isinstance(x, complex):
            real = cls._exact_binary(x.real)
            imag = cls._exact_binary(x.imag)
            if real is None or imag is None:
                return None
            return cls(ComplexNumber(real.value, imag.value))
        if math.isnan(x) or math.isinf(x):
            return None
        return cls(fractions.Fraction(x))

    def __eq__(self, other):
        if isinstance(other, (float, complex)):
            other = self._exact_binary(other)
            if other is None:
                return False
        else:
            other = self._coerce(other)
            if other is None:
                return NotImplemented
        return branch_parts(self._value) == branch_parts(other._value)

    def __ne__(self, other):
        equal = self.__eq__(other)
        if equal is NotImplemented:
            return NotImplemented
        return not equal

    def __lt__(self, other): return self._compare(self, other)
    def __gt__(self, other): return self._compare(other, self)
    def __le__(self, other): return self._not(self._compare(other, self))
    def __ge__(self, other): return self._not(self._compare(self, other))

    @classmethod
    def _compare(cls, input_left, input_right):
        """left < right, or NotImplemented"""
        left = cls._coerce(input_left)
        right = cls._coerce(input_right)
        if left is None or right is None:
            return NotImplemented
        return branch_less(left._value, right._value)

    @staticmethod
    def _not(result):
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __hash__(self):
        return branch_hash(self._value)

    # Arithmetic
    # ----------
    def __pos__(self): return self
    def __neg__(self): return type(self)(-self._value)
    def __abs__(self): return self.magnitude

    def __add__(self, other): return self._binary_op(ADD, self, other)
    def __radd__(self, other): return self._binary_op(ADD, other, self)
    def __sub__(self, other): return self._binary_op(SUBTRACT, self, other)
    def __rsub__(self, other): return self._binary_op(SUBTRACT, other, self)
    def __mul__(self, other): return self._binary_op(MULTIPLY, self, other)
    def __rmul__(self, other): return self._binary_op(MULTIPLY, other, self)
    def __truediv__(self, other): return self._binary_op(DIVIDE, self, other)
    def __rtruediv__(self, other): return self._binary_op(DIVIDE, other, self)

    def __pow__(self, exponent):
        exponent = self._coerce(exponent)
        if exponent is None:
            return NotImplemented
        return self.raised_to(exponent)

    def __rpow__(self, base):
        base = self._coerce(base)
        if base is None:
            return NotImplemented
        return base.raised_to(self)

    @classmethod
    def _binary_op(cls, table, input_left, input_right):
        """
        Two-input operator.  Dispatch on the branches of both operands, one formula for each pair.

        The formula's result is collapsed to canonical form by the constructor.
        """
        left = cls._coerce(input_left)
        right = cls._coerce(input_right)
        if left is None or right is None:
            return NotImplemented
        formula = table[type(left._value), type(right._value)]
        return cls(formula(left._value, right._value))

    # Powers and roots
    # ----------------
    def raised_to(self, exponent, precision=None):
        """
        self ** exponent, exact whenever the result is rational.

        exponent - a rational Number (or anything Number() takes)
        precision - decimal digits for an irrational result, default PRECISION_DEFAULT

            Number(2).raised_to(8)                   256
            Number(256).raised_to(Number('0.125'))   2
            Number(2).raised_to(Number('0.5'))       ²√2
            Number(-4).raised_to(Number('0.5'))      2i

        Imaginary, complex, and irrational exponents raise UnsupportedOperation.
        So do fractional powers of non-rational bases.
        """
        if precision is None:
            precision = self.PRECISION_DEFAULT
        exponent = type(self)(exponent)
        if exponent.is_zero():
            return self.ONE
        if self.is_zero():
            return self.ZERO
        if exponent == self.ONE:
            return self
        if not exponent.is_rational():
            raise UnsupportedOperation("{} ** {} is not supported, the exponent must be rational".format(self, exponent))
        if exponent.is_negative():
            return self.ONE / self.raised_to(-exponent, precision)

        numerator, denominator = exponent.fraction_parts()
        whole, remainder = divmod(numerator, denominator)
        integral = power.fast_exponentiation(self, whole, self.ONE)
        if remainder == 0:
            return integral
        if not self.is_rational():
            raise UnsupportedOperation("{} ** {} is not supported, a fractional power needs a rational base".format(
                self,
                exponent,
            ))

        base = abs(self._value.value)
        root = power.proper_root(power.fast_exponentiation(base, remainder, RationalNumber.ONE), denominator)
        if root is not None:
            return integral * self._signed_root(RealNumber(root), remainder, denominator)
        radicand = power.fast_exponentiation(base, numerator, RationalNumber.ONE)
        irrational = IrrationalNumber.nth_root(denominator, radicand, precision)
        return self._signed_root(RealNumber(irrational), numerator, denominator)

    def _signed_root(self, root, exponent_numerator, exponent_denominator):
        """
        Apply the sign of a negative base to the root of its magnitude.

        (-x) ** (p/q), in lowest terms, is
            x ** (p/q) * (-1) ** p    for odd q
            x ** (p/q) * i ** p       for q == 2
        and is not supported for other even q.
        """
        if not self.is_negative():
            return type(self)(root)
        if exponent_denominator % 2 == 1:
            return type(self)(-root if exponent_numerator % 2 == 1 else root)
        if exponent_denominator == 2:
            if exponent_numerator % 4 == 1:
                return type(self)(ImaginaryNumber(root))
            else:
                return type(self)(ImaginaryNumber(-root))
        raise UnsupportedOperation("Root {} of negative {} is not supported".format(exponent_denominator, self))

    def radication(self, root, precision=None):
        """
        The root-th root, i.e. self ** (1/root).

            Number(27).radication(3)   3
        """
        return self.raised_to(self.ONE / type(self)(root), precision)

    def square_root(self, precision=None):
        return self.radication(2, precision)

    def cube_root(self, precision=None):
        return self.radication(3, precision)

    def squared(self):
        return self * self

    def cubed(self):
        return self * self * self

    def magnitude_to(self, precision):
        """
        Absolute value, the distance from zero, as a real Number.

        For a complex number this is sqrt(a² + b²), usually irrational.
        """
        if isinstance(self._value, ComplexNumber):
            if precision is None:
                precision = self.PRECISION_DEFAULT
            return type(self)(self._value.magnitude_to(precision))
        return type(self)(abs(self._value))

    @property
    def magnitude(self):
        return self.magnitude_to(None)

    # Strides
    # -------
    def distance_to(self, other):
        """other - self"""
        return type(self)(other) - self

    def advanced_by(self, n):
        """self + n"""
        return self + type(self)(n)

    # "to" conversions:  Number --> other type
    # ----------------------------------------
    def __bool__(self):
        return not self.is_zero()

    def __complex__(self):
        real, imag = branch_parts(self._value)
        return complex(float(real), float(imag))

    def __float__(self):
        if not self.is_real():
            raise TypeError("Cannot convert non-real {} to float".format(self))
        return float(self._value)

    def __int__(self):
        """Truncate toward zero, like int(float)."""
        if not self.is_real():
            raise TypeError("Cannot convert non-real {} to int".format(self))
        return int(self._value)

    @classmethod
    def internal_setup(cls):
        """Initialize Number constants after the Number class is otherwise defined."""
        cls.ZERO = cls(0)
        cls.ONE = cls(1)
        cls.TWO = cls(2)
        cls.TEN = cls(10)
        cls.NEGATIVE_ONE = cls(-1)
        cls.I = cls(ImaginaryNumber(1))
        cls.PI = cls(IrrationalNumber.pi())


Number.internal_setup()
assert Number.ZERO.classification is WholeNumber
assert Number.I * Number.I == Number.NEGATIVE_ONE


def parse(text, radix=10):
    """
    The Number for a numeral, or None if the numeral is malformed.

        parse('3.14')      157/50
        parse('1e-3')      1/1000
        parse('7f', 16)    127
        parse('1.2.3')     None

    SEE:  parse_rational() for the grammar.
    """
    rational = parse_rational(text, radix)
    if rational is None:
        return None
    return Number(rational)
