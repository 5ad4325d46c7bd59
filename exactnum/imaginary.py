"""
ImaginaryNumber and ComplexNumber, built on RealNumber.

    ImaginaryNumber(3)        3i
    ComplexNumber(2, 3)       2 + 3i

The branch matrix below spells out + - * / for every pair of
RealNumber, ImaginaryNumber, and ComplexNumber operands, nine formulas per operator.
Every result goes through collapse(), so e.g. (1+i) - i is the RealNumber 1.
"""

import sys

from . import power
from .errors import DivisionByZero
from .irrational import IrrationalNumber
from .real import RealNumber


def _str_coefficient(real):
    """Parenthesize anything but an integer, so (1/2)i is not mistaken for 1/(2i)."""
    text = str(real)
    if real.is_rational() and real.value.is_integral():
        return text
    return '(' + text + ')'


class ImaginaryNumber(object):
    """
    A real coefficient times i.

    ImaginaryNumber(0) is legal on its own.  Inside a Number it collapses to real zero.
    """
    __slots__ = ('_coefficient',)

    def __init__(self, coefficient=1):
        if isinstance(coefficient, ImaginaryNumber):
            coefficient = coefficient._coefficient
        self._coefficient = RealNumber(coefficient)

    @property
    def coefficient(self):
        """The RealNumber b, in bi."""
        return self._coefficient

    @property
    def real(self):
        return RealNumber.ZERO

    @property
    def imag(self):
        return self._coefficient

    @property
    def parts(self):
        return RealNumber.ZERO, self._coefficient

    def is_zero(self):
        return self._coefficient.is_zero()

    @property
    def magnitude(self):
        """|bi| is |b|, a RealNumber."""
        return abs(self._coefficient)

    def conjugate(self):
        return ImaginaryNumber(-self._coefficient)

    def __repr__(self):
        return "ImaginaryNumber({})".format(self._coefficient.repr_content())

    def __str__(self):
        if self._coefficient == 1:
            return 'i'
        if self._coefficient == -1:
            return '-i'
        return _str_coefficient(self._coefficient) + 'i'

    def __neg__(self):
        return ImaginaryNumber(-self._coefficient)

    def __pos__(self):
        return self

    def __abs__(self):
        return self.magnitude

    def __bool__(self):
        return not self.is_zero()

    def __hash__(self):
        return branch_hash(self)

    def __eq__(self, other): return branch_equal(self, other)
    def __ne__(self, other): return branch_not_equal(self, other)
    def __lt__(self, other): return branch_compare(self, other, lambda a, b: a < b)
    def __le__(self, other): return branch_compare(self, other, lambda a, b: a <= b)
    def __gt__(self, other): return branch_compare(self, other, lambda a, b: a > b)
    def __ge__(self, other): return branch_compare(self, other, lambda a, b: a >= b)

    def __add__(self, other): return branch_op(ADD, self, other)
    def __radd__(self, other): return branch_op(ADD, other, self)
    def __sub__(self, other): return branch_op(SUBTRACT, self, other)
    def __rsub__(self, other): return branch_op(SUBTRACT, other, self)
    def __mul__(self, other): return branch_op(MULTIPLY, self, other)
    def __rmul__(self, other): return branch_op(MULTIPLY, other, self)
    def __truediv__(self, other): return branch_op(DIVIDE, self, other)
    def __rtruediv__(self, other): return branch_op(DIVIDE, other, self)


class ComplexNumber(object):
    """
    real + imag i

    Either part may be zero here.  Inside a Number,
    a zero imaginary part collapses to RealNumber and a zero real part to ImaginaryNumber.
    """
    __slots__ = ('_real', '_imag')

    def __init__(self, real=0, imag=0):
        if isinstance(imag, ImaginaryNumber):
            imag = imag.coefficient
        self._real = RealNumber(real)
        self._imag = RealNumber(imag)

    @property
    def real(self):
        return self._real

    @property
    def imag(self):
        return self._imag

    @property
    def parts(self):
        return self._real, self._imag

    def is_zero(self):
        return self._real.is_zero() and self._imag.is_zero()

    def conjugate(self):
        return ComplexNumber(self._real, -self._imag)

    def squared_norm(self):
        """a² + b², a RealNumber."""
        return self._real * self._real + self._imag * self._imag

    def magnitude_to(self, precision):
        """
        sqrt(a² + b²) as a RealNumber, usually irrational.

            ComplexNumber(3, 4).magnitude_to(10) == 5
        """
        if precision is None:
            precision = power.PRECISION_DEFAULT
        return RealNumber(IrrationalNumber.square_root(self.squared_norm().value, precision))

    @property
    def magnitude(self):
        return self.magnitude_to(None)

    def __repr__(self):
        return "ComplexNumber({}, {})".format(self._real.repr_content(), self._imag.repr_content())

    def __str__(self):
        """E.g. '14 - 5i' or '1/2 + (3/4)i'"""
        if self._imag.is_negative():
            return "{} - {}".format(self._real, ImaginaryNumber(-self._imag))
        return "{} + {}".format(self._real, ImaginaryNumber(self._imag))

    def __neg__(self):
        return ComplexNumber(-self._real, -self._imag)

    def __pos__(self):
        return self

    def __abs__(self):
        return self.magnitude

    def __bool__(self):
        return not self.is_zero()

    def __hash__(self):
        return branch_hash(self)

    def __eq__(self, other): return branch_equal(self, other)
    def __ne__(self, other): return branch_not_equal(self, other)
    def __lt__(self, other): return branch_compare(self, other, lambda a, b: a < b)
    def __le__(self, other): return branch_compare(self, other, lambda a, b: a <= b)
    def __gt__(self, other): return branch_compare(self, other, lambda a, b: a > b)
    def __ge__(self, other): return branch_compare(self, other, lambda a, b: a >= b)

    def __add__(self, other): return branch_op(ADD, self, other)
    def __radd__(self, other): return branch_op(ADD, other, self)
    def __sub__(self, other): return branch_op(SUBTRACT, self, other)
    def __rsub__(self, other): return branch_op(SUBTRACT, other, self)
    def __mul__(self, other): return branch_op(MULTIPLY, self, other)
    def __rmul__(self, other): return branch_op(MULTIPLY, other, self)
    def __truediv__(self, other): return branch_op(DIVIDE, self, other)
    def __rtruediv__(self, other): return branch_op(DIVIDE, other, self)


BRANCHES = (RealNumber, ImaginaryNumber, ComplexNumber)


def to_branch(x):
    """RealNumber, ImaginaryNumber, or ComplexNumber for x, or None if x is none of those nor real."""
    if isinstance(x, BRANCHES):
        return x
    try:
        return RealNumber(x)
    except TypeError:
        return None


def branch_parts(x):
    """(real, imaginary) RealNumbers of a branch value."""
    if isinstance(x, RealNumber):
        return x, RealNumber.ZERO
    return x.parts


def collapse(value):
    """
    The narrowest branch for a value.

        ComplexNumber(a, 0)  -->  RealNumber(a)
        ComplexNumber(0, b)  -->  ImaginaryNumber(b)
        ImaginaryNumber(0)   -->  RealNumber(0)
    """
    if isinstance(value, ComplexNumber):
        if value.imag.is_zero():
            return value.real
        if value.real.is_zero():
            return ImaginaryNumber(value.imag)
        return value
    elif isinstance(value, ImaginaryNumber):
        if value.is_zero():
            return RealNumber.ZERO
        return value
    elif isinstance(value, RealNumber):
        return value
    else:
        raise TypeError("Cannot collapse a {}".format(type(value).__name__))


def _complex_divisor_norm(divisor):
    """c² + d², which must not be zero."""
    norm = divisor.squared_norm()
    if norm.is_zero():
        raise DivisionByZero("Division by {}".format(divisor))
    return norm


def _real_over_complex(a, y):
    """a / (c+di) = (ac - adi) / (c²+d²)"""
    norm = _complex_divisor_norm(y)
    return ComplexNumber(a * y.real / norm, -(a * y.imag) / norm)


def _imaginary_over_complex(x, y):
    """bi / (c+di) = (bd + bci) / (c²+d²)"""
    norm = _complex_divisor_norm(y)
    b = x.coefficient
    return ComplexNumber(b * y.imag / norm, b * y.real / norm)


def _complex_over_complex(x, y):
    """(a+bi) / (c+di) = ((ac+bd) + (bc-ad)i) / (c²+d²)"""
    norm = _complex_divisor_norm(y)
    a, b = x.parts
    c, d = y.parts
    return ComplexNumber((a * c + b * d) / norm, (b * c - a * d) / norm)


_R = RealNumber
_I = ImaginaryNumber
_C = ComplexNumber

ADD = {
    (_R, _R): lambda x, y: x + y,
    (_R, _I): lambda x, y: _C(x, y.coefficient),
    (_R, _C): lambda x, y: _C(x + y.real, y.imag),
    (_I, _R): lambda x, y: _C(y, x.coefficient),
    (_I, _I): lambda x, y: _I(x.coefficient + y.coefficient),
    (_I, _C): lambda x, y: _C(y.real, x.coefficient + y.imag),
    (_C, _R): lambda x, y: _C(x.real + y, x.imag),
    (_C, _I): lambda x, y: _C(x.real, x.imag + y.coefficient),
    (_C, _C): lambda x, y: _C(x.real + y.real, x.imag + y.imag),
}

SUBTRACT = {
    (_R, _R): lambda x, y: x - y,
    (_R, _I): lambda x, y: _C(x, -y.coefficient),
    (_R, _C): lambda x, y: _C(x - y.real, -y.imag),
    (_I, _R): lambda x, y: _C(-y, x.coefficient),
    (_I, _I): lambda x, y: _I(x.coefficient - y.coefficient),
    (_I, _C): lambda x, y: _C(-y.real, x.coefficient - y.imag),
    (_C, _R): lambda x, y: _C(x.real - y, x.imag),
    (_C, _I): lambda x, y: _C(x.real, x.imag - y.coefficient),
    (_C, _C): lambda x, y: _C(x.real - y.real, x.imag - y.imag),
}

MULTIPLY = {
    (_R, _R): lambda x, y: x * y,
    (_R, _I): lambda x, y: _I(x * y.coefficient),
    (_R, _C): lambda x, y: _C(x * y.real, x * y.imag),
    (_I, _R): lambda x, y: _I(x.coefficient * y),
    (_I, _I): lambda x, y: -(x.coefficient * y.coefficient),
    (_I, _C): lambda x, y: _C(-(x.coefficient * y.imag), x.coefficient * y.real),
    (_C, _R): lambda x, y: _C(x.real * y, x.imag * y),
    (_C, _I): lambda x, y: _C(-(x.imag * y.coefficient), x.real * y.coefficient),
    (_C, _C): lambda x, y: _C(x.real * y.real - x.imag * y.imag, x.real * y.imag + x.imag * y.real),
}

DIVIDE = {
    (_R, _R): lambda x, y: x / y,
    (_R, _I): lambda x, y: _I(-(x / y.coefficient)),
    (_R, _C): _real_over_complex,
    (_I, _R): lambda x, y: _I(x.coefficient / y),
    (_I, _I): lambda x, y: x.coefficient / y.coefficient,
    (_I, _C): _imaginary_over_complex,
    (_C, _R): lambda x, y: _C(x.real / y, x.imag / y),
    (_C, _I): lambda x, y: _C(x.imag / y.coefficient, -(x.real / y.coefficient)),
    (_C, _C): _complex_over_complex,
}


for _table in (ADD, SUBTRACT, MULTIPLY, DIVIDE):
    assert set(_table) == {(a, b) for a in BRANCHES for b in BRANCHES}
del _table


def branch_op(table, input_left, input_right):
    """Look up the formula for this pair of branches, apply it, collapse the result."""
    left = to_branch(input_left)
    right = to_branch(input_right)
    if left is None or right is None:
        return NotImplemented
    return collapse(table[type(left), type(right)](left, right))


def branch_less(left, right):
    """
    Total order, real part first, then imaginary part.

    A real number is a complex number with a zero imaginary part,
    so 1 < 1+i and 1-i < 1.
    """
    left_real, left_imag = branch_parts(left)
    right_real, right_imag = branch_parts(right)
    if left_real != right_real:
        return left_real < right_real
    return left_imag < right_imag


def branch_equal(left, right):
    right = to_branch(right)
    if right is None:
        return NotImplemented
    return branch_parts(left) == branch_parts(right)


def branch_not_equal(left, right):
    equal = branch_equal(left, right)
    if equal is NotImplemented:
        return NotImplemented
    return not equal


def branch_compare(left, right, comparison):
    """Compare by the total order of branch_less(), e.g. comparison(a, b) is a <= b."""
    right = to_branch(right)
    if right is None:
        return NotImplemented
    if branch_less(left, right):
        return comparison(0, 1)
    if branch_less(right, left):
        return comparison(1, 0)
    return comparison(0, 0)


def branch_hash(x):
    """
    Agrees with hash() of an equal RealNumber, or an equal Python complex.

    SEE:  Hashing of numeric types, https://docs.python.org/3/library/stdtypes.html#hashing-of-numeric-types
    """
    real, imag = branch_parts(x)
    if imag.is_zero():
        return hash(real)
    width = sys.hash_info.width
    combined = (hash(real) + sys.hash_info.imag * hash(imag)) % (1 << width)
    if combined >= 1 << (width - 1):
        combined -= 1 << width
    if combined == -1:
        combined = -2
    return combined
