"""
exactnum - Exact numbers, in the narrowest classification that holds them.

Usage example:

    import exactnum

    half = exactnum.Number('0.5')
    assert half.classification is exactnum.SimpleFraction
    assert (half + half).classification is exactnum.NaturalNumber
    assert (exactnum.Number(5) - 5).classification is exactnum.WholeNumber

Usage example:

    from exactnum import Number, parse

    root = Number(2).square_root()        # ²√2, to 42 decimal digits
    z = Number(2) + 3 * Number.I          # 2 + 3i
    assert parse('1.2.3') is None
"""

import logging

from .errors import ConvergenceError
from .errors import DivisionByZero
from .errors import DomainError
from .errors import MalformedInput
from .errors import UnsupportedOperation
from .fraction import SimpleFraction
from .imaginary import ComplexNumber
from .imaginary import ImaginaryNumber
from .irrational import IrrationalNumber
from .leaf import Integer
from .leaf import NaturalNumber
from .leaf import WholeNumber
from .number import Number
from .number import parse
from .rational import RationalNumber
from .real import RealNumber

__all__ = [
    'Number',
    'parse',
    'NaturalNumber',
    'WholeNumber',
    'Integer',
    'SimpleFraction',
    'RationalNumber',
    'IrrationalNumber',
    'RealNumber',
    'ImaginaryNumber',
    'ComplexNumber',
    'ConvergenceError',
    'DivisionByZero',
    'DomainError',
    'MalformedInput',
    'UnsupportedOperation',
]

logging.getLogger(__name__).addHandler(logging.NullHandler())

from . import version
__version__ = version.__doc__
