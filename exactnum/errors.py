"""
Exceptions raised by exactnum.

Every one of these is a recoverable, caller-visible outcome.
Each derives from the built-in exception a caller would already expect,
so e.g. except ZeroDivisionError still catches a DivisionByZero.
"""


class DivisionByZero(ZeroDivisionError):
    """e.g. SimpleFraction(1, 0) or Number(1) / 0 or Number(1) / ComplexNumber(0, 0)"""


class MalformedInput(ValueError):
    """e.g. Number('1.2.3') or Number('12e') or Number(float('nan'))"""


class UnsupportedOperation(NotImplementedError):
    """
    An operation the tower does not define.

    e.g. IrrationalNumber.square_root(2) + 1, or Number(2) ** Number.I

    Distinct from an accidental NotImplementedError, so callers can catch exactly this.
    """


class DomainError(ValueError):
    """e.g. NaturalNumber(0) or WholeNumber(-1), a value outside its classification."""


class ConvergenceError(ArithmeticError):
    """An iterative approximation exceeded its iteration limit."""
