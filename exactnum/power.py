"""
Power and root engine.

    fast_exponentiation()   base ** whole-number exponent, by repeated squaring
    integer_nth_root()      floor of an int's nth root, by bisection
    proper_root()           exact rational nth root, or None
    newtons_method()        rational approximation of an nth root, to a decimal precision
    pi_series()             rational approximation of pi, to a decimal precision

Precision is always an explicit count of decimal digits.
The class defaults (Number.PRECISION_DEFAULT, etc.) come from the constants here.
"""

import logging

from .errors import ConvergenceError, DomainError
from .fraction import SimpleFraction
from .rational import RationalNumber


logger = logging.getLogger(__name__)


PRECISION_DEFAULT = 42
# NOTE:  42 digits is more than any physical measurement needs.
#        About 40 digits of pi give the size of the observable universe to within a hydrogen atom.

PI_PRECISION_DEFAULT = 7
# NOTE:  pi_series() sums precision**2 terms, so its default is much smaller.

NEWTON_ITERATION_LIMIT = 1000


def tolerance(precision):
    """10 ** -precision, exactly."""
    if precision < 0:
        raise DomainError("Precision {} is negative".format(precision))
    return RationalNumber(SimpleFraction(1, 10 ** precision))


def fast_exponentiation(base, exponent, one):
    """
    base ** exponent for a whole number exponent, in O(log exponent) multiplications.

    base - anything with a * operator, e.g. RationalNumber or Number
    one - the multiplicative identity for base's type

    Recursion depth is about twice the bit length of the exponent.
    """
    if exponent < 0:
        raise DomainError("fast_exponentiation() needs a whole number exponent, not {}".format(exponent))
    if exponent == 0:
        return one
    if exponent % 2 == 0:
        half = fast_exponentiation(base, exponent // 2, one)
        return half * half
    return base * fast_exponentiation(base, exponent - 1, one)


def integer_nth_root(radicand, degree):
    """
    The largest whole number r with r ** degree <= radicand.

    Bisection between 0 and a power of two known to be too big,
    so the loop runs at most about radicand.bit_length() / degree times.
    """
    if radicand < 0:
        raise DomainError("integer_nth_root() of negative {}".format(radicand))
    if degree < 1:
        raise DomainError("integer_nth_root() degree must be 1 or more, not {}".format(degree))
    if radicand < 2 or degree == 1:
        return radicand
    low = 0
    high = 1 << (radicand.bit_length() // degree + 1)
    # NOTE:  low ** degree <= radicand < high ** degree, throughout.
    while high - low > 1:
        middle = (low + high) // 2
        if middle ** degree <= radicand:
            low = middle
        else:
            high = middle
    return low


def proper_root(radicand, degree):
    """
    The exact degree-th root of a non-negative RationalNumber, or None if it is irrational.

    A reduced fraction has a rational root only when
    its numerator and denominator are both perfect powers.
        proper_root(RationalNumber(27), 3)  -->  RationalNumber(3)
        proper_root(RationalNumber(2), 2)   -->  None
    """
    if radicand.is_negative():
        raise DomainError("proper_root() of negative {}".format(radicand))
    numerator, denominator = radicand.fraction_parts()
    root_numerator = integer_nth_root(numerator, degree)
    if root_numerator ** degree != numerator:
        return None
    root_denominator = integer_nth_root(denominator, degree)
    if root_denominator ** degree != denominator:
        return None
    logger.debug("Proper root %d of %s is %d/%d", degree, radicand, root_numerator, root_denominator)
    return RationalNumber(SimpleFraction(root_numerator, root_denominator))


def _bounded(value, scale):
    """Round a RationalNumber down to a multiple of 1/scale, if its denominator is bigger than that."""
    numerator, denominator = value.fraction_parts()
    if denominator <= scale:
        return value
    return RationalNumber(SimpleFraction(numerator * scale // denominator, scale))


def _starting_guess(radicand, degree):
    """
    A RationalNumber just above the degree-th root of a positive RationalNumber.

    For n/d the root is  integer_nth_root(n * d ** (degree - 1), degree) / d,  give or take 1/d.
    When that integer root is smaller than the degree, it is recomputed 2 ** shift times finer,
    so the guess starts within 1/degree of the root, relatively.
    Further out, Newton's method only shrinks a guess by about 1/degree per step.
        _starting_guess(RationalNumber(2), 2)     -->  2
        _starting_guess(RationalNumber(3), 3000)  -->  2049/2048
    """
    numerator, denominator = radicand.fraction_parts()
    scaled = numerator * denominator ** (degree - 1)
    root = integer_nth_root(scaled, degree)
    shift = 0
    if root < degree - 1:
        shift = (degree - 1).bit_length() - root.bit_length() + 1
        root = integer_nth_root(scaled << (shift * degree), degree)
    return RationalNumber(SimpleFraction(root + 1, denominator << shift))


def newtons_method(radicand, degree, precision):
    """
    Approximate the degree-th root of a positive RationalNumber.

    Starting a little above the root, see _starting_guess(), iterate
        guess -= (guess ** degree - radicand) / (degree * guess ** (degree - 1))
    until two successive guesses differ by no more than 10 ** -precision.

    Guesses are kept to a bounded denominator, far finer than the tolerance.
    Newton's method corrects its own rounding, and exact guesses would double in size every step.

    Raises ConvergenceError after NEWTON_ITERATION_LIMIT iterations.
    """
    if not radicand.is_positive():
        raise DomainError("newtons_method() needs a positive radicand, not {}".format(radicand))
    if degree < 1:
        raise DomainError("newtons_method() degree must be 1 or more, not {}".format(degree))
    limit = tolerance(precision)
    scale = 10 ** (2 * precision + 2)
    one = RationalNumber.ONE
    previous = _starting_guess(radicand, degree)
    for iteration in range(1, NEWTON_ITERATION_LIMIT + 1):
        slope = degree * fast_exponentiation(previous, degree - 1, one)
        guess = previous - (fast_exponentiation(previous, degree, one) - radicand) / slope
        guess = _bounded(guess, scale)
        if abs(guess - previous) <= limit:
            logger.debug("Newton's method, root %d of %s, converged in %d iterations", degree, radicand, iteration)
            return guess
        previous = guess
    raise ConvergenceError("Root {degree} of {radicand} did not converge to {precision} digits in {limit} iterations".format(
        degree=degree,
        radicand=radicand,
        precision=precision,
        limit=NEWTON_ITERATION_LIMIT,
    ))


def pi_series(precision):
    """
    Rational approximation of pi from precision**2 terms of the Bailey-Borwein-Plouffe series.

        pi = sum over k of  1/16**k * (4/(8k+1) - 2/(8k+4) - 1/(8k+5) - 1/(8k+6))

    Each term adds more than one correct decimal digit,
    so precision**2 terms is plenty (but not tight) for precision digits.

    SEE:  BBP formula, https://en.wikipedia.org/wiki/Bailey%E2%80%93Borwein%E2%80%93Plouffe_formula
    """
    if precision < 1:
        raise DomainError("pi_series() precision must be 1 or more, not {}".format(precision))
    term_count = precision * precision
    total = RationalNumber.ZERO
    for k in range(term_count):
        eight_k = 8 * k
        bracket = (
            RationalNumber(SimpleFraction(4, eight_k + 1))
            - RationalNumber(SimpleFraction(2, eight_k + 4))
            - RationalNumber(SimpleFraction(1, eight_k + 5))
            - RationalNumber(SimpleFraction(1, eight_k + 6))
        )
        total += bracket / 16 ** k
    logger.debug("Pi to %d digits summed %d terms", precision, term_count)
    return total
