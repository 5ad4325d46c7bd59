"""
Parse a numeral into an exact RationalNumber.

    parse_rational('3.14')        157/50
    parse_rational('-1.5e3')      -1500
    parse_rational('2.5E-1')      1/4
    parse_rational('ff', 16)      255
    parse_rational('1_000')       1000
    parse_rational('1.2.3')       None

Grammar:  [sign] digits [. digits] [e [sign] decimal-digits]
Digits are case-insensitive.  Either side of the point may be empty, not both.
Underscores may separate digits.  Surrounding whitespace is ignored.
The value is mantissa * radix ** exponent, with no floating point anywhere.
"""

import string

from .errors import DomainError
from .fraction import SimpleFraction
from .rational import RationalNumber


DIGITS = string.digits + string.ascii_lowercase
EXPONENT_MARKER = 'e'
EXPONENT_RADIX_MAX = 14
# NOTE:  From radix 15 up, 'e' is a digit, so those radixes have no exponent part.


def _split_sign(text):
    """(is_negative, rest) for an optional leading + or -"""
    if text[:1] in ('+', '-'):
        return text[0] == '-', text[1:]
    return False, text


def _digits_value(digits, radix):
    """int for a run of digits in this radix, or None if there are none or any are invalid."""
    if digits.startswith('_') or digits.endswith('_') or '__' in digits:
        return None
    digits = digits.replace('_', '')
    valid = DIGITS[:radix]
    if digits == '' or any(digit not in valid for digit in digits):
        return None
    return int(digits, radix)


def parse_rational(text, radix=10):
    """
    The RationalNumber for a numeral, or None if the numeral is malformed.

    Malformed includes:  no digits, stray characters, more than one '.', more than one 'e',
    a missing exponent, a sign in the wrong place.
    """
    if not 2 <= radix <= len(DIGITS):
        raise DomainError("Radix {} is not between 2 and {}".format(radix, len(DIGITS)))
    text = text.strip().lower()
    is_negative, text = _split_sign(text)

    exponent = 0
    if radix <= EXPONENT_RADIX_MAX and EXPONENT_MARKER in text:
        if text.count(EXPONENT_MARKER) > 1:
            return None
        text, exponent_text = text.split(EXPONENT_MARKER)
        exponent_is_negative, exponent_digits = _split_sign(exponent_text)
        exponent = _digits_value(exponent_digits, 10)
        if exponent is None:
            return None
        if exponent_is_negative:
            exponent = -exponent

    if text.count('.') > 1:
        return None
    if text.endswith('.0') and len(text) > 2:
        text = text[:-2]
    whole_digits, _, fraction_digits = text.partition('.')
    if whole_digits == '' and fraction_digits == '':
        return None
    whole = _digits_value(whole_digits, radix) if whole_digits else 0
    fraction = _digits_value(fraction_digits, radix) if fraction_digits else 0
    if whole is None or fraction is None:
        return None

    places = len(fraction_digits.replace('_', ''))
    mantissa = whole * radix ** places + fraction
    if is_negative:
        mantissa = -mantissa
    exponent -= places
    if exponent >= 0:
        return RationalNumber(mantissa * radix ** exponent)
    return RationalNumber(SimpleFraction(mantissa, radix ** -exponent))
