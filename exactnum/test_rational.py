"""
Testing exactnum rational.py
"""

import fractions
import unittest

from exactnum.errors import DivisionByZero
from exactnum.fraction import SimpleFraction
from exactnum.leaf import Integer, NaturalNumber, WholeNumber
from exactnum.rational import NARROWEST_FIRST, PROMOTION, QUOTIENT_PROMOTION, RationalNumber


Fraction = fractions.Fraction


class RationalTests(unittest.TestCase):

    def assertKind(self, kind, x):
        self.assertIs(kind, x.kind, "{} is {}, not {}".format(x, x.kind.__name__, kind.__name__))

    def binary_op(self, op, output, output_kind, input_left, input_right):
        """
        Check a binary operator three ways:  RationalNumber with RationalNumber,
        leaf with leaf, and RationalNumber with the right operand as it came.
        """
        result = op(RationalNumber(input_left), RationalNumber(input_right))
        self.assertIsInstance(result, RationalNumber)
        self.assertEqual(output, result)
        self.assertKind(output_kind, result)
        self.assertEqual(output, op(RationalNumber(input_left).value, RationalNumber(input_right).value))
        self.assertEqual(output, op(RationalNumber(input_left), input_right))


class RationalBasicTests(RationalTests):

    def test_canonical_kinds(self):
        self.assertKind(NaturalNumber, RationalNumber(5))
        self.assertKind(WholeNumber, RationalNumber(0))
        self.assertKind(Integer, RationalNumber(-5))
        self.assertKind(SimpleFraction, RationalNumber(Fraction(1, 2)))
        self.assertKind(NaturalNumber, RationalNumber(SimpleFraction(4, 2)))
        self.assertKind(WholeNumber, RationalNumber(Integer(0)))
        self.assertKind(Integer, RationalNumber(SimpleFraction(-4, 2)))

    def test_canonicalize_idempotent(self):
        for leaf in (Integer(7), Integer(0), SimpleFraction(-3, 9), WholeNumber(12), SimpleFraction(8, 4)):
            once = RationalNumber.canonicalize(leaf)
            twice = RationalNumber.canonicalize(once)
            self.assertIs(type(once), type(twice))
            self.assertEqual(once, twice)
            self.assertEqual(leaf, once)

    def test_default_is_zero(self):
        self.assertEqual(0, RationalNumber())
        self.assertKind(WholeNumber, RationalNumber())

    def test_copy(self):
        x = RationalNumber(Fraction(2, 3))
        self.assertEqual(x, RationalNumber(x))
        self.assertKind(SimpleFraction, RationalNumber(x))

    def test_type_error(self):
        with self.assertRaises(TypeError):
            RationalNumber('5')
        with self.assertRaises(TypeError):
            RationalNumber(0.5)
        with self.assertRaises(TypeError):
            RationalNumber(True)

    def test_try_from(self):
        self.assertIsNone(RationalNumber.try_from('x'))
        self.assertIsNone(RationalNumber.try_from(1.5))
        self.assertEqual(Fraction(1, 2), RationalNumber.try_from(Fraction(2, 4)))
        self.assertEqual(3, RationalNumber.try_from(Integer(3)))

    def test_promotion_table_is_complete(self):
        self.assertEqual(16, len(PROMOTION))
        self.assertEqual(set(PROMOTION), set(QUOTIENT_PROMOTION))
        for (left, right), common in PROMOTION.items():
            self.assertIs(common, left if left.RANK >= right.RANK else right)
        self.assertEqual((NaturalNumber, WholeNumber, Integer, SimpleFraction), NARROWEST_FIRST)

    def test_parts(self):
        x = RationalNumber(Fraction(-6, 4))
        self.assertEqual(-3, x.numerator)
        self.assertEqual(2, x.denominator)
        self.assertEqual((-3, 2), x.fraction_parts())
        self.assertEqual((5, 1), RationalNumber(5).fraction_parts())

    def test_predicates(self):
        self.assertTrue(RationalNumber(0).is_zero())
        self.assertTrue(RationalNumber(-1).is_negative())
        self.assertTrue(RationalNumber(Fraction(1, 9)).is_positive())
        self.assertTrue(RationalNumber(-4).is_integral())
        self.assertFalse(RationalNumber(Fraction(1, 4)).is_integral())

    def test_is_repeating(self):
        self.assertTrue(RationalNumber(Fraction(1, 3)).is_repeating())
        self.assertFalse(RationalNumber(Fraction(1, 4)).is_repeating())
        self.assertFalse(RationalNumber(5).is_repeating())

    def test_str_repr(self):
        self.assertEqual('-1/2', str(RationalNumber(Fraction(-1, 2))))
        self.assertEqual('5', str(RationalNumber(5)))
        self.assertEqual('RationalNumber(SimpleFraction(-1, 2))', repr(RationalNumber(Fraction(-1, 2))))
        self.assertEqual('RationalNumber(NaturalNumber(5))', repr(RationalNumber(5)))
        self.assertEqual('RationalNumber(WholeNumber(0))', repr(RationalNumber(0)))

    def test_hash(self):
        self.assertEqual(hash(Fraction(1, 3)), hash(RationalNumber(Fraction(1, 3))))
        self.assertEqual(hash(-7), hash(RationalNumber(-7)))
        self.assertEqual(1, len({RationalNumber(2), 2, Fraction(4, 2), NaturalNumber(2)}))

    def test_conversions(self):
        self.assertEqual(-3, int(RationalNumber(Fraction(-7, 2))))
        self.assertEqual(3, int(RationalNumber(Fraction(7, 2))))
        self.assertEqual(0.25, float(RationalNumber(Fraction(1, 4))))
        self.assertFalse(RationalNumber(0))
        self.assertTrue(RationalNumber(Fraction(-1, 100)))

    def test_unary(self):
        self.assertKind(Integer, -RationalNumber(5))
        self.assertKind(NaturalNumber, -RationalNumber(-5))
        self.assertKind(WholeNumber, -RationalNumber(0))
        self.assertEqual(Fraction(1, 2), abs(RationalNumber(Fraction(-1, 2))))
        self.assertEqual(5, RationalNumber(-5).magnitude)
        self.assertKind(NaturalNumber, RationalNumber(-5).magnitude)
        x = RationalNumber(3)
        self.assertIs(x, +x)

    def test_reciprocal(self):
        self.assertEqual(Fraction(-3, 2), RationalNumber(Fraction(-2, 3)).reciprocal)
        self.assertKind(SimpleFraction, RationalNumber(2).reciprocal)
        self.assertKind(NaturalNumber, RationalNumber(Fraction(1, 2)).reciprocal)
        with self.assertRaises(DivisionByZero):
            _ = RationalNumber(0).reciprocal

    def test_constants(self):
        self.assertKind(WholeNumber, RationalNumber.ZERO)
        self.assertKind(NaturalNumber, RationalNumber.ONE)


class RationalMathTests(RationalTests):

    def test_canonical_sum_to_zero(self):
        self.binary_op(lambda a, b: a + b, 0, WholeNumber, 5, -5)
        self.binary_op(lambda a, b: a + b, 0, WholeNumber, Fraction(-1, 2), Fraction(1, 2))
        self.binary_op(lambda a, b: a - b, 0, WholeNumber, 5, 5)

    def test_add(self):
        self.binary_op(lambda a, b: a + b, 8, NaturalNumber, 5, 3)
        self.binary_op(lambda a, b: a + b, 2, NaturalNumber, 5, -3)
        self.binary_op(lambda a, b: a + b, -2, Integer, 3, -5)
        self.binary_op(lambda a, b: a + b, 3, NaturalNumber, 0, 3)
        self.binary_op(lambda a, b: a + b, Fraction(11, 2), SimpleFraction, 5, Fraction(1, 2))
        self.binary_op(lambda a, b: a + b, Fraction(5, 6), SimpleFraction, Fraction(1, 2), Fraction(1, 3))
        self.binary_op(lambda a, b: a + b, 2**100 + 1, NaturalNumber, 2**100, 1)

    def test_add_mixed_leaves(self):
        total = NaturalNumber(5) + WholeNumber(3)
        self.assertEqual(8, total)
        self.assertKind(NaturalNumber, total)

    def test_sub(self):
        self.binary_op(lambda a, b: a - b, -3, Integer, 2, 5)
        self.binary_op(lambda a, b: a - b, 1, NaturalNumber, Fraction(3, 2), Fraction(1, 2))
        self.binary_op(lambda a, b: a - b, Fraction(1, 6), SimpleFraction, Fraction(1, 2), Fraction(1, 3))
        self.binary_op(lambda a, b: a - b, 10, NaturalNumber, 5, -5)

    def test_mul(self):
        self.binary_op(lambda a, b: a * b, 6, NaturalNumber, -2, -3)
        self.binary_op(lambda a, b: a * b, -6, Integer, -2, 3)
        self.binary_op(lambda a, b: a * b, 0, WholeNumber, 0, 5)
        self.binary_op(lambda a, b: a * b, 2, NaturalNumber, Fraction(2, 3), 3)
        self.binary_op(lambda a, b: a * b, Fraction(-1, 6), SimpleFraction, Fraction(1, 2), Fraction(-1, 3))

    def test_div(self):
        self.binary_op(lambda a, b: a / b, 3, NaturalNumber, 6, 2)
        self.binary_op(lambda a, b: a / b, Fraction(-1, 2), SimpleFraction, 1, -2)
        self.binary_op(lambda a, b: a / b, -2, Integer, -6, 3)
        self.binary_op(lambda a, b: a / b, 0, WholeNumber, 0, 5)
        self.binary_op(lambda a, b: a / b, Fraction(3, 2), SimpleFraction, Fraction(1, 2), Fraction(1, 3))

    def test_div_by_zero(self):
        with self.assertRaises(DivisionByZero):
            RationalNumber(1) / 0
        with self.assertRaises(DivisionByZero):
            RationalNumber(1) / WholeNumber(0)
        with self.assertRaises(ZeroDivisionError):
            RationalNumber(Fraction(1, 2)) / RationalNumber.ZERO

    def test_reflected(self):
        self.assertEqual(3, 1 + RationalNumber(2))
        self.assertKind(Integer, 1 - RationalNumber(2))
        self.assertEqual(Fraction(1, 2), 1 / RationalNumber(2))
        self.assertEqual(Fraction(3, 4), Fraction(1, 4) * RationalNumber(3))

    def test_floats_are_not_mixed(self):
        with self.assertRaises(TypeError):
            RationalNumber(1) + 0.5
        with self.assertRaises(TypeError):
            0.5 * RationalNumber(1)
        with self.assertRaises(TypeError):
            RationalNumber(1) < 'x'

    def test_comparison(self):
        self.assertTrue(RationalNumber(1) > RationalNumber(Fraction(2, 3)))
        self.assertTrue(RationalNumber(-1) < RationalNumber(0))
        self.assertTrue(RationalNumber(Fraction(-1, 2)) < Integer(0))
        self.assertTrue(RationalNumber(2) <= 2)
        self.assertTrue(RationalNumber(2) >= Fraction(4, 2))
        self.assertFalse(RationalNumber(2) < 2)
        self.assertTrue(1 < RationalNumber(Fraction(3, 2)))
        self.assertTrue(RationalNumber(-10**50) < RationalNumber(Fraction(-1, 10**50)))

    def test_equality(self):
        self.assertEqual(RationalNumber(Fraction(1, 2)), Fraction(2, 4))
        self.assertNotEqual(RationalNumber(Fraction(1, 2)), Fraction(1, 3))
        self.assertNotEqual(RationalNumber(1), 'one')


if __name__ == '__main__':
    unittest.main()
