"""
Testing exactnum power.py irrational.py and real.py
"""

import fractions
import unittest
from unittest import mock

from exactnum import power
from exactnum.errors import ConvergenceError, DomainError, UnsupportedOperation
from exactnum.fraction import SimpleFraction
from exactnum.irrational import IrrationalNumber
from exactnum.leaf import Integer, NaturalNumber
from exactnum.rational import RationalNumber
from exactnum.real import RealNumber


Fraction = fractions.Fraction

# 1.414_213_562_373_095_048_801_688_724_209_698_078_569_671_875_376_9
SQRT_2_AT_42 = Fraction(
    4946041176255201878775086487573351061418968498177,
    3497379255757941172020851852070562919437964212608,
)

PI_AT_4 = Fraction(
    28471243807120253377792333689239912281715167328354127149,
    9062678375755402859802473818588507977517344680312832000,
)

PI_AT_7 = Fraction(
    1022106682044067297403201052276861069586250349291792321898473475715381387709118950975150502004180168210647407599239932900278538570748895594356938374349309451257304252258335461404397923,
    325346661629138981888859585616624097131341482665908711624370010607163428908952025902393288237061364105796861812959748504364064413740358063608719466443670110351928054410921402957824000,
)

PI_DIGITS = Fraction('3.14159265358979323846264338327950288419716939937510582')


class PowerTests(unittest.TestCase):

    def test_tolerance(self):
        self.assertEqual(Fraction(1, 1000), power.tolerance(3))
        self.assertEqual(1, power.tolerance(0))
        with self.assertRaises(DomainError):
            power.tolerance(-1)

    def test_fast_exponentiation(self):
        one = RationalNumber.ONE
        self.assertEqual(1024, power.fast_exponentiation(RationalNumber(2), 10, one))
        self.assertEqual(Fraction(8, 27), power.fast_exponentiation(RationalNumber(Fraction(2, 3)), 3, one))
        self.assertEqual(-27, power.fast_exponentiation(RationalNumber(-3), 3, one))
        self.assertIs(one, power.fast_exponentiation(RationalNumber(7), 0, one))
        self.assertEqual(243, power.fast_exponentiation(3, 5, 1))
        self.assertEqual(2**1000, power.fast_exponentiation(2, 1000, 1))

    def test_fast_exponentiation_negative_exponent(self):
        with self.assertRaises(DomainError):
            power.fast_exponentiation(RationalNumber(2), -1, RationalNumber.ONE)

    def test_integer_nth_root(self):
        self.assertEqual(3, power.integer_nth_root(27, 3))
        self.assertEqual(2, power.integer_nth_root(26, 3))
        self.assertEqual(3, power.integer_nth_root(28, 3))
        self.assertEqual(0, power.integer_nth_root(0, 5))
        self.assertEqual(1, power.integer_nth_root(1, 5))
        self.assertEqual(2, power.integer_nth_root(2, 1))
        self.assertEqual(10**20, power.integer_nth_root(10**40, 2))
        self.assertEqual(10**20 - 1, power.integer_nth_root(10**40 - 1, 2))
        self.assertEqual(1, power.integer_nth_root(2**64 - 1, 64))
        self.assertEqual(2, power.integer_nth_root(2**64, 64))

    def test_integer_nth_root_domain(self):
        with self.assertRaises(DomainError):
            power.integer_nth_root(-1, 3)
        with self.assertRaises(DomainError):
            power.integer_nth_root(8, 0)

    def test_proper_root(self):
        self.assertEqual(3, power.proper_root(RationalNumber(27), 3))
        self.assertEqual(7, power.proper_root(RationalNumber(49), 2))
        self.assertEqual(2, power.proper_root(RationalNumber(256), 8))
        self.assertEqual(Fraction(2, 3), power.proper_root(RationalNumber(Fraction(8, 27)), 3))
        self.assertEqual(0, power.proper_root(RationalNumber(0), 3))
        self.assertIsNone(power.proper_root(RationalNumber(2), 2))
        self.assertIsNone(power.proper_root(RationalNumber(Fraction(1, 2)), 2))
        self.assertIsNone(power.proper_root(RationalNumber(Fraction(4, 3)), 2))

    def test_proper_root_negative(self):
        with self.assertRaises(DomainError):
            power.proper_root(RationalNumber(-8), 3)

    def test_newtons_method_square_root_2(self):
        self.assertEqual(SQRT_2_AT_42, power.newtons_method(RationalNumber(2), 2, 42))

    def test_newtons_method_low_precision(self):
        self.assertEqual(Fraction(665857, 470832), power.newtons_method(RationalNumber(2), 2, 5))

    def test_newtons_method_large_radicand(self):
        root = power.newtons_method(RationalNumber(10**30), 2, 10)
        self.assertTrue(abs(root - 10**15) <= power.tolerance(10))

    def test_newtons_method_huge_radicand(self):
        root = power.newtons_method(RationalNumber(2 * 10**700), 2, 10)
        self.assertTrue(14142135623730950488 * 10**331 < root < 14142135623730950489 * 10**331)

    def test_newtons_method_high_degree(self):
        root = power.newtons_method(RationalNumber(3), 3000, 5)
        # NOTE:  3 ** (1/3000) is 1.000366271...
        self.assertTrue(Fraction(1000366, 10**6) < root < Fraction(1000367, 10**6))

    def test_starting_guess(self):
        self.assertEqual(2, power._starting_guess(RationalNumber(2), 2))
        self.assertEqual(Fraction(2049, 2048), power._starting_guess(RationalNumber(3), 3000))
        self.assertEqual(Fraction(2, 3), power._starting_guess(RationalNumber(Fraction(1, 3)), 2))
        self.assertEqual(10**15 + 1, power._starting_guess(RationalNumber(10**30), 2))

    def test_newtons_method_cube_root(self):
        root = power.newtons_method(RationalNumber(2), 3, 20)
        cube = root * root * root
        self.assertTrue(abs(cube - 2) < power.tolerance(18))

    def test_newtons_method_domain(self):
        with self.assertRaises(DomainError):
            power.newtons_method(RationalNumber(0), 2, 5)
        with self.assertRaises(DomainError):
            power.newtons_method(RationalNumber(-2), 2, 5)

    def test_newtons_method_iteration_limit(self):
        with mock.patch.object(power, 'NEWTON_ITERATION_LIMIT', 2):
            with self.assertRaises(ConvergenceError):
                power.newtons_method(RationalNumber(2), 2, 42)

    def test_pi_series(self):
        self.assertEqual(PI_AT_4, power.pi_series(4))

    def test_pi_series_default_precision(self):
        self.assertEqual(PI_AT_7, power.pi_series(power.PI_PRECISION_DEFAULT))

    def test_pi_series_accuracy(self):
        for precision in (1, 2, 3, 5):
            self.assertTrue(abs(power.pi_series(precision) - PI_DIGITS) < power.tolerance(precision))

    def test_pi_series_domain(self):
        with self.assertRaises(DomainError):
            power.pi_series(0)


class IrrationalTests(unittest.TestCase):

    def test_square_root(self):
        root = IrrationalNumber.square_root(2)
        self.assertEqual(SQRT_2_AT_42, root.approximation)
        self.assertEqual(IrrationalNumber.Formula.NTH_ROOT, root.formula)
        self.assertEqual(2, root.degree)
        self.assertEqual(2, root.radicand)
        self.assertEqual(42, root.precision)
        self.assertIsNone(root.exact)
        self.assertTrue(root.is_positive())

    def test_str_repr(self):
        self.assertEqual('²√2', str(IrrationalNumber.square_root(2)))
        self.assertEqual('³√5', str(IrrationalNumber.cube_root(5, 10)))
        self.assertEqual('¹²√7', str(IrrationalNumber.nth_root(12, 7, 5)))
        self.assertEqual('²√(1/2)', str(IrrationalNumber.square_root(Fraction(1, 2), 5)))
        self.assertEqual('IrrationalNumber.nth_root(2, 2, 42)', repr(IrrationalNumber.square_root(2)))
        self.assertEqual('IrrationalNumber.pi(4)', repr(IrrationalNumber.pi(4)))
        self.assertEqual('-IrrationalNumber.pi(4)', repr(IrrationalNumber.pi(4, is_negative=True)))

    def test_exact_root(self):
        root = IrrationalNumber.square_root(49)
        self.assertEqual(7, root.exact)
        self.assertEqual(7, root.approximation)

    def test_odd_root_of_negative(self):
        root = IrrationalNumber.cube_root(-8)
        self.assertEqual(-2, root.exact)
        self.assertEqual(-2, root.approximation)
        self.assertEqual(8, root.radicand)
        self.assertTrue(root.is_negative())
        self.assertEqual('-³√8', str(root))

    def test_root_domain(self):
        with self.assertRaises(DomainError):
            IrrationalNumber.square_root(-4)
        with self.assertRaises(DomainError):
            IrrationalNumber.nth_root(0, 4)
        with self.assertRaises(DomainError):
            IrrationalNumber.nth_root(Fraction(1, 2), 4)
        with self.assertRaises(UnsupportedOperation):
            IrrationalNumber.square_root(IrrationalNumber.square_root(2))

    def test_negation_keeps_formula(self):
        root = IrrationalNumber.square_root(2)
        negative = -root
        self.assertEqual('-²√2', str(negative))
        self.assertEqual(-root.approximation, negative.approximation)
        self.assertTrue(negative.is_negative())
        self.assertFalse(negative.is_positive())
        self.assertEqual(root, -negative)
        self.assertEqual(root, abs(negative))
        self.assertEqual(root, negative.magnitude)
        self.assertIs(root, +root)

    def test_pi(self):
        pi = IrrationalNumber.pi(4)
        self.assertEqual(PI_AT_4, pi.approximation)
        self.assertEqual('π', str(pi))
        self.assertIsNone(pi.degree)
        self.assertIsNone(pi.radicand)
        self.assertEqual('-π', str(-pi))
        self.assertEqual(-PI_AT_4, (-pi).approximation)
        self.assertEqual(-PI_AT_4, IrrationalNumber.pi(4, is_negative=True).approximation)

    def test_precision_defaults(self):
        self.assertEqual(7, IrrationalNumber.pi().precision)
        self.assertEqual(42, IrrationalNumber.square_root(3).precision)
        self.assertAlmostEqual(3.14159265, float(IrrationalNumber.pi()))

    def test_comparison(self):
        root = IrrationalNumber.square_root(2)
        self.assertTrue(1 < root)
        self.assertTrue(root < 2)
        self.assertTrue(root > RationalNumber(Fraction(141, 100)))
        self.assertTrue(root <= NaturalNumber(2))
        self.assertTrue(root >= root)
        self.assertTrue(IrrationalNumber.pi() > IrrationalNumber.cube_root(27, 5))

    def test_equality_uses_approximation(self):
        root = IrrationalNumber.square_root(2)
        self.assertEqual(RationalNumber(SQRT_2_AT_42), root)
        self.assertEqual(hash(RationalNumber(SQRT_2_AT_42)), hash(root))
        self.assertNotEqual(root, IrrationalNumber.square_root(2, 10))
        self.assertNotEqual(root, 'root')

    def test_arithmetic_unsupported(self):
        root = IrrationalNumber.square_root(2)
        pi = IrrationalNumber.pi(3)
        with self.assertRaises(UnsupportedOperation):
            root + 1
        with self.assertRaises(UnsupportedOperation):
            1 * pi
        with self.assertRaises(UnsupportedOperation):
            pi / pi
        with self.assertRaises(UnsupportedOperation):
            RationalNumber(1) - root
        with self.assertRaises(NotImplementedError):
            root * Integer(2)

    def test_arithmetic_with_strangers(self):
        with self.assertRaises(TypeError):
            IrrationalNumber.square_root(2) + 'x'


class RealTests(unittest.TestCase):

    def test_rational(self):
        x = RealNumber(Fraction(1, 2))
        self.assertTrue(x.is_rational())
        self.assertFalse(x.is_irrational())
        self.assertIs(SimpleFraction, x.classification)
        self.assertEqual((1, 2), x.fraction_parts())
        self.assertEqual('RealNumber(SimpleFraction(1, 2))', repr(x))
        self.assertEqual('RealNumber(-3)', repr(RealNumber(-3)))

    def test_irrational(self):
        x = RealNumber(IrrationalNumber.square_root(2))
        self.assertTrue(x.is_irrational())
        self.assertIs(IrrationalNumber, x.classification)
        self.assertIsNone(x.fraction_parts())
        self.assertEqual(SQRT_2_AT_42, x.approximation)
        self.assertEqual('²√2', str(x))
        self.assertEqual('RealNumber(IrrationalNumber.nth_root(2, 2, 42))', repr(x))

    def test_exact_irrational_narrows(self):
        x = RealNumber(IrrationalNumber.square_root(49))
        self.assertTrue(x.is_rational())
        self.assertIs(NaturalNumber, x.classification)
        self.assertEqual(7, x)

    def test_arithmetic(self):
        total = RealNumber(2) + RealNumber(3)
        self.assertIsInstance(total, RealNumber)
        self.assertEqual(5, total)
        self.assertIs(NaturalNumber, total.classification)
        self.assertIs(Integer, (RealNumber(2) - 3).classification)
        self.assertEqual(Fraction(2, 3), 2 / RealNumber(3))

    def test_irrational_arithmetic_unsupported(self):
        root = RealNumber(IrrationalNumber.square_root(2))
        with self.assertRaises(UnsupportedOperation):
            root + 1
        with self.assertRaises(UnsupportedOperation):
            RealNumber(2) * root

    def test_irrational_negation(self):
        negative = -RealNumber(IrrationalNumber.square_root(2))
        self.assertTrue(negative.is_irrational())
        self.assertTrue(negative.is_negative())
        self.assertEqual('-²√2', str(negative))
        self.assertTrue(abs(negative).is_positive())

    def test_comparison(self):
        root = RealNumber(IrrationalNumber.square_root(2))
        self.assertTrue(root < RealNumber(2))
        self.assertTrue(root > 1)
        self.assertTrue(RealNumber(-1) < 0)
        self.assertEqual(RealNumber(3), RealNumber(RationalNumber(3)))

    def test_type_error(self):
        with self.assertRaises(TypeError):
            RealNumber('x')
        with self.assertRaises(TypeError):
            RealNumber(1.5)

    def test_conversions(self):
        self.assertEqual(-3, int(RealNumber(Fraction(-7, 2))))
        self.assertEqual(1, int(RealNumber(IrrationalNumber.square_root(2))))
        self.assertAlmostEqual(1.41421356, float(RealNumber(IrrationalNumber.square_root(2))))
        self.assertFalse(RealNumber.ZERO)
        self.assertTrue(RealNumber.ONE)


if __name__ == '__main__':
    unittest.main()
