"""Unit tests for the fee-inclusive amount calculation."""

import unittest
from decimal import Decimal
from fractions import Fraction

from voucher_engine.fees import FEE_DENOMINATOR, amount_with_fee


class AmountWithFeeTests(unittest.TestCase):
    def test_zero_fee_is_identity(self) -> None:
        for amount in (0, 1, 999, 10**30):
            self.assertEqual(amount_with_fee(amount, 0), amount)

    def test_negative_fee_treated_as_zero(self) -> None:
        self.assertEqual(amount_with_fee(1000, -0.05), 1000)

    def test_zero_amount_stays_zero(self) -> None:
        self.assertEqual(amount_with_fee(0, 0.5), 0)

    def test_one_percent_of_thousand(self) -> None:
        self.assertEqual(amount_with_fee(1000, 0.01), 1010)

    def test_two_percent_of_five_hundred(self) -> None:
        self.assertEqual(amount_with_fee(500, 0.02), 510)

    def test_fee_rounds_up(self) -> None:
        self.assertEqual(amount_with_fee(1, 0.01), 2)
        self.assertEqual(amount_with_fee(101, 0.01), 103)

    def test_sub_basis_point_precision_truncated(self) -> None:
        self.assertEqual(amount_with_fee(10_000, Decimal("0.00019")), 10_001)
        self.assertEqual(amount_with_fee(10_000, Decimal("0.00009")), 10_000)
        self.assertEqual(amount_with_fee(10_000, Fraction(3, 20000)), 10_001)

    def test_surcharge_is_minimal_ceiling(self) -> None:
        numerator = 100
        for amount in range(0, 5000, 7):
            surcharge = amount_with_fee(amount, 0.01) - amount
            self.assertGreaterEqual(surcharge * FEE_DENOMINATOR, amount * numerator)
            if surcharge > 0:
                self.assertLess((surcharge - 1) * FEE_DENOMINATOR, amount * numerator)

    def test_monotonic_in_amount(self) -> None:
        previous = amount_with_fee(0, 0.0125)
        for amount in range(1, 3000):
            current = amount_with_fee(amount, 0.0125)
            self.assertGreaterEqual(current, previous)
            self.assertGreaterEqual(current, amount)
            previous = current

    def test_large_amounts_exact(self) -> None:
        amount = 123_456_789_000_000_000_000
        self.assertEqual(amount_with_fee(amount, 0.01), amount + amount // 100)

    def test_non_finite_fee_rejected(self) -> None:
        for fee_percent in (float("inf"), float("-inf"), float("nan"), Decimal("NaN")):
            with self.assertRaises(ValueError):
                amount_with_fee(1000, fee_percent)

    def test_invalid_amounts_rejected(self) -> None:
        with self.assertRaises(ValueError):
            amount_with_fee(-1, 0.01)
        with self.assertRaises(TypeError):
            amount_with_fee(1.5, 0.01)
        with self.assertRaises(TypeError):
            amount_with_fee(True, 0.01)


if __name__ == "__main__":
    unittest.main()
