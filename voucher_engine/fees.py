"""Fee-inclusive amount calculation in basis points."""

import math
from decimal import Decimal
from fractions import Fraction
from typing import Union

FEE_DENOMINATOR = 10_000

FeePercent = Union[float, int, Decimal, Fraction]


def amount_with_fee(amount: int, max_fee_percent: FeePercent) -> int:
    """Return ``amount`` plus the maximum fee, rounded up to the smallest unit.

    The fee percentage is a fraction (``0.01`` is 1%) truncated to whole basis
    points before it is applied. Ceiling division guarantees the result always
    covers the fee, overshooting by at most one unit.
    """
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise TypeError("Amount must be an integer.")
    if amount < 0:
        raise ValueError("Amount must be non-negative.")
    if not math.isfinite(max_fee_percent):
        raise ValueError("Fee percent must be a finite number.")
    if max_fee_percent <= 0:
        return amount

    numerator = math.floor(max_fee_percent * FEE_DENOMINATOR)
    fee_amount = (amount * numerator + FEE_DENOMINATOR - 1) // FEE_DENOMINATOR
    return amount + fee_amount
