"""Money helpers shared by every calculator.

All emitted money values are quantized to cents with banker's rounding
(ROUND_HALF_EVEN), the one rounding rule used across the engine.
"""

from decimal import Decimal, ROUND_HALF_EVEN
from typing import Union

CENTS = Decimal("0.01")
ZERO = Decimal("0")

MoneyInput = Union[Decimal, int, float, str]


def to_decimal(value: MoneyInput) -> Decimal:
    """Coerce a caller-supplied amount to Decimal without float artifacts."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def to_money(value: MoneyInput) -> Decimal:
    """Quantize an amount to cents using ROUND_HALF_EVEN."""
    return to_decimal(value).quantize(CENTS, rounding=ROUND_HALF_EVEN)
