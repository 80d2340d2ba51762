"""Money helpers. All amounts are Decimals with two fraction digits."""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any, Iterable

CENTS = Decimal("0.01")
ZERO = Decimal("0.00")


def to_money(value: Any) -> Decimal:
    """
    Coerce a store value (Decimal, int, float, numeric string or None) to a
    two-place Decimal. Floats go through str() so 0.1 stays 0.10.
    """
    if value is None or value == "":
        return ZERO
    if isinstance(value, Decimal):
        amount = value
    else:
        try:
            amount = Decimal(str(value))
        except InvalidOperation as e:
            raise ValueError(f"Not a monetary amount: {value!r}") from e
    return amount.quantize(CENTS, rounding=ROUND_HALF_UP)


def sum_money(amounts: Iterable[Any]) -> Decimal:
    """Exact sum of monetary amounts, quantized to cents."""
    total = ZERO
    for amount in amounts:
        total += to_money(amount)
    return total.quantize(CENTS, rounding=ROUND_HALF_UP)
