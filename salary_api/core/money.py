"""
Money helpers.
All amounts are integer cents; these helpers cover the two places where a
non-integer value has to become (or be shown as) money.
"""

import math
from decimal import Decimal, ROUND_HALF_UP


def percent_of(amount_cents: int, rate: Decimal | int) -> int:
    """
    Floor of amount * rate / 100, computed exactly.

    The rate is turned into an integer ratio so fractional rates such as
    20.5% never pass through floating point.
    """
    numerator, denominator = Decimal(rate).as_integer_ratio()
    return (amount_cents * numerator) // (denominator * 100)


def round_half_up_cents(value: float | Decimal | int | None) -> int:
    """Round an averaged cent value to the nearest whole cent (.5 rounds up)."""
    if value is None:
        return 0
    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def format_cents_as_dollars(cents: int | float) -> str:
    """
    Format cents for display.

    >>> format_cents_as_dollars(12345)
    '$123.45'
    """
    if isinstance(cents, float) and not math.isfinite(cents):
        return "$0.00"
    dollars = Decimal(str(cents)) / 100
    return f"${dollars:.2f}"
