"""Cent rounding shared by every monetary calculation."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

CENT = Decimal("0.01")


def to_decimal(value: float | int | Decimal) -> Decimal:
    """Convert via the shortest decimal string so 1.005 stays 1.005."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def round_to_cents(value: float | int | Decimal) -> float:
    """Round to two decimal places, halves away from zero.

    >>> round_to_cents(1.005)
    1.01
    >>> round_to_cents(-2.675)
    -2.68
    """
    return float(to_decimal(value).quantize(CENT, rounding=ROUND_HALF_UP))
