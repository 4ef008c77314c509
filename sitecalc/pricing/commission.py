"""Commission pricing for machinery and labor bookings.

The platform commission is added on top of the supplier's base price and
split into a contractor fee and a renter fee. Every monetary value is derived
from the base price alone and rounded to cents with ``round_to_cents``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal
from numbers import Real
from typing import Callable

from sitecalc.models.records import CommissionBreakdown, PricingCalculation

from .rounding import round_to_cents, to_decimal

TOTAL_COMMISSION_RATE = 0.10
CONTRACTOR_FEE_RATE = 0.03
RENTER_FEE_RATE = 0.07


class InvalidPricingInput(ValueError):
    """Raised for a base price that is not a positive, finite number."""


@dataclass(frozen=True)
class CommissionRates:
    """Commission split. contractor + renter must equal total."""

    total: float = TOTAL_COMMISSION_RATE
    contractor: float = CONTRACTOR_FEE_RATE
    renter: float = RENTER_FEE_RATE

    def __post_init__(self) -> None:
        for name in ("total", "contractor", "renter"):
            rate = getattr(self, name)
            if not (0 <= rate < 1.0):
                raise ValueError(f"{name} commission rate must be 0-1.0, got {rate}")
        if to_decimal(self.contractor) + to_decimal(self.renter) != to_decimal(self.total):
            raise ValueError(
                f"contractor ({self.contractor}) + renter ({self.renter}) fee rates "
                f"must equal total commission rate ({self.total})"
            )


DEFAULT_RATES = CommissionRates()


def _validated_base(base_price: float) -> Decimal:
    if isinstance(base_price, bool) or not isinstance(base_price, (Real, Decimal)):
        raise InvalidPricingInput(f"base_price must be a number, got {base_price!r}")
    if not math.isfinite(base_price):
        raise InvalidPricingInput(f"base_price must be finite, got {base_price}")
    if base_price <= 0:
        raise InvalidPricingInput(f"base_price must be positive, got {base_price}")
    return to_decimal(base_price)


def calculate_pricing(
    base_price: float, rates: CommissionRates = DEFAULT_RATES
) -> PricingCalculation:
    """Price shown to the requester and payout to the supplier.

    calculate_pricing(100) -> final 110, net_to_renter 93, fees 3 + 7 = 10.
    """
    base = _validated_base(base_price)
    contractor_fee = base * to_decimal(rates.contractor)
    renter_fee = base * to_decimal(rates.renter)
    platform_fee = base * to_decimal(rates.total)

    return PricingCalculation(
        base_price=round_to_cents(base),
        final_price=round_to_cents(base + platform_fee),
        net_to_renter=round_to_cents(base - renter_fee),
        platform_fee_total=round_to_cents(platform_fee),
        contractor_fee=round_to_cents(contractor_fee),
        renter_fee=round_to_cents(renter_fee),
    )


def get_final_price(base_price: float, rates: CommissionRates = DEFAULT_RATES) -> float:
    return calculate_pricing(base_price, rates).final_price


def calculate_net_payout(base_price: float, rates: CommissionRates = DEFAULT_RATES) -> float:
    """Amount paid out to the supplying party after the renter fee."""
    return calculate_pricing(base_price, rates).net_to_renter


def _utc_now_iso() -> str:
    return datetime.now(tz=timezone.utc).isoformat()


def get_commission_breakdown(
    base_price: float,
    booking_id: str,
    rates: CommissionRates = DEFAULT_RATES,
    clock: Callable[[], str] = _utc_now_iso,
) -> CommissionBreakdown:
    """Pricing for one booking plus the rates applied and a generation timestamp."""
    return CommissionBreakdown(
        booking_id=booking_id,
        pricing=calculate_pricing(base_price, rates),
        total_commission_rate=rates.total,
        contractor_fee_rate=rates.contractor,
        renter_fee_rate=rates.renter,
        generated_at=clock(),
    )
