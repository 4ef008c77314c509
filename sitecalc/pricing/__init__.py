from .commission import (
    CONTRACTOR_FEE_RATE,
    DEFAULT_RATES,
    RENTER_FEE_RATE,
    TOTAL_COMMISSION_RATE,
    CommissionRates,
    InvalidPricingInput,
    calculate_net_payout,
    calculate_pricing,
    get_commission_breakdown,
    get_final_price,
)
from .rounding import round_to_cents

__all__ = [
    "CONTRACTOR_FEE_RATE",
    "DEFAULT_RATES",
    "RENTER_FEE_RATE",
    "TOTAL_COMMISSION_RATE",
    "CommissionRates",
    "InvalidPricingInput",
    "calculate_net_payout",
    "calculate_pricing",
    "get_commission_breakdown",
    "get_final_price",
    "round_to_cents",
]
