"""Unit tests for commission pricing and cent rounding."""

import math
from datetime import datetime

import pytest

from sitecalc.models.records import PricingCalculation
from sitecalc.pricing import (
    DEFAULT_RATES,
    CommissionRates,
    InvalidPricingInput,
    calculate_net_payout,
    calculate_pricing,
    get_commission_breakdown,
    get_final_price,
    round_to_cents,
)

# None of these land on a half cent after the 10% markup.
BASE_PRICES = [0.01, 1, 7.5, 19.99, 100, 1234.56, 99_999.99]


class TestRoundToCents:
    def test_rounds_half_away_from_zero(self):
        assert round_to_cents(0.125) == 0.13
        assert round_to_cents(-0.125) == -0.13

    def test_uses_decimal_representation(self):
        # float(1.005) is 1.00499999..., but the written value is 1.005
        assert round_to_cents(1.005) == 1.01
        assert round_to_cents(2.675) == 2.68

    def test_integers_pass_through(self):
        assert round_to_cents(42) == 42.0


class TestCalculatePricing:
    def test_reference_booking_of_100(self):
        assert calculate_pricing(100) == PricingCalculation(
            base_price=100,
            final_price=110,
            net_to_renter=93,
            platform_fee_total=10,
            contractor_fee=3,
            renter_fee=7,
        )

    @pytest.mark.parametrize("base_price", BASE_PRICES)
    def test_final_price_matches_accessor(self, base_price):
        pricing = calculate_pricing(base_price)
        assert pricing.final_price == get_final_price(base_price)
        assert pricing.final_price == round(base_price * 1.10, 2)

    @pytest.mark.parametrize("base_price", BASE_PRICES)
    def test_fee_split_sums_to_platform_fee(self, base_price):
        pricing = calculate_pricing(base_price)
        assert pricing.contractor_fee + pricing.renter_fee == pytest.approx(
            pricing.platform_fee_total, abs=0.01
        )

    def test_half_cent_final_price_rounds_up(self):
        # 0.05 * 1.10 = 0.055
        assert calculate_pricing(0.05).final_price == 0.06

    def test_net_payout_is_net_to_renter(self):
        assert calculate_net_payout(250) == calculate_pricing(250).net_to_renter == 232.5

    def test_custom_rates(self):
        rates = CommissionRates(total=0.12, contractor=0.04, renter=0.08)
        pricing = calculate_pricing(100, rates)
        assert pricing.final_price == 112
        assert pricing.net_to_renter == 92
        assert get_final_price(100, rates) == 112

    def test_repeated_calls_are_identical(self):
        assert calculate_pricing(1234.56) == calculate_pricing(1234.56)

    @pytest.mark.parametrize(
        "bad_price", [0, -5, -0.01, math.inf, -math.inf, math.nan, True, "100", None]
    )
    def test_rejects_invalid_base_price(self, bad_price):
        with pytest.raises(InvalidPricingInput):
            calculate_pricing(bad_price)

    def test_invalid_input_is_value_error(self):
        with pytest.raises(ValueError, match="must be positive"):
            get_final_price(0)


class TestCommissionRates:
    def test_default_rates(self):
        assert DEFAULT_RATES.total == 0.10
        assert DEFAULT_RATES.contractor == 0.03
        assert DEFAULT_RATES.renter == 0.07

    def test_split_must_equal_total(self):
        with pytest.raises(ValueError, match="must equal total"):
            CommissionRates(total=0.10, contractor=0.05, renter=0.04)

    def test_rate_out_of_range_raises(self):
        with pytest.raises(ValueError, match="must be 0-1.0"):
            CommissionRates(total=1.5, contractor=0.5, renter=1.0)


class TestCommissionBreakdown:
    def test_breakdown_carries_pricing_and_rates(self):
        breakdown = get_commission_breakdown(100, "booking-42")
        assert breakdown.booking_id == "booking-42"
        assert breakdown.pricing == calculate_pricing(100)
        assert breakdown.total_commission_rate == 0.10
        assert breakdown.contractor_fee_rate == 0.03
        assert breakdown.renter_fee_rate == 0.07

    def test_generated_at_is_iso_timestamp(self):
        breakdown = get_commission_breakdown(100, "booking-42")
        parsed = datetime.fromisoformat(breakdown.generated_at)
        assert parsed.tzinfo is not None

    def test_equality_ignores_timestamp(self):
        first = get_commission_breakdown(100, "b-1", clock=lambda: "2024-01-01T00:00:00+00:00")
        second = get_commission_breakdown(100, "b-1", clock=lambda: "2025-06-30T12:00:00+00:00")
        assert first == second
        assert first.generated_at != second.generated_at

    def test_invalid_price_raises(self):
        with pytest.raises(InvalidPricingInput):
            get_commission_breakdown(-1, "b-1")
