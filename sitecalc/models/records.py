"""Immutable value records passed between the repository, the calculators
and the API layer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from .enums import ConceptCategory, TradeType


def _as_float(value: Any, default: float = 0.0) -> float:
    if value is None or value == "":
        return default
    return float(value)


def _as_optional_float(value: Any) -> Optional[float]:
    if value is None or value == "":
        return None
    return float(value)


@dataclass(frozen=True)
class PricingCalculation:
    """Requester price and supplier payout derived from one base price."""

    base_price: float
    final_price: float
    net_to_renter: float
    platform_fee_total: float
    contractor_fee: float
    renter_fee: float


@dataclass(frozen=True)
class CommissionBreakdown:
    """Pricing for a single booking, stamped with the generation time."""

    booking_id: str
    pricing: PricingCalculation
    total_commission_rate: float
    contractor_fee_rate: float
    renter_fee_rate: float
    generated_at: str = field(compare=False)


@dataclass(frozen=True)
class ConceptForecast:
    concept_id: str
    site_id: str
    forecast_total_cost: float
    concept_name: Optional[str] = None

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> ConceptForecast:
        return cls(
            concept_id=str(row["concept_id"]),
            site_id=str(row["site_id"]),
            forecast_total_cost=_as_float(row.get("forecast_total_cost")),
            concept_name=row.get("concept_name"),
        )


@dataclass(frozen=True)
class ActualCostEntry:
    concept_id: str
    actual_cost: float
    logged_at: Optional[str] = None
    site_id: Optional[str] = None

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> ActualCostEntry:
        site_id = row.get("site_id")
        return cls(
            concept_id=str(row["concept_id"]),
            actual_cost=_as_float(row.get("actual_cost")),
            logged_at=row.get("logged_at"),
            site_id=str(site_id) if site_id is not None else None,
        )


@dataclass(frozen=True)
class CostComparison:
    concept_id: str
    actual_cost: float
    forecasted_cost: float
    variance: float
    variance_percent: float


@dataclass(frozen=True)
class SiteCostSummary:
    site_id: str
    total_actual: float
    total_forecasted: float
    total_variance: float
    over_budget_count: int
    under_budget_count: int
    concept_count: int


@dataclass(frozen=True)
class ROIEstimate:
    site_id: str
    expected_return: float
    total_cost: float
    roi_percent: float
    net_profit: float
    profit_margin_percent: float


@dataclass(frozen=True)
class Concept:
    """A scope-of-work item within a site, as consumed by the labor estimator."""

    id: str
    name: str
    status: Optional[str] = None
    site_id: Optional[str] = None
    planned_quantity: float = 0.0
    unit_price: float = 0.0
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    progress: Optional[float] = None

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> Concept:
        # Older rows carry progress_percentage instead of progress.
        progress = row.get("progress")
        if progress is None:
            progress = row.get("progress_percentage")
        site_id = row.get("site_id")
        return cls(
            id=str(row["id"]),
            name=row.get("name") or "",
            status=row.get("status"),
            site_id=str(site_id) if site_id is not None else None,
            planned_quantity=_as_float(row.get("planned_quantity")),
            unit_price=_as_float(row.get("unit_price")),
            start_date=row.get("start_date") or None,
            end_date=row.get("end_date") or None,
            progress=_as_optional_float(progress),
        )


@dataclass(frozen=True)
class LaborDemandForecast:
    id: str
    site_id: str
    concept_id: str
    category: ConceptCategory
    trade_type: TradeType
    predicted_workers: int
    confidence_score: float
    forecast_date: Optional[str] = None
