"""Forecast vs actual cost comparison, site summary and ROI.

Pure functions over caller-supplied collections. All ratios guard a zero
denominator and return 0.
"""

from __future__ import annotations

import math
from typing import Iterable, Sequence

from sitecalc.models.enums import ComparisonSortField
from sitecalc.models.records import (
    ActualCostEntry,
    ConceptForecast,
    CostComparison,
    ROIEstimate,
    SiteCostSummary,
)


def _percent_of(numerator: float, denominator: float) -> float:
    if denominator > 0:
        return numerator / denominator * 100
    return 0.0


def _first_actual_cost(concept_id: str, cost_logs: Sequence[ActualCostEntry]) -> float:
    # First entry in collection order wins; later entries for the same
    # concept are ignored, regardless of logged_at.
    for entry in cost_logs:
        if entry.concept_id == concept_id:
            return entry.actual_cost
    return 0.0


def compare_cost(forecast: ConceptForecast, actual_cost: float) -> CostComparison:
    forecasted = forecast.forecast_total_cost
    variance = actual_cost - forecasted
    return CostComparison(
        concept_id=forecast.concept_id,
        actual_cost=actual_cost,
        forecasted_cost=forecasted,
        variance=variance,
        variance_percent=_percent_of(variance, forecasted),
    )


def compare_costs(
    site_id: str,
    forecasts: Iterable[ConceptForecast],
    cost_logs: Iterable[ActualCostEntry],
) -> list[CostComparison]:
    """One comparison per forecast of ``site_id``, in forecast order."""
    logs = list(cost_logs)
    return [
        compare_cost(forecast, _first_actual_cost(forecast.concept_id, logs))
        for forecast in forecasts
        if forecast.site_id == site_id
    ]


def get_site_summary(site_id: str, comparisons: Sequence[CostComparison]) -> SiteCostSummary:
    """Totals and over/under budget counts. Zero variance counts in neither."""
    total_actual = sum(c.actual_cost for c in comparisons)
    total_forecasted = sum(c.forecasted_cost for c in comparisons)
    return SiteCostSummary(
        site_id=site_id,
        total_actual=total_actual,
        total_forecasted=total_forecasted,
        total_variance=total_actual - total_forecasted,
        over_budget_count=sum(1 for c in comparisons if c.variance > 0),
        under_budget_count=sum(1 for c in comparisons if c.variance < 0),
        concept_count=len(comparisons),
    )


def calculate_roi(
    site_id: str,
    comparisons: Sequence[CostComparison],
    expected_revenue: float,
) -> ROIEstimate:
    """ROI = (revenue - cost) / cost * 100, where cost is the actual spend."""
    if not math.isfinite(expected_revenue):
        raise ValueError(f"expected_revenue must be finite, got {expected_revenue}")

    total_cost = sum(c.actual_cost for c in comparisons)
    net_profit = expected_revenue - total_cost
    # Margin divides by any nonzero revenue, negative included
    margin = net_profit / expected_revenue * 100 if expected_revenue != 0 else 0.0
    return ROIEstimate(
        site_id=site_id,
        expected_return=expected_revenue,
        total_cost=total_cost,
        roi_percent=_percent_of(net_profit, total_cost),
        net_profit=net_profit,
        profit_margin_percent=margin,
    )


def sort_comparisons(
    comparisons: Iterable[CostComparison],
    sort_field: ComparisonSortField = ComparisonSortField.CONCEPT_ID,
    ascending: bool = True,
) -> list[CostComparison]:
    """Stable sort for the comparison table."""
    field_name = ComparisonSortField(sort_field).value
    return sorted(
        comparisons,
        key=lambda c: getattr(c, field_name),
        reverse=not ascending,
    )
