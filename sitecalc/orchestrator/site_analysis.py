"""Site analysis service -- fetches site data from the repository and runs
the cost and labor calculators over it."""

from __future__ import annotations

import logging
from collections import deque
from datetime import date
from typing import Any, Optional, Union

from sitecalc.engine import cost_analysis, labor_forecast
from sitecalc.hooks.audit_hooks import CalculationAudit, log_calculation
from sitecalc.models.enums import ComparisonSortField, TradeType
from sitecalc.models.records import (
    CostComparison,
    LaborDemandForecast,
    ROIEstimate,
    SiteCostSummary,
)
from sitecalc.providers.base import RepositoryBase

logger = logging.getLogger(__name__)

AUDIT_LOG_LIMIT = 500


class SiteAnalysisService:
    """Coordinates repository reads and calculator runs for one site at a time.

    Holds no per-site state; every call reads a fresh snapshot from the
    repository. ``audit_log`` keeps only the most recent ``audit_limit``
    runs, the full trail goes to the log.
    """

    def __init__(self, repository: RepositoryBase, audit_limit: int = AUDIT_LOG_LIMIT):
        self._repository = repository
        self.audit_log: deque[CalculationAudit] = deque(maxlen=audit_limit)

    @property
    def repository(self) -> RepositoryBase:
        return self._repository

    def _audit(self, operation: str, site_id: str, inputs: dict[str, Any], result: Any) -> None:
        self.audit_log.append(log_calculation(operation, site_id, inputs, result))

    async def cost_comparisons(
        self,
        site_id: str,
        sort_field: Optional[ComparisonSortField] = None,
        ascending: bool = True,
    ) -> list[CostComparison]:
        forecasts = await self._repository.fetch_forecasts(site_id)
        cost_logs = await self._repository.fetch_cost_logs(site_id)
        comparisons = cost_analysis.compare_costs(site_id, forecasts, cost_logs)
        if not forecasts:
            logger.info(f"No forecasts recorded for site {site_id}")

        if sort_field is not None:
            comparisons = cost_analysis.sort_comparisons(comparisons, sort_field, ascending)

        self._audit(
            "cost_comparisons",
            site_id,
            {"forecasts": len(forecasts), "cost_logs": len(cost_logs)},
            comparisons,
        )
        return comparisons

    async def site_summary(self, site_id: str) -> SiteCostSummary:
        comparisons = await self.cost_comparisons(site_id)
        summary = cost_analysis.get_site_summary(site_id, comparisons)
        self._audit("site_summary", site_id, {}, summary)
        return summary

    async def roi(self, site_id: str, expected_revenue: float) -> ROIEstimate:
        comparisons = await self.cost_comparisons(site_id)
        estimate = cost_analysis.calculate_roi(site_id, comparisons, expected_revenue)
        self._audit("roi", site_id, {"expected_revenue": expected_revenue}, estimate)
        return estimate

    async def labor_forecasts(
        self,
        site_id: str,
        trade_type: Optional[TradeType] = None,
        from_date: Optional[Union[date, str]] = None,
    ) -> list[LaborDemandForecast]:
        concepts = await self._repository.fetch_concepts(site_id)
        forecasts = labor_forecast.generate_labor_forecasts(site_id, concepts)
        forecasts = labor_forecast.filter_forecasts(
            forecasts, trade_type=trade_type, from_date=from_date
        )
        self._audit(
            "labor_forecasts",
            site_id,
            {"concepts": len(concepts), "trade_type": trade_type, "from_date": from_date},
            forecasts,
        )
        return forecasts
