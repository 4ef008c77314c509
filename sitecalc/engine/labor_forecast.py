"""Heuristic labor demand estimator.

Maps a concept's name to a work category, the category to the trades it
needs, and the concept's quantity, unit price and status to a worker count
per trade.
"""

from __future__ import annotations

import math
from datetime import date, datetime
from decimal import Decimal
from typing import Iterable, Optional, Union

from sitecalc.models.enums import ConceptCategory, ConceptStatus, TradeType
from sitecalc.models.records import Concept, LaborDemandForecast
from sitecalc.pricing.rounding import to_decimal

# Ordered: the first keyword found in the lowercased name wins.
CATEGORY_KEYWORDS: tuple[tuple[str, ConceptCategory], ...] = (
    ("foundation", ConceptCategory.FOUNDATION),
    ("concrete", ConceptCategory.FOUNDATION),
    ("excavat", ConceptCategory.FOUNDATION),
    ("fram", ConceptCategory.FRAMING),
    ("electric", ConceptCategory.ELECTRICAL),
    ("wiring", ConceptCategory.ELECTRICAL),
    ("plumb", ConceptCategory.PLUMBING),
    ("pipe", ConceptCategory.PLUMBING),
    ("roof", ConceptCategory.ROOFING),
    ("drywall", ConceptCategory.DRYWALL),
    ("gypsum", ConceptCategory.DRYWALL),
    ("floor", ConceptCategory.FLOORING),
    ("tile", ConceptCategory.FLOORING),
    ("paint", ConceptCategory.PAINTING),
)

DEFAULT_CATEGORY = ConceptCategory.FOUNDATION

TRADE_REQUIREMENTS: dict[ConceptCategory, tuple[TradeType, ...]] = {
    ConceptCategory.FOUNDATION: (
        TradeType.CONCRETE_WORKER,
        TradeType.REBAR_WORKER,
        TradeType.EXCAVATOR_OPERATOR,
    ),
    ConceptCategory.FRAMING: (
        TradeType.CARPENTER,
        TradeType.FRAMER,
        TradeType.CRANE_OPERATOR,
    ),
    ConceptCategory.ELECTRICAL: (TradeType.ELECTRICIAN, TradeType.ELECTRICAL_HELPER),
    ConceptCategory.PLUMBING: (TradeType.PLUMBER, TradeType.PIPEFITTER),
    ConceptCategory.ROOFING: (TradeType.ROOFER, TradeType.ROOFING_HELPER),
    ConceptCategory.DRYWALL: (TradeType.DRYWALL_INSTALLER, TradeType.TAPER),
    ConceptCategory.FLOORING: (TradeType.FLOORING_INSTALLER, TradeType.TILE_SETTER),
    ConceptCategory.PAINTING: (TradeType.PAINTER, TradeType.PAINTING_HELPER),
}

PHASE_MULTIPLIERS: dict[ConceptStatus, Decimal] = {
    ConceptStatus.PLANNING: Decimal("0.8"),
    ConceptStatus.ACTIVE: Decimal("1.2"),
    ConceptStatus.COMPLETED: Decimal("0.1"),
    ConceptStatus.UNKNOWN: Decimal("1"),
}

HIGH_UNIT_PRICE = 100
HIGH_PRICE_COMPLEXITY = Decimal("1.5")
UNITS_PER_WORKER = Decimal("100")

BASE_CONFIDENCE = 0.7
SCHEDULED_BONUS = 0.2
PROGRESS_BONUS = 0.1
MAX_CONFIDENCE = 0.95


def classify_concept(name: Optional[str]) -> ConceptCategory:
    lower = (name or "").lower()
    for keyword, category in CATEGORY_KEYWORDS:
        if keyword in lower:
            return category
    return DEFAULT_CATEGORY


def base_workers(planned_quantity: float, unit_price: float) -> int:
    """max(1, ceil(quantity / 100 * complexity)); complexity 1.5 above $100/unit."""
    complexity = HIGH_PRICE_COMPLEXITY if unit_price > HIGH_UNIT_PRICE else Decimal("1")
    raw = to_decimal(planned_quantity) / UNITS_PER_WORKER * complexity
    return max(1, math.ceil(raw))


def predicted_workers(workers: int, status: Optional[str]) -> int:
    multiplier = PHASE_MULTIPLIERS[ConceptStatus.parse(status)]
    return math.ceil(Decimal(workers) * multiplier)


def confidence_score(concept: Concept) -> float:
    score = BASE_CONFIDENCE
    if concept.start_date and concept.end_date:
        score += SCHEDULED_BONUS
    if concept.progress is not None and concept.progress > 0:
        score += PROGRESS_BONUS
    return round(min(score, MAX_CONFIDENCE), 2)


def forecast_concept(site_id: str, concept: Concept) -> list[LaborDemandForecast]:
    """One forecast per trade the concept's category requires."""
    category = classify_concept(concept.name)
    workers = predicted_workers(
        base_workers(concept.planned_quantity, concept.unit_price), concept.status
    )
    confidence = confidence_score(concept)

    return [
        LaborDemandForecast(
            id=f"{concept.id}:{trade.value}",
            site_id=site_id,
            concept_id=concept.id,
            category=category,
            trade_type=trade,
            predicted_workers=workers,
            confidence_score=confidence,
            forecast_date=concept.start_date,
        )
        for trade in TRADE_REQUIREMENTS[category]
    ]


def generate_labor_forecasts(
    site_id: str, concepts: Iterable[Concept]
) -> list[LaborDemandForecast]:
    forecasts: list[LaborDemandForecast] = []
    for concept in concepts:
        forecasts.extend(forecast_concept(site_id, concept))
    return forecasts


def parse_from_date(value: Union[date, str]) -> date:
    """Accept a date, a datetime or an ISO-8601 string (date part is used)."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value).strip()[:10])
    except ValueError:
        raise ValueError(f"from_date must be an ISO-8601 date, got {value!r}") from None


def filter_forecasts(
    forecasts: Iterable[LaborDemandForecast],
    site_id: Optional[str] = None,
    trade_type: Optional[TradeType | str] = None,
    from_date: Optional[Union[date, str]] = None,
) -> list[LaborDemandForecast]:
    """Narrow forecasts by site, trade and earliest forecast date.

    Forecast dates are ISO-8601 strings compared on their YYYY-MM-DD prefix.
    With a date filter set, forecasts that have no date are dropped. A
    ``from_date`` that is not a date raises ``ValueError``.
    """
    trade = TradeType(trade_type) if trade_type is not None else None
    cutoff = parse_from_date(from_date).isoformat() if from_date is not None else None
    result = []
    for forecast in forecasts:
        if site_id is not None and forecast.site_id != site_id:
            continue
        if trade is not None and forecast.trade_type != trade:
            continue
        if cutoff is not None:
            if not forecast.forecast_date or forecast.forecast_date[:10] < cutoff:
                continue
        result.append(forecast)
    return result


def unique_trades(forecasts: Iterable[LaborDemandForecast]) -> list[TradeType]:
    return sorted({f.trade_type for f in forecasts}, key=lambda t: t.value)
