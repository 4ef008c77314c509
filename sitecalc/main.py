"""FastAPI application for the site calculators: pricing, cost variance,
ROI and labor demand endpoints."""

from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from sitecalc.config.settings import Settings
from sitecalc.models.enums import ComparisonSortField, TradeType
from sitecalc.orchestrator import SiteAnalysisService
from sitecalc.pricing import (
    InvalidPricingInput,
    calculate_net_payout,
    calculate_pricing,
    get_commission_breakdown,
)
from sitecalc.providers import RepositoryError, build_repository

settings = Settings()

logging.basicConfig(level=settings.log_level.upper())
logger = logging.getLogger(__name__)

commission_rates = settings.commission_rates()

app = FastAPI(title="Site Calculators API", version="0.1.0")

# CORS: allow the Expo dev servers
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Singleton analysis service
_service = SiteAnalysisService(build_repository(settings))


def get_service() -> SiteAnalysisService:
    return _service


class PricingRequest(BaseModel):
    base_price: float


class BreakdownRequest(BaseModel):
    base_price: float
    booking_id: str


class ROIRequest(BaseModel):
    expected_revenue: float


@app.exception_handler(ValueError)
async def handle_value_error(request: Request, exc: ValueError):
    # InvalidPricingInput is a ValueError subclass
    logger.warning(f"Rejected {request.url.path}: {exc}")
    return JSONResponse(status_code=400, content={"error": str(exc)})


@app.exception_handler(RepositoryError)
async def handle_repository_error(request: Request, exc: RepositoryError):
    logger.error(f"Repository failure on {request.url.path}: {exc}")
    return JSONResponse(status_code=502, content={"error": str(exc)})


@app.post("/api/pricing")
async def pricing(body: PricingRequest):
    """Requester price, supplier payout and commission split for a base price."""
    return calculate_pricing(body.base_price, commission_rates)


@app.post("/api/pricing/breakdown")
async def pricing_breakdown(body: BreakdownRequest):
    """Commission breakdown for a single booking."""
    return get_commission_breakdown(body.base_price, body.booking_id, commission_rates)


@app.get("/api/pricing/net-payout")
async def net_payout(base_price: float):
    """Payout to the supplying party for a base price."""
    return {
        "base_price": base_price,
        "net_payout": calculate_net_payout(base_price, commission_rates),
    }


@app.get("/api/sites/{site_id}/cost-comparisons")
async def cost_comparisons(
    site_id: str,
    sort: Optional[ComparisonSortField] = None,
    ascending: bool = True,
    service: SiteAnalysisService = Depends(get_service),
):
    """Forecast vs actual cost per concept."""
    return await service.cost_comparisons(site_id, sort_field=sort, ascending=ascending)


@app.get("/api/sites/{site_id}/summary")
async def site_summary(site_id: str, service: SiteAnalysisService = Depends(get_service)):
    """Site-wide cost totals and over/under budget counts."""
    return await service.site_summary(site_id)


@app.post("/api/sites/{site_id}/roi")
async def site_roi(
    site_id: str,
    body: ROIRequest,
    service: SiteAnalysisService = Depends(get_service),
):
    """ROI estimate for a site against an expected revenue."""
    return await service.roi(site_id, body.expected_revenue)


@app.get("/api/sites/{site_id}/labor-forecasts")
async def labor_forecasts(
    site_id: str,
    trade_type: Optional[TradeType] = None,
    from_date: Optional[date] = None,
    service: SiteAnalysisService = Depends(get_service),
):
    """Predicted workers per trade for each concept of a site."""
    return await service.labor_forecasts(site_id, trade_type=trade_type, from_date=from_date)


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "ok"}
