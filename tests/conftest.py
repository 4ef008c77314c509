"""Shared test fixtures for the site calculator test suite."""

import pytest

from sitecalc.models.records import ActualCostEntry, Concept, ConceptForecast
from sitecalc.orchestrator import SiteAnalysisService
from sitecalc.providers.memory_provider import InMemoryRepository, SiteSnapshot, sample_snapshot


def make_forecast(concept_id, cost, site_id="site-1"):
    """Helper to create a ConceptForecast with minimal boilerplate."""
    return ConceptForecast(concept_id=concept_id, site_id=site_id, forecast_total_cost=cost)


def make_log(concept_id, cost, logged_at="2024-05-01T12:00:00Z"):
    return ActualCostEntry(concept_id=concept_id, actual_cost=cost, logged_at=logged_at)


@pytest.fixture
def site_forecasts() -> list[ConceptForecast]:
    return [
        make_forecast("1", 10_000),
        make_forecast("2", 8_000),
        make_forecast("3", 4_000),
        make_forecast("4", 4_000),
    ]


@pytest.fixture
def site_cost_logs() -> list[ActualCostEntry]:
    """Variances against site_forecasts: +2000, -500, +1000, 0."""
    return [
        make_log("1", 12_000),
        make_log("2", 7_500),
        make_log("3", 5_000),
        make_log("4", 4_000),
    ]


@pytest.fixture
def foundation_concept() -> Concept:
    return Concept(
        id="c-1",
        site_id="site-1",
        name="Foundation Work",
        status="active",
        planned_quantity=250,
        unit_price=50,
    )


@pytest.fixture
def sample_repository() -> InMemoryRepository:
    return InMemoryRepository(sample_snapshot("site1"))


@pytest.fixture
def empty_repository() -> InMemoryRepository:
    return InMemoryRepository(SiteSnapshot())


@pytest.fixture
def sample_service(sample_repository) -> SiteAnalysisService:
    return SiteAnalysisService(sample_repository)
