"""In-memory repository over an explicitly passed snapshot."""

from __future__ import annotations

from dataclasses import dataclass, field

from sitecalc.models.records import ActualCostEntry, Concept, ConceptForecast

from .base import RepositoryBase


@dataclass(frozen=True)
class SiteSnapshot:
    """Everything the calculators read, held as plain tuples."""

    forecasts: tuple[ConceptForecast, ...] = field(default_factory=tuple)
    cost_logs: tuple[ActualCostEntry, ...] = field(default_factory=tuple)
    concepts: tuple[Concept, ...] = field(default_factory=tuple)


class InMemoryRepository(RepositoryBase):
    """Serves a fixed SiteSnapshot. Records without a site_id belong to every site."""

    def __init__(self, snapshot: SiteSnapshot):
        self._snapshot = snapshot

    @property
    def snapshot(self) -> SiteSnapshot:
        return self._snapshot

    async def fetch_forecasts(self, site_id: str) -> list[ConceptForecast]:
        return [f for f in self._snapshot.forecasts if f.site_id == site_id]

    async def fetch_cost_logs(self, site_id: str) -> list[ActualCostEntry]:
        return [
            e for e in self._snapshot.cost_logs if e.site_id is None or e.site_id == site_id
        ]

    async def fetch_concepts(self, site_id: str) -> list[Concept]:
        return [
            c for c in self._snapshot.concepts if c.site_id is None or c.site_id == site_id
        ]

    async def health_check(self) -> bool:
        return True


def sample_snapshot(site_id: str = "site1") -> SiteSnapshot:
    """Demo data for local development without a Supabase project."""
    concepts = (
        Concept(
            id="1", site_id=site_id, name="Foundation", status="active",
            planned_quantity=100, unit_price=150, progress=75,
            start_date="2024-03-01", end_date="2024-04-15",
        ),
        Concept(
            id="2", site_id=site_id, name="Framing", status="active",
            planned_quantity=200, unit_price=80, progress=45,
            start_date="2024-04-16", end_date="2024-06-01",
        ),
        Concept(
            id="3", site_id=site_id, name="Roofing", status="planning",
            planned_quantity=150, unit_price=120, progress=0,
        ),
    )
    forecasts = (
        ConceptForecast(concept_id="1", site_id=site_id, forecast_total_cost=15000, concept_name="Foundation"),
        ConceptForecast(concept_id="2", site_id=site_id, forecast_total_cost=16000, concept_name="Framing"),
        ConceptForecast(concept_id="3", site_id=site_id, forecast_total_cost=18000, concept_name="Roofing"),
    )
    cost_logs = (
        ActualCostEntry(concept_id="1", actual_cost=17250, logged_at="2024-04-10T16:00:00Z", site_id=site_id),
        ActualCostEntry(concept_id="2", actual_cost=15200, logged_at="2024-05-20T16:00:00Z", site_id=site_id),
        ActualCostEntry(concept_id="1", actual_cost=900, logged_at="2024-04-18T09:30:00Z", site_id=site_id),
    )
    return SiteSnapshot(forecasts=forecasts, cost_logs=cost_logs, concepts=concepts)
