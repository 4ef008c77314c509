"""Supabase repository -- reads forecasts, cost logs and concepts from the
hosted Postgres tables via the supabase client."""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional, TypeVar

from supabase import create_client

from sitecalc.config.settings import Settings
from sitecalc.models.records import ActualCostEntry, Concept, ConceptForecast

from .base import RepositoryBase, RepositoryError
from .memory_provider import InMemoryRepository, sample_snapshot

logger = logging.getLogger(__name__)

T = TypeVar("T")

FORECASTS_TABLE = "concept_forecasts"
COST_LOGS_TABLE = "cost_logs"
CONCEPTS_TABLE = "concepts"


class SupabaseRepository(RepositoryBase):
    """Site data repository backed by Supabase."""

    def __init__(self, settings: Optional[Settings] = None):
        self._settings = settings or Settings()
        self._client = create_client(self._settings.supabase_url, self._settings.supabase_key)

    def _select(self, table: str, site_id: str, parse: Callable[[dict[str, Any]], T]) -> list[T]:
        try:
            response = self._client.table(table).select("*").eq("site_id", site_id).execute()
        except Exception as e:
            logger.error(f"Supabase query on '{table}' failed for site {site_id}: {e}")
            raise RepositoryError(f"Failed to read {table} for site {site_id}") from e

        rows = getattr(response, "data", None) or []
        try:
            return [parse(row) for row in rows]
        except (KeyError, TypeError, ValueError) as e:
            logger.error(f"Malformed row in '{table}' for site {site_id}: {e}")
            raise RepositoryError(f"Malformed {table} row for site {site_id}") from e

    async def fetch_forecasts(self, site_id: str) -> list[ConceptForecast]:
        return self._select(FORECASTS_TABLE, site_id, ConceptForecast.from_row)

    async def fetch_cost_logs(self, site_id: str) -> list[ActualCostEntry]:
        return self._select(COST_LOGS_TABLE, site_id, ActualCostEntry.from_row)

    async def fetch_concepts(self, site_id: str) -> list[Concept]:
        return self._select(CONCEPTS_TABLE, site_id, Concept.from_row)

    async def health_check(self) -> bool:
        try:
            self._client.table(CONCEPTS_TABLE).select("id").limit(1).execute()
            return True
        except Exception as e:
            logger.error(f"Supabase health check failed: {e}")
            return False


def build_repository(settings: Optional[Settings] = None) -> RepositoryBase:
    """Supabase when credentials are configured, otherwise the demo snapshot."""
    settings = settings or Settings()
    if settings.supabase_url and settings.supabase_key:
        logger.info("Using Supabase repository")
        return SupabaseRepository(settings=settings)
    logger.warning("Supabase credentials not configured; serving in-memory sample data")
    return InMemoryRepository(sample_snapshot())
