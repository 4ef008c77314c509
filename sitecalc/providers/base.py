from __future__ import annotations

from abc import ABC, abstractmethod

from sitecalc.models.records import ActualCostEntry, Concept, ConceptForecast


class RepositoryError(RuntimeError):
    """Raised when the backing data store cannot be read."""


class RepositoryBase(ABC):
    """Abstract base for all site data repositories."""

    @abstractmethod
    async def fetch_forecasts(self, site_id: str) -> list[ConceptForecast]:
        """Return the forecast records for a site."""
        ...

    @abstractmethod
    async def fetch_cost_logs(self, site_id: str) -> list[ActualCostEntry]:
        """Return actual-cost log entries for a site, in store order."""
        ...

    @abstractmethod
    async def fetch_concepts(self, site_id: str) -> list[Concept]:
        """Return the concepts of a site."""
        ...

    @abstractmethod
    async def health_check(self) -> bool:
        """Verify the store is reachable."""
        ...
