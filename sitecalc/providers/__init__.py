from .base import RepositoryBase, RepositoryError
from .memory_provider import InMemoryRepository, SiteSnapshot, sample_snapshot
from .supabase_provider import SupabaseRepository, build_repository

__all__ = [
    "RepositoryBase",
    "RepositoryError",
    "InMemoryRepository",
    "SiteSnapshot",
    "sample_snapshot",
    "SupabaseRepository",
    "build_repository",
]
