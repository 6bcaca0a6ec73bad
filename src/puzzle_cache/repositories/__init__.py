"""Repository layer for data access.

This layer abstracts external dependencies (SQL database, Redis, the Gemini
API) behind protocol-based interfaces. The repositories are protocol-based
(structural typing), not inheritance-based.
"""

from puzzle_cache.config import Settings
from puzzle_cache.protocols import PuzzleCacheStore, PuzzleProvider

from .gemini_puzzle_provider import GeminiPuzzleProvider
from .redis_repository import RedisCacheRepository
from .sql_repository import SqlCacheRepository


def build_cache_store(settings: Settings) -> PuzzleCacheStore:
    """Create the cache store selected by CACHE_BACKEND."""
    if settings.cache_backend == "redis":
        return RedisCacheRepository.create(key_prefix=settings.cache_key_prefix)
    return SqlCacheRepository.create(database_url=settings.database_url)


__all__ = [
    "PuzzleCacheStore",
    "PuzzleProvider",
    "GeminiPuzzleProvider",
    "RedisCacheRepository",
    "SqlCacheRepository",
    "build_cache_store",
]
