"""Puzzle Cache - caching proxy for Gemini-generated puzzles.

This package provides a layered architecture for the cache-or-generate flow:

Layers:
    - protocols: Interface contracts (PuzzleCacheStore, PuzzleProvider)
    - repositories: Data access implementations (SQL, Redis, Gemini)
    - services: Business logic
    - handlers: HTTP endpoint handlers
    - dto: Data transfer objects (API contracts)
    - entities: Domain models (internal)

Usage:
    ```python
    from puzzle_cache.repositories import GeminiPuzzleProvider, SqlCacheRepository
    from puzzle_cache.services import PuzzleService

    service = PuzzleService.create(
        store=SqlCacheRepository.create(),
        provider=GeminiPuzzleProvider.create(),
    )
    ```

For HTTP API:
    ```python
    from puzzle_cache.api.app import app
    ```
"""

from puzzle_cache.config import get_settings, settings
from puzzle_cache.dto import Difficulty, GameType, PuzzleRequest
from puzzle_cache.entities import CacheEntryEntity, CacheLookup, PuzzleResult
from puzzle_cache.errors import (
    CacheStoreError,
    ConfigurationError,
    EmptyProviderResponseError,
    FingerprintError,
    ProviderError,
    PuzzleCacheError,
)
from puzzle_cache.fingerprint import derive_fingerprint, encode_request
from puzzle_cache.handlers import PuzzleHandler
from puzzle_cache.protocols import PuzzleCacheStore, PuzzleProvider
from puzzle_cache.repositories import GeminiPuzzleProvider, RedisCacheRepository, SqlCacheRepository
from puzzle_cache.services import PuzzleService

__all__ = [
    # Configuration
    "settings",
    "get_settings",
    # Protocols (interfaces)
    "PuzzleCacheStore",
    "PuzzleProvider",
    # Services (business logic)
    "PuzzleService",
    # Handlers (HTTP)
    "PuzzleHandler",
    # Repositories (data access)
    "SqlCacheRepository",
    "RedisCacheRepository",
    "GeminiPuzzleProvider",
    # Entities (domain models)
    "CacheEntryEntity",
    "CacheLookup",
    "PuzzleResult",
    # DTOs (API contracts)
    "PuzzleRequest",
    "GameType",
    "Difficulty",
    # Fingerprinting
    "derive_fingerprint",
    "encode_request",
    # Errors
    "PuzzleCacheError",
    "ConfigurationError",
    "FingerprintError",
    "CacheStoreError",
    "ProviderError",
    "EmptyProviderResponseError",
]
