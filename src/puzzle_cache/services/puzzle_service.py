"""Puzzle service for the cache-or-generate flow.

This service orchestrates one request by coordinating the cache store
(data access) and the puzzle provider (generation).
"""

from starlette.concurrency import run_in_threadpool

from puzzle_cache.dto import PuzzleRequest
from puzzle_cache.entities import PuzzleResult
from puzzle_cache.errors import CacheStoreError
from puzzle_cache.fingerprint import encode_request, fingerprint_bytes
from puzzle_cache.logger import logger
from puzzle_cache.protocols import PuzzleCacheStore, PuzzleProvider


class PuzzleService:
    """Core cache-or-generate service.

    This service depends on PROTOCOLS, not concrete implementations:
    - PuzzleCacheStore: SQL table, Redis, or a test double
    - PuzzleProvider: Gemini, or a test double

    Example:
        ```python
        service = PuzzleService.create(
            store=SqlCacheRepository.create(),
            provider=GeminiPuzzleProvider.create(),
        )
        result = await service.get_or_generate(request)
        ```
    """

    def __init__(self, store: PuzzleCacheStore, provider: PuzzleProvider) -> None:
        """Initialize the puzzle service.

        Args:
            store: Cache storage backend (required).
            provider: Puzzle generation provider (required).
        """
        self._store = store
        self._provider = provider

    @classmethod
    def create(cls, store: PuzzleCacheStore, provider: PuzzleProvider) -> "PuzzleService":
        """Factory method to create PuzzleService.

        Args:
            store: Cache storage backend (required).
            provider: Puzzle generation provider (required).

        Returns:
            Configured PuzzleService instance
        """
        return cls(store=store, provider=provider)

    async def get_or_generate(self, request: PuzzleRequest) -> PuzzleResult:
        """Return the cached puzzle for a request, generating it on a miss.

        Business logic:
        1. Encode the request canonically and fingerprint it
        2. Look the fingerprint up; on a hit return the stored bytes
        3. A store fault on lookup is logged and treated as a miss
        4. Generate with the provider
        5. Upsert the result; a write failure is logged and ignored
        6. Return the generated bytes

        Args:
            request: The puzzle parameters

        Returns:
            PuzzleResult with the payload and whether it was a cache hit

        Raises:
            FingerprintError: If the request cannot be serialized
            ProviderError: If generation fails
            ConfigurationError: If the provider has no usable credential
        """
        request_bytes = encode_request(request)
        fingerprint = fingerprint_bytes(request_bytes)

        lookup = await run_in_threadpool(self._store.get, fingerprint)
        if lookup.is_hit:
            logger.info("Cache hit for hash: %s", fingerprint)
            return PuzzleResult(fingerprint=fingerprint, payload=lookup.payload, cache_hit=True)

        if lookup.is_fault:
            logger.warning("Error checking cache for hash %s: %s", fingerprint, lookup.error)
        else:
            logger.info("Cache miss for hash: %s", fingerprint)

        payload = await self._provider.generate(request)

        try:
            await run_in_threadpool(self._store.put, fingerprint, request_bytes, payload)
        except CacheStoreError as e:
            logger.error("Error saving puzzle to cache for hash %s: %s", fingerprint, e)

        return PuzzleResult(fingerprint=fingerprint, payload=payload, cache_hit=False)

    async def is_healthy(self) -> bool:
        """Check if the cache store is reachable."""
        return await run_in_threadpool(self._store.health_check)

    async def close(self) -> None:
        """Release the provider client and the store connections."""
        await self._provider.close()
        await run_in_threadpool(self._store.close)
