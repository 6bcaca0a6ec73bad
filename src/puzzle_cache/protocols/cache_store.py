"""Cache storage protocol.

Defines the interface for any backend that maps a request fingerprint to
the generated puzzle bytes.

Implementations:
- SQL table with an upsert write path (default)
- Redis hashes
"""

from typing import Protocol, runtime_checkable

from puzzle_cache.entities import CacheLookup


@runtime_checkable
class PuzzleCacheStore(Protocol):
    """Protocol for puzzle cache backends.

    Any type that implements these methods satisfies the protocol, no
    explicit inheritance needed.

    Example:
        ```python
        store: PuzzleCacheStore = SqlCacheRepository.create()
        store: PuzzleCacheStore = RedisCacheRepository.create()
        ```
    """

    def get(self, fingerprint: str) -> CacheLookup:
        """Look up a cached payload.

        Must not raise on store failure; report it as CacheLookup.fault().

        Args:
            fingerprint: The request fingerprint

        Returns:
            CacheLookup hit, miss or fault
        """
        ...

    def put(self, fingerprint: str, request_payload: bytes, response_payload: bytes) -> None:
        """Insert or overwrite the entry for a fingerprint (last write wins).

        Args:
            fingerprint: The request fingerprint
            request_payload: Canonical request bytes
            response_payload: Generated puzzle bytes

        Raises:
            CacheStoreError: If the write fails
        """
        ...

    def health_check(self) -> bool:
        """Check if the store is reachable.

        Returns:
            True if healthy, False otherwise
        """
        ...

    def close(self) -> None:
        """Release connections held by the store."""
        ...
