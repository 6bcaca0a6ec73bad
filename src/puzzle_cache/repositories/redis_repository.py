"""Redis implementation of PuzzleCacheStore.

Each fingerprint is one hash at "<prefix>:<fingerprint>" holding the
request bytes, the response bytes and the write timestamp. HSET overwrites
fields in place, which gives the same last-write-wins semantics as the SQL
upsert. Entries never expire.
"""

import time
from datetime import datetime, timezone

import redis

from puzzle_cache.config import get_redis_client, settings
from puzzle_cache.entities import CacheEntryEntity, CacheLookup
from puzzle_cache.errors import CacheStoreError
from puzzle_cache.logger import logger


class RedisCacheRepository:
    """Redis implementation of the PuzzleCacheStore protocol.

    This class satisfies the PuzzleCacheStore protocol through structural
    typing - no explicit inheritance needed.
    """

    def __init__(
        self,
        redis_client: redis.Redis | None = None,
        key_prefix: str | None = None,
    ) -> None:
        """Initialize the Redis cache repository.

        Args:
            redis_client: Redis client instance. If None, creates default.
            key_prefix: Prefix for entry keys. Defaults to settings.
        """
        self._client = redis_client or get_redis_client()
        self._prefix = key_prefix or settings.cache_key_prefix

    @classmethod
    def create(
        cls,
        redis_client: redis.Redis | None = None,
        key_prefix: str | None = None,
    ) -> "RedisCacheRepository":
        """Factory method to create RedisCacheRepository with defaults.

        Args:
            redis_client: Redis client. If None, built from settings.
            key_prefix: Key prefix. If None, uses settings.

        Returns:
            Configured RedisCacheRepository
        """
        return cls(redis_client=redis_client, key_prefix=key_prefix)

    def _key(self, fingerprint: str) -> str:
        return f"{self._prefix}:{fingerprint}"

    def get(self, fingerprint: str) -> CacheLookup:
        """Look up the response bytes for a fingerprint.

        Args:
            fingerprint: The request fingerprint

        Returns:
            CacheLookup hit, miss, or fault on any Redis error
        """
        try:
            payload = self._client.hget(self._key(fingerprint), "response_data")
        except redis.RedisError as e:
            return CacheLookup.fault(e)

        if payload is None:
            return CacheLookup.miss()
        return CacheLookup.hit(bytes(payload))

    def get_entry(self, fingerprint: str) -> CacheEntryEntity | None:
        """Load the full entry for a fingerprint, or None if absent.

        Raises:
            CacheStoreError: If Redis cannot be read
        """
        try:
            fields = self._client.hgetall(self._key(fingerprint))
        except redis.RedisError as e:
            raise CacheStoreError(f"Failed to read cache entry for hash {fingerprint}: {e}") from e

        if not fields:
            return None
        return CacheEntryEntity(
            fingerprint=fingerprint,
            request_payload=bytes(fields[b"request_params"]),
            response_payload=bytes(fields[b"response_data"]),
            created_at=datetime.fromtimestamp(float(fields[b"created_at"]), tz=timezone.utc),
        )

    def put(self, fingerprint: str, request_payload: bytes, response_payload: bytes) -> None:
        """Write or overwrite the entry for a fingerprint.

        Args:
            fingerprint: The request fingerprint
            request_payload: Canonical request bytes
            response_payload: Generated puzzle bytes

        Raises:
            CacheStoreError: If the write fails
        """
        try:
            self._client.hset(
                self._key(fingerprint),
                mapping={
                    "request_params": request_payload,
                    "response_data": response_payload,
                    "created_at": str(time.time()),
                },
            )
        except redis.RedisError as e:
            raise CacheStoreError(f"Failed to save cached puzzle for hash {fingerprint}: {e}") from e

        logger.info("Cache saved for hash: %s", fingerprint)

    def health_check(self) -> bool:
        """Check if Redis is accessible.

        Returns:
            True if healthy, False otherwise
        """
        try:
            return bool(self._client.ping())
        except redis.RedisError:
            return False

    def close(self) -> None:
        """Close the Redis connection pool."""
        self._client.close()
