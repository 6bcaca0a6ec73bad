"""
Tests for the Redis cache repository with a mocked client.
"""

from unittest.mock import MagicMock

import pytest
import redis

from puzzle_cache.errors import CacheStoreError
from puzzle_cache.protocols import PuzzleCacheStore
from puzzle_cache.repositories import RedisCacheRepository

HASH = "c" * 64


@pytest.fixture
def redis_client():
    """Mocked Redis client."""
    return MagicMock(spec=redis.Redis)


@pytest.fixture
def repository(redis_client):
    """Redis repository with a fixed prefix."""
    return RedisCacheRepository.create(redis_client=redis_client, key_prefix="puzzles")


def test_satisfies_protocol(repository):
    """RedisCacheRepository is a PuzzleCacheStore."""
    assert isinstance(repository, PuzzleCacheStore)


def test_get_hit(repository, redis_client):
    """Stored bytes are returned as a hit."""
    redis_client.hget.return_value = b'{"resp":1}'

    lookup = repository.get(HASH)

    assert lookup.is_hit
    assert lookup.payload == b'{"resp":1}'
    redis_client.hget.assert_called_once_with(f"puzzles:{HASH}", "response_data")


def test_get_miss(repository, redis_client):
    """A missing hash field is a miss."""
    redis_client.hget.return_value = None
    lookup = repository.get(HASH)
    assert not lookup.is_hit
    assert not lookup.is_fault


def test_get_fault(repository, redis_client):
    """Redis errors on read become a fault."""
    redis_client.hget.side_effect = redis.ConnectionError("down")
    lookup = repository.get(HASH)
    assert lookup.is_fault
    assert isinstance(lookup.error, redis.ConnectionError)


def test_put_writes_all_fields(repository, redis_client):
    """put stores request, response and timestamp in one hash."""
    repository.put(HASH, b"req", b"resp")

    key, = redis_client.hset.call_args.args
    mapping = redis_client.hset.call_args.kwargs["mapping"]
    assert key == f"puzzles:{HASH}"
    assert mapping["request_params"] == b"req"
    assert mapping["response_data"] == b"resp"
    assert float(mapping["created_at"]) > 0


def test_put_failure_raises(repository, redis_client):
    """Redis errors on write raise CacheStoreError."""
    redis_client.hset.side_effect = redis.ConnectionError("down")
    with pytest.raises(CacheStoreError):
        repository.put(HASH, b"req", b"resp")


def test_get_entry(repository, redis_client):
    """get_entry rebuilds the full entry."""
    redis_client.hgetall.return_value = {
        b"request_params": b"req",
        b"response_data": b"resp",
        b"created_at": b"1700000000.5",
    }

    entry = repository.get_entry(HASH)

    assert entry.fingerprint == HASH
    assert entry.response_payload == b"resp"
    assert entry.created_at.timestamp() == 1700000000.5


def test_health_check(repository, redis_client):
    """Ping failures are unhealthy."""
    redis_client.ping.return_value = True
    assert repository.health_check() is True
    redis_client.ping.side_effect = redis.ConnectionError("down")
    assert repository.health_check() is False
