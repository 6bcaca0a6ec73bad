"""
Tests for the cache-or-generate service.
"""

import asyncio

import pytest
from conftest import FakePuzzleProvider, FlakyStore

from puzzle_cache.dto import PuzzleRequest
from puzzle_cache.errors import ConfigurationError, ProviderError
from puzzle_cache.fingerprint import derive_fingerprint, encode_request
from puzzle_cache.services import PuzzleService

REQUEST = PuzzleRequest.model_validate(
    {"gameType": "crossword", "difficulty": "easy", "topics": ["animals", "nature"], "language": "pt"}
)


def test_miss_generates_and_stores(service, provider, sql_store):
    """A miss calls the provider and persists the canonical request."""
    result = asyncio.run(service.get_or_generate(REQUEST))

    assert result.cache_hit is False
    assert result.payload == provider.payload
    assert result.fingerprint == derive_fingerprint(REQUEST)
    assert len(provider.calls) == 1

    entry = sql_store.get_entry(result.fingerprint)
    assert entry.request_payload == encode_request(REQUEST)
    assert entry.response_payload == provider.payload


def test_hit_skips_provider(service, provider, sql_store):
    """A pre-populated entry is returned without generation."""
    sql_store.put(derive_fingerprint(REQUEST), encode_request(REQUEST), b'{"cached": 1}')

    result = asyncio.run(service.get_or_generate(REQUEST))

    assert result.cache_hit is True
    assert result.payload == b'{"cached": 1}'
    assert provider.calls == []


def test_second_call_is_hit(service, provider):
    """The provider is invoked once for two identical requests."""
    first = asyncio.run(service.get_or_generate(REQUEST))
    second = asyncio.run(service.get_or_generate(REQUEST))

    assert (first.cache_hit, second.cache_hit) == (False, True)
    assert second.payload == first.payload
    assert len(provider.calls) == 1


def test_read_fault_treated_as_miss(sql_store, provider):
    """A lookup fault regenerates instead of failing."""
    service = PuzzleService.create(store=FlakyStore(sql_store, fail_get=True), provider=provider)

    result = asyncio.run(service.get_or_generate(REQUEST))

    assert result.cache_hit is False
    assert result.payload == provider.payload
    assert len(provider.calls) == 1
    assert sql_store.get_entry(result.fingerprint) is not None


def test_write_fault_swallowed(sql_store, provider):
    """A failed write still returns the generated payload."""
    service = PuzzleService.create(store=FlakyStore(sql_store, fail_put=True), provider=provider)

    result = asyncio.run(service.get_or_generate(REQUEST))

    assert result.payload == provider.payload
    assert sql_store.get_entry(result.fingerprint) is None


@pytest.mark.parametrize(
    "error",
    [ProviderError("boom", status_code=500, body="boom"), ConfigurationError("no key")],
)
def test_provider_errors_propagate(sql_store, error):
    """Generation failures abort the request and cache nothing."""
    service = PuzzleService.create(store=sql_store, provider=FakePuzzleProvider(error=error))

    with pytest.raises(type(error)):
        asyncio.run(service.get_or_generate(REQUEST))

    assert sql_store.get_entry(derive_fingerprint(REQUEST)) is None


def test_close_releases_dependencies(service, provider):
    """close() closes the provider and the store."""
    asyncio.run(service.close())
    assert provider.closed is True


def test_is_healthy(service):
    """Health reflects the store."""
    assert asyncio.run(service.is_healthy()) is True
