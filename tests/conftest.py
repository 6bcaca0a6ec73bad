"""
Shared fixtures for the puzzle cache tests.
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from puzzle_cache.api.app import create_app
from puzzle_cache.entities import CacheLookup
from puzzle_cache.errors import CacheStoreError
from puzzle_cache.handlers import PuzzleHandler
from puzzle_cache.repositories import SqlCacheRepository
from puzzle_cache.services import PuzzleService

CROSSWORD_PAYLOAD = b'{"gameType":"crossword","difficulty":"easy","topics":["animals","nature"]}'


class FakePuzzleProvider:
    """Records every generate() call and returns a fixed payload."""

    def __init__(self, payload: bytes = CROSSWORD_PAYLOAD, error: Exception | None = None) -> None:
        self.payload = payload
        self.error = error
        self.calls = []
        self.closed = False

    @property
    def model_name(self) -> str:
        return "fake-model"

    async def generate(self, request):
        self.calls.append(request)
        if self.error is not None:
            raise self.error
        return self.payload

    async def close(self) -> None:
        self.closed = True


class FlakyStore:
    """Wraps a real store and fails reads and/or writes on demand."""

    def __init__(self, inner, fail_get: bool = False, fail_put: bool = False) -> None:
        self.inner = inner
        self.fail_get = fail_get
        self.fail_put = fail_put

    def get(self, fingerprint):
        if self.fail_get:
            return CacheLookup.fault(RuntimeError("database unavailable"))
        return self.inner.get(fingerprint)

    def put(self, fingerprint, request_payload, response_payload):
        if self.fail_put:
            raise CacheStoreError("database unavailable")
        self.inner.put(fingerprint, request_payload, response_payload)

    def health_check(self):
        return not (self.fail_get or self.fail_put)

    def close(self):
        self.inner.close()


@pytest.fixture
def sqlite_engine():
    """In-memory SQLite engine shared across threads."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    yield engine
    engine.dispose()


@pytest.fixture
def sql_store(sqlite_engine):
    """SQL cache store with the table created."""
    return SqlCacheRepository.create(engine=sqlite_engine)


@pytest.fixture
def provider():
    """Fake provider returning a crossword payload."""
    return FakePuzzleProvider()


@pytest.fixture
def service(sql_store, provider):
    """Puzzle service wired to the SQLite store and the fake provider."""
    return PuzzleService.create(store=sql_store, provider=provider)


def make_client(service: PuzzleService) -> TestClient:
    return TestClient(create_app(handler=PuzzleHandler(puzzle_service=service)))


@pytest.fixture
def client(service):
    """Create a test client around the pre-wired service."""
    return make_client(service)
