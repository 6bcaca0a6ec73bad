"""
Tests for settings validation and startup checks.
"""

import asyncio

import pytest
from fastapi import FastAPI

from puzzle_cache.api import dependencies
from puzzle_cache.config import PLACEHOLDER_API_KEY, Settings
from puzzle_cache.errors import ConfigurationError


def test_invalid_backend_rejected():
    """Only sql and redis backends exist."""
    with pytest.raises(ValueError):
        Settings(cache_backend="memcached")


def test_invalid_log_format_rejected():
    """LOG_FORMAT must be text or json."""
    with pytest.raises(ValueError):
        Settings(log_format="xml")


def test_gemini_endpoint():
    """The endpoint is built from base URL and model."""
    settings = Settings(gemini_base_url="https://example.test/v1beta/", gemini_model="gemini-x")
    assert settings.gemini_endpoint == "https://example.test/v1beta/models/gemini-x:generateContent"


@pytest.mark.parametrize("api_key", [None, "", PLACEHOLDER_API_KEY])
def test_startup_requires_api_key(api_key):
    """A missing or placeholder key fails startup validation."""
    settings = Settings(gemini_api_key=api_key, database_url="postgresql://localhost/puzzles")
    with pytest.raises(ConfigurationError):
        settings.validate_for_startup()


def test_startup_requires_database_url_for_sql():
    """The SQL backend needs DATABASE_URL."""
    with pytest.raises(ConfigurationError):
        Settings(gemini_api_key="key", database_url=None, cache_backend="sql").validate_for_startup()


def test_startup_redis_without_database_url():
    """The Redis backend does not need DATABASE_URL."""
    Settings(gemini_api_key="key", database_url=None, cache_backend="redis").validate_for_startup()


def test_lifespan_fails_without_credential(monkeypatch):
    """The app refuses to start when the key is missing."""
    monkeypatch.setattr(
        dependencies,
        "get_settings",
        lambda: Settings(gemini_api_key=None, database_url="sqlite://"),
    )

    async def start() -> None:
        async with dependencies.lifespan(FastAPI()):
            pass

    with pytest.raises(ConfigurationError):
        asyncio.run(start())


def test_non_positive_timeout_rejected():
    """GEMINI_TIMEOUT must be positive."""
    with pytest.raises(ValueError):
        Settings(gemini_timeout=0)
