import os
from dataclasses import dataclass
from functools import lru_cache

import redis
from dotenv import load_dotenv
from sqlalchemy import Engine, create_engine

from puzzle_cache.errors import ConfigurationError

load_dotenv()

PLACEHOLDER_API_KEY = "YOUR_GEMINI_API_KEY_HERE"


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # Cache store
    cache_backend: str = os.getenv("CACHE_BACKEND", "sql")
    database_url: str | None = os.getenv("DATABASE_URL")
    redis_url: str = os.getenv("REDIS_URL", "redis://localhost:6379")
    redis_password: str | None = os.getenv("REDIS_PASSWORD")
    cache_key_prefix: str = os.getenv("CACHE_KEY_PREFIX", "cached_puzzles")

    # Gemini
    gemini_api_key: str | None = os.getenv("GEMINI_API_KEY")
    gemini_model: str = os.getenv("GEMINI_MODEL", "gemini-2.0-flash")
    gemini_base_url: str = os.getenv(
        "GEMINI_BASE_URL", "https://generativelanguage.googleapis.com/v1beta"
    )
    gemini_timeout: float = float(os.getenv("GEMINI_TIMEOUT", "60"))

    # API
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("PORT", "8080"))
    api_reload: bool = os.getenv("API_RELOAD", "false").lower() == "true"

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_format: str = os.getenv("LOG_FORMAT", "text")

    @property
    def gemini_endpoint(self) -> str:
        """Full generateContent URL for the configured model."""
        return f"{self.gemini_base_url.rstrip('/')}/models/{self.gemini_model}:generateContent"

    @property
    def has_api_key(self) -> bool:
        """Check if a real (non-placeholder) Gemini key is configured."""
        return bool(self.gemini_api_key) and self.gemini_api_key != PLACEHOLDER_API_KEY

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if self.cache_backend not in ("sql", "redis"):
            raise ValueError(f"CACHE_BACKEND must be 'sql' or 'redis', got {self.cache_backend!r}")

        if self.log_format not in ("text", "json"):
            raise ValueError(f"LOG_FORMAT must be 'text' or 'json', got {self.log_format!r}")

        if self.gemini_timeout <= 0:
            raise ValueError("GEMINI_TIMEOUT must be positive")

    def validate_for_startup(self) -> None:
        """Fail fast on configuration the service cannot run without.

        Raises:
            ConfigurationError: If the Gemini key or the database URL is missing
        """
        if not self.has_api_key:
            raise ConfigurationError(
                "GEMINI_API_KEY is not set or still holds the placeholder value. "
                "Set it as an environment variable."
            )
        if self.cache_backend == "sql" and not self.database_url:
            raise ConfigurationError(
                "DATABASE_URL is not set. Provide a PostgreSQL connection string."
            )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()


def get_engine(database_url: str | None = None) -> Engine:
    """Create a SQLAlchemy engine for the cache table."""
    return create_engine(
        database_url or settings.database_url,
        pool_pre_ping=True,
    )


def get_redis_client() -> redis.Redis:
    """Create a Redis client instance."""
    return redis.from_url(
        settings.redis_url,
        password=settings.redis_password,
        decode_responses=False,
    )
