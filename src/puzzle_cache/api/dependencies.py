"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - Services stored in app.state during lifespan
    - Dependency functions retrieve from request.app.state
    - Clean separation, no global mutable state
"""

from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Request

from puzzle_cache.config import get_settings
from puzzle_cache.handlers import PuzzleHandler
from puzzle_cache.logger import logger
from puzzle_cache.repositories import GeminiPuzzleProvider, build_cache_store
from puzzle_cache.services import PuzzleService


def get_handler(request: Request) -> PuzzleHandler:
    """Dependency injection for PuzzleHandler from app.state.

    Args:
        request: FastAPI Request object

    Returns:
        The PuzzleHandler instance from app.state

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "puzzle_handler", None)
    if handler is None:
        raise RuntimeError("PuzzleHandler not initialized. Check lifespan setup.")
    return handler


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI app.

    Initializes all layers and stores them in app.state:
    1. Cache store and Gemini provider (data access)
    2. Service (business logic) - app.state.puzzle_service
    3. Handler (HTTP endpoints) - app.state.puzzle_handler

    If a handler was wired before startup (create_app(handler=...)), it is
    used as-is and nothing is built or torn down here.

    Raises:
        ConfigurationError: If the Gemini key or database URL is missing
    """
    if getattr(app.state, "puzzle_handler", None) is not None:
        yield
        return

    settings = get_settings()
    settings.validate_for_startup()

    store = build_cache_store(settings)
    provider = GeminiPuzzleProvider.create(
        api_key=settings.gemini_api_key,
        endpoint=settings.gemini_endpoint,
        timeout=settings.gemini_timeout,
    )
    puzzle_service = PuzzleService.create(store=store, provider=provider)

    app.state.puzzle_service = puzzle_service
    app.state.puzzle_handler = PuzzleHandler(puzzle_service=puzzle_service)

    logger.info("Puzzle service initialized (cache backend: %s)", settings.cache_backend)
    logger.info("Gemini model: %s", provider.model_name)

    yield

    await puzzle_service.close()
    del app.state.puzzle_handler
    del app.state.puzzle_service
    logger.info("Puzzle service shut down")


# Type aliases for cleaner dependency injection
HandlerDep = Annotated[PuzzleHandler, Depends(get_handler)]
