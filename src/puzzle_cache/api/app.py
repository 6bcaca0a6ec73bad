from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse, Response

from puzzle_cache.api.dependencies import HandlerDep, lifespan
from puzzle_cache.config import settings
from puzzle_cache.dto import PuzzleRequest
from puzzle_cache.handlers import PuzzleHandler

VERSION = "0.1.0"


async def invalid_payload_handler(request: Request, exc: RequestValidationError) -> PlainTextResponse:
    """Report malformed or invalid request bodies as plain-text 400."""
    messages = "; ".join(
        f"{'.'.join(str(part) for part in error['loc'][1:]) or 'body'}: {error['msg']}"
        for error in exc.errors()
    )
    return PlainTextResponse(
        f"Invalid request payload: {messages}",
        status_code=status.HTTP_400_BAD_REQUEST,
    )


def create_app(handler: PuzzleHandler | None = None) -> FastAPI:
    """Build the FastAPI application.

    Args:
        handler: Pre-wired handler. If None, the lifespan builds one from settings.

    Returns:
        The configured FastAPI app
    """
    app = FastAPI(
        title="Puzzle Cache API",
        description="Caching proxy for Gemini-generated crossword and word search puzzles",
        version=VERSION,
        lifespan=lifespan,
    )
    if handler is not None:
        app.state.puzzle_handler = handler

    app.add_exception_handler(RequestValidationError, invalid_payload_handler)  # type: ignore[arg-type]

    @app.get("/")
    async def root() -> dict[str, Any]:
        """Root endpoint with API information."""
        return {
            "name": "Puzzle Cache API",
            "version": VERSION,
            "endpoints": {
                "generate": "/generate-puzzle",
                "health": "/health",
                "docs": "/docs",
            },
        }

    @app.get("/health")
    async def health(handler: HandlerDep) -> Response:
        """Health check endpoint."""
        return await handler.health_check()

    @app.post("/generate-puzzle")
    async def generate_puzzle(request: PuzzleRequest, handler: HandlerDep) -> Response:
        """
        Return a cached puzzle, generating it with Gemini on a cache miss.

        Args:
            request: Puzzle parameters (gameType, difficulty, topics, language).

        Returns:
            The puzzle JSON exactly as generated.
        """
        return await handler.generate_puzzle(request)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "puzzle_cache.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )
