"""HTTP handlers for puzzle generation.

Handlers convert between DTOs (API contracts) and service calls.
They handle HTTP concerns like status codes, content types and error
responses.
"""

from fastapi import status
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from puzzle_cache.dto import HealthCheckResponse, PuzzleRequest
from puzzle_cache.errors import PuzzleCacheError
from puzzle_cache.logger import logger
from puzzle_cache.services import PuzzleService


class PuzzleHandler:
    """HTTP handlers for puzzle operations.

    Example:
        ```python
        handler = PuzzleHandler(puzzle_service=service)

        @app.post("/generate-puzzle")
        async def generate_puzzle(request: PuzzleRequest):
            return await handler.generate_puzzle(request)
        ```
    """

    def __init__(self, puzzle_service: PuzzleService) -> None:
        """Initialize the puzzle handler.

        Args:
            puzzle_service: The puzzle service for business logic (required).
        """
        self._puzzles = puzzle_service

    async def generate_puzzle(self, request: PuzzleRequest) -> Response:
        """Handle POST /generate-puzzle requests.

        Args:
            request: The validated puzzle request DTO

        Returns:
            The puzzle JSON bytes as application/json, with an X-Cache header,
            or a plain-text 500 if generation failed
        """
        try:
            result = await self._puzzles.get_or_generate(request)
        except PuzzleCacheError as e:
            logger.error(
                "Error generating puzzle for request %s: %s",
                request.model_dump(mode="json", by_alias=True),
                e,
            )
            return PlainTextResponse(
                f"Failed to generate puzzle: {e}",
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

        return Response(
            content=result.payload,
            media_type="application/json",
            headers={"X-Cache": "HIT" if result.cache_hit else "MISS"},
        )

    async def health_check(self) -> JSONResponse:
        """Handle GET /health requests.

        Returns:
            Health status, 503 if the cache store is unreachable
        """
        is_healthy = await self._puzzles.is_healthy()
        body = HealthCheckResponse(
            status="healthy" if is_healthy else "unhealthy",
            cache_healthy=is_healthy,
        )
        return JSONResponse(
            content=body.model_dump(),
            status_code=status.HTTP_200_OK if is_healthy else status.HTTP_503_SERVICE_UNAVAILABLE,
        )
