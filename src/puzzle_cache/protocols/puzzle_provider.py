"""Puzzle generation provider protocol."""

from typing import Protocol, runtime_checkable

from puzzle_cache.dto import PuzzleRequest


@runtime_checkable
class PuzzleProvider(Protocol):
    """Protocol for services that generate puzzle JSON.

    Example:
        ```python
        provider: PuzzleProvider = GeminiPuzzleProvider.create()
        payload = await provider.generate(request)
        ```
    """

    @property
    def model_name(self) -> str:
        """Return the name/identifier of the generating model."""
        ...

    async def generate(self, request: PuzzleRequest) -> bytes:
        """Generate a puzzle for the request.

        Args:
            request: The puzzle parameters

        Returns:
            The generated puzzle JSON, verbatim, as bytes

        Raises:
            ProviderError: If generation fails
            ConfigurationError: If the provider has no usable credential
        """
        ...

    async def close(self) -> None:
        """Release HTTP resources."""
        ...
