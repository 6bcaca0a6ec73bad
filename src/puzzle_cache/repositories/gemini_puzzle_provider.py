"""Gemini-based puzzle provider.

Builds a prompt and a response schema from the prompt catalog, sends one
generateContent request to the Gemini REST API and returns the text of the
first candidate untouched. The text is expected to be JSON matching the
schema, but it is not parsed here.

Requirements:
    - A Gemini API key in GEMINI_API_KEY
"""

import httpx

from puzzle_cache.config import PLACEHOLDER_API_KEY, settings
from puzzle_cache.dto import PuzzleRequest
from puzzle_cache.errors import ConfigurationError, EmptyProviderResponseError, ProviderError
from puzzle_cache.logger import logger
from puzzle_cache.prompts import template_for

TEMPERATURE = 0.7
TOP_P = 0.9
TOP_K = 40


class GeminiPuzzleProvider:
    """Gemini implementation of the PuzzleProvider protocol.

    This class satisfies the PuzzleProvider protocol through structural
    typing - no explicit inheritance needed.

    Example:
        ```python
        provider = GeminiPuzzleProvider.create(api_key="...")
        payload = await provider.generate(request)
        await provider.close()
        ```
    """

    def __init__(
        self,
        api_key: str | None = None,
        endpoint: str | None = None,
        timeout: float | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the Gemini provider.

        Args:
            api_key: Gemini API key. Defaults to settings.gemini_api_key.
            endpoint: generateContent URL. Defaults to settings.gemini_endpoint.
            timeout: Request timeout in seconds. Defaults to settings.gemini_timeout.
            client: Pre-built async HTTP client (tests inject a mock transport).
        """
        self._api_key = api_key if api_key is not None else settings.gemini_api_key
        self._endpoint = endpoint or settings.gemini_endpoint
        self._timeout = timeout or settings.gemini_timeout
        self._client = client

    @classmethod
    def create(
        cls,
        api_key: str | None = None,
        endpoint: str | None = None,
        timeout: float | None = None,
    ) -> "GeminiPuzzleProvider":
        """Factory method to create GeminiPuzzleProvider with defaults.

        Args:
            api_key: API key. If None, uses settings.
            endpoint: Endpoint URL. If None, uses settings.
            timeout: Timeout in seconds. If None, uses settings.

        Returns:
            Configured GeminiPuzzleProvider
        """
        return cls(api_key=api_key, endpoint=endpoint, timeout=timeout)

    @property
    def client(self) -> httpx.AsyncClient:
        """Lazy-load the async HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._timeout)
        return self._client

    @property
    def model_name(self) -> str:
        """Model segment of the endpoint (e.g. "gemini-2.0-flash")."""
        return self._endpoint.rsplit("/", 1)[-1].split(":", 1)[0]

    def build_payload(self, request: PuzzleRequest) -> dict:
        """Build the generateContent request body for a puzzle request."""
        template = template_for(request.game_type)
        return {
            "contents": [{"parts": [{"text": template.render(request)}]}],
            "generationConfig": {
                "responseMimeType": "application/json",
                "responseSchema": template.schema,
                "temperature": TEMPERATURE,
                "topP": TOP_P,
                "topK": TOP_K,
            },
        }

    async def generate(self, request: PuzzleRequest) -> bytes:
        """Generate a puzzle with Gemini.

        Args:
            request: The puzzle parameters

        Returns:
            The first candidate's text as UTF-8 bytes

        Raises:
            ConfigurationError: If no usable API key is configured
            ProviderError: On transport failure or a non-200 status
            EmptyProviderResponseError: If the envelope has no candidate text
        """
        if not self._api_key or self._api_key == PLACEHOLDER_API_KEY:
            raise ConfigurationError(
                "GEMINI_API_KEY is not set or still holds the placeholder value."
            )

        payload = self.build_payload(request)
        prompt = payload["contents"][0]["parts"][0]["text"]
        logger.info("Calling Gemini API with prompt (truncated): %s...", prompt[:100])

        try:
            response = await self.client.post(
                self._endpoint,
                params={"key": self._api_key},
                json=payload,
            )
        except httpx.HTTPError as e:
            raise ProviderError(f"HTTP request to Gemini failed: {e}") from e

        if response.status_code != httpx.codes.OK:
            raise ProviderError(
                f"Gemini API failed with status {response.status_code}: {response.text}",
                status_code=response.status_code,
                body=response.text,
            )

        text = self._extract_text(response)
        logger.info("Gemini API response received")
        return text.encode("utf-8")

    @staticmethod
    def _extract_text(response: httpx.Response) -> str:
        raw = response.text
        try:
            data = response.json()
        except ValueError as e:
            raise ProviderError(
                f"Failed to decode Gemini API response: {e}. Raw response: {raw}",
                status_code=response.status_code,
                body=raw,
            ) from e

        candidates = data.get("candidates") if isinstance(data, dict) else None
        parts = None
        if isinstance(candidates, list) and candidates and isinstance(candidates[0], dict):
            content = candidates[0].get("content")
            if isinstance(content, dict):
                parts = content.get("parts")

        text = None
        if isinstance(parts, list) and parts and isinstance(parts[0], dict):
            text = parts[0].get("text")

        if not isinstance(text, str):
            raise EmptyProviderResponseError(
                f"Gemini API response was empty or unexpected. Raw response: {raw}",
                status_code=response.status_code,
                body=raw,
            )
        return text

    async def close(self) -> None:
        """Close the async HTTP client.

        Should be called when shutting down the application.
        """
        if self._client is not None:
            await self._client.aclose()
            self._client = None
