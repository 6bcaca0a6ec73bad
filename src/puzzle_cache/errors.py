"""Exception hierarchy for the puzzle cache.

Everything the service raises on purpose derives from PuzzleCacheError, so the
HTTP layer can turn any of them into a plain-text 500.
"""


class PuzzleCacheError(Exception):
    """Base class for puzzle cache errors."""


class ConfigurationError(PuzzleCacheError):
    """Required configuration (credential, connection string) is missing."""


class FingerprintError(PuzzleCacheError):
    """The request could not be serialized into canonical bytes."""


class CacheStoreError(PuzzleCacheError):
    """The cache store failed to persist an entry."""


class ProviderError(PuzzleCacheError):
    """The generation provider call failed.

    Attributes:
        status_code: HTTP status returned by the provider, None on transport failure
        body: Raw response body, if one was received
    """

    def __init__(self, message: str, status_code: int | None = None, body: str | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class EmptyProviderResponseError(ProviderError):
    """The provider answered 200 but the envelope held no candidate text."""
