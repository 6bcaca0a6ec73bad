"""Puzzle result domain entity."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PuzzleResult:
    """What the service hands back to the HTTP layer.

    Attributes:
        fingerprint: Cache key of the request
        payload: Puzzle JSON bytes, from the cache or freshly generated
        cache_hit: True if the payload came from the cache
    """

    fingerprint: str
    payload: bytes
    cache_hit: bool
