"""Protocol interfaces for swappable implementations.

This package contains protocol definitions using structural typing.
Protocols enable:
- Swapping the cache backend (SQL table, Redis) without touching the service
- Unit testing with fake stores and providers
"""

from .cache_store import PuzzleCacheStore
from .puzzle_provider import PuzzleProvider

__all__ = [
    "PuzzleCacheStore",
    "PuzzleProvider",
]
