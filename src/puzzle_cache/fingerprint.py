"""Request fingerprinting.

A request is serialized to compact JSON with a fixed field order
(gameType, difficulty, topics, language) and hashed with SHA-256. The hex
digest is both the lookup key and the persisted key.
"""

import hashlib

from pydantic_core import PydanticSerializationError

from puzzle_cache.dto import PuzzleRequest
from puzzle_cache.errors import FingerprintError


def encode_request(request: PuzzleRequest) -> bytes:
    """Serialize a request to its canonical bytes.

    Example:
        ```python
        encode_request(PuzzleRequest(gameType="crossword", difficulty="easy",
                                     topics=["animals"], language="pt"))
        # b'{"gameType":"crossword","difficulty":"easy","topics":["animals"],"language":"pt"}'
        ```

    Raises:
        FingerprintError: If the request cannot be serialized
    """
    try:
        return request.model_dump_json(by_alias=True).encode("utf-8")
    except (PydanticSerializationError, UnicodeEncodeError) as e:
        raise FingerprintError(f"Failed to serialize request for hashing: {e}") from e


def fingerprint_bytes(data: bytes) -> str:
    """SHA-256 of data as lowercase hex."""
    return hashlib.sha256(data).hexdigest()


def derive_fingerprint(request: PuzzleRequest) -> str:
    """Fingerprint a request (encode, then hash)."""
    return fingerprint_bytes(encode_request(request))
