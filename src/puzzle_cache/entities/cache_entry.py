"""Cache entry domain entity."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class CacheEntryEntity:
    """Domain entity for one cached puzzle row.

    Attributes:
        fingerprint: SHA-256 hex digest of the canonical request bytes
        request_payload: The canonical request bytes that produced the fingerprint
        response_payload: The generated puzzle JSON, byte-for-byte as returned
        created_at: When the row was last written
    """

    fingerprint: str
    request_payload: bytes
    response_payload: bytes
    created_at: datetime
