"""Cache lookup result entity."""

from dataclasses import dataclass
from enum import Enum


class LookupStatus(str, Enum):
    HIT = "hit"
    MISS = "miss"
    FAULT = "fault"


@dataclass(frozen=True)
class CacheLookup:
    """Outcome of a cache read.

    A miss is a normal outcome. A fault means the store could not be read;
    the caller decides what to do with it.

    Attributes:
        status: HIT, MISS or FAULT
        payload: Stored response bytes (HIT only)
        error: The underlying store exception (FAULT only)
    """

    status: LookupStatus
    payload: bytes | None = None
    error: Exception | None = None

    @classmethod
    def hit(cls, payload: bytes) -> "CacheLookup":
        return cls(status=LookupStatus.HIT, payload=payload)

    @classmethod
    def miss(cls) -> "CacheLookup":
        return cls(status=LookupStatus.MISS)

    @classmethod
    def fault(cls, error: Exception) -> "CacheLookup":
        return cls(status=LookupStatus.FAULT, error=error)

    @property
    def is_hit(self) -> bool:
        return self.status is LookupStatus.HIT

    @property
    def is_fault(self) -> bool:
        return self.status is LookupStatus.FAULT
