from __future__ import annotations

import os
import time
from dataclasses import dataclass
from typing import Any, Callable, Optional

TTL_INTEL_FEED_SEC = int(os.getenv("TTL_INTEL_FEED_SEC", "1800"))  # 30 min


@dataclass(frozen=True)
class CacheEntry:
    payload: Any
    body: bytes
    timestamp: float


class FeedCache:
    """
    Single-slot memo of the last successful feed response.

    ``body`` is the encoded response and is replayed byte-for-byte on a hit.
    Each ``set`` replaces the slot. ``now`` defaults to ``clock()`` so TTL
    expiry can be tested without waiting.
    """

    def __init__(self, ttl_seconds: int = TTL_INTEL_FEED_SEC, clock: Callable[[], float] = time.time) -> None:
        self.ttl_seconds = int(ttl_seconds)
        self._clock = clock
        self._entry: Optional[CacheEntry] = None

    def _now(self, now: Optional[float]) -> float:
        return self._clock() if now is None else now

    def get(self, now: Optional[float] = None) -> Optional[CacheEntry]:
        entry = self._entry
        if entry is None:
            return None
        if self._now(now) - entry.timestamp < self.ttl_seconds:
            return entry
        return None

    def set(self, payload: Any, body: bytes, now: Optional[float] = None) -> CacheEntry:
        entry = CacheEntry(payload=payload, body=body, timestamp=self._now(now))
        self._entry = entry
        return entry

    def age(self, now: Optional[float] = None) -> Optional[float]:
        if self._entry is None:
            return None
        return max(0.0, self._now(now) - self._entry.timestamp)

    def peek(self) -> Optional[CacheEntry]:
        """Last stored entry, fresh or not."""
        return self._entry

    def clear(self) -> None:
        self._entry = None
