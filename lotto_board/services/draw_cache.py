"""In-process TTL cache for draw lookups.

Generic string-keyed store. Entries expire lazily: an expired entry is only
removed when it is read, there is no background sweep and no capacity bound.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from threading import Lock
from typing import Any, Callable

DEFAULT_TTL_SECONDS = 86_400


@dataclass(frozen=True)
class CacheEntry:
    value: Any
    captured_at: float


class DrawCache:
    """Process-wide key/value store guarded by a single lock."""

    def __init__(
        self,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.ttl_seconds = float(ttl_seconds)
        self._clock = clock
        self._lock = Lock()
        self._entries: dict[str, CacheEntry] = {}

    def get(self, key: str) -> Any | None:
        """Return the stored value, or None if missing or older than the TTL."""

        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            if self._clock() - entry.captured_at > self.ttl_seconds:
                self._entries.pop(key, None)
                return None
            return entry.value

    def set(self, key: str, value: Any) -> None:
        with self._lock:
            self._entries[key] = CacheEntry(value=value, captured_at=self._clock())

    def invalidate(self, key: str) -> None:
        with self._lock:
            self._entries.pop(key, None)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    # Raw inspection, expiry is not applied.
    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
