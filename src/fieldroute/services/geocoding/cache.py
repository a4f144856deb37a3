"""Time-bounded cache for geocoding lookups."""

from __future__ import annotations

import threading
import time
from collections import OrderedDict
from typing import Callable, Generic, Optional, TypeVar

V = TypeVar("V")

_MISSING = object()


class GeocodeCache(Generic[V]):
    """Bounded key/value cache with per-entry expiry.

    Negative results (``None``) are cached like any other value so unknown
    addresses are not re-queried on every request. When full, the oldest
    insertion is evicted first.
    """

    def __init__(
        self,
        ttl_seconds: float,
        max_entries: int,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be positive.")
        if max_entries < 1:
            raise ValueError("max_entries must be at least 1.")
        self.ttl_seconds = ttl_seconds
        self.max_entries = max_entries
        self._clock = clock
        self._entries: "OrderedDict[str, tuple[float, Optional[V]]]" = OrderedDict()
        self._lock = threading.Lock()

    def lookup(self, key: str) -> tuple[bool, Optional[V]]:
        """Return ``(hit, value)``; ``value`` may legitimately be ``None`` on a hit."""
        with self._lock:
            entry = self._entries.get(key, _MISSING)
            if entry is _MISSING:
                return False, None
            expires_at, value = entry
            if self._clock() >= expires_at:
                del self._entries[key]
                return False, None
            return True, value

    def store(self, key: str, value: Optional[V]) -> None:
        with self._lock:
            if key in self._entries:
                del self._entries[key]
            self._entries[key] = (self._clock() + self.ttl_seconds, value)
            while len(self._entries) > self.max_entries:
                self._entries.popitem(last=False)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: str) -> bool:
        hit, _ = self.lookup(key)
        return hit
