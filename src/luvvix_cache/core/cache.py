"""
Bounded in-memory TTL cache with hit/miss accounting.
Why: skip repeated AI calls for identical prompts while keeping memory bounded.

Expiry is lazy: entries are dropped by ``get`` (which sweeps first) or by
``cleanup_expired``. When full, the earliest-inserted key is evicted; reads
never reorder keys, and overwriting a key keeps its original position.

``None`` is the miss sentinel. A stored ``None`` is returned as ``None`` and
counted as a hit, so callers cannot tell it from a miss: cache a wrapper
instead of bare ``None`` payloads.
"""

import threading
import time
from dataclasses import dataclass
from typing import Callable, Dict, Generic, List, Optional, TypeVar

from .errors import InvalidConfiguration
from .logging import get_logger
from .schemas import DEFAULT_MAX_SIZE, DEFAULT_TTL_MS, CacheStats

V = TypeVar("V")

_LOG = get_logger(__name__)


def _monotonic_ms() -> float:
    return time.monotonic() * 1000.0


@dataclass
class CacheEntry(Generic[V]):
    value: V
    created_at: float
    ttl: float

    def is_live(self, now: float) -> bool:
        return now - self.created_at < self.ttl


class BoundedTTLCache(Generic[V]):
    def __init__(
        self,
        default_ttl: int = DEFAULT_TTL_MS,
        max_size: int = DEFAULT_MAX_SIZE,
        clock: Optional[Callable[[], float]] = None,
    ) -> None:
        if max_size <= 0:
            raise InvalidConfiguration(f"max_size must be positive, got {max_size}")
        if default_ttl < 0:
            raise InvalidConfiguration(
                f"default_ttl must not be negative, got {default_ttl}"
            )
        self.default_ttl = default_ttl
        self.max_size = max_size
        self._clock = clock or _monotonic_ms
        # dicts keep insertion order; overwrites do not move a key
        self._entries: Dict[str, CacheEntry[V]] = {}
        self._hits = 0
        self._misses = 0
        self._lock = threading.RLock()

    def get(self, key: str) -> Optional[V]:
        with self._lock:
            self.cleanup_expired()
            entry = self._entries.get(key)
            if entry is None:
                self._misses += 1
                return None
            self._hits += 1
            return entry.value

    def set(self, key: str, value: V, ttl: Optional[int] = None) -> None:
        if ttl is None:
            ttl = self.default_ttl
        with self._lock:
            if key not in self._entries and len(self._entries) >= self.max_size:
                oldest = next(iter(self._entries))
                del self._entries[oldest]
                _LOG.debug("cache full, evicted oldest entry", extra={"key": oldest, "max_size": self.max_size})
            self._entries[key] = CacheEntry(value=value, created_at=self._clock(), ttl=ttl)

    def remove(self, key: str) -> bool:
        with self._lock:
            return self._entries.pop(key, None) is not None

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self._hits = 0
            self._misses = 0

    def cleanup_expired(self) -> int:
        """Drop every entry whose TTL has elapsed and return how many were dropped."""
        with self._lock:
            now = self._clock()
            expired = [k for k, e in self._entries.items() if not e.is_live(now)]
            for key in expired:
                del self._entries[key]
            return len(expired)

    def keys(self) -> List[str]:
        with self._lock:
            return list(self._entries)

    @property
    def stats(self) -> CacheStats:
        return CacheStats(hits=self._hits, misses=self._misses)

    @property
    def size(self) -> int:
        return len(self._entries)

    def __len__(self) -> int:
        return self.size

    def __contains__(self, key: object) -> bool:
        entry = self._entries.get(key)  # type: ignore[arg-type]
        return entry is not None and entry.is_live(self._clock())
