"""Time-bounded cache of effective permission sets."""

import logging
import threading
import time
from collections import OrderedDict
from collections.abc import Callable
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 300
DEFAULT_MAX_SIZE = 1000


@dataclass
class CacheStats:
    """Counters since the cache was created or last reset."""

    hits: int = 0
    misses: int = 0
    sets: int = 0
    stale_sets: int = 0
    evictions: int = 0
    invalidations: int = 0


@dataclass
class _Entry:
    value: frozenset[str]
    expires_at: float


class EffectivePermissionCache:
    """LRU cache keyed by (user_id, normalized role) with a per-entry TTL.

    All operations take one lock, so it is safe to share between threads
    and between concurrently handled requests.

    Readers take a generation token before resolving and pass it to
    ``set``. Every invalidation advances one cache-wide counter, so a set
    computed from data read before any invalidation is dropped instead of
    cached. No per-user state outlives the user's entries.
    """

    def __init__(
        self,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        max_size: int = DEFAULT_MAX_SIZE,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be positive")
        if max_size <= 0:
            raise ValueError("max_size must be positive")
        self._ttl = ttl_seconds
        self._max_size = max_size
        self._clock = clock
        self._lock = threading.Lock()
        self._entries: OrderedDict[tuple[int, str], _Entry] = OrderedDict()
        self._generation = 0
        self._stats = CacheStats()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def generation(self) -> int:
        """Token to pass to ``set`` for a value about to be computed."""
        with self._lock:
            return self._generation

    def get(self, user_id: int, role: str) -> frozenset[str] | None:
        key = (user_id, role)
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                self._stats.misses += 1
                return None
            if self._clock() >= entry.expires_at:
                del self._entries[key]
                self._stats.misses += 1
                return None
            self._entries.move_to_end(key)
            self._stats.hits += 1
            return entry.value

    def set(
        self,
        user_id: int,
        role: str,
        value: frozenset[str],
        generation: int | None = None,
    ) -> bool:
        """Store value. Returns False if generation is stale and nothing was stored."""
        key = (user_id, role)
        with self._lock:
            if generation is not None and generation != self._generation:
                self._stats.stale_sets += 1
                return False
            if key not in self._entries and len(self._entries) >= self._max_size:
                self._entries.popitem(last=False)
                self._stats.evictions += 1
            self._entries[key] = _Entry(value, self._clock() + self._ttl)
            self._entries.move_to_end(key)
            self._stats.sets += 1
            return True

    def invalidate_user(self, user_id: int) -> int:
        """Drop every entry for user_id, whatever the role. Returns count removed."""
        with self._lock:
            keys = [k for k in self._entries if k[0] == user_id]
            for k in keys:
                del self._entries[k]
            self._generation += 1
            self._stats.invalidations += 1
        logger.debug("Permission cache invalidated for user %s (%d entries)", user_id, len(keys))
        return len(keys)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self._generation += 1
            self._stats.invalidations += 1

    def stats(self) -> CacheStats:
        with self._lock:
            return CacheStats(**vars(self._stats))

    def reset_stats(self) -> None:
        with self._lock:
            self._stats = CacheStats()
