"""Size-bounded, time-expiring result cache with per-key single-flight."""

from __future__ import annotations

import logging
import threading
import time
from collections import OrderedDict
from dataclasses import dataclass
from typing import Callable, Generic, Hashable, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class RateQuoteKey:
    """Identity of a cached warehouse-to-customer quote."""

    facility_id: int
    destination_id: int
    speed_tier: str
    product_id: Optional[int] = None


@dataclass(slots=True)
class CachedEntry(Generic[T]):
    value: T
    inserted_at: float


@dataclass(frozen=True, slots=True)
class CacheStats:
    name: str
    size: int
    max_entries: int
    ttl_seconds: float
    hits: int
    misses: int
    evictions: int
    expirations: int


class _InFlight:
    """A computation another thread is already running for a key."""

    __slots__ = ("done", "value", "error")

    def __init__(self) -> None:
        self.done = threading.Event()
        self.value = None
        self.error: BaseException | None = None


class ResultCache(Generic[T]):
    """Memoises ``compute`` results per key.

    Entries expire ``ttl_seconds`` after they were written regardless of how
    often they are read. Once ``max_entries`` is reached the entry written
    longest ago is evicted. Concurrent misses on the same key run ``compute``
    once; the other callers block until it finishes and get the same value or
    exception. Failures are never cached.
    """

    def __init__(
        self,
        name: str,
        max_entries: int,
        ttl_seconds: float,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if max_entries < 1:
            raise ValueError("max_entries must be at least 1")
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be positive")
        self.name = name
        self.max_entries = max_entries
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: OrderedDict[Hashable, CachedEntry[T]] = OrderedDict()
        self._in_flight: dict[Hashable, _InFlight] = {}
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0
        self._evictions = 0
        self._expirations = 0

    def get_or_compute(self, key: Hashable, compute: Callable[[], T]) -> T:
        with self._lock:
            entry = self._entries.get(key)
            if entry is not None:
                if self._clock() - entry.inserted_at < self.ttl_seconds:
                    self._hits += 1
                    logger.debug(f"Cache hit [{self.name}] key={key}")
                    return entry.value
                del self._entries[key]
                self._expirations += 1
            self._misses += 1
            pending = self._in_flight.get(key)
            owner = pending is None
            if owner:
                pending = _InFlight()
                self._in_flight[key] = pending

        if not owner:
            logger.debug(f"Cache wait [{self.name}] key={key}")
            pending.done.wait()
            if pending.error is not None:
                raise pending.error
            return pending.value

        logger.debug(f"Cache miss [{self.name}] key={key}")
        try:
            value = compute()
        except BaseException as exc:
            pending.error = exc
            with self._lock:
                self._in_flight.pop(key, None)
            pending.done.set()
            raise

        pending.value = value
        with self._lock:
            self._store(key, value)
            self._in_flight.pop(key, None)
        pending.done.set()
        return value

    def _store(self, key: Hashable, value: T) -> None:
        # Caller holds the lock.
        self._entries.pop(key, None)
        while len(self._entries) >= self.max_entries:
            evicted, _ = self._entries.popitem(last=False)
            self._evictions += 1
            logger.debug(f"Cache evict [{self.name}] key={evicted}")
        self._entries[key] = CachedEntry(value=value, inserted_at=self._clock())

    def invalidate(self, key: Hashable) -> bool:
        with self._lock:
            return self._entries.pop(key, None) is not None

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: Hashable) -> bool:
        with self._lock:
            entry = self._entries.get(key)
            return entry is not None and self._clock() - entry.inserted_at < self.ttl_seconds

    def stats(self) -> CacheStats:
        with self._lock:
            return CacheStats(
                name=self.name,
                size=len(self._entries),
                max_entries=self.max_entries,
                ttl_seconds=self.ttl_seconds,
                hits=self._hits,
                misses=self._misses,
                evictions=self._evictions,
                expirations=self._expirations,
            )
