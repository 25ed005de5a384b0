"""Multi-tier cache with weighted eviction, access prediction and adaptive sizing."""

from __future__ import annotations

import time
from typing import Any, Callable, Optional

from meteorite.cache.entry import (
    CacheEntry,
    CachePriority,
    CacheTier,
    MemoryPressure,
    elapsed_seconds,
)
from meteorite.cache.eviction import EvictionPolicy, TierThresholds, calculate_eviction_score
from meteorite.cache.predictor import AccessPredictor
from meteorite.cache.stats import CacheStatistics, CacheStats

MAX_CACHE_ENTRIES = 10_000
"""Hard bound on the number of entries, regardless of the byte budget."""

MIN_CACHE_SIZE = 1_048_576
"""Adaptive sizing never shrinks the budget below this many bytes."""

PressureFn = Callable[[], Optional[MemoryPressure]]


class CacheError(Exception):
    """Raised when the cache cannot make room for a new entry."""


class TieredCache:
    """In-memory cache keyed by strings with hot/warm/cold tiering.

    When a ``put`` would exceed the byte budget, entries older than the
    policy's minimum age are evicted in order of increasing eviction score.
    Assign ``pressure_fn`` a callable returning a :class:`MemoryPressure`
    (or ``None``) to let the budget adapt on every ``put``.

    Timestamps are monotonic seconds; they default to ``time.monotonic()``.
    """

    def __init__(self, initial_size_mb: int) -> None:
        self._entries: dict[str, CacheEntry] = {}
        self._max_size_bytes = initial_size_mb * 1024 * 1024
        self._current_size_bytes = 0
        self._stats = CacheStatistics()
        self._predictor = AccessPredictor()
        self.eviction_policy = EvictionPolicy()
        self.tier_thresholds = TierThresholds()
        self.pressure_fn: PressureFn | None = None

    def get(
        self, key: str, last_key: str | None = None, now: float | None = None
    ) -> Any | None:
        """Return the value for ``key`` or ``None`` on a miss.

        ``last_key`` is the previously accessed key, used to train the
        access predictor.
        """
        if not key:
            raise ValueError("key cannot be empty")
        now = time.monotonic() if now is None else now

        self._predictor.record_access(last_key, key)

        entry = self._entries.get(key)
        if entry is None:
            self._stats.record_miss()
            return None

        entry.record_access(now)
        new_tier = self.tier_thresholds.determine_tier(entry, now)
        if new_tier != entry.tier:
            if new_tier < entry.tier:
                self._stats.record_promotion()
            else:
                self._stats.record_demotion()
            entry.tier = new_tier

        self._stats.record_hit(entry.computation_cost_ms)
        return entry.get_data()

    def put(
        self,
        key: str,
        data: Any,
        size_bytes: int,
        computation_cost_ms: int = 0,
        priority: CachePriority = CachePriority.NORMAL,
        now: float | None = None,
    ) -> None:
        """Store ``data`` under ``key``.

        Raises :class:`CacheError` if eviction cannot free enough space.
        """
        if not key:
            raise ValueError("key cannot be empty")
        if size_bytes <= 0:
            raise ValueError("size_bytes must be greater than zero")
        now = time.monotonic() if now is None else now

        if key not in self._entries and len(self._entries) >= MAX_CACHE_ENTRIES:
            self._evict_oldest_entry()

        self._evict_if_needed(size_bytes, now)
        self._adapt_cache_size()

        self._entries[key] = CacheEntry(
            data=data,
            size_bytes=size_bytes,
            computation_cost_ms=computation_cost_ms,
            priority=priority,
            created_at=now,
        )
        self._current_size_bytes += size_bytes

    def stats(self) -> CacheStats:
        """Take a snapshot of the current statistics."""
        return CacheStats(
            total_entries=len(self._entries),
            total_size_bytes=self._current_size_bytes,
            max_size_bytes=self._max_size_bytes,
            hit_rate=self._stats.hit_rate(),
            total_hits=self._stats.total_hits,
            total_misses=self._stats.total_misses,
            total_evictions=self._stats.total_evictions,
            time_saved_ms=self._stats.time_saved_ms,
            tier_distribution=self._tier_distribution(),
            avg_computation_cost_ms=self._avg_computation_cost(),
            memory_efficiency=self._memory_efficiency(),
        )

    def suggest_optimizations(self) -> list[str]:
        """Tuning advice derived from the current statistics."""
        return self.stats().suggest_optimizations()

    def predict_next(self, current: str) -> list[tuple[str, float]]:
        """Keys likely to be accessed after ``current``, most likely first."""
        return self._predictor.predict_next(current)

    def clear(self) -> None:
        """Remove all entries."""
        self._entries.clear()
        self._current_size_bytes = 0

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def current_size_bytes(self) -> int:
        """Total size of the stored entries in bytes."""
        return self._current_size_bytes

    def max_size_bytes(self) -> int:
        """Current size budget in bytes."""
        return self._max_size_bytes

    def get_entry(self, key: str) -> CacheEntry | None:
        """The raw entry for ``key``, without access tracking."""
        return self._entries.get(key)

    def _remove(self, key: str) -> CacheEntry:
        entry = self._entries.pop(key)
        self._current_size_bytes -= entry.size_bytes
        self._stats.record_eviction()
        return entry

    def _evict_if_needed(self, needed_bytes: int, now: float) -> None:
        max_size = self._max_size_bytes
        if self._current_size_bytes + needed_bytes <= max_size:
            return

        policy = self.eviction_policy
        candidates = sorted(
            (
                (calculate_eviction_score(policy, entry, now), key)
                for key, entry in self._entries.items()
                if elapsed_seconds(now, entry.created_at) >= policy.min_age_seconds
            ),
            key=lambda pair: pair[0],
        )

        target = needed_bytes + max_size // 10
        freed = 0
        for _score, key in candidates:
            if freed >= target:
                break
            freed += self._remove(key).size_bytes

        if freed < needed_bytes:
            raise CacheError(
                f"Could not free enough space. Needed: {needed_bytes}, Freed: {freed}"
            )

    def _evict_oldest_entry(self) -> None:
        if not self._entries:
            return
        oldest_key = min(self._entries, key=lambda k: self._entries[k].last_access)
        self._remove(oldest_key)

    def _adapt_cache_size(self) -> None:
        if self.pressure_fn is None:
            return
        pressure = self.pressure_fn()
        if pressure is None:
            return

        current = self._max_size_bytes
        if pressure is MemoryPressure.LOW:
            new_max = current + current // 10
        elif pressure is MemoryPressure.MEDIUM:
            new_max = current
        elif pressure is MemoryPressure.HIGH:
            new_max = max(current - current // 10, MIN_CACHE_SIZE)
        else:
            new_max = max(current // 2, MIN_CACHE_SIZE)
        self._max_size_bytes = new_max

    def _tier_distribution(self) -> dict[str, int]:
        distribution = {"hot": 0, "warm": 0, "cold": 0}
        names = {CacheTier.HOT: "hot", CacheTier.WARM: "warm", CacheTier.COLD: "cold"}
        for entry in self._entries.values():
            distribution[names[entry.tier]] += 1
        return distribution

    def _avg_computation_cost(self) -> float:
        if not self._entries:
            return 0.0
        total = sum(entry.computation_cost_ms for entry in self._entries.values())
        return total / len(self._entries)

    def _memory_efficiency(self) -> float:
        total_value = sum(
            float(entry.computation_cost_ms) * entry.access_count
            for entry in self._entries.values()
        )
        total_bytes = float(self._current_size_bytes)
        return total_value / total_bytes if total_bytes > 0.0 else 0.0