"""Live cache counters and immutable statistics snapshots."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class CacheStatistics:
    """Running counters updated by cache operations."""

    total_hits: int = 0
    total_misses: int = 0
    total_evictions: int = 0
    bytes_saved: int = 0
    time_saved_ms: int = 0
    tier_promotions: int = 0
    tier_demotions: int = 0

    def record_hit(self, time_saved_ms: int) -> None:
        self.total_hits += 1
        self.time_saved_ms += time_saved_ms

    def record_miss(self) -> None:
        self.total_misses += 1

    def record_eviction(self) -> None:
        self.total_evictions += 1

    def record_promotion(self) -> None:
        self.tier_promotions += 1

    def record_demotion(self) -> None:
        self.tier_demotions += 1

    def hit_rate(self) -> float:
        """Fraction of accesses that hit, or 0.0 with no accesses."""
        total = self.total_hits + self.total_misses
        return self.total_hits / total if total > 0 else 0.0


@dataclass(frozen=True)
class CacheStats:
    """Point-in-time snapshot of cache statistics."""

    total_entries: int
    total_size_bytes: int
    max_size_bytes: int
    hit_rate: float
    total_hits: int
    total_misses: int
    total_evictions: int
    time_saved_ms: int
    tier_distribution: dict[str, int] = field(default_factory=dict)
    avg_computation_cost_ms: float = 0.0
    memory_efficiency: float = 0.0

    def __str__(self) -> str:
        mb = 1024.0 * 1024.0
        return (
            f"Cache Stats: {self.total_entries} entries, "
            f"{self.total_size_bytes / mb:.1f}MB / {self.max_size_bytes / mb:.1f}MB, "
            f"Hit rate: {self.hit_rate * 100.0:.1f}%, "
            f"Time saved: {self.time_saved_ms / 1000.0:.1f}s"
        )

    def suggest_optimizations(self) -> list[str]:
        """Human-readable tuning advice, at most nine lines."""
        suggestions: list[str] = []

        if self.hit_rate < 0.5:
            suggestions += [
                "[WARN] Low cache hit rate. Consider:",
                "  - Increasing cache size",
                "  - Adjusting eviction weights",
            ]

        if self.memory_efficiency < 0.1:
            suggestions += [
                "[INFO] Low memory efficiency. Consider:",
                "  - Caching smaller, more frequently accessed items",
                "  - Using compression for large entries",
            ]

        if self.total_entries > 0:
            cold_ratio = self.tier_distribution.get("cold", 0) / self.total_entries
            if cold_ratio > 0.5:
                suggestions += [
                    "[COLD] Many cold entries. Consider:",
                    "  - More aggressive eviction of cold entries",
                    "  - Implementing disk-based cold storage",
                ]

        return suggestions