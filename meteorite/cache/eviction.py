"""Eviction weights, tier thresholds and eviction scoring.

Lower scores are evicted first.
"""

from __future__ import annotations

from dataclasses import dataclass

from meteorite.cache.entry import CacheEntry, CachePriority, CacheTier, elapsed_seconds

_PRIORITY_MULTIPLIER = {
    CachePriority.LOW: 0.5,
    CachePriority.NORMAL: 1.0,
    CachePriority.HIGH: 2.0,
    CachePriority.CRITICAL: 10.0,
}

_TIER_MULTIPLIER = {
    CacheTier.HOT: 2.0,
    CacheTier.WARM: 1.0,
    CacheTier.COLD: 0.5,
}

_SIZE_SCALE_BYTES = 10 * 1024 * 1024


@dataclass
class EvictionPolicy:
    """Weights of the four eviction factors; they should sum to 1.0."""

    recency_weight: float = 0.3
    frequency_weight: float = 0.3
    cost_weight: float = 0.3
    size_weight: float = 0.1
    min_age_seconds: int = 60


@dataclass
class TierThresholds:
    """Thresholds for tier promotion and demotion."""

    hot_frequency: float = 5.0
    warm_frequency: float = 1.0
    cold_age_seconds: int = 300

    def determine_tier(self, entry: CacheEntry, now: float) -> CacheTier:
        """Choose the tier an entry belongs in given its access pattern."""
        if entry.access_frequency >= self.hot_frequency:
            return CacheTier.HOT
        if entry.access_frequency >= self.warm_frequency:
            return CacheTier.WARM
        if elapsed_seconds(now, entry.last_access) >= self.cold_age_seconds:
            return CacheTier.COLD
        return entry.tier


def calculate_eviction_score(policy: EvictionPolicy, entry: CacheEntry, now: float) -> float:
    """Score an entry for eviction; lower scores are evicted first."""
    age_seconds = float(elapsed_seconds(now, entry.last_access))
    recency_score = 1.0 / (1.0 + age_seconds / 3600.0)
    frequency_score = min(entry.access_frequency / 10.0, 1.0)
    cost_score = min(entry.computation_cost_ms / 1000.0, 1.0)
    size_score = 1.0 - min(entry.size_bytes / _SIZE_SCALE_BYTES, 1.0)

    base_score = (
        policy.recency_weight * recency_score
        + policy.frequency_weight * frequency_score
        + policy.cost_weight * cost_score
        + policy.size_weight * size_score
    )
    return base_score * _PRIORITY_MULTIPLIER[entry.priority] * _TIER_MULTIPLIER[entry.tier]