import pytest

from meteorite.cache.entry import CachePriority, CacheTier, MemoryPressure
from meteorite.cache.tiered import (
    MAX_CACHE_ENTRIES,
    MIN_CACHE_SIZE,
    CacheError,
    TieredCache,
)

MB = 1024 * 1024


def test_put_then_get_returns_value():
    cache = TieredCache(100)
    cache.put("key1", [1, 2, 3, 4], 4, 50, CachePriority.NORMAL, 0.0)
    assert cache.get("key1", None, 0.0) == [1, 2, 3, 4]
    assert len(cache) == 1
    assert cache.current_size_bytes() == 4


def test_initial_budget_in_megabytes():
    cache = TieredCache(100)
    assert cache.max_size_bytes() == 100 * MB
    assert len(cache) == 0


def test_miss_returns_none_and_counts():
    cache = TieredCache(10)
    assert cache.get("absent", None, 0.0) is None
    stats = cache.stats()
    assert stats.total_misses == 1
    assert stats.total_hits == 0
    assert stats.hit_rate == 0.0


def test_hit_rate_and_time_saved():
    cache = TieredCache(10)
    cache.put("a", "x", 10, 50, CachePriority.NORMAL, 0.0)
    cache.get("a", None, 0.0)
    cache.get("missing", None, 0.0)
    stats = cache.stats()
    assert stats.total_hits == 1
    assert stats.total_misses == 1
    assert stats.hit_rate == pytest.approx(0.5)
    assert stats.time_saved_ms == 50


def test_empty_key_rejected():
    cache = TieredCache(10)
    with pytest.raises(ValueError):
        cache.put("", "x", 1, 0, CachePriority.NORMAL, 0.0)
    with pytest.raises(ValueError):
        cache.get("", None, 0.0)


def test_zero_size_rejected():
    cache = TieredCache(10)
    with pytest.raises(ValueError):
        cache.put("k", "x", 0, 0, CachePriority.NORMAL, 0.0)


def test_eviction_fails_when_entries_too_young():
    cache = TieredCache(1)
    cache.put("a", "x", 600_000, 0, CachePriority.NORMAL, 0.0)
    with pytest.raises(CacheError):
        cache.put("b", "y", 600_000, 0, CachePriority.NORMAL, 10.0)
    assert cache.get_entry("a") is not None
    assert cache.get_entry("b") is None


def test_eviction_frees_old_entries():
    cache = TieredCache(1)
    cache.put("a", "x", 600_000, 0, CachePriority.NORMAL, 0.0)
    cache.put("b", "y", 600_000, 0, CachePriority.NORMAL, 100.0)
    assert cache.get_entry("a") is None
    assert cache.get("b", None, 100.0) == "y"
    assert cache.current_size_bytes() == 600_000
    assert cache.stats().total_evictions == 1
    assert cache.current_size_bytes() <= cache.max_size_bytes()


def test_entry_limit_evicts_least_recently_accessed():
    cache = TieredCache(100)
    for i in range(MAX_CACHE_ENTRIES):
        cache.put(f"k{i}", i, 1, 0, CachePriority.NORMAL, float(i))
    assert len(cache) == MAX_CACHE_ENTRIES
    cache.put("extra", "e", 1, 0, CachePriority.NORMAL, float(MAX_CACHE_ENTRIES))
    assert len(cache) == MAX_CACHE_ENTRIES
    assert cache.get_entry("k0") is None
    assert cache.get_entry("extra") is not None
    assert cache.stats().total_evictions == 1


def test_critical_pressure_halves_budget():
    cache = TieredCache(100)
    before = cache.max_size_bytes()
    cache.pressure_fn = lambda: MemoryPressure.CRITICAL
    cache.put("a", "x", 1, 0, CachePriority.NORMAL, 0.0)
    assert cache.max_size_bytes() == before // 2


def test_critical_pressure_respects_minimum():
    cache = TieredCache(1)
    cache.pressure_fn = lambda: MemoryPressure.CRITICAL
    cache.put("a", "x", 1, 0, CachePriority.NORMAL, 0.0)
    cache.put("b", "x", 1, 0, CachePriority.NORMAL, 0.0)
    assert cache.max_size_bytes() == MIN_CACHE_SIZE


def test_low_pressure_grows_and_high_shrinks():
    grow = TieredCache(10)
    grow.pressure_fn = lambda: MemoryPressure.LOW
    before = grow.max_size_bytes()
    grow.put("a", "x", 1, 0, CachePriority.NORMAL, 0.0)
    assert grow.max_size_bytes() > before

    shrink = TieredCache(10)
    shrink.pressure_fn = lambda: MemoryPressure.HIGH
    shrink.put("a", "x", 1, 0, CachePriority.NORMAL, 0.0)
    assert MIN_CACHE_SIZE <= shrink.max_size_bytes() < before


@pytest.mark.parametrize("pressure", [None, MemoryPressure.MEDIUM])
def test_neutral_pressure_keeps_budget(pressure):
    cache = TieredCache(10)
    before = cache.max_size_bytes()
    cache.pressure_fn = lambda: pressure
    cache.put("a", "x", 1, 0, CachePriority.NORMAL, 0.0)
    assert cache.max_size_bytes() == before


def test_access_after_a_minute_demotes_to_warm():
    cache = TieredCache(10)
    cache.put("a", "x", 1, 0, CachePriority.NORMAL, 0.0)
    assert cache.get_entry("a").tier == CacheTier.HOT
    cache.get("a", None, 60.0)
    assert cache.get_entry("a").tier == CacheTier.WARM
    assert cache.stats().tier_distribution == {"hot": 0, "warm": 1, "cold": 0}


def test_frequent_access_promotes_back_to_hot():
    cache = TieredCache(10)
    cache.put("a", "x", 1, 0, CachePriority.NORMAL, 0.0)
    cache.get("a", None, 60.0)
    assert cache.get_entry("a").tier == CacheTier.WARM
    for _ in range(10):
        cache.get("a", None, 60.0)
    assert cache.get_entry("a").tier == CacheTier.HOT


def test_predict_next_learns_transitions():
    cache = TieredCache(10)
    for _ in range(3):
        cache.get("b", "a", 0.0)
    assert cache.predict_next("a") == [("b", 1.0)]
    assert cache.predict_next("b") == []


def test_clear_empties_cache():
    cache = TieredCache(10)
    cache.put("a", "x", 10, 0, CachePriority.NORMAL, 0.0)
    cache.put("b", "y", 20, 0, CachePriority.NORMAL, 0.0)
    cache.clear()
    assert len(cache) == 0
    assert cache.current_size_bytes() == 0
    assert cache.get("a", None, 0.0) is None


def test_stats_snapshot_fields():
    cache = TieredCache(10)
    cache.put("a", "x", 100, 10, CachePriority.NORMAL, 0.0)
    cache.put("b", "y", 100, 30, CachePriority.NORMAL, 0.0)
    stats = cache.stats()
    assert stats.total_entries == 2
    assert stats.total_size_bytes == 200
    assert stats.max_size_bytes == cache.max_size_bytes()
    assert stats.avg_computation_cost_ms == pytest.approx(20.0)
    assert sum(stats.tier_distribution.values()) == stats.total_entries
    assert stats.memory_efficiency > 0.0


def test_stats_string_format():
    cache = TieredCache(100)
    cache.put("key1", b"\x01\x02\x03\x04", 4, 50, CachePriority.NORMAL, 0.0)
    assert str(cache.stats()).startswith("Cache Stats: 1 entries")


def test_empty_cache_stats_and_suggestions():
    cache = TieredCache(10)
    stats = cache.stats()
    assert stats.avg_computation_cost_ms == 0.0
    assert stats.memory_efficiency == 0.0
    suggestions = cache.suggest_optimizations()
    assert suggestions[0] == "[WARN] Low cache hit rate. Consider:"
    assert "[INFO] Low memory efficiency. Consider:" in suggestions


def test_get_entry_exposes_metadata():
    cache = TieredCache(10)
    cache.put("a", "x", 42, 7, CachePriority.HIGH, 5.0)
    entry = cache.get_entry("a")
    assert entry.size_bytes == 42
    assert entry.computation_cost_ms == 7
    assert entry.priority == CachePriority.HIGH
    assert entry.created_at == 5.0
    assert cache.get_entry("missing") is None