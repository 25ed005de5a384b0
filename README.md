# meteorite

Two small building blocks with no dependencies outside the standard library:

- **`meteorite.cache`**: a multi-tier in-memory cache with weighted
  eviction scoring (recency, frequency, computation cost, size), hot/warm/cold
  tiering, a Markov-chain access predictor and optional adaptive sizing driven
  by a memory-pressure callable.
- **`meteorite.core`**: theming primitives. It provides colour palettes,
  design tokens, component sizes and variants, and generates CSS custom
  properties.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Cache

```python
import time

from meteorite.cache.entry import CachePriority
from meteorite.cache.tiered import TieredCache, CacheError

cache = TieredCache(100)  # 100 MB budget

now = time.monotonic()
cache.put("key1", [1, 2, 3, 4], 4, 50, CachePriority.NORMAL, now)

value = cache.get("key1", None, now)    # [1, 2, 3, 4]
missing = cache.get("nope", None, now)  # None

print(cache.stats())  # "Cache Stats: 1 entries, 0.0MB / 100.0MB, Hit rate: 50.0%, ..."

for line in cache.suggest_optimizations():
    print(line)
```

Timestamps are monotonic seconds. When `now` is omitted, `get` and `put` use
`time.monotonic()`. Passing your own timestamps keeps the cache deterministic
and easy to test. `put` defaults to a computation cost of 0 and
`CachePriority.NORMAL`.

`get`, `put`, `len(cache)`, `key in cache`, `clear`, `current_size_bytes`,
`max_size_bytes` and `get_entry` (raw entry access without access tracking)
make up the main interface. An empty key, or a `size_bytes` that is not
positive, raises `ValueError`.

`put` raises `CacheError` when eviction cannot free enough room for the new
entry. Entries younger than the policy's `min_age_seconds` are never evicted
for space. The cache also holds at most `MAX_CACHE_ENTRIES` (10 000)
entries. Beyond that, it drops the least recently accessed entry first.

`stats()` returns a frozen `CacheStats` snapshot with these fields:

- counts of hits, misses and evictions
- hit rate
- time saved
- tier distribution
- average computation cost
- memory efficiency

### Eviction and tiers

```python
from meteorite.cache.eviction import EvictionPolicy, TierThresholds

cache.eviction_policy = EvictionPolicy(
    recency_weight=0.4, frequency_weight=0.3,
    cost_weight=0.2, size_weight=0.1, min_age_seconds=0,
)
cache.tier_thresholds = TierThresholds(hot_frequency=5.0, warm_frequency=1.0,
                                       cold_age_seconds=300)
```

When space is needed, entries are evicted in order of increasing
`calculate_eviction_score`. Eviction stops once the new entry's size plus a
tenth of the budget has been freed. The score is multiplied by the entry's
priority and tier:

| Priority | Multiplier |
|----------|------------|
| `LOW`      | 0.5 |
| `NORMAL`   | 1   |
| `HIGH`     | 2   |
| `CRITICAL` | 10  |

| Tier   | Multiplier |
|--------|------------|
| `HOT`  | 2   |
| `WARM` | 1   |
| `COLD` | 0.5 |

New entries start in the hot tier. On each hit the entry's tier is chosen
again from its access frequency (accesses per minute) and its idle time.

### Access prediction

```python
cache.get("a", None, now)
cache.get("b", "a", now)
cache.predict_next("a")  # [("b", 1.0)]
```

`AccessPredictor` from `meteorite.cache.predictor` can also be used on its
own. It has these methods:

- `record_access(from_key, to_key)`
- `predict_next(current)`, which keeps only predictions at or above the
  confidence threshold (default 0.7)
- `predict_all(current)`
- `clear()`
- `pattern_count()`

The predictor tracks at most 1 000 source keys and 100 transitions per key.

### Adaptive sizing

```python
from meteorite.cache.entry import MemoryPressure

cache.pressure_fn = lambda: MemoryPressure.LOW
```

If `pressure_fn` is set, it is called on every `put`. It returns a
`MemoryPressure` level, or `None` to leave the budget alone. The budget
changes as follows:

| Level      | Budget change |
|------------|---------------|
| `LOW`      | grows by 10% |
| `MEDIUM`   | holds |
| `HIGH`     | shrinks by 10% |
| `CRITICAL` | halves |

Shrinking never takes the budget below 1 MB.

## Theming

```python
from meteorite.core.theme import Theme, Palette, Tokens
from meteorite.core.variant import Variant
from meteorite.core.size import Size

theme = (
    Theme.builder("corporate")
    .palette(Palette.light())
    .extra_color("brand", "#ff6600")
    .extra_token("shadow-lg", "0 8px 24px rgba(0,0,0,0.15)")
    .build()
)

css = theme.to_css_vars()                     # ":root {\n  --met-bg: #ffffff;\n ..."
theme.variant_color(Variant.custom("brand"))  # "#ff6600"
theme.variant_color(Variant.GHOST)            # "transparent"
Variant.PRIMARY.css_class()                   # "met-primary"
Size.LG.css_class()                           # "met-lg"
```

`Theme.dark()` is the default theme. `Theme.light()` is the other preset, and
`Theme.custom(name, palette)` pairs a palette with the default tokens. A
builder starts from the dark palette and default `Tokens()`.

Extra palette colours produce both a `--met-<name>` variable and a matching
`.met-<name>` variant class. Extra tokens produce a variable only. Extras are
emitted in alphabetical order, so the output is deterministic. A custom
variant whose name is not among the extra colours resolves to the palette's
`fg`.

## What this package does not do

- The cache is in-memory only: it has no persistence or disk-backed tier.
- The theming module only produces data and CSS text. It ships no UI
  components, no widget rendering and no bundled component stylesheet.
- There is no command-line interface.