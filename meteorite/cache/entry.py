"""Cache entries plus the tier, priority and memory-pressure enumerations."""

from __future__ import annotations

import enum
from collections import deque
from dataclasses import dataclass, field
from typing import Any

MAX_ACCESS_PATTERN_HISTORY = 100
"""Maximum number of access timestamps tracked per entry."""

_U32_MAX = 2**32 - 1


def elapsed_seconds(now: float, earlier: float) -> int:
    """Whole seconds from ``earlier`` to ``now``, never negative."""
    return max(0, int(now - earlier))


class CacheTier(enum.IntEnum):
    """Hot/Warm/Cold classification. Lower values resist eviction more."""

    HOT = 0
    WARM = 1
    COLD = 2


class CachePriority(enum.IntEnum):
    """User-defined priority. Higher priorities are harder to evict."""

    LOW = 0
    NORMAL = 1
    HIGH = 2
    CRITICAL = 3


class MemoryPressure(enum.Enum):
    """Memory pressure levels used for adaptive cache sizing."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


@dataclass
class CacheEntry:
    """A cached value with access tracking and tier metadata.

    Timestamps are monotonic seconds, as returned by ``time.monotonic()``.
    A new entry starts in the hot tier with one recorded access.
    """

    data: Any
    size_bytes: int
    computation_cost_ms: int
    priority: CachePriority
    created_at: float
    last_access: float = field(init=False)
    access_count: int = field(default=1, init=False)
    access_frequency: float = field(default=1.0, init=False)
    tier: CacheTier = field(default=CacheTier.HOT, init=False)
    access_pattern: deque = field(
        default_factory=lambda: deque(maxlen=MAX_ACCESS_PATTERN_HISTORY), init=False
    )

    def __post_init__(self) -> None:
        self.last_access = self.created_at

    def record_access(self, now: float) -> None:
        """Record an access and refresh the per-minute access frequency."""
        self.last_access = now
        self.access_count = min(self.access_count + 1, _U32_MAX)
        self.access_pattern.append(now)

        age_minutes = elapsed_seconds(now, self.created_at) / 60.0
        if age_minutes > 0.0:
            self.access_frequency = self.access_count / age_minutes
        else:
            self.access_frequency = float(self.access_count)

    def get_data(self) -> Any:
        """Return the cached value."""
        return self.data