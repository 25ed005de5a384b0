"""Markov chain predictor of the next cache key to be accessed."""

from __future__ import annotations

MAX_PREDICTOR_PATTERNS = 1_000
"""Maximum number of unique source keys tracked."""
MAX_TRANSITIONS_PER_KEY = 100
"""Maximum number of transitions stored per source key."""

_U32_MAX = 2**32 - 1


class AccessPredictor:
    """Learns key-to-key transitions and predicts likely next keys.

    New source keys or transitions beyond the limits are silently dropped.
    """

    def __init__(self, confidence_threshold: float = 0.7) -> None:
        self._patterns: dict[str, dict[str, int]] = {}
        self._confidence_threshold = min(max(confidence_threshold, 0.0), 1.0)

    @property
    def confidence_threshold(self) -> float:
        return self._confidence_threshold

    def record_access(self, from_key: str | None, to_key: str) -> None:
        """Record a transition; nothing is recorded when ``from_key`` is None."""
        if from_key is None:
            return
        if from_key not in self._patterns and len(self._patterns) >= MAX_PREDICTOR_PATTERNS:
            return

        transitions = self._patterns.setdefault(from_key, {})
        if to_key not in transitions and len(transitions) >= MAX_TRANSITIONS_PER_KEY:
            return
        transitions[to_key] = min(transitions.get(to_key, 0) + 1, _U32_MAX)

    def predict_next(self, current: str) -> list[tuple[str, float]]:
        """Predictions at or above the confidence threshold, most likely first."""
        return self._predictions(current, self._confidence_threshold)

    def predict_all(self, current: str) -> list[tuple[str, float]]:
        """All predictions for ``current``, most likely first."""
        return self._predictions(current, 0.0)

    def clear(self) -> None:
        """Forget all recorded transitions."""
        self._patterns.clear()

    def pattern_count(self) -> int:
        """Number of unique source keys tracked."""
        return len(self._patterns)

    def _predictions(self, current: str, threshold: float) -> list[tuple[str, float]]:
        transitions = self._patterns.get(current)
        if not transitions:
            return []
        total = sum(transitions.values())
        if total == 0:
            return []
        predictions = [
            (key, count / total)
            for key, count in transitions.items()
            if count / total >= threshold
        ]
        predictions.sort(key=lambda pair: pair[1], reverse=True)
        return predictions