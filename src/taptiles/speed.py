"""Speed policy: maps score to a scroll speed level."""

from __future__ import annotations

from bisect import bisect_right


class SpeedPolicy:
    """Ratchets the scroll speed up at fixed score thresholds.

    Level ``i`` (for ``i >= 1``) is reached once the score meets
    ``thresholds[i - 1]``; scores past the last threshold stay on the top level.
    """

    def __init__(self, thresholds: tuple[int, ...], speeds: tuple[int, ...]) -> None:
        if len(thresholds) != len(speeds):
            raise ValueError("thresholds and speeds must have the same length")
        self.thresholds = tuple(thresholds)
        self.speeds = tuple(speeds)

    @property
    def max_level(self) -> int:
        return len(self.speeds) - 1

    def level_for(self, score: int, current: int = 0) -> int:
        """Return the speed level for ``score``, never dropping below ``current``."""
        level = min(bisect_right(self.thresholds, score), self.max_level)
        return max(level, current)

    def pixels_for(self, level: int) -> int:
        return self.speeds[min(max(level, 0), self.max_level)]
