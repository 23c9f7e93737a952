"""Tile scheduler: advances tiles, spawns new ones, detects misses."""

from __future__ import annotations

import logging
import random
from collections import deque
from typing import Callable

from taptiles.lanes import Lane, LaneState
from taptiles.models import EndReason, PendingHit, RunState
from taptiles.speed import SpeedPolicy

logger = logging.getLogger(__name__)


class TileScheduler:
    """Per-frame state machine for the lanes.

    Exactly one lane is the active-spawn lane at a time. Once its tile has
    scrolled fully into view (or nothing is pending), the next lane in
    round-robin order is armed with a tile whose target key is chosen at
    random; the target is queued as a :class:`PendingHit`.
    """

    def __init__(
        self,
        lanes: list[Lane],
        pending: deque[PendingHit],
        state: RunState,
        policy: SpeedPolicy,
        viewport_height: float,
        on_end: Callable[[EndReason | None], None],
        rng: random.Random | None = None,
    ) -> None:
        self.lanes = lanes
        self.pending = pending
        self.state = state
        self.policy = policy
        self.viewport_height = viewport_height
        self._on_end = on_end
        self._rng = rng or random.Random()

    @property
    def speed(self) -> int:
        return self.policy.pixels_for(self.state.speed_level)

    def reset(self) -> None:
        """Start a new run at the slowest speed. The first tile spawns on the first tick."""
        self.state.active_lane = 0
        self.state.speed_level = 0

    def spawn_next(self) -> bool:
        """Arm the lane after the active one if it is parked. Returns True on spawn."""
        candidate = self.lanes[(self.state.active_lane + 1) % len(self.lanes)]
        if candidate.occupied:
            return False

        target = self._rng.randrange(len(self.lanes))
        self.state.active_lane = candidate.index
        candidate.column = target
        self.pending.append(PendingHit(target=target, tile_lane=candidate.index))
        self.state.speed_level = self.policy.level_for(self.state.score, self.state.speed_level)
        logger.debug("spawned tile in lane %d targeting key %d", candidate.index, target)
        return True

    def tick(self) -> bool:
        """Advance one frame. Returns False once the run has ended."""
        for lane in self.lanes:
            if not self.state.running:
                self._on_end(None)
                return False
            # Checked before moving so a tile sitting on the boundary is caught.
            if lane.state(self.viewport_height) is LaneState.PAST:
                logger.info("tile in lane %d left the hit zone", lane.index)
                self._on_end(EndReason.MISSED_TILE)
                return False

            is_active = lane.index == self.state.active_lane
            if not (lane.occupied or is_active):
                continue
            if is_active and (lane.offset >= 0 or not self.pending):
                self.spawn_next()
                continue
            lane.offset += self.speed
        return True
