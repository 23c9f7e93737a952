"""Input judge: verifies key presses against the oldest pending tile."""

from __future__ import annotations

import logging
from collections import deque
from typing import Callable, Protocol

from taptiles.lanes import Lane
from taptiles.models import EndReason, GuideState, PendingHit, RunState
from taptiles.sheet import NoteSheet

logger = logging.getLogger(__name__)


class NoteSink(Protocol):
    def play(self, note_index: int) -> None: ...


class InputJudge:
    """Press/release state machine.

    Presses are judged strictly in queue order: the oldest pending hit must be
    resolved first, whichever tile is visually closest to the hit zone.
    """

    def __init__(
        self,
        lanes: list[Lane],
        pending: deque[PendingHit],
        state: RunState,
        sheet: NoteSheet,
        on_end: Callable[[EndReason | None], None],
        audio: NoteSink | None = None,
    ) -> None:
        self.lanes = lanes
        self.pending = pending
        self.state = state
        self.sheet = sheet
        self.audio = audio
        self._on_end = on_end
        self._lane_for_key = {lane.key: lane.index for lane in lanes}
        self.held: set[str] = set()
        self.guides = [GuideState.IDLE] * len(lanes)
        # Set until the first run starts, and again once a failed run has
        # been marked on the guide, so only one release shows the failure.
        self.fail_marked = True

    def reset(self) -> None:
        self.held.clear()
        self.guides = [GuideState.IDLE] * len(self.lanes)
        self.fail_marked = False

    def lane_for_key(self, key: str) -> int | None:
        return self._lane_for_key.get(key)

    def key_down(self, key: str) -> None:
        if key in self.held:
            return
        self.held.add(key)

        lane_index = self.lane_for_key(key)
        if lane_index is None or not self.state.running or not self.pending:
            return

        self.guides[lane_index] = GuideState.PRESSED
        hit = self.pending.popleft()
        if hit.target == lane_index:
            self.lanes[hit.tile_lane].park()
            self.state.score += 1
        else:
            logger.info("pressed %s but lane %d was due", key, hit.target)
            self._on_end(EndReason.WRONG_KEY)

    def key_up(self, key: str) -> None:
        self.held.discard(key)

        lane_index = self.lane_for_key(key)
        if lane_index is None or self.fail_marked:
            return

        if self.state.running:
            self.guides[lane_index] = GuideState.IDLE
        else:
            self.guides[lane_index] = GuideState.FAILED
            self.fail_marked = True

        note = self.sheet.note_for_score(self.state.score)
        if note is not None and self.audio is not None:
            self.audio.play(note)
