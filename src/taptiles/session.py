"""Game session: owns one engine instance and its run lifecycle."""

from __future__ import annotations

import logging
import random
from collections import deque
from pathlib import Path
from typing import Protocol, runtime_checkable

from taptiles.config import EngineSettings
from taptiles.judge import InputJudge, NoteSink
from taptiles.lanes import build_lanes, reset_lanes
from taptiles.models import EndReason, EngineSnapshot, PendingHit, RunState
from taptiles.scheduler import TileScheduler
from taptiles.sheet import NoteSheet, SheetResult
from taptiles.speed import SpeedPolicy

logger = logging.getLogger(__name__)


@runtime_checkable
class TickSource(Protocol):
    def start(self) -> None: ...
    def stop(self) -> None: ...


class FrameTicker:
    """Gate for the per-frame tick; the game loop ticks only while active."""

    def __init__(self) -> None:
        self.active = False

    def start(self) -> None:
        self.active = True

    def stop(self) -> None:
        self.active = False


class GameSession:
    """Wires the scheduler, judge and sheet around a shared run state."""

    def __init__(
        self,
        settings: EngineSettings | None = None,
        audio: NoteSink | None = None,
        ticker: TickSource | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.settings = settings or EngineSettings()
        self.ticker = ticker or FrameTicker()
        self.state = RunState()
        self.lanes = build_lanes(self.settings.lane_keys, self.settings.reset_offset)
        self.pending: deque[PendingHit] = deque()
        self.sheet = NoteSheet(self.settings.note_count)
        self.policy = SpeedPolicy(self.settings.speed_thresholds, self.settings.speed_pixels)
        self.scheduler = TileScheduler(
            self.lanes,
            self.pending,
            self.state,
            self.policy,
            self.settings.viewport_height,
            on_end=self.end,
            rng=rng,
        )
        self.judge = InputJudge(
            self.lanes, self.pending, self.state, self.sheet, on_end=self.end, audio=audio
        )

    @property
    def running(self) -> bool:
        return self.state.running

    @property
    def score(self) -> int:
        return self.state.score

    @property
    def high_score(self) -> int:
        return self.state.high_score

    def restart(self) -> None:
        reset_lanes(self.lanes)
        self.judge.reset()
        self.state.score = 0
        self.state.running = True
        self.state.end_reason = None
        self.pending.clear()
        self.scheduler.reset()
        self.ticker.start()
        logger.info("run started")

    def end(self, reason: EndReason | None = None) -> None:
        if self.state.running:
            self.state.end_reason = reason
            logger.info("run ended with score %d (%s)", self.state.score, reason.name if reason else "stopped")
        self.state.running = False
        self.state.high_score = max(self.state.high_score, self.state.score)
        self.ticker.stop()

    def on_tick(self, delta: float | None = None) -> bool:
        """Advance one frame; ``delta`` is accepted for tick sources that pass it."""
        return self.scheduler.tick()

    def key_down(self, key: str) -> None:
        self.judge.key_down(key)

    def key_up(self, key: str) -> None:
        self.judge.key_up(key)

    def load_sheet(self, data: bytes, filename: str) -> SheetResult:
        return self.sheet.load(data, filename)

    def load_sheet_file(self, path: str | Path) -> SheetResult:
        return self.sheet.load_file(path)

    def snapshot(self) -> EngineSnapshot:
        return EngineSnapshot(
            running=self.state.running,
            score=self.state.score,
            high_score=self.state.high_score,
            speed_level=self.state.speed_level,
            lanes=tuple(lane.snapshot() for lane in self.lanes),
            guides=tuple(self.judge.guides),
            sheet_status=self.sheet.status_text,
        )
