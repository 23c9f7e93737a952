"""Core data models shared across the engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class GuideState(Enum):
    IDLE = auto()
    PRESSED = auto()
    FAILED = auto()


class EndReason(Enum):
    MISSED_TILE = auto()
    WRONG_KEY = auto()


@dataclass(frozen=True)
class PendingHit:
    """A tile that crossed into play and still waits for its key."""

    target: int  # lane index whose key must be pressed
    tile_lane: int  # lane whose tile is scrolling for this hit


@dataclass
class RunState:
    running: bool = False
    score: int = 0
    high_score: int = 0
    speed_level: int = 0
    active_lane: int = 0
    end_reason: EndReason | None = None


@dataclass(frozen=True)
class LaneSnapshot:
    index: int
    key: str
    column: int
    offset: float


@dataclass(frozen=True)
class EngineSnapshot:
    """Read-only view of a session handed to the renderer each frame."""

    running: bool
    score: int
    high_score: int
    speed_level: int
    lanes: tuple[LaneSnapshot, ...]
    guides: tuple[GuideState, ...]
    sheet_status: str

    @property
    def menu_visible(self) -> bool:
        return not self.running
