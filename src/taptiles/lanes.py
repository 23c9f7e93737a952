"""Lane model: the fixed tracks tiles scroll down."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from taptiles.models import LaneSnapshot


class LaneState(Enum):
    IDLE = auto()
    DESCENDING = auto()
    PAST = auto()


@dataclass
class Lane:
    """One track. A lane holds at most one tile, which is "occupied" whenever
    its offset sits below the parked position."""

    index: int
    key: str
    reset_offset: float
    offset: float = 0.0
    column: int = 0  # horizontal slot the tile is drawn in

    def __post_init__(self) -> None:
        self.park()

    def park(self) -> None:
        self.offset = self.reset_offset

    @property
    def occupied(self) -> bool:
        return self.offset > self.reset_offset

    def state(self, viewport_height: float) -> LaneState:
        if self.offset >= viewport_height:
            return LaneState.PAST
        if self.occupied:
            return LaneState.DESCENDING
        return LaneState.IDLE

    def snapshot(self) -> LaneSnapshot:
        return LaneSnapshot(index=self.index, key=self.key, column=self.column, offset=self.offset)


def build_lanes(keys: str, reset_offset: float) -> list[Lane]:
    return [Lane(index=i, key=key, reset_offset=reset_offset) for i, key in enumerate(keys)]


def reset_lanes(lanes: list[Lane]) -> None:
    """Park every lane at column 0."""
    for lane in lanes:
        lane.park()
        lane.column = 0
