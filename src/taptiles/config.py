"""Global constants and default settings."""

from __future__ import annotations

from dataclasses import dataclass

WINDOW_WIDTH = 400
WINDOW_HEIGHT = 450
FPS = 60
WINDOW_TITLE = "Tap Tiles"

# Tiles are parked one tile height above the visible area
TILE_WIDTH = 100
TILE_HEIGHT = 150

# Key guide strip at the bottom of each lane
GUIDE_WIDTH = 100
GUIDE_HEIGHT = 40

LANE_KEYS = "DFJK"

# Score thresholds and per-tick pixel advance for each speed level.
# Speeds divide TILE_HEIGHT so consecutive tiles stay flush.
SPEED_THRESHOLDS = (10, 25, 45, 75, 110)
SPEED_PIXELS = (2, 3, 5, 10, 15)

# Sheet note indices map onto these notes (C6 = MIDI 84)
NOTE_NAMES = (
    "C6", "C#6", "D6", "D#6", "E6", "F6", "F#6", "G6", "G#6", "A6", "A#6", "B6",
    "C7", "C#7", "D7", "D#7", "E7", "F7", "F#7", "G7", "G#7", "A7", "A#7", "B7",
)
NOTE_BASE_PITCH = 84
NOTE_DURATION = 0.4  # seconds
NOTE_VELOCITY = 100


@dataclass(frozen=True)
class EngineSettings:
    """Engine parameters, fixed for the lifetime of a session."""

    lane_keys: str = LANE_KEYS
    viewport_height: int = WINDOW_HEIGHT
    tile_width: int = TILE_WIDTH
    tile_height: int = TILE_HEIGHT
    speed_thresholds: tuple[int, ...] = SPEED_THRESHOLDS
    speed_pixels: tuple[int, ...] = SPEED_PIXELS
    note_count: int = len(NOTE_NAMES)

    def __post_init__(self) -> None:
        if not self.lane_keys:
            raise ValueError("at least one lane key is required")
        if len(set(self.lane_keys)) != len(self.lane_keys):
            raise ValueError(f"duplicate lane keys in {self.lane_keys!r}")
        if not self.speed_thresholds:
            raise ValueError("at least one speed threshold is required")
        if len(self.speed_pixels) != len(self.speed_thresholds):
            raise ValueError("speed_pixels and speed_thresholds must have the same length")
        if list(self.speed_thresholds) != sorted(self.speed_thresholds):
            raise ValueError("speed_thresholds must be ascending")
        if not 0 < self.note_count <= len(NOTE_NAMES):
            raise ValueError(f"note_count must be between 1 and {len(NOTE_NAMES)}")

    @property
    def lane_count(self) -> int:
        return len(self.lane_keys)

    @property
    def reset_offset(self) -> int:
        return -self.tile_height
