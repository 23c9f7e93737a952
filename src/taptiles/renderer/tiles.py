"""Falling tiles."""

from __future__ import annotations

import pygame

from taptiles.config import TILE_HEIGHT, TILE_WIDTH, WINDOW_HEIGHT
from taptiles.models import EngineSnapshot
from taptiles.renderer.colors import TILE


def render_tiles(surface: pygame.Surface, snapshot: EngineSnapshot) -> None:
    """Draw every tile that overlaps the visible area."""
    for lane in snapshot.lanes:
        if lane.offset <= -TILE_HEIGHT or lane.offset >= WINDOW_HEIGHT:
            continue
        rect = pygame.Rect(lane.column * TILE_WIDTH, int(lane.offset), TILE_WIDTH, TILE_HEIGHT)
        pygame.draw.rect(surface, TILE, rect)
