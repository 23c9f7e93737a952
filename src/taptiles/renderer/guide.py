"""Key guide strip along the bottom of the lanes."""

from __future__ import annotations

import pygame

from taptiles.config import GUIDE_HEIGHT, GUIDE_WIDTH, TILE_WIDTH, WINDOW_HEIGHT
from taptiles.models import EngineSnapshot, GuideState
from taptiles.renderer.colors import GUIDE_FAILED, GUIDE_IDLE, GUIDE_PRESSED, GUIDE_TEXT

GUIDE_Y = WINDOW_HEIGHT - GUIDE_HEIGHT

_GUIDE_COLORS = {
    GuideState.IDLE: GUIDE_IDLE,
    GuideState.PRESSED: GUIDE_PRESSED,
    GuideState.FAILED: GUIDE_FAILED,
}


def render_guide(surface: pygame.Surface, snapshot: EngineSnapshot) -> None:
    font = pygame.font.SysFont("sans", 20, bold=True)

    for lane, guide in zip(snapshot.lanes, snapshot.guides):
        x = lane.index * TILE_WIDTH + (TILE_WIDTH - GUIDE_WIDTH) // 2
        rect = pygame.Rect(x, GUIDE_Y, GUIDE_WIDTH, GUIDE_HEIGHT)
        pygame.draw.rect(surface, _GUIDE_COLORS[guide], rect)

        label = font.render(lane.key, True, GUIDE_TEXT)
        surface.blit(label, label.get_rect(midbottom=(rect.centerx, rect.bottom - 4)))
