"""Heads-up display: live score and the between-runs menu."""

from __future__ import annotations

import pygame

from taptiles.models import EngineSnapshot
from taptiles.renderer.colors import MENU_HINT, MENU_OVERLAY, MENU_TEXT, SCORE_TEXT


def render_hud(surface: pygame.Surface, snapshot: EngineSnapshot) -> None:
    font = pygame.font.SysFont("sans", 48, bold=True)
    text = font.render(str(snapshot.score), True, SCORE_TEXT)
    surface.blit(text, text.get_rect(center=(surface.get_width() // 2, 50)))


def render_menu(surface: pygame.Surface, snapshot: EngineSnapshot) -> None:
    """Translucent menu panel shown while no run is active."""
    w, h = surface.get_size()
    overlay = pygame.Surface((w, h), pygame.SRCALPHA)
    overlay.fill(MENU_OVERLAY)
    surface.blit(overlay, (0, 0))

    font = pygame.font.SysFont("sans", 22)
    lines = [
        ("Enter: Start", MENU_TEXT),
        ("L: Load sheet", MENU_TEXT),
        (f"Hiscore: {snapshot.high_score}", MENU_TEXT),
        (snapshot.sheet_status, MENU_HINT),
    ]
    y = h // 2 - len(lines) * 16
    for line, color in lines:
        text = font.render(line, True, color)
        surface.blit(text, text.get_rect(center=(w // 2, y)))
        y += 32
