"""Gameplay view with the between-runs menu drawn on top."""

from __future__ import annotations

import pygame

from taptiles.renderer import colors as colors_mod
from taptiles.renderer.guide import render_guide
from taptiles.renderer.hud import render_hud, render_menu
from taptiles.renderer.tiles import render_tiles
from taptiles.views.base import ViewAction, ViewContext


class GameView:
    name = "game"

    def __init__(self) -> None:
        self._context: ViewContext | None = None

    def on_enter(self, context: ViewContext) -> None:
        self._context = context
        # Keys typed while another view was on top never reach the engine
        context.keyboard_input.clear()

    def on_exit(self) -> None:
        if self._context and self._context.audio:
            self._context.audio.all_notes_off()

    def handle_event(self, event: pygame.event.Event) -> ViewAction | None:
        if event.type != pygame.KEYDOWN or self._context is None:
            return None

        session = self._context.session
        if event.key == pygame.K_ESCAPE:
            return ViewAction(kind="quit")

        if session.running:
            return None
        if event.key in (pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_SPACE):
            session.restart()
        elif event.key == pygame.K_l:
            return ViewAction(kind="push", target="sheets")
        return None

    def update(self, dt: float) -> ViewAction | None:
        if self._context is None:
            return None
        session = self._context.session

        # Drain key events before ticking
        while (evt := self._context.keyboard_input.poll()) is not None:
            if evt.is_down:
                session.key_down(evt.key)
            else:
                session.key_up(evt.key)

        if self._context.ticker.active:
            session.on_tick(dt)

        if self._context.audio:
            self._context.audio.flush_pending_offs()
        return None

    def draw(self, surface: pygame.Surface) -> None:
        if self._context is None:
            return
        snapshot = self._context.session.snapshot()

        surface.fill(colors_mod.BG)
        render_guide(surface, snapshot)
        render_tiles(surface, snapshot)
        render_hud(surface, snapshot)
        if snapshot.menu_visible:
            render_menu(surface, snapshot)
