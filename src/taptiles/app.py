"""Top-level application: initializes pygame, wires the session, and runs the game loop."""

from __future__ import annotations

import logging

import pygame

from taptiles.config import FPS, WINDOW_HEIGHT, WINDOW_TITLE, WINDOW_WIDTH
from taptiles.key_input import KeyboardInput
from taptiles.session import FrameTicker, GameSession
from taptiles.views.base import ViewContext, ViewManager
from taptiles.views.game_view import GameView
from taptiles.views.sheet_view import SheetPickerView

logger = logging.getLogger(__name__)


class App:
    def __init__(
        self,
        sheets_dir: str = "",
        sheet_path: str | None = None,
        soundfont_path: str | None = None,
    ) -> None:
        pygame.init()
        self.screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption(WINDOW_TITLE)
        self.clock = pygame.time.Clock()

        # Audio is optional; the game runs silently without it
        self.audio = self._try_audio(soundfont_path)
        self.ticker = FrameTicker()
        self.session = GameSession(audio=self.audio, ticker=self.ticker)
        self._keyboard_input = KeyboardInput()

        if sheet_path:
            self.session.load_sheet_file(sheet_path)

        context = ViewContext(
            screen_size=(WINDOW_WIDTH, WINDOW_HEIGHT),
            session=self.session,
            ticker=self.ticker,
            keyboard_input=self._keyboard_input,
            audio=self.audio,
            sheets_dir=sheets_dir,
        )

        self.views = ViewManager(context)
        self.views.register(GameView)
        self.views.register(SheetPickerView)
        self.views.push("game")

    def run(self) -> None:
        running = True
        while running:
            dt = self.clock.tick(FPS) / 1000.0
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                else:
                    self._keyboard_input.feed_event(event)
                    if not self.views.handle_event(event):
                        running = False
            if running:
                if not self.views.update(dt):
                    running = False
            self.views.draw(self.screen)
            pygame.display.flip()

        self._cleanup()
        pygame.quit()

    def _cleanup(self) -> None:
        while self.views.active_view:
            self.views.pop()
        self._keyboard_input.close()
        if self.audio:
            self.audio.shutdown()

    @staticmethod
    def _try_audio(soundfont_path: str | None):
        try:
            from taptiles.audio import NotePlayer
            return NotePlayer(soundfont_path)
        except Exception as exc:
            logger.warning("audio disabled: %s", exc)
            return None
