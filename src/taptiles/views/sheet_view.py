"""Sheet picker: choose a note sheet from the sheets directory."""

from __future__ import annotations

from pathlib import Path

import pygame

from taptiles.renderer import colors as colors_mod
from taptiles.sheet import SheetRejected
from taptiles.views.base import ViewAction, ViewContext

SHEET_PATTERNS = ("*.txt", "*.sheet")


def scan_sheets(sheets_dir: str) -> list[Path]:
    if not sheets_dir:
        return []
    path = Path(sheets_dir)
    if not path.is_dir():
        return []
    found: list[Path] = []
    for pattern in SHEET_PATTERNS:
        found.extend(path.glob(pattern))
    return sorted(found)


class SheetPickerView:
    name = "sheets"

    def __init__(self) -> None:
        self._context: ViewContext | None = None
        self._sheet_files: list[Path] = []
        self._selected: int = 0
        self._error: str | None = None
        self._font: pygame.font.Font | None = None

    def on_enter(self, context: ViewContext) -> None:
        self._context = context
        self._font = pygame.font.SysFont("monospace", 16)
        self._sheet_files = scan_sheets(context.sheets_dir)
        self._selected = 0
        self._error = None

    def on_exit(self) -> None:
        pass

    def handle_event(self, event: pygame.event.Event) -> ViewAction | None:
        if event.type != pygame.KEYDOWN:
            return None

        if event.key == pygame.K_ESCAPE:
            return ViewAction(kind="pop")
        if event.key == pygame.K_UP:
            self._selected = max(0, self._selected - 1)
        elif event.key == pygame.K_DOWN:
            self._selected = min(len(self._sheet_files) - 1, self._selected + 1) if self._sheet_files else 0
        elif event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
            return self._load_selected()
        return None

    def _load_selected(self) -> ViewAction | None:
        if not self._sheet_files or self._context is None:
            return None
        result = self._context.session.load_sheet_file(self._sheet_files[self._selected])
        if isinstance(result, SheetRejected):
            self._error = result.reason
            return None
        return ViewAction(kind="pop")

    def update(self, dt: float) -> ViewAction | None:
        return None

    def draw(self, surface: pygame.Surface) -> None:
        if not self._font or self._context is None:
            return

        surface.fill(colors_mod.PICKER_BG)
        w, h = surface.get_size()

        header = self._font.render("Sheets:", True, colors_mod.PICKER_TEXT)
        surface.blit(header, (20, 20))

        if self._sheet_files:
            y = 50
            for i, path in enumerate(self._sheet_files):
                prefix = "> " if i == self._selected else "  "
                color = colors_mod.PICKER_SELECTED if i == self._selected else colors_mod.PICKER_TEXT
                text = self._font.render(f"{prefix}{path.name}", True, color)
                surface.blit(text, (20, y))
                y += 22
                if y > h - 90:
                    break
        else:
            empty = self._font.render("No sheets found (--sheets-dir).", True, colors_mod.PICKER_ERROR)
            surface.blit(empty, (20, 50))

        status = self._error or self._context.session.sheet.status_text
        color = colors_mod.PICKER_ERROR if self._error else colors_mod.PICKER_TEXT
        surface.blit(self._font.render(status[: w // 9], True, color), (20, h - 60))

        legend = self._font.render("Up/Down | Enter: load | Esc", True, colors_mod.MENU_HINT)
        surface.blit(legend, (20, h - 30))
