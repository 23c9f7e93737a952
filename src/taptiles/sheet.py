"""Note sheets: validate and hold the note index sequence played on hits.

A sheet file is UTF-8 text of note indices separated by single spaces, e.g.
``"0 4 7 12"``. Loading is all-or-nothing: one bad token rejects the whole
file and drops whatever sheet was loaded before.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

_TOKEN = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class SheetLoaded:
    notes: tuple[int, ...]
    filename: str


@dataclass(frozen=True)
class SheetRejected:
    reason: str
    filename: str = ""


SheetResult = SheetLoaded | SheetRejected


def parse_sheet(data: bytes, note_count: int, filename: str = "") -> SheetResult:
    """Validate raw sheet bytes. Every token must be an integer in [0, note_count)."""
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as exc:
        return SheetRejected(reason=f"not UTF-8 text: {exc}", filename=filename)

    tokens = text.split(" ")
    # Trailing separators are dropped; an all-space file still leaves one empty token.
    while len(tokens) > 1 and tokens[-1] == "":
        tokens.pop()

    notes: list[int] = []
    for position, token in enumerate(tokens):
        if not _TOKEN.fullmatch(token):
            return SheetRejected(reason=f"token {position} is not an integer: {token!r}", filename=filename)
        value = int(token)
        if not 0 <= value < note_count:
            return SheetRejected(
                reason=f"token {position} out of range 0..{note_count - 1}: {value}",
                filename=filename,
            )
        notes.append(value)
    return SheetLoaded(notes=tuple(notes), filename=filename)


class NoteSheet:
    """The currently loaded sheet, if any."""

    def __init__(self, note_count: int) -> None:
        self.note_count = note_count
        self._notes: tuple[int, ...] = ()
        self._filename: str | None = None

    @property
    def loaded(self) -> bool:
        return self._filename is not None

    @property
    def notes(self) -> tuple[int, ...]:
        return self._notes

    @property
    def filename(self) -> str | None:
        return self._filename

    def __len__(self) -> int:
        return len(self._notes)

    def load(self, data: bytes, filename: str) -> SheetResult:
        result = parse_sheet(data, self.note_count, filename)
        self._apply(result)
        return result

    def load_file(self, path: str | Path) -> SheetResult:
        path = Path(path)
        try:
            data = path.read_bytes()
        except OSError as exc:
            result: SheetResult = SheetRejected(reason=f"cannot read {path}: {exc}", filename=path.name)
            self._apply(result)
            return result
        return self.load(data, path.name)

    def clear(self) -> None:
        self._notes = ()
        self._filename = None

    def note_for_score(self, score: int) -> int | None:
        """Note to play after ``score`` hits.

        Uses ``(score - 1) % len`` so a score of 0 wraps to the last note.
        """
        if not self.loaded:
            return None
        return self._notes[(score - 1) % len(self._notes)]

    @property
    def status_text(self) -> str:
        if self.loaded:
            return f"Loaded {self._filename}"
        return "No sheet loaded"

    def _apply(self, result: SheetResult) -> None:
        if isinstance(result, SheetLoaded):
            self._notes = result.notes
            self._filename = result.filename
            logger.info("loaded sheet %s (%d notes)", result.filename, len(result.notes))
        else:
            self.clear()
            logger.warning("failed to parse sheet %s: %s", result.filename or "<unnamed>", result.reason)
