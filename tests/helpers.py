"""Shared test doubles."""

from __future__ import annotations

from taptiles.session import GameSession


class ScriptedRng:
    """Stands in for random.Random, returning lane targets from a script."""

    def __init__(self, targets: list[int]) -> None:
        self._targets = list(targets)

    def randrange(self, stop: int) -> int:
        value = self._targets.pop(0)
        assert 0 <= value < stop
        return value


class RecordingAudio:
    def __init__(self) -> None:
        self.played: list[int] = []

    def play(self, note_index: int) -> None:
        self.played.append(note_index)


def make_session(targets: list[int], audio: RecordingAudio | None = None) -> GameSession:
    return GameSession(audio=audio, rng=ScriptedRng(targets))


def tap(session: GameSession, key: str) -> None:
    session.key_down(key)
    session.key_up(key)
