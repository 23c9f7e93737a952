"""Raw key events from the computer keyboard."""

from __future__ import annotations

import string
from dataclasses import dataclass

import pygame


@dataclass
class KeyEvent:
    key: str
    is_down: bool


# pygame key code -> identifier ("A".."Z")
_KEY_NAMES: dict[int, str] = {
    getattr(pygame, f"K_{letter}"): letter.upper() for letter in string.ascii_lowercase
}


def key_identifier(key_code: int) -> str:
    """Identifier for a pygame key code; non-letters get a numeric name."""
    return _KEY_NAMES.get(key_code, f"KEY_{key_code}")


class KeyboardInput:
    """Queues press/release events from pygame for the game loop to poll."""

    def __init__(self) -> None:
        self._events: list[KeyEvent] = []

    def feed_event(self, event: pygame.event.Event) -> None:
        """Call from the game loop for each pygame event."""
        if event.type == pygame.KEYDOWN:
            self._events.append(KeyEvent(key=key_identifier(event.key), is_down=True))
        elif event.type == pygame.KEYUP:
            self._events.append(KeyEvent(key=key_identifier(event.key), is_down=False))

    def poll(self) -> KeyEvent | None:
        if self._events:
            return self._events.pop(0)
        return None

    def clear(self) -> None:
        """Drop events nobody has polled yet."""
        self._events.clear()

    def close(self) -> None:
        self.clear()
