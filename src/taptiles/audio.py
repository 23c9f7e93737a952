"""Note playback via FluidSynth + SoundFonts."""

from __future__ import annotations

import sys
import time
from pathlib import Path

import fluidsynth

from taptiles.config import NOTE_BASE_PITCH, NOTE_DURATION, NOTE_NAMES, NOTE_VELOCITY


def _detect_audio_driver() -> str:
    """Auto-detect the appropriate FluidSynth audio driver for the platform."""
    if sys.platform == "linux":
        return "pulseaudio"
    elif sys.platform == "darwin":
        return "coreaudio"
    elif sys.platform == "win32":
        return "dsound"
    return "alsa"


def pitch_for_note(note_index: int) -> int:
    """MIDI pitch for a sheet note index (0 = C6)."""
    if not 0 <= note_index < len(NOTE_NAMES):
        raise ValueError(f"note index out of range: {note_index}")
    return NOTE_BASE_PITCH + note_index


class NotePlayer:
    """Plays sheet notes as short FluidSynth notes."""

    def __init__(
        self,
        soundfont_path: str | Path | None = None,
        duration: float = NOTE_DURATION,
        channel: int = 0,
    ) -> None:
        self.fs = fluidsynth.Synth(gain=0.8)
        self.fs.start(driver=_detect_audio_driver())
        self.duration = duration
        self.channel = channel
        self._sfid: int | None = None
        self._pending_offs: list[tuple[float, int]] = []  # (off_time, pitch)
        if soundfont_path:
            self.load_soundfont(soundfont_path)

    def load_soundfont(self, path: str | Path) -> None:
        self._sfid = self.fs.sfload(str(path))
        self.fs.program_select(self.channel, self._sfid, 0, 0)

    def play(self, note_index: int) -> None:
        pitch = pitch_for_note(note_index)
        self.fs.noteon(self.channel, pitch, NOTE_VELOCITY)
        self._pending_offs.append((time.time() + self.duration, pitch))

    def flush_pending_offs(self) -> None:
        """Call each frame to release notes whose duration has elapsed."""
        now = time.time()
        remaining: list[tuple[float, int]] = []
        for off_time, pitch in self._pending_offs:
            if now >= off_time:
                self.fs.noteoff(self.channel, pitch)
            else:
                remaining.append((off_time, pitch))
        self._pending_offs = remaining

    def all_notes_off(self) -> None:
        for _, pitch in self._pending_offs:
            self.fs.noteoff(self.channel, pitch)
        self._pending_offs.clear()

    def shutdown(self) -> None:
        self.all_notes_off()
        self.fs.delete()
