"""Looping beep playback driven by the sound timer."""

from __future__ import annotations

import io
import struct
import wave
from typing import Any, Optional


def make_beep_wav(
    frequency: float = 440.0, duration: float = 0.5, sample_rate: int = 44100
) -> bytes:
    """Return a mono 16-bit WAV file holding a square-wave tone."""
    if frequency <= 0:
        raise ValueError("frequency must be positive")
    if duration <= 0:
        raise ValueError("duration must be positive")
    if sample_rate <= 0:
        raise ValueError("sample_rate must be positive")

    frame_count = int(duration * sample_rate)
    amplitude = 12000
    half_period = sample_rate / (2.0 * frequency)
    samples = (
        amplitude if int(n / half_period) % 2 == 0 else -amplitude
        for n in range(frame_count)
    )
    frames = b"".join(struct.pack("<h", s) for s in samples)

    buffer = io.BytesIO()
    with wave.open(buffer, "wb") as out:
        out.setnchannels(1)
        out.setsampwidth(2)
        out.setframerate(sample_rate)
        out.writeframes(frames)
    return buffer.getvalue()


def _default_sound() -> Any:
    import pygame

    if not pygame.mixer.get_init():
        pygame.mixer.init()
    return pygame.mixer.Sound(file=io.BytesIO(make_beep_wav()))


class AudioManager:
    """Starts and stops a looping beep.

    ``sound`` is any object with ``play(loops=...)``, ``stop()`` and
    ``set_volume(value)``; when omitted a generated tone is loaded into
    the pygame mixer.
    """

    def __init__(self, sound: Optional[Any] = None, volume: float = 0.2) -> None:
        if not 0.0 <= volume <= 1.0:
            raise ValueError("volume must be between 0 and 1")
        self._sound = sound if sound is not None else _default_sound()
        self._sound.set_volume(volume)
        self._playing = False

    @property
    def is_playing(self) -> bool:
        return self._playing

    def start_beep(self) -> None:
        """Begin looping the beep unless it is already sounding."""
        if not self._playing:
            self._sound.play(loops=-1)
            self._playing = True

    def stop_beep(self) -> None:
        """Silence the beep."""
        self._sound.stop()
        self._playing = False