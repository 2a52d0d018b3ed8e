"""
Audio - short synthesized tones through the pygame mixer
"""
import logging
from typing import Sequence, Tuple

import numpy as np
import pygame


logger = logging.getLogger(__name__)

SAMPLE_RATE = 22050
TONE_FREQUENCY = 880.0
TONE_DURATION_MS = 150


class ToneGenerator:
    """
    Plays sine tones and amplitude envelopes without blocking the caller.
    """

    def __init__(self, sample_rate: int = SAMPLE_RATE):
        self._sample_rate = sample_rate
        self._ready = False

    def _ensure_mixer(self) -> None:
        if self._ready:
            return
        pygame.mixer.init(frequency=self._sample_rate, size=-16, channels=1)
        self._ready = True
        logger.info(f"Audio mixer initialized at {self._sample_rate} Hz")

    def _samples(self, duration_ms: int, level: float) -> np.ndarray:
        count = int(self._sample_rate * duration_ms / 1000)
        t = np.arange(count) / self._sample_rate
        return level * np.sin(2 * np.pi * TONE_FREQUENCY * t)

    def _play(self, wave: np.ndarray) -> None:
        self._ensure_mixer()
        pcm = (np.clip(wave, -1.0, 1.0) * 32767).astype(np.int16)
        if pygame.mixer.get_init()[2] == 2:
            pcm = np.column_stack((pcm, pcm))
        pygame.sndarray.make_sound(pcm).play()

    def play_tone(self, volume: float, duration_ms: int = TONE_DURATION_MS) -> None:
        """
        Play a short confirmation beep.

        Args:
            volume: 0.0 to 1.0
            duration_ms: Tone length
        """
        volume = max(0.0, min(1.0, volume))
        self._play(self._samples(duration_ms, volume))

    def play_envelope(self, waveform: Sequence[Tuple[int, int]], volume: float = 0.3) -> None:
        """
        Render a (duration_ms, amplitude 0..255) pattern as one sound.
        """
        parts = [self._samples(duration, volume * amplitude / 255.0)
                 for duration, amplitude in waveform]
        if parts:
            self._play(np.concatenate(parts))

    def close(self) -> None:
        if self._ready:
            pygame.mixer.quit()
            self._ready = False
