"""
Haptics - vibration actuator backends
"""
import logging
from typing import Optional, Sequence, Tuple

from .audio import ToneGenerator


logger = logging.getLogger(__name__)


class Haptics:
    """
    Vibration output.

    Hosts without a vibration motor use the ``log`` backend, or ``audio``
    to hear the pattern as a buzz.
    """

    BACKENDS = ('log', 'audio')

    def __init__(self, backend: str = 'log', tones: Optional[ToneGenerator] = None):
        if backend not in self.BACKENDS:
            logger.warning(f"Unknown haptics backend '{backend}', using 'log'")
            backend = 'log'
        if backend == 'audio' and tones is None:
            tones = ToneGenerator()
        self._backend = backend
        self._tones = tones

    def vibrate(self, waveform: Sequence[Tuple[int, int]], usage: str = 'alarm') -> None:
        """
        Args:
            waveform: (duration_ms, amplitude 0..255) entries
            usage: Usage hint passed through to the actuator
        """
        total_ms = sum(duration for duration, _ in waveform)
        logger.info(f"Vibrate ({usage}): {len(waveform)} steps, {total_ms} ms")
        if self._backend == 'audio':
            self._tones.play_envelope(waveform)

    @property
    def backend(self) -> str:
        return self._backend
