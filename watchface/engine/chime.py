"""
Hourly chime - vibration pattern that counts out the hour on the hour
"""
import logging
from datetime import datetime
from typing import List, Tuple

from .events import PlayTone, Vibrate
from .state import EngineState


logger = logging.getLogger(__name__)

# (duration_ms, amplitude)
ALERT_PREFIX: Tuple[Tuple[int, int], ...] = ((750, 100), (500, 255), (1000, 0))
PULSE_ON_MS = 250
PULSE_OFF_MS = 200
PULSE_AMPLITUDE = 255
PULSE_PAIRS = 12
WAVEFORM_LENGTH = len(ALERT_PREFIX) + 2 * PULSE_PAIRS


def hour12(hour: int) -> int:
    """Convert a 0-23 hour to the 1-12 value shown on a 12-hour clock"""
    value = hour % 12
    return 12 if value == 0 else value


def build_waveform(hour_value: int) -> Tuple[Tuple[int, int], ...]:
    """
    Build the chime waveform for a 12-hour clock value.

    The alert prefix is followed by twelve (on, off) pairs; pair k (1-based)
    is audible only while k <= hour_value.

    Args:
        hour_value: Hour on a 12-hour clock, 1..12

    Returns:
        Tuple of (duration_ms, amplitude) entries, always 27 long
    """
    waveform: List[Tuple[int, int]] = list(ALERT_PREFIX)
    for k in range(1, PULSE_PAIRS + 1):
        amplitude = PULSE_AMPLITUDE if k <= hour_value else 0
        waveform.append((PULSE_ON_MS, amplitude))
        waveform.append((PULSE_OFF_MS, 0))
    return tuple(waveform)


def audible_pulses(waveform) -> int:
    """Count the audible pulses after the alert prefix"""
    pulses = waveform[len(ALERT_PREFIX):]
    return sum(1 for duration, amplitude in pulses[0::2] if amplitude > 0)


class HourlyChime:
    """
    Fires once when the observed hour changes and the minute reads 0.

    The first observation only seeds the hour marker so that waking the
    face or installing it at the top of an hour does not chime.
    """

    def __init__(self, enabled: bool = True, tone_volume: float = 0.1):
        self._enabled = enabled
        self._tone_volume = tone_volume

    def check(self, state: EngineState, local_time: datetime) -> list:
        """
        Returns:
            Effects to dispatch, empty when nothing fires
        """
        hour = local_time.hour
        if state.hour_marker is None:
            state.hour_marker = hour
            return []
        if hour == state.hour_marker or local_time.minute != 0:
            return []

        state.hour_marker = hour
        if not self._enabled:
            return []

        value = hour12(hour)
        logger.info(f"Hourly chime: {value} o'clock")
        effects = [Vibrate(build_waveform(value), usage='alarm')]
        if not state.silent:
            effects.append(PlayTone(self._tone_volume))
        return effects
