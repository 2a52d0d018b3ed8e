"""
Actuator dispatch - best-effort execution of engine side effects
"""
import logging
from typing import Iterable, Optional

from ..engine.events import PlayTone, SetNotificationMuted, Vibrate
from .audio import ToneGenerator
from .haptics import Haptics
from .notifications import NotificationVolume


logger = logging.getLogger(__name__)


class ActuatorDispatcher:
    """
    Sends effects to the vibration, audio and notification actuators.

    Each effect is fire-and-forget: a failure is logged and dropped,
    never retried and never raised to the render loop.
    """

    def __init__(
        self,
        haptics: Optional[Haptics] = None,
        tones: Optional[ToneGenerator] = None,
        notifications: Optional[NotificationVolume] = None,
    ):
        self._haptics = haptics
        self._tones = tones
        self._notifications = notifications

    def dispatch(self, effects: Iterable[object]) -> int:
        """
        Returns:
            Number of effects that completed
        """
        done = 0
        for effect in effects:
            try:
                if self._run(effect):
                    done += 1
            except Exception as e:
                logger.warning(f"{type(effect).__name__} failed: {e}")
        return done

    def _run(self, effect: object) -> bool:
        if isinstance(effect, Vibrate):
            if self._haptics is None:
                return False
            self._haptics.vibrate(effect.waveform, effect.usage)
        elif isinstance(effect, PlayTone):
            if self._tones is None:
                return False
            self._tones.play_tone(effect.volume)
        elif isinstance(effect, SetNotificationMuted):
            if self._notifications is None:
                return False
            self._notifications.set_muted(effect.muted)
        else:
            logger.error(f"Unknown effect: {effect!r}")
            return False
        return True
