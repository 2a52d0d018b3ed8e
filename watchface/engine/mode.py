"""
Mode state machine - display mode (active/ambient) x silent mode
"""
import logging
from typing import List, Optional

from .battery import BatterySampler
from .events import SetNotificationMuted
from .state import DisplayMode, EngineState


logger = logging.getLogger(__name__)


class ModeStateMachine:
    """
    Owns the two independent mode axes.

    Display mode follows the host's ambient notification only; silent mode
    flips only on a double tap.
    """

    def __init__(self, battery: Optional[BatterySampler] = None, silent_enabled: bool = True):
        self._battery = battery
        self._silent_enabled = silent_enabled

    def set_ambient(self, state: EngineState, ambient: bool) -> bool:
        """
        Apply the host's ambient notification.

        Returns:
            True if the display mode changed
        """
        new_mode = DisplayMode.AMBIENT if ambient else DisplayMode.ACTIVE
        if new_mode is state.mode:
            return False

        state.mode = new_mode
        if new_mode is DisplayMode.ACTIVE and self._battery is not None:
            # Fresh percentage right after wake
            self._battery.force_resample()
        logger.info(f"Display mode: {new_mode.value}")
        return True

    def toggle_silent(self, state: EngineState) -> List[SetNotificationMuted]:
        """
        Flip silent mode and return the notification mute side effect.
        """
        if not self._silent_enabled:
            return []
        state.silent = not state.silent
        logger.info(f"Silent mode: {'on' if state.silent else 'off'}")
        return [SetNotificationMuted(state.silent)]

    def toggle_background(self, state: EngineState) -> None:
        state.background_shown = not state.background_shown
        logger.info(f"Background image: {'shown' if state.background_shown else 'hidden'}")

    @staticmethod
    def heartbeat_wanted(state: EngineState) -> bool:
        """The 1 Hz heartbeat runs only while visible and active"""
        return state.visible and not state.ambient and not state.destroyed
