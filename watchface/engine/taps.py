"""
Tap interpreter - routes taps to the date-format toggle or double-tap detection
"""
import logging
from enum import Enum

from .events import TapType
from .state import DateFormat, EngineState


logger = logging.getLogger(__name__)


class TapOutcome(Enum):
    IGNORED = 'ignored'
    DATE_FORMAT_TOGGLED = 'date_format_toggled'
    SINGLE_TAP = 'single_tap'
    DOUBLE_TAP = 'double_tap'


class TapInterpreter:
    """
    Classifies primary taps against the last drawn time box.

    A hit toggles the date format and leaves the tap history alone; a miss
    is compared with the previous miss to detect a double tap and always
    becomes the new history entry.
    """

    def __init__(self, revert_after_ms: int = 60000, double_tap_window_ms: int = 1000):
        self._revert_after_ms = revert_after_ms
        self._double_tap_window_ms = double_tap_window_ms

    def interpret(self, state: EngineState, tap_type: TapType, x: float, y: float,
                  now_ms: int) -> TapOutcome:
        if tap_type is not TapType.TAP:
            return TapOutcome.IGNORED

        box = state.time_hit_box
        if box is not None and box.contains(x, y):
            self.toggle_date_format(state, now_ms)
            return TapOutcome.DATE_FORMAT_TOGGLED

        previous = state.last_tap_ms
        state.last_tap_ms = now_ms
        if previous is not None and now_ms - previous < self._double_tap_window_ms:
            logger.debug(f"Double tap ({now_ms - previous} ms)")
            return TapOutcome.DOUBLE_TAP
        return TapOutcome.SINGLE_TAP

    def toggle_date_format(self, state: EngineState, now_ms: int) -> None:
        if state.date_format is DateFormat.CLEAN:
            state.date_format = DateFormat.STANDARD
            state.revert_deadline_ms = now_ms + self._revert_after_ms
        else:
            state.date_format = DateFormat.CLEAN
            state.revert_deadline_ms = None
        logger.info(f"Date format: {state.date_format.value}")

    def expire_date_format(self, state: EngineState, now_ms: int) -> bool:
        """
        Revert a standard date format whose deadline has passed.

        Returns:
            True if the format reverted this call
        """
        if state.date_format is not DateFormat.STANDARD:
            return False
        if state.revert_deadline_ms is not None and now_ms < state.revert_deadline_ms:
            return False
        state.date_format = DateFormat.CLEAN
        state.revert_deadline_ms = None
        logger.debug("Date format reverted to clean")
        return True
