"""
Battery sampler - throttles battery queries to a fixed frame cadence
"""
import logging
from typing import Callable, Optional

from .state import BatteryReading


logger = logging.getLogger(__name__)

BatteryProvider = Callable[[], Optional[int]]


class BatterySampler:
    """
    Queries the battery provider every ``every_frames`` frames, or every
    frame while ambient. Provider failures keep the last known reading.
    """

    def __init__(self, provider: Optional[BatteryProvider], every_frames: int = 3,
                 low_threshold: int = 31):
        self._provider = provider
        self._every_frames = every_frames
        self._low_threshold = low_threshold
        # Start at the threshold so the first frame samples
        self._counter = every_frames
        self._last: Optional[BatteryReading] = None

    def force_resample(self) -> None:
        """Make the next frame query the provider (used on wake)."""
        self._counter = self._every_frames

    def reading_for(self, percentage: int) -> BatteryReading:
        percentage = max(0, min(100, int(percentage)))
        return BatteryReading(percentage, percentage < self._low_threshold)

    def next_frame(self, ambient: bool) -> Optional[BatteryReading]:
        """
        Advance one frame and return the reading to display.

        Returns:
            Latest reading, or None if no sample has ever succeeded
        """
        if self._counter >= self._every_frames or ambient:
            self._counter = 0
            self._sample()
        self._counter += 1
        return self._last

    def _sample(self) -> None:
        if self._provider is None:
            return
        try:
            percentage = self._provider()
        except Exception as e:
            logger.warning(f"Battery query failed, keeping last reading: {e}")
            return
        if percentage is None:
            logger.debug("Battery level unavailable")
            return
        self._last = self.reading_for(percentage)
