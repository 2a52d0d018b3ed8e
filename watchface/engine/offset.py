"""
Burn-in offset generator - jitters the face content between frames
"""
import random
import logging
from typing import Optional

from .state import BurnInOffset


logger = logging.getLogger(__name__)


class BurnInOffsetGenerator:
    """
    Re-samples a pixel offset every ``every_frames`` frames, or every frame
    while ambient. Offsets are drawn fresh each time, never drifted.
    """

    def __init__(self, max_offset: int = 15, every_frames: int = 30,
                 rng: Optional[random.Random] = None):
        """
        Args:
            max_offset: Exclusive bound on |dx| and |dy| in pixels
            every_frames: Frames between re-samples outside ambient
            rng: Random source (injectable for tests)
        """
        self._max_offset = max_offset
        self._every_frames = every_frames
        self._rng = rng or random.Random()
        self._counter = 0

    def _component(self) -> int:
        magnitude = self._rng.randrange(self._max_offset)
        return -magnitude if self._rng.random() < 0.5 else magnitude

    def next_frame(self, current: BurnInOffset, ambient: bool) -> BurnInOffset:
        """
        Advance one frame.

        Args:
            current: Offset used by the previous frame
            ambient: Whether the face is in ambient mode

        Returns:
            Offset to use for this frame
        """
        self._counter += 1
        if self._counter < self._every_frames and not ambient:
            return current

        self._counter = 0
        offset = BurnInOffset(self._component(), self._component())
        logger.debug(f"Burn-in offset: x={offset.dx:+d}, y={offset.dy:+d}")
        return offset
