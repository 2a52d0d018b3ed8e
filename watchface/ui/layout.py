"""
Layout - Face geometry derived from the surface size
"""
import math
from typing import Tuple

from .theme import Theme


class Layout:
    """
    Manages center coordinates, scaled font sizes and hand geometry.
    """

    def __init__(self, width: int, height: int):
        """
        Initialize layout manager.

        Args:
            width: Surface width in pixels
            height: Surface height in pixels
        """
        self._width = width
        self._height = height

    def update_dimensions(self, width: int, height: int) -> None:
        """
        Update surface dimensions and recalculate layout.

        Args:
            width: New surface width
            height: New surface height
        """
        self._width = width
        self._height = height

    @property
    def scale(self) -> float:
        """Density factor relative to the reference surface"""
        if self._width <= 0 or self._height <= 0:
            return 1.0
        return min(self._width, self._height) / float(Theme.REFERENCE_SIZE)

    def font_size(self, base_size: int) -> int:
        """Scale a reference font size to this surface"""
        return max(1, int(round(base_size * self.scale)))

    @property
    def center(self) -> Tuple[float, float]:
        """Center of the whole surface, ignoring any chin inset"""
        return (self._width / 2.0, self._height / 2.0)

    def second_hand(self, seconds: float) -> Tuple[float, float, float, float]:
        """
        Endpoints of the second hand.

        The hand covers the outer fraction of the radius and is rotated
        ``seconds * 6 + 180`` degrees about the center, so 0s points up.

        Args:
            seconds: Seconds past the minute, fractional

        Returns:
            Tuple of (x0, y0, x1, y1)
        """
        cx, cy = self.center
        radius = self._height / 2.0
        inner = radius - radius * Theme.HAND_LENGTH_FRACTION
        angle = math.radians(seconds * 6.0 + 180.0)
        # Rotating (0, r) clockwise in screen coordinates
        dx, dy = -math.sin(angle), math.cos(angle)
        return (cx + dx * inner, cy + dy * inner, cx + dx * radius, cy + dy * radius)

    @property
    def width(self) -> int:
        """Get surface width"""
        return self._width

    @property
    def height(self) -> int:
        """Get surface height"""
        return self._height
