"""
Theme - Watch face palette, fonts, and styling constants
"""
from typing import Tuple


Color = Tuple[int, int, int]


class Theme:
    """
    Face palette and type scale.

    Sizes are given for a 454px reference surface and scaled by Layout.
    """

    # Backgrounds
    BG_INTERACTIVE: Color = (0, 0, 255)     # Blue while active
    BG_SILENT: Color = (0, 0, 96)           # Dark blue while silent
    BG_AMBIENT: Color = (0, 0, 0)           # Black in ambient

    # Text
    FG_PRIMARY: Color = (255, 255, 255)
    FG_SILENT: Color = (150, 150, 170)      # Muted palette in silent mode
    FG_LOW_BATTERY: Color = (255, 0, 0)

    # Second hand
    HAND_COLOR: Color = (255, 255, 255)
    HAND_PULSE_COLOR: Color = (255, 170, 0)  # Every 15 seconds
    HAND_STROKE_WIDTH = 3.0
    HAND_LENGTH_FRACTION = 0.2

    # Alpha
    ALPHA_OPAQUE = 255
    ALPHA_OVER_IMAGE = 175

    # Fonts
    FONT_TIME = 'time'
    FONT_DATE = 'date'
    FONT_BATTERY = 'battery'

    FONT_SIZE_TIME = 110
    FONT_SIZE_DATE = 25
    FONT_SIZE_BATTERY = 50
    FONT_SIZE_BATTERY_LOW = 65

    # Spacing
    BATTERY_GAP = 20

    REFERENCE_SIZE = 454

    @staticmethod
    def background_color(ambient: bool, silent: bool) -> Color:
        """
        Get background fill for the current mode.

        Args:
            ambient: Whether the face is in ambient mode
            silent: Whether silent mode is on

        Returns:
            RGB tuple
        """
        if ambient:
            return Theme.BG_AMBIENT
        if silent:
            return Theme.BG_SILENT
        return Theme.BG_INTERACTIVE

    @staticmethod
    def text_color(silent: bool, low_battery: bool) -> Color:
        """Silent palette wins over the low battery warning"""
        if silent:
            return Theme.FG_SILENT
        if low_battery:
            return Theme.FG_LOW_BATTERY
        return Theme.FG_PRIMARY

    @staticmethod
    def hand_color(second: int) -> Color:
        return Theme.HAND_PULSE_COLOR if second % 15 == 0 else Theme.HAND_COLOR

    @staticmethod
    def blend(fg: Color, bg: Color, alpha: int) -> Color:
        """
        Composite ``fg`` over ``bg`` for targets without alpha support.

        Args:
            fg: Foreground RGB
            bg: Background RGB
            alpha: 0..255

        Returns:
            Blended RGB tuple
        """
        a = max(0, min(255, alpha)) / 255.0
        return tuple(int(round(f * a + b * (1 - a))) for f, b in zip(fg, bg))

    @staticmethod
    def to_hex(color: Color) -> str:
        return '#{:02x}{:02x}{:02x}'.format(*color)
