"""
Frame renderer - composes one frame of draw primitives from engine state
"""
import logging
from datetime import datetime

from ..ui.fonts import TextMeasurer
from ..ui.layout import Layout
from ..ui.theme import Theme
from .primitives import DrawImage, DrawLine, DrawText, FillRect, Frame
from .state import DateFormat, EngineState, HitBox


logger = logging.getLogger(__name__)

TIME_FORMAT = '%I:%M'
CLEAN_DATE_FORMAT = '%a %d %b'
STANDARD_DATE_FORMAT = '%d/%m/%Y'
ALL_INFO_FORMAT = '%I:%M:%S %d/%m/%Y'
NO_BATTERY_TEXT = '--%'


def format_time(local_time: datetime) -> str:
    """hh:mm on a 12-hour clock, leading zero kept"""
    return local_time.strftime(TIME_FORMAT)


def format_date(local_time: datetime, date_format: DateFormat) -> str:
    if date_format is DateFormat.STANDARD:
        return local_time.strftime(STANDARD_DATE_FORMAT)
    return local_time.strftime(CLEAN_DATE_FORMAT)


class FrameRenderer:
    """
    Builds the ordered primitive list for a frame.

    Rendering reads engine state but never mutates it; the measured time
    box is returned on the frame for the engine to keep.
    """

    def __init__(self, measurer: TextMeasurer, layout: Layout, image_background: bool = False):
        self._measurer = measurer
        self._layout = layout
        self._image_background = image_background

    def render(self, state: EngineState, local_time: datetime) -> Frame:
        logger.debug(local_time.strftime(ALL_INFO_FORMAT))

        layout = self._layout
        frame = Frame()
        ambient = state.ambient
        anti_alias = not ambient
        cx, cy = layout.center
        dx, dy = state.offset.dx, state.offset.dy

        # Background
        frame.add(FillRect(0, 0, layout.width, layout.height,
                           Theme.background_color(ambient, state.silent)))
        image_shown = self._image_background and state.background_shown
        if image_shown:
            frame.add(DrawImage(0, 0, grayscale=ambient))

        alpha = Theme.ALPHA_OVER_IMAGE if image_shown else Theme.ALPHA_OPAQUE
        battery = state.battery
        low_battery = battery is not None and battery.is_low
        color = Theme.text_color(state.silent, low_battery)

        # Time
        time_text = format_time(local_time)
        time_size = layout.font_size(Theme.FONT_SIZE_TIME)
        time_width, time_height = self._measurer.measure(time_text, time_size, Theme.FONT_TIME)
        half_time = int(time_height) // 2
        time_x = cx - time_width / 2 + dx
        time_y = cy + half_time + dy
        frame.add(DrawText(time_text, time_x, time_y, time_size, color, alpha,
                           Theme.FONT_TIME, anti_alias))
        frame.time_box = HitBox(time_x, time_y - time_height, time_x + time_width, time_y)

        # Date, above the time
        date_text = format_date(local_time, state.date_format)
        date_size = layout.font_size(Theme.FONT_SIZE_DATE)
        date_width, date_height = self._measurer.measure(date_text, date_size, Theme.FONT_DATE)
        date_y = cy - (half_time + int(date_height) // 2) + dy
        frame.add(DrawText(date_text, cx - date_width / 2 + dx, date_y, date_size, color, alpha,
                           Theme.FONT_DATE, anti_alias))

        # Battery, below the time
        battery_text = battery.text if battery is not None else NO_BATTERY_TEXT
        battery_size = layout.font_size(
            Theme.FONT_SIZE_BATTERY_LOW if low_battery else Theme.FONT_SIZE_BATTERY)
        battery_width, battery_height = self._measurer.measure(
            battery_text, battery_size, Theme.FONT_BATTERY)
        battery_y = cy + half_time + int(battery_height) + layout.font_size(Theme.BATTERY_GAP) + dy
        frame.add(DrawText(battery_text, cx - battery_width / 2 + dx, battery_y, battery_size,
                           color, alpha, Theme.FONT_BATTERY, anti_alias))

        if not ambient:
            seconds = local_time.second + local_time.microsecond / 1_000_000
            x0, y0, x1, y1 = layout.second_hand(seconds)
            frame.add(DrawLine(x0, y0, x1, y1, Theme.hand_color(local_time.second),
                               Theme.HAND_STROKE_WIDTH, anti_alias))

        return frame
