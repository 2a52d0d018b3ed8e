"""Tests for FrameRenderer and Layout."""

import unittest
from datetime import datetime, timezone

from fakes import FakeMeasurer

from watchface.engine.primitives import DrawImage, DrawLine, DrawText, FillRect
from watchface.engine.renderer import FrameRenderer, format_date, format_time
from watchface.engine.state import (
    BatteryReading, BurnInOffset, DateFormat, DisplayMode, EngineState,
)
from watchface.ui.layout import Layout
from watchface.ui.theme import Theme


SUNDAY_AFTERNOON = datetime(2026, 10, 18, 14, 5, 0, tzinfo=timezone.utc)


class TestFormatting(unittest.TestCase):
    """Test cases for time and date strings."""

    def test_time_is_twelve_hour_with_leading_zero(self):
        """Test hh:mm keeps the leading zero."""
        self.assertEqual(format_time(SUNDAY_AFTERNOON), "02:05")
        self.assertEqual(format_time(datetime(2026, 10, 18, 0, 30)), "12:30")

    def test_time_stable_within_minute(self):
        """Test every second of a minute shows the same string."""
        shown = {format_time(datetime(2026, 10, 18, 9, 41, s)) for s in range(60)}

        self.assertEqual(shown, {"09:41"})

    def test_date_formats(self):
        """Test clean and standard date formats."""
        self.assertEqual(format_date(SUNDAY_AFTERNOON, DateFormat.CLEAN), "Sun 18 Oct")
        self.assertEqual(format_date(SUNDAY_AFTERNOON, DateFormat.STANDARD), "18/10/2026")


class TestLayout(unittest.TestCase):
    """Test cases for face geometry."""

    def setUp(self):
        """Set up test environment."""
        self.layout = Layout(454, 454)

    def test_center_and_scale(self):
        """Test center and density scale."""
        self.assertEqual(self.layout.center, (227.0, 227.0))
        self.assertEqual(self.layout.font_size(110), 110)
        self.layout.update_dimensions(227, 300)
        self.assertEqual(self.layout.font_size(110), 55)

    def test_second_hand_at_zero_points_up(self):
        """Test the hand spans the outer 20% of the radius, pointing up."""
        x0, y0, x1, y1 = self.layout.second_hand(0)

        self.assertAlmostEqual(x0, 227.0)
        self.assertAlmostEqual(x1, 227.0)
        self.assertAlmostEqual(y0, 227.0 - 227.0 * 0.8)
        self.assertAlmostEqual(y1, 0.0)

    def test_second_hand_at_fifteen_points_right(self):
        """Test the hand turns clockwise."""
        x0, y0, x1, y1 = self.layout.second_hand(15)

        self.assertAlmostEqual(x1, 454.0)
        self.assertAlmostEqual(y1, 227.0)
        self.assertGreater(x1, x0)


class TestFrameRenderer(unittest.TestCase):
    """Test cases for frame composition."""

    def setUp(self):
        """Set up test environment."""
        self.layout = Layout(454, 454)
        self.renderer = FrameRenderer(FakeMeasurer(), self.layout)
        self.state = EngineState(width=454, height=454)
        self.state.battery = BatteryReading(80, False)

    def _texts(self, frame):
        return frame.of_type(DrawText)

    def test_primitive_order(self):
        """Test background, time, date, battery, then the hand."""
        frame = self.renderer.render(self.state, SUNDAY_AFTERNOON)
        kinds = [type(p) for p in frame.primitives]

        self.assertEqual(kinds, [FillRect, DrawText, DrawText, DrawText, DrawLine])
        self.assertEqual([t.text for t in self._texts(frame)], ["02:05", "Sun 18 Oct", "80%"])

    def test_time_centered_and_offset(self):
        """Test time placement follows the burn-in offset."""
        self.state.offset = BurnInOffset(5, -3)
        frame = self.renderer.render(self.state, SUNDAY_AFTERNOON)
        time_text = self._texts(frame)[0]

        # FakeMeasurer: 5 glyphs * 55px wide, 77px tall
        self.assertAlmostEqual(time_text.x, 227 - 275 / 2 + 5)
        self.assertAlmostEqual(time_text.y, 227 + 38 - 3)

    def test_time_box_matches_drawn_time(self):
        """Test the recorded hit box is the drawn time's bounds."""
        frame = self.renderer.render(self.state, SUNDAY_AFTERNOON)
        time_text = self._texts(frame)[0]
        box = frame.time_box

        self.assertAlmostEqual(box.left, time_text.x)
        self.assertAlmostEqual(box.right, time_text.x + 275)
        self.assertAlmostEqual(box.bottom, time_text.y)
        self.assertAlmostEqual(box.top, time_text.y - 77)

    def test_date_above_battery_below(self):
        """Test the date sits above the time and the battery below."""
        frame = self.renderer.render(self.state, SUNDAY_AFTERNOON)
        time_text, date_text, battery_text = self._texts(frame)

        self.assertLess(date_text.y, time_text.y)
        self.assertGreater(battery_text.y, time_text.y)

    def test_active_background(self):
        """Test the interactive background color."""
        frame = self.renderer.render(self.state, SUNDAY_AFTERNOON)

        self.assertEqual(frame.primitives[0].color, Theme.BG_INTERACTIVE)
        self.assertTrue(self._texts(frame)[0].anti_alias)

    def test_ambient_frame(self):
        """Test ambient drops the hand, anti-aliasing and color."""
        self.state.mode = DisplayMode.AMBIENT
        frame = self.renderer.render(self.state, SUNDAY_AFTERNOON)

        self.assertEqual(frame.of_type(DrawLine), [])
        self.assertEqual(frame.primitives[0].color, Theme.BG_AMBIENT)
        self.assertFalse(any(t.anti_alias for t in self._texts(frame)))

    def test_low_battery_style(self):
        """Test 25% renders red and larger."""
        self.state.battery = BatteryReading(25, True)
        frame = self.renderer.render(self.state, SUNDAY_AFTERNOON)
        battery_text = self._texts(frame)[2]

        self.assertEqual(battery_text.color, Theme.FG_LOW_BATTERY)
        self.assertEqual(battery_text.size, Theme.FONT_SIZE_BATTERY_LOW)
        self.assertEqual(self._texts(frame)[0].color, Theme.FG_LOW_BATTERY)

    def test_normal_battery_style(self):
        """Test 31% renders in the normal style."""
        self.state.battery = BatteryReading(31, False)
        frame = self.renderer.render(self.state, SUNDAY_AFTERNOON)
        battery_text = self._texts(frame)[2]

        self.assertEqual(battery_text.color, Theme.FG_PRIMARY)
        self.assertEqual(battery_text.size, Theme.FONT_SIZE_BATTERY)

    def test_silent_palette(self):
        """Test silent mode mutes text and background."""
        self.state.silent = True
        self.state.battery = BatteryReading(25, True)
        frame = self.renderer.render(self.state, SUNDAY_AFTERNOON)

        self.assertEqual(frame.primitives[0].color, Theme.BG_SILENT)
        for text in self._texts(frame):
            self.assertEqual(text.color, Theme.FG_SILENT)

    def test_unknown_battery_text(self):
        """Test a face with no reading yet shows a placeholder."""
        self.state.battery = None
        frame = self.renderer.render(self.state, SUNDAY_AFTERNOON)

        self.assertEqual(self._texts(frame)[2].text, "--%")

    def test_hand_pulses_every_fifteen_seconds(self):
        """Test the hand recolors on 0, 15, 30 and 45 seconds."""
        for second, color in ((0, Theme.HAND_PULSE_COLOR), (15, Theme.HAND_PULSE_COLOR),
                              (16, Theme.HAND_COLOR), (44, Theme.HAND_COLOR),
                              (45, Theme.HAND_PULSE_COLOR)):
            frame = self.renderer.render(self.state, SUNDAY_AFTERNOON.replace(second=second))
            self.assertEqual(frame.of_type(DrawLine)[0].color, color)

    def test_image_background_variant(self):
        """Test the bitmap face draws the image, grayscale in ambient."""
        renderer = FrameRenderer(FakeMeasurer(), self.layout, image_background=True)
        self.state.background_shown = True

        frame = renderer.render(self.state, SUNDAY_AFTERNOON)
        image = frame.of_type(DrawImage)[0]
        self.assertFalse(image.grayscale)
        self.assertEqual(self._texts(frame)[0].alpha, Theme.ALPHA_OVER_IMAGE)

        self.state.mode = DisplayMode.AMBIENT
        frame = renderer.render(self.state, SUNDAY_AFTERNOON)
        self.assertTrue(frame.of_type(DrawImage)[0].grayscale)

    def test_hidden_image_is_opaque(self):
        """Test text is opaque while the image is hidden."""
        renderer = FrameRenderer(FakeMeasurer(), self.layout, image_background=True)
        self.state.background_shown = False

        frame = renderer.render(self.state, SUNDAY_AFTERNOON)

        self.assertEqual(frame.of_type(DrawImage), [])
        self.assertEqual(self._texts(frame)[0].alpha, Theme.ALPHA_OPAQUE)


if __name__ == '__main__':
    unittest.main()
