"""Tests for ConfigService and FaceConfig."""

import os
import shutil
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from watchface.core.config_service import ConfigService
from watchface.engine.state import DoubleTapAction, FaceConfig


class TestConfigService(unittest.TestCase):
    """Test cases for YAML loading and overrides."""

    def setUp(self):
        """Set up test environment."""
        self.temp_dir = tempfile.mkdtemp()
        self.config_path = Path(self.temp_dir) / "config.yaml"
        self.paths = patch.object(ConfigService, 'CONFIG_PATHS', [self.config_path])
        self.paths.start()
        self.config = ConfigService()

    def tearDown(self):
        """Clean up test environment."""
        self.paths.stop()
        self.config.reload()
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def _write(self, content: str):
        self.config_path.write_text(content)

    def test_singleton(self):
        """Test every construction returns the same instance."""
        self.assertIs(ConfigService(), self.config)

    def test_defaults_without_file(self):
        """Test built-in defaults apply when no file exists."""
        with patch.dict(os.environ, {}, clear=True):
            self.config.reload()

        self.assertIsNone(self.config.get('face.burn_in_max_offset'))
        self.assertEqual(FaceConfig.from_config(self.config).burn_in_max_offset, 15)
        self.assertEqual(self.config.get('display.width'), 454)
        self.assertEqual(self.config.get('timezone'), 'local')

    def test_yaml_merges_over_defaults(self):
        """Test a partial file keeps the remaining defaults."""
        self._write("face:\n  burn_in_max_offset: 30\n  image_background: true\n")

        with patch.dict(os.environ, {}, clear=True):
            self.config.reload()

        self.assertEqual(self.config.get('face.burn_in_max_offset'), 30)
        self.assertTrue(self.config.get('face.image_background'))
        self.assertTrue(self.config.get('face.silent_mode_enabled'))
        self.assertEqual(self.config.get('battery.low_threshold'), 31)

    def test_invalid_yaml_falls_back(self):
        """Test a broken file is ignored with defaults kept."""
        self._write("face: [unclosed\n")

        with patch.dict(os.environ, {}, clear=True):
            self.config.reload()

        self.assertEqual(self.config.get('display.width'), 454)

    def test_env_overrides(self):
        """Test environment variables win over the file."""
        self._write("timezone: Europe/Paris\n")
        env = {
            'TIMEZONE': 'Asia/Tokyo',
            'DISPLAY_WIDTH': '390',
            'BURN_IN_MAX_OFFSET': '30',
            'FACE_IMAGE_BACKGROUND': 'yes',
            'LOG_LEVEL': 'DEBUG',
        }

        with patch.dict(os.environ, env, clear=True):
            self.config.reload()

        self.assertEqual(self.config.get('timezone'), 'Asia/Tokyo')
        self.assertEqual(self.config.get('display.width'), 390)
        self.assertEqual(self.config.get('face.burn_in_max_offset'), 30)
        self.assertTrue(self.config.get('face.image_background'))
        self.assertEqual(self.config.get('logging.level'), 'DEBUG')

    def test_get_missing_returns_default(self):
        """Test dot lookups through missing keys."""
        self.assertIsNone(self.config.get('nope.nothing'))
        self.assertEqual(self.config.get('face.burn_in_max_offset.deeper', 7), 7)

    def test_set(self):
        """Test dot-notation set creates nested keys."""
        self.config.set('extra.nested.value', 3)

        self.assertEqual(self.config.get('extra.nested.value'), 3)


class FakeConfig:
    """Dictionary-backed stand-in exposing get(key, default)."""

    def __init__(self, values):
        self._values = values

    def get(self, key, default=None):
        return self._values.get(key, default)


class TestFaceConfig(unittest.TestCase):
    """Test cases for FaceConfig validation."""

    def test_defaults(self):
        """Test an empty config yields the documented defaults."""
        face = FaceConfig.from_config(FakeConfig({}))

        self.assertEqual(face, FaceConfig())
        self.assertEqual(face.burn_in_every_frames, 30)
        self.assertEqual(face.battery_every_frames, 3)
        self.assertEqual(face.date_revert_ms, 60000)
        self.assertEqual(face.double_tap_window_ms, 1000)

    def test_values_read(self):
        """Test configured values are picked up."""
        face = FaceConfig.from_config(FakeConfig({
            'face.burn_in_max_offset': 30,
            'face.image_background': True,
            'face.double_tap_action': 'background',
            'chime.tone_volume': 0.5,
        }))

        self.assertEqual(face.burn_in_max_offset, 30)
        self.assertTrue(face.image_background)
        self.assertEqual(face.double_tap_action, DoubleTapAction.BACKGROUND)
        self.assertEqual(face.chime_tone_volume, 0.5)

    def test_invalid_values_fall_back(self):
        """Test bad values are replaced by defaults instead of raising."""
        with self.assertLogs('watchface.engine.state', level='WARNING'):
            face = FaceConfig.from_config(FakeConfig({
                'face.burn_in_max_offset': 'lots',
                'battery.sample_every_frames': 0,
                'face.double_tap_action': 'explode',
                'chime.tone_volume': 'loud',
            }))

        self.assertEqual(face.burn_in_max_offset, 15)
        self.assertEqual(face.battery_every_frames, 3)
        self.assertEqual(face.double_tap_action, DoubleTapAction.SILENT)
        self.assertEqual(face.chime_tone_volume, 0.1)

    def test_volume_clamped(self):
        """Test tone volume is clamped to 0..1."""
        face = FaceConfig.from_config(FakeConfig({'chime.tone_volume': 4}))

        self.assertEqual(face.chime_tone_volume, 1.0)

    def test_image_face_widens_burn_in_bound(self):
        """Test the image face defaults to the larger jitter bound."""
        face = FaceConfig.from_config(FakeConfig({'face.image_background': True}))

        self.assertEqual(face.burn_in_max_offset, 30)

    def test_explicit_burn_in_bound_wins(self):
        """Test a configured bound overrides the variant default."""
        face = FaceConfig.from_config(FakeConfig({
            'face.image_background': True,
            'face.burn_in_max_offset': 12,
        }))

        self.assertEqual(face.burn_in_max_offset, 12)

    def test_image_flag_from_file_widens_bound(self):
        """Test enabling the image face in YAML alone yields the larger bound."""
        temp_dir = tempfile.mkdtemp()
        self.addCleanup(shutil.rmtree, temp_dir, True)
        config_path = Path(temp_dir) / "config.yaml"
        config_path.write_text("face:\n  image_background: true\n")

        with patch.object(ConfigService, 'CONFIG_PATHS', [config_path]), \
                patch.dict(os.environ, {}, clear=True):
            config = ConfigService()
            config.reload()
            face = FaceConfig.from_config(config)
        config.reload()

        self.assertEqual(face.burn_in_max_offset, 30)


if __name__ == '__main__':
    unittest.main()
