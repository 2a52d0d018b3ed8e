"""
Configuration Service - Watch face settings
Loads YAML config with environment variable overrides
"""
import os
import logging
import yaml
from typing import Any, Dict, Optional
from pathlib import Path


logger = logging.getLogger(__name__)


def _as_bool(value: str) -> bool:
    return value.lower() in ('true', '1', 'yes')


class ConfigService:
    """
    Centralized configuration management with environment overrides.

    Priority order:
    1. Environment variables (highest)
    2. YAML config file
    3. Default values (lowest)
    """

    _instance: Optional['ConfigService'] = None
    _config: Dict[str, Any] = {}

    # Searched in order, first existing file wins
    CONFIG_PATHS = [
        Path("/data/config.yaml"),
        Path("config/default.yaml"),
        Path(__file__).resolve().parent.parent / "config" / "default.yaml",
    ]

    def __new__(cls):
        """Singleton pattern for global config access"""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """Initialize only once"""
        if not self._config:
            self.reload()

    def reload(self) -> None:
        """Load config from file and environment"""
        self._config = self._merge(self._get_defaults(), self._load_yaml_config())
        self._apply_env_overrides()

    def _load_yaml_config(self) -> Dict[str, Any]:
        """Load configuration from the first YAML file found"""
        for config_path in self.CONFIG_PATHS:
            if config_path.exists():
                try:
                    with open(config_path, 'r') as f:
                        loaded = yaml.safe_load(f) or {}
                    logger.debug(f"Loaded config from {config_path}")
                    return loaded
                except (OSError, yaml.YAMLError) as e:
                    logger.warning(f"Failed to load {config_path}: {e}")

        return {}

    @classmethod
    def _merge(cls, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        """Recursively merge override into a copy of base"""
        merged = dict(base)
        for key, value in override.items():
            if isinstance(value, dict) and isinstance(merged.get(key), dict):
                merged[key] = cls._merge(merged[key], value)
            else:
                merged[key] = value
        return merged

    def _apply_env_overrides(self) -> None:
        """Apply environment variable overrides"""
        if env_tz := os.environ.get('TIMEZONE'):
            self._config['timezone'] = env_tz

        # Display
        if env_width := os.environ.get('DISPLAY_WIDTH'):
            self.set('display.width', int(env_width))

        if env_height := os.environ.get('DISPLAY_HEIGHT'):
            self.set('display.height', int(env_height))

        if env_fullscreen := os.environ.get('DISPLAY_FULLSCREEN'):
            self.set('display.fullscreen', _as_bool(env_fullscreen))

        # Face variant
        if env_offset := os.environ.get('BURN_IN_MAX_OFFSET'):
            self.set('face.burn_in_max_offset', int(env_offset))

        if env_image := os.environ.get('FACE_IMAGE_BACKGROUND'):
            self.set('face.image_background', _as_bool(env_image))

        if env_level := os.environ.get('LOG_LEVEL'):
            self.set('logging.level', env_level)

    def _get_defaults(self) -> Dict[str, Any]:
        """Return default configuration"""
        return {
            'app': {
                'name': 'watchface',
                'version': '1.0.0',
            },
            'timezone': 'local',
            'display': {
                'width': 454,
                'height': 454,
                'fullscreen': False,
            },
            'face': {
                'burn_in_max_offset': None,
                'silent_mode_enabled': True,
                'image_background': False,
                'background_image': '',
                'double_tap_action': 'silent',
            },
            'chime': {
                'enabled': True,
                'tone_volume': 0.1,
            },
            'battery': {
                'low_threshold': 31,
                'sample_every_frames': 3,
            },
            'burn_in': {
                'regenerate_every_frames': 30,
            },
            'date_format': {
                'revert_after_ms': 60000,
            },
            'taps': {
                'double_tap_window_ms': 1000,
            },
            'haptics': {
                'backend': 'log',
            },
            'notifications': {
                'mixer_control': 'Master',
            },
            'logging': {
                'level': 'INFO',
            },
        }

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get config value using dot notation
        Example: config.get('face.burn_in_max_offset')
        """
        keys = key.split('.')
        value = self._config

        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
                if value is None:
                    return default
            else:
                return default

        return value

    def set(self, key: str, value: Any) -> None:
        """
        Set config value using dot notation
        Example: config.set('face.image_background', True)
        """
        keys = key.split('.')
        target = self._config

        for k in keys[:-1]:
            target = target.setdefault(k, {})

        target[keys[-1]] = value


# Global instance
config = ConfigService()
