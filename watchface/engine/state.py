"""
Engine State - Data model shared by the render/state engine
"""
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


logger = logging.getLogger(__name__)

# Larger jitter bound of the bitmap background face
IMAGE_BURN_IN_MAX_OFFSET = 30


class DisplayMode(Enum):
    """Set only by the host's ambient notification."""
    ACTIVE = 'active'
    AMBIENT = 'ambient'


class DateFormat(Enum):
    CLEAN = 'clean'          # EE dd MMM
    STANDARD = 'standard'    # dd/MM/yyyy


class DoubleTapAction(Enum):
    SILENT = 'silent'
    BACKGROUND = 'background'


@dataclass(frozen=True)
class BurnInOffset:
    dx: int = 0
    dy: int = 0


@dataclass(frozen=True)
class BatteryReading:
    percentage: int
    is_low: bool

    @property
    def text(self) -> str:
        return f"{self.percentage}%"


@dataclass(frozen=True)
class HitBox:
    """Axis-aligned box in surface pixels, top < bottom."""
    left: float
    top: float
    right: float
    bottom: float

    def contains(self, x: float, y: float) -> bool:
        """Strict containment, points on the edge are misses"""
        return self.left < x < self.right and self.top < y < self.bottom


@dataclass(frozen=True)
class FaceConfig:
    """
    Validated face settings consumed by the engine.

    The two historical face variants (silent-mode audio face and bitmap
    background face) are flags on this one configuration.
    """
    burn_in_max_offset: int = 15
    burn_in_every_frames: int = 30
    battery_every_frames: int = 3
    battery_low_threshold: int = 31
    date_revert_ms: int = 60000
    double_tap_window_ms: int = 1000
    silent_mode_enabled: bool = True
    image_background: bool = False
    double_tap_action: DoubleTapAction = DoubleTapAction.SILENT
    chime_enabled: bool = True
    chime_tone_volume: float = 0.1

    @classmethod
    def from_config(cls, config: Any) -> 'FaceConfig':
        """
        Build from a ConfigService-like object exposing ``get(key, default)``.

        Invalid values are logged and replaced by defaults.
        """
        defaults = cls()
        image_background = bool(config.get('face.image_background', False))
        offset_default = IMAGE_BURN_IN_MAX_OFFSET if image_background else defaults.burn_in_max_offset

        def positive_int(key: str, default: int) -> int:
            value = config.get(key, default)
            try:
                value = int(value)
            except (TypeError, ValueError):
                logger.warning(f"Invalid {key}={value!r}, using {default}")
                return default
            if value <= 0:
                logger.warning(f"Invalid {key}={value!r}, using {default}")
                return default
            return value

        action_name = str(config.get('face.double_tap_action', 'silent')).lower()
        try:
            action = DoubleTapAction(action_name)
        except ValueError:
            logger.warning(f"Unknown face.double_tap_action={action_name!r}, using 'silent'")
            action = DoubleTapAction.SILENT

        volume = config.get('chime.tone_volume', defaults.chime_tone_volume)
        try:
            volume = min(1.0, max(0.0, float(volume)))
        except (TypeError, ValueError):
            logger.warning(f"Invalid chime.tone_volume={volume!r}, using {defaults.chime_tone_volume}")
            volume = defaults.chime_tone_volume

        return cls(
            burn_in_max_offset=positive_int('face.burn_in_max_offset', offset_default),
            burn_in_every_frames=positive_int('burn_in.regenerate_every_frames', defaults.burn_in_every_frames),
            battery_every_frames=positive_int('battery.sample_every_frames', defaults.battery_every_frames),
            battery_low_threshold=positive_int('battery.low_threshold', defaults.battery_low_threshold),
            date_revert_ms=positive_int('date_format.revert_after_ms', defaults.date_revert_ms),
            double_tap_window_ms=positive_int('taps.double_tap_window_ms', defaults.double_tap_window_ms),
            silent_mode_enabled=bool(config.get('face.silent_mode_enabled', True)),
            image_background=image_background,
            double_tap_action=action,
            chime_enabled=bool(config.get('chime.enabled', True)),
            chime_tone_volume=volume,
        )


@dataclass
class EngineState:
    """
    All mutable session state, owned by one engine instance.

    Created on surface creation and dropped with the surface.
    """
    mode: DisplayMode = DisplayMode.ACTIVE
    silent: bool = False
    visible: bool = False
    background_shown: bool = False
    date_format: DateFormat = DateFormat.CLEAN
    revert_deadline_ms: Optional[int] = None
    offset: BurnInOffset = field(default_factory=BurnInOffset)
    battery: Optional[BatteryReading] = None
    last_tap_ms: Optional[int] = None
    hour_marker: Optional[int] = None
    time_hit_box: Optional[HitBox] = None
    width: int = 0
    height: int = 0
    destroyed: bool = False

    @property
    def ambient(self) -> bool:
        return self.mode is DisplayMode.AMBIENT
