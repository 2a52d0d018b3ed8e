"""
Events - Host notifications and engine output records
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, List, Optional, Tuple

if TYPE_CHECKING:
    from .primitives import Frame


class EventKind(Enum):
    SURFACE_CREATED = 'surface_created'
    SURFACE_RESIZED = 'surface_resized'
    VISIBILITY_CHANGED = 'visibility_changed'
    AMBIENT_CHANGED = 'ambient_changed'
    TIME_ZONE_CHANGED = 'time_zone_changed'
    TAP = 'tap'
    TIME_TICK = 'time_tick'
    HEARTBEAT = 'heartbeat'
    DRAW = 'draw'
    SURFACE_DESTROYED = 'surface_destroyed'


class TapType(Enum):
    TOUCH = 0
    TOUCH_CANCEL = 1
    TAP = 2


@dataclass(frozen=True)
class Event:
    """A single host notification, processed to completion by the engine."""
    kind: EventKind
    visible: Optional[bool] = None
    ambient: Optional[bool] = None
    width: int = 0
    height: int = 0
    tap_type: Optional[TapType] = None
    x: float = 0.0
    y: float = 0.0

    @classmethod
    def surface_created(cls) -> 'Event':
        return cls(EventKind.SURFACE_CREATED)

    @classmethod
    def surface_resized(cls, width: int, height: int) -> 'Event':
        return cls(EventKind.SURFACE_RESIZED, width=width, height=height)

    @classmethod
    def visibility_changed(cls, visible: bool) -> 'Event':
        return cls(EventKind.VISIBILITY_CHANGED, visible=visible)

    @classmethod
    def ambient_changed(cls, ambient: bool) -> 'Event':
        return cls(EventKind.AMBIENT_CHANGED, ambient=ambient)

    @classmethod
    def time_zone_changed(cls) -> 'Event':
        return cls(EventKind.TIME_ZONE_CHANGED)

    @classmethod
    def tap(cls, tap_type: TapType, x: float, y: float) -> 'Event':
        return cls(EventKind.TAP, tap_type=tap_type, x=x, y=y)

    @classmethod
    def time_tick(cls) -> 'Event':
        return cls(EventKind.TIME_TICK)

    @classmethod
    def heartbeat(cls) -> 'Event':
        return cls(EventKind.HEARTBEAT)

    @classmethod
    def draw(cls) -> 'Event':
        return cls(EventKind.DRAW)

    @classmethod
    def surface_destroyed(cls) -> 'Event':
        return cls(EventKind.SURFACE_DESTROYED)


class TimerAction(Enum):
    NONE = 'none'
    ARM = 'arm'
    CANCEL = 'cancel'


@dataclass(frozen=True)
class TimerCommand:
    action: TimerAction = TimerAction.NONE
    delay_ms: int = 0

    @classmethod
    def arm(cls, delay_ms: int) -> 'TimerCommand':
        return cls(TimerAction.ARM, delay_ms)

    @classmethod
    def cancel(cls) -> 'TimerCommand':
        return cls(TimerAction.CANCEL)


# Outbound side effects, executed best-effort by the host

@dataclass(frozen=True)
class Vibrate:
    waveform: Tuple[Tuple[int, int], ...]
    usage: str = 'alarm'


@dataclass(frozen=True)
class PlayTone:
    volume: float


@dataclass(frozen=True)
class SetNotificationMuted:
    muted: bool


@dataclass
class RenderInstruction:
    """What the host must do after an event has been processed."""
    redraw: bool = False
    heartbeat: TimerCommand = field(default_factory=TimerCommand)
    frame: Optional['Frame'] = None
    effects: List[object] = field(default_factory=list)
