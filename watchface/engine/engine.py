"""
Watch face engine - single entry point dispatching host events
"""
import random
import logging
from typing import Callable, Optional

from ..ui.fonts import TextMeasurer
from ..ui.layout import Layout
from .battery import BatteryProvider, BatterySampler
from .chime import HourlyChime
from .events import Event, EventKind, RenderInstruction, TimerCommand
from .mode import ModeStateMachine
from .offset import BurnInOffsetGenerator
from .renderer import FrameRenderer
from .scheduler import heartbeat_delay
from .state import DoubleTapAction, EngineState, FaceConfig
from .taps import TapInterpreter, TapOutcome


logger = logging.getLogger(__name__)


class WatchFaceEngine:
    """
    Render/state engine for one display surface.

    Every host notification goes through :meth:`step`, which mutates the
    engine's own state and tells the host what to do next: request a
    redraw, arm or cancel the heartbeat, draw a frame, fire side effects.
    """

    def __init__(
        self,
        face_config: FaceConfig,
        measurer: TextMeasurer,
        to_local: Callable,
        battery_provider: Optional[BatteryProvider] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize engine.

        Args:
            face_config: Validated face settings
            measurer: Text measurement for layout and hit testing
            to_local: Converts epoch ms to a local aware datetime
            battery_provider: Returns battery percentage, None if unknown
            rng: Random source for burn-in offsets
        """
        self._config = face_config
        self._to_local = to_local
        self.state = EngineState(background_shown=face_config.image_background)

        self._layout = Layout(0, 0)
        self._battery = BatterySampler(
            battery_provider,
            every_frames=face_config.battery_every_frames,
            low_threshold=face_config.battery_low_threshold,
        )
        self._offsets = BurnInOffsetGenerator(
            max_offset=face_config.burn_in_max_offset,
            every_frames=face_config.burn_in_every_frames,
            rng=rng,
        )
        self._modes = ModeStateMachine(self._battery, face_config.silent_mode_enabled)
        self._taps = TapInterpreter(face_config.date_revert_ms, face_config.double_tap_window_ms)
        self._chime = HourlyChime(face_config.chime_enabled, face_config.chime_tone_volume)
        self._renderer = FrameRenderer(measurer, self._layout, face_config.image_background)

        self._handlers = {
            EventKind.SURFACE_CREATED: self._on_surface_created,
            EventKind.SURFACE_RESIZED: self._on_surface_resized,
            EventKind.VISIBILITY_CHANGED: self._on_visibility_changed,
            EventKind.AMBIENT_CHANGED: self._on_ambient_changed,
            EventKind.TIME_ZONE_CHANGED: self._on_redraw_only,
            EventKind.TIME_TICK: self._on_redraw_only,
            EventKind.TAP: self._on_tap,
            EventKind.HEARTBEAT: self._on_heartbeat,
            EventKind.DRAW: self._on_draw,
            EventKind.SURFACE_DESTROYED: self._on_surface_destroyed,
        }

    def step(self, event: Event, now_ms: int) -> RenderInstruction:
        """
        Process one host event to completion.

        Args:
            event: Host notification
            now_ms: Wall-clock epoch milliseconds at delivery

        Returns:
            RenderInstruction for the host
        """
        if self.state.destroyed:
            logger.warning(f"Ignoring {event.kind.value} after surface destruction")
            return RenderInstruction()
        return self._handlers[event.kind](event, now_ms)

    # Timer

    def _timer_update(self) -> TimerCommand:
        """Cancel, then restart immediately if the heartbeat should run"""
        if self._modes.heartbeat_wanted(self.state):
            return TimerCommand.arm(0)
        return TimerCommand.cancel()

    # Handlers

    def _on_surface_created(self, event: Event, now_ms: int) -> RenderInstruction:
        logger.info("Surface created")
        return RenderInstruction(redraw=True)

    def _on_surface_resized(self, event: Event, now_ms: int) -> RenderInstruction:
        self.state.width = event.width
        self.state.height = event.height
        self._layout.update_dimensions(event.width, event.height)
        logger.info(f"Surface resized: {event.width}x{event.height}")
        return RenderInstruction(redraw=True)

    def _on_visibility_changed(self, event: Event, now_ms: int) -> RenderInstruction:
        self.state.visible = bool(event.visible)
        logger.debug(f"Visible: {self.state.visible}")
        return RenderInstruction(redraw=self.state.visible, heartbeat=self._timer_update())

    def _on_ambient_changed(self, event: Event, now_ms: int) -> RenderInstruction:
        changed = self._modes.set_ambient(self.state, bool(event.ambient))
        return RenderInstruction(redraw=changed, heartbeat=self._timer_update())

    def _on_redraw_only(self, event: Event, now_ms: int) -> RenderInstruction:
        return RenderInstruction(redraw=True)

    def _on_tap(self, event: Event, now_ms: int) -> RenderInstruction:
        outcome = self._taps.interpret(self.state, event.tap_type, event.x, event.y, now_ms)
        instruction = RenderInstruction()
        if outcome is TapOutcome.DATE_FORMAT_TOGGLED:
            instruction.redraw = True
        elif outcome is TapOutcome.DOUBLE_TAP:
            if self._config.double_tap_action is DoubleTapAction.BACKGROUND:
                self._modes.toggle_background(self.state)
            else:
                instruction.effects.extend(self._modes.toggle_silent(self.state))
            instruction.redraw = True
        return instruction

    def _on_heartbeat(self, event: Event, now_ms: int) -> RenderInstruction:
        instruction = RenderInstruction(redraw=True)
        if self._modes.heartbeat_wanted(self.state):
            instruction.heartbeat = TimerCommand.arm(heartbeat_delay(now_ms))
        return instruction

    def _on_draw(self, event: Event, now_ms: int) -> RenderInstruction:
        state = self.state
        local_time = self._to_local(now_ms)

        state.offset = self._offsets.next_frame(state.offset, state.ambient)
        state.battery = self._battery.next_frame(state.ambient)
        self._taps.expire_date_format(state, now_ms)
        effects = self._chime.check(state, local_time)

        frame = self._renderer.render(state, local_time)
        # Taps are tested against this box until the next frame replaces it
        state.time_hit_box = frame.time_box
        return RenderInstruction(frame=frame, effects=effects)

    def _on_surface_destroyed(self, event: Event, now_ms: int) -> RenderInstruction:
        self.state.destroyed = True
        logger.info("Surface destroyed")
        return RenderInstruction(heartbeat=TimerCommand.cancel())
