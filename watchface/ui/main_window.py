"""
Main Window - Tkinter host surface for the watch face engine
"""
import logging
import tkinter as tk
import tkinter.font as tkfont
from typing import Any, Callable, Dict, Optional, Tuple

from PIL import ImageTk

from ..core.clock_service import ClockService
from ..core.config_service import ConfigService
from ..engine.engine import WatchFaceEngine
from ..engine.events import Event, RenderInstruction, TapType, TimerAction
from ..engine.primitives import DrawImage, DrawLine, DrawText, FillRect, Frame
from ..engine.scheduler import HeartbeatTimer, RedrawScheduler
from ..hardware.actuators import ActuatorDispatcher
from .background import BackgroundImage
from .theme import Theme


logger = logging.getLogger(__name__)

# Host time tick, the coarse rate that keeps ambient current
TIME_TICK_MS = 60000

TK_FONTS = {
    Theme.FONT_TIME: ('DejaVu Sans', 'bold'),
    Theme.FONT_DATE: ('DejaVu Serif', 'normal'),
    Theme.FONT_BATTERY: ('DejaVu Sans', 'normal'),
}


class TkTimerBackend:
    """TimerBackend on top of Tk's after/after_cancel."""

    def __init__(self, root: tk.Tk):
        self._root = root

    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> Any:
        return self._root.after(delay_ms, callback)

    def cancel(self, handle: Any) -> None:
        self._root.after_cancel(handle)


class MainWindow:
    """
    Tkinter window playing the role of the watch host.

    Left click is a primary tap, right click an ignored tap type, ``a``
    toggles ambient mode and mapping/unmapping the window drives visibility.
    """

    def __init__(
        self,
        engine: WatchFaceEngine,
        clock_service: ClockService,
        dispatcher: ActuatorDispatcher,
        config: ConfigService,
        background: Optional[BackgroundImage] = None,
        width: int = 454,
        height: int = 454,
        fullscreen: bool = False,
    ):
        """
        Initialize main window.

        Args:
            engine: Watch face engine
            clock_service: Time source and timezone
            dispatcher: Executes engine side effects
            config: Configuration, re-read for timezone changes
            background: Bitmap background for the image variant
            width: Window width
            height: Window height
            fullscreen: Whether to run fullscreen
        """
        self._engine = engine
        self._clock = clock_service
        self._dispatcher = dispatcher
        self._config = config
        self._background = background

        self._width = width
        self._height = height
        self._fullscreen = fullscreen

        self._root: Optional[tk.Tk] = None
        self._canvas: Optional[tk.Canvas] = None
        self._heartbeat: Optional[HeartbeatTimer] = None
        self._redraws = RedrawScheduler()
        self._images: Dict[bool, ImageTk.PhotoImage] = {}
        self._fonts: Dict[Tuple[str, int], tkfont.Font] = {}

        self._ambient = False
        self._visible = False
        self._tz_watching = False
        self._tick_handle = None
        self._running = False

    def initialize(self) -> None:
        """Initialize Tkinter window and canvas"""
        logger.info("Initializing host window")

        self._root = tk.Tk()
        self._root.title("Watch Face")
        self._root.configure(bg=Theme.to_hex(Theme.BG_AMBIENT))

        if self._fullscreen:
            self._root.attributes('-fullscreen', True)
            self._root.config(cursor='none')
        else:
            self._root.geometry(f"{self._width}x{self._height}")

        self._canvas = tk.Canvas(
            self._root,
            width=self._width,
            height=self._height,
            bg=Theme.to_hex(Theme.BG_AMBIENT),
            highlightthickness=0
        )
        self._canvas.pack(fill=tk.BOTH, expand=True)

        self._heartbeat = HeartbeatTimer(
            TkTimerBackend(self._root), lambda: self._deliver(Event.heartbeat()))

        self._canvas.bind('<Button-1>', lambda e: self._deliver(Event.tap(TapType.TAP, e.x, e.y)))
        self._canvas.bind('<Button-3>', lambda e: self._deliver(Event.tap(TapType.TOUCH_CANCEL, e.x, e.y)))
        self._canvas.bind('<Configure>', self._on_configure)
        self._root.bind('<Map>', lambda e: self._set_visible(True))
        self._root.bind('<Unmap>', lambda e: self._set_visible(False))
        self._root.bind('<KeyPress-a>', self._toggle_ambient)
        self._root.bind('<Escape>', self._exit_fullscreen)
        self._root.protocol("WM_DELETE_WINDOW", self.stop)

        self._deliver(Event.surface_created())
        self._deliver(Event.surface_resized(self._width, self._height))
        if self._background is not None:
            self._background.resize(self._width)

        logger.info(f"Host window initialized: {self._width}x{self._height}")

    # Event delivery

    def _deliver(self, event: Event) -> None:
        """Run one event through the engine and apply the result"""
        try:
            instruction = self._engine.step(event, self._clock.now_ms())
            self._apply(instruction)
        except Exception as e:
            logger.error(f"Error handling {event.kind.value}: {e}", exc_info=True)

    def _apply(self, instruction: RenderInstruction) -> None:
        command = instruction.heartbeat
        if command.action is TimerAction.ARM:
            self._heartbeat.arm(command.delay_ms)
        elif command.action is TimerAction.CANCEL:
            self._heartbeat.cancel()

        if instruction.effects:
            self._dispatcher.dispatch(instruction.effects)
        if instruction.frame is not None:
            self._paint(instruction.frame)
        if instruction.redraw:
            self._request_redraw()

    def _request_redraw(self) -> None:
        if self._redraws.request() and self._root:
            self._root.after_idle(self._render_pass)

    def _render_pass(self) -> None:
        folded = self._redraws.begin_frame()
        if folded > 1:
            logger.debug(f"Render pass coalesced {folded} redraw requests")
        if self._running:
            self._deliver(Event.draw())

    # Host notifications

    def _on_configure(self, event) -> None:
        if (event.width, event.height) == (self._width, self._height):
            return
        self._width, self._height = event.width, event.height
        if self._background is not None:
            self._background.resize(self._width)
            self._images.clear()
        self._deliver(Event.surface_resized(self._width, self._height))

    def _set_visible(self, visible: bool) -> None:
        if visible == self._visible:
            return
        self._visible = visible
        if visible:
            self._register_time_zone_watch()
            # Zone may have changed while hidden
            self._check_time_zone()
        else:
            self._unregister_time_zone_watch()
        self._deliver(Event.visibility_changed(visible))

    def _toggle_ambient(self, event=None) -> None:
        self._ambient = not self._ambient
        self._deliver(Event.ambient_changed(self._ambient))

    def _register_time_zone_watch(self) -> None:
        if self._tz_watching:
            return
        self._tz_watching = True

    def _unregister_time_zone_watch(self) -> None:
        if not self._tz_watching:
            return
        self._tz_watching = False

    def _check_time_zone(self) -> None:
        self._config.reload()
        if self._clock.set_timezone(self._config.get('timezone', 'local')):
            self._deliver(Event.time_zone_changed())

    def _time_tick(self) -> None:
        if not self._running:
            return
        if self._tz_watching:
            self._check_time_zone()
        self._deliver(Event.time_tick())
        now = self._clock.now_ms()
        self._tick_handle = self._root.after(TIME_TICK_MS - now % TIME_TICK_MS, self._time_tick)

    # Drawing

    def _paint(self, frame: Frame) -> None:
        canvas = self._canvas
        canvas.delete('all')
        background = Theme.BG_AMBIENT
        for primitive in frame.primitives:
            if isinstance(primitive, FillRect):
                background = primitive.color
                canvas.create_rectangle(
                    primitive.left, primitive.top, primitive.right, primitive.bottom,
                    fill=Theme.to_hex(primitive.color), width=0)
            elif isinstance(primitive, DrawImage):
                image = self._photo(primitive.grayscale)
                if image is not None:
                    canvas.create_image(primitive.x, primitive.y, image=image, anchor='nw')
            elif isinstance(primitive, DrawText):
                font = self._tk_font(primitive.font, primitive.size)
                # Tk anchors on the line box; drop it by the descent to sit on the baseline
                canvas.create_text(
                    primitive.x, primitive.y + font.metrics('descent'),
                    text=primitive.text, anchor='sw', font=font,
                    fill=Theme.to_hex(Theme.blend(primitive.color, background, primitive.alpha)))
            elif isinstance(primitive, DrawLine):
                canvas.create_line(
                    primitive.x0, primitive.y0, primitive.x1, primitive.y1,
                    fill=Theme.to_hex(primitive.color), width=primitive.width)

    def _tk_font(self, name: str, size: int) -> tkfont.Font:
        key = (name, size)
        if key not in self._fonts:
            family, weight = TK_FONTS.get(name, ('DejaVu Sans', 'normal'))
            self._fonts[key] = tkfont.Font(root=self._root, family=family, size=-size, weight=weight)
        return self._fonts[key]

    def _photo(self, grayscale: bool) -> Optional[ImageTk.PhotoImage]:
        if self._background is None:
            return None
        if grayscale not in self._images:
            image = self._background.variant(grayscale)
            if image is None:
                return None
            self._images[grayscale] = ImageTk.PhotoImage(image)
        return self._images[grayscale]

    def _exit_fullscreen(self, event=None) -> None:
        """Exit fullscreen mode"""
        if self._root and self._fullscreen:
            self._root.attributes('-fullscreen', False)
            self._root.config(cursor='')
            self._fullscreen = False
            logger.info("Exited fullscreen mode")

    def start(self) -> None:
        """Start host event loop"""
        if not self._root:
            self.initialize()

        logger.info("Starting host event loop")
        self._running = True
        now = self._clock.now_ms()
        self._tick_handle = self._root.after(TIME_TICK_MS - now % TIME_TICK_MS, self._time_tick)
        self._request_redraw()

        self._root.mainloop()

    def stop(self) -> None:
        """Stop host and destroy the surface"""
        if not self._running:
            return
        logger.info("Stopping host window")
        self._deliver(Event.surface_destroyed())
        self._running = False

        if self._root:
            try:
                if self._tick_handle is not None:
                    self._root.after_cancel(self._tick_handle)
                self._root.quit()
                self._root.destroy()
            except tk.TclError as e:
                logger.error(f"Error during window cleanup: {e}")

        self._root = None

    def is_running(self) -> bool:
        """Check if host window is running"""
        return self._running
