"""
Redraw scheduler - 1 Hz heartbeat timer and redraw coalescing
"""
import logging
from typing import Any, Callable, Optional, Protocol


logger = logging.getLogger(__name__)

INTERACTIVE_UPDATE_RATE_MS = 1000


def heartbeat_delay(now_ms: int, rate_ms: int = INTERACTIVE_UPDATE_RATE_MS) -> int:
    """Delay that lands the next beat on the next whole-second boundary"""
    return rate_ms - (now_ms % rate_ms)


class TimerBackend(Protocol):
    """Delayed, cancellable callbacks on the render thread."""

    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> Any:
        ...

    def cancel(self, handle: Any) -> None:
        ...


class HeartbeatTimer:
    """
    Single-shot cancellable timer with an explicit armed flag.

    Arming always replaces a pending callback, so at most one is ever
    outstanding; a callback delivered after cancel is dropped.
    """

    def __init__(self, backend: TimerBackend, callback: Callable[[], None]):
        self._backend = backend
        self._callback = callback
        self._handle: Optional[Any] = None
        self._armed = False
        self._generation = 0

    def arm(self, delay_ms: int) -> None:
        self.cancel()
        self._generation += 1
        generation = self._generation
        self._armed = True
        self._handle = self._backend.schedule(max(0, int(delay_ms)), lambda: self._fire(generation))

    def cancel(self) -> None:
        if not self._armed:
            return
        self._armed = False
        if self._handle is not None:
            self._backend.cancel(self._handle)
            self._handle = None

    def _fire(self, generation: int) -> None:
        if not self._armed or generation != self._generation:
            logger.debug("Dropped stale heartbeat")
            return
        self._armed = False
        self._handle = None
        self._callback()

    @property
    def armed(self) -> bool:
        return self._armed


class RedrawScheduler:
    """
    Collapses any number of redraw requests into one render pass.
    """

    def __init__(self):
        self._pending = False
        self._requests = 0

    def request(self) -> bool:
        """
        Returns:
            True if the caller must schedule a render pass
        """
        self._requests += 1
        if self._pending:
            return False
        self._pending = True
        return True

    def begin_frame(self) -> int:
        """
        Clear the pending flag at the start of a render pass.

        Returns:
            Number of requests folded into this pass
        """
        folded = self._requests
        self._pending = False
        self._requests = 0
        return folded
