"""Frame scheduler driving the game loops.

The host calls ``advance(delta_ms)`` once per rendered frame. Two kinds of
continuation can be armed:

- frame callbacks (``request_frame``) run on the next frame, once;
- timers (``call_later``) run once their real-time delay has elapsed.

Both return a handle accepted by ``cancel``. Callbacks requested while a
frame is being processed are deferred to the following frame, so a loop
that re-arms itself runs exactly once per frame.
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, List
import heapq
import itertools


Callback = Callable[[], None]


@dataclass(order=True)
class _Timer:
    due_ms: float
    seq: int
    handle: int = field(compare=False)
    callback: Callback = field(compare=False)


class FrameScheduler:
    """Single-threaded frame and timer scheduler."""

    def __init__(self) -> None:
        self._now_ms: float = 0.0
        self._frame: int = 0
        self._ids = itertools.count(1)
        self._frame_callbacks: Dict[int, Callback] = {}
        self._running: Dict[int, Callback] = {}
        self._timers: List[_Timer] = []
        self._live_timers: set[int] = set()

    @property
    def now_ms(self) -> float:
        """Scheduler clock, in milliseconds since creation."""
        return self._now_ms

    @property
    def frame(self) -> int:
        """Number of frames advanced so far."""
        return self._frame

    @property
    def pending(self) -> int:
        """Number of live continuations."""
        return len(self._frame_callbacks) + len(self._live_timers)

    def request_frame(self, callback: Callback) -> int:
        """Run ``callback`` on the next frame. Returns a cancel handle."""
        handle = next(self._ids)
        self._frame_callbacks[handle] = callback
        return handle

    def call_later(self, delay_ms: float, callback: Callback) -> int:
        """Run ``callback`` once ``delay_ms`` of scheduler time has passed."""
        handle = next(self._ids)
        heapq.heappush(
            self._timers,
            _Timer(self._now_ms + max(0.0, delay_ms), handle, handle, callback),
        )
        self._live_timers.add(handle)
        return handle

    def cancel(self, handle: int | None) -> None:
        """Cancel a pending continuation. Unknown or spent handles are ignored."""
        if handle is None:
            return
        self._frame_callbacks.pop(handle, None)
        self._running.pop(handle, None)
        self._live_timers.discard(handle)

    def advance(self, delta_ms: float) -> None:
        """Advance the clock by one frame: fire due timers, then frame callbacks."""
        self._now_ms += delta_ms
        self._frame += 1

        while self._timers and self._timers[0].due_ms <= self._now_ms:
            timer = heapq.heappop(self._timers)
            if timer.handle not in self._live_timers:
                continue
            self._live_timers.discard(timer.handle)
            timer.callback()

        # Callbacks re-armed during this frame wait for the next one
        self._running = self._frame_callbacks
        self._frame_callbacks = {}
        for handle in list(self._running):
            callback = self._running.pop(handle, None)
            if callback is not None:
                callback()
