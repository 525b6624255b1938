"""Scheduler - one-shot timers, repeating timers and per-frame callbacks."""

from __future__ import annotations

import heapq
import logging

from cue.clock import Clock
from cue.types import Callback, FrameCallback, ScheduledEvent

logger = logging.getLogger(__name__)


class Teardown:
    """Stops a repeating timer or frame loop.

    Calling it more than once has no further effect.
    """

    def __init__(self, label: str = "") -> None:
        self._label = label
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    def __call__(self) -> None:
        if not self._active:
            return
        self._active = False
        logger.debug("teardown %s", self._label or hex(id(self)))

    def __repr__(self) -> str:
        state = "active" if self._active else "stopped"
        return f"Teardown({self._label!r}, {state})"


class Scheduler:
    """Registers callbacks against a Clock; the engine decides when they run.

    One-shot timers (``after``/``at``) have no cancel handle. Callbacks
    that may outlive their phase must check their own preconditions.
    """

    def __init__(self, clock: Clock) -> None:
        self._clock = clock
        self._timers: list[ScheduledEvent] = []
        self._seq = 0
        self._next_frame: list[FrameCallback] = []

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def now(self) -> float:
        return self._clock.now

    @property
    def pending_timers(self) -> int:
        return len(self._timers)

    @property
    def pending_frames(self) -> int:
        return len(self._next_frame)

    def at(self, due: float, callback: Callback) -> None:
        """Run ``callback`` once when the clock reaches ``due``."""
        heapq.heappush(self._timers, ScheduledEvent(float(due), self._seq, callback))
        self._seq += 1

    def after(self, delay: float, callback: Callback) -> None:
        """Run ``callback`` once, ``delay`` ms from now."""
        if delay < 0:
            raise ValueError(f"delay must be >= 0, got {delay}")
        self.at(self._clock.now + delay, callback)

    def every(self, interval: float, callback: Callback, label: str = "") -> Teardown:
        """Run ``callback`` every ``interval`` ms until torn down.

        Each repetition is anchored to the previous due time, not to when
        the previous callback actually ran.
        """
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}")
        handle = Teardown(label)

        def fire(due: float) -> None:
            if not handle.active:
                return
            callback()
            if handle.active:
                nxt = due + interval
                self.at(nxt, lambda: fire(nxt))

        first = self._clock.now + interval
        self.at(first, lambda: fire(first))
        return handle

    def request_frame(self, callback: FrameCallback) -> None:
        """Run ``callback(now)`` once on the next frame."""
        self._next_frame.append(callback)

    def on_frame(self, callback: FrameCallback, label: str = "") -> Teardown:
        """Run ``callback(now)`` on every frame until torn down."""
        handle = Teardown(label)

        def loop(now: float) -> None:
            if not handle.active:
                return
            callback(now)
            if handle.active:
                self.request_frame(loop)

        self.request_frame(loop)
        return handle

    def run_due(self, until: float) -> int:
        """Fire every timer due at or before ``until``, in (due, seq) order.

        The clock is moved to each timer's due time before it fires, so
        callbacks that schedule relative timers anchor on their own due
        time. Timers registered during this call are honoured if they
        also fall due by ``until``.
        """
        fired = 0
        while self._timers and self._timers[0].due <= until:
            event = heapq.heappop(self._timers)
            if event.due > self._clock.now:
                self._clock.set(event.due)
            event.callback()
            fired += 1
        return fired

    def run_frame(self) -> int:
        """Run the callbacks requested for this frame.

        Callbacks requested while running are deferred to the next frame.
        """
        callbacks = self._next_frame
        self._next_frame = []
        now = self._clock.now
        for callback in callbacks:
            callback(now)
        return len(callbacks)
