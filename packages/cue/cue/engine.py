"""Engine - frame loop, pacing, and lifecycle hooks."""

from __future__ import annotations

import time
from typing import Callable

from cue.clock import Clock
from cue.completion import Completion
from cue.scheduler import Scheduler

Hook = Callable[["Engine"], None]


class Engine:
    """Drives a Scheduler frame by frame.

    Each frame advances the clock by ``1000 / fps`` ms: timers due inside
    the frame fire first (at their own due times), then frame callbacks
    run at the frame's end time.
    """

    def __init__(self, fps: int = 60, clock: Clock | None = None) -> None:
        if fps <= 0:
            raise ValueError("fps must be positive")
        self._fps = fps
        self._frame_ms = 1000.0 / fps
        self._clock = clock if clock is not None else Clock()
        self._scheduler = Scheduler(self._clock)
        self._frame_number = 0
        self._start_hooks: list[Hook] = []
        self._stop_hooks: list[Hook] = []
        self._stop_requested = False

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def scheduler(self) -> Scheduler:
        return self._scheduler

    @property
    def fps(self) -> int:
        return self._fps

    @property
    def frame_ms(self) -> float:
        return self._frame_ms

    @property
    def frame_number(self) -> int:
        return self._frame_number

    def on_start(self, hook: Hook) -> None:
        self._start_hooks.append(hook)

    def on_stop(self, hook: Hook) -> None:
        self._stop_hooks.append(hook)

    def request_stop(self) -> None:
        self._stop_requested = True

    def _frame(self, target: float) -> None:
        self._scheduler.run_due(target)
        self._clock.set(target)
        self._frame_number += 1
        self._scheduler.run_frame()

    def step(self) -> None:
        self._stop_requested = False
        self._frame(self._clock.now + self._frame_ms)

    def advance(self, ms: float) -> None:
        """Run frames until ``ms`` of clock time have passed.

        The last frame is shortened so the clock lands exactly on the end.
        """
        if ms < 0:
            raise ValueError(f"ms must be >= 0, got {ms}")
        end = self._clock.now + ms
        while self._clock.now < end:
            self._frame(min(self._clock.now + self._frame_ms, end))

    def run(self, n: int) -> None:
        self._stop_requested = False
        for hook in self._start_hooks:
            hook(self)

        for _ in range(n):
            self._frame(self._clock.now + self._frame_ms)
            if self._stop_requested:
                break

        for hook in self._stop_hooks:
            hook(self)

    def run_until(self, completion: Completion, limit: float) -> bool:
        """Step until ``completion`` resolves or ``limit`` ms pass.

        Returns whether the completion resolved.
        """
        end = self._clock.now + limit
        while not completion.done and self._clock.now < end:
            self._frame(min(self._clock.now + self._frame_ms, end))
        return completion.done

    def run_forever(self) -> None:
        self._stop_requested = False
        for hook in self._start_hooks:
            hook(self)

        dt = self._frame_ms / 1000.0
        while not self._stop_requested:
            start = time.monotonic()
            self._frame(self._clock.now + self._frame_ms)
            if self._stop_requested:
                break
            elapsed = time.monotonic() - start
            sleep_time = dt - elapsed
            if sleep_time > 0:
                time.sleep(sleep_time)

        for hook in self._stop_hooks:
            hook(self)
