"""Tween record and the per-frame driver that animates it."""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

from cue_tween.easing import EASINGS

if TYPE_CHECKING:
    from cue import Scheduler, Teardown


@dataclass
class Tween:
    start_val: float
    end_val: float
    duration: float  # ms
    easing: str = "linear"

    def __post_init__(self) -> None:
        if self.duration <= 0:
            raise ValueError(f"duration must be positive, got {self.duration}")
        if self.easing not in EASINGS:
            raise ValueError(f"Unknown easing: '{self.easing}'")

    def progress(self, elapsed: float) -> float:
        return min(max(elapsed / self.duration, 0.0), 1.0)

    def value_at(self, elapsed: float) -> float:
        """Interpolated value ``elapsed`` ms in. Exactly ``end_val`` once finished."""
        t = self.progress(elapsed)
        if t >= 1.0:
            return self.end_val
        eased_t = EASINGS[self.easing](t)
        return self.start_val + (self.end_val - self.start_val) * eased_t


def animate(
    scheduler: Scheduler,
    tween: Tween,
    on_update: Callable[[float], None],
    on_complete: Callable[[], None] | None = None,
) -> Teardown:
    """Drive ``tween`` once per frame, starting from the current clock time.

    ``on_update`` receives the value every frame; the last frame always
    delivers ``end_val``. The returned teardown stops the animation early
    without calling ``on_complete``.
    """
    start = scheduler.now
    handle: Teardown | None = None

    def update(now: float) -> None:
        elapsed = now - start
        on_update(tween.value_at(elapsed))
        if tween.progress(elapsed) >= 1.0:
            assert handle is not None
            handle()
            if on_complete is not None:
                on_complete()

    handle = scheduler.on_frame(update, label="tween")
    return handle
