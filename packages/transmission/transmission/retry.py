"""Retry control: an escalating three-step anti-affordance.

First activation shakes the control, the second shakes it and then nudges
it to a random nearby spot, the third hides it for good. Anything after
that is ignored.
"""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass

from cue import Scheduler

from transmission import surface as ids
from transmission.config import RETRY_MESSAGES, Timings
from transmission.surface import HostSurface

logger = logging.getLogger(__name__)

SHAKE = "shake"
DODGE = "dodge"
HIDING = "hiding"


@dataclass
class RetryState:
    messages: tuple[str, ...] = RETRY_MESSAGES
    attempt_count: int = 0

    def __post_init__(self) -> None:
        if len(self.messages) != 3:
            raise ValueError(f"RetryState needs exactly 3 messages, got {len(self.messages)}")

    @property
    def exhausted(self) -> bool:
        return self.attempt_count >= len(self.messages)


def dodge_offset(viewport_width: float, rng: random.Random) -> tuple[float, float]:
    """Random nudge, kept within 10% of the viewport width (max 60px) sideways."""
    max_x = min(60.0, viewport_width * 0.1)
    x = (rng.random() - 0.5) * max_x * 2
    y = -20 - rng.random() * 30
    return x, y


class RetryControl:
    def __init__(
        self,
        scheduler: Scheduler,
        surface: HostSurface,
        state: RetryState | None = None,
        timings: Timings | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._scheduler = scheduler
        self._surface = surface
        self._state = state or RetryState()
        self._timings = timings or Timings()
        self._rng = rng or random.Random()

    @property
    def state(self) -> RetryState:
        return self._state

    def on_trigger(self) -> bool:
        """Handle one activation. Returns False once the control is exhausted."""
        state = self._state
        if state.exhausted:
            logger.debug("retry ignored, already exhausted")
            return False

        entry = state.attempt_count
        self._surface.set_text(ids.RETRY_ERROR, state.messages[entry])
        self._surface.add_class(ids.RETRY_ERROR, "visible")

        t = self._timings
        if entry == 0:
            self._shake()
        elif entry == 1:
            self._shake()
            self._scheduler.after(t.shake, self._dodge)
        else:
            self._surface.add_class(ids.RETRY, HIDING)
            self._surface.disable(ids.RETRY)
            self._scheduler.after(t.retry_final_clear, self._vanish)

        state.attempt_count += 1
        logger.debug("retry attempt %d/%d", state.attempt_count, len(state.messages))

        if not state.exhausted:
            shown = state.attempt_count
            self._scheduler.after(t.retry_message_clear, lambda: self._fade_message(shown))
        return True

    def _shake(self) -> None:
        self._surface.add_class(ids.RETRY, SHAKE)
        self._scheduler.after(self._timings.shake, self._end_shake)

    def _end_shake(self) -> None:
        if self._surface.exists(ids.RETRY):
            self._surface.remove_class(ids.RETRY, SHAKE)

    def _dodge(self) -> None:
        if not self._surface.exists(ids.RETRY):
            return
        width, _ = self._surface.viewport()
        x, y = dodge_offset(width, self._rng)
        self._surface.add_class(ids.RETRY, DODGE)
        self._surface.set_offset(ids.RETRY, x, y)

    def _fade_message(self, shown: int) -> None:
        # A newer message owns the display now.
        if self._state.attempt_count != shown:
            return
        if self._surface.exists(ids.RETRY_ERROR):
            self._surface.remove_class(ids.RETRY_ERROR, "visible")

    def _vanish(self) -> None:
        if self._surface.exists(ids.RETRY):
            self._surface.hide(ids.RETRY)
        if self._surface.exists(ids.RETRY_ERROR):
            self._surface.set_text(ids.RETRY_ERROR, "")
            self._surface.remove_class(ids.RETRY_ERROR, "visible")
