"""Shared type aliases and records for the cue scheduler."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

Callback = Callable[[], None]

# Frame callbacks receive the clock reading (ms) of the frame being run.
FrameCallback = Callable[[float], None]


@dataclass(frozen=True, slots=True, order=True)
class ScheduledEvent:
    """A one-shot callback due at an absolute clock time.

    Ordering is (due, seq): events due at the same instant fire in the
    order they were registered.
    """

    due: float
    seq: int
    callback: Callback = field(compare=False)
