"""Timeline - cues scheduled at fixed offsets from one captured anchor."""

from __future__ import annotations

from dataclasses import dataclass

from cue.scheduler import Scheduler
from cue.types import Callback


@dataclass(frozen=True)
class Cue:
    offset: float  # ms after the anchor
    action: Callback
    name: str = ""

    def __post_init__(self) -> None:
        if self.offset < 0:
            raise ValueError(f"Cue offset must be >= 0, got {self.offset}")


class Timeline:
    """A list of cues played once against a single anchor time.

    Relative order of cues comes from their offsets (ties keep insertion
    order), never from nesting one timer inside another.
    """

    def __init__(self, scheduler: Scheduler) -> None:
        self._scheduler = scheduler
        self._cues: list[Cue] = []
        self._anchor: float | None = None

    def add(self, offset: float, action: Callback, name: str = "") -> Timeline:
        if self._anchor is not None:
            raise RuntimeError("Cannot add cues to a timeline that has been played")
        self._cues.append(Cue(offset=offset, action=action, name=name))
        return self

    @property
    def cues(self) -> list[Cue]:
        return list(self._cues)

    @property
    def anchor(self) -> float | None:
        return self._anchor

    @property
    def duration(self) -> float:
        return max((c.offset for c in self._cues), default=0.0)

    def due_times(self) -> dict[str, float]:
        """Absolute due time of each named cue. Empty until played."""
        if self._anchor is None:
            return {}
        return {c.name: self._anchor + c.offset for c in self._cues if c.name}

    def play(self, anchor: float | None = None) -> float:
        """Schedule every cue. Returns the anchor used."""
        if self._anchor is not None:
            raise RuntimeError("Timeline already played")
        if anchor is None:
            anchor = self._scheduler.now
        self._anchor = anchor
        for cue in sorted(self._cues, key=lambda c: c.offset):
            self._scheduler.at(anchor + cue.offset, cue.action)
        return anchor
