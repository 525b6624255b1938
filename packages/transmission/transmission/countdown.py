"""Countdown to a fixed instant, re-rendered every tick."""
from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Callable

from cue import Scheduler, Teardown

from transmission import surface as ids
from transmission.config import COUNTDOWN_DONE, COUNTDOWN_PREFIX, Timings
from transmission.surface import HostSurface

_DAY = 86_400_000
_HOUR = 3_600_000
_MINUTE = 60_000
_SECOND = 1_000


def remaining_ms(target: datetime, now: datetime) -> int:
    return (target - now) // timedelta(milliseconds=1)


def format_remaining(ms: int) -> str:
    """``[Nd ]HHh MMm SSs`` by floor division; days left out when zero."""
    days, rest = divmod(ms, _DAY)
    hours, rest = divmod(rest, _HOUR)
    minutes, rest = divmod(rest, _MINUTE)
    seconds = rest // _SECOND

    parts = []
    if days > 0:
        parts.append(f"{days}d")
    parts.append(f"{hours:02d}h")
    parts.append(f"{minutes:02d}m")
    parts.append(f"{seconds:02d}s")
    return " ".join(parts)


def render_countdown(ms: int) -> str:
    if ms <= 0:
        return COUNTDOWN_DONE
    return COUNTDOWN_PREFIX + format_remaining(ms)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class CountdownDriver:
    def __init__(
        self,
        scheduler: Scheduler,
        surface: HostSurface,
        now: Callable[[], datetime] = utc_now,
        timings: Timings | None = None,
    ) -> None:
        self._scheduler = scheduler
        self._surface = surface
        self._now = now
        self._timings = timings or Timings()
        self._ticker: Teardown | None = None

    @property
    def running(self) -> bool:
        return self._ticker is not None and self._ticker.active

    def start(self, target: datetime) -> Teardown:
        if self._ticker is not None:
            raise RuntimeError("Countdown already started")
        if target.tzinfo is None:
            raise ValueError("target must be timezone-aware")

        def render() -> None:
            text = render_countdown(remaining_ms(target, self._now()))
            self._surface.set_text(ids.COUNTDOWN, text)

        render()
        self._ticker = self._scheduler.every(self._timings.countdown_tick, render, label="countdown")
        return self._ticker
