"""Landing terminal: lines fade in on their own delays, then the begin button."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from cue import Scheduler, Timeline

from transmission import surface as ids
from transmission.config import Timings
from transmission.surface import HostSurface


@dataclass(frozen=True)
class TerminalLine:
    element: str
    text: str
    delay: float | None = None  # ms; None falls back to index * line gap


def terminal_lines(entries: Sequence[tuple[str, float | None]], prefix: str = "terminal-line-") -> list[TerminalLine]:
    return [TerminalLine(f"{prefix}{i}", text, delay) for i, (text, delay) in enumerate(entries)]


def line_delays(lines: Sequence[TerminalLine], gap: float) -> list[float]:
    # An explicit 0 behaves like no delay at all.
    return [line.delay if line.delay else i * gap for i, line in enumerate(lines)]


def animate_terminal(
    scheduler: Scheduler,
    surface: HostSurface,
    lines: Sequence[TerminalLine],
    timings: Timings | None = None,
) -> Timeline:
    t = timings or Timings()
    delays = line_delays(lines, t.terminal_line_gap)
    timeline = Timeline(scheduler)
    for line, delay in zip(lines, delays):
        surface.set_text(line.element, line.text)
        timeline.add(delay, lambda el=line.element: surface.add_class(el, "visible"), line.element)
    timeline.add(
        max(delays, default=0.0) + t.begin_reveal_pad,
        lambda: surface.add_class(ids.BEGIN, "show"),
        ids.BEGIN,
    )
    timeline.play()
    return timeline
