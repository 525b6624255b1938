"""Phase orchestrator: landing -> globe -> transition -> letter.

The only externally triggered action is ``begin``. Everything after it
is driven by the scheduler: the globe bridge's completion hands control
to the transition, whose cues bring in the letter.
"""
from __future__ import annotations

import logging
import random
from datetime import datetime
from typing import Callable, Sequence

from cue import Completion, Scheduler, Teardown, Timeline

from transmission import surface as ids
from transmission.accept import AcceptAction
from transmission.collaborators import GlobeLoader, ParticleBurst, Starfield
from transmission.config import (
    LETTER_PARAGRAPHS,
    TERMINAL_LINES,
    VALENTINE_DATE,
    GlobeSettings,
    Timings,
)
from transmission.countdown import CountdownDriver, utc_now
from transmission.globe import GlobeBridge
from transmission.particles import spawn_ambient
from transmission.phases import Phase, PhaseTrack
from transmission.retry import RetryControl, RetryState
from transmission.surface import HostSurface
from transmission.terminal import animate_terminal, terminal_lines
from transmission.typewriter import TypewriterEngine, blocks_from_paragraphs

logger = logging.getLogger(__name__)

_CONTAINERS = {
    Phase.LANDING: ids.LANDING,
    Phase.GLOBE: ids.GLOBE_PHASE,
    Phase.LETTER: ids.LETTER_PHASE,
}


class Orchestrator:
    """Owns phase state and wires every component to the host surface."""

    def __init__(
        self,
        scheduler: Scheduler,
        surface: HostSurface,
        globe_loader: GlobeLoader,
        starfield: Starfield | None = None,
        burst: ParticleBurst | None = None,
        timings: Timings | None = None,
        globe_settings: GlobeSettings | None = None,
        paragraphs: Sequence[str] = LETTER_PARAGRAPHS,
        terminal: Sequence[tuple[str, float | None]] = TERMINAL_LINES,
        countdown_target: datetime = VALENTINE_DATE,
        now: Callable[[], datetime] = utc_now,
        rng: random.Random | None = None,
    ) -> None:
        self._scheduler = scheduler
        self._surface = surface
        self._starfield = starfield
        self._timings = timings or Timings()
        self._paragraphs = tuple(paragraphs)
        self._terminal = tuple(terminal)
        self._countdown_target = countdown_target
        self._rng = rng or random.Random()

        self.phases = PhaseTrack()
        self.globe = GlobeBridge(scheduler, surface, globe_loader, self._timings, globe_settings)
        self.typewriter = TypewriterEngine(scheduler, surface, self._timings)
        self.countdown = CountdownDriver(scheduler, surface, now, self._timings)
        self.retry = RetryControl(scheduler, surface, RetryState(), self._timings, self._rng)
        self.accept = AcceptAction(scheduler, surface, burst, self._timings)

        # Resolves when the letter phase becomes active.
        self.letter_shown = Completion("letter")
        self.letter_typed: Completion | None = None

        self._started = False
        self._begun = False
        self._globe_done = False
        self._stop_starfield: Teardown | None = None

    @property
    def begun(self) -> bool:
        return self._begun

    def start(self) -> None:
        """Set up the landing phase and wire the controls."""
        if self._started:
            raise RuntimeError("Orchestrator already started")
        self._started = True

        self._surface.set_scroll_locked(True)
        self._surface.activate(ids.LANDING)
        if self._starfield is not None:
            self._stop_starfield = self._starfield.start()
        animate_terminal(self._scheduler, self._surface, terminal_lines(self._terminal), self._timings)

        self._surface.bind(ids.BEGIN, self.begin)
        self._surface.bind(ids.ACCEPT, self.accept.on_trigger)
        self._surface.bind(ids.RETRY, self.retry.on_trigger)

    def begin(self) -> bool:
        """Leave the landing phase. Only the first call does anything."""
        if self._begun:
            logger.debug("begin ignored, already begun")
            return False
        self._begun = True
        t = self._timings

        self._surface.disable(ids.BEGIN)
        self._surface.set_style(ids.BEGIN, opacity=0.0, transition=f"opacity {t.begin_fade:g}ms ease")

        if self._stop_starfield is not None:
            self._stop_starfield()
            self._stop_starfield = None

        self._surface.deactivate(ids.LANDING)
        self._scheduler.after(t.landing_fade, self._show_globe)
        self.globe.run_globe_sequence().then(self._on_globe_done)
        return True

    def _show_globe(self) -> None:
        self._enter(Phase.GLOBE)
        # The globe may have given up before its container faded in.
        if self._globe_done:
            self._run_transition()

    def _on_globe_done(self) -> None:
        self._globe_done = True
        if self.phases.active is Phase.GLOBE:
            self._run_transition()

    def _run_transition(self) -> None:
        t = self._timings
        self._surface.deactivate(ids.GLOBE_PHASE)
        self.phases.enter(Phase.TRANSITION)
        (
            Timeline(self._scheduler)
            .add(t.theme_delay, lambda: self._surface.set_theme(ids.ROMANTIC_THEME), "theme")
            .add(t.letter_delay, self._show_letter, "letter")
            .play()
        )

    def _show_letter(self) -> None:
        self._enter(Phase.LETTER)
        self._surface.set_scroll_locked(False)
        spawn_ambient(self._surface, self._rng)
        self.letter_typed = self.typewriter.reveal(blocks_from_paragraphs(self._paragraphs))
        self.countdown.start(self._countdown_target)
        self.letter_shown.resolve()

    def _enter(self, phase: Phase) -> None:
        self.phases.enter(phase)
        container = _CONTAINERS.get(phase)
        if container is not None:
            self._surface.activate(container)
        logger.info("entered %s phase", phase.value)
