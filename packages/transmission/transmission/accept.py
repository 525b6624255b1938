"""Accept action: confetti, fade out the ask, show the accepted state."""
from __future__ import annotations

import logging

from cue import Scheduler, Timeline

from transmission import surface as ids
from transmission.collaborators import ParticleBurst
from transmission.config import Timings
from transmission.particles import ACCEPT_BURSTS
from transmission.surface import HostSurface

logger = logging.getLogger(__name__)


class AcceptAction:
    def __init__(
        self,
        scheduler: Scheduler,
        surface: HostSurface,
        burst: ParticleBurst | None = None,
        timings: Timings | None = None,
    ) -> None:
        self._scheduler = scheduler
        self._surface = surface
        self._burst = burst
        self._timings = timings or Timings()
        self._accepted = False

    @property
    def accepted(self) -> bool:
        return self._accepted

    def on_trigger(self) -> bool:
        if self._accepted:
            logger.debug("accept ignored, already accepted")
            return False
        self._accepted = True
        t = self._timings

        self._surface.disable(ids.ACCEPT)
        self._surface.disable(ids.RETRY)

        if self._burst is not None:
            burst = self._burst
            timeline = Timeline(self._scheduler)
            for i, config in enumerate(ACCEPT_BURSTS):
                timeline.add(i * t.accept_burst_stagger, lambda c=config: burst(c), f"burst-{i}")
            timeline.play()
        else:
            logger.debug("no particle burst available, skipping confetti")

        self._surface.set_style(ids.ASK, opacity=0.0, transition=f"opacity {t.accept_fade:g}ms ease")
        self._scheduler.after(t.accept_fade, self._show_accepted)
        return True

    def _show_accepted(self) -> None:
        self._surface.hide(ids.ASK)
        self._surface.show(ids.ACCEPTED)
        self._surface.add_class(ids.ACCEPTED, "visible")
