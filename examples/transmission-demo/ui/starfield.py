"""Twinkling starfield behind the landing phase."""
from __future__ import annotations

import math
import random

import pygame

from cue import Scheduler, Teardown

from ui.constants import STAR_COUNT


class Starfield:
    """Redraws every frame until the teardown from ``start`` is called."""

    def __init__(self, scheduler: Scheduler, size: tuple[int, int], rng: random.Random) -> None:
        self._scheduler = scheduler
        w, h = size
        self._stars = [
            (rng.random() * w, rng.random() * h, rng.random() * 1.5 + 0.5, rng.random() * math.tau)
            for _ in range(STAR_COUNT)
        ]
        self._now = 0.0
        self._stop: Teardown | None = None

    @property
    def running(self) -> bool:
        return self._stop is not None and self._stop.active

    def start(self) -> Teardown:
        self._stop = self._scheduler.on_frame(self._update, label="starfield")
        return self._stop

    def _update(self, now: float) -> None:
        self._now = now

    def draw(self, screen: pygame.Surface) -> None:
        if not self.running:
            return
        for x, y, radius, phase in self._stars:
            twinkle = 0.5 + 0.5 * math.sin(self._now / 600 + phase)
            shade = int(90 + 140 * twinkle)
            pygame.draw.circle(screen, (shade, shade, min(shade + 20, 255)), (int(x), int(y)), radius)
