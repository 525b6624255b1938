"""Ambient dots for the letter phase and the accept confetti bursts."""
from __future__ import annotations

import random
from dataclasses import dataclass

from transmission.collaborators import BurstConfig
from transmission.config import AMBIENT_COLORS, CONFETTI_COLORS
from transmission.surface import HostSurface

AMBIENT_COUNT = 25


@dataclass(frozen=True)
class AmbientDot:
    left_pct: float
    duration_s: float
    delay_s: float
    size_px: float
    color: str


def ambient_dots(rng: random.Random, count: int = AMBIENT_COUNT) -> list[AmbientDot]:
    return [
        AmbientDot(
            left_pct=rng.random() * 100,
            duration_s=rng.random() * 15 + 10,
            delay_s=rng.random() * 10,
            size_px=rng.random() * 4 + 2,
            color=rng.choice(AMBIENT_COLORS),
        )
        for _ in range(count)
    ]


def spawn_ambient(surface: HostSurface, rng: random.Random, count: int = AMBIENT_COUNT) -> None:
    for dot in ambient_dots(rng, count):
        surface.spawn_particle(dot)


# Centre, left, right, then a slower heart-coloured burst.
ACCEPT_BURSTS: tuple[BurstConfig, ...] = (
    BurstConfig(particle_count=120, spread=80, origin=(0.5, 0.65),
                colors=CONFETTI_COLORS, shapes=("circle",), scalar=1.2, ticks=200),
    BurstConfig(particle_count=60, angle=60, spread=55, origin=(0.1, 0.65),
                colors=CONFETTI_COLORS[:3], scalar=1.1),
    BurstConfig(particle_count=60, angle=120, spread=55, origin=(0.9, 0.65),
                colors=CONFETTI_COLORS[:3], scalar=1.1),
    BurstConfig(particle_count=50, spread=100, origin=(0.5, 0.55),
                colors=("#e8828a", "#d4606a", "#ff6b9d"), shapes=("circle",),
                scalar=1.5, ticks=300),
)
