"""Confetti bursts for the accept celebration."""
from __future__ import annotations

import math
import random
from dataclasses import dataclass

import pygame

from cue import Scheduler
from transmission.collaborators import BurstConfig

from ui.constants import hex_to_rgb

GRAVITY = 0.25
DRAG = 0.985


@dataclass
class Piece:
    x: float
    y: float
    vx: float
    vy: float
    color: tuple[int, int, int]
    shape: str
    size: float
    life: int


class Confetti:
    """ParticleBurst that simulates pieces once per frame."""

    def __init__(self, scheduler: Scheduler, size: tuple[int, int], rng: random.Random) -> None:
        self.size = size
        self._rng = rng
        self.pieces: list[Piece] = []
        scheduler.on_frame(self._update, label="confetti")

    def __call__(self, config: BurstConfig) -> None:
        w, h = self.size
        ox, oy = config.origin[0] * w, config.origin[1] * h
        colors = config.colors or ("#ffffff",)
        for _ in range(config.particle_count):
            angle = math.radians(config.angle + (self._rng.random() - 0.5) * config.spread)
            speed = (self._rng.random() * 8 + 6) * config.scalar
            self.pieces.append(Piece(
                x=ox,
                y=oy,
                vx=math.cos(angle) * speed,
                vy=-math.sin(angle) * speed,
                color=hex_to_rgb(self._rng.choice(colors)),
                shape=self._rng.choice(config.shapes),
                size=3 * config.scalar,
                life=config.ticks,
            ))

    def _update(self, now: float) -> None:
        for p in self.pieces:
            p.vx *= DRAG
            p.vy = p.vy * DRAG + GRAVITY
            p.x += p.vx
            p.y += p.vy
            p.life -= 1
        self.pieces = [p for p in self.pieces if p.life > 0]

    def draw(self, screen: pygame.Surface) -> None:
        for p in self.pieces:
            if p.shape == "circle":
                pygame.draw.circle(screen, p.color, (int(p.x), int(p.y)), int(p.size))
            else:
                pygame.draw.rect(screen, p.color, (int(p.x), int(p.y), int(p.size * 2), int(p.size * 2)))
