"""Long-Distance Protocol -- pygame host for the transmission presentation.

Exercises cue, cue-tween, and transmission.

Controls:
  Enter   Begin transmission (landing)
  A       Accept
  R       Retry
  Click   Activate the control under the cursor
  Esc     Quit
"""
from __future__ import annotations

import argparse
import logging
import random
import sys

import pygame

from cue import Engine
from transmission import Orchestrator, Timings
from transmission import surface as ids

from ui.confetti import Confetti
from ui.constants import FPS, GLOBE_LOAD_MS, SCREEN_H, SCREEN_W
from ui.globe import FlatGlobe, make_loader
from ui.starfield import Starfield
from ui.surface import PygameSurface

logger = logging.getLogger("transmission-demo")

KEY_CONTROLS = {
    pygame.K_RETURN: ids.BEGIN,
    pygame.K_KP_ENTER: ids.BEGIN,
    pygame.K_a: ids.ACCEPT,
    pygame.K_r: ids.RETRY,
}


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Long-Distance Protocol -- transmission demo")
    p.add_argument("--seed", type=int, default=None, help="Random seed for particles and dodges")
    p.add_argument("--speed", type=float, default=1.0,
                   help="Playback speed multiplier (default: 1.0)")
    p.add_argument("--no-globe", action="store_true",
                   help="Never load the globe renderer, to watch the fallback path")
    p.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    args = p.parse_args()
    if args.speed <= 0:
        p.error("--speed must be positive")
    return args


class Presentation:
    """Holds the engine, the surface and the renderers it drives."""

    def __init__(self, args: argparse.Namespace) -> None:
        rng = random.Random(args.seed)
        self.engine = Engine(fps=FPS)
        sched = self.engine.scheduler
        size = (SCREEN_W, SCREEN_H)

        self.surface = PygameSurface(size)
        self.starfield = Starfield(sched, size, rng)
        self.globe = FlatGlobe(sched)
        self.confetti = Confetti(sched, size, rng)

        loader = (lambda: None) if args.no_globe else make_loader(sched, self.globe, GLOBE_LOAD_MS)
        timings = Timings().scaled(1 / args.speed) if args.speed != 1.0 else Timings()

        self.orch = Orchestrator(
            sched,
            self.surface,
            globe_loader=loader,
            starfield=self.starfield,
            burst=self.confetti,
            timings=timings,
            rng=rng,
        )

    def activate(self, control: str | None) -> None:
        if control is not None and self.surface.click(control):
            logger.debug("activated %s", control)

    def resize(self, width: int, height: int) -> None:
        self.surface.resize(width, height)
        self.confetti.size = (width, height)
        self.orch.globe.resize(width, height)

    def draw(self, screen: pygame.Surface, font: pygame.font.Font) -> None:
        now = self.engine.clock.now
        self.surface.draw_background(screen)
        if self.surface.is_visible(ids.GLOBE_PHASE) and self.orch.globe.state.available:
            self.globe.draw(screen, font)
        self.starfield.draw(screen)
        self.surface.draw_particles(screen, now)
        self.surface.draw_landing(screen, font)
        if self.surface.is_visible(ids.GLOBE_PHASE):
            self.surface.draw_status(screen, font)
        self.surface.draw_letter(screen, font, now)
        self.confetti.draw(screen)


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)-7s %(name)s: %(message)s",
    )

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H), pygame.RESIZABLE)
    pygame.display.set_caption("Long-Distance Protocol")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 16)

    state = Presentation(args)
    state.orch.start()
    running = True

    while running:
        clock.tick(FPS)

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                else:
                    state.activate(KEY_CONTROLS.get(event.key))

            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                state.activate(state.surface.control_at(event.pos))

            elif event.type == pygame.VIDEORESIZE:
                state.resize(event.w, event.h)

        # --- Frame ---
        state.engine.step()

        # --- Render ---
        state.draw(screen, font)
        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
