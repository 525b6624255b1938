"""Flat map stand-in for the 3D globe renderer.

Implements the builder interface the globe bridge drives and draws an
equirectangular view of the continental US with the animated arc.
"""
from __future__ import annotations

from typing import Any, Sequence

import pygame

from cue import Scheduler
from transmission.collaborators import Arc, Marker, PointOfView

from ui.constants import GLOBE_FILL, GLOBE_GRID, MAP_LAT, MAP_LNG, TEXT_COLOR, hex_to_rgb


class FlatGlobe:
    def __init__(self, scheduler: Scheduler) -> None:
        self._scheduler = scheduler
        self.size = (0, 0)
        self.background = (0, 0, 0)
        self.markers: list[Marker] = []
        self.arcs: list[Arc] = []
        self.arc_started: float | None = None
        self.arc_ms = 0.0
        self.pov: PointOfView | None = None

    # --- Builder interface ---

    def globe_image_url(self, url: str) -> FlatGlobe:
        return self

    def background_image_url(self, url: str) -> FlatGlobe:
        return self

    def width(self, px: int) -> FlatGlobe:
        self.size = (px, self.size[1])
        return self

    def height(self, px: int) -> FlatGlobe:
        self.size = (self.size[0], px)
        return self

    def background_color(self, color: str) -> FlatGlobe:
        if color.startswith("#"):
            self.background = hex_to_rgb(color)
        return self

    def atmosphere_color(self, color: str) -> FlatGlobe:
        return self

    def atmosphere_altitude(self, altitude: float) -> FlatGlobe:
        return self

    def show_graticules(self, show: bool) -> FlatGlobe:
        return self

    def point_of_view(self, pov: PointOfView, transition_ms: float) -> FlatGlobe:
        self.pov = pov
        return self

    def controls(self, **options: Any) -> FlatGlobe:
        return self

    def rings_data(self, markers: Sequence[Marker], **style: Any) -> FlatGlobe:
        return self

    def points_data(self, markers: Sequence[Marker], **style: Any) -> FlatGlobe:
        self.markers = list(markers)
        return self

    def labels_data(self, markers: Sequence[Marker], **style: Any) -> FlatGlobe:
        return self

    def arcs_data(self, arcs: Sequence[Arc], **style: Any) -> FlatGlobe:
        self.arcs = list(arcs)
        self.arc_started = self._scheduler.now
        self.arc_ms = style.get("dash_animate_time", 0.0)
        return self

    # --- Drawing ---

    def _project(self, lat: float, lng: float) -> tuple[int, int]:
        w, h = self.size
        x = (lng - MAP_LNG[0]) / (MAP_LNG[1] - MAP_LNG[0])
        y = 1.0 - (lat - MAP_LAT[0]) / (MAP_LAT[1] - MAP_LAT[0])
        return int(x * w), int(y * h)

    def draw(self, screen: pygame.Surface, font: pygame.font.Font) -> None:
        w, h = self.size
        pygame.draw.rect(screen, GLOBE_FILL, (0, 0, w, h))
        for lng in range(int(MAP_LNG[0]), int(MAP_LNG[1]) + 1, 10):
            x, _ = self._project(MAP_LAT[0], lng)
            pygame.draw.line(screen, GLOBE_GRID, (x, 0), (x, h))
        for lat in range(int(MAP_LAT[0]), int(MAP_LAT[1]) + 1, 10):
            _, y = self._project(lat, MAP_LNG[0])
            pygame.draw.line(screen, GLOBE_GRID, (0, y), (w, y))

        for arc in self.arcs:
            self._draw_arc(screen, arc)

        for m in self.markers:
            pos = self._project(m.lat, m.lng)
            pygame.draw.circle(screen, hex_to_rgb(m.color), pos, 6)
            screen.blit(font.render(m.label, True, TEXT_COLOR), (pos[0] + 10, pos[1] - 8))

    def _draw_arc(self, screen: pygame.Surface, arc: Arc) -> None:
        if self.arc_started is None or self.arc_ms <= 0:
            return
        t = min((self._scheduler.now - self.arc_started) / self.arc_ms, 1.0)
        x0, y0 = self._project(arc.start.lat, arc.start.lng)
        x1, y1 = self._project(arc.end.lat, arc.end.lng)
        lift = abs(x1 - x0) * 0.3
        start, end = hex_to_rgb(arc.colors[0]), hex_to_rgb(arc.colors[1])
        steps = 60
        prev = (x0, y0)
        for i in range(1, int(steps * t) + 1):
            s = i / steps
            x = x0 + (x1 - x0) * s
            y = y0 + (y1 - y0) * s - lift * 4 * s * (1 - s)
            color = tuple(int(a + (b - a) * s) for a, b in zip(start, end))
            pygame.draw.line(screen, color, prev, (int(x), int(y)), 2)
            prev = (int(x), int(y))


def make_loader(scheduler: Scheduler, globe: FlatGlobe, ready_at: float):
    """Loader that reports the renderer missing until ``ready_at`` ms."""

    def load() -> FlatGlobe | None:
        if scheduler.now < ready_at:
            return None
        return globe

    return load
