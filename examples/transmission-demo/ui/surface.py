"""pygame rendition of the host surface.

Element state lives in the recording surface; this class only paints it
and maps clicks back to control names.
"""
from __future__ import annotations

import math

import pygame

from transmission import surface as ids
from transmission.retry import SHAKE
from transmission.surface import RecordingSurface

from ui.constants import (
    ACCENT,
    BG_COLOR,
    BUTTON_BG,
    BUTTON_DISABLED,
    BUTTON_H,
    BUTTON_W,
    ERROR_COLOR,
    LINE_H,
    ROMANTIC_BG,
    TERMINAL_COLOR,
    TEXT_COLOR,
    TEXT_DIM,
    TEXT_MARGIN,
    hex_to_rgb,
)

# Elements the page shows before anything touches them.
_INITIALLY_VISIBLE = (ids.GLOBE_LOADING, ids.ASK, ids.ACCEPT, ids.RETRY)


def wrap(text: str, font: pygame.font.Font, width: int) -> list[str]:
    lines: list[str] = []
    current = ""
    for word in text.split(" "):
        trial = f"{current} {word}" if current else word
        if font.size(trial)[0] <= width or not current:
            current = trial
        else:
            lines.append(current)
            current = word
    if current:
        lines.append(current)
    return lines


class PygameSurface(RecordingSurface):
    def __init__(self, viewport: tuple[int, int]) -> None:
        super().__init__(viewport)
        for name in _INITIALLY_VISIBLE:
            self.show(name)
        self.hitboxes: dict[str, pygame.Rect] = {}

    def control_at(self, pos: tuple[int, int]) -> str | None:
        for control, rect in self.hitboxes.items():
            if rect.collidepoint(pos):
                return control
        return None

    def _opaque(self, element: str) -> bool:
        el = self.elements.get(element)
        return el is not None and el.visible and el.style.get("opacity", 1.0) > 0

    # --- Drawing ---

    def draw_background(self, screen: pygame.Surface) -> None:
        screen.fill(ROMANTIC_BG if self.theme == ids.ROMANTIC_THEME else BG_COLOR)

    def draw_landing(self, screen: pygame.Surface, font: pygame.font.Font) -> None:
        self.hitboxes.pop(ids.BEGIN, None)
        if not self.is_visible(ids.LANDING):
            return
        y = TEXT_MARGIN
        lines = sorted(n for n in self.elements if n.startswith("terminal-line-"))
        for name in lines:
            if self.has_class(name, "visible"):
                screen.blit(font.render(self.text(name), True, TERMINAL_COLOR), (TEXT_MARGIN, y))
            y += LINE_H

        if self.has_class(ids.BEGIN, "show") and self.elements[ids.BEGIN].style.get("opacity", 1.0) > 0:
            rect = pygame.Rect(TEXT_MARGIN, y + LINE_H, BUTTON_W, BUTTON_H)
            self._button(screen, font, rect, "[ begin ]", not self.elements[ids.BEGIN].disabled)
            self.hitboxes[ids.BEGIN] = rect

    def draw_status(self, screen: pygame.Surface, font: pygame.font.Font) -> None:
        if self._opaque(ids.GLOBE_LOADING):
            screen.blit(font.render("Loading globe...", True, TEXT_DIM), (TEXT_MARGIN, TEXT_MARGIN))
        if not self.has_class(ids.STATUS_OVERLAY, "visible"):
            return
        w, h = self.viewport()
        x, y = TEXT_MARGIN, h - 4 * LINE_H
        screen.blit(font.render(f"latency: {self.text(ids.LATENCY)} mi", True, TEXT_COLOR), (x, y))
        screen.blit(font.render(f"packet: {self.text(ids.PACKET)}", True, TEXT_COLOR), (x, y + LINE_H))
        if self.has_class(ids.CONNECTION, "visible"):
            screen.blit(font.render("connection established", True, ACCENT), (x, y + 2 * LINE_H))

    def draw_letter(self, screen: pygame.Surface, font: pygame.font.Font, now: float) -> None:
        for control in (ids.ACCEPT, ids.RETRY):
            self.hitboxes.pop(control, None)
        if not self.is_visible(ids.LETTER_PHASE):
            return
        w, h = self.viewport()
        y = TEXT_MARGIN
        blocks = sorted(n for n in self.elements if n.startswith("letter-p"))
        for name in blocks:
            if not self.is_visible(name):
                continue
            rows = wrap(self.text(name), font, w - 2 * TEXT_MARGIN) or [""]
            for row in rows:
                screen.blit(font.render(row, True, TEXT_COLOR), (TEXT_MARGIN, y))
                y += LINE_H
            if name == self.cursor_host and self._cursor_on(now):
                cx = TEXT_MARGIN + font.size(rows[-1])[0] + 2
                pygame.draw.rect(screen, TEXT_COLOR, (cx, y - LINE_H + 4, 8, LINE_H - 8))
            y += LINE_H // 2

        screen.blit(font.render(self.text(ids.COUNTDOWN), True, TEXT_DIM), (TEXT_MARGIN, h - LINE_H * 2))
        self._draw_ask(screen, font, y + LINE_H)

    def _cursor_on(self, now: float) -> bool:
        cursor = self.elements.get(ids.CURSOR)
        if cursor is not None and cursor.style.get("opacity", 1.0) <= 0:
            return False
        return int(now // 500) % 2 == 0

    def _draw_ask(self, screen: pygame.Surface, font: pygame.font.Font, y: int) -> None:
        if self._opaque(ids.ASK):
            accept = pygame.Rect(TEXT_MARGIN, y, BUTTON_W, BUTTON_H)
            self._button(screen, font, accept, "accept", self.interactable(ids.ACCEPT))
            self.hitboxes[ids.ACCEPT] = accept

            if self.is_visible(ids.RETRY):
                dx, dy = self.elements[ids.RETRY].offset
                retry = pygame.Rect(TEXT_MARGIN + BUTTON_W + 20 + int(dx), y + int(dy), BUTTON_W, BUTTON_H)
                shake = 4 * math.sin(pygame.time.get_ticks() / 20) if self.has_class(ids.RETRY, SHAKE) else 0
                self._button(screen, font, retry.move(int(shake), 0), "retry", self.interactable(ids.RETRY))
                self.hitboxes[ids.RETRY] = retry

            if self.has_class(ids.RETRY_ERROR, "visible"):
                msg = font.render(self.text(ids.RETRY_ERROR), True, ERROR_COLOR)
                screen.blit(msg, (TEXT_MARGIN, y + BUTTON_H + 10))

        if self.is_visible(ids.ACCEPTED):
            screen.blit(font.render("Transmission accepted.", True, ACCENT), (TEXT_MARGIN, y))

    def draw_particles(self, screen: pygame.Surface, now: float) -> None:
        w, h = self.viewport()
        seconds = now / 1000
        for dot in self.particles:
            t = seconds - dot.delay_s
            if t < 0:
                continue
            progress = (t % dot.duration_s) / dot.duration_s
            x = int(dot.left_pct / 100 * w)
            y = int(h + 10 - progress * (h + 20))
            pygame.draw.circle(screen, hex_to_rgb(dot.color), (x, y), max(1, int(dot.size_px / 2)))

    def _button(
        self, screen: pygame.Surface, font: pygame.font.Font, rect: pygame.Rect, label: str, enabled: bool
    ) -> None:
        pygame.draw.rect(screen, BUTTON_BG if enabled else BUTTON_DISABLED, rect, border_radius=6)
        pygame.draw.rect(screen, ACCENT if enabled else TEXT_DIM, rect, 1, border_radius=6)
        text = font.render(label, True, TEXT_COLOR if enabled else TEXT_DIM)
        screen.blit(text, text.get_rect(center=rect.center))
