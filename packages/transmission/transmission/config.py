"""Timing, geography and copy for the Long-Distance Protocol presentation."""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone


@dataclass(frozen=True)
class Coordinates:
    lat: float
    lng: float


# Endpoints
SF_COORDS = Coordinates(lat=37.7749, lng=-122.4194)
BOSTON_COORDS = Coordinates(lat=42.3601, lng=-71.0589)
DISTANCE_MILES = 3084

# Copy
RETRY_MESSAGES = (
    "Error: Connection refused.",
    "Error: Timeout exceeded.",
    "Rerouting to Accept...",
)
STATUS_ARRIVING = "Arriving..."
STATUS_DELIVERED = "Delivered"
COUNTDOWN_DONE = "Happy Valentine's Day"
COUNTDOWN_PREFIX = "// Valentine's Day in "

# Feb 14, 2026 00:00:00 EST
VALENTINE_DATE = datetime(2026, 2, 14, tzinfo=timezone(timedelta(hours=-5)))

# (text, explicit delay in ms or None for index * terminal_line_gap)
TERMINAL_LINES: tuple[tuple[str, float | None], ...] = (
    ("> establishing secure channel...", 0),
    ("> origin: San Francisco, CA", 700),
    ("> destination: Cambridge, MA", 1400),
    ("> payload: 1 letter (encrypted)", 2100),
    ("> status: ready to transmit", 2900),
)

LETTER_PARAGRAPHS: tuple[str, ...] = (
    "Three thousand and eighty-four miles is a long way for a packet to travel.",
    "Every evening the latency feels a little longer, and every morning the "
    "time zones disagree about when it is.",
    "But the connection has never dropped, not once.",
    "So here is this transmission, sent the only way I know how.",
)

# Romantic-phase palettes
AMBIENT_COLORS = ("#e8828a", "#f8bbd0", "#ffccbc", "#d4606a")
CONFETTI_COLORS = ("#e8828a", "#f8bbd0", "#ff6b9d", "#d4606a", "#ffccbc")

# Fields left alone by Timings.scaled()
_UNSCALED = frozenset({"globe_poll_attempts", "arriving_fraction", "counter_fraction"})


@dataclass(frozen=True)
class Timings:
    """Every delay in the presentation, in milliseconds."""

    # Landing and phase transitions
    begin_fade: float = 500
    landing_fade: float = 400
    theme_delay: float = 600
    letter_delay: float = 1200
    terminal_line_gap: float = 600
    begin_reveal_pad: float = 800

    # Globe
    globe_poll_interval: float = 200
    globe_poll_attempts: int = 50
    globe_loading_hide: float = 800
    globe_loading_fade: float = 500
    globe_settle: float = 1500
    pov_transition: float = 1000
    arc_flight: float = 7000
    arriving_fraction: float = 0.75
    counter_fraction: float = 0.8
    established_delay: float = 800
    established_hold: float = 2500

    # Letter
    typewriter_start: float = 1800
    typewriter_char: float = 25
    typewriter_block_pause: float = 400
    cursor_hold: float = 1500
    cursor_fade: float = 500
    countdown_tick: float = 1000

    # The ask
    shake: float = 500
    retry_message_clear: float = 2000
    retry_final_clear: float = 1500
    accept_fade: float = 800
    accept_burst_stagger: float = 200

    def __post_init__(self) -> None:
        for f in dataclasses.fields(self):
            value = getattr(self, f.name)
            if value < 0:
                raise ValueError(f"{f.name} must be >= 0, got {value}")
        if self.globe_poll_interval <= 0:
            raise ValueError("globe_poll_interval must be positive")
        if self.arc_flight <= 0:
            raise ValueError("arc_flight must be positive")
        if self.counter_fraction <= 0:
            raise ValueError("counter_fraction must be positive")
        if self.typewriter_char <= 0:
            raise ValueError("typewriter_char must be positive")
        if self.countdown_tick <= 0:
            raise ValueError("countdown_tick must be positive")

    @property
    def arriving_at(self) -> float:
        return self.arc_flight * self.arriving_fraction

    @property
    def counter_duration(self) -> float:
        return self.arc_flight * self.counter_fraction

    @property
    def established_at(self) -> float:
        return self.arc_flight + self.established_delay

    @property
    def globe_done_at(self) -> float:
        return self.established_at + self.established_hold

    def scaled(self, factor: float) -> Timings:
        """Copy with every duration multiplied by ``factor``."""
        if factor <= 0:
            raise ValueError(f"factor must be positive, got {factor}")
        changes = {
            f.name: getattr(self, f.name) * factor
            for f in dataclasses.fields(self)
            if f.name not in _UNSCALED
        }
        return dataclasses.replace(self, **changes)


@dataclass(frozen=True)
class GlobeSettings:
    """Static look of the globe scene."""

    globe_image_url: str = "https://unpkg.com/three-globe/example/img/earth-night.jpg"
    background_image_url: str = "https://unpkg.com/three-globe/example/img/night-sky.png"
    background_color: str = "rgba(0,0,0,0)"
    atmosphere_color: str = "#a78bfa"
    atmosphere_altitude: float = 0.25
    view: Coordinates = Coordinates(lat=39.5, lng=-98.0)
    view_altitude: float = 2.2
    origin_label: str = "San Francisco"
    origin_color: str = "#a78bfa"
    destination_label: str = "Cambridge"
    destination_color: str = "#f9a8d4"
    rotate_speed: float = 0.3
