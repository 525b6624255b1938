"""Globe synchronization bridge.

Waits for the globe renderer to load, configures the scene, then plays
the arc sequence: an eased latency counter plus status changes cued off
fractions of the arc flight time. ``run_globe_sequence`` hands back a
Completion that resolves once the "connection established" banner has
been held on screen, or straight away if the renderer never loads.
"""
from __future__ import annotations

import enum
import logging
from dataclasses import dataclass

from cue import Completion, PollResult, Scheduler, Teardown, Timeline, Unavailable, poll
from cue_tween import Tween, animate
from cue_tween.easing import ease_out_cubic

from transmission import surface as ids
from transmission.collaborators import Arc, GlobeLoader, GlobeRenderer, Marker, PointOfView
from transmission.config import (
    BOSTON_COORDS,
    DISTANCE_MILES,
    SF_COORDS,
    STATUS_ARRIVING,
    STATUS_DELIVERED,
    GlobeSettings,
    Timings,
)
from transmission.surface import HostSurface

logger = logging.getLogger(__name__)


class ArcProgress(enum.Enum):
    IDLE = "idle"
    COUNTING = "counting"
    ARRIVED = "arrived"
    ESTABLISHED = "established"


@dataclass
class GlobeSyncState:
    available: bool = False
    arc_progress: ArcProgress = ArcProgress.IDLE
    anchor: float | None = None


def latency_value(progress: float, target: int = DISTANCE_MILES) -> int:
    """Eased counter reading: round((1 - (1 - p)^3) * target)."""
    p = min(max(progress, 0.0), 1.0)
    return round(ease_out_cubic(p) * target)


def format_miles(value: float) -> str:
    return f"{round(value):,}"


def markers(settings: GlobeSettings) -> list[Marker]:
    return [
        Marker(SF_COORDS.lat, SF_COORDS.lng, settings.origin_label, settings.origin_color),
        Marker(BOSTON_COORDS.lat, BOSTON_COORDS.lng, settings.destination_label,
               settings.destination_color),
    ]


class GlobeBridge:
    def __init__(
        self,
        scheduler: Scheduler,
        surface: HostSurface,
        loader: GlobeLoader,
        timings: Timings | None = None,
        settings: GlobeSettings | None = None,
    ) -> None:
        self._scheduler = scheduler
        self._surface = surface
        self._loader = loader
        self._timings = timings or Timings()
        self._settings = settings or GlobeSettings()
        self._state = GlobeSyncState()
        self._renderer: GlobeRenderer | None = None
        self._counter: Teardown | None = None
        self._timeline: Timeline | None = None

    @property
    def state(self) -> GlobeSyncState:
        return self._state

    @property
    def timeline(self) -> Timeline | None:
        return self._timeline

    def run_globe_sequence(self) -> Completion:
        done = Completion("globe")
        t = self._timings
        poll(
            self._scheduler,
            self._loader,
            t.globe_poll_interval,
            t.globe_poll_attempts,
            lambda result: self._on_poll(result, done),
        )
        return done

    def resize(self, width: int, height: int) -> None:
        if self._renderer is not None:
            self._renderer.width(width).height(height)

    def _on_poll(self, result: PollResult[GlobeRenderer], done: Completion) -> None:
        if isinstance(result, Unavailable):
            logger.warning(
                "Globe renderer failed to load after %d attempts, skipping to letter",
                result.attempts,
            )
            self._surface.hide(ids.GLOBE_LOADING)
            done.resolve()
            return

        self._state.available = True
        self._renderer = result.handle
        self._build(result.handle)
        self._scheduler.after(
            self._timings.globe_settle, lambda: self._launch_arc(result.handle, done)
        )

    def _build(self, renderer: GlobeRenderer) -> None:
        s = self._settings
        t = self._timings
        width, height = self._surface.viewport()
        (
            renderer.globe_image_url(s.globe_image_url)
            .background_image_url(s.background_image_url)
            .width(width)
            .height(height)
            .background_color(s.background_color)
            .atmosphere_color(s.atmosphere_color)
            .atmosphere_altitude(s.atmosphere_altitude)
            .show_graticules(False)
            .point_of_view(PointOfView(s.view.lat, s.view.lng, s.view_altitude), t.pov_transition)
            .controls(auto_rotate=False, enable_zoom=False, enable_rotate=True,
                      rotate_speed=s.rotate_speed)
        )
        data = markers(s)
        renderer.rings_data(data, max_radius=3, propagation_speed=2, repeat_period=1200)
        renderer.points_data(data, altitude=0.015, radius=0.5)
        renderer.labels_data(data, size=1.4, dot_radius=0.5, altitude=0.018, resolution=1)

        self._scheduler.after(t.globe_loading_hide, self._fade_loading)

    def _fade_loading(self) -> None:
        t = self._timings
        self._surface.set_style(
            ids.GLOBE_LOADING, opacity=0.0, transition=f"opacity {t.globe_loading_fade:g}ms ease"
        )
        self._scheduler.after(t.globe_loading_fade, lambda: self._surface.hide(ids.GLOBE_LOADING))

    def _launch_arc(self, renderer: GlobeRenderer, done: Completion) -> None:
        s = self._settings
        t = self._timings
        renderer.arcs_data(
            [Arc(SF_COORDS, BOSTON_COORDS, (s.origin_color, s.destination_color))],
            stroke=1.2,
            dash_length=0.6,
            dash_gap=0.3,
            dash_animate_time=t.arc_flight,
            altitude_auto_scale=0.4,
        )
        self._surface.add_class(ids.STATUS_OVERLAY, "visible")
        self._state.arc_progress = ArcProgress.COUNTING

        self._counter = animate(
            self._scheduler,
            Tween(0.0, 1.0, t.counter_duration),
            lambda progress: self._surface.set_text(ids.LATENCY, format_miles(latency_value(progress))),
        )

        self._timeline = (
            Timeline(self._scheduler)
            .add(t.arriving_at, self._mark_arriving, "arriving")
            .add(t.arc_flight, self._mark_delivered, "delivered")
            .add(t.established_at, self._mark_established, "established")
            .add(t.globe_done_at, done.resolve, "done")
        )
        self._state.anchor = self._timeline.play()
        logger.debug("arc launched at %.0fms", self._state.anchor)

    def _mark_arriving(self) -> None:
        self._surface.set_text(ids.PACKET, STATUS_ARRIVING)
        self._surface.add_class(ids.PACKET, "status-arriving")

    def _mark_delivered(self) -> None:
        self._surface.set_text(ids.PACKET, STATUS_DELIVERED)
        self._surface.remove_class(ids.PACKET, "status-arriving")
        self._surface.add_class(ids.PACKET, "status-delivered")
        self._state.arc_progress = ArcProgress.ARRIVED

    def _mark_established(self) -> None:
        self._surface.add_class(ids.CONNECTION, "visible")
        self._state.arc_progress = ArcProgress.ESTABLISHED
