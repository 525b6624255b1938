"""Interfaces of the renderers and effects the presentation drives.

None of these are implemented here beyond in-memory recorders; hosts
provide the real starfield, globe and particle burst.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Protocol, Sequence

from cue import Teardown

from transmission.config import Coordinates


@dataclass(frozen=True)
class Marker:
    lat: float
    lng: float
    label: str
    color: str


@dataclass(frozen=True)
class Arc:
    start: Coordinates
    end: Coordinates
    colors: tuple[str, str]


@dataclass(frozen=True)
class PointOfView:
    lat: float
    lng: float
    altitude: float


@dataclass(frozen=True)
class BurstConfig:
    """One particle burst. Origin is in normalized viewport coordinates."""

    particle_count: int
    spread: float
    origin: tuple[float, float] = (0.5, 0.5)
    angle: float = 90.0
    colors: tuple[str, ...] = ()
    shapes: tuple[str, ...] = ("square", "circle")
    scalar: float = 1.0
    ticks: int = 200


class Starfield(Protocol):
    def start(self) -> Teardown:
        """Begin rendering every frame; the teardown stops the loop."""
        ...


class GlobeRenderer(Protocol):
    """Builder-style globe surface. Every setter returns the renderer."""

    def globe_image_url(self, url: str) -> GlobeRenderer: ...

    def background_image_url(self, url: str) -> GlobeRenderer: ...

    def width(self, px: int) -> GlobeRenderer: ...

    def height(self, px: int) -> GlobeRenderer: ...

    def background_color(self, color: str) -> GlobeRenderer: ...

    def atmosphere_color(self, color: str) -> GlobeRenderer: ...

    def atmosphere_altitude(self, altitude: float) -> GlobeRenderer: ...

    def show_graticules(self, show: bool) -> GlobeRenderer: ...

    def point_of_view(self, pov: PointOfView, transition_ms: float) -> GlobeRenderer: ...

    def controls(self, **options: Any) -> GlobeRenderer: ...

    def rings_data(self, markers: Sequence[Marker], **style: Any) -> GlobeRenderer: ...

    def points_data(self, markers: Sequence[Marker], **style: Any) -> GlobeRenderer: ...

    def labels_data(self, markers: Sequence[Marker], **style: Any) -> GlobeRenderer: ...

    def arcs_data(self, arcs: Sequence[Arc], **style: Any) -> GlobeRenderer: ...


# Returns a renderer once its library has loaded, None until then.
GlobeLoader = Callable[[], Optional[GlobeRenderer]]

ParticleBurst = Callable[[BurstConfig], None]


@dataclass
class RecordingGlobe:
    """GlobeRenderer that remembers every setter call, in order."""

    calls: list[tuple[str, tuple[Any, ...], dict[str, Any]]] = field(default_factory=list)

    def _record(self, name: str, *args: Any, **kwargs: Any) -> RecordingGlobe:
        self.calls.append((name, args, kwargs))
        return self

    def called(self, name: str) -> list[tuple[tuple[Any, ...], dict[str, Any]]]:
        return [(a, k) for n, a, k in self.calls if n == name]

    def globe_image_url(self, url: str) -> RecordingGlobe:
        return self._record("globe_image_url", url)

    def background_image_url(self, url: str) -> RecordingGlobe:
        return self._record("background_image_url", url)

    def width(self, px: int) -> RecordingGlobe:
        return self._record("width", px)

    def height(self, px: int) -> RecordingGlobe:
        return self._record("height", px)

    def background_color(self, color: str) -> RecordingGlobe:
        return self._record("background_color", color)

    def atmosphere_color(self, color: str) -> RecordingGlobe:
        return self._record("atmosphere_color", color)

    def atmosphere_altitude(self, altitude: float) -> RecordingGlobe:
        return self._record("atmosphere_altitude", altitude)

    def show_graticules(self, show: bool) -> RecordingGlobe:
        return self._record("show_graticules", show)

    def point_of_view(self, pov: PointOfView, transition_ms: float) -> RecordingGlobe:
        return self._record("point_of_view", pov, transition_ms)

    def controls(self, **options: Any) -> RecordingGlobe:
        return self._record("controls", **options)

    def rings_data(self, markers: Sequence[Marker], **style: Any) -> RecordingGlobe:
        return self._record("rings_data", tuple(markers), **style)

    def points_data(self, markers: Sequence[Marker], **style: Any) -> RecordingGlobe:
        return self._record("points_data", tuple(markers), **style)

    def labels_data(self, markers: Sequence[Marker], **style: Any) -> RecordingGlobe:
        return self._record("labels_data", tuple(markers), **style)

    def arcs_data(self, arcs: Sequence[Arc], **style: Any) -> RecordingGlobe:
        return self._record("arcs_data", tuple(arcs), **style)
