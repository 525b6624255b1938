"""transmission - Phase orchestration for the Long-Distance Protocol presentation."""
from __future__ import annotations

from transmission.accept import AcceptAction
from transmission.collaborators import (
    Arc,
    BurstConfig,
    GlobeLoader,
    GlobeRenderer,
    Marker,
    ParticleBurst,
    PointOfView,
    RecordingGlobe,
    Starfield,
)
from transmission.config import GlobeSettings, Timings
from transmission.countdown import CountdownDriver, format_remaining, render_countdown
from transmission.globe import ArcProgress, GlobeBridge, GlobeSyncState, latency_value
from transmission.orchestrator import Orchestrator
from transmission.phases import Phase, PhaseOrderError, PhaseTrack
from transmission.retry import RetryControl, RetryState
from transmission.surface import HostSurface, RecordingSurface
from transmission.typewriter import TextBlock, TypewriterEngine, TypewriterQueue

__all__ = [
    "Orchestrator",
    "Phase",
    "PhaseTrack",
    "PhaseOrderError",
    "GlobeBridge",
    "GlobeSyncState",
    "ArcProgress",
    "latency_value",
    "TypewriterEngine",
    "TypewriterQueue",
    "TextBlock",
    "RetryControl",
    "RetryState",
    "AcceptAction",
    "CountdownDriver",
    "format_remaining",
    "render_countdown",
    "Timings",
    "GlobeSettings",
    "HostSurface",
    "RecordingSurface",
    "RecordingGlobe",
    "Starfield",
    "GlobeRenderer",
    "GlobeLoader",
    "ParticleBurst",
    "BurstConfig",
    "Marker",
    "Arc",
    "PointOfView",
]
