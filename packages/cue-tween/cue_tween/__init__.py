"""cue-tween - Smooth value interpolation over milliseconds for cue."""
from __future__ import annotations

from cue_tween.easing import EASINGS
from cue_tween.tween import Tween, animate

__all__ = ["Tween", "EASINGS", "animate"]
