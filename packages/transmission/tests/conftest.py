"""Shared fixtures: a virtual-time engine and an in-memory host surface."""
from __future__ import annotations

import pytest
from cue import Engine

from transmission import RecordingSurface, Timings


@pytest.fixture
def engine():
    # 25ms frames line up with the typewriter interval.
    return Engine(fps=40)


@pytest.fixture
def surface():
    return RecordingSurface(viewport=(1280, 800))


@pytest.fixture
def timings():
    return Timings()
