"""Tests for the millisecond clock."""

import pytest
from cue.clock import Clock


def test_clock_starts_at_zero():
    """Clock defaults to t=0."""
    clock = Clock()
    assert clock.now == 0.0


def test_clock_custom_start():
    """Clock can start at any non-negative time."""
    clock = Clock(start=250)
    assert clock.now == 250.0


def test_negative_start_rejected():
    """A clock cannot start before zero."""
    with pytest.raises(ValueError):
        Clock(start=-1)


def test_advance_returns_new_time():
    """advance() moves forward and returns the new reading."""
    clock = Clock()
    assert clock.advance(16) == 16.0
    assert clock.advance(4) == 20.0
    assert clock.now == 20.0


def test_set_cannot_move_backwards():
    """set() refuses to rewind."""
    clock = Clock(start=100)
    with pytest.raises(ValueError, match="backwards"):
        clock.set(99)


def test_set_same_time_is_allowed():
    """Setting the current time is a no-op, not an error."""
    clock = Clock(start=100)
    clock.set(100)
    assert clock.now == 100.0


def test_reset_rewinds():
    """reset() is the only way back."""
    clock = Clock()
    clock.advance(500)
    clock.reset()
    assert clock.now == 0.0
    clock.reset(42)
    assert clock.now == 42.0
