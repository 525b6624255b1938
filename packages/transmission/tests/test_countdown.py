"""Tests for countdown formatting and the ticking driver."""
from datetime import datetime, timedelta, timezone

import pytest

from transmission import surface as ids
from transmission.config import COUNTDOWN_DONE, COUNTDOWN_PREFIX
from transmission.countdown import (
    CountdownDriver,
    format_remaining,
    remaining_ms,
    render_countdown,
)

TARGET = datetime(2026, 2, 14, 5, 0, tzinfo=timezone.utc)


class TestFormatting:
    """Countdown text formatting."""

    def test_one_of_each(self):
        """Every unit is rendered and zero-padded."""
        assert format_remaining(90_061_000) == "1d 01h 01m 01s"

    def test_days_omitted_when_zero(self):
        """Days are dropped under 24 hours."""
        assert format_remaining(3_723_000) == "01h 02m 03s"

    def test_floors_partial_seconds(self):
        """Partial seconds round down."""
        assert format_remaining(59_999) == "00h 00m 59s"

    def test_double_digit_days(self):
        """Days are not padded."""
        assert format_remaining(12 * 86_400_000 + 5_000) == "12d 00h 00m 05s"

    def test_render_prefix(self):
        """Positive remaining time gets the countdown prefix."""
        assert render_countdown(90_061_000) == COUNTDOWN_PREFIX + "1d 01h 01m 01s"

    @pytest.mark.parametrize("ms", [0, -1, -86_400_000])
    def test_render_done(self, ms):
        """Zero or negative remaining time shows the final message."""
        assert render_countdown(ms) == COUNTDOWN_DONE

    def test_remaining_ms(self):
        """Remaining time is whole milliseconds to the target."""
        now = TARGET - timedelta(milliseconds=90_061_000)
        assert remaining_ms(TARGET, now) == 90_061_000


class TestCountdownDriver:
    """Periodic countdown rendering."""

    def make(self, engine, surface, timings, start):
        """Driver whose wall clock follows the engine clock from ``start``."""
        def now():
            return start + timedelta(milliseconds=engine.clock.now)

        return CountdownDriver(engine.scheduler, surface, now, timings)

    def test_renders_immediately(self, engine, surface, timings):
        """Text is set without waiting for the first tick."""
        driver = self.make(engine, surface, timings, TARGET - timedelta(milliseconds=90_061_000))
        driver.start(TARGET)
        assert surface.text(ids.COUNTDOWN).endswith("1d 01h 01m 01s")

    def test_rerenders_every_second(self, engine, surface, timings):
        """One render per tick."""
        driver = self.make(engine, surface, timings, TARGET - timedelta(milliseconds=90_061_000))
        driver.start(TARGET)
        engine.advance(1000)
        assert surface.text(ids.COUNTDOWN).endswith("1d 01h 01m 00s")
        engine.advance(2000)
        assert surface.text(ids.COUNTDOWN).endswith("1d 01h 00m 58s")
        assert len(surface.ops("set_text", ids.COUNTDOWN)) == 4

    def test_reaches_done_message(self, engine, surface, timings):
        """The final message appears once the target passes."""
        driver = self.make(engine, surface, timings, TARGET - timedelta(seconds=2))
        driver.start(TARGET)
        engine.advance(2000)
        assert surface.text(ids.COUNTDOWN) == COUNTDOWN_DONE
        engine.advance(3000)
        assert surface.text(ids.COUNTDOWN) == COUNTDOWN_DONE
        assert driver.running

    def test_past_target(self, engine, surface, timings):
        """A target already in the past shows the final message."""
        driver = self.make(engine, surface, timings, TARGET + timedelta(days=3))
        driver.start(TARGET)
        assert surface.text(ids.COUNTDOWN) == COUNTDOWN_DONE

    def test_teardown_stops_ticking(self, engine, surface, timings):
        """The teardown stops further renders."""
        driver = self.make(engine, surface, timings, TARGET - timedelta(hours=1))
        stop = driver.start(TARGET)
        stop()
        engine.advance(5000)
        assert len(surface.ops("set_text", ids.COUNTDOWN)) == 1
        assert not driver.running

    def test_naive_target_rejected(self, engine, surface, timings):
        """Targets need a timezone."""
        driver = self.make(engine, surface, timings, TARGET)
        with pytest.raises(ValueError):
            driver.start(datetime(2026, 2, 14))

    def test_start_twice_rejected(self, engine, surface, timings):
        """A driver runs one countdown."""
        driver = self.make(engine, surface, timings, TARGET)
        driver.start(TARGET)
        with pytest.raises(RuntimeError):
            driver.start(TARGET)
