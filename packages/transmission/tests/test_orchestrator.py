"""End-to-end tests for the phase orchestrator on virtual time."""
import random
from datetime import datetime, timedelta, timezone

import pytest

from transmission import surface as ids
from transmission.collaborators import BurstConfig, RecordingGlobe
from transmission.config import COUNTDOWN_PREFIX, RETRY_MESSAGES, Timings
from transmission.orchestrator import Orchestrator
from transmission.phases import ORDER, Phase

TARGET = datetime(2026, 2, 14, 5, 0, tzinfo=timezone.utc)
PARAGRAPHS = ("First.", "Second one.")


class FakeStarfield:
    """Starfield that counts the frames it draws."""

    def __init__(self, engine):
        self._engine = engine
        self.frames = 0
        self.handles = []

    def start(self):
        handle = self._engine.scheduler.on_frame(self._draw, label="starfield")
        self.handles.append(handle)
        return handle

    def _draw(self, now):
        self.frames += 1


def build(engine, surface, timings, loader=None, bursts=None):
    """Start an orchestrator on ``engine`` and return it with its starfield."""
    starfield = FakeStarfield(engine)
    globe = RecordingGlobe()
    orch = Orchestrator(
        engine.scheduler,
        surface,
        globe_loader=loader if loader is not None else (lambda: globe),
        starfield=starfield,
        burst=bursts.append if bursts is not None else None,
        timings=timings,
        paragraphs=PARAGRAPHS,
        countdown_target=TARGET,
        now=lambda: TARGET - timedelta(days=2) + timedelta(milliseconds=engine.clock.now),
        rng=random.Random(0),
    )
    orch.start()
    return orch, starfield


def letter_at(timings, begin_at):
    """Clock time at which the letter phase activates for an available globe."""
    return begin_at + timings.globe_settle + timings.globe_done_at + timings.letter_delay


class TestLanding:
    """The landing phase before begin."""

    def test_start_sets_up_landing(self, engine, surface, timings):
        """start() locks scrolling, shows landing and wires the controls."""
        orch, starfield = build(engine, surface, timings)
        assert surface.scroll_locked
        assert surface.is_visible(ids.LANDING)
        assert len(starfield.handles) == 1
        assert set(surface.handlers) == {ids.BEGIN, ids.ACCEPT, ids.RETRY}
        assert orch.phases.active is Phase.LANDING

    def test_nothing_happens_without_begin(self, engine, surface, timings):
        """The presentation waits on landing indefinitely."""
        orch, starfield = build(engine, surface, timings)
        engine.advance(60_000)
        assert orch.phases.history == [Phase.LANDING]
        assert starfield.frames > 0

    def test_start_twice_rejected(self, engine, surface, timings):
        """start() runs once."""
        orch, _ = build(engine, surface, timings)
        with pytest.raises(RuntimeError):
            orch.start()


class TestBegin:
    """Leaving the landing phase."""

    def test_begin_disables_control_and_stops_starfield(self, engine, surface, timings):
        """Begin disables its control and stops the starfield."""
        orch, starfield = build(engine, surface, timings)
        engine.advance(500)
        assert surface.click(ids.BEGIN)
        assert not surface.interactable(ids.BEGIN)
        assert not starfield.handles[0].active
        frames = starfield.frames
        engine.advance(1000)
        assert starfield.frames == frames
        assert not surface.is_visible(ids.LANDING)

    def test_begin_only_once(self, engine, surface, timings):
        """Only the first begin does anything."""
        orch, _ = build(engine, surface, timings)
        assert orch.begin() is True
        assert orch.begin() is False
        assert not surface.click(ids.BEGIN)
        assert len(surface.ops("deactivate", ids.LANDING)) == 1

    def test_globe_activates_after_landing_fade(self, engine, surface, timings):
        """The globe container shows after the landing fade."""
        orch, _ = build(engine, surface, timings)
        orch.begin()
        engine.advance(timings.landing_fade - 1)
        assert orch.phases.active is Phase.LANDING
        assert not surface.is_visible(ids.GLOBE_PHASE)
        engine.advance(1)
        assert orch.phases.active is Phase.GLOBE
        assert surface.is_visible(ids.GLOBE_PHASE)


class TestFullSequence:
    """Landing through to the letter."""

    def test_phases_in_fixed_order(self, engine, surface, timings):
        """Phases run in order and the letter shows on time."""
        orch, _ = build(engine, surface, timings)
        orch.begin()
        assert engine.run_until(orch.letter_shown, limit=60_000)
        assert orch.phases.history == list(ORDER)
        assert engine.clock.now == pytest.approx(letter_at(timings, 0), abs=engine.frame_ms)
        activations = [e[1] for e in surface.ops("activate")]
        assert activations == [ids.LANDING, ids.GLOBE_PHASE, ids.LETTER_PHASE]

    def test_transition_visual_order(self, engine, surface, timings):
        """Globe fades out, then the theme swaps, then the letter comes in."""
        orch, _ = build(engine, surface, timings)
        orch.begin()
        engine.run_until(orch.letter_shown, limit=60_000)
        order = [
            (op, el) for op, el, _ in surface.events
            if (op, el) in {("deactivate", ids.GLOBE_PHASE), ("set_theme", "body"),
                            ("activate", ids.LETTER_PHASE)}
        ]
        assert order == [
            ("deactivate", ids.GLOBE_PHASE),
            ("set_theme", "body"),
            ("activate", ids.LETTER_PHASE),
        ]
        assert surface.theme == ids.ROMANTIC_THEME

    def test_theme_and_letter_delays(self, engine, surface, timings):
        """Theme and letter follow the globe by their delays."""
        orch, _ = build(engine, surface, timings)
        orch.begin()
        globe_done = timings.globe_settle + timings.globe_done_at
        engine.advance(globe_done)
        assert orch.phases.active is Phase.TRANSITION
        engine.advance(timings.theme_delay - 1)
        assert surface.theme is None
        engine.advance(1)
        assert surface.theme == ids.ROMANTIC_THEME
        engine.advance(timings.letter_delay - timings.theme_delay - 1)
        assert orch.phases.active is Phase.TRANSITION
        engine.advance(1)
        assert orch.phases.active is Phase.LETTER

    def test_letter_phase_kicks_off_components(self, engine, surface, timings):
        """The letter phase starts particles, countdown and typing."""
        orch, _ = build(engine, surface, timings)
        orch.begin()
        engine.run_until(orch.letter_shown, limit=60_000)
        assert not surface.scroll_locked
        assert len(surface.particles) == 25
        assert surface.text(ids.COUNTDOWN).startswith(COUNTDOWN_PREFIX + "1d 23h 59m")
        assert orch.countdown.running
        assert engine.run_until(orch.letter_typed, limit=60_000)
        assert surface.text("letter-p0") == PARAGRAPHS[0]
        assert surface.text("letter-p1") == PARAGRAPHS[1]


class TestUnavailableGlobe:
    """The globe renderer never loads."""

    def test_skips_ahead_to_letter(self, engine, surface, timings):
        """Polling gives up and the letter still arrives."""
        orch, _ = build(engine, surface, timings, loader=lambda: None)
        orch.begin()
        assert engine.run_until(orch.letter_shown, limit=30_000)
        assert orch.phases.history == list(ORDER)
        expected = timings.globe_poll_interval * timings.globe_poll_attempts + timings.letter_delay
        assert engine.clock.now == pytest.approx(expected, abs=engine.frame_ms)
        assert not orch.globe.state.available

    def test_globe_gives_up_before_container_shows(self, engine, surface):
        """Even an instant give-up keeps Landing -> Globe -> Transition -> Letter."""
        timings = Timings(globe_poll_attempts=0)
        orch, _ = build(engine, surface, timings, loader=lambda: None)
        orch.begin()
        assert orch.phases.active is Phase.LANDING
        engine.advance(timings.landing_fade)
        assert orch.phases.active is Phase.TRANSITION
        assert engine.run_until(orch.letter_shown, limit=10_000)
        assert orch.phases.history == list(ORDER)


class TestTheAsk:
    """Accept and retry from the letter."""

    def test_accept_end_to_end(self, engine, surface, timings):
        """Accepting disables both controls and shows the accepted state."""
        bursts = []
        orch, _ = build(engine, surface, timings, bursts=bursts)
        assert surface.click(ids.BEGIN)
        engine.run_until(orch.letter_shown, limit=60_000)

        assert surface.click(ids.ACCEPT)
        assert not surface.interactable(ids.ACCEPT)
        assert not surface.interactable(ids.RETRY)
        engine.advance(timings.accept_fade)
        assert surface.is_visible(ids.ACCEPTED)
        assert len(bursts) == 4
        assert all(isinstance(b, BurstConfig) for b in bursts)

    def test_retry_through_clicks(self, engine, surface, timings):
        """Three retries show each message, the fourth click is ignored."""
        orch, _ = build(engine, surface, timings)
        orch.begin()
        engine.run_until(orch.letter_shown, limit=60_000)

        shown = []
        for _ in range(4):
            if surface.click(ids.RETRY):
                shown.append(surface.text(ids.RETRY_ERROR))
        assert shown == list(RETRY_MESSAGES)
        assert orch.retry.state.attempt_count == 3
        assert not surface.ops("hide", ids.RETRY)
        engine.advance(timings.retry_final_clear)
        assert surface.ops("hide", ids.RETRY)

    def test_scaled_timings_run_faster(self, engine, surface):
        """Scaled timings shorten the whole run."""
        timings = Timings().scaled(0.1)
        orch, _ = build(engine, surface, timings)
        orch.begin()
        assert engine.run_until(orch.letter_shown, limit=2_000)
