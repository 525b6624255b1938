"""Tests for the typewriter engine."""
import pytest

from transmission import surface as ids
from transmission.typewriter import (
    TextBlock,
    TypewriterEngine,
    TypewriterQueue,
    blocks_from_paragraphs,
)


def make_blocks(*texts):
    """Text blocks targeting ``p0``, ``p1``, ..."""
    return [TextBlock(full_text=text, target=f"p{i}") for i, text in enumerate(texts)]


class TestTextBlock:
    """Single text block reveal."""

    def test_reveal_next(self):
        """Characters come out one at a time, in order."""
        block = TextBlock("hi", "p0")
        assert block.reveal_next() == "h"
        assert block.in_progress
        assert block.reveal_next() == "i"
        assert block.complete
        assert not block.in_progress

    def test_reveal_past_end(self):
        """Revealing past the end raises."""
        block = TextBlock("", "p0")
        assert block.complete
        with pytest.raises(IndexError):
            block.reveal_next()

    def test_blocks_from_paragraphs(self):
        """Paragraphs become blocks with numbered targets."""
        blocks = blocks_from_paragraphs(["a", "b"])
        assert [b.target for b in blocks] == ["letter-p0", "letter-p1"]


class TestTypewriterQueue:
    """Queue ordering."""

    def test_consistency_detects_out_of_order_reveal(self):
        """Touching a later block breaks consistency."""
        blocks = make_blocks("abc", "def")
        queue = TypewriterQueue(blocks)
        blocks[1].reveal_next()
        assert not queue.consistent()

    def test_advance_past_end(self):
        """Advancing an exhausted queue raises."""
        queue = TypewriterQueue(make_blocks("a"))
        queue.advance()
        assert queue.exhausted
        with pytest.raises(IndexError):
            queue.advance()


class TestTypewriterEngine:
    """Scheduled character reveal."""

    def test_reveals_all_text_in_order(self, engine, surface, timings):
        """Concatenated revealed text equals the concatenated sources."""
        texts = ("Hello there.", "", "Second line!", "x")
        blocks = make_blocks(*texts)
        tw = TypewriterEngine(engine.scheduler, surface, timings)
        done = tw.reveal(blocks)
        assert engine.run_until(done, limit=60_000)
        assert tw.queue.text() == "".join(texts)
        for i, text in enumerate(texts):
            assert surface.text(f"p{i}") == text
            assert surface.is_visible(f"p{i}")

    def test_single_block_in_progress_at_every_frame(self, engine, surface, timings):
        """At most one block is partly typed at any frame."""
        tw = TypewriterEngine(engine.scheduler, surface, timings)
        done = tw.reveal(make_blocks("abcdef", "ghijkl", "mnop"))
        while not done.done:
            engine.step()
            assert tw.queue.consistent()
            assert sum(1 for b in tw.queue.blocks if b.in_progress) <= 1

    def test_waits_initial_delay(self, engine, surface, timings):
        """Nothing is typed before the start delay."""
        tw = TypewriterEngine(engine.scheduler, surface, timings)
        tw.reveal(make_blocks("abc"))
        engine.advance(timings.typewriter_start - 1)
        assert surface.text("p0") == ""
        assert not surface.is_visible("p0")
        engine.advance(1)
        assert surface.text("p0") == "a"
        assert surface.is_visible("p0")

    def test_char_interval(self, engine, surface, timings):
        """One character per character interval."""
        tw = TypewriterEngine(engine.scheduler, surface, timings)
        tw.reveal(make_blocks("abcd"))
        engine.advance(timings.typewriter_start + 2 * timings.typewriter_char)
        assert surface.text("p0") == "abc"

    def test_later_blocks_hidden_until_reached(self, engine, surface, timings):
        """Blocks stay hidden until typing reaches them."""
        tw = TypewriterEngine(engine.scheduler, surface, timings)
        tw.reveal(make_blocks("ab", "cd"))
        engine.advance(timings.typewriter_start + 50)
        assert surface.is_visible("p0")
        assert not surface.is_visible("p1")

    def test_pause_between_blocks(self, engine, surface, timings):
        """Block n+1 starts one char interval plus the block pause after block n's last char."""
        tw = TypewriterEngine(engine.scheduler, surface, timings)
        tw.reveal(make_blocks("ab", "cd"))
        last_char = timings.typewriter_start + timings.typewriter_char
        next_start = last_char + timings.typewriter_char + timings.typewriter_block_pause
        engine.advance(next_start - 1)
        assert surface.text("p1") == ""
        engine.advance(1)
        assert surface.text("p1") == "c"

    def test_cursor_follows_block(self, engine, surface, timings):
        """The cursor moves to each block as it starts."""
        tw = TypewriterEngine(engine.scheduler, surface, timings)
        tw.reveal(make_blocks("ab", "cd"))
        engine.advance(timings.typewriter_start)
        assert surface.cursor_host == "p0"
        engine.advance(1000)
        assert surface.cursor_host == "p1"
        attaches = [e[1] for e in surface.ops("attach_cursor")]
        assert attaches == ["p0", "p1"]

    def test_cursor_retired_after_hold(self, engine, surface, timings):
        """The cursor fades after the hold and the completion resolves."""
        tw = TypewriterEngine(engine.scheduler, surface, timings)
        done = tw.reveal(make_blocks("a"))
        finished_typing = timings.typewriter_start + timings.typewriter_char
        engine.advance(finished_typing + timings.cursor_hold - 1)
        assert not done.done
        assert surface.ops("set_style", ids.CURSOR) == []
        engine.advance(1)
        assert done.done
        assert surface.elements[ids.CURSOR].style["opacity"] == 0.0

    def test_empty_queue_completes_immediately(self, engine, surface, timings):
        """No blocks means done straight away."""
        tw = TypewriterEngine(engine.scheduler, surface, timings)
        done = tw.reveal([])
        assert done.done
        assert surface.cursor_host is None

    def test_cannot_reveal_twice(self, engine, surface, timings):
        """An engine types one letter."""
        tw = TypewriterEngine(engine.scheduler, surface, timings)
        tw.reveal(make_blocks("a"))
        with pytest.raises(RuntimeError):
            tw.reveal(make_blocks("b"))

    def test_appended_text_never_overwritten(self, engine, surface, timings):
        """Blocks only ever have text appended while typing."""
        tw = TypewriterEngine(engine.scheduler, surface, timings)
        done = tw.reveal(make_blocks("abc", "de"))
        engine.run_until(done, limit=60_000)
        appended = "".join(e[2] for e in surface.ops("append_text"))
        assert appended == "abcde"
        # The only set_text calls are the initial clears.
        assert [e[2] for e in surface.ops("set_text")] == ["", ""]
