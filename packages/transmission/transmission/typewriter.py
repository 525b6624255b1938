"""Typewriter engine: reveals text blocks one character at a time.

A single cursor travels with the block being typed. Blocks are strictly
sequential: a block starts only after the previous one is complete and
the inter-block pause has elapsed.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Sequence

from cue import Completion, Scheduler

from transmission import surface as ids
from transmission.config import Timings
from transmission.surface import HostSurface

logger = logging.getLogger(__name__)


@dataclass
class TextBlock:
    full_text: str
    target: str
    revealed_count: int = 0

    @property
    def revealed(self) -> str:
        return self.full_text[: self.revealed_count]

    @property
    def complete(self) -> bool:
        return self.revealed_count >= len(self.full_text)

    @property
    def in_progress(self) -> bool:
        return 0 < self.revealed_count < len(self.full_text)

    def reveal_next(self) -> str:
        """Reveal and return the next character."""
        if self.complete:
            raise IndexError(f"Block '{self.target}' is fully revealed")
        ch = self.full_text[self.revealed_count]
        self.revealed_count += 1
        return ch


def blocks_from_paragraphs(paragraphs: Sequence[str], prefix: str = "letter-p") -> list[TextBlock]:
    return [TextBlock(full_text=text, target=f"{prefix}{i}") for i, text in enumerate(paragraphs)]


class TypewriterQueue:
    """Ordered blocks with a cursor index. Only ever moves forward."""

    def __init__(self, blocks: Iterable[TextBlock]) -> None:
        self._blocks = list(blocks)
        self._index = 0

    @property
    def blocks(self) -> list[TextBlock]:
        return list(self._blocks)

    @property
    def index(self) -> int:
        return self._index

    @property
    def current(self) -> TextBlock | None:
        if self._index < len(self._blocks):
            return self._blocks[self._index]
        return None

    @property
    def exhausted(self) -> bool:
        return self._index >= len(self._blocks)

    def advance(self) -> None:
        if self.exhausted:
            raise IndexError("Typewriter queue is exhausted")
        self._index += 1

    def text(self) -> str:
        return "".join(b.revealed for b in self._blocks)

    def consistent(self) -> bool:
        """Blocks before the current one are complete, blocks after are untouched."""
        for i, block in enumerate(self._blocks):
            if i < self._index and not block.complete:
                return False
            if i > self._index and block.revealed_count != 0:
                return False
        return sum(1 for b in self._blocks if b.in_progress) <= 1


class TypewriterEngine:
    def __init__(
        self,
        scheduler: Scheduler,
        surface: HostSurface,
        timings: Timings | None = None,
    ) -> None:
        self._scheduler = scheduler
        self._surface = surface
        self._timings = timings or Timings()
        self._queue: TypewriterQueue | None = None

    @property
    def queue(self) -> TypewriterQueue | None:
        return self._queue

    def reveal(self, blocks: Iterable[TextBlock]) -> Completion:
        """Start revealing ``blocks`` after the initial delay.

        The returned Completion resolves when the cursor is retired.
        """
        if self._queue is not None:
            raise RuntimeError("Typewriter has already been started")
        queue = TypewriterQueue(blocks)
        self._queue = queue
        done = Completion("typewriter")

        for block in queue.blocks:
            self._surface.set_text(block.target, "")
            self._surface.hide(block.target)

        if queue.exhausted:
            done.resolve()
            return done

        self._scheduler.after(self._timings.typewriter_start, lambda: self._start_block(queue, done))
        return done

    def _start_block(self, queue: TypewriterQueue, done: Completion) -> None:
        block = queue.current
        assert block is not None
        logger.debug("typing block %d (%d chars)", queue.index, len(block.full_text))
        self._surface.show(block.target)
        self._surface.attach_cursor(block.target)
        self._type_char(queue, block, done)

    def _type_char(self, queue: TypewriterQueue, block: TextBlock, done: Completion) -> None:
        if not block.complete:
            self._surface.append_text(block.target, block.reveal_next())
            self._scheduler.after(
                self._timings.typewriter_char, lambda: self._type_char(queue, block, done)
            )
            return

        queue.advance()
        if queue.exhausted:
            self._scheduler.after(self._timings.cursor_hold, lambda: self._retire_cursor(done))
        else:
            self._scheduler.after(
                self._timings.typewriter_block_pause, lambda: self._start_block(queue, done)
            )

    def _retire_cursor(self, done: Completion) -> None:
        self._surface.set_style(
            ids.CURSOR,
            animation="none",
            opacity=0.0,
            transition=f"opacity {self._timings.cursor_fade:g}ms ease",
        )
        done.resolve()
