"""Bounded polling for a dependency that may never show up."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Generic, TypeVar, Union

from cue.scheduler import Scheduler

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Ready(Generic[T]):
    handle: T
    attempts: int


@dataclass(frozen=True, slots=True)
class Unavailable:
    attempts: int


PollResult = Union[Ready[T], Unavailable]


def poll(
    scheduler: Scheduler,
    probe: Callable[[], T | None],
    interval: float,
    max_retries: int,
    on_result: Callable[[PollResult[T]], None],
) -> None:
    """Probe now, then every ``interval`` ms up to ``max_retries`` more times.

    ``on_result`` is called exactly once: with ``Ready`` as soon as the
    probe returns something other than None, or with ``Unavailable``
    straight after the last failed probe.
    """
    if interval <= 0:
        raise ValueError(f"interval must be positive, got {interval}")
    if max_retries < 0:
        raise ValueError(f"max_retries must be >= 0, got {max_retries}")

    def attempt(n: int) -> None:
        handle = probe()
        if handle is not None:
            logger.debug("poll ready after %d attempt(s)", n)
            on_result(Ready(handle, n))
        elif n <= max_retries:
            scheduler.after(interval, lambda: attempt(n + 1))
        else:
            logger.debug("poll gave up after %d attempt(s)", n)
            on_result(Unavailable(n))

    attempt(1)
