"""cue - Millisecond scheduling substrate for timed presentations."""

from cue.clock import Clock
from cue.completion import Completion
from cue.engine import Engine
from cue.polling import PollResult, Ready, Unavailable, poll
from cue.scheduler import Scheduler, Teardown
from cue.timeline import Cue, Timeline
from cue.types import ScheduledEvent

__all__ = [
    "Engine",
    "Clock",
    "Scheduler",
    "Teardown",
    "Completion",
    "Timeline",
    "Cue",
    "ScheduledEvent",
    "poll",
    "PollResult",
    "Ready",
    "Unavailable",
]
