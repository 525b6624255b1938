"""Top-level presentation phases and their one-way ordering."""
from __future__ import annotations

import enum
import logging

logger = logging.getLogger(__name__)


class Phase(enum.Enum):
    LANDING = "landing"
    GLOBE = "globe"
    TRANSITION = "transition"
    LETTER = "letter"


ORDER: tuple[Phase, ...] = (Phase.LANDING, Phase.GLOBE, Phase.TRANSITION, Phase.LETTER)


class PhaseOrderError(RuntimeError):
    """Raised when a phase move would skip, repeat or rewind the sequence."""

    def __init__(self, current: Phase, requested: Phase) -> None:
        self.current = current
        self.requested = requested
        super().__init__(
            f"Cannot enter {requested.name} from {current.name}"
        )


class PhaseTrack:
    """Which phase is active, and every phase entered so far."""

    def __init__(self) -> None:
        self._history: list[Phase] = [ORDER[0]]

    @property
    def active(self) -> Phase:
        return self._history[-1]

    @property
    def history(self) -> list[Phase]:
        return list(self._history)

    @property
    def finished(self) -> bool:
        return self.active is ORDER[-1]

    def has_left(self, phase: Phase) -> bool:
        return phase in self._history and phase is not self.active

    def enter(self, phase: Phase) -> None:
        index = ORDER.index(self.active)
        if index + 1 >= len(ORDER) or ORDER[index + 1] is not phase:
            raise PhaseOrderError(self.active, phase)
        logger.debug("phase %s -> %s", self.active.name, phase.name)
        self._history.append(phase)
