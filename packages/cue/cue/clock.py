"""Millisecond clock shared by the scheduler and engine."""


class Clock:
    def __init__(self, start: float = 0.0) -> None:
        if start < 0:
            raise ValueError("start must be >= 0")
        self._now = float(start)

    @property
    def now(self) -> float:
        return self._now

    def set(self, t: float) -> None:
        if t < self._now:
            raise ValueError(f"Clock cannot move backwards ({t} < {self._now})")
        self._now = float(t)

    def advance(self, ms: float) -> float:
        self.set(self._now + ms)
        return self._now

    def reset(self, t: float = 0.0) -> None:
        self._now = float(t)
