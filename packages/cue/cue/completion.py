"""Completion - a single-resolution signal with no error channel."""

from __future__ import annotations

from cue.types import Callback


class Completion:
    """Resolves at most once; continuations run in registration order.

    A continuation added after resolution runs immediately.
    """

    def __init__(self, label: str = "") -> None:
        self._label = label
        self._done = False
        self._waiters: list[Callback] = []

    @classmethod
    def resolved(cls, label: str = "") -> Completion:
        completion = cls(label)
        completion.resolve()
        return completion

    @property
    def done(self) -> bool:
        return self._done

    @property
    def label(self) -> str:
        return self._label

    def resolve(self) -> bool:
        """Resolve and run waiters. Returns False if already resolved."""
        if self._done:
            return False
        self._done = True
        waiters, self._waiters = self._waiters, []
        for waiter in waiters:
            waiter()
        return True

    def then(self, callback: Callback) -> None:
        if self._done:
            callback()
        else:
            self._waiters.append(callback)

    def __repr__(self) -> str:
        state = "done" if self._done else "pending"
        return f"Completion({self._label!r}, {state})"
