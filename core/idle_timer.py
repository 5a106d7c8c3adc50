"""
IdleTimer — tracks how long the hand has been gone and whether the idle
action already fired for the current absence episode.
"""
from __future__ import annotations
import time
from typing import Callable, Optional

from utils.constants import IDLE_TIMEOUT_MS

Clock = Callable[[], float]


def monotonic_ms() -> float:
    return time.monotonic() * 1000.0


class IdleTimer:
    """
    Usage
    -----
    idle = IdleTimer(timeout_ms=2500)
    if idle.due():
        ...  # run the idle action
        idle.mark_triggered()

    Parameters
    ----------
    timeout_ms : float
        Absence required before the idle action is due.
    clock : callable
        Returns the current time in milliseconds (injectable for tests).
    """

    def __init__(self, timeout_ms: float = IDLE_TIMEOUT_MS, clock: Optional[Clock] = None) -> None:
        self._timeout = timeout_ms
        self._clock = clock or monotonic_ms
        self._last_seen = self._clock()
        self._hand_present = False
        self._triggered = False

    def hand_seen(self) -> None:
        """A hand is in view: restart the episode."""
        self._last_seen = self._clock()
        self._hand_present = True
        self._triggered = False

    def hand_lost(self) -> None:
        self._hand_present = False

    def elapsed(self) -> float:
        """Milliseconds since a hand was last seen (or since construction)."""
        return self._clock() - self._last_seen

    def due(self) -> bool:
        return (
            not self._hand_present
            and not self._triggered
            and self.elapsed() >= self._timeout
        )

    def mark_triggered(self) -> None:
        self._triggered = True

    @property
    def triggered(self) -> bool:
        return self._triggered

    @property
    def hand_present(self) -> bool:
        return self._hand_present

    @property
    def timeout_ms(self) -> float:
        return self._timeout
