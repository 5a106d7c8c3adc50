"""
LandmarkTask — one landmark acquisition attempt per call, never two at once.

The scheduler calls run_once() on a fixed interval. An attempt that is
still running when the next call arrives makes that call a no-op. Failed
attempts are logged and counted; they leave the control state untouched.
"""
from __future__ import annotations
import logging
from typing import Any, Callable, Optional

import cv2

from domain.models import HandSnapshot

logger = logging.getLogger(__name__)

Acquire = Callable[[], Optional[HandSnapshot]]
Deliver = Callable[[Optional[HandSnapshot]], Any]

# AcquisitionError is a RuntimeError; cv2.error comes straight from OpenCV.
ACQUISITION_ERRORS = (RuntimeError, ValueError, cv2.error)


class LandmarkTask:
    """
    Parameters
    ----------
    acquire : callable
        Captures one frame and returns the first hand's snapshot, or None
        when no hand is visible. Raises on capture failure.
    deliver : callable
        Receives each successful result synchronously.
    """

    def __init__(self, acquire: Acquire, deliver: Deliver) -> None:
        self._acquire = acquire
        self._deliver = deliver
        self._in_flight = False
        self.completed = 0
        self.failures = 0
        self.skipped = 0

    def run_once(self) -> bool:
        """Returns True when a result was delivered."""
        if self._in_flight:
            self.skipped += 1
            logger.debug("Landmark attempt still in flight, skipping")
            return False

        self._in_flight = True
        try:
            try:
                snapshot = self._acquire()
            except ACQUISITION_ERRORS as exc:
                self.failures += 1
                logger.warning("Landmark acquisition failed: %s", exc)
                return False
            self._deliver(snapshot)
            self.completed += 1
            return True
        finally:
            self._in_flight = False

    @property
    def in_flight(self) -> bool:
        return self._in_flight
