"""
HandTracker — encapsulates all MediaPipe logic.
The rest of the application never imports mediapipe directly.
"""
from __future__ import annotations
import time
from typing import Any, Optional

import cv2
import mediapipe as mp

from core.camera import AcquisitionError
from domain.models import HandSnapshot


class HandTracker:
    """
    Runs the MediaPipe hand model on a BGR frame and returns the first
    detected hand as a HandSnapshot of normalised [0, 1] landmarks.

    Parameters
    ----------
    max_num_hands : int
    model_complexity : int
    min_detection_confidence : float
    min_tracking_confidence : float
    draw : bool
        Draw the detected landmarks onto the frame (in place).
    """

    def __init__(
        self,
        max_num_hands: int = 1,
        model_complexity: int = 1,
        min_detection_confidence: float = 0.5,
        min_tracking_confidence: float = 0.5,
        draw: bool = True,
    ) -> None:
        self._mp_hands = mp.solutions.hands
        self._mp_draw  = mp.solutions.drawing_utils
        self._draw     = draw
        self._hands    = self._mp_hands.Hands(
            static_image_mode=False,
            max_num_hands=max_num_hands,
            model_complexity=model_complexity,
            min_detection_confidence=min_detection_confidence,
            min_tracking_confidence=min_tracking_confidence,
        )

    # ------------------------------------------------------------------
    def process(self, frame: Any) -> Optional[HandSnapshot]:
        """
        Parameters
        ----------
        frame : np.ndarray
            BGR frame from OpenCV.

        Returns
        -------
        HandSnapshot | None
            The first detected hand, or None when no hand is visible.

        Raises
        ------
        AcquisitionError
            The frame could not be converted or the model rejected it.
        """
        try:
            rgb = cv2.cvtColor(frame, cv2.COLOR_BGR2RGB)
            results = self._hands.process(rgb)
        except (cv2.error, ValueError) as exc:
            raise AcquisitionError(f"Hand model failed on frame: {exc}") from exc

        if not results.multi_hand_landmarks:
            return None

        # Only the first hand drives the particles
        hand_landmarks = results.multi_hand_landmarks[0]
        if self._draw:
            self._mp_draw.draw_landmarks(
                frame, hand_landmarks, self._mp_hands.HAND_CONNECTIONS
            )
        return HandSnapshot(
            landmarks=[(lm.x, lm.y) for lm in hand_landmarks.landmark],
            timestamp=time.time(),
        )

    def release(self) -> None:
        self._hands.close()
