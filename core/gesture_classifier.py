"""
GestureClassifier — rule-based pose classification from one frame of
hand landmarks.

The only state carried between frames is the index-tip X of the previous
Pointing frame, used to derive the pointing delta.
"""
from __future__ import annotations
import logging
from typing import List, Optional, Sequence, Tuple

from domain.enums import GestureLabel
from domain.models import HAND_LANDMARKS, GestureReading, HandSnapshot, Landmark2D
from utils.constants import (
    EXTENSION_TOLERANCE,
    ZOOM_GAIN,
    ZOOM_HAND_OFFSET,
    ZOOM_MAX,
    ZOOM_MIN,
)
from utils.geometry import clamp, clamp_point, dist

logger = logging.getLogger(__name__)

# ---- landmark indices ----------------------------------------------------
WRIST = 0
MIDDLE_MCP = 9
INDEX_TIP = 8

# (tip, pip) per finger; the thumb is left out, its planar geometry is
# too unreliable for a distance test.
FINGERS = {
    "INDEX":  (8, 6),
    "MIDDLE": (12, 10),
    "RING":   (16, 14),
    "PINKY":  (20, 18),
}

Fingers = Tuple[bool, bool, bool, bool]

# Checked in this order, first match wins.
POSES: List[Tuple[Fingers, GestureLabel]] = [
    ((True, True, False, False), GestureLabel.V_SIGN),
    ((True, False, False, False), GestureLabel.POINTING),
    ((True, True, True, True), GestureLabel.FOUR_FINGERS),
]

_NO_FINGERS: Fingers = (False, False, False, False)


# ---- pure helpers ---------------------------------------------------------
def sanitise(landmarks: Sequence[Sequence[float]]) -> Optional[List[Landmark2D]]:
    """
    Clamp every landmark into [0, 1]. Returns None when the list is short,
    not a sequence at all, or holds a point that is malformed or NaN / infinite.
    """
    try:
        if len(landmarks) < HAND_LANDMARKS:
            return None
        landmarks = list(landmarks[:HAND_LANDMARKS])
    except TypeError:
        return None
    points: List[Landmark2D] = []
    for p in landmarks:
        clamped = clamp_point(p)
        if clamped is None:
            return None
        points.append(clamped)
    return points


def is_extended(
    landmarks: Sequence[Landmark2D],
    tip: int,
    pip: int,
    tolerance: float = EXTENSION_TOLERANCE,
) -> bool:
    """Tip further from the wrist than the PIP joint, with a noise margin."""
    wrist = landmarks[WRIST]
    return dist(wrist, landmarks[tip]) > dist(wrist, landmarks[pip]) * tolerance


def finger_states(
    landmarks: Sequence[Landmark2D],
    tolerance: float = EXTENSION_TOLERANCE,
) -> Fingers:
    """Extension of [index, middle, ring, pinky]."""
    index, middle, ring, pinky = (
        is_extended(landmarks, tip, pip, tolerance) for tip, pip in FINGERS.values()
    )
    return (index, middle, ring, pinky)


def label_for(fingers: Fingers) -> GestureLabel:
    for pose, label in POSES:
        if fingers == pose:
            return label
    return GestureLabel.NONE


def zoom_for_hand_size(
    hand_size: float,
    offset: float = ZOOM_HAND_OFFSET,
    gain: float = ZOOM_GAIN,
    lo: float = ZOOM_MIN,
    hi: float = ZOOM_MAX,
) -> float:
    """Closer hand (bigger on screen) → larger expansion."""
    return clamp((hand_size - offset) * gain, lo, hi)


# ---- classifier -----------------------------------------------------------
class GestureClassifier:
    """
    Parameters
    ----------
    tolerance : float
        Tip/PIP distance ratio above which a finger counts as extended.
    """

    def __init__(self, tolerance: float = EXTENSION_TOLERANCE) -> None:
        self._tolerance = tolerance
        self._prev_index_x: Optional[float] = None

    def classify(self, snapshot: Optional[HandSnapshot]) -> GestureReading:
        """
        Parameters
        ----------
        snapshot : HandSnapshot | None
            None means no hand was detected this frame.

        Returns
        -------
        GestureReading
            Never raises; unusable landmarks read as GestureLabel.NONE.
        """
        if snapshot is None:
            self.reset()
            return GestureReading(GestureLabel.HAND_ABSENT)

        landmarks = sanitise(snapshot.landmarks)
        if landmarks is None:
            logger.debug("Discarding malformed landmarks")
            self.reset()
            return GestureReading(GestureLabel.NONE)

        fingers = finger_states(landmarks, self._tolerance)
        label = label_for(fingers)

        if label is GestureLabel.POINTING:
            x = landmarks[INDEX_TIP][0]
            delta = None if self._prev_index_x is None else x - self._prev_index_x
            self._prev_index_x = x
            return GestureReading(label, pointing_delta=delta, fingers=fingers)

        self.reset()
        if label is GestureLabel.FOUR_FINGERS:
            hand_size = dist(landmarks[WRIST], landmarks[MIDDLE_MCP])
            return GestureReading(label, zoom=zoom_for_hand_size(hand_size), fingers=fingers)

        return GestureReading(label, fingers=fingers)

    def reset(self) -> None:
        """Forget pointing history so the next Pointing episode starts fresh."""
        self._prev_index_x = None
