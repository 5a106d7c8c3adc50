from __future__ import annotations
from typing import List, Sequence, Tuple

import numpy as np
import pytest

from domain.models import HandSnapshot

WRIST = (0.5, 0.9)
MIDDLE_MCP_Y = 0.75

# finger -> (tip, pip, x)
_FINGER_LAYOUT = {
    "index":  (8, 6, 0.44),
    "middle": (12, 10, 0.50),
    "ring":   (16, 14, 0.56),
    "pinky":  (20, 18, 0.62),
}


def hand_landmarks(
    fingers: Sequence[bool],
    index_x: float = 0.44,
    mcp_y: float = MIDDLE_MCP_Y,
) -> List[Tuple[float, float]]:
    """
    21 landmarks with [index, middle, ring, pinky] extended as requested.
    PIPs sit 0.3 above the wrist; an extended tip sits 0.5 above it, a
    folded tip curls back to 0.25.
    """
    points = [(0.5, 0.8)] * 21
    points[0] = WRIST
    points[9] = (0.5, mcp_y)
    for extended, (tip, pip, x) in zip(fingers, _FINGER_LAYOUT.values()):
        if tip == 8:
            x = index_x
        points[pip] = (x, 0.6)
        points[tip] = (x, 0.4) if extended else (x, 0.65)
    return points


class FakeClock:
    """Millisecond clock advanced by hand."""

    def __init__(self, now: float = 0.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: float) -> None:
        self.now += ms


@pytest.fixture
def make_hand():
    def _make(fingers, **kwargs) -> HandSnapshot:
        return HandSnapshot(landmarks=hand_landmarks(fingers, **kwargs))
    return _make


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(1234)
