"""
HeartShape — the classic parametric heart outline, thickened along Z only.
"""
from __future__ import annotations
import math
from typing import Tuple

import numpy as np

from shapes.base import Shape

SCALE = 0.5
DEPTH = 2.0     # half-depth of the Z jitter


def heart_curve(t: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """Unscaled heart outline at parameter(s) t (radians)."""
    t = np.asarray(t, dtype=float)
    x = 16.0 * np.sin(t) ** 3
    y = 13.0 * np.cos(t) - 5.0 * np.cos(2 * t) - 2.0 * np.cos(3 * t) - np.cos(4 * t)
    return x, y


class HeartShape(Shape):
    NAME = "HEART"

    def generate(self, count: int, rng: np.random.Generator) -> np.ndarray:
        t = rng.uniform(0.0, 2.0 * math.pi, count)
        x, y = heart_curve(t)
        z = rng.uniform(-DEPTH, DEPTH, count)
        return np.column_stack((x * SCALE, y * SCALE, z))
