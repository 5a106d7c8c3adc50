"""
FlowerShape — a four-lobed polar rose bent out of plane.
"""
from __future__ import annotations
import math

import numpy as np

from shapes.base import Shape

PETALS = 4
PETAL_LENGTH = 8.0
CORE_RADIUS = 1.0


class FlowerShape(Shape):
    NAME = "FLOWER"

    def generate(self, count: int, rng: np.random.Generator) -> np.ndarray:
        theta = rng.uniform(0.0, 2.0 * math.pi, count)
        r = np.abs(np.cos(PETALS * theta)) * PETAL_LENGTH + CORE_RADIUS
        half_phi = rng.uniform(-math.pi / 2, math.pi / 2, count) * 0.5

        return np.column_stack((
            r * np.cos(theta) * np.cos(half_phi),
            r * np.sin(theta) * np.cos(half_phi),
            r * np.sin(half_phi),
        ))
