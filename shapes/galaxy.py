"""
GalaxyShape — three spiral arms in the XY plane.

Particle i belongs to arm i % 3; the spin angle grows linearly with radius,
so each arm winds half a radian per unit of distance from the core.
"""
from __future__ import annotations
import math

import numpy as np

from shapes.base import Shape

ARMS = 3
MAX_RADIUS = 10.0
SPIN = 0.5
JITTER = 0.5        # half-width of the per-axis jitter
THICKNESS = 1.0     # half-height of the disc before jitter


class GalaxyShape(Shape):
    NAME = "GALAXY"

    def generate(self, count: int, rng: np.random.Generator) -> np.ndarray:
        arm = np.arange(count) % ARMS
        arm_angle = arm * (2.0 * math.pi / ARMS)

        r = rng.uniform(0.0, MAX_RADIUS, count)
        angle = r * SPIN + arm_angle

        x = np.cos(angle) * r
        y = np.sin(angle) * r
        z = rng.uniform(-THICKNESS, THICKNESS, count)

        points = np.column_stack((x, y, z))
        points += rng.uniform(-JITTER, JITTER, size=(count, 3))
        return points
