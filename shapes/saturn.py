"""
SaturnShape — a tilted ring around a spherical shell.

Each particle independently lands on the ring with probability RING_SHARE,
otherwise on the sphere. The ring is built flat in the XZ plane and then
rotated about X by TILT.
"""
from __future__ import annotations
import math

import numpy as np

from shapes.base import Shape

RING_SHARE = 0.6
RING_INNER = 8.0
RING_OUTER = 12.0
RING_THICKNESS = 0.1    # half-height of the ring before tilt
TILT = math.pi / 6      # 30 degrees about X
PLANET_RADIUS = 5.0


def tilt_about_x(y: np.ndarray, z: np.ndarray, angle: float = TILT):
    """Rotate (y, z) about the X axis by `angle` radians."""
    c, s = math.cos(angle), math.sin(angle)
    return y * c - z * s, y * s + z * c


class SaturnShape(Shape):
    NAME = "SATURN"

    def generate(self, count: int, rng: np.random.Generator) -> np.ndarray:
        points = np.empty((count, 3))
        on_ring = rng.random(count) < RING_SHARE
        n_ring = int(on_ring.sum())
        n_sphere = count - n_ring

        # ---- ring ----------------------------------------------------
        angle = rng.uniform(0.0, 2.0 * math.pi, n_ring)
        radius = rng.uniform(RING_INNER, RING_OUTER, n_ring)
        y = rng.uniform(-RING_THICKNESS, RING_THICKNESS, n_ring)
        z = np.sin(angle) * radius
        ty, tz = tilt_about_x(y, z)
        points[on_ring] = np.column_stack((np.cos(angle) * radius, ty, tz))

        # ---- planet shell --------------------------------------------
        theta = rng.uniform(0.0, 2.0 * math.pi, n_sphere)
        phi = np.arccos(2.0 * rng.random(n_sphere) - 1.0)
        points[~on_ring] = PLANET_RADIUS * np.column_stack((
            np.sin(phi) * np.cos(theta),
            np.sin(phi) * np.sin(theta),
            np.cos(phi),
        ))
        return points
