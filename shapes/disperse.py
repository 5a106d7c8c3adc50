"""
DisperseShape — uniform random scatter inside a cube centred at the origin.
"""
from __future__ import annotations

import numpy as np

from shapes.base import Shape
from utils.constants import DISPERSE_EXTENT


class DisperseShape(Shape):
    NAME = "DISPERSE"

    def __init__(self, extent: float = DISPERSE_EXTENT) -> None:
        self._half = extent / 2.0

    def generate(self, count: int, rng: np.random.Generator) -> np.ndarray:
        return rng.uniform(-self._half, self._half, size=(count, 3))
