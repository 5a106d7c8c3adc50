"""
MorphField — owns the particle buffers and the smoothed render scalars.

Every tick moves each value a fixed fraction of the remaining distance
toward its target (exponential smoothing), so the field never overshoots
and never lands exactly on the target.
"""
from __future__ import annotations
from typing import Sequence

import numpy as np

from domain.models import Color
from utils.constants import EXPANSION_RATE, MORPH_RATE, TINT_RATE


def _check_rate(name: str, value: float) -> float:
    if not 0.0 < value < 1.0:
        raise ValueError(f"{name} must be in (0, 1), got {value}")
    return value


class MorphField:
    """
    Parameters
    ----------
    count : int
        Number of particles (fixed for the life of the field).
    morph_rate, expansion_rate, tint_rate : float
        Per-tick smoothing fractions, each in (0, 1).
    tint : Color
        Initial (and target) RGB tint.
    """

    def __init__(
        self,
        count: int,
        morph_rate: float = MORPH_RATE,
        expansion_rate: float = EXPANSION_RATE,
        tint_rate: float = TINT_RATE,
        tint: Color = (0.0, 1.0, 1.0),
    ) -> None:
        if count <= 0:
            raise ValueError(f"Particle count must be positive, got {count}")
        self.count = count
        self._morph_rate     = _check_rate("morph_rate", morph_rate)
        self._expansion_rate = _check_rate("expansion_rate", expansion_rate)
        self._tint_rate      = _check_rate("tint_rate", tint_rate)

        self.current = np.zeros((count, 3))
        self.target  = np.zeros((count, 3))

        self._expansion = 1.0
        self._expansion_target = 1.0
        self._tint = np.array(tint, dtype=float)
        self._tint_target = self._tint.copy()

    # ------------------------------------------------------------------
    # Targets
    # ------------------------------------------------------------------
    def set_targets(self, points: np.ndarray) -> None:
        """Replace every target; current positions are left alone."""
        points = np.asarray(points, dtype=float)
        if points.shape != (self.count, 3):
            raise ValueError(
                f"Expected targets of shape {(self.count, 3)}, got {points.shape}"
            )
        self.target[...] = points

    def snap_to_targets(self) -> None:
        self.current[...] = self.target

    def set_expansion_target(self, value: float) -> None:
        self._expansion_target = float(value)

    def set_tint_target(self, color: Sequence[float]) -> None:
        self._tint_target = np.array(color, dtype=float)

    # ------------------------------------------------------------------
    def step(self) -> None:
        self.current += (self.target - self.current) * self._morph_rate
        self._expansion += (self._expansion_target - self._expansion) * self._expansion_rate
        self._tint += (self._tint_target - self._tint) * self._tint_rate

    # ------------------------------------------------------------------
    @property
    def positions(self) -> np.ndarray:
        view = self.current.view()
        view.flags.writeable = False
        return view

    @property
    def expansion(self) -> float:
        return self._expansion

    @property
    def expansion_target(self) -> float:
        return self._expansion_target

    @property
    def tint(self) -> Color:
        r, g, b = self._tint
        return (float(r), float(g), float(b))

    @property
    def tint_target(self) -> Color:
        r, g, b = self._tint_target
        return (float(r), float(g), float(b))

    def max_error(self) -> float:
        """Largest per-particle distance between current and target."""
        return float(np.linalg.norm(self.current - self.target, axis=1).max())
