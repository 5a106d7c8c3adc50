"""
Pure geometric utility functions.
No imports from the rest of the project — safe to use anywhere.
"""
from __future__ import annotations
import math
from typing import Optional, Sequence, Tuple

Point2D = Tuple[float, float]


def dist(a: Point2D, b: Point2D) -> float:
    """Euclidean distance between two 2D points."""
    return math.hypot(a[0] - b[0], a[1] - b[1])


def clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def clamp_point(p: Sequence[float], lo: float = 0.0, hi: float = 1.0) -> Optional[Point2D]:
    """
    Clamp both coordinates of a normalised point into [lo, hi].
    Returns None when the point is malformed or either coordinate is NaN
    or infinite.
    """
    try:
        x, y = float(p[0]), float(p[1])
    except (TypeError, ValueError, IndexError):
        return None
    if not (math.isfinite(x) and math.isfinite(y)):
        return None
    return (clamp(x, lo, hi), clamp(y, lo, hi))


def normalise(value: float, lo: float, hi: float) -> float:
    """Position of `value` within [lo, hi] as a fraction, clamped to [0, 1]."""
    return clamp((value - lo) / (hi - lo), 0.0, 1.0)
