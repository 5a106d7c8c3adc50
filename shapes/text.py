"""
TextShape — particles sampled from the lit pixels of a rasterized string.
"""
from __future__ import annotations
import logging
from typing import Optional

import numpy as np

from shapes.base import Shape
from shapes.glyphs import GlyphRasterizer, HersheyRasterizer, sample_candidates
from utils.constants import TEXT_WORLD_HEIGHT, TEXT_WORLD_WIDTH

logger = logging.getLogger(__name__)

DEPTH = 1.0     # half-depth of the Z jitter


class TextShape(Shape):
    """
    Parameters
    ----------
    text : str
        String to spell out.
    rasterizer : GlyphRasterizer | None
        Text → BGR bitmap. Defaults to a HersheyRasterizer.
    """

    NAME = "TEXT"

    def __init__(self, text: str, rasterizer: Optional[GlyphRasterizer] = None) -> None:
        self.text = text
        self._rasterizer = rasterizer or HersheyRasterizer()

    def generate(self, count: int, rng: np.random.Generator) -> Optional[np.ndarray]:
        bitmap = self._rasterizer(self.text)
        height, width = bitmap.shape[:2]
        candidates = sample_candidates(bitmap)

        if len(candidates) == 0:
            logger.debug("No lit pixels for %r, keeping previous targets", self.text)
            return None

        picks = candidates[rng.integers(0, len(candidates), count)]
        x = (picks[:, 0] / width - 0.5) * TEXT_WORLD_WIDTH
        y = -(picks[:, 1] / height - 0.5) * TEXT_WORLD_HEIGHT
        z = rng.uniform(-DEPTH, DEPTH, count)
        return np.column_stack((x, y, z))

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} text={self.text!r}>"
