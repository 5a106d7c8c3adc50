"""
ShapeLibrary — single entry point for turning a ShapeKind into target points.

Design decisions:
  - Fixed shapes are built once and shared; text shapes are built per
    request since they carry their string.
  - The random generator is injected; a per-call override keeps individual
    generations reproducible in tests.
  - The glyph rasterizer is injected and only text shapes use it.
"""
from __future__ import annotations
import logging
from typing import Dict, Optional

import numpy as np

from domain.enums import ShapeType
from domain.models import ShapeKind
from shapes.base import Shape
from shapes.disperse import DisperseShape
from shapes.flower import FlowerShape
from shapes.galaxy import GalaxyShape
from shapes.glyphs import GlyphRasterizer, HersheyRasterizer
from shapes.heart import HeartShape
from shapes.saturn import SaturnShape
from shapes.text import TextShape

logger = logging.getLogger(__name__)


class ShapeLibrary:
    """
    Usage
    -----
    library = ShapeLibrary(seed=7)
    points  = library.generate(ShapeKind(ShapeType.HEART), 15000)

    Parameters
    ----------
    rng : numpy.random.Generator | None
        Shared generator; when omitted one is created from `seed`.
    seed : int | None
        Seed for the default generator (None = system entropy).
    rasterizer : GlyphRasterizer | None
        Used by text shapes.
    """

    def __init__(
        self,
        rng: Optional[np.random.Generator] = None,
        seed: Optional[int] = None,
        rasterizer: Optional[GlyphRasterizer] = None,
    ) -> None:
        self._rng = rng if rng is not None else np.random.default_rng(seed)
        self._rasterizer = rasterizer or HersheyRasterizer()
        self._disperse = DisperseShape()
        self._shapes: Dict[ShapeType, Shape] = {
            ShapeType.GALAXY: GalaxyShape(),
            ShapeType.HEART:  HeartShape(),
            ShapeType.SATURN: SaturnShape(),
            ShapeType.FLOWER: FlowerShape(),
        }

    # ------------------------------------------------------------------
    def shape_for(self, kind: ShapeKind) -> Shape:
        if kind.type is ShapeType.TEXT:
            return TextShape(kind.text or "", self._rasterizer)
        return self._shapes[kind.type]

    def generate(
        self,
        kind: ShapeKind,
        count: int,
        rng: Optional[np.random.Generator] = None,
    ) -> Optional[np.ndarray]:
        """
        Target points for `kind`, or None when the shape has nothing to
        place (e.g. blank text).
        """
        shape = self.shape_for(kind)
        points = shape.generate(count, rng or self._rng)
        logger.debug("Generated %s for %d particles (%s)",
                     kind, count, "ok" if points is not None else "empty")
        return points

    def disperse(self, count: int, rng: Optional[np.random.Generator] = None) -> np.ndarray:
        return self._disperse.generate(count, rng or self._rng)
