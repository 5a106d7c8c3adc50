"""
Abstract base class for all shape generators.

Every shape must:
  - implement generate(count, rng) → (count, 3) float array, or None
  - declare its NAME class attribute

Generators hold no state between calls; all randomness comes from the
injected generator so results are reproducible under a fixed seed.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Optional

import numpy as np


class Shape(ABC):
    """Base class for all shape generators."""

    # Override in subclasses for logging / registration
    NAME: str = "UNNAMED_SHAPE"

    @abstractmethod
    def generate(self, count: int, rng: np.random.Generator) -> Optional[np.ndarray]:
        """
        Produce target positions for `count` particles.

        Parameters
        ----------
        count : int
            Number of particles; the i-th row is the i-th particle's target.
        rng : numpy.random.Generator
            Source of every random draw made by the generator.

        Returns
        -------
        np.ndarray | None
            Array of shape (count, 3), or None when the shape has nothing
            to place (the caller keeps its previous targets).
        """

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.NAME!r}>"
