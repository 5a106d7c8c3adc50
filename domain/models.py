from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Tuple
import time

import numpy as np

from domain.enums import GestureLabel, ShapeType

# Type aliases
Landmark2D = Tuple[float, float]
LandmarkList = List[Landmark2D]
Color = Tuple[float, float, float]     # RGB, each channel in [0, 1]

LOVE_TEXT = "I Love You"
HAND_LANDMARKS = 21


@dataclass(frozen=True)
class ShapeKind:
    """
    A shape the particles can assemble into.
    `text` is only set for ShapeType.TEXT.
    """
    type: ShapeType
    text: Optional[str] = None

    @classmethod
    def of_text(cls, text: str) -> "ShapeKind":
        return cls(ShapeType.TEXT, text)

    @classmethod
    def from_id(cls, shape_id: str) -> "ShapeKind":
        """
        Map a selection identifier (galaxy, heart, saturn, flower, love)
        to a ShapeKind. Raises ValueError for anything else.
        """
        key = shape_id.strip().lower()
        if key == "love":
            return cls.of_text(LOVE_TEXT)
        try:
            shape_type = ShapeType(key)
        except ValueError:
            raise ValueError(f"Unknown shape identifier {shape_id!r}") from None
        if shape_type is ShapeType.TEXT:
            raise ValueError("Text shapes are selected with ShapeKind.of_text()")
        return cls(shape_type)

    def __str__(self) -> str:
        if self.type is ShapeType.TEXT:
            return f"text({self.text!r})"
        return self.type.value


@dataclass
class HandSnapshot:
    """
    One frame of hand landmarks, normalised to [0, 1] relative to the
    camera frame. Only the first detected hand is ever captured.
    """
    landmarks: LandmarkList
    timestamp: float = field(default_factory=time.time)


@dataclass(frozen=True)
class GestureReading:
    """Classifier output for a single frame."""
    label: GestureLabel
    pointing_delta: Optional[float] = None
    zoom: Optional[float] = None
    fingers: Tuple[bool, bool, bool, bool] = (False, False, False, False)

    @property
    def hand_present(self) -> bool:
        return self.label is not GestureLabel.HAND_ABSENT


@dataclass
class ControlState:
    """
    Everything the control layer decides, in one value.
    Owned by ControlStateMachine; the renderer reads it through RenderFrame.
    """
    shape_kind: ShapeKind = field(default_factory=lambda: ShapeKind(ShapeType.GALAXY))
    dispersed: bool = True
    gesture: GestureLabel = GestureLabel.HAND_ABSENT
    rotation_velocity: float = 0.0
    intent: str = ""


@dataclass(frozen=True)
class RenderFrame:
    """
    Values handed to the renderer once per tick.

    positions is a read-only view of the live particle buffer; copy it
    if it has to outlive the tick.
    """
    positions: np.ndarray
    expansion: float
    tint: Color
    rotation_delta: float
    auto_rotate: bool
    gesture: GestureLabel
    intent: str
    shape_kind: ShapeKind
    dispersed: bool
