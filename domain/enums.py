from enum import Enum


class GestureLabel(str, Enum):
    """Possible per-frame classifications of the tracked hand."""
    NONE          = "None"
    V_SIGN        = "VSign"
    POINTING      = "Pointing"
    FOUR_FINGERS  = "FourFingers"
    HAND_ABSENT   = "HandAbsent"


class ShapeType(str, Enum):
    """Families of target point clouds the particles can assemble into."""
    GALAXY  = "galaxy"
    HEART   = "heart"
    SATURN  = "saturn"
    FLOWER  = "flower"
    TEXT    = "text"
