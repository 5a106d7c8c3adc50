from core.animator import Animator
from core.control_state_machine import ControlStateMachine
from core.gesture_classifier import GestureClassifier
from core.idle_timer import IdleTimer
from core.landmark_task import LandmarkTask
from core.morph_field import MorphField
from core.shape_library import ShapeLibrary

# Camera and HandTracker pull in OpenCV capture / MediaPipe; import them
# from their modules directly.

__all__ = [
    "Animator",
    "ControlStateMachine",
    "GestureClassifier",
    "IdleTimer",
    "LandmarkTask",
    "MorphField",
    "ShapeLibrary",
]
