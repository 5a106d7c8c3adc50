"""
ControlStateMachine — turns gesture readings and the passage of time into
shape, rotation and zoom commands.

States: Assembled(shape_kind) / Dispersed, tracked on a ControlState value
together with the current gesture and rotation velocity.

Transitions:
  - VSign while dispersed       → regenerate the last shape (gather).
  - Pointing                    → rotation velocity = delta × gain.
  - FourFingers                 → expansion target = zoom.
  - hand absent ≥ idle timeout  → disperse, once per absence episode.
  - select_shape()              → assemble the new shape immediately.

The machine never writes particle buffers itself; it hands generated
targets to the MorphField.
"""
from __future__ import annotations
import logging
from typing import Optional

from core.idle_timer import IdleTimer
from core.morph_field import MorphField
from core.shape_library import ShapeLibrary
from domain.enums import GestureLabel, ShapeType
from domain.models import ControlState, GestureReading, ShapeKind
from utils.constants import ROTATION_GAIN

logger = logging.getLogger(__name__)

INTENTS = {
    GestureLabel.V_SIGN:       "Gathering...",
    GestureLabel.POINTING:     "Rotating",
    GestureLabel.FOUR_FINGERS: "Zooming",
    GestureLabel.NONE:         "Hand Detected",
}
WAITING = "Waiting for hand"
DISPERSING = "Dispersing..."


class ControlStateMachine:
    """
    Parameters
    ----------
    library : ShapeLibrary
        Produces target points for shape changes and dispersal.
    field : MorphField
        Receives targets and the expansion target.
    idle : IdleTimer
        Absence tracking; its clock drives the idle transition.
    initial_shape : ShapeKind | None
        Shape gathered by the first VSign (default: galaxy).
    rotation_gain : float
        Pointing delta → rotation velocity multiplier.
    """

    def __init__(
        self,
        library: ShapeLibrary,
        field: MorphField,
        idle: IdleTimer,
        initial_shape: Optional[ShapeKind] = None,
        rotation_gain: float = ROTATION_GAIN,
    ) -> None:
        self._library = library
        self._field = field
        self._idle = idle
        self._rotation_gain = rotation_gain
        self._state = ControlState(
            shape_kind=initial_shape or ShapeKind(ShapeType.GALAXY),
            intent=WAITING,
        )

    # ------------------------------------------------------------------
    # Per-frame input
    # ------------------------------------------------------------------
    def observe(self, reading: GestureReading) -> None:
        """Apply one classified frame."""
        state = self._state
        previous = state.gesture
        state.gesture = reading.label

        if reading.label is not previous:
            logger.info("[GESTURE] %s → %s", previous.value, reading.label.value)

        if not reading.hand_present:
            self._idle.hand_lost()
            state.rotation_velocity = 0.0
            if not self._idle.triggered:
                state.intent = WAITING
            self.tick()
            return

        self._idle.hand_seen()
        state.intent = INTENTS[reading.label]

        if reading.label is GestureLabel.V_SIGN:
            if state.dispersed:
                self.gather()

        elif reading.label is GestureLabel.FOUR_FINGERS and reading.zoom is not None:
            self._field.set_expansion_target(reading.zoom)

        if reading.label is GestureLabel.POINTING:
            delta = reading.pointing_delta or 0.0
            state.rotation_velocity = delta * self._rotation_gain
        else:
            state.rotation_velocity = 0.0

    # ------------------------------------------------------------------
    # Per-tick input
    # ------------------------------------------------------------------
    def tick(self) -> bool:
        """
        Run the idle check. Returns True when this call dispersed the
        particles.
        """
        if self._state.dispersed or not self._idle.due():
            return False

        logger.info("[IDLE] No hand for %.0f ms, dispersing", self._idle.elapsed())
        self.disperse()
        self._idle.mark_triggered()
        self._state.intent = DISPERSING
        return True

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------
    def select_shape(self, kind: ShapeKind) -> None:
        """Explicit selection: always assembles, whatever the gesture."""
        logger.info("[SHAPE] %s → %s", self._state.shape_kind, kind)
        self._state.shape_kind = kind
        self._assemble()

    def gather(self) -> None:
        """Pull the particles back into the last selected shape."""
        logger.info("[SHAPE] Gathering into %s", self._state.shape_kind)
        self._assemble()

    def disperse(self) -> None:
        self._field.set_targets(self._library.disperse(self._field.count))
        self._state.dispersed = True

    def _assemble(self) -> None:
        points = self._library.generate(self._state.shape_kind, self._field.count)
        if points is not None:
            self._field.set_targets(points)
        self._state.dispersed = False

    # ------------------------------------------------------------------
    @property
    def state(self) -> ControlState:
        return self._state

    @property
    def idle(self) -> IdleTimer:
        return self._idle
