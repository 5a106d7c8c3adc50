"""
Animator — the per-tick driver between the control layer and the renderer.

    snapshot → GestureClassifier → ControlStateMachine   (on_snapshot)
    idle check → MorphField.step → RenderFrame           (tick)

Both entry points run on the same cooperative timeline, so a delivered
snapshot is fully applied before the next tick reads state.
"""
from __future__ import annotations
import logging
from typing import Optional

from core.control_state_machine import ControlStateMachine
from core.gesture_classifier import GestureClassifier
from core.morph_field import MorphField
from domain.enums import GestureLabel
from domain.models import GestureReading, HandSnapshot, RenderFrame, ShapeKind
from utils.color import parse_hex
from utils.constants import AUTO_ROTATION_SPEED

logger = logging.getLogger(__name__)


class Animator:
    """
    Parameters
    ----------
    field : MorphField
    classifier : GestureClassifier
    machine : ControlStateMachine
    auto_rotation : float
        Rotation per tick suggested to the renderer when not pointing.

    On construction the particles are dispersed and placed directly on
    their scatter targets, so the first frame does not morph.
    """

    def __init__(
        self,
        field: MorphField,
        classifier: GestureClassifier,
        machine: ControlStateMachine,
        auto_rotation: float = AUTO_ROTATION_SPEED,
    ) -> None:
        self._field = field
        self._classifier = classifier
        self._machine = machine
        self._auto_rotation = auto_rotation
        self.ticks = 0

        self._machine.disperse()
        self._field.snap_to_targets()

    # ------------------------------------------------------------------
    def on_snapshot(self, snapshot: Optional[HandSnapshot]) -> GestureReading:
        """Classify one frame (None = no hand) and apply it."""
        reading = self._classifier.classify(snapshot)
        self._machine.observe(reading)
        return reading

    def tick(self) -> RenderFrame:
        self._machine.tick()
        self._field.step()
        self.ticks += 1
        return self.frame()

    def frame(self) -> RenderFrame:
        state = self._machine.state
        pointing = state.gesture is GestureLabel.POINTING
        return RenderFrame(
            positions=self._field.positions,
            expansion=self._field.expansion,
            tint=self._field.tint,
            rotation_delta=state.rotation_velocity if pointing else self._auto_rotation,
            auto_rotate=not pointing,
            gesture=state.gesture,
            intent=state.intent,
            shape_kind=state.shape_kind,
            dispersed=state.dispersed,
        )

    # ------------------------------------------------------------------
    # Commands from the outer UI layer
    # ------------------------------------------------------------------
    def select_shape(self, shape_id: str) -> ShapeKind:
        """Select by identifier (galaxy, heart, saturn, flower, love)."""
        kind = ShapeKind.from_id(shape_id)
        self._machine.select_shape(kind)
        return kind

    def set_tint(self, hex_color: str) -> None:
        color = parse_hex(hex_color)
        self._field.set_tint_target(color)
        logger.info("[TINT] %s", hex_color)

    @property
    def machine(self) -> ControlStateMachine:
        return self._machine

    @property
    def field(self) -> MorphField:
        return self._field
