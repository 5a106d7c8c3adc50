"""
Wires the core components together from an AppConfig:

    ShapeLibrary ─┐
    MorphField ───┼─→ ControlStateMachine ─→ Animator
    IdleTimer ────┘          ↑
                     GestureClassifier
"""
from __future__ import annotations
from typing import Optional

from app.config import AppConfig, default_config
from core.animator import Animator
from core.control_state_machine import ControlStateMachine
from core.gesture_classifier import GestureClassifier
from core.idle_timer import Clock, IdleTimer
from core.morph_field import MorphField
from core.shape_library import ShapeLibrary
from domain.models import ShapeKind
from utils.color import parse_hex


def build_animator(config: AppConfig = default_config, clock: Optional[Clock] = None) -> Animator:
    tint = parse_hex(config.initial_tint)
    field = MorphField(
        config.particle_count,
        morph_rate=config.morph_rate,
        expansion_rate=config.expansion_rate,
        tint_rate=config.tint_rate,
        tint=tint,
    )
    machine = ControlStateMachine(
        ShapeLibrary(seed=config.seed),
        field,
        IdleTimer(config.idle_timeout_ms, clock=clock),
        initial_shape=ShapeKind.from_id(config.initial_shape),
        rotation_gain=config.rotation_gain,
    )
    return Animator(
        field,
        GestureClassifier(config.extension_tolerance),
        machine,
        auto_rotation=config.auto_rotation,
    )
