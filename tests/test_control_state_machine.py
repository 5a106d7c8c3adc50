import numpy as np
import pytest

from core.control_state_machine import DISPERSING, INTENTS, WAITING, ControlStateMachine
from core.idle_timer import IdleTimer
from core.morph_field import MorphField
from core.shape_library import ShapeLibrary
from domain.enums import GestureLabel, ShapeType
from domain.models import GestureReading, ShapeKind

N = 200

ABSENT = GestureReading(GestureLabel.HAND_ABSENT)
NO_POSE = GestureReading(GestureLabel.NONE)
V_SIGN = GestureReading(GestureLabel.V_SIGN)


def pointing(delta):
    return GestureReading(GestureLabel.POINTING, pointing_delta=delta)


def four_fingers(zoom):
    return GestureReading(GestureLabel.FOUR_FINGERS, zoom=zoom)


@pytest.fixture
def field():
    return MorphField(N)


@pytest.fixture
def machine(field, clock):
    m = ControlStateMachine(ShapeLibrary(seed=5), field, IdleTimer(2500, clock=clock))
    m.disperse()
    return m


@pytest.fixture
def assembled(machine):
    """Heart assembled while a hand was in view at t=0."""
    machine.observe(NO_POSE)
    machine.select_shape(ShapeKind(ShapeType.HEART))
    return machine


def test_starts_dispersed_with_galaxy(machine):
    assert machine.state.dispersed
    assert machine.state.shape_kind == ShapeKind(ShapeType.GALAXY)


def test_v_sign_gathers_last_shape(machine, field):
    scattered = field.target.copy()
    machine.observe(V_SIGN)
    assert not machine.state.dispersed
    assert not np.array_equal(field.target, scattered)
    assert machine.state.intent == INTENTS[GestureLabel.V_SIGN]


def test_v_sign_is_one_shot_while_held(machine, field):
    machine.observe(V_SIGN)
    gathered = field.target.copy()
    machine.observe(V_SIGN)
    machine.observe(V_SIGN)
    assert np.array_equal(field.target, gathered)


def test_select_shape_assembles_regardless_of_gesture(machine, field):
    machine.observe(pointing(0.1))
    machine.select_shape(ShapeKind(ShapeType.FLOWER))
    assert not machine.state.dispersed
    assert machine.state.shape_kind == ShapeKind(ShapeType.FLOWER)
    assert np.linalg.norm(field.target, axis=1).max() <= 9.0 + 1e-9


def test_reselecting_rerandomises(machine, field):
    machine.select_shape(ShapeKind(ShapeType.HEART))
    first = field.target.copy()
    machine.select_shape(ShapeKind(ShapeType.HEART))
    assert not np.array_equal(first, field.target)


def test_pointing_sets_rotation_velocity(machine):
    machine.observe(pointing(None))
    assert machine.state.rotation_velocity == 0.0
    machine.observe(pointing(0.02))
    assert machine.state.rotation_velocity == pytest.approx(0.3)
    machine.observe(pointing(-0.01))
    assert machine.state.rotation_velocity == pytest.approx(-0.15)


def test_leaving_pointing_resets_velocity(machine):
    machine.observe(pointing(0.02))
    machine.observe(NO_POSE)
    assert machine.state.rotation_velocity == 0.0


def test_four_fingers_sets_expansion_target_only(assembled, field):
    targets = field.target.copy()
    assembled.observe(four_fingers(1.7))
    assert field.expansion_target == 1.7
    assert np.array_equal(field.target, targets)
    assert assembled.state.shape_kind == ShapeKind(ShapeType.HEART)


def test_no_pose_does_not_regress_targets(assembled, field):
    assembled.observe(four_fingers(2.0))
    targets = field.target.copy()
    assembled.observe(NO_POSE)
    assert field.expansion_target == 2.0
    assert np.array_equal(field.target, targets)
    assert assembled.state.intent == "Hand Detected"


def test_idle_dispersal_fires_at_timeout_exactly_once(assembled, field, clock):
    assembled.observe(ABSENT)
    clock.advance(2499)
    assert not assembled.tick()
    assert not assembled.state.dispersed

    clock.advance(1)
    assert assembled.tick()
    assert assembled.state.dispersed
    assert assembled.idle.triggered
    assert assembled.state.intent == DISPERSING
    scattered = field.target.copy()

    for _ in range(5):
        clock.advance(1000)
        assert not assembled.tick()
        assembled.observe(ABSENT)
    assert np.array_equal(field.target, scattered)


def test_hand_returning_cancels_pending_dispersal(assembled, clock):
    assembled.observe(ABSENT)
    clock.advance(2000)
    assembled.observe(NO_POSE)
    assembled.observe(ABSENT)
    clock.advance(2000)
    assert not assembled.tick()
    assert not assembled.state.dispersed
    assert not assembled.idle.triggered


def test_absent_frame_runs_idle_check(assembled, clock):
    assembled.observe(ABSENT)
    clock.advance(2500)
    assembled.observe(ABSENT)
    assert assembled.state.dispersed


def test_new_episode_can_disperse_again(assembled, clock):
    assembled.observe(ABSENT)
    clock.advance(2500)
    assert assembled.tick()

    assembled.observe(V_SIGN)
    assert not assembled.state.dispersed
    assert not assembled.idle.triggered

    assembled.observe(ABSENT)
    clock.advance(2500)
    assert assembled.tick()


def test_dispersed_state_is_not_redispersed(machine, field, clock):
    scattered = field.target.copy()
    clock.advance(10_000)
    assert not machine.tick()
    assert np.array_equal(field.target, scattered)


def test_never_seeing_a_hand_still_disperses_assembled_shape(field, clock):
    machine = ControlStateMachine(ShapeLibrary(seed=1), field, IdleTimer(2500, clock=clock))
    machine.select_shape(ShapeKind(ShapeType.SATURN))
    clock.advance(2500)
    assert machine.tick()


def test_blank_text_keeps_previous_targets(assembled, field):
    targets = field.target.copy()
    assembled.select_shape(ShapeKind.of_text(""))
    assert np.array_equal(field.target, targets)
    assert not assembled.state.dispersed


def test_absent_hand_zeroes_rotation(machine):
    machine.observe(pointing(0.05))
    machine.observe(ABSENT)
    assert machine.state.rotation_velocity == 0.0
    assert machine.state.gesture is GestureLabel.HAND_ABSENT


def test_losing_the_hand_shows_waiting_until_dispersal(assembled, clock):
    assembled.observe(pointing(0.05))
    assert assembled.state.intent == "Rotating"

    assembled.observe(ABSENT)
    assert assembled.state.intent == WAITING

    clock.advance(2500)
    assembled.observe(ABSENT)
    assert assembled.state.intent == DISPERSING
    assembled.observe(ABSENT)
    assert assembled.state.intent == DISPERSING
