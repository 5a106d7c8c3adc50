import cv2
import numpy as np

from core.camera import AcquisitionError
from core.landmark_task import LandmarkTask
from domain.models import HandSnapshot

SNAPSHOT = HandSnapshot([(0.5, 0.5)] * 21)


def test_delivers_each_result():
    delivered = []
    task = LandmarkTask(lambda: SNAPSHOT, delivered.append)
    assert task.run_once()
    assert delivered == [SNAPSHOT]
    assert task.completed == 1


def test_no_hand_is_delivered_as_none():
    delivered = []
    task = LandmarkTask(lambda: None, delivered.append)
    task.run_once()
    assert delivered == [None]


def test_failed_attempt_delivers_nothing():
    delivered = []

    def broken():
        raise AcquisitionError("Camera returned no frame")

    task = LandmarkTask(broken, delivered.append)
    assert not task.run_once()
    assert delivered == []
    assert task.failures == 1
    assert not task.in_flight


def test_failure_does_not_stop_later_attempts():
    results = iter([RuntimeError("timeout"), SNAPSHOT])
    delivered = []

    def flaky():
        item = next(results)
        if isinstance(item, Exception):
            raise item
        return item

    task = LandmarkTask(flaky, delivered.append)
    task.run_once()
    task.run_once()
    assert delivered == [SNAPSHOT]
    assert task.failures == 1
    assert task.completed == 1


def test_overlapping_attempt_is_skipped():
    delivered = []
    nested = []

    def reentrant():
        # a second tick arriving while this attempt is outstanding
        nested.append(task.run_once())
        return SNAPSHOT

    task = LandmarkTask(reentrant, delivered.append)
    assert task.run_once()
    assert nested == [False]
    assert task.skipped == 1
    assert delivered == [SNAPSHOT]


def test_guard_held_until_delivery_finishes():
    seen = []
    task = LandmarkTask(lambda: SNAPSHOT, lambda _: seen.append(task.in_flight))
    task.run_once()
    assert seen == [True]
    assert not task.in_flight


def test_opencv_error_counts_as_failure():
    delivered = []

    def empty_frame():
        cv2.cvtColor(np.empty((0, 0, 3), dtype=np.uint8), cv2.COLOR_BGR2RGB)
        return SNAPSHOT

    task = LandmarkTask(empty_frame, delivered.append)
    assert not task.run_once()
    assert delivered == []
    assert task.failures == 1
    assert not task.in_flight
