"""
ParticleScheduler — drives the Animator from the Qt event loop.

Two QTimers share the GUI thread:
  • render timer   → Animator.tick() every tick_interval_ms
  • landmark timer → LandmarkTask.run_once() every landmark_interval_ms

Everything runs on one thread, so no locks are needed. If the camera or the
landmark model cannot be started, only the render timer runs and the hand
stays absent (idle dispersal keeps working).
"""
from __future__ import annotations
import logging
from typing import Optional

import numpy as np
from PyQt6.QtCore import QObject, QTimer, pyqtSignal

from app.config import AppConfig
from core.animator import Animator
from core.camera import Camera
from core.hand_tracker import HandTracker
from core.landmark_task import LandmarkTask
from domain.models import HandSnapshot

logger = logging.getLogger(__name__)

TRACKING_START_DELAY_MS = 500


class ParticleScheduler(QObject):
    """
    Signals emitted:
        render_ready  — RenderFrame, once per tick (for the renderer)
        preview_ready — BGR camera frame with landmarks drawn
        reading_ready — GestureReading for each delivered snapshot
        status_msg    — log line for the UI
    """

    render_ready  = pyqtSignal(object)
    preview_ready = pyqtSignal(np.ndarray)
    reading_ready = pyqtSignal(object)
    status_msg    = pyqtSignal(str)

    def __init__(self, config: AppConfig, animator: Animator, parent=None) -> None:
        super().__init__(parent)
        self._config   = config
        self._animator = animator

        self._camera:  Optional[Camera]      = None
        self._tracker: Optional[HandTracker] = None
        self._task = LandmarkTask(self._acquire, self._deliver)

        self._tick_timer = QTimer(self)
        self._tick_timer.setInterval(config.tick_interval_ms)
        self._tick_timer.timeout.connect(self._on_tick)

        self._landmark_timer = QTimer(self)
        self._landmark_timer.setInterval(config.landmark_interval_ms)
        self._landmark_timer.timeout.connect(self._task.run_once)

    # ------------------------------------------------------------------
    def start(self) -> None:
        self._tick_timer.start()
        self.status_msg.emit("Render loop started")
        QTimer.singleShot(TRACKING_START_DELAY_MS, self._start_tracking)

    def stop(self) -> None:
        self._landmark_timer.stop()
        self._tick_timer.stop()
        self._cleanup()
        self.status_msg.emit("Pipeline stopped")

    @property
    def tracking(self) -> bool:
        return self._landmark_timer.isActive()

    # ------------------------------------------------------------------
    def _start_tracking(self) -> None:
        cfg = self._config
        self.status_msg.emit("Loading model...")
        try:
            self._tracker = HandTracker(
                model_complexity=cfg.model_complexity,
                min_detection_confidence=cfg.min_detection_confidence,
                min_tracking_confidence=cfg.min_tracking_confidence,
            )
        except Exception as exc:
            logger.error("Landmark model init failed: %s", exc)
            self.status_msg.emit(f"[ERROR] Model error: {exc}")
            return

        try:
            self._camera = Camera(cfg.camera_device, cfg.camera_width, cfg.camera_height)
        except RuntimeError as exc:
            logger.error("Camera unavailable: %s", exc)
            self.status_msg.emit(f"[ERROR] Camera denied: {exc}")
            return

        self._landmark_timer.start()
        self.status_msg.emit("Camera active")

    def _acquire(self) -> Optional[HandSnapshot]:
        frame = self._camera.read()
        snapshot = self._tracker.process(frame)
        self.preview_ready.emit(frame)
        return snapshot

    def _deliver(self, snapshot: Optional[HandSnapshot]) -> None:
        reading = self._animator.on_snapshot(snapshot)
        self.reading_ready.emit(reading)

    def _on_tick(self) -> None:
        self.render_ready.emit(self._animator.tick())

    def _cleanup(self) -> None:
        if self._camera:
            self._camera.release()
            self._camera = None
        if self._tracker:
            self._tracker.release()
            self._tracker = None
