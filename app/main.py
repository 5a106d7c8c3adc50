"""
main.py — Application entry point.

Single-threaded pipeline on the Qt event loop:

    Camera → HandTracker → LandmarkTask ─┐
                                         ├→ Animator → RenderFrame → renderer
    render QTimer ───────────────────────┘

The renderer itself lives outside this package; it connects to
ParticleScheduler.render_ready.
"""
from __future__ import annotations
import logging
import sys

from PyQt6.QtWidgets import QApplication

from app.config import AppConfig, default_config
from app.control_window import ControlWindow
from app.logging_config import configure_logging
from app.pipeline import build_animator
from app.scheduler import ParticleScheduler

logger = logging.getLogger(__name__)


def run(config: AppConfig = default_config) -> int:
    configure_logging(config.log_level, config.log_dir)
    logger.info("=" * 55)
    logger.info("  PARTICLE MORPH — gesture control")
    logger.info("  Particles : %d", config.particle_count)
    logger.info("  Shape     : %s", config.initial_shape)
    logger.info("  Idle      : %.0f ms", config.idle_timeout_ms)
    logger.info("=" * 55)

    qt_app    = QApplication(sys.argv)
    animator  = build_animator(config)
    scheduler = ParticleScheduler(config, animator)
    window    = ControlWindow()

    scheduler.preview_ready.connect(window.on_preview)
    scheduler.reading_ready.connect(window.on_reading)
    scheduler.render_ready.connect(window.on_render)
    scheduler.status_msg.connect(window.on_status)
    window.shape_requested.connect(animator.select_shape)
    qt_app.aboutToQuit.connect(scheduler.stop)

    animator.set_tint(config.initial_tint)
    window.show()
    scheduler.start()

    try:
        return qt_app.exec()
    finally:
        logger.info("Application closed cleanly")


if __name__ == "__main__":
    sys.exit(run())
