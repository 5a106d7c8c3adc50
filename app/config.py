from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from utils import constants as C


@dataclass
class AppConfig:
    """
    Central configuration injected into all components.
    Tuning defaults come from utils.constants.
    """
    # ---- particles -----------------------------------------------------
    particle_count: int = C.PARTICLE_COUNT
    initial_shape: str = "galaxy"
    initial_tint: str = C.DEFAULT_TINT
    seed: Optional[int] = None

    # ---- camera --------------------------------------------------------
    camera_device: int = 0
    camera_width: int = 640
    camera_height: int = 480

    # ---- landmark model -----------------------------------------------
    model_complexity: int = 1
    min_detection_confidence: float = 0.5
    min_tracking_confidence: float = 0.5

    # ---- scheduling (milliseconds) ------------------------------------
    tick_interval_ms: int = 16
    landmark_interval_ms: int = 50
    idle_timeout_ms: float = C.IDLE_TIMEOUT_MS

    # ---- smoothing -----------------------------------------------------
    morph_rate: float = C.MORPH_RATE
    expansion_rate: float = C.EXPANSION_RATE
    tint_rate: float = C.TINT_RATE

    # ---- gestures ------------------------------------------------------
    extension_tolerance: float = C.EXTENSION_TOLERANCE
    rotation_gain: float = C.ROTATION_GAIN
    auto_rotation: float = C.AUTO_ROTATION_SPEED

    # ---- logging -------------------------------------------------------
    log_level: str = "INFO"
    log_dir: Optional[Path] = None


# Default instance — import and use directly, or override in tests.
default_config = AppConfig()
