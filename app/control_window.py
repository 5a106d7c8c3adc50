"""
ControlWindow — debug window with the camera feed and a HUD of what the
control layer currently decides (intent, gesture, shape, zoom, tint).

Keys 1–5 request the five shapes; the window only emits the request.
"""
from __future__ import annotations
from collections import deque

import cv2
import numpy as np
from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QColor, QImage, QPainter, QPixmap
from PyQt6.QtWidgets import (
    QFrame, QHBoxLayout, QLabel, QSizePolicy, QTextEdit, QVBoxLayout, QWidget,
)

from domain.enums import GestureLabel
from domain.models import GestureReading, RenderFrame
from utils.color import to_hex
from utils.geometry import normalise
from utils.constants import ZOOM_MAX, ZOOM_MIN

# ---- Colours per gesture (RGB) ----------------------------------------
_GESTURE_COLORS: dict[GestureLabel, tuple[int, int, int]] = {
    GestureLabel.V_SIGN:       (220, 200,  40),
    GestureLabel.POINTING:     (40,  200, 220),
    GestureLabel.FOUR_FINGERS: (220, 140,  40),
    GestureLabel.NONE:         (80,  220,  80),
    GestureLabel.HAND_ABSENT:  (80,   80,  80),
}
_DEFAULT_COLOR = (200, 200, 200)

SHAPE_KEYS = {
    Qt.Key.Key_1: "galaxy",
    Qt.Key.Key_2: "heart",
    Qt.Key.Key_3: "saturn",
    Qt.Key.Key_4: "flower",
    Qt.Key.Key_5: "love",
}


class ControlWindow(QWidget):
    """Camera preview + HUD + console log."""

    shape_requested = pyqtSignal(str)

    def __init__(self, parent=None) -> None:
        super().__init__(parent)
        self._gesture: GestureLabel = GestureLabel.HAND_ABSENT
        self._intent = ""
        self._recent: deque = deque(maxlen=6)
        self._setup_ui()

    # ------------------------------------------------------------------
    def _setup_ui(self) -> None:
        self.setWindowTitle("Particle Morph — control view")
        self.setMinimumSize(860, 520)
        self.setStyleSheet("""
            QWidget { background-color: #050505; color: #e0e0e0; }
            QLabel#intent_label {
                font-size: 22px; font-weight: bold;
                padding: 6px 12px; border-radius: 6px; background: #181924;
            }
            QTextEdit#log {
                background-color: #101010; color: #7ec8a0; font-size: 11px;
                border: 1px solid #333; border-radius: 4px;
            }
        """)

        root = QHBoxLayout(self)
        root.setContentsMargins(10, 10, 10, 10)
        root.setSpacing(10)

        # ---- LEFT: camera --------------------------------------------
        self._camera_label = QLabel("Camera inactive")
        self._camera_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._camera_label.setMinimumSize(620, 420)
        self._camera_label.setSizePolicy(
            QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding
        )
        root.addWidget(self._camera_label, stretch=3)

        # ---- RIGHT: HUD + log ----------------------------------------
        right = QVBoxLayout()
        right.setSpacing(8)

        self._intent_label = QLabel("Waiting for hand")
        self._intent_label.setObjectName("intent_label")
        self._intent_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        right.addWidget(self._intent_label)

        self._shape_label = QLabel("Shape: —")
        right.addWidget(self._shape_label)

        right.addWidget(QLabel("Zoom"))
        self._zoom_gauge = _ZoomGauge()
        right.addWidget(self._zoom_gauge)

        self._tint_label = QLabel("Tint")
        right.addWidget(self._tint_label)

        sep = QFrame()
        sep.setFrameShape(QFrame.Shape.HLine)
        right.addWidget(sep)

        right.addWidget(QLabel("Console log  (keys 1–5 select shapes)"))
        self._log = QTextEdit()
        self._log.setObjectName("log")
        self._log.setReadOnly(True)
        right.addWidget(self._log, stretch=1)

        root.addLayout(right, stretch=1)

    # ------------------------------------------------------------------
    # Slots connected to ParticleScheduler
    # ------------------------------------------------------------------
    def on_preview(self, frame: np.ndarray) -> None:
        frame_rgb = cv2.cvtColor(frame, cv2.COLOR_BGR2RGB)
        frame_rgb = np.ascontiguousarray(cv2.flip(frame_rgb, 1))
        self._draw_hud(frame_rgb)

        h, w, ch = frame_rgb.shape
        img = QImage(frame_rgb.data, w, h, ch * w, QImage.Format.Format_RGB888)
        pix = QPixmap.fromImage(img).scaled(
            self._camera_label.size(),
            Qt.AspectRatioMode.KeepAspectRatio,
            Qt.TransformationMode.SmoothTransformation,
        )
        self._camera_label.setPixmap(pix)

    def on_reading(self, reading: GestureReading) -> None:
        if reading.label is not self._gesture:
            self._recent.append(reading.label)
        self._gesture = reading.label

    def on_render(self, frame: RenderFrame) -> None:
        self._intent = frame.intent
        r, g, b = _GESTURE_COLORS.get(frame.gesture, _DEFAULT_COLOR)
        self._intent_label.setText(frame.intent)
        self._intent_label.setStyleSheet(
            "font-size:22px; font-weight:bold; padding:6px 12px; border-radius:6px;"
            f"background:#181924; color: rgb({r},{g},{b});"
        )
        state = "dispersed" if frame.dispersed else "assembled"
        self._shape_label.setText(f"Shape: {frame.shape_kind}  ({state})")
        hex_color = to_hex(frame.tint)
        self._zoom_gauge.update_from(frame.expansion, hex_color)
        self._tint_label.setText(f"Tint {hex_color.upper()}")
        self._tint_label.setStyleSheet(f"color: {hex_color};")

    def on_status(self, msg: str) -> None:
        if msg.startswith("[ERROR]"):
            self._log.append(f"<span style='color:#ff6b6b'>{msg}</span>")
        else:
            self._log.append(f"<span style='color:#888'>{msg}</span>")

    # ------------------------------------------------------------------
    def keyPressEvent(self, event) -> None:
        shape_id = SHAPE_KEYS.get(event.key())
        if shape_id is None:
            super().keyPressEvent(event)
            return
        self.on_status(f"Shape → {shape_id}")
        self.shape_requested.emit(shape_id)

    # ------------------------------------------------------------------
    def _draw_hud(self, frame: np.ndarray) -> None:
        r, g, b = _GESTURE_COLORS.get(self._gesture, _DEFAULT_COLOR)
        cv2.putText(frame, self._gesture.value,
                    (14, 44), cv2.FONT_HERSHEY_DUPLEX, 1.1, (r, g, b), 2)
        cv2.putText(frame, self._intent,
                    (14, 74), cv2.FONT_HERSHEY_SIMPLEX, 0.52, (160, 160, 160), 1)

        x_off = 14
        for label in self._recent:
            cr, cg, cb = _GESTURE_COLORS.get(label, _DEFAULT_COLOR)
            cv2.putText(frame, label.value[:4], (x_off, 100),
                        cv2.FONT_HERSHEY_SIMPLEX, 0.42, (cr, cg, cb), 1)
            x_off += 48


# ---- Helper widget: zoom gauge ------------------------------------------

class _ZoomGauge(QWidget):
    """
    Expansion over [ZOOM_MIN, ZOOM_MAX]. The fill runs from the resting
    scale (1.0) to the current one in the particles' tint, so zooming
    in grows it to the right and zooming out to the left.
    """

    def __init__(self, parent=None) -> None:
        super().__init__(parent)
        self._expansion = 1.0
        self._tint = QColor(0, 255, 255)
        self.setFixedHeight(14)

    def update_from(self, expansion: float, tint_hex: str) -> None:
        self._expansion = expansion
        self._tint = QColor(tint_hex)
        self.update()

    def _x(self, value: float) -> int:
        return int(self.width() * normalise(value, ZOOM_MIN, ZOOM_MAX))

    def paintEvent(self, _) -> None:
        p = QPainter(self)
        h = self.height()
        rest = self._x(1.0)
        now = self._x(self._expansion)

        p.fillRect(0, 0, self.width(), h, QColor(24, 25, 36))
        p.fillRect(min(rest, now), 2, abs(now - rest), h - 4, self._tint)
        p.setPen(QColor(200, 200, 200))
        p.drawLine(rest, 0, rest, h)
        p.end()
