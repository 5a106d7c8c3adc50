"""
Camera — thin wrapper around OpenCV VideoCapture.
No ML, no gesture logic. Pacing is left to the scheduler.
"""
from __future__ import annotations
from typing import Optional

import cv2
import numpy as np


class AcquisitionError(RuntimeError):
    """A frame could not be read from an opened camera."""


class Camera:
    """
    Parameters
    ----------
    device : int
        Camera index (0 = default webcam).
    width, height : int | None
        Requested capture size; the driver may pick the closest it supports.
    """

    def __init__(self, device: int = 0, width: Optional[int] = 640, height: Optional[int] = 480) -> None:
        self._cap = cv2.VideoCapture(device)

        if not self._cap.isOpened():
            raise RuntimeError(f"Cannot open camera device {device}")

        if width:
            self._cap.set(cv2.CAP_PROP_FRAME_WIDTH, width)
        if height:
            self._cap.set(cv2.CAP_PROP_FRAME_HEIGHT, height)

    # ------------------------------------------------------------------
    def read(self) -> np.ndarray:
        """Return the next BGR frame. Raises AcquisitionError on failure."""
        ret, frame = self._cap.read()
        if not ret or frame is None:
            raise AcquisitionError("Camera returned no frame")
        return frame

    def release(self) -> None:
        self._cap.release()

    def __enter__(self) -> "Camera":
        return self

    def __exit__(self, *_) -> None:
        self.release()
