"""
Glyph rasterization for text shapes.

Contract shared by every rasterizer: text in, BGR uint8 bitmap of a fixed
logical size out, white glyphs on black. TextShape only looks at the red
channel, so any 2-D renderer producing such a bitmap can be swapped in.
"""
from __future__ import annotations
from typing import Callable

import cv2
import numpy as np

from utils.constants import (
    TEXT_BRIGHTNESS_THRESHOLD,
    TEXT_CANVAS_HEIGHT,
    TEXT_CANVAS_WIDTH,
    TEXT_SAMPLE_STRIDE,
)

GlyphRasterizer = Callable[[str], np.ndarray]

# Hershey fonts only cover printable ASCII and draw "?" for anything else.
_PRINTABLE = range(0x20, 0x7F)

_RED = 2    # channel index in BGR


class HersheyRasterizer:
    """
    Draws bold, centred text with OpenCV's Hershey fonts.

    The text starts at roughly 48 px cap height and is scaled down until it
    fits the canvas width minus `margin` on each side.
    """

    def __init__(
        self,
        width: int = TEXT_CANVAS_WIDTH,
        height: int = TEXT_CANVAS_HEIGHT,
        font: int = cv2.FONT_HERSHEY_DUPLEX,
        font_scale: float = 1.6,
        thickness: int = 3,
        margin: int = 6,
    ) -> None:
        self.width = width
        self.height = height
        self._font = font
        self._scale = font_scale
        self._thickness = thickness
        self._margin = margin

    def __call__(self, text: str) -> np.ndarray:
        canvas = np.zeros((self.height, self.width, 3), dtype=np.uint8)
        text = renderable(text)
        if not text.strip():
            return canvas

        scale = self._scale
        (tw, th), _ = cv2.getTextSize(text, self._font, scale, self._thickness)
        available = self.width - 2 * self._margin
        if tw > available:
            scale *= available / tw
            (tw, th), _ = cv2.getTextSize(text, self._font, scale, self._thickness)

        org = ((self.width - tw) // 2, (self.height + th) // 2)
        cv2.putText(canvas, text, org, self._font, scale,
                    (255, 255, 255), self._thickness, cv2.LINE_AA)
        return canvas


def renderable(text: str) -> str:
    """Drop the characters a Hershey font cannot draw."""
    return "".join(ch for ch in text if ord(ch) in _PRINTABLE)


def sample_candidates(
    bitmap: np.ndarray,
    stride: int = TEXT_SAMPLE_STRIDE,
    threshold: int = TEXT_BRIGHTNESS_THRESHOLD,
) -> np.ndarray:
    """
    Pixel coordinates (px, py) on a `stride` grid whose red channel is
    strictly brighter than `threshold`. Shape (k, 2), possibly k == 0.
    """
    red = bitmap[::stride, ::stride, _RED]
    rows, cols = np.nonzero(red > threshold)
    return np.column_stack((cols * stride, rows * stride))
