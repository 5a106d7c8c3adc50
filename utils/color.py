"""Hex colour parsing for tint input."""
from __future__ import annotations
from typing import Tuple

Color = Tuple[float, float, float]

_HEX_DIGITS = set("0123456789abcdefABCDEF")


def parse_hex(value: str) -> Color:
    """
    Parse "#rrggbb", "rrggbb" or "#rgb" into an RGB triple in [0, 1].
    Raises ValueError on anything else.
    """
    text = value.strip().lstrip("#")
    if len(text) == 3:
        text = "".join(c * 2 for c in text)
    if len(text) != 6 or not set(text) <= _HEX_DIGITS:
        raise ValueError(f"Invalid hex colour {value!r}")
    return tuple(int(text[i:i + 2], 16) / 255.0 for i in (0, 2, 4))  # type: ignore[return-value]


def to_hex(color: Color) -> str:
    channels = (round(max(0.0, min(1.0, c)) * 255) for c in color)
    return "#" + "".join(f"{c:02x}" for c in channels)
