"""
Utilities shared by the shape generators and the gesture pipeline
"""

from .constants import *
from .color import parse_hex, to_hex
from .geometry import clamp, clamp_point, dist, normalise

__all__ = [
    'dist',
    'clamp',
    'clamp_point',
    'normalise',
    'parse_hex',
    'to_hex',
    'PARTICLE_COUNT',
    'MORPH_RATE',
    'EXPANSION_RATE',
    'TINT_RATE',
    'IDLE_TIMEOUT_MS',
    'ROTATION_GAIN',
]
