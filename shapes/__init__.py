"""
Target point-cloud generators, one module per shape
"""

from .base import Shape
from .disperse import DisperseShape
from .galaxy import GalaxyShape
from .heart import HeartShape
from .saturn import SaturnShape
from .flower import FlowerShape
from .text import TextShape

__all__ = [
    'Shape',
    'DisperseShape',
    'GalaxyShape',
    'HeartShape',
    'SaturnShape',
    'FlowerShape',
    'TextShape',
]
