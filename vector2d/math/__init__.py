"""Vector math for the wrap-around plane."""

from . import ops
from .dimensions import Dimensions
from .vec2 import Vector2D

__all__ = [
    "Dimensions",
    "Vector2D",
    "ops",
]
