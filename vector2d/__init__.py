"""2D vector and point arithmetic with wrap-around plane helpers."""

from .math import Dimensions, Vector2D, ops

__all__ = [
    "Dimensions",
    "Vector2D",
    "ops",
]
